"""
Cloudinary client for hosted course media.

Issues signed upload credentials for direct browser uploads and destroys
hosted assets. Never uploads or transforms media itself.

Dependencies: cloudinary
System role: Media hosting provider integration
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field

import cloudinary
import cloudinary.uploader
import cloudinary.utils

from micourses.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

# Destroy results that leave the asset gone
_GONE_RESULTS = frozenset({"ok", "not found"})


@dataclass(frozen=True)
class MediaAsset:
    """Reference to a hosted asset."""

    public_id: str
    resource_type: str = "image"


@dataclass
class MediaDeletionReport:
    """Outcome of a batch of asset deletions."""

    deleted: list[str] = field(default_factory=list)
    failed: list[dict[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {"deleted": list(self.deleted), "failed": list(self.failed)}


class CloudinaryMediaClient:
    """Cloudinary operations used by the course lifecycle."""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str) -> None:
        """
        Configure the Cloudinary SDK.

        Args:
            cloud_name: Cloudinary cloud name
            api_key: API key, returned to clients alongside signatures
            api_secret: API secret used to sign upload parameters
        """
        self._cloud_name = cloud_name
        self._api_key = api_key
        self._api_secret = api_secret
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )

    def sign_upload(self, preset: str) -> dict:
        """
        Sign a timestamped upload for the given upload preset.

        Args:
            preset: Cloudinary upload preset name

        Returns:
            dict: timestamp, signature, api_key, cloud_name, preset
        """
        timestamp = int(time.time())
        signature = cloudinary.utils.api_sign_request(
            {"timestamp": timestamp, "upload_preset": preset},
            self._api_secret,
        )
        return {
            "timestamp": timestamp,
            "signature": signature,
            "api_key": self._api_key,
            "cloud_name": self._cloud_name,
            "preset": preset,
        }

    async def destroy(self, asset: MediaAsset) -> None:
        """
        Destroy one hosted asset.

        Raises:
            UpstreamError: If Cloudinary rejects the call or reports a failure
        """
        try:
            result = await asyncio.to_thread(
                cloudinary.uploader.destroy,
                asset.public_id,
                resource_type=asset.resource_type,
                invalidate=True,
            )
        except Exception as e:
            raise UpstreamError(
                f"Failed to delete media asset {asset.public_id}",
                service="media",
                details={"error": str(e)},
            ) from e

        outcome = (result or {}).get("result")
        if outcome not in _GONE_RESULTS:
            raise UpstreamError(
                f"Failed to delete media asset {asset.public_id}",
                service="media",
                details={"result": str(outcome)},
            )

    async def destroy_many(self, assets: list[MediaAsset]) -> MediaDeletionReport:
        """
        Destroy assets concurrently and collect per-asset outcomes.

        There is no ordering between deletions and no rollback: assets that
        were destroyed stay destroyed when others fail.

        Args:
            assets: Assets to destroy; blank public ids are skipped

        Returns:
            MediaDeletionReport: Deleted ids and failures with reasons
        """
        targets = [a for a in assets if a.public_id]
        report = MediaDeletionReport()
        if not targets:
            return report

        results = await asyncio.gather(
            *(self.destroy(asset) for asset in targets),
            return_exceptions=True,
        )
        for asset, outcome in zip(targets, results):
            if isinstance(outcome, BaseException):
                logger.warning(
                    "Media asset deletion failed",
                    extra={"public_id": asset.public_id, "error": str(outcome)},
                )
                report.failed.append({"publicId": asset.public_id, "error": str(outcome)})
            else:
                report.deleted.append(asset.public_id)

        logger.info(
            "Media batch deletion finished",
            extra={"deleted": len(report.deleted), "failed": len(report.failed)},
        )
        return report
