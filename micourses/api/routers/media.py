"""
Media upload API endpoints.

Routes: GET /cloudinary-signature/{preset}

Dependencies: micourses.boundary.media, micourses.models
System role: Signed direct-upload credentials
"""

import logging

from fastapi import APIRouter, Depends

from micourses.api.deps.dependencies import get_media_client
from micourses.api.routers.router_utils import handle_api_errors
from micourses.boundary.media.cloudinary_client import CloudinaryMediaClient
from micourses.core import validation
from micourses.models.media import UploadSignatureResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["media"])


@router.get("/cloudinary-signature/{preset}", response_model=UploadSignatureResponse)
@handle_api_errors
async def get_upload_signature(
    preset: str,
    media_client: CloudinaryMediaClient = Depends(get_media_client),
) -> UploadSignatureResponse:
    """
    Sign a direct browser upload for an upload preset.

    Args:
        preset: Cloudinary upload preset name
        media_client: Injected Cloudinary client

    Returns:
        UploadSignatureResponse: timestamp, signature, apiKey, cloudName, preset
    """
    preset = validation.validate_required(preset, "preset")
    logger.info("Signing upload", extra={"preset": preset})
    return UploadSignatureResponse(**media_client.sign_upload(preset))
