"""Media hosting boundary (Cloudinary)."""

from micourses.boundary.media.cloudinary_client import (
    CloudinaryMediaClient,
    MediaAsset,
    MediaDeletionReport,
)

__all__ = ["CloudinaryMediaClient", "MediaAsset", "MediaDeletionReport"]
