"""
Course validation utilities.

Business logic validation not covered by Pydantic models.
These validators check domain-specific rules.

Dependencies: micourses.models.course, micourses.core
System role: Course business logic validation
"""

from micourses.core.exceptions import ValidationError
from micourses.models.course import CreateCourseRequest, MediaAssetSchema, UpdateCourseRequest


def _validate_asset(asset: MediaAssetSchema, field: str) -> None:
    if not asset.url.strip() or not asset.public_id.strip():
        raise ValidationError(f"{field} needs both url and publicId", field=field)


def validate_course_creation(request: CreateCourseRequest) -> None:
    """
    Validate course creation request with business rules.

    Args:
        request: CreateCourseRequest with catalog fields and hosted assets

    Raises:
        ValidationError: If a hosted asset reference is incomplete
    """
    _validate_asset(request.cover_image, "coverImage")
    for video in request.videos:
        _validate_asset(video, "videos")


def validate_course_update(request: UpdateCourseRequest) -> None:
    """
    Validate course update request with business rules.

    Raises:
        ValidationError: If nothing is being updated or an asset is incomplete
    """
    # At least one field should be provided for update
    if not request.model_dump(exclude_none=True):
        raise ValidationError("At least one field must be provided for update")

    if request.cover_image is not None:
        _validate_asset(request.cover_image, "coverImage")
    for video in request.videos or []:
        _validate_asset(video, "videos")
