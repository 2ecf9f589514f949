"""
Course response mapping utilities.

Transforms service dictionaries into Pydantic response models.
Centralizes response construction logic.

Dependencies: micourses.models
System role: Course response transformation
"""

from typing import Any

from micourses.boundary.media.cloudinary_client import MediaDeletionReport
from micourses.models.common import MediaReport
from micourses.models.course import CourseResponse, ReviewResponse
from micourses.models.user import UserProfile


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary containing course fields
            Expected keys: id, course_name, sector, duration, description,
            cover_image, videos, admin_id, likes, reviews, created_at, updated_at

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_courses_to_response(courses_data: list[dict[str, Any]]) -> list[CourseResponse]:
    return [map_course_to_response(course) for course in courses_data]


def map_review_to_response(review_data: dict[str, Any]) -> ReviewResponse:
    return ReviewResponse(**review_data)


def map_user_to_response(user_data: dict[str, Any]) -> UserProfile:
    return UserProfile(**user_data)


def map_media_report(report: MediaDeletionReport) -> MediaReport:
    """Per-asset deletion outcome as returned to clients."""
    return MediaReport(**report.to_dict())
