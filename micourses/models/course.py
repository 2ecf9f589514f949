"""
Course domain models and schemas.

Request/response schemas for the catalog, the course-user relationship
and reviews.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from micourses.models.common import CamelModel, MediaReport
from micourses.models.user import UserProfile


class MediaAssetSchema(CamelModel):
    """Hosted asset reference (URL plus provider public id)."""

    url: str
    public_id: str


class CreateCourseRequest(CamelModel):
    """Request schema for creating a new course."""

    course_name: str = Field(..., max_length=255)
    sector: str = Field(..., max_length=100)
    duration: str = Field(..., max_length=100)
    description: str
    cover_image: MediaAssetSchema
    videos: list[MediaAssetSchema] = Field(default_factory=list)
    admin_id: str


class UpdateCourseRequest(CamelModel):
    """Partial course update; omitted fields stay unchanged."""

    course_name: str | None = Field(None, max_length=255)
    sector: str | None = Field(None, max_length=100)
    duration: str | None = Field(None, max_length=100)
    description: str | None = None
    cover_image: MediaAssetSchema | None = None
    videos: list[MediaAssetSchema] | None = None


class ReviewResponse(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    content: str
    created_at: datetime
    likes: list[uuid.UUID] = Field(default_factory=list)
    unlikes: list[uuid.UUID] = Field(default_factory=list)


class CourseResponse(CamelModel):
    """Response schema for course operations."""

    id: uuid.UUID
    course_name: str
    sector: str
    duration: str
    description: str
    cover_image: MediaAssetSchema
    videos: list[MediaAssetSchema]
    admin_id: uuid.UUID
    likes: list[uuid.UUID]
    reviews: list[ReviewResponse]
    created_at: datetime
    updated_at: datetime


class CourseEnvelope(CamelModel):
    message: str
    data: CourseResponse


class CourseUpdateResponse(CamelModel):
    message: str
    data: CourseResponse
    media: MediaReport


class DeleteCourseResponse(CamelModel):
    message: str
    media: MediaReport


class CourseUserRequest(CamelModel):
    """Course-user relationship mutation (save, unsave, enroll, finish)."""

    user_id: str
    course_id: str


class CourseUserResponse(CamelModel):
    message: str
    data: UserProfile


class CreateReviewRequest(CamelModel):
    user_id: str
    content: str


class DeleteReviewRequest(CamelModel):
    user_id: str


class ReviewEnvelope(CamelModel):
    message: str
    data: ReviewResponse
