"""
User domain schemas.

Request/response schemas for learner registration, login, profile and
the follower graph.

Dependencies: pydantic
System role: User API contracts
"""

import uuid
from datetime import date, datetime

from pydantic import Field

from micourses.models.common import CamelModel


class RegisterUserRequest(CamelModel):
    """First registration step: credentials plus optional names."""

    email: str
    password: str
    first_name: str | None = None
    second_name: str | None = None


class RegisterUserResponse(CamelModel):
    message: str
    id: uuid.UUID


class UpdateUserRequest(CamelModel):
    """Second registration step and later profile edits."""

    id: str
    first_name: str | None = None
    second_name: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None
    contact: str | None = None
    profile_picture: str | None = None


class UserLoginRequest(CamelModel):
    email: str
    password: str


class CourseRef(CamelModel):
    """Owned reference from a user to a course."""

    course_id: uuid.UUID
    added_at: datetime


class UserProfile(CamelModel):
    """Redacted user profile."""

    id: uuid.UUID
    email: str
    first_name: str | None = None
    second_name: str | None = None
    contact: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None
    profile_picture: str | None = None
    verified: bool
    enrolled_courses: list[CourseRef] = Field(default_factory=list)
    saved_courses: list[CourseRef] = Field(default_factory=list)
    finished_courses: list[CourseRef] = Field(default_factory=list)
    followers: list[uuid.UUID] = Field(default_factory=list)
    joined_at: datetime


class UserAuthResponse(CamelModel):
    message: str
    data: UserProfile
    token: str
    id: uuid.UUID


class UserProfileResponse(CamelModel):
    message: str
    data: UserProfile


class UserEnvelope(CamelModel):
    user: UserProfile


class FollowRequest(CamelModel):
    current_user_id: str
    selected_user_id: str


class UnfollowRequest(CamelModel):
    logged_in_user_id: str
    target_user_id: str
