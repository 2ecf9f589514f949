"""
Admin domain schemas.

Request/response schemas for admin registration, login, profile and
account management. Profiles never carry password hashes, tokens or codes.

Dependencies: pydantic
System role: Admin API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from micourses.models.common import CamelModel, MediaReport


class RegisterAdminRequest(CamelModel):
    """Request schema for admin registration."""

    names: str
    contact: str
    email: str
    password: str


class AdminLoginRequest(CamelModel):
    """Email or contact number plus password."""

    identifier: str
    password: str


class AdminProfile(CamelModel):
    """Redacted admin profile."""

    id: uuid.UUID
    names: str
    email: str
    contact: str
    profile_picture: str | None = None
    verified: bool
    recovery_email: str | None = None
    recovery_email_verified: bool = False
    joined_at: datetime


class AdminAuthResponse(CamelModel):
    """Registration and login response."""

    message: str
    data: AdminProfile
    token: str
    id: uuid.UUID


class AdminProfileResponse(CamelModel):
    message: str
    data: AdminProfile


class UpdateAdminRequest(CamelModel):
    """Partial admin profile update."""

    id: str
    names: str | None = None
    contact: str | None = None
    profile_picture: str | None = None


class ChangePasswordRequest(CamelModel):
    old_password: str
    new_password: str


class DeleteAccountRequest(CamelModel):
    id: str
    password: str


class DeleteAccountResponse(CamelModel):
    """Cascading deletion outcome."""

    message: str
    courses_deleted: int
    media: MediaReport = Field(default_factory=MediaReport)


class RecoveryEmailRequest(CamelModel):
    id: str
    recovery_email: str


class VerifyRecoveryEmailRequest(CamelModel):
    id: str
    code: str
