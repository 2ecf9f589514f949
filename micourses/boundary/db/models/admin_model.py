"""
Admin ORM model.

Represents a course owner. Email, contact and display name are each
globally unique. Deleting an admin cascades to its courses.

Dependencies: sqlalchemy, micourses.boundary.db.base
System role: Admin account persistence
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from micourses.boundary.db.base import Base, UUIDMixin, TimestampMixin


class AdminModel(Base, UUIDMixin, TimestampMixin):
    """
    Admin ORM model.

    Attributes:
        names: Display name (unique)
        email: Login email (unique)
        contact: 10-digit contact number (unique)
        password_hash: bcrypt hash
        profile_picture: Optional profile picture URL
        recovery_email: Secondary email, confirmed via code exchange
        recovery_email_verified: True once the recovery code was confirmed
        recovery_code: Pending one-time code for the recovery email
        recovery_code_issued_at: When recovery_code was issued
        verified: Primary email confirmed
        verification_token: Pending email verification token
        reset_code: Pending one-time password reset code
        reset_code_issued_at: When reset_code was issued
        created_at: Join timestamp
    """

    __tablename__ = "admins"

    names: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    contact: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    profile_picture: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)

    recovery_email: Mapped[str | None] = mapped_column(String(320), nullable=True, default=None)
    recovery_email_verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    recovery_code: Mapped[str | None] = mapped_column(String(16), nullable=True, default=None)
    recovery_code_issued_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )

    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    verification_token: Mapped[str | None] = mapped_column(
        String(64), nullable=True, default=None, index=True
    )
    reset_code: Mapped[str | None] = mapped_column(String(16), nullable=True, default=None)
    reset_code_issued_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )
