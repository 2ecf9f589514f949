"""
User ORM model.

Represents a learner. Enrolled, saved and finished course references are
owned sub-records stored as JSON lists of ``{"course_id", "added_at"}``;
followers is a JSON list of user id strings.

Dependencies: sqlalchemy, micourses.boundary.db.base
System role: Learner account persistence
"""

from datetime import date, datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from micourses.boundary.db.base import Base, UUIDMixin, TimestampMixin


class UserModel(Base, UUIDMixin, TimestampMixin):
    """User ORM model."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Completed by the profile update step after registration
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True, default=None)
    second_name: Mapped[str | None] = mapped_column(String(100), nullable=True, default=None)
    contact: Mapped[str | None] = mapped_column(String(10), unique=True, nullable=True, default=None)
    gender: Mapped[str | None] = mapped_column(String(16), nullable=True, default=None)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True, default=None)
    profile_picture: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)

    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    verification_token: Mapped[str | None] = mapped_column(
        String(64), nullable=True, default=None, index=True
    )
    reset_code: Mapped[str | None] = mapped_column(String(16), nullable=True, default=None)
    reset_code_issued_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )

    enrolled_courses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    saved_courses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    finished_courses: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    followers: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    @property
    def display_name(self) -> str:
        """First and second name joined, falling back to the email."""
        parts = [p for p in (self.first_name, self.second_name) if p]
        return " ".join(parts) if parts else self.email
