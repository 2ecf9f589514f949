"""
Course ORM model.

A course is a document: its cover image, ordered videos, liking users and
reviews are embedded JSON values rather than separate tables.

  cover_image: {"url": str, "public_id": str}
  videos:      [{"url": str, "public_id": str}, ...]
  likes:       [user_id, ...]
  reviews:     [{"id", "user_id", "content", "created_at", "likes", "unlikes"}, ...]

Dependencies: sqlalchemy, micourses.boundary.db.base
System role: Course persistence
"""

from uuid import UUID

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from micourses.boundary.db.base import Base, UUIDMixin, TimestampMixin


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model, exclusively owned by one admin.

    Attributes:
        course_name: Unique course name
        sector: Category used for catalog filtering
        duration: Free-form duration label
        description: Course description
        cover_image: Hosted cover asset
        videos: Ordered hosted video assets
        admin_id: Owning admin (courses are deleted with their admin)
        likes: Users who saved the course
        reviews: Embedded user reviews
    """

    __tablename__ = "courses"

    course_name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    sector: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    duration: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    cover_image: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    videos: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    admin_id: Mapped[UUID] = mapped_column(
        ForeignKey("admins.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    likes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    reviews: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
