"""
Post ORM model.

Social feed post with optional text content and a likes set stored as a
JSON list of user id strings.

Dependencies: sqlalchemy, micourses.boundary.db.base
System role: Feed persistence
"""

from uuid import UUID

from sqlalchemy import JSON, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from micourses.boundary.db.base import Base, UUIDMixin, TimestampMixin


class PostModel(Base, UUIDMixin, TimestampMixin):
    """Post ORM model; the author is always loaded with the post."""

    __tablename__ = "posts"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    likes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    author = relationship("UserModel", lazy="joined")
