"""
Feed post schemas.

Dependencies: pydantic
System role: Feed API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from micourses.models.common import CamelModel


class CreatePostRequest(CamelModel):
    user_id: str
    content: str | None = None


class PostAuthor(CamelModel):
    id: uuid.UUID
    name: str


class PostResponse(CamelModel):
    """Post with its author attached."""

    id: uuid.UUID
    content: str | None = None
    likes: list[uuid.UUID] = Field(default_factory=list)
    user: PostAuthor
    created_at: datetime


class CreatePostResponse(CamelModel):
    message: str
    data: PostResponse
