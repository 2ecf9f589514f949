"""
Post CRUD operations.

Reads always load the author in the same query, refreshing instances
already held by the session.

Dependencies: sqlalchemy, micourses.boundary.db.models
System role: Feed persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from micourses.boundary.db.CRUD.base_crud import BaseCRUD
from micourses.boundary.db.models.post_model import PostModel


class PostCRUD(BaseCRUD[PostModel]):
    """CRUD operations for PostModel."""

    def __init__(self) -> None:
        """Initialize PostCRUD with PostModel."""
        super().__init__(PostModel)

    def _with_author(self):
        return (
            select(PostModel)
            .options(joinedload(PostModel.author))
            .execution_options(populate_existing=True)
        )

    async def get_with_author(self, session: AsyncSession, id: UUID) -> PostModel | None:
        stmt = self._with_author().where(PostModel.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_feed(self, session: AsyncSession) -> Sequence[PostModel]:
        """All posts, newest first, with authors loaded."""
        stmt = self._with_author().order_by(PostModel.created_at.desc())
        result = await session.execute(stmt)
        return result.scalars().all()


post_crud = PostCRUD()
