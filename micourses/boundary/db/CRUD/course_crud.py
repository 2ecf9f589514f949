"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with catalog filtering and owner-scoped queries.

Dependencies: sqlalchemy, micourses.boundary.db.models
System role: Course persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from micourses.boundary.db.CRUD.base_crud import BaseCRUD
from micourses.boundary.db.models.course_model import CourseModel


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with name lookup, sector/owner filtering and
    bulk deletion of an admin's courses.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def get_by_name(self, session: AsyncSession, course_name: str) -> CourseModel | None:
        stmt = select(CourseModel).where(CourseModel.course_name == course_name)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_filtered(
        self,
        session: AsyncSession,
        sector: str | None = None,
        admin_id: UUID | None = None,
    ) -> Sequence[CourseModel]:
        """
        Retrieve courses, newest first, optionally filtered.

        Args:
            session: Async database session
            sector: Only courses in this sector
            admin_id: Only courses owned by this admin

        Returns:
            Sequence of CourseModels
        """
        stmt = select(CourseModel).order_by(CourseModel.created_at.desc())
        if sector is not None:
            stmt = stmt.where(CourseModel.sector == sector)
        if admin_id is not None:
            stmt = stmt.where(CourseModel.admin_id == admin_id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_admin(self, session: AsyncSession, admin_id: UUID) -> Sequence[CourseModel]:
        return await self.get_filtered(session, admin_id=admin_id)

    async def delete_by_admin(self, session: AsyncSession, admin_id: UUID) -> int:
        """
        Delete every course owned by an admin.

        Returns:
            int: Number of deleted courses
        """
        stmt = delete(CourseModel).where(CourseModel.admin_id == admin_id)
        result = await session.execute(stmt)
        return result.rowcount


course_crud = CourseCRUD()
