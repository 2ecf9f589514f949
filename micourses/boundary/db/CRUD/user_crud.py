"""
User CRUD operations.

Dependencies: sqlalchemy, micourses.boundary.db.models
System role: User persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from micourses.boundary.db.CRUD.base_crud import BaseCRUD
from micourses.boundary.db.models.user_model import UserModel


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel."""

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_contact(self, session: AsyncSession, contact: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.contact == contact)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_verification_token(
        self,
        session: AsyncSession,
        token: str,
    ) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.verification_token == token)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all_except(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[UserModel]:
        """
        Retrieve every user other than the given one, oldest first.

        Args:
            session: Async database session
            user_id: User to exclude

        Returns:
            Sequence of UserModels
        """
        stmt = (
            select(UserModel)
            .where(UserModel.id != user_id)
            .order_by(UserModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


user_crud = UserCRUD()
