"""
Admin CRUD operations.

Dependencies: sqlalchemy, micourses.boundary.db.models
System role: Admin persistence operations
"""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from micourses.boundary.db.CRUD.base_crud import BaseCRUD
from micourses.boundary.db.models.admin_model import AdminModel


class AdminCRUD(BaseCRUD[AdminModel]):
    """CRUD operations for AdminModel with identity lookups."""

    def __init__(self) -> None:
        """Initialize AdminCRUD with AdminModel."""
        super().__init__(AdminModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> AdminModel | None:
        stmt = select(AdminModel).where(AdminModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_identifier(
        self,
        session: AsyncSession,
        identifier: str,
    ) -> AdminModel | None:
        """
        Resolve an admin by email or contact number.

        Args:
            session: Async database session
            identifier: Email address or contact number

        Returns:
            AdminModel if either field matches, None otherwise
        """
        stmt = select(AdminModel).where(
            or_(AdminModel.email == identifier.lower(), AdminModel.contact == identifier)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def get_by_verification_token(
        self,
        session: AsyncSession,
        token: str,
    ) -> AdminModel | None:
        stmt = select(AdminModel).where(AdminModel.verification_token == token)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_conflict(
        self,
        session: AsyncSession,
        email: str | None = None,
        contact: str | None = None,
        names: str | None = None,
        exclude_id: UUID | None = None,
    ) -> str | None:
        """
        Report which unique field is already taken by another admin.

        Args:
            session: Async database session
            email: Candidate email
            contact: Candidate contact number
            names: Candidate display name
            exclude_id: Admin to ignore (the one being updated)

        Returns:
            The conflicting field name ("email", "contact", "names"), or None
        """
        for field, value in (("email", email), ("contact", contact), ("names", names)):
            if value is None:
                continue
            stmt = select(AdminModel.id).where(getattr(AdminModel, field) == value)
            if exclude_id is not None:
                stmt = stmt.where(AdminModel.id != exclude_id)
            result = await session.execute(stmt)
            if result.first() is not None:
                return field
        return None


admin_crud = AdminCRUD()
