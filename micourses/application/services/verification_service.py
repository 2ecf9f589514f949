"""
Email verification service.

Resolves a verification token against admins first, then users.

Dependencies: micourses.boundary
System role: Email confirmation
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from micourses.boundary.db.CRUD.admin_crud import admin_crud
from micourses.boundary.db.CRUD.user_crud import user_crud
from micourses.core.exceptions import NotFoundError
from micourses.models.recovery import AccountType

logger = logging.getLogger(__name__)


class VerificationService:
    """Email verification orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def verify_email(self, token: str) -> AccountType:
        """
        Mark the account holding this token as verified and clear the token.

        Returns:
            AccountType: Which kind of account was verified

        Raises:
            NotFoundError: If no account holds the token
        """
        for account_type, crud in ((AccountType.ADMIN, admin_crud), (AccountType.USER, user_crud)):
            account = await crud.get_by_verification_token(self.db, token)
            if account is not None:
                await crud.update(self.db, account, verified=True, verification_token=None)
                logger.info(
                    "Email verified",
                    extra={"account_id": str(account.id), "account_type": account_type.value},
                )
                return account_type
        raise NotFoundError("Invalid token")
