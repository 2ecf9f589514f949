"""
Password recovery service.

Drives REQUESTED -> CODE_ISSUED -> CODE_VERIFIED -> PASSWORD_RESET for
admins and users alike. The account collection is chosen by account type.

Dependencies: micourses.boundary, micourses.core
System role: Password reset use case orchestration
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from micourses.boundary.db.base import utcnow
from micourses.boundary.db.CRUD.admin_crud import admin_crud
from micourses.boundary.db.CRUD.user_crud import user_crud
from micourses.boundary.db.models.admin_model import AdminModel
from micourses.boundary.db.models.user_model import UserModel
from micourses.boundary.mail.mailer import Mailer
from micourses.configs.auth import AuthSettings
from micourses.core import validation
from micourses.core.exceptions import InvalidCodeError, InvalidTokenError, NotFoundError
from micourses.core.security import (
    TokenSigner,
    TokenType,
    code_expired,
    codes_match,
    generate_code,
    hash_password,
)
from micourses.models.recovery import AccountType
from micourses.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

_CRUDS = {
    AccountType.ADMIN: admin_crud,
    AccountType.USER: user_crud,
}


class RecoveryService:
    """Password reset flow orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        mailer: Mailer,
        signer: TokenSigner,
        auth_settings: AuthSettings,
    ) -> None:
        self.db = db
        self.mailer = mailer
        self.signer = signer
        self.auth_settings = auth_settings

    async def _get_account(self, email: str, account_type: AccountType) -> AdminModel | UserModel:
        account = await _CRUDS[account_type].get_by_email(self.db, email)
        if account is None:
            raise NotFoundError("No account found with that email", entity=account_type.value)
        return account

    async def request_code(self, email: str, account_type: AccountType = AccountType.ADMIN) -> None:
        """
        Issue a 6-digit reset code and email it.

        Raises:
            NotFoundError: If no account uses the email
            UpstreamError: If the code email cannot be sent
        """
        email = validation.validate_email(email)
        account = await self._get_account(email, account_type)

        code = generate_code()
        await _CRUDS[account_type].update(
            self.db, account, reset_code=code, reset_code_issued_at=utcnow()
        )
        await self.mailer.send_reset_code(email, code)
        log_with_context(
            logger,
            logging.INFO,
            "Reset code issued",
            account_id=str(account.id),
            account_type=account_type.value,
        )

    async def verify_code(
        self,
        email: str,
        code: str,
        account_type: AccountType = AccountType.ADMIN,
    ) -> str:
        """
        Exchange a valid reset code for a short-lived reset token.

        The code is cleared on success so it cannot be replayed.

        Returns:
            str: Signed reset token carrying the email

        Raises:
            NotFoundError: If no account uses the email
            InvalidCodeError: If the code is wrong, expired or was never issued
        """
        email = validation.validate_email(email)
        account = await self._get_account(email, account_type)

        if not codes_match(account.reset_code, code):
            raise InvalidCodeError("Invalid code")
        if code_expired(account.reset_code_issued_at, self.auth_settings.code_ttl_minutes):
            raise InvalidCodeError("Code has expired")

        await _CRUDS[account_type].update(
            self.db, account, reset_code=None, reset_code_issued_at=None
        )
        log_with_context(
            logger,
            logging.INFO,
            "Reset code verified",
            account_id=str(account.id),
            account_type=account_type.value,
        )
        return self.signer.issue_reset_token(email, account_type.value)

    async def reset_password(self, reset_token: str, new_password: str) -> None:
        """
        Set a new password for the account named in a reset token.

        Raises:
            InvalidTokenError: If the token is expired, tampered with or not a reset token
            NotFoundError: If the account no longer exists
            ValidationError: If the new password is too short
        """
        claims = self.signer.decode(reset_token, TokenType.RESET)
        try:
            account_type = AccountType(claims.get("acct"))
        except ValueError:
            raise InvalidTokenError("Invalid token")

        new_password = validation.validate_password(new_password, field="newPassword")
        account = await self._get_account(claims["sub"], account_type)

        password_hash = await asyncio.to_thread(
            hash_password, new_password, self.auth_settings.bcrypt_rounds
        )
        await _CRUDS[account_type].update(
            self.db,
            account,
            password_hash=password_hash,
            reset_code=None,
            reset_code_issued_at=None,
        )
        log_with_context(
            logger,
            logging.INFO,
            "Password reset",
            account_id=str(account.id),
            account_type=account_type.value,
        )
