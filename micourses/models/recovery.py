"""
Password recovery schemas.

Dependencies: pydantic
System role: Reset-code flow API contracts
"""

import enum

from micourses.models.common import CamelModel


class AccountType(str, enum.Enum):
    """Which account collection a recovery flow targets."""

    ADMIN = "admin"
    USER = "user"


class RequestCodeRequest(CamelModel):
    email: str
    account_type: AccountType = AccountType.ADMIN


class VerifyCodeRequest(CamelModel):
    email: str
    code: str
    account_type: AccountType = AccountType.ADMIN


class VerifyCodeResponse(CamelModel):
    message: str
    reset_token: str


class ResetPasswordRequest(CamelModel):
    reset_token: str
    new_password: str
