"""
Credential helpers.

Password hashing (bcrypt), signed time-limited tokens (python-jose JWT),
verification tokens and one-time numeric codes.

Dependencies: bcrypt, jose, hashlib and secrets (stdlib)
System role: Authentication primitives shared by the account services
"""

import base64
import enum
import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from micourses.configs.auth import AuthSettings
from micourses.core.exceptions import InvalidTokenError


class TokenType(str, enum.Enum):
    """Purpose claim carried in every signed token."""

    ADMIN = "admin"
    USER = "user"
    RESET = "reset"


def _bcrypt_input(password: str) -> bytes:
    """
    SHA-256 digest of the password, base64 encoded.

    bcrypt only reads 72 bytes and newer releases reject longer input,
    so every password is reduced to a fixed 44-byte value first.
    """
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(password: str, rounds: int = 12) -> str:
    """Salted one-way hash of a password of any length."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_bcrypt_input(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """
    Check a password against a stored bcrypt hash.

    Returns False for empty input or a malformed stored hash.
    """
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(_bcrypt_input(password), password_hash.encode("utf-8"))
    except ValueError:
        return False


def generate_verification_token() -> str:
    """Random hex token embedded in verification links."""
    return secrets.token_hex(20)


def generate_code(digits: int = 6) -> str:
    """Zero-padded random numeric code."""
    return f"{secrets.randbelow(10 ** digits):0{digits}d}"


def codes_match(expected: str | None, provided: str | None) -> bool:
    """Constant-time comparison of a stored code with user input."""
    if not expected or not provided:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), provided.strip().encode("utf-8"))


class TokenSigner:
    """Issue and verify signed tokens with the configured secret."""

    def __init__(self, settings: AuthSettings) -> None:
        self._secret = settings.secret_key
        self._algorithm = settings.algorithm
        self._session_lifetime = timedelta(minutes=settings.session_token_minutes)
        self._reset_lifetime = timedelta(minutes=settings.reset_token_minutes)

    def _encode(self, claims: dict[str, Any], lifetime: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload = {**claims, "iat": now, "exp": now + lifetime}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def issue_session_token(self, account_id: str, token_type: TokenType) -> str:
        """Session token for an admin or a user."""
        return self._encode(
            {"sub": account_id, "typ": token_type.value},
            self._session_lifetime,
        )

    def issue_reset_token(self, email: str, account_type: str) -> str:
        """Short-lived token authorizing one password reset for an email."""
        return self._encode(
            {"sub": email, "typ": TokenType.RESET.value, "acct": account_type},
            self._reset_lifetime,
        )

    def decode(self, token: str, expected_type: TokenType) -> dict[str, Any]:
        """
        Verify a token's signature, expiry and purpose.

        Args:
            token: Encoded JWT
            expected_type: Required value of the ``typ`` claim

        Returns:
            dict: Decoded claims

        Raises:
            InvalidTokenError: If the token is expired, tampered with or
                issued for another purpose
        """
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise InvalidTokenError("Token has expired")
        except JWTError:
            raise InvalidTokenError("Invalid token")

        if claims.get("typ") != expected_type.value or not claims.get("sub"):
            raise InvalidTokenError("Invalid token")
        return claims


def code_expired(issued_at: datetime | None, ttl_minutes: int) -> bool:
    """
    True when a one-time code is missing its issue time or is past its TTL.

    Naive timestamps (as returned by SQLite) are treated as UTC.
    """
    if issued_at is None:
        return True
    if issued_at.tzinfo is None:
        issued_at = issued_at.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc) - issued_at > timedelta(minutes=ttl_minutes)
