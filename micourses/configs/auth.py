"""
Authentication configuration settings.

Signing secret and lifetimes for session tokens, reset tokens and
one-time codes. The secret is read from the environment on startup and
is never regenerated by the process.

Dependencies: pydantic_settings
System role: Token and password hashing configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from micourses.configs.base import BaseSettings

DEV_SECRET_KEY = "dev-secret-change-me"


class AuthSettings(BaseSettings):
    """Token signing and password hashing configuration."""

    model_config = SettingsConfigDict(env_prefix="AUTH_")

    secret_key: str = Field(
        default=DEV_SECRET_KEY,
        description="HMAC secret used to sign session and reset tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    session_token_minutes: int = Field(
        default=60,
        description="Lifetime of admin and user session tokens",
    )
    reset_token_minutes: int = Field(
        default=15,
        description="Lifetime of password reset tokens",
    )
    code_ttl_minutes: int = Field(
        default=15,
        description="Lifetime of emailed reset and recovery codes",
    )
    bcrypt_rounds: int = Field(default=12, description="bcrypt work factor")

    @property
    def uses_dev_secret(self) -> bool:
        """True when no secret was configured."""
        return self.secret_key == DEV_SECRET_KEY
