"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field, model_validator

from micourses.configs.app import AppSettings
from micourses.configs.auth import AuthSettings
from micourses.configs.base import DEVELOPMENT, BaseSettings
from micourses.configs.database import DatabaseSettings
from micourses.configs.mail import MailSettings
from micourses.configs.media import MediaSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    environment: str = Field(
        default=DEVELOPMENT,
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    mail: MailSettings = Field(default_factory=MailSettings)
    media: MediaSettings = Field(default_factory=MediaSettings)
    app: AppSettings = Field(default_factory=AppSettings)

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == DEVELOPMENT

    @model_validator(mode="after")
    def require_signing_secret(self) -> "Settings":
        """Only development may sign tokens with the built-in secret."""
        if self.auth.uses_dev_secret and not self.is_development:
            raise ValueError(
                f"AUTH_SECRET_KEY must be set when ENVIRONMENT is {self.environment!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Raises:
        pydantic.ValidationError: If the configuration is unusable, such as
            a missing signing secret outside development

    Usage:
        from micourses.configs import get_settings
        settings = get_settings()
    """
    return Settings()
