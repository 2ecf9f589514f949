"""
HTTP surface configuration settings.

CORS origins and the static pages that email verification redirects to.

Dependencies: pydantic_settings
System role: Web application configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from micourses.configs.base import BaseSettings


class AppSettings(BaseSettings):
    """Web-facing application settings."""

    model_config = SettingsConfigDict(env_prefix="APP_")

    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )
    verify_success_url: str = Field(
        default="/static/verified.html",
        description="Redirect target after a successful email verification",
    )
    verify_error_url: str = Field(
        default="/static/verify-error.html",
        description="Redirect target when a verification token is unknown",
    )
