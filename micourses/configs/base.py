"""
Base configuration settings.

Every settings class reads the same `.env` file and ignores keys that
belong to other concerns. Subclasses only add their env prefix.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

DEVELOPMENT = "development"


class BaseSettings(PydanticBaseSettings):
    """Shared `.env` loading for micourses settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
