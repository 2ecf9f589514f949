"""
Media hosting configuration settings.

Cloudinary credentials for signed uploads and asset destruction.

Dependencies: pydantic_settings
System role: Media hosting provider configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from micourses.configs.base import BaseSettings


class MediaSettings(BaseSettings):
    """Settings for Cloudinary operations."""

    model_config = SettingsConfigDict(env_prefix="CLOUDINARY_")

    cloud_name: str = Field(default="", description="Cloudinary cloud name")
    api_key: str = Field(default="", description="Cloudinary API key")
    api_secret: str = Field(default="", description="Cloudinary API secret")
