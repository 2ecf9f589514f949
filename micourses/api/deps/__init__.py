"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_admin_service,
    get_course_service,
    get_media_client,
    get_post_service,
    get_recovery_service,
    get_service_cache,
    get_settings_dependency,
    get_social_service,
    get_user_service,
    get_verification_service,
)

__all__ = [
    "get_admin_service",
    "get_course_service",
    "get_media_client",
    "get_post_service",
    "get_recovery_service",
    "get_service_cache",
    "get_settings_dependency",
    "get_social_service",
    "get_user_service",
    "get_verification_service",
]
