"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: micourses.configs, micourses.application, micourses.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from micourses.application.services import (
    AdminService,
    CourseService,
    PostService,
    RecoveryService,
    SocialService,
    UserService,
    VerificationService,
)
from micourses.boundary.db import get_async_db
from micourses.boundary.mail.mailer import Mailer
from micourses.boundary.media.cloudinary_client import CloudinaryMediaClient
from micourses.configs import Settings, get_settings
from micourses.core.security import TokenSigner


class ServiceCache:
    """Container for cached provider clients."""

    def __init__(self):
        self._mailer = None
        self._media_client = None
        self._token_signer = None

    @property
    def mailer(self) -> Mailer:
        """Get cached mailer."""
        if self._mailer is None:
            self._mailer = Mailer(get_settings().mail)
        return self._mailer

    @property
    def media_client(self) -> CloudinaryMediaClient:
        """Get cached Cloudinary client."""
        if self._media_client is None:
            media = get_settings().media
            self._media_client = CloudinaryMediaClient(
                cloud_name=media.cloud_name,
                api_key=media.api_key,
                api_secret=media.api_secret,
            )
        return self._media_client

    @property
    def token_signer(self) -> TokenSigner:
        """Get cached token signer."""
        if self._token_signer is None:
            self._token_signer = TokenSigner(get_settings().auth)
        return self._token_signer

    def clear(self) -> None:
        """Clear all cached instances."""
        self._mailer = None
        self._media_client = None
        self._token_signer = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_media_client() -> CloudinaryMediaClient:
    """
    Get Cloudinary client for upload signing.

    Returns:
        CloudinaryMediaClient: Cached media host client
    """
    return get_service_cache().media_client


def get_admin_service(db: AsyncSession = Depends(get_async_db)) -> AdminService:
    """
    Get admin service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        AdminService: Admin service with mailer, media client and signer
    """
    cache = get_service_cache()
    return AdminService(
        db=db,
        mailer=cache.mailer,
        media=cache.media_client,
        signer=cache.token_signer,
        auth_settings=get_settings().auth,
    )


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    """
    Get user service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        UserService: User service instance
    """
    cache = get_service_cache()
    return UserService(
        db=db,
        mailer=cache.mailer,
        signer=cache.token_signer,
        auth_settings=get_settings().auth,
    )


def get_recovery_service(db: AsyncSession = Depends(get_async_db)) -> RecoveryService:
    """Get password recovery service instance."""
    cache = get_service_cache()
    return RecoveryService(
        db=db,
        mailer=cache.mailer,
        signer=cache.token_signer,
        auth_settings=get_settings().auth,
    )


def get_verification_service(db: AsyncSession = Depends(get_async_db)) -> VerificationService:
    """Get email verification service instance."""
    return VerificationService(db=db)


def get_course_service(db: AsyncSession = Depends(get_async_db)) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db, media=get_service_cache().media_client)


def get_social_service(db: AsyncSession = Depends(get_async_db)) -> SocialService:
    return SocialService(db=db)


def get_post_service(db: AsyncSession = Depends(get_async_db)) -> PostService:
    return PostService(db=db)
