"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    admins_router,
    courses_router,
    health_router,
    media_router,
    posts_router,
    recovery_router,
    social_router,
    users_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(media_router)
api_router.include_router(admins_router)
api_router.include_router(users_router)
api_router.include_router(recovery_router)
api_router.include_router(social_router)
api_router.include_router(posts_router)
api_router.include_router(courses_router)

__all__ = ["api_router"]
