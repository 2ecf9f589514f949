"""API routers."""

from .admins import router as admins_router
from .courses import router as courses_router
from .health import router as health_router
from .media import router as media_router
from .posts import router as posts_router
from .recovery import router as recovery_router
from .social import router as social_router
from .users import router as users_router

__all__ = [
    "admins_router",
    "courses_router",
    "health_router",
    "media_router",
    "posts_router",
    "recovery_router",
    "social_router",
    "users_router",
]
