"""Course API package."""

from .courses_router import router

__all__ = ["router"]
