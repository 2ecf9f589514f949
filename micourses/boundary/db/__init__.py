"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - AdminModel, UserModel, CourseModel, PostModel: Domain documents
  - admin_crud, user_crud, course_crud, post_crud: CRUD operation singletons

Dependencies: sqlalchemy, micourses.configs
System role: Document persistence for accounts, courses and the feed
"""

from micourses.boundary.db.base import Base, TimestampMixin, UUIDMixin
from micourses.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from micourses.boundary.db.models import AdminModel, CourseModel, PostModel, UserModel
from micourses.boundary.db.CRUD import (
    BaseCRUD,
    admin_crud,
    course_crud,
    post_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "AdminModel",
    "CourseModel",
    "PostModel",
    "UserModel",
    # CRUD
    "BaseCRUD",
    "admin_crud",
    "course_crud",
    "post_crud",
    "user_crud",
]
