"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from micourses.boundary.db.CRUD import admin_crud, course_crud

    admin = await admin_crud.get_by_identifier(db, "jane@example.com")
"""

from micourses.boundary.db.CRUD.base_crud import BaseCRUD
from micourses.boundary.db.CRUD.admin_crud import AdminCRUD, admin_crud
from micourses.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from micourses.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from micourses.boundary.db.CRUD.post_crud import PostCRUD, post_crud

__all__ = [
    "BaseCRUD",
    "AdminCRUD",
    "admin_crud",
    "UserCRUD",
    "user_crud",
    "CourseCRUD",
    "course_crud",
    "PostCRUD",
    "post_crud",
]
