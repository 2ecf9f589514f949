"""
Database models package.

Exports:
  - AdminModel: Course owner account
  - UserModel: Learner account with course reference lists
  - CourseModel: Course document with embedded media, likes and reviews
  - PostModel: Social feed post

Dependencies: sqlalchemy, micourses.boundary.db.base
System role: Database model definitions for domain entities
"""

from micourses.boundary.db.models.admin_model import AdminModel
from micourses.boundary.db.models.course_model import CourseModel
from micourses.boundary.db.models.post_model import PostModel
from micourses.boundary.db.models.user_model import UserModel

__all__ = [
    "AdminModel",
    "CourseModel",
    "PostModel",
    "UserModel",
]
