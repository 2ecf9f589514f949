"""Service orchestrators."""

from .admin_service import AdminService
from .course_service import CourseService
from .post_service import PostService
from .recovery_service import RecoveryService
from .social_service import SocialService
from .user_service import UserService
from .verification_service import VerificationService

__all__ = [
    "AdminService",
    "CourseService",
    "PostService",
    "RecoveryService",
    "SocialService",
    "UserService",
    "VerificationService",
]
