"""
Social graph service.

Follow and unfollow are unchecked set writes on the target's followers:
neither id has to resolve, and repeating a call changes nothing.

Dependencies: micourses.boundary, micourses.core
System role: Follower graph mutation
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from micourses.boundary.db.CRUD.user_crud import user_crud
from micourses.core import validation

logger = logging.getLogger(__name__)


class SocialService:
    """Follower graph orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def follow(self, follower_id: str, target_id: str) -> bool:
        """
        Add follower_id to the target's followers.

        Returns:
            bool: True if the followers set changed
        """
        follower = str(validation.parse_id(follower_id, field="currentUserId"))
        target = await user_crud.get_by_id(
            self.db, validation.parse_id(target_id, field="selectedUserId")
        )
        if target is None or follower in (target.followers or []):
            return False

        await user_crud.update(self.db, target, followers=[*(target.followers or []), follower])
        logger.info("User followed", extra={"follower_id": follower, "target_id": str(target.id)})
        return True

    async def unfollow(self, follower_id: str, target_id: str) -> bool:
        """
        Remove follower_id from the target's followers.

        Returns:
            bool: True if the followers set changed
        """
        follower = str(validation.parse_id(follower_id, field="loggedInUserId"))
        target = await user_crud.get_by_id(
            self.db, validation.parse_id(target_id, field="targetUserId")
        )
        if target is None or follower not in (target.followers or []):
            return False

        await user_crud.update(
            self.db,
            target,
            followers=[f for f in target.followers if f != follower],
        )
        logger.info("User unfollowed", extra={"follower_id": follower, "target_id": str(target.id)})
        return True
