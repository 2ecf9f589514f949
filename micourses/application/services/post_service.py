"""
Feed post service.

Dependencies: micourses.boundary, micourses.core
System role: Feed use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from micourses.boundary.db.CRUD.post_crud import post_crud
from micourses.boundary.db.CRUD.user_crud import user_crud
from micourses.boundary.db.models.post_model import PostModel
from micourses.boundary.db.models.user_model import UserModel
from micourses.core import validation
from micourses.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def post_to_dict(post: PostModel, author: UserModel) -> dict:
    return {
        "id": post.id,
        "content": post.content,
        "likes": list(post.likes or []),
        "user": {"id": author.id, "name": author.display_name},
        "created_at": post.created_at,
    }


class PostService:
    """Feed orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_post(self, post_id: str) -> PostModel:
        post = await post_crud.get_with_author(
            self.db, validation.parse_id(post_id, field="postId")
        )
        if post is None:
            raise NotFoundError("Post not found", entity="post", entity_id=str(post_id))
        return post

    async def create_post(self, user_id: str, content: str | None = None) -> dict:
        """
        Create a post for a user; content is optional.

        Raises:
            NotFoundError: If the author does not exist
        """
        author = await user_crud.get_by_id(self.db, validation.parse_id(user_id, field="userId"))
        if author is None:
            raise NotFoundError("User not found", entity="user", entity_id=str(user_id))

        post = await post_crud.create(
            self.db,
            user_id=author.id,
            content=content.strip() if content and content.strip() else None,
        )
        logger.info("Post created", extra={"post_id": str(post.id), "user_id": str(author.id)})
        return post_to_dict(post, author)

    async def like_post(self, post_id: str, user_id: str) -> dict:
        post = await self._get_post(post_id)
        author = post.author
        member = str(validation.parse_id(user_id, field="userId"))
        if member not in (post.likes or []):
            post = await post_crud.update(self.db, post, likes=[*(post.likes or []), member])
        return post_to_dict(post, author)

    async def unlike_post(self, post_id: str, user_id: str) -> dict:
        post = await self._get_post(post_id)
        author = post.author
        member = str(validation.parse_id(user_id, field="userId"))
        if member in (post.likes or []):
            post = await post_crud.update(
                self.db, post, likes=[m for m in post.likes if m != member]
            )
        return post_to_dict(post, author)

    async def list_posts(self) -> list[dict]:
        """All posts, newest first, with author names."""
        return [post_to_dict(p, p.author) for p in await post_crud.get_feed(self.db)]
