"""
Feed API endpoints.

Routes:
- POST /create-post - Create post
- GET /get-posts - List posts, newest first
- PUT /posts/{post_id}/{user_id}/like - Like post
- PUT /posts/{post_id}/{user_id}/unlike - Remove like

Dependencies: micourses.application.services, micourses.models
System role: Feed HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from micourses.api.deps.dependencies import get_post_service
from micourses.api.routers.router_utils import handle_api_errors
from micourses.application.services.post_service import PostService
from micourses.models.post import CreatePostRequest, CreatePostResponse, PostResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["posts"])


@router.post("/create-post", response_model=CreatePostResponse)
@handle_api_errors
async def create_post(
    request: CreatePostRequest,
    post_service: PostService = Depends(get_post_service),
) -> CreatePostResponse:
    """
    Create a post; content may be empty.

    Raises:
        HTTPException(404): Author not found
    """
    post = await post_service.create_post(request.user_id, request.content)
    return CreatePostResponse(message="Post created", data=PostResponse(**post))


@router.get("/get-posts", response_model=list[PostResponse])
@handle_api_errors
async def list_posts(
    post_service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    posts = await post_service.list_posts()
    logger.info("Feed retrieved", extra={"count": len(posts)})
    return [PostResponse(**p) for p in posts]


@router.put("/posts/{post_id}/{user_id}/like", response_model=PostResponse)
@handle_api_errors
async def like_post(
    post_id: str,
    user_id: str,
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    return PostResponse(**await post_service.like_post(post_id, user_id))


@router.put("/posts/{post_id}/{user_id}/unlike", response_model=PostResponse)
@handle_api_errors
async def unlike_post(
    post_id: str,
    user_id: str,
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    return PostResponse(**await post_service.unlike_post(post_id, user_id))
