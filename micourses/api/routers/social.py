"""
Follower graph API endpoints.

Routes: POST /follow, POST /users/unfollow

Dependencies: micourses.application.services, micourses.models
System role: Social graph HTTP API
"""

from fastapi import APIRouter, Depends

from micourses.api.deps.dependencies import get_social_service
from micourses.api.routers.router_utils import handle_api_errors
from micourses.application.services.social_service import SocialService
from micourses.models.common import MessageResponse
from micourses.models.user import FollowRequest, UnfollowRequest

router = APIRouter(tags=["social"])


@router.post("/follow", response_model=MessageResponse)
@handle_api_errors
async def follow(
    request: FollowRequest,
    social_service: SocialService = Depends(get_social_service),
) -> MessageResponse:
    await social_service.follow(request.current_user_id, request.selected_user_id)
    return MessageResponse(message="Followed successfully")


@router.post("/users/unfollow", response_model=MessageResponse)
@handle_api_errors
async def unfollow(
    request: UnfollowRequest,
    social_service: SocialService = Depends(get_social_service),
) -> MessageResponse:
    await social_service.unfollow(request.logged_in_user_id, request.target_user_id)
    return MessageResponse(message="Unfollowed successfully")
