"""
User account API endpoints.

Routes:
- POST /register-user - Register learner
- PATCH /register-user - Complete or edit learner profile
- POST /login, POST /user-login - Log in
- GET /user/{user_id} - List every other user
- GET /profile/{user_id} - Get a user profile

Dependencies: micourses.application.services, micourses.models
System role: Learner account HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from micourses.api.deps.dependencies import get_user_service
from micourses.api.routers.router_utils import handle_api_errors
from micourses.application.services.user_service import UserService
from micourses.models.user import (
    RegisterUserRequest,
    RegisterUserResponse,
    UpdateUserRequest,
    UserAuthResponse,
    UserEnvelope,
    UserLoginRequest,
    UserProfile,
    UserProfileResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/register-user", response_model=RegisterUserResponse)
@handle_api_errors
async def register_user(
    request: RegisterUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> RegisterUserResponse:
    """
    Register a learner with email and password.

    Raises:
        HTTPException(400): Invalid email, password or name
        HTTPException(409): Email already registered
    """
    user_id = await user_service.register_user(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        second_name=request.second_name,
    )
    return RegisterUserResponse(message="User registered successfully", id=user_id)


@router.patch("/register-user", response_model=UserProfileResponse)
@handle_api_errors
async def update_user(
    request: UpdateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserProfileResponse:
    profile = await user_service.update_profile(
        user_id=request.id,
        first_name=request.first_name,
        second_name=request.second_name,
        gender=request.gender,
        date_of_birth=request.date_of_birth,
        contact=request.contact,
        profile_picture=request.profile_picture,
    )
    return UserProfileResponse(message="Profile updated", data=UserProfile(**profile))


@router.post("/login", response_model=UserAuthResponse)
@router.post("/user-login", response_model=UserAuthResponse)
@handle_api_errors
async def user_login(
    request: UserLoginRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserAuthResponse:
    """
    Log a learner in.

    Raises:
        HTTPException(404): Unknown email or wrong password
    """
    result = await user_service.login(request.email, request.password)
    profile = UserProfile(**result["user"])
    return UserAuthResponse(
        message="Login successful",
        data=profile,
        token=result["token"],
        id=profile.id,
    )


@router.get("/user/{user_id}", response_model=list[UserProfile])
@handle_api_errors
async def list_other_users(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> list[UserProfile]:
    users = await user_service.list_users_except(user_id)
    return [UserProfile(**u) for u in users]


@router.get("/profile/{user_id}", response_model=UserEnvelope)
@handle_api_errors
async def get_profile(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> UserEnvelope:
    return UserEnvelope(user=UserProfile(**await user_service.get_profile(user_id)))
