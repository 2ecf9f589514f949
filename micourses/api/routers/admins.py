"""
Admin account API endpoints.

Routes:
- POST /register-admin - Register admin
- POST /admin-login - Log in with email or contact
- PATCH /update-admin - Partial profile update
- PATCH /change-password/{id} - Change password
- DELETE /delete-account - Delete admin, owned courses and their media
- POST /recovery-email - Attach a recovery email and send it a code
- PATCH /verify-recover-email - Confirm the recovery email

Dependencies: micourses.application.services, micourses.models
System role: Admin account HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from micourses.api.deps.dependencies import get_admin_service
from micourses.api.routers.router_utils import handle_api_errors
from micourses.application.services.admin_service import AdminService
from micourses.models.admin import (
    AdminAuthResponse,
    AdminLoginRequest,
    AdminProfile,
    AdminProfileResponse,
    ChangePasswordRequest,
    DeleteAccountRequest,
    DeleteAccountResponse,
    RecoveryEmailRequest,
    RegisterAdminRequest,
    UpdateAdminRequest,
    VerifyRecoveryEmailRequest,
)
from micourses.models.common import MediaReport, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admins"])


def _auth_response(message: str, result: dict) -> AdminAuthResponse:
    profile = AdminProfile(**result["admin"])
    return AdminAuthResponse(message=message, data=profile, token=result["token"], id=profile.id)


@router.post("/register-admin", response_model=AdminAuthResponse)
@handle_api_errors
async def register_admin(
    request: RegisterAdminRequest,
    admin_service: AdminService = Depends(get_admin_service),
) -> AdminAuthResponse:
    """
    Register a new admin.

    Raises:
        HTTPException(400): A field breaks its validation rule
        HTTPException(409): Email, contact or names already taken
    """
    result = await admin_service.register_admin(
        names=request.names,
        contact=request.contact,
        email=request.email,
        password=request.password,
    )
    return _auth_response("Admin registered successfully", result)


@router.post("/admin-login", response_model=AdminAuthResponse)
@handle_api_errors
async def admin_login(
    request: AdminLoginRequest,
    admin_service: AdminService = Depends(get_admin_service),
) -> AdminAuthResponse:
    """
    Log in with email or contact number.

    Raises:
        HTTPException(404): No admin matches the identifier
        HTTPException(401): Wrong password
    """
    result = await admin_service.login(request.identifier, request.password)
    return _auth_response("Login successful", result)


@router.patch("/update-admin", response_model=AdminProfileResponse)
@handle_api_errors
async def update_admin(
    request: UpdateAdminRequest,
    admin_service: AdminService = Depends(get_admin_service),
) -> AdminProfileResponse:
    profile = await admin_service.update_profile(
        admin_id=request.id,
        names=request.names,
        contact=request.contact,
        profile_picture=request.profile_picture,
    )
    return AdminProfileResponse(message="Profile updated", data=AdminProfile(**profile))


@router.patch("/change-password/{admin_id}", response_model=MessageResponse)
@handle_api_errors
async def change_password(
    admin_id: str,
    request: ChangePasswordRequest,
    admin_service: AdminService = Depends(get_admin_service),
) -> MessageResponse:
    await admin_service.change_password(admin_id, request.old_password, request.new_password)
    return MessageResponse(message="Password changed")


@router.delete("/delete-account", response_model=DeleteAccountResponse)
@handle_api_errors
async def delete_account(
    request: DeleteAccountRequest,
    admin_service: AdminService = Depends(get_admin_service),
) -> DeleteAccountResponse:
    """
    Delete an admin and everything it owns.

    Media deletion failures are reported in `media.failed`; the account
    and course records are deleted regardless.

    Raises:
        HTTPException(404): Admin not found
        HTTPException(401): Wrong password
    """
    result = await admin_service.delete_account(request.id, request.password)
    return DeleteAccountResponse(
        message="Account deleted",
        courses_deleted=result["courses_deleted"],
        media=MediaReport(**result["media"].to_dict()),
    )


@router.post("/recovery-email", response_model=MessageResponse)
@handle_api_errors
async def request_recovery_email(
    request: RecoveryEmailRequest,
    admin_service: AdminService = Depends(get_admin_service),
) -> MessageResponse:
    await admin_service.request_recovery_email(request.id, request.recovery_email)
    return MessageResponse(message="Verification code sent to recovery email")


@router.patch("/verify-recover-email", response_model=AdminProfileResponse)
@handle_api_errors
async def verify_recovery_email(
    request: VerifyRecoveryEmailRequest,
    admin_service: AdminService = Depends(get_admin_service),
) -> AdminProfileResponse:
    profile = await admin_service.verify_recovery_email(request.id, request.code)
    return AdminProfileResponse(message="Recovery email verified", data=AdminProfile(**profile))
