"""
Password recovery and email verification endpoints.

Routes:
- POST /get-code - Email a reset code
- POST /verify-code - Exchange the code for a reset token
- POST /reset-password - Set a new password with a reset token
- GET /verify/{token} - Confirm an account email (redirects)

Dependencies: micourses.application.services, micourses.models, micourses.configs
System role: Account recovery HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from micourses.api.deps.dependencies import (
    get_recovery_service,
    get_settings_dependency,
    get_verification_service,
)
from micourses.api.routers.router_utils import handle_api_errors
from micourses.application.services.recovery_service import RecoveryService
from micourses.application.services.verification_service import VerificationService
from micourses.configs import Settings
from micourses.core.exceptions import NotFoundError
from micourses.models.common import MessageResponse
from micourses.models.recovery import (
    RequestCodeRequest,
    ResetPasswordRequest,
    VerifyCodeRequest,
    VerifyCodeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recovery"])


@router.post("/get-code", response_model=MessageResponse)
@handle_api_errors
async def request_code(
    request: RequestCodeRequest,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> MessageResponse:
    """
    Email a 6-digit reset code.

    Raises:
        HTTPException(404): No account uses the email
        HTTPException(502): The code email could not be sent
    """
    await recovery_service.request_code(request.email, request.account_type)
    return MessageResponse(message="Code sent to your email")


@router.post("/verify-code", response_model=VerifyCodeResponse)
@handle_api_errors
async def verify_code(
    request: VerifyCodeRequest,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> VerifyCodeResponse:
    reset_token = await recovery_service.verify_code(
        request.email, request.code, request.account_type
    )
    return VerifyCodeResponse(message="Code verified", reset_token=reset_token)


@router.post("/reset-password", response_model=MessageResponse)
@handle_api_errors
async def reset_password(
    request: ResetPasswordRequest,
    recovery_service: RecoveryService = Depends(get_recovery_service),
) -> MessageResponse:
    await recovery_service.reset_password(request.reset_token, request.new_password)
    return MessageResponse(message="Password reset successfully")


@router.get("/verify/{token}", response_class=RedirectResponse)
async def verify_email(
    token: str,
    verification_service: VerificationService = Depends(get_verification_service),
    settings: Settings = Depends(get_settings_dependency),
) -> RedirectResponse:
    """
    Confirm the email of the admin or user holding the token.

    Always redirects: to the success page, or to the error page when the
    token is unknown.
    """
    try:
        await verification_service.verify_email(token)
    except NotFoundError:
        logger.warning("Unknown verification token")
        return RedirectResponse(settings.app.verify_error_url, status_code=status.HTTP_303_SEE_OTHER)
    return RedirectResponse(settings.app.verify_success_url, status_code=status.HTTP_303_SEE_OTHER)
