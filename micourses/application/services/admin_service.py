"""
Admin service orchestrator.

Coordinates admin registration, authentication, profile changes,
recovery-email confirmation and cascading account deletion.

Dependencies: micourses.boundary, micourses.core
System role: Admin account use case orchestration
"""

import asyncio
import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from micourses.application.services.course_service import course_assets
from micourses.boundary.db.base import utcnow
from micourses.boundary.db.CRUD.admin_crud import admin_crud
from micourses.boundary.db.CRUD.course_crud import course_crud
from micourses.boundary.db.models.admin_model import AdminModel
from micourses.boundary.mail.mailer import Mailer
from micourses.boundary.media.cloudinary_client import (
    CloudinaryMediaClient,
    MediaAsset,
    MediaDeletionReport,
)
from micourses.configs.auth import AuthSettings
from micourses.core import validation
from micourses.core.exceptions import (
    AuthError,
    ConflictError,
    InvalidCodeError,
    NotFoundError,
    ValidationError,
)
from micourses.core.security import (
    TokenSigner,
    TokenType,
    code_expired,
    codes_match,
    generate_code,
    generate_verification_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

_CONFLICT_MESSAGES = {
    "email": "Email already registered",
    "contact": "Contact already registered",
    "names": "Name already taken",
}


def admin_to_dict(admin: AdminModel) -> dict:
    """Redacted admin profile: no password hash, tokens or codes."""
    return {
        "id": admin.id,
        "names": admin.names,
        "email": admin.email,
        "contact": admin.contact,
        "profile_picture": admin.profile_picture,
        "verified": admin.verified,
        "recovery_email": admin.recovery_email,
        "recovery_email_verified": admin.recovery_email_verified,
        "joined_at": admin.created_at,
    }


class AdminService:
    """Admin service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        mailer: Mailer,
        media: CloudinaryMediaClient,
        signer: TokenSigner,
        auth_settings: AuthSettings,
    ) -> None:
        """
        Initialize admin service.

        Args:
            db: Async SQLAlchemy session
            mailer: Transactional mailer
            media: Media host client used by cascading deletion
            signer: Session token signer
            auth_settings: Hashing and code lifetime settings
        """
        self.db = db
        self.mailer = mailer
        self.media = media
        self.signer = signer
        self.auth_settings = auth_settings

    async def _get_admin(self, admin_id: str | UUID) -> AdminModel:
        admin = await admin_crud.get_by_id(self.db, validation.parse_id(admin_id))
        if admin is None:
            raise NotFoundError("Admin not found", entity="admin", entity_id=str(admin_id))
        return admin

    async def _raise_on_conflict(self, exclude_id: UUID | None = None, **fields: str | None) -> None:
        field = await admin_crud.find_conflict(self.db, exclude_id=exclude_id, **fields)
        if field is not None:
            raise ConflictError(_CONFLICT_MESSAGES[field], details={"field": field})

    async def _hash(self, password: str) -> str:
        return await asyncio.to_thread(hash_password, password, self.auth_settings.bcrypt_rounds)

    async def register_admin(
        self,
        names: str,
        contact: str,
        email: str,
        password: str,
    ) -> dict:
        """
        Register a new admin and send a best-effort verification email.

        Args:
            names: Display name
            contact: 10-digit contact number
            email: Login email
            password: Plain password (at least 6 characters)

        Returns:
            dict: {"admin": profile dict, "token": session token}

        Raises:
            ValidationError: If any field breaks its rule
            ConflictError: If email, contact or names is already taken
        """
        names = validation.validate_name(names)
        email = validation.validate_email(email)
        contact = validation.validate_contact(contact)
        password = validation.validate_password(password)

        await self._raise_on_conflict(email=email, contact=contact, names=names)

        try:
            admin = await admin_crud.create(
                self.db,
                names=names,
                email=email,
                contact=contact,
                password_hash=await self._hash(password),
                verification_token=generate_verification_token(),
            )
        except IntegrityError as e:
            raise ConflictError("Email already registered") from e

        logger.info("Admin registered", extra={"admin_id": str(admin.id)})
        await self.mailer.send_verification_email(admin.email, admin.verification_token)

        token = self.signer.issue_session_token(str(admin.id), TokenType.ADMIN)
        return {"admin": admin_to_dict(admin), "token": token}

    async def login(self, identifier: str, password: str) -> dict:
        """
        Authenticate an admin by email or contact number.

        Raises:
            NotFoundError: If no admin matches the identifier
            AuthError: If the password does not match
        """
        admin = await admin_crud.get_by_identifier(self.db, identifier.strip())
        if admin is None:
            raise NotFoundError("Wrong Email or Contact", entity="admin")

        if not await asyncio.to_thread(verify_password, password, admin.password_hash):
            logger.warning("Admin login rejected", extra={"admin_id": str(admin.id)})
            raise AuthError("Wrong password")

        token = self.signer.issue_session_token(str(admin.id), TokenType.ADMIN)
        return {"admin": admin_to_dict(admin), "token": token}

    async def update_profile(
        self,
        admin_id: str,
        names: str | None = None,
        contact: str | None = None,
        profile_picture: str | None = None,
    ) -> dict:
        """
        Partially update an admin profile.

        Raises:
            ValidationError: If the id or a changed field is invalid
            NotFoundError: If the admin does not exist
            ConflictError: If the new names or contact belongs to another admin
        """
        admin = await self._get_admin(admin_id)

        updates: dict = {}
        if names is not None:
            updates["names"] = validation.validate_name(names)
        if contact is not None:
            updates["contact"] = validation.validate_contact(contact)
        if profile_picture is not None:
            updates["profile_picture"] = profile_picture.strip() or None
        if not updates:
            raise ValidationError("At least one field must be provided for update")

        await self._raise_on_conflict(
            exclude_id=admin.id,
            names=updates.get("names"),
            contact=updates.get("contact"),
        )
        admin = await admin_crud.update(self.db, admin, **updates)
        logger.info(
            "Admin profile updated",
            extra={"admin_id": str(admin.id), "updates": list(updates.keys())},
        )
        return admin_to_dict(admin)

    async def change_password(self, admin_id: str, old_password: str, new_password: str) -> None:
        """
        Replace an admin's password after verifying the current one.

        Raises:
            AuthError: If old_password does not match
        """
        admin = await self._get_admin(admin_id)
        new_password = validation.validate_password(new_password, field="newPassword")
        if not await asyncio.to_thread(verify_password, old_password, admin.password_hash):
            raise AuthError("Wrong password")

        await admin_crud.update(
            self.db,
            admin,
            password_hash=await self._hash(new_password),
            reset_code=None,
            reset_code_issued_at=None,
        )
        logger.info("Admin password changed", extra={"admin_id": str(admin.id)})

    async def request_recovery_email(self, admin_id: str, recovery_email: str) -> None:
        """
        Attach an unconfirmed recovery email and send it a confirmation code.

        Raises:
            ValidationError: If the address is malformed or equals the primary email
            UpstreamError: If the code email cannot be sent
        """
        admin = await self._get_admin(admin_id)
        recovery_email = validation.validate_email(recovery_email, field="recoveryEmail")
        if recovery_email == admin.email:
            raise ValidationError(
                "Recovery email must differ from the account email",
                field="recoveryEmail",
            )

        code = generate_code()
        await admin_crud.update(
            self.db,
            admin,
            recovery_email=recovery_email,
            recovery_email_verified=False,
            recovery_code=code,
            recovery_code_issued_at=utcnow(),
        )
        await self.mailer.send_recovery_code(recovery_email, code)
        logger.info("Recovery email code issued", extra={"admin_id": str(admin.id)})

    async def verify_recovery_email(self, admin_id: str, code: str) -> dict:
        """
        Confirm the pending recovery email with its code.

        Raises:
            InvalidCodeError: If no code is pending, it expired, or it does not match
        """
        admin = await self._get_admin(admin_id)
        if not admin.recovery_code or code_expired(
            admin.recovery_code_issued_at, self.auth_settings.code_ttl_minutes
        ):
            raise InvalidCodeError("Code has expired or was never requested")
        if not codes_match(admin.recovery_code, code):
            raise InvalidCodeError("Invalid code")

        admin = await admin_crud.update(
            self.db,
            admin,
            recovery_email_verified=True,
            recovery_code=None,
            recovery_code_issued_at=None,
        )
        logger.info("Recovery email verified", extra={"admin_id": str(admin.id)})
        return admin_to_dict(admin)

    async def delete_account(self, admin_id: str, password: str) -> dict:
        """
        Delete an admin, every course it owns and their hosted media.

        Media deletions run as one concurrent batch; failures are reported
        but do not stop the record deletions.

        Returns:
            dict: {"courses_deleted": int, "media": MediaDeletionReport}

        Raises:
            NotFoundError: If the admin does not exist
            AuthError: If the password does not match
        """
        admin = await self._get_admin(admin_id)
        if not await asyncio.to_thread(verify_password, password, admin.password_hash):
            raise AuthError("Wrong password")

        courses = await course_crud.get_by_admin(self.db, admin.id)
        report = MediaDeletionReport()
        if courses:
            assets: list[MediaAsset] = []
            for course in courses:
                assets.extend(course_assets(course))
            report = await self.media.destroy_many(assets)

        deleted = await course_crud.delete_by_admin(self.db, admin.id)
        await admin_crud.delete_by_id(self.db, admin.id)

        logger.info(
            "Admin account deleted",
            extra={
                "admin_id": str(admin.id),
                "courses_deleted": deleted,
                "media_failures": len(report.failed),
            },
        )
        return {"courses_deleted": deleted, "media": report}
