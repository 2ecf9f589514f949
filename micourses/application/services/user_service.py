"""
User service orchestrator.

Coordinates learner registration, login and profile operations.

Dependencies: micourses.boundary, micourses.core
System role: User account use case orchestration
"""

import asyncio
import logging
from datetime import date
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from micourses.boundary.db.CRUD.user_crud import user_crud
from micourses.boundary.db.models.user_model import UserModel
from micourses.boundary.mail.mailer import Mailer
from micourses.configs.auth import AuthSettings
from micourses.core import validation
from micourses.core.exceptions import ConflictError, NotFoundError, ValidationError
from micourses.core.security import (
    TokenSigner,
    TokenType,
    generate_verification_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


def user_to_dict(user: UserModel) -> dict:
    """Redacted user profile: no password hash, tokens or codes."""
    return {
        "id": user.id,
        "email": user.email,
        "first_name": user.first_name,
        "second_name": user.second_name,
        "contact": user.contact,
        "gender": user.gender,
        "date_of_birth": user.date_of_birth,
        "profile_picture": user.profile_picture,
        "verified": user.verified,
        "enrolled_courses": list(user.enrolled_courses or []),
        "saved_courses": list(user.saved_courses or []),
        "finished_courses": list(user.finished_courses or []),
        "followers": list(user.followers or []),
        "joined_at": user.created_at,
    }


class UserService:
    """User service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        mailer: Mailer,
        signer: TokenSigner,
        auth_settings: AuthSettings,
    ) -> None:
        """
        Initialize user service.

        Args:
            db: Async SQLAlchemy session
            mailer: Transactional mailer
            signer: Session token signer
            auth_settings: Hashing settings
        """
        self.db = db
        self.mailer = mailer
        self.signer = signer
        self.auth_settings = auth_settings

    async def _get_user(self, user_id: str | UUID) -> UserModel:
        user = await user_crud.get_by_id(self.db, validation.parse_id(user_id))
        if user is None:
            raise NotFoundError("User not found", entity="user", entity_id=str(user_id))
        return user

    async def register_user(
        self,
        email: str,
        password: str,
        first_name: str | None = None,
        second_name: str | None = None,
    ) -> UUID:
        """
        Create a learner account with a hashed password.

        The rest of the profile is completed by update_profile.

        Returns:
            UUID: Created user ID

        Raises:
            ValidationError: If email, password or a given name is invalid
            ConflictError: If the email is already registered
        """
        email = validation.validate_email(email)
        password = validation.validate_password(password)
        if first_name is not None:
            first_name = validation.validate_name(first_name, field="firstName")
        if second_name is not None:
            second_name = validation.validate_name(second_name, field="secondName")

        if await user_crud.get_by_email(self.db, email) is not None:
            raise ConflictError("Email already registered", details={"field": "email"})

        password_hash = await asyncio.to_thread(
            hash_password, password, self.auth_settings.bcrypt_rounds
        )
        try:
            user = await user_crud.create(
                self.db,
                email=email,
                password_hash=password_hash,
                first_name=first_name,
                second_name=second_name,
                verification_token=generate_verification_token(),
            )
        except IntegrityError as e:
            raise ConflictError("Email already registered") from e

        logger.info("User registered", extra={"user_id": str(user.id)})
        await self.mailer.send_verification_email(user.email, user.verification_token)
        return user.id

    async def login(self, email: str, password: str) -> dict:
        """
        Authenticate a learner by email.

        Both an unknown email and a wrong password are reported as
        NotFoundError.

        Returns:
            dict: {"user": profile dict, "token": session token}
        """
        user = await user_crud.get_by_email(self.db, email.strip().lower())
        if user is None:
            raise NotFoundError("Invalid email", entity="user")
        if not await asyncio.to_thread(verify_password, password, user.password_hash):
            logger.warning("User login rejected", extra={"user_id": str(user.id)})
            raise NotFoundError("Invalid password", entity="user")

        token = self.signer.issue_session_token(str(user.id), TokenType.USER)
        return {"user": user_to_dict(user), "token": token}

    async def update_profile(
        self,
        user_id: str,
        first_name: str | None = None,
        second_name: str | None = None,
        gender: str | None = None,
        date_of_birth: date | None = None,
        contact: str | None = None,
        profile_picture: str | None = None,
    ) -> dict:
        """
        Partially update a learner profile.

        Raises:
            ValidationError: If the id is malformed or a field is invalid
            NotFoundError: If the user does not exist
            ConflictError: If the contact belongs to another user
        """
        user = await self._get_user(user_id)

        updates: dict = {}
        if first_name is not None:
            updates["first_name"] = validation.validate_name(first_name, field="firstName")
        if second_name is not None:
            updates["second_name"] = validation.validate_name(second_name, field="secondName")
        if gender is not None:
            updates["gender"] = validation.validate_gender(gender)
        if date_of_birth is not None:
            updates["date_of_birth"] = validation.validate_birth_date(date_of_birth)
        if contact is not None:
            updates["contact"] = validation.validate_contact(contact)
        if profile_picture is not None:
            updates["profile_picture"] = profile_picture.strip() or None
        if not updates:
            raise ValidationError("At least one field must be provided for update")

        if "contact" in updates:
            owner = await user_crud.get_by_contact(self.db, updates["contact"])
            if owner is not None and owner.id != user.id:
                raise ConflictError("Contact already registered", details={"field": "contact"})

        user = await user_crud.update(self.db, user, **updates)
        logger.info(
            "User profile updated",
            extra={"user_id": str(user.id), "updates": list(updates.keys())},
        )
        return user_to_dict(user)

    async def get_profile(self, user_id: str) -> dict:
        return user_to_dict(await self._get_user(user_id))

    async def list_users_except(self, user_id: str) -> list[dict]:
        """All users other than the given one (the caller need not exist)."""
        users = await user_crud.get_all_except(self.db, validation.parse_id(user_id, field="userId"))
        return [user_to_dict(u) for u in users]
