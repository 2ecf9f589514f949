"""
Test suite for UserService against an in-memory database.

System role: Verification of learner account use cases
"""

import uuid
from datetime import date

import pytest

from micourses.boundary.db.CRUD.user_crud import user_crud
from micourses.core.exceptions import ConflictError, NotFoundError, ValidationError
from micourses.core.security import TokenType


class TestRegisterUser:
    @pytest.mark.asyncio
    async def test_register_hashes_password(self, user_service, test_async_db, fake_mailer) -> None:
        user_id = await user_service.register_user("New@Example.com", "secret1")

        user = await user_crud.get_by_id(test_async_db, user_id)
        assert user.email == "new@example.com"
        assert user.password_hash != "secret1"
        assert user.verification_token
        assert fake_mailer.last("verification") == ("verification", "new@example.com", user.verification_token)

    @pytest.mark.asyncio
    async def test_duplicate_email(self, user_service, registered_user) -> None:
        with pytest.raises(ConflictError):
            await user_service.register_user("learner@example.com", "secret2")

    @pytest.mark.asyncio
    async def test_short_password(self, user_service) -> None:
        with pytest.raises(ValidationError):
            await user_service.register_user("a@example.com", "123")

    @pytest.mark.asyncio
    async def test_password_longer_than_72_bytes(self, user_service) -> None:
        long_password = "p" * 100
        user_id = await user_service.register_user("long@example.com", long_password)

        result = await user_service.login("long@example.com", long_password)
        assert result["user"]["id"] == user_id
        with pytest.raises(NotFoundError):
            await user_service.login("long@example.com", "p" * 72)


class TestUserLogin:
    @pytest.mark.asyncio
    async def test_login_issues_user_token(self, user_service, registered_user, signer) -> None:
        result = await user_service.login("learner@example.com", "secret1")

        assert result["user"]["id"] == registered_user
        assert signer.decode(result["token"], TokenType.USER)["sub"] == str(registered_user)

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_are_both_not_found(
        self, user_service, registered_user
    ) -> None:
        with pytest.raises(NotFoundError, match="Invalid email"):
            await user_service.login("ghost@example.com", "secret1")
        with pytest.raises(NotFoundError, match="Invalid password"):
            await user_service.login("learner@example.com", "wrong-password")


class TestUpdateUserProfile:
    @pytest.mark.asyncio
    async def test_completes_profile(self, user_service, registered_user) -> None:
        profile = await user_service.update_profile(
            str(registered_user),
            gender="Female",
            date_of_birth=date(1995, 1, 31),
            contact="0123456789",
        )

        assert profile["gender"] == "female"
        assert profile["date_of_birth"] == date(1995, 1, 31)
        assert profile["contact"] == "0123456789"
        assert profile["first_name"] == "Sam"

    @pytest.mark.asyncio
    async def test_contact_conflict(self, user_service, registered_user) -> None:
        await user_service.update_profile(str(registered_user), contact="0123456789")
        other = await user_service.register_user("other@example.com", "secret1")

        with pytest.raises(ConflictError):
            await user_service.update_profile(str(other), contact="0123456789")

    @pytest.mark.asyncio
    async def test_missing_user(self, user_service) -> None:
        with pytest.raises(NotFoundError):
            await user_service.update_profile(str(uuid.uuid4()), first_name="Sam")

    @pytest.mark.asyncio
    async def test_invalid_gender(self, user_service, registered_user) -> None:
        with pytest.raises(ValidationError):
            await user_service.update_profile(str(registered_user), gender="unknown")


class TestQueries:
    @pytest.mark.asyncio
    async def test_list_users_excludes_caller(self, user_service, registered_user) -> None:
        other = await user_service.register_user("other@example.com", "secret1")

        users = await user_service.list_users_except(str(registered_user))

        assert [u["id"] for u in users] == [other]

    @pytest.mark.asyncio
    async def test_profile_is_redacted(self, user_service, registered_user) -> None:
        profile = await user_service.get_profile(str(registered_user))

        assert profile["email"] == "learner@example.com"
        assert "password_hash" not in profile
        assert "verification_token" not in profile
        assert "reset_code" not in profile
