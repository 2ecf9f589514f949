"""
Test suite for AdminService against an in-memory database.

Tests registration rules and uniqueness, login, profile changes,
recovery-email confirmation and cascading account deletion.

System role: Verification of admin account use cases
"""

from datetime import timedelta

import pytest
from sqlalchemy import select

from micourses.boundary.db.base import utcnow
from micourses.boundary.db.CRUD.admin_crud import admin_crud
from micourses.boundary.db.models.admin_model import AdminModel
from micourses.boundary.db.models.course_model import CourseModel
from micourses.core.exceptions import (
    AuthError,
    ConflictError,
    InvalidCodeError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from micourses.core.security import TokenType


class TestRegisterAdmin:
    """Test suite for AdminService.register_admin()."""

    @pytest.mark.asyncio
    async def test_register_returns_redacted_profile_and_token(
        self, admin_service, admin_payload, signer, fake_mailer
    ) -> None:
        # Act
        result = await admin_service.register_admin(**admin_payload)

        # Assert
        profile = result["admin"]
        assert profile["email"] == "jane@example.com"
        assert profile["verified"] is False
        assert "password" not in profile
        assert "password_hash" not in profile
        assert "verification_token" not in profile
        claims = signer.decode(result["token"], TokenType.ADMIN)
        assert claims["sub"] == str(profile["id"])
        assert fake_mailer.last("verification")[1] == "jane@example.com"

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(
        self, admin_service, admin_payload, test_async_db
    ) -> None:
        result = await admin_service.register_admin(**admin_payload)

        admin = await admin_crud.get_by_id(test_async_db, result["admin"]["id"])
        assert admin.password_hash != "secret1"
        assert admin.password_hash.startswith("$2")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field, value",
        [
            ("email", "JANE@example.com"),
            ("contact", "0123456789"),
            ("names", "Jane Doe"),
        ],
    )
    async def test_duplicate_unique_field_conflicts(
        self, admin_service, admin_payload, registered_admin, field, value
    ) -> None:
        # Arrange
        other = {
            "names": "John Roe",
            "contact": "0987654321",
            "email": "john@example.com",
            "password": "secret2",
        }
        other[field] = value

        # Act / Assert
        with pytest.raises(ConflictError) as exc_info:
            await admin_service.register_admin(**other)
        assert exc_info.value.details["field"] == field

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "override",
        [
            {"names": "Jane3"},
            {"contact": "12345"},
            {"email": "not-an-email"},
            {"password": "short"},
        ],
    )
    async def test_invalid_fields_rejected(self, admin_service, admin_payload, override) -> None:
        with pytest.raises(ValidationError):
            await admin_service.register_admin(**{**admin_payload, **override})

    @pytest.mark.asyncio
    async def test_mail_failure_does_not_block_registration(
        self, admin_service, admin_payload, fake_mailer
    ) -> None:
        fake_mailer.fail = True

        result = await admin_service.register_admin(**admin_payload)

        assert result["admin"]["email"] == "jane@example.com"


class TestAdminLogin:
    @pytest.mark.asyncio
    async def test_login_by_email_or_contact(self, admin_service, registered_admin) -> None:
        by_email = await admin_service.login("Jane@Example.com", "secret1")
        by_contact = await admin_service.login("0123456789", "secret1")

        assert by_email["admin"]["id"] == registered_admin["id"]
        assert by_contact["admin"]["id"] == registered_admin["id"]

    @pytest.mark.asyncio
    async def test_wrong_password(self, admin_service, registered_admin) -> None:
        with pytest.raises(AuthError, match="Wrong password"):
            await admin_service.login("jane@example.com", "wrong")

    @pytest.mark.asyncio
    async def test_unknown_identifier(self, admin_service, registered_admin) -> None:
        with pytest.raises(NotFoundError, match="Wrong Email or Contact"):
            await admin_service.login("nobody@example.com", "secret1")


class TestUpdateAdmin:
    @pytest.mark.asyncio
    async def test_partial_update(self, admin_service, registered_admin) -> None:
        profile = await admin_service.update_profile(
            str(registered_admin["id"]), profile_picture="https://cdn/me.png"
        )

        assert profile["profile_picture"] == "https://cdn/me.png"
        assert profile["names"] == "Jane Doe"

    @pytest.mark.asyncio
    async def test_contact_taken_by_other_admin(self, admin_service, registered_admin) -> None:
        other = await admin_service.register_admin(
            names="John Roe", contact="0987654321", email="john@example.com", password="secret2"
        )

        with pytest.raises(ConflictError):
            await admin_service.update_profile(str(other["admin"]["id"]), contact="0123456789")

    @pytest.mark.asyncio
    async def test_keeping_own_contact_is_not_a_conflict(self, admin_service, registered_admin) -> None:
        profile = await admin_service.update_profile(
            str(registered_admin["id"]), contact="0123456789"
        )
        assert profile["contact"] == "0123456789"

    @pytest.mark.asyncio
    async def test_empty_update_rejected(self, admin_service, registered_admin) -> None:
        with pytest.raises(ValidationError):
            await admin_service.update_profile(str(registered_admin["id"]))

    @pytest.mark.asyncio
    async def test_malformed_id_rejected(self, admin_service) -> None:
        with pytest.raises(ValidationError):
            await admin_service.update_profile("not-a-uuid", names="Jane")


class TestChangePassword:
    @pytest.mark.asyncio
    async def test_change_password(self, admin_service, registered_admin) -> None:
        await admin_service.change_password(str(registered_admin["id"]), "secret1", "newsecret")

        result = await admin_service.login("jane@example.com", "newsecret")
        assert result["admin"]["id"] == registered_admin["id"]
        with pytest.raises(AuthError):
            await admin_service.login("jane@example.com", "secret1")

    @pytest.mark.asyncio
    async def test_wrong_old_password(self, admin_service, registered_admin) -> None:
        with pytest.raises(AuthError):
            await admin_service.change_password(str(registered_admin["id"]), "nope", "newsecret")

    @pytest.mark.asyncio
    async def test_new_password_longer_than_72_bytes(self, admin_service, registered_admin) -> None:
        long_password = "n" * 100
        await admin_service.change_password(str(registered_admin["id"]), "secret1", long_password)

        result = await admin_service.login("jane@example.com", long_password)
        assert result["admin"]["id"] == registered_admin["id"]


class TestRecoveryEmail:
    @pytest.mark.asyncio
    async def test_request_then_verify(self, admin_service, registered_admin, fake_mailer) -> None:
        # Arrange
        admin_id = str(registered_admin["id"])
        await admin_service.request_recovery_email(admin_id, "backup@example.com")
        _, to, code = fake_mailer.last("recovery")

        # Act
        profile = await admin_service.verify_recovery_email(admin_id, code)

        # Assert
        assert to == "backup@example.com"
        assert profile["recovery_email"] == "backup@example.com"
        assert profile["recovery_email_verified"] is True

    @pytest.mark.asyncio
    async def test_code_cannot_be_reused(self, admin_service, registered_admin, fake_mailer) -> None:
        admin_id = str(registered_admin["id"])
        await admin_service.request_recovery_email(admin_id, "backup@example.com")
        code = fake_mailer.last("recovery")[2]
        await admin_service.verify_recovery_email(admin_id, code)

        with pytest.raises(InvalidCodeError):
            await admin_service.verify_recovery_email(admin_id, code)

    @pytest.mark.asyncio
    async def test_wrong_code(self, admin_service, registered_admin, fake_mailer) -> None:
        admin_id = str(registered_admin["id"])
        await admin_service.request_recovery_email(admin_id, "backup@example.com")
        code = fake_mailer.last("recovery")[2]
        wrong = "000000" if code != "000000" else "111111"

        with pytest.raises(InvalidCodeError):
            await admin_service.verify_recovery_email(admin_id, wrong)

    @pytest.mark.asyncio
    async def test_expired_code(
        self, admin_service, registered_admin, fake_mailer, test_async_db
    ) -> None:
        admin_id = str(registered_admin["id"])
        await admin_service.request_recovery_email(admin_id, "backup@example.com")
        code = fake_mailer.last("recovery")[2]
        admin = await admin_crud.get_by_id(test_async_db, registered_admin["id"])
        await admin_crud.update(
            test_async_db, admin, recovery_code_issued_at=utcnow() - timedelta(minutes=30)
        )

        with pytest.raises(InvalidCodeError):
            await admin_service.verify_recovery_email(admin_id, code)

    @pytest.mark.asyncio
    async def test_recovery_email_must_differ(self, admin_service, registered_admin) -> None:
        with pytest.raises(ValidationError):
            await admin_service.request_recovery_email(
                str(registered_admin["id"]), "jane@example.com"
            )

    @pytest.mark.asyncio
    async def test_send_failure_is_raised(self, admin_service, registered_admin, fake_mailer) -> None:
        fake_mailer.fail = True

        with pytest.raises(UpstreamError):
            await admin_service.request_recovery_email(
                str(registered_admin["id"]), "backup@example.com"
            )


class TestDeleteAccount:
    """Test suite for cascading admin deletion."""

    @pytest.mark.asyncio
    async def test_delete_without_courses_makes_no_media_calls(
        self, admin_service, registered_admin, fake_media, test_async_db
    ) -> None:
        # Act
        result = await admin_service.delete_account(str(registered_admin["id"]), "secret1")

        # Assert
        assert result["courses_deleted"] == 0
        assert fake_media.batches == []
        assert await admin_crud.get_by_id(test_async_db, registered_admin["id"]) is None

    @pytest.mark.asyncio
    async def test_delete_cascades_courses_and_media(
        self,
        admin_service,
        course_service,
        registered_admin,
        course_payload,
        fake_media,
        test_async_db,
    ) -> None:
        # Arrange
        admin_id = registered_admin["id"]
        await course_service.create_course(**course_payload(admin_id, name="Course A"))
        await course_service.create_course(**course_payload(admin_id, name="Course B"))

        # Act
        result = await admin_service.delete_account(str(admin_id), "secret1")

        # Assert
        assert result["courses_deleted"] == 2
        assert len(fake_media.batches) == 1
        assert sorted(fake_media.destroyed_ids) == sorted(
            [
                "Course A-cover", "Course A-v1", "Course A-v2",
                "Course B-cover", "Course B-v1", "Course B-v2",
            ]
        )
        remaining = await test_async_db.execute(select(CourseModel))
        assert remaining.scalars().all() == []
        admins = await test_async_db.execute(select(AdminModel))
        assert admins.scalars().all() == []

    @pytest.mark.asyncio
    async def test_media_failures_are_reported_not_raised(
        self, admin_service, course_service, registered_admin, course_payload, fake_media
    ) -> None:
        admin_id = registered_admin["id"]
        await course_service.create_course(**course_payload(admin_id, name="Course A"))
        fake_media.fail_ids = {"Course A-v2"}

        result = await admin_service.delete_account(str(admin_id), "secret1")

        assert result["courses_deleted"] == 1
        assert result["media"].failed == [{"publicId": "Course A-v2", "error": "boom"}]

    @pytest.mark.asyncio
    async def test_wrong_password_keeps_everything(
        self, admin_service, registered_admin, fake_media, test_async_db
    ) -> None:
        with pytest.raises(AuthError):
            await admin_service.delete_account(str(registered_admin["id"]), "wrong")

        assert await admin_crud.get_by_id(test_async_db, registered_admin["id"]) is not None
        assert fake_media.batches == []
