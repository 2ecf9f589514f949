"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database session, media host and mailer doubles,
fast-hashing auth settings, wired service instances
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid

import pytest

from micourses.boundary.media.cloudinary_client import MediaAsset, MediaDeletionReport
from micourses.configs.auth import AuthSettings
from micourses.core.exceptions import UpstreamError
from micourses.core.security import TokenSigner


class FakeMediaClient:
    """Records destroyed assets; ids in fail_ids are reported as failures."""

    def __init__(self) -> None:
        self.destroyed: list[MediaAsset] = []
        self.batches: list[list[MediaAsset]] = []
        self.fail_ids: set[str] = set()

    def sign_upload(self, preset: str) -> dict:
        return {
            "timestamp": 1700000000,
            "signature": "fake-signature",
            "api_key": "fake-key",
            "cloud_name": "fake-cloud",
            "preset": preset,
        }

    async def destroy_many(self, assets: list[MediaAsset]) -> MediaDeletionReport:
        self.batches.append(list(assets))
        report = MediaDeletionReport()
        for asset in assets:
            if asset.public_id in self.fail_ids:
                report.failed.append({"publicId": asset.public_id, "error": "boom"})
            else:
                self.destroyed.append(asset)
                report.deleted.append(asset.public_id)
        return report

    @property
    def destroyed_ids(self) -> list[str]:
        return [a.public_id for a in self.destroyed]


class FakeMailer:
    """Records every message; fail=True makes required sends raise."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, str]] = []
        self.fail = False

    async def send_verification_email(self, to: str, token: str) -> bool:
        if self.fail:
            return False
        self.sent.append(("verification", to, token))
        return True

    async def send_reset_code(self, to: str, code: str) -> bool:
        if self.fail:
            raise UpstreamError("Failed to send email", service="mailer")
        self.sent.append(("reset", to, code))
        return True

    async def send_recovery_code(self, to: str, code: str) -> bool:
        if self.fail:
            raise UpstreamError("Failed to send email", service="mailer")
        self.sent.append(("recovery", to, code))
        return True

    def last(self, kind: str) -> tuple[str, str, str]:
        return [m for m in self.sent if m[0] == kind][-1]


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from micourses.boundary.db.base import Base
    from micourses.boundary.db import models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with the cheapest bcrypt work factor."""
    return AuthSettings(secret_key="test-secret", bcrypt_rounds=4)


@pytest.fixture
def signer(auth_settings: AuthSettings) -> TokenSigner:
    return TokenSigner(auth_settings)


@pytest.fixture
def fake_media() -> FakeMediaClient:
    return FakeMediaClient()


@pytest.fixture
def fake_mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def admin_service(test_async_db, fake_mailer, fake_media, signer, auth_settings):
    from micourses.application.services import AdminService

    return AdminService(
        db=test_async_db,
        mailer=fake_mailer,
        media=fake_media,
        signer=signer,
        auth_settings=auth_settings,
    )


@pytest.fixture
def user_service(test_async_db, fake_mailer, signer, auth_settings):
    from micourses.application.services import UserService

    return UserService(
        db=test_async_db,
        mailer=fake_mailer,
        signer=signer,
        auth_settings=auth_settings,
    )


@pytest.fixture
def course_service(test_async_db, fake_media):
    from micourses.application.services import CourseService

    return CourseService(db=test_async_db, media=fake_media)


@pytest.fixture
def recovery_service(test_async_db, fake_mailer, signer, auth_settings):
    from micourses.application.services import RecoveryService

    return RecoveryService(
        db=test_async_db,
        mailer=fake_mailer,
        signer=signer,
        auth_settings=auth_settings,
    )


@pytest.fixture
def admin_payload() -> dict:
    return {
        "names": "Jane Doe",
        "contact": "0123456789",
        "email": "jane@example.com",
        "password": "secret1",
    }


@pytest.fixture
async def registered_admin(admin_service, admin_payload) -> dict:
    """Admin profile dict of a freshly registered admin."""
    result = await admin_service.register_admin(**admin_payload)
    return result["admin"]


@pytest.fixture
async def registered_user(user_service) -> uuid.UUID:
    """Id of a freshly registered learner."""
    return await user_service.register_user(
        email="learner@example.com",
        password="secret1",
        first_name="Sam",
        second_name="Lee",
    )


@pytest.fixture
def course_payload():
    """Factory for create_course kwargs owned by an admin."""

    def _payload(admin_id, name: str = "Intro to Python", sector: str = "tech") -> dict:
        return {
            "course_name": name,
            "sector": sector,
            "duration": "4 weeks",
            "description": "Learn the basics",
            "cover_image": {"url": "https://cdn/cover.jpg", "public_id": f"{name}-cover"},
            "admin_id": str(admin_id),
            "videos": [
                {"url": "https://cdn/v1.mp4", "public_id": f"{name}-v1"},
                {"url": "https://cdn/v2.mp4", "public_id": f"{name}-v2"},
            ],
        }

    return _payload
