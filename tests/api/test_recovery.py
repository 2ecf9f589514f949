import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from micourses.api.deps.dependencies import get_recovery_service, get_verification_service
from micourses.configs import get_settings
from micourses.core.exceptions import InvalidCodeError, InvalidTokenError, NotFoundError, UpstreamError
from micourses.main import create_app
from micourses.models.recovery import AccountType


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def mock_recovery_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_recovery_service] = lambda: service
    return service


@pytest.fixture
def mock_verification_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_verification_service] = lambda: service
    return service


def test_get_code_defaults_to_admin(client, mock_recovery_service):
    response = client.post("/get-code", json={"email": "jane@example.com"})

    assert response.status_code == 200
    mock_recovery_service.request_code.assert_awaited_once_with("jane@example.com", AccountType.ADMIN)


def test_get_code_for_user(client, mock_recovery_service):
    client.post("/get-code", json={"email": "sam@example.com", "accountType": "user"})

    mock_recovery_service.request_code.assert_awaited_once_with("sam@example.com", AccountType.USER)


def test_get_code_unknown_account_type(client, mock_recovery_service):
    response = client.post("/get-code", json={"email": "sam@example.com", "accountType": "robot"})

    assert response.status_code == 400


def test_get_code_mail_failure(client, mock_recovery_service):
    mock_recovery_service.request_code.side_effect = UpstreamError("Failed to send email", service="mailer")

    response = client.post("/get-code", json={"email": "jane@example.com"})

    assert response.status_code == 502
    assert response.json() == {"message": "Failed to send email"}


def test_verify_code_returns_reset_token(client, mock_recovery_service):
    mock_recovery_service.verify_code.return_value = "reset-tok"

    response = client.post("/verify-code", json={"email": "jane@example.com", "code": "123456"})

    assert response.status_code == 200
    assert response.json() == {"message": "Code verified", "resetToken": "reset-tok"}


def test_verify_code_invalid(client, mock_recovery_service):
    mock_recovery_service.verify_code.side_effect = InvalidCodeError("Invalid code")

    response = client.post("/verify-code", json={"email": "jane@example.com", "code": "000000"})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid code"}


def test_reset_password_expired_token(client, mock_recovery_service):
    mock_recovery_service.reset_password.side_effect = InvalidTokenError("Token has expired")

    response = client.post("/reset-password", json={"resetToken": "old", "newPassword": "secret9"})

    assert response.status_code == 401
    assert response.json() == {"message": "Token has expired"}


def test_verify_email_redirects_to_success(client, mock_verification_service):
    response = client.get("/verify/tok", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == get_settings().app.verify_success_url
    mock_verification_service.verify_email.assert_awaited_once_with("tok")


def test_verify_email_unknown_token_redirects_to_error(client, mock_verification_service):
    mock_verification_service.verify_email.side_effect = NotFoundError("Invalid token")

    response = client.get("/verify/bad", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == get_settings().app.verify_error_url
