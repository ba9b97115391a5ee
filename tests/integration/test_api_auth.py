"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from unittest.mock import AsyncMock

import pytest

from environ_backend.application.dto.auth_dto import TokenResponse
from environ_backend.application.dto.user_dto import UserResponse
from environ_backend.application.use_cases.auth.login_user import LoginUserUseCase
from environ_backend.application.use_cases.auth.logout_user import LogoutUserUseCase
from environ_backend.application.use_cases.auth.register_user import RegisterUserUseCase

pytestmark = pytest.mark.integration


@pytest.fixture
def mock_register_use_case():
    return AsyncMock(spec=RegisterUserUseCase)


@pytest.fixture
def mock_login_use_case():
    return AsyncMock(spec=LoginUserUseCase)


@pytest.fixture
def mock_logout_use_case():
    return AsyncMock(spec=LogoutUserUseCase)


@pytest.fixture
def client(make_client, mock_register_use_case, mock_login_use_case, mock_logout_use_case):
    return make_client(
        "auth_controller",
        {
            RegisterUserUseCase: mock_register_use_case,
            LoginUserUseCase: mock_login_use_case,
            LogoutUserUseCase: mock_logout_use_case,
        },
    )


class TestAuthAPI:
    """Tests for /api/v1/auth endpoints"""

    def test_register_success(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = UserResponse(
            id="usr-1",
            full_name="Test User",
            email="test@example.com",
        )
        response = client.post(
            "/api/v1/auth/register",
            json={
                "full_name": "Test User",
                "email": "test@example.com",
                "password": "password123",
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "test@example.com"
        assert data["points"] == 0
        assert data["level"] == 1
        assert data["badges"] == []
        assert "hashed_password" not in data

    def test_register_duplicate_returns_400(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = ValueError(
            "User with this email already exists"
        )
        response = client.post(
            "/api/v1/auth/register",
            json={
                "full_name": "Test",
                "email": "existing@example.com",
                "password": "password123",
            },
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "User with this email already exists"

    def test_register_invalid_email_returns_422(self, client, mock_register_use_case):
        response = client.post(
            "/api/v1/auth/register",
            json={"full_name": "Test", "email": "not-an-email", "password": "password123"},
        )
        assert response.status_code == 422
        mock_register_use_case.execute.assert_not_called()

    def test_login_success(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = TokenResponse(access_token="jwt.token.here")
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "validpass123"},
        )
        assert response.status_code == 200
        assert response.json()["access_token"] == "jwt.token.here"

    def test_login_invalid_returns_401(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = None
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "wrongpass123"},
        )
        assert response.status_code == 401

    def test_login_database_failure_returns_500(self, client, mock_login_use_case):
        mock_login_use_case.execute.side_effect = RuntimeError("Database error while finding user")
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "validpass123"},
        )
        assert response.status_code == 500
        assert "Database" not in response.json()["detail"]

    def test_me_requires_token(self, client):
        response = client.get("/api/v1/auth/me")
        assert response.status_code in (401, 403)

    def test_me(self, client, authenticated):
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 200
        assert response.json()["id"] == "usr-1"
        assert response.json()["points"] == 40

    def test_logout(self, client, authenticated, mock_logout_use_case):
        response = client.post("/api/v1/auth/logout", headers={"Authorization": "Bearer jwt.token.here"})
        assert response.status_code == 204
        mock_logout_use_case.execute.assert_awaited_once_with("jwt.token.here")
