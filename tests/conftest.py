"""
Shared pytest fixtures for EnviRon backend tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from environ_backend.domain.gamification import GamificationRules
from environ_backend.domain.models.user import User


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_environ_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "GEMINI_API_KEY": "test_gemini_key_placeholder",
        "LOCAL_TIMEZONE": "UTC",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.local_timezone = "UTC"
    mock.gemini_api_key = "test_gemini_key"
    mock.gemini_model = "gemini-1.5-flash"
    mock.groq_api_key = "test_groq_key"
    mock.vlm_model = "test-vision-model"
    mock.openweather_api_key = "test_weather_key"
    mock.default_city = "London"
    mock.max_upload_mb = 10

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("environ_backend.core.config.get_settings", return_value=mock), patch(
        "environ_backend.core.security.get_settings", return_value=mock
    ), patch("environ_backend.utils.datetime_utils.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def rules():
    """Default gamification rules (10 login bonus, 20/5 points, 100 points per level)."""
    return GamificationRules()


@pytest.fixture
def make_user():
    """Factory for domain users with sensible defaults."""
    def _make_user(**overrides):
        fields = {
            "id": "usr-1",
            "full_name": "Test User",
            "email": "test@example.com",
            "hashed_password": "$2b$12$hashed",
        }
        fields.update(overrides)
        return User(**fields)
    return _make_user


@pytest.fixture
def mock_notification_service():
    service = AsyncMock()
    service.notify_user.return_value = 1
    service.broadcast.return_value = 1
    return service
