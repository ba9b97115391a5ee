"""
Fixtures for API tests. Use cases are replaced by AsyncMocks resolved from a
mocked container; no database or vendor API is touched.
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from environ_backend.api.v1.dependencies import get_current_user
from environ_backend.application.dto.user_dto import UserResponse
from environ_backend.main import app


@pytest.fixture
def current_user():
    return UserResponse(id="usr-1", full_name="Test User", email="test@example.com", points=40, level=1)


@pytest.fixture
def authenticated(current_user):
    """Bypass bearer auth for protected routes."""
    app.dependency_overrides[get_current_user] = lambda: current_user
    yield current_user
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def make_client():
    """
    Build a TestClient whose controller resolves the given use case mocks.

    Usage: make_client("classification_controller", {ClassifyWasteUseCase: uc})
    """
    patches = []

    def _make(controller: str, use_cases: dict) -> TestClient:
        container = MagicMock()
        container.get.side_effect = lambda key: use_cases[key]
        patcher = patch(f"environ_backend.api.v1.{controller}.get_container", return_value=container)
        patcher.start()
        patches.append(patcher)
        # No context manager: the lifespan would try to reach MongoDB
        return TestClient(app)

    yield _make
    for patcher in patches:
        patcher.stop()
