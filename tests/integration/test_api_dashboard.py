"""
Integration tests for dashboard, leaderboard, profile, eco-tips, health and
the notifications WebSocket.
"""
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from environ_backend.application.dto.dashboard_dto import LeaderboardEntry, WeatherResponse
from environ_backend.application.dto.profile_dto import ProfileResponse
from environ_backend.application.use_cases.dashboard import (
    GetDashboardUseCase,
    GetLeaderboardUseCase,
    GetRoadmapUseCase,
    GetWeatherUseCase,
)
from environ_backend.application.use_cases.eco_tips import GetEcoTipUseCase, GetRecommendationUseCase
from environ_backend.application.use_cases.profile import GetProfileUseCase, UpdateProfileUseCase
from environ_backend.core.exceptions import TextGenerationError
from environ_backend.main import app

pytestmark = pytest.mark.integration


class TestDashboardAPI:
    @pytest.fixture
    def use_cases(self):
        return {
            cls: AsyncMock(spec=cls)
            for cls in (GetDashboardUseCase, GetLeaderboardUseCase, GetRoadmapUseCase, GetWeatherUseCase)
        }

    @pytest.fixture
    def client(self, make_client, authenticated, use_cases):
        return make_client("dashboard_controller", use_cases)

    def test_leaderboard_without_limit(self, client, use_cases):
        use_cases[GetLeaderboardUseCase].execute.return_value = [
            LeaderboardEntry(rank=1, user_id="usr-2", full_name="Ana", points=300, level=4),
            LeaderboardEntry(rank=2, user_id="usr-1", full_name="Test User", points=40, level=1),
        ]
        response = client.get("/api/v1/leaderboard")

        assert response.status_code == 200
        assert [e["rank"] for e in response.json()] == [1, 2]
        use_cases[GetLeaderboardUseCase].execute.assert_awaited_once_with(None)

    def test_leaderboard_limit(self, client, use_cases):
        use_cases[GetLeaderboardUseCase].execute.return_value = []
        client.get("/api/v1/leaderboard?limit=10")
        use_cases[GetLeaderboardUseCase].execute.assert_awaited_once_with(10)

    def test_weather_unavailable_still_200(self, client, use_cases):
        use_cases[GetWeatherUseCase].execute.return_value = WeatherResponse(
            city="London", summary="Weather data unavailable", available=False
        )
        response = client.get("/api/v1/dashboard/weather?city=London")

        assert response.status_code == 200
        assert response.json()["available"] is False
        use_cases[GetWeatherUseCase].execute.assert_awaited_once_with("usr-1", "London")

    def test_dashboard_unknown_user_returns_404(self, client, use_cases):
        use_cases[GetDashboardUseCase].execute.side_effect = ValueError("User not found")
        assert client.get("/api/v1/dashboard").status_code == 404

    def test_dashboard_database_failure_returns_500(self, client, use_cases):
        use_cases[GetDashboardUseCase].execute.side_effect = RuntimeError("Database error")
        response = client.get("/api/v1/dashboard")
        assert response.status_code == 500
        assert response.json()["detail"] == "Loading dashboard failed. Please try again."


class TestProfileAPI:
    @pytest.fixture
    def use_cases(self):
        return {cls: AsyncMock(spec=cls) for cls in (GetProfileUseCase, UpdateProfileUseCase)}

    @pytest.fixture
    def client(self, make_client, authenticated, use_cases):
        return make_client("profile_controller", use_cases)

    def test_update(self, client, use_cases):
        use_cases[UpdateProfileUseCase].execute.return_value = ProfileResponse(
            full_name="New Name", email="test@example.com", city="Paris"
        )
        response = client.patch("/api/v1/profile", json={"full_name": "New Name", "city": "Paris"})

        assert response.status_code == 200
        assert response.json()["city"] == "Paris"

    def test_nothing_to_update_returns_400(self, client, use_cases):
        use_cases[UpdateProfileUseCase].execute.side_effect = ValueError("Nothing to update")
        assert client.patch("/api/v1/profile", json={}).status_code == 400


class TestEcoTipsAPI:
    @pytest.fixture
    def use_cases(self):
        return {cls: AsyncMock(spec=cls) for cls in (GetEcoTipUseCase, GetRecommendationUseCase)}

    @pytest.fixture
    def client(self, make_client, authenticated, use_cases):
        return make_client("eco_tips_controller", use_cases)

    def test_reply(self, client, use_cases):
        use_cases[GetEcoTipUseCase].execute.return_value = "Use a reusable bottle."
        response = client.post("/api/v1/eco-tips", json={"message": "How do I cut plastic?"})
        assert response.json() == {"reply": "Use a reusable bottle."}

    def test_vendor_failure_returns_502(self, client, use_cases):
        use_cases[GetEcoTipUseCase].execute.side_effect = TextGenerationError("quota exceeded")
        response = client.post("/api/v1/eco-tips", json={"message": "Tips?"})
        assert response.status_code == 502
        assert "quota" not in response.json()["detail"]

    def test_recommendation(self, client, use_cases):
        use_cases[GetRecommendationUseCase].execute.return_value = "Great! Try composting next."
        response = client.post("/api/v1/eco-tips/recommendation", json={"answer": "yes"})
        assert response.json() == {"recommendation": "Great! Try composting next."}


def test_health():
    response = TestClient(app).get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_websocket_requires_token():
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with TestClient(app).websocket_connect("/api/v1/notifications/ws"):
            pass
    assert exc_info.value.code == 1008
