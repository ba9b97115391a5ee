from .get_dashboard import GetDashboardUseCase
from .get_leaderboard import GetLeaderboardUseCase
from .get_weather import GetWeatherUseCase
from .get_roadmap import GetRoadmapUseCase

__all__ = [
    "GetDashboardUseCase",
    "GetLeaderboardUseCase",
    "GetWeatherUseCase",
    "GetRoadmapUseCase",
]
