# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Query, status

# Local application imports
from ...application.dto.dashboard_dto import (
    DashboardResponse,
    LeaderboardEntry,
    RoadmapResponse,
    WeatherResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.dashboard import (
    GetDashboardUseCase,
    GetLeaderboardUseCase,
    GetRoadmapUseCase,
    GetWeatherUseCase,
)
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import internal_error

router = APIRouter(tags=["dashboard"])
leaderboard_router = APIRouter(tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(current_user: UserResponse = Depends(get_current_user)) -> DashboardResponse:
    """Stats, level progress, rank, top of the leaderboard and recent classifications"""
    use_case = get_container().get(GetDashboardUseCase)
    try:
        return await use_case.execute(current_user.id)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    except RuntimeError as exception:
        raise internal_error(exception, "Loading dashboard")


@router.get("/weather", response_model=WeatherResponse)
async def get_weather(
    city: Optional[str] = Query(None, max_length=100),
    current_user: UserResponse = Depends(get_current_user),
) -> WeatherResponse:
    use_case = get_container().get(GetWeatherUseCase)
    try:
        return await use_case.execute(current_user.id, city)
    except RuntimeError as exception:
        raise internal_error(exception, "Loading weather")


@router.get("/roadmap", response_model=RoadmapResponse)
async def get_roadmap(current_user: UserResponse = Depends(get_current_user)) -> RoadmapResponse:
    use_case = get_container().get(GetRoadmapUseCase)
    try:
        return await use_case.execute(current_user.id)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    except RuntimeError as exception:
        raise internal_error(exception, "Loading roadmap")


@leaderboard_router.get("", response_model=List[LeaderboardEntry])
async def get_leaderboard(
    limit: Optional[int] = Query(None, ge=1),
    current_user: UserResponse = Depends(get_current_user),
) -> List[LeaderboardEntry]:
    """Users ranked by points; the whole board when limit is omitted"""
    use_case = get_container().get(GetLeaderboardUseCase)
    try:
        return await use_case.execute(limit)
    except RuntimeError as exception:
        raise internal_error(exception, "Loading leaderboard")
