from typing import List

from pydantic import BaseModel, Field

from .classification_dto import ClassificationResponse
from .user_dto import UserResponse


class LeaderboardEntry(BaseModel):
    rank: int
    user_id: str
    full_name: str
    points: int
    level: int


class DashboardResponse(BaseModel):
    user: UserResponse
    points_to_next_level: int
    progress_percentage: float
    tree_growth_percentage: float
    classifications_count: int
    recyclable_count: int
    co2_saved_kg: float
    rank: int
    leaderboard: List[LeaderboardEntry] = Field(default_factory=list)
    recent_classifications: List[ClassificationResponse] = Field(default_factory=list)


class WeatherResponse(BaseModel):
    city: str
    summary: str
    available: bool = True


class RoadmapTierResponse(BaseModel):
    level: int
    title: str
    requirements: str
    points_required: int
    is_unlocked: bool
    features: str


class RoadmapResponse(BaseModel):
    level: int
    title: str
    points: int
    next_level_points_required: int
    tiers: List[RoadmapTierResponse]
