from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field


class PostCreateRequest(BaseModel):
    content: str = Field(min_length=1, max_length=1000)


class PostResponse(BaseModel):
    id: str
    user_id: str
    author_name: str
    content: str
    created_at: Optional[datetime] = None
    new_badges: List[str] = Field(default_factory=list)


class ChallengeResponse(BaseModel):
    id: str
    title: str
    description: str
    target: float
    unit: str
    badge: Optional[str] = None
    points_reward: int = 0
    joined: bool = False
    progress: float = 0.0
    completed: bool = False


class ChallengeProgressRequest(BaseModel):
    amount: float = Field(gt=0)


class ChallengeProgressResponse(BaseModel):
    challenge: ChallengeResponse
    points_awarded: int = 0
    level: Optional[int] = None
    level_up: bool = False
    new_badges: List[str] = Field(default_factory=list)


class ReferralCreateRequest(BaseModel):
    email: EmailStr


class ReferralResponse(BaseModel):
    id: str
    referred_email: str
    created_at: Optional[datetime] = None


class ReferralListResponse(BaseModel):
    count: int
    referrals: List[ReferralResponse]


class CommunityStatsResponse(BaseModel):
    challenges_completed: int
    posts_shared: int
    referrals_count: int
