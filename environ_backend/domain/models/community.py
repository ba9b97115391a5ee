# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Post:
    """A community post shared by a user"""
    id: Optional[str]
    user_id: str
    author_name: str
    content: str
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("User ID is required")
        if not self.content or not self.content.strip():
            raise ValueError("Post content is required")


@dataclass
class Challenge:
    """A goal-tracked gamification unit with a numeric target"""
    id: Optional[str]
    title: str
    description: str
    target: float
    unit: str = "items"
    badge: Optional[str] = None
    level_reward: Optional[int] = None
    points_reward: int = 0
    active: bool = True

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Challenge title is required")
        if self.target <= 0:
            raise ValueError("Challenge target must be positive")
        if self.level_reward is not None and self.level_reward < 1:
            raise ValueError("Level reward must be at least 1")


@dataclass
class ChallengeParticipation:
    """Per-user progress on a challenge"""
    id: Optional[str]
    challenge_id: str
    user_id: str
    progress: float = 0.0
    completed: bool = False
    joined_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.challenge_id or not self.user_id:
            raise ValueError("Challenge ID and user ID are required")
        if self.progress < 0:
            raise ValueError("Progress cannot be negative")


@dataclass
class Referral:
    """An invitation sent by a user to a friend's email"""
    id: Optional[str]
    referrer_id: str
    referred_email: str
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.referrer_id:
            raise ValueError("Referrer ID is required")
        if not self.referred_email or "@" not in self.referred_email:
            raise ValueError("Invalid email format")
