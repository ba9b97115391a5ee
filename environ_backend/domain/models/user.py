from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    full_name: str
    email: str
    hashed_password: str
    points: int = 0
    level: int = 1
    badges: List[str] = field(default_factory=list)
    city: Optional[str] = None
    recyclable_count: int = 0
    co2_saved_kg: float = 0.0
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.full_name or len(self.full_name.strip()) < 2:
            raise ValueError("Full name must be at least 2 characters")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        if self.points < 0:
            raise ValueError("Points cannot be negative")
        if self.level < 1:
            raise ValueError("Level must be at least 1")
