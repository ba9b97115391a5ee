from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    full_name: str
    email: EmailStr
    points: int = 0
    level: int = 1
    badges: List[str] = Field(default_factory=list)
    city: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            full_name=user.full_name,
            email=user.email,
            points=user.points,
            level=user.level,
            badges=list(user.badges),
            city=user.city,
        )
