from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass

    @abstractmethod
    async def update_profile(
        self,
        user_id: str,
        full_name: Optional[str] = None,
        city: Optional[str] = None,
    ) -> Optional[User]:
        """Overwrite editable profile fields, returning the updated user"""
        pass

    @abstractmethod
    async def increment_stats(
        self,
        user_id: str,
        points: int = 0,
        recyclable_items: int = 0,
        co2_kg: float = 0.0,
    ) -> Optional[User]:
        """Atomically increment counters, returning the user as it was BEFORE the update"""
        pass

    @abstractmethod
    async def promote(
        self,
        user_id: str,
        level: int,
        badges: Sequence[str] = (),
    ) -> Optional[User]:
        """Raise level (never lowers) and add badges (no duplicates), returning the updated user"""
        pass

    @abstractmethod
    async def list_by_points(self, limit: Optional[int] = None) -> List[User]:
        """Users ordered by points, highest first"""
        pass

    @abstractmethod
    async def count_with_more_points(self, points: int) -> int:
        """Number of users strictly ahead of the given score"""
        pass
