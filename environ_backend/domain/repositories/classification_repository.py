from abc import ABC, abstractmethod
from typing import List
from ..models.classification import Classification


class ClassificationRepository(ABC):
    """Repository interface - defines contract for classification history"""

    @abstractmethod
    async def save(self, classification: Classification) -> Classification:
        """Insert a classification"""
        pass

    @abstractmethod
    async def find_recent_by_user(self, user_id: str, limit: int = 5) -> List[Classification]:
        """Newest classifications for a user"""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: str) -> int:
        """Total classifications for a user"""
        pass
