from abc import ABC, abstractmethod
from typing import List
from ..models.community import Post


class PostRepository(ABC):
    """Repository interface - defines contract for community posts"""

    @abstractmethod
    async def save(self, post: Post) -> Post:
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 20) -> List[Post]:
        """Newest posts across all users"""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: str) -> int:
        pass
