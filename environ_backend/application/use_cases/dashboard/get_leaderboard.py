from typing import List, Optional, Sequence

from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.dashboard_dto import LeaderboardEntry


def rank_users(users: Sequence[User]) -> List[LeaderboardEntry]:
    """
    Competition ranking over users already sorted by points: ties share a
    rank and the next rank skips (100, 90, 90, 80 -> 1, 2, 2, 4).
    """
    entries: List[LeaderboardEntry] = []
    rank = 0
    previous_points = None
    for position, user in enumerate(users, start=1):
        if user.points != previous_points:
            rank = position
            previous_points = user.points
        entries.append(
            LeaderboardEntry(
                rank=rank,
                user_id=user.id or "",
                full_name=user.full_name,
                points=user.points,
                level=user.level,
            )
        )
    return entries


class GetLeaderboardUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, limit: Optional[int] = None) -> List[LeaderboardEntry]:
        """Whole leaderboard when limit is None"""
        if limit is not None and limit < 1:
            raise ValueError("Limit must be at least 1")
        users = await self.user_repository.list_by_points(limit)
        return rank_users(users)
