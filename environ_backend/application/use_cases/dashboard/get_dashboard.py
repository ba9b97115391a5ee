# Local application imports
from ....domain.gamification import GamificationRules, level_progress
from ....domain.repositories.classification_repository import ClassificationRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.classification_dto import ClassificationResponse
from ...dto.dashboard_dto import DashboardResponse
from ...dto.user_dto import UserResponse
from .get_leaderboard import rank_users

DASHBOARD_LEADERBOARD_SIZE = 5
DASHBOARD_HISTORY_SIZE = 5


class GetDashboardUseCase:
    """Aggregates everything the home screen shows for one user"""

    def __init__(
        self,
        user_repository: UserRepository,
        classification_repository: ClassificationRepository,
        rules: GamificationRules,
    ) -> None:
        self.user_repository = user_repository
        self.classification_repository = classification_repository
        self.rules = rules

    async def execute(self, user_id: str) -> DashboardResponse:
        """
        Raises:
            ValueError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")

        progress = level_progress(self.rules, user.points, user.level)
        users_ahead = await self.user_repository.count_with_more_points(user.points)
        top_users = await self.user_repository.list_by_points(DASHBOARD_LEADERBOARD_SIZE)
        recent = await self.classification_repository.find_recent_by_user(user_id, DASHBOARD_HISTORY_SIZE)
        classifications_count = await self.classification_repository.count_by_user(user_id)

        return DashboardResponse(
            user=UserResponse.from_user(user),
            points_to_next_level=progress.points_to_next_level,
            progress_percentage=progress.progress_percentage,
            tree_growth_percentage=progress.tree_growth_percentage,
            classifications_count=classifications_count,
            recyclable_count=user.recyclable_count,
            co2_saved_kg=round(user.co2_saved_kg, 2),
            rank=users_ahead + 1,
            leaderboard=rank_users(top_users),
            recent_classifications=[ClassificationResponse.from_classification(c) for c in recent],
        )
