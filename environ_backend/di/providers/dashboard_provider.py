from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.gamification import GamificationRules
from ...domain.repositories import (
    ChallengeRepository,
    ClassificationRepository,
    PostRepository,
    ReferralRepository,
    UserRepository,
)
from ...application.use_cases.dashboard import (
    GetDashboardUseCase,
    GetLeaderboardUseCase,
    GetRoadmapUseCase,
    GetWeatherUseCase,
)
from ...infrastructure.external import OpenWeatherClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DashboardProvider:
    """Dashboard, leaderboard, weather and roadmap use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetDashboardUseCase,
            lambda: GetDashboardUseCase(
                user_repository=container.get(UserRepository),
                classification_repository=container.get(ClassificationRepository),
                rules=container.get(GamificationRules),
            )
        )

        container.register_factory(
            GetLeaderboardUseCase,
            lambda: GetLeaderboardUseCase(user_repository=container.get(UserRepository))
        )

        container.register_factory(
            GetWeatherUseCase,
            lambda: GetWeatherUseCase(
                user_repository=container.get(UserRepository),
                weather_client=container.get(OpenWeatherClient),
                default_city=get_settings().default_city,
            )
        )

        container.register_factory(
            GetRoadmapUseCase,
            lambda: GetRoadmapUseCase(
                user_repository=container.get(UserRepository),
                challenge_repository=container.get(ChallengeRepository),
                post_repository=container.get(PostRepository),
                referral_repository=container.get(ReferralRepository),
                rules=container.get(GamificationRules),
            )
        )
