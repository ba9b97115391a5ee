from typing import TYPE_CHECKING
from ...domain.repositories import (
    ChallengeRepository,
    PostRepository,
    ReferralRepository,
    UserRepository,
)
from ...application.services.reward_service import RewardService
from ...application.use_cases.community import (
    CreatePostUseCase,
    CreateReferralUseCase,
    GetCommunityStatsUseCase,
    JoinChallengeUseCase,
    ListChallengesUseCase,
    ListPostsUseCase,
    ListReferralsUseCase,
    RecordChallengeProgressUseCase,
)
from ...infrastructure.notifications import NotificationService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CommunityProvider:
    """Community use case provider - posts, challenges, referrals"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register community use cases.
        Use cases are created on-demand via factories.
        """
        # Posts
        container.register_factory(
            CreatePostUseCase,
            lambda: CreatePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
                reward_service=container.get(RewardService),
                notification_service=container.get(NotificationService),
            )
        )
        container.register_factory(
            ListPostsUseCase,
            lambda: ListPostsUseCase(post_repository=container.get(PostRepository))
        )

        # Challenges
        container.register_factory(
            ListChallengesUseCase,
            lambda: ListChallengesUseCase(challenge_repository=container.get(ChallengeRepository))
        )
        container.register_factory(
            JoinChallengeUseCase,
            lambda: JoinChallengeUseCase(challenge_repository=container.get(ChallengeRepository))
        )
        container.register_factory(
            RecordChallengeProgressUseCase,
            lambda: RecordChallengeProgressUseCase(
                challenge_repository=container.get(ChallengeRepository),
                reward_service=container.get(RewardService),
                notification_service=container.get(NotificationService),
            )
        )

        # Referrals
        container.register_factory(
            CreateReferralUseCase,
            lambda: CreateReferralUseCase(
                referral_repository=container.get(ReferralRepository),
                user_repository=container.get(UserRepository),
            )
        )
        container.register_factory(
            ListReferralsUseCase,
            lambda: ListReferralsUseCase(referral_repository=container.get(ReferralRepository))
        )

        container.register_factory(
            GetCommunityStatsUseCase,
            lambda: GetCommunityStatsUseCase(
                challenge_repository=container.get(ChallengeRepository),
                post_repository=container.get(PostRepository),
                referral_repository=container.get(ReferralRepository),
            )
        )
