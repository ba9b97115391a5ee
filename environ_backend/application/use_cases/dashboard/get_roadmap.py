# Local application imports
from ....domain.gamification import GamificationRules, roadmap
from ....domain.repositories.challenge_repository import ChallengeRepository
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.referral_repository import ReferralRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.dashboard_dto import RoadmapResponse, RoadmapTierResponse


class GetRoadmapUseCase:
    """The Eco-Novice to Eco-Hero level roadmap with the user's progress filled in"""

    def __init__(
        self,
        user_repository: UserRepository,
        challenge_repository: ChallengeRepository,
        post_repository: PostRepository,
        referral_repository: ReferralRepository,
        rules: GamificationRules,
    ) -> None:
        self.user_repository = user_repository
        self.challenge_repository = challenge_repository
        self.post_repository = post_repository
        self.referral_repository = referral_repository
        self.rules = rules

    async def execute(self, user_id: str) -> RoadmapResponse:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")

        tiers = roadmap(
            level=user.level,
            points=user.points,
            challenges_completed=await self.challenge_repository.count_completed(user_id),
            posts_shared=await self.post_repository.count_by_user(user_id),
            referrals_count=await self.referral_repository.count_by_referrer(user_id),
        )
        current = max((tier for tier in tiers if tier.is_unlocked), key=lambda tier: tier.level)

        return RoadmapResponse(
            level=user.level,
            title=current.title,
            points=user.points,
            next_level_points_required=user.level * self.rules.points_per_level,
            tiers=[
                RoadmapTierResponse(
                    level=tier.level,
                    title=tier.title,
                    requirements=tier.requirements,
                    points_required=tier.points_required,
                    is_unlocked=tier.is_unlocked,
                    features=tier.features,
                )
                for tier in tiers
            ],
        )
