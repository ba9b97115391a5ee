from ....domain.repositories.challenge_repository import ChallengeRepository
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.referral_repository import ReferralRepository
from ...dto.community_dto import CommunityStatsResponse


class GetCommunityStatsUseCase:
    def __init__(
        self,
        challenge_repository: ChallengeRepository,
        post_repository: PostRepository,
        referral_repository: ReferralRepository,
    ) -> None:
        self.challenge_repository = challenge_repository
        self.post_repository = post_repository
        self.referral_repository = referral_repository

    async def execute(self, user_id: str) -> CommunityStatsResponse:
        return CommunityStatsResponse(
            challenges_completed=await self.challenge_repository.count_completed(user_id),
            posts_shared=await self.post_repository.count_by_user(user_id),
            referrals_count=await self.referral_repository.count_by_referrer(user_id),
        )
