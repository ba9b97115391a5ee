from ....domain.repositories.referral_repository import ReferralRepository
from ...dto.community_dto import ReferralListResponse, ReferralResponse


class ListReferralsUseCase:
    def __init__(self, referral_repository: ReferralRepository) -> None:
        self.referral_repository = referral_repository

    async def execute(self, user_id: str) -> ReferralListResponse:
        referrals = await self.referral_repository.list_by_referrer(user_id)
        return ReferralListResponse(
            count=len(referrals),
            referrals=[
                ReferralResponse(id=r.id or "", referred_email=r.referred_email, created_at=r.created_at)
                for r in referrals
            ],
        )
