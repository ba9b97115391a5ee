from ....domain.models.community import Referral
from ....domain.repositories.referral_repository import ReferralRepository
from ....domain.repositories.user_repository import UserRepository
from ....utils.datetime_utils import utc_now
from ...dto.community_dto import ReferralCreateRequest, ReferralResponse


class CreateReferralUseCase:
    def __init__(
        self,
        referral_repository: ReferralRepository,
        user_repository: UserRepository,
    ) -> None:
        self.referral_repository = referral_repository
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: ReferralCreateRequest) -> ReferralResponse:
        """
        Raises:
            ValueError: Self-referral, duplicate referral or unknown user
        """
        email = request.email.strip().lower()

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")
        if user.email.lower() == email:
            raise ValueError("You cannot refer yourself")

        if await self.referral_repository.find(user_id, email) is not None:
            raise ValueError("You have already referred this email")

        # The unique index still guards against a concurrent duplicate
        referral = await self.referral_repository.save(
            Referral(id=None, referrer_id=user_id, referred_email=email, created_at=utc_now())
        )
        return ReferralResponse(
            id=referral.id or "",
            referred_email=referral.referred_email,
            created_at=referral.created_at,
        )
