# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse
from ...services.reward_service import RewardService

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user, granting the login bonus and issuing a JWT"""

    def __init__(self, user_repository: UserRepository, reward_service: RewardService) -> None:
        self.user_repository = user_repository
        self.reward_service = reward_service

    async def execute(self, request: UserLoginRequest) -> Optional[TokenResponse]:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse if authentication successful, None otherwise
        """
        user = await self.user_repository.find_by_email(request.email.lower())
        if user is None:
            return None

        if not verify_password(request.password, user.hashed_password):
            return None

        bonus = self.reward_service.rules.login_bonus_points
        if bonus > 0:
            try:
                await self.reward_service.grant(user.id or "", points=bonus)
            except RuntimeError as e:
                # Login still succeeds without the bonus
                logger.error(f"Failed to grant login bonus to user {user.id}: {e}")

        token = create_jwt_token({
            "sub": user.id or "",  # JWT standard claim (subject)
            UserFields.EMAIL: user.email,
        })

        return TokenResponse(access_token=token)
