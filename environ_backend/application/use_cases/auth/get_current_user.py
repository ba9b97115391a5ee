# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.revoked_token_repository import RevokedTokenRepository
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""

    def __init__(
        self,
        user_repository: UserRepository,
        revoked_token_repository: RevokedTokenRepository,
    ) -> None:
        self.user_repository = user_repository
        self.revoked_token_repository = revoked_token_repository

    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            UserResponse with user information

        Raises:
            ValueError: If token is invalid, revoked or user not found
        """
        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            raise ValueError(f"Invalid or expired token: {str(exception)}")

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise ValueError("Invalid authentication payload: missing user ID")

        jti: Optional[str] = payload.get("jti")
        if jti and await self.revoked_token_repository.is_revoked(jti):
            raise ValueError("Token has been revoked")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")

        return UserResponse.from_user(user)
