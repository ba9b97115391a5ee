# Standard library imports
from datetime import datetime, timezone

# Local application imports
from ....domain.repositories.revoked_token_repository import RevokedTokenRepository
from ....core.security import decode_jwt_token


class LogoutUserUseCase:
    """Revokes the presented token until it would have expired anyway"""

    def __init__(self, revoked_token_repository: RevokedTokenRepository) -> None:
        self.revoked_token_repository = revoked_token_repository

    async def execute(self, token: str) -> None:
        """
        Raises:
            ValueError: If the token is invalid or carries no token id
        """
        payload = decode_jwt_token(token)
        jti = payload.get("jti")
        if not jti:
            raise ValueError("Token cannot be revoked: missing token id")

        expires_at = datetime.fromtimestamp(int(payload.get("exp", 0)), tz=timezone.utc)
        await self.revoked_token_repository.revoke(jti, expires_at)
