from abc import ABC, abstractmethod
from datetime import datetime


class RevokedTokenRepository(ABC):
    """Repository interface - denylist of logged-out access tokens"""

    @abstractmethod
    async def revoke(self, jti: str, expires_at: datetime) -> None:
        pass

    @abstractmethod
    async def is_revoked(self, jti: str) -> bool:
        pass
