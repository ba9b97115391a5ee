# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.revoked_token_repository import RevokedTokenRepository
from ...domain.constants import RevokedTokenFields
from .mongo_connection import REVOKED_TOKENS, get_collection


class MongoRevokedTokenRepository(RevokedTokenRepository):
    """MongoDB implementation of the token denylist (TTL index on expires_at)"""

    def __init__(self, token_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.token_collection = token_collection if token_collection is not None else get_collection(REVOKED_TOKENS)

    async def revoke(self, jti: str, expires_at: datetime) -> None:
        try:
            await self.token_collection.update_one(
                {RevokedTokenFields.JTI: jti},
                {"$set": {RevokedTokenFields.EXPIRES_AT: expires_at}},
                upsert=True,
            )
        except Exception as e:
            raise RuntimeError(f"Error revoking token: {str(e)}")

    async def is_revoked(self, jti: str) -> bool:
        if not jti:
            return False
        try:
            document = await self.token_collection.find_one({RevokedTokenFields.JTI: jti})
        except Exception as e:
            raise RuntimeError(f"Error checking token: {str(e)}")
        return document is not None
