# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None

USERS = "users"
CLASSIFICATIONS = "classifications"
POSTS = "posts"
CHALLENGES = "challenges"
CHALLENGE_PARTICIPANTS = "challenge_participants"
REFERRALS = "referrals"
REVOKED_TOKENS = "revoked_tokens"


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, serverSelectionTimeoutMS=5000)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_collection(name: str) -> AsyncIOMotorCollection:
    """Get a collection from the application database"""
    return get_database()[name]


def close_database() -> None:
    """Close the shared client (call on application shutdown)"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("Closed MongoDB client")
    _mongo_client = None
    _mongo_database = None


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """Create the indexes the repositories rely on (idempotent)"""
    await database[USERS].create_index("email", unique=True)
    await database[USERS].create_index([("points", DESCENDING)])
    await database[CLASSIFICATIONS].create_index([("user_id", ASCENDING), ("timestamp", DESCENDING)])
    await database[POSTS].create_index([("created_at", DESCENDING)])
    await database[POSTS].create_index("user_id")
    await database[CHALLENGES].create_index("title", unique=True)
    await database[CHALLENGE_PARTICIPANTS].create_index(
        [("challenge_id", ASCENDING), ("user_id", ASCENDING)], unique=True
    )
    await database[REFERRALS].create_index(
        [("referrer_id", ASCENDING), ("referred_email", ASCENDING)], unique=True
    )
    # TTL: revoked tokens disappear once they would have expired anyway
    await database[REVOKED_TOKENS].create_index("expires_at", expireAfterSeconds=0)
    await database[REVOKED_TOKENS].create_index("jti", unique=True)
    logger.info("MongoDB indexes ensured")
