from .mongo_connection import get_database, get_collection, close_database, ensure_indexes
from .mongo_user_repository import MongoUserRepository
from .mongo_classification_repository import MongoClassificationRepository
from .mongo_post_repository import MongoPostRepository
from .mongo_challenge_repository import MongoChallengeRepository
from .mongo_referral_repository import MongoReferralRepository
from .mongo_revoked_token_repository import MongoRevokedTokenRepository
from .seed import seed_challenges

__all__ = [
    "get_database",
    "get_collection",
    "close_database",
    "ensure_indexes",
    "MongoUserRepository",
    "MongoClassificationRepository",
    "MongoPostRepository",
    "MongoChallengeRepository",
    "MongoReferralRepository",
    "MongoRevokedTokenRepository",
    "seed_challenges",
]
