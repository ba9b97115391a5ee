from .user_repository import UserRepository
from .classification_repository import ClassificationRepository
from .post_repository import PostRepository
from .challenge_repository import ChallengeRepository
from .referral_repository import ReferralRepository
from .revoked_token_repository import RevokedTokenRepository

__all__ = [
    "UserRepository",
    "ClassificationRepository",
    "PostRepository",
    "ChallengeRepository",
    "ReferralRepository",
    "RevokedTokenRepository",
]
