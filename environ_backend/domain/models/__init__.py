from .user import User
from .classification import Classification, parse_classification_text
from .community import Post, Challenge, ChallengeParticipation, Referral

__all__ = [
    "User",
    "Classification",
    "parse_classification_text",
    "Post",
    "Challenge",
    "ChallengeParticipation",
    "Referral",
]
