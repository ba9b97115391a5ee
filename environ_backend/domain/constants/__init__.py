"""Constants for domain model field names"""

from .user_fields import UserFields
from .classification_fields import ClassificationFields
from .community_fields import (
    PostFields,
    ChallengeFields,
    ParticipantFields,
    ReferralFields,
    RevokedTokenFields,
)

__all__ = [
    "UserFields",
    "ClassificationFields",
    "PostFields",
    "ChallengeFields",
    "ParticipantFields",
    "ReferralFields",
    "RevokedTokenFields",
]
