from typing import TYPE_CHECKING
from ...domain.repositories import (
    ChallengeRepository,
    ClassificationRepository,
    PostRepository,
    ReferralRepository,
    RevokedTokenRepository,
    UserRepository,
)
from ...infrastructure.db import (
    MongoChallengeRepository,
    MongoClassificationRepository,
    MongoPostRepository,
    MongoReferralRepository,
    MongoRevokedTokenRepository,
    MongoUserRepository,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )

        container.register_singleton(
            ClassificationRepository,
            MongoClassificationRepository(
                classification_collection=container.get("classification_collection")
            )
        )

        container.register_singleton(
            PostRepository,
            MongoPostRepository(post_collection=container.get("post_collection"))
        )

        container.register_singleton(
            ChallengeRepository,
            MongoChallengeRepository(
                challenge_collection=container.get("challenge_collection"),
                participant_collection=container.get("participant_collection"),
            )
        )

        container.register_singleton(
            ReferralRepository,
            MongoReferralRepository(referral_collection=container.get("referral_collection"))
        )

        container.register_singleton(
            RevokedTokenRepository,
            MongoRevokedTokenRepository(token_collection=container.get("revoked_token_collection"))
        )
