from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    CHALLENGE_PARTICIPANTS,
    CHALLENGES,
    CLASSIFICATIONS,
    POSTS,
    REFERRALS,
    REVOKED_TOKENS,
    USERS,
    get_collection,
    get_database,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database and every collection as singletons.
        Repositories only ever receive collections from here.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_collection(USERS))
        container.register_singleton("classification_collection", get_collection(CLASSIFICATIONS))
        container.register_singleton("post_collection", get_collection(POSTS))
        container.register_singleton("challenge_collection", get_collection(CHALLENGES))
        container.register_singleton("participant_collection", get_collection(CHALLENGE_PARTICIPANTS))
        container.register_singleton("referral_collection", get_collection(REFERRALS))
        container.register_singleton("revoked_token_collection", get_collection(REVOKED_TOKENS))
