"""Default community challenges, upserted by title on startup."""
# Standard library imports
import logging
from typing import List

# Local application imports
from ...domain.models.community import Challenge
from ...domain.repositories.challenge_repository import ChallengeRepository

logger = logging.getLogger(__name__)


def default_challenges() -> List[Challenge]:
    return [
        Challenge(
            id=None,
            title="Recycle 50 kg",
            description="Community challenge: recycle 50 kg of waste together.",
            target=50,
            unit="kg",
            badge="Waste Warrior",
            level_reward=2,
            points_reward=50,
        ),
        Challenge(
            id=None,
            title="Plastic-Free Week",
            description="Go seven days without single-use plastic.",
            target=7,
            unit="days",
            badge="Plastic Buster",
            level_reward=3,
            points_reward=30,
        ),
        Challenge(
            id=None,
            title="Compost Starter",
            description="Compost food scraps ten times.",
            target=10,
            unit="items",
            badge="Compost Keeper",
            level_reward=2,
            points_reward=20,
        ),
    ]


async def seed_challenges(challenge_repository: ChallengeRepository) -> int:
    """Insert the default challenges that are missing. Returns how many were inserted."""
    inserted = 0
    for challenge in default_challenges():
        if await challenge_repository.insert_if_missing(challenge):
            inserted += 1
    if inserted:
        logger.info(f"Seeded {inserted} default challenges")
    return inserted
