# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.gamification import challenge_reward
from ....domain.repositories.challenge_repository import ChallengeRepository
from ....infrastructure.notifications.notification_service import (
    CHALLENGE_COMPLETED,
    NotificationService,
)
from ...dto.community_dto import ChallengeProgressRequest, ChallengeProgressResponse
from ...services.reward_service import RewardService
from .challenge_mapping import to_challenge_response

logger = logging.getLogger(__name__)


class RecordChallengeProgressUseCase:
    """
    Add progress to a joined challenge.

    Progress is capped at the target. The update that reaches the target is
    the only one that can flip the participation to completed, so the
    completion reward (points, badge, level) is granted exactly once.
    """

    def __init__(
        self,
        challenge_repository: ChallengeRepository,
        reward_service: RewardService,
        notification_service: Optional[NotificationService] = None,
    ) -> None:
        self.challenge_repository = challenge_repository
        self.reward_service = reward_service
        self.notification_service = notification_service

    async def execute(
        self,
        user_id: str,
        challenge_id: str,
        request: ChallengeProgressRequest,
    ) -> ChallengeProgressResponse:
        """
        Raises:
            NotFoundError: Unknown challenge
            ValueError: Not joined, already completed, or non-positive amount
        """
        if request.amount <= 0:
            raise ValueError("Progress amount must be positive")

        challenge = await self.challenge_repository.find_by_id(challenge_id)
        if challenge is None:
            raise NotFoundError("Challenge not found")
        challenge_id = challenge.id or challenge_id

        existing = await self.challenge_repository.find_participation(challenge_id, user_id)
        if existing is None:
            raise ValueError("You have not joined this challenge")
        if existing.completed:
            raise ValueError("Challenge already completed")

        participation = await self.challenge_repository.add_progress(
            challenge_id, user_id, request.amount, challenge.target
        )
        if participation is None:
            # Completed by a concurrent request in between
            raise ValueError("Challenge already completed")

        response = ChallengeProgressResponse(challenge=to_challenge_response(challenge, participation))
        if not participation.completed:
            return response

        badge, level = challenge_reward(
            self.reward_service.rules, challenge.title, challenge.badge, challenge.level_reward
        )
        outcome = await self.reward_service.grant(
            user_id,
            points=challenge.points_reward,
            extra_badges=[badge] if badge else (),
            challenge_level=level,
        )
        logger.info(f"User {user_id} completed challenge '{challenge.title}'")

        if self.notification_service is not None:
            await self.notification_service.notify_user(
                user_id,
                CHALLENGE_COMPLETED,
                {"challenge_id": challenge_id, "title": challenge.title, "badge": badge},
            )

        response.points_awarded = outcome.points_awarded
        response.level = outcome.user.level
        response.level_up = outcome.level_up
        response.new_badges = outcome.new_badges
        return response
