"""
Reward Service
==============

Single entry point for every points/level/badge change a user can earn.

A grant is two atomic updates on the user document:

1. ``increment_stats`` adds the counters and hands back the user as it was
   before the increment.
2. ``promote`` raises the level with ``$max`` and adds badges with
   ``$addToSet``.

Because the first step returns the pre-increment document, the post-increment
totals are known without a second read, and concurrent grants can never lower
a level or duplicate a badge.
"""

# Standard library imports
import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

# Local application imports
from ...domain.gamification import GamificationRules, UserStats, evaluate_badges, target_level
from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.notifications.notification_service import (
    BADGE_UNLOCKED,
    LEADERBOARD_UPDATED,
    LEVEL_UP,
    NotificationService,
)

logger = logging.getLogger(__name__)


@dataclass
class RewardOutcome:
    user: User
    points_awarded: int
    level_up: bool = False
    new_badges: List[str] = field(default_factory=list)


class RewardService:
    def __init__(
        self,
        user_repository: UserRepository,
        rules: GamificationRules,
        notification_service: Optional[NotificationService] = None,
    ) -> None:
        self.user_repository = user_repository
        self.rules = rules
        self.notification_service = notification_service

    async def grant(
        self,
        user_id: str,
        points: int = 0,
        recyclable_items: int = 0,
        co2_kg: float = 0.0,
        extra_badges: Sequence[str] = (),
        challenge_level: Optional[int] = None,
        posts_count: Optional[int] = None,
    ) -> RewardOutcome:
        """
        Apply a reward and re-evaluate level and badges.

        Args:
            user_id: User receiving the reward
            points: Points to add (>= 0)
            recyclable_items: Recyclable items to add to the counter
            co2_kg: CO2 savings to add
            extra_badges: Badges granted directly (e.g. by a challenge)
            challenge_level: Level granted by a completed challenge
            posts_count: User's post count, when the caller knows it

        Returns:
            RewardOutcome with the updated user and what changed

        Raises:
            ValueError: If points are negative or the user does not exist
        """
        if points < 0:
            raise ValueError("Points cannot be negative")

        before = await self.user_repository.increment_stats(
            user_id,
            points=points,
            recyclable_items=recyclable_items,
            co2_kg=co2_kg,
        )
        if before is None:
            raise ValueError("User not found")

        stats = UserStats(
            points=before.points + points,
            recyclable_count=before.recyclable_count + recyclable_items,
            co2_saved_kg=before.co2_saved_kg + co2_kg,
            posts_count=posts_count,
        )

        held = list(before.badges)
        granted = [badge for badge in extra_badges if badge and badge not in held]
        granted += evaluate_badges(self.rules, stats, held + granted)
        level = target_level(self.rules, stats.points, before.level, challenge_level)

        if level > before.level or granted:
            after = await self.user_repository.promote(user_id, level, granted)
            if after is None:
                raise ValueError("User not found")
        else:
            after = replace(
                before,
                points=stats.points,
                recyclable_count=stats.recyclable_count,
                co2_saved_kg=stats.co2_saved_kg,
            )

        # Only badges this grant awarded; a concurrent grant reports its own
        new_badges = [badge for badge in granted if badge in after.badges]
        outcome = RewardOutcome(
            user=after,
            points_awarded=points,
            level_up=after.level > before.level,
            new_badges=new_badges,
        )

        if outcome.level_up or new_badges:
            logger.info(
                f"User {user_id} rewarded: level {before.level} -> {after.level}, new badges {new_badges}"
            )
        await self._publish(user_id, outcome)
        return outcome

    async def _publish(self, user_id: str, outcome: RewardOutcome) -> None:
        if self.notification_service is None:
            return
        if outcome.level_up:
            await self.notification_service.notify_user(
                user_id, LEVEL_UP, {"level": outcome.user.level}
            )
        for badge in outcome.new_badges:
            await self.notification_service.notify_user(
                user_id, BADGE_UNLOCKED, {"badge": badge}
            )
        if outcome.points_awarded:
            await self.notification_service.broadcast(
                LEADERBOARD_UPDATED,
                {"user_id": user_id, "points": outcome.user.points, "level": outcome.user.level},
            )
