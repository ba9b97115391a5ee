"""
Points, levels, badges and the level roadmap.

Every number here is product configuration. GamificationRules carries the
values; the functions only read them, so the same rules object can be shared
by every use case.
"""
# Standard library imports
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

LEVEL_POLICY_POINTS = "points"
LEVEL_POLICY_CHALLENGES = "challenges"

COMMUNITY_STAR = "Community Star"
RECYCLER_PRO = "Recycler Pro"
CLIMATE_CHAMPION = "Climate Champion"
RECYCLER_ROOKIE = "Recycler Rookie"
ECO_WARRIOR = "Eco Warrior"


def _default_challenge_rewards() -> Dict[str, Tuple[str, int]]:
    return {
        "Recycle 50 kg": ("Waste Warrior", 2),
        "Plastic-Free Week": ("Plastic Buster", 3),
        "Compost Starter": ("Compost Keeper", 2),
    }


@dataclass(frozen=True)
class GamificationRules:
    login_bonus_points: int = 10
    recyclable_points: int = 20
    non_recyclable_points: int = 5
    points_per_level: int = 100
    level_policy: str = LEVEL_POLICY_POINTS
    co2_per_recyclable_kg: float = 0.2
    community_star_posts: int = 5
    recycler_pro_items: int = 10
    climate_champion_kg: float = 5.0
    point_badges: Tuple[Tuple[int, str], ...] = ((100, RECYCLER_ROOKIE), (500, ECO_WARRIOR))
    # challenge title -> (badge, level)
    challenge_rewards: Dict[str, Tuple[str, int]] = field(default_factory=_default_challenge_rewards)

    def __post_init__(self) -> None:
        if self.points_per_level <= 0:
            raise ValueError("points_per_level must be positive")
        if self.level_policy not in (LEVEL_POLICY_POINTS, LEVEL_POLICY_CHALLENGES):
            raise ValueError(f"Unknown level policy: {self.level_policy}")


@dataclass
class UserStats:
    """Counters the badge thresholds are checked against"""
    points: int = 0
    recyclable_count: int = 0
    co2_saved_kg: float = 0.0
    posts_count: Optional[int] = None


@dataclass
class LevelProgress:
    points_to_next_level: int
    progress_percentage: float
    tree_growth_percentage: float


@dataclass
class RoadmapTier:
    level: int
    title: str
    requirements: str
    points_required: int
    is_unlocked: bool
    features: str


def level_for_points(rules: GamificationRules, points: int) -> int:
    """level = floor(points / points_per_level) + 1"""
    return math.floor(max(points, 0) / rules.points_per_level) + 1


def target_level(
    rules: GamificationRules,
    points: int,
    current_level: int,
    challenge_level: Optional[int] = None,
) -> int:
    """
    Level a user should hold after a change. Levels never go down.

    Under the "challenges" policy only challenge completions move the level.
    """
    level = current_level
    if rules.level_policy == LEVEL_POLICY_POINTS:
        level = max(level, level_for_points(rules, points))
    if challenge_level is not None:
        level = max(level, challenge_level)
    return level


def classification_points(rules: GamificationRules, recyclable: bool) -> int:
    return rules.recyclable_points if recyclable else rules.non_recyclable_points


def evaluate_badges(
    rules: GamificationRules,
    stats: UserStats,
    current_badges: Sequence[str],
) -> List[str]:
    """Badges earned by these stats that the user does not hold yet, in unlock order."""
    earned: List[str] = []
    for threshold, badge in rules.point_badges:
        if stats.points >= threshold:
            earned.append(badge)
    if stats.recyclable_count >= rules.recycler_pro_items:
        earned.append(RECYCLER_PRO)
    # Round to avoid 24 * 0.2 landing just under the threshold
    if round(stats.co2_saved_kg, 6) >= rules.climate_champion_kg:
        earned.append(CLIMATE_CHAMPION)
    if stats.posts_count is not None and stats.posts_count >= rules.community_star_posts:
        earned.append(COMMUNITY_STAR)

    held = set(current_badges)
    new_badges: List[str] = []
    for badge in earned:
        if badge not in held:
            held.add(badge)
            new_badges.append(badge)
    return new_badges


def challenge_reward(
    rules: GamificationRules,
    title: str,
    badge: Optional[str] = None,
    level_reward: Optional[int] = None,
) -> Tuple[Optional[str], Optional[int]]:
    """
    Badge and level granted for completing a challenge.

    Values stored on the challenge win over the title lookup table.
    """
    mapped_badge, mapped_level = rules.challenge_rewards.get(title, (None, None))
    return badge or mapped_badge, level_reward or mapped_level


def level_progress(rules: GamificationRules, points: int, level: int) -> LevelProgress:
    next_threshold = level * rules.points_per_level
    points_to_next = max(next_threshold - points, 0)
    progress = min(points / next_threshold * 100, 100.0) if next_threshold else 0.0
    tree = min(points / 1000, 1) * 100
    return LevelProgress(
        points_to_next_level=points_to_next,
        progress_percentage=round(progress, 2),
        tree_growth_percentage=round(tree, 2),
    )


def roadmap(
    level: int,
    points: int,
    challenges_completed: int,
    posts_shared: int,
    referrals_count: int,
) -> List[RoadmapTier]:
    """The five roadmap tiers from Eco-Novice to Eco-Hero"""
    return [
        RoadmapTier(
            level=1,
            title="Eco-Novice",
            requirements="Complete 1 challenge",
            points_required=0,
            is_unlocked=level >= 1,
            features="Basic Challenges, Community Forum",
        ),
        RoadmapTier(
            level=2,
            title="Eco-Apprentice",
            requirements=(
                f"Complete 3 challenges ({challenges_completed}/3), "
                f"Earn 50 points ({points}/50)"
            ),
            points_required=50,
            is_unlocked=level >= 2,
            features="Unlock more climate tools (coming soon!)",
        ),
        RoadmapTier(
            level=3,
            title="Eco-Guardian",
            requirements=(
                f"Complete 5 challenges ({challenges_completed}/5), "
                f"Earn 100 points ({points}/100)"
            ),
            points_required=100,
            is_unlocked=level >= 3,
            features="Personalized Climate Risk Dashboard",
        ),
        RoadmapTier(
            level=4,
            title="Eco-Champion",
            requirements=(
                f"Complete 7 challenges ({challenges_completed}/7), "
                f"Earn 150 points ({points}/150), "
                f"Share 3 posts ({posts_shared}/3)"
            ),
            points_required=150,
            is_unlocked=level >= 4,
            features="Sustainable Lifestyle Recommender",
        ),
        RoadmapTier(
            level=5,
            title="Eco-Hero",
            requirements=(
                f"Complete 10 challenges ({challenges_completed}/10), "
                f"Earn 200 points ({points}/200), "
                f"Invite 1 friend ({referrals_count}/1)"
            ),
            points_required=200,
            is_unlocked=level >= 5,
            features="Enhanced Community Hub",
        ),
    ]


def recycling_recommendation(answer: str) -> str:
    if answer.strip().lower() == "yes":
        return "Great! Try composting next."
    return "Start recycling to save 0.2 kg CO2e!"
