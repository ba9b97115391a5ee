from .create_post import CreatePostUseCase
from .list_posts import ListPostsUseCase
from .list_challenges import ListChallengesUseCase
from .join_challenge import JoinChallengeUseCase
from .record_challenge_progress import RecordChallengeProgressUseCase
from .create_referral import CreateReferralUseCase
from .list_referrals import ListReferralsUseCase
from .get_community_stats import GetCommunityStatsUseCase

__all__ = [
    "CreatePostUseCase",
    "ListPostsUseCase",
    "ListChallengesUseCase",
    "JoinChallengeUseCase",
    "RecordChallengeProgressUseCase",
    "CreateReferralUseCase",
    "ListReferralsUseCase",
    "GetCommunityStatsUseCase",
]
