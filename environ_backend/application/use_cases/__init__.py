from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    LogoutUserUseCase,
)
from .classification import (
    ClassifyWasteUseCase,
    ListClassificationsUseCase,
    DetectLabelsUseCase,
)
from .dashboard import (
    GetDashboardUseCase,
    GetLeaderboardUseCase,
    GetWeatherUseCase,
    GetRoadmapUseCase,
)
from .profile import GetProfileUseCase, UpdateProfileUseCase
from .community import (
    CreatePostUseCase,
    ListPostsUseCase,
    ListChallengesUseCase,
    JoinChallengeUseCase,
    RecordChallengeProgressUseCase,
    CreateReferralUseCase,
    ListReferralsUseCase,
    GetCommunityStatsUseCase,
)
from .eco_tips import GetEcoTipUseCase, GetRecommendationUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "LogoutUserUseCase",
    "ClassifyWasteUseCase",
    "ListClassificationsUseCase",
    "DetectLabelsUseCase",
    "GetDashboardUseCase",
    "GetLeaderboardUseCase",
    "GetWeatherUseCase",
    "GetRoadmapUseCase",
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "ListChallengesUseCase",
    "JoinChallengeUseCase",
    "RecordChallengeProgressUseCase",
    "CreateReferralUseCase",
    "ListReferralsUseCase",
    "GetCommunityStatsUseCase",
    "GetEcoTipUseCase",
    "GetRecommendationUseCase",
]
