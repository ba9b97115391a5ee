from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .classification_dto import (
    ClassificationResponse,
    ClassifyWasteResponse,
    LabelDetectionRequest,
    LabelDetectionResponse,
)
from .dashboard_dto import (
    DashboardResponse,
    LeaderboardEntry,
    RoadmapResponse,
    RoadmapTierResponse,
    WeatherResponse,
)
from .profile_dto import ProfileResponse, ProfileUpdateRequest
from .community_dto import (
    ChallengeProgressRequest,
    ChallengeProgressResponse,
    ChallengeResponse,
    CommunityStatsResponse,
    PostCreateRequest,
    PostResponse,
    ReferralCreateRequest,
    ReferralListResponse,
    ReferralResponse,
)
from .eco_tips_dto import EcoTipRequest, EcoTipResponse, RecommendationRequest, RecommendationResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "ClassificationResponse",
    "ClassifyWasteResponse",
    "LabelDetectionRequest",
    "LabelDetectionResponse",
    "DashboardResponse",
    "LeaderboardEntry",
    "RoadmapResponse",
    "RoadmapTierResponse",
    "WeatherResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "ChallengeProgressRequest",
    "ChallengeProgressResponse",
    "ChallengeResponse",
    "CommunityStatsResponse",
    "PostCreateRequest",
    "PostResponse",
    "ReferralCreateRequest",
    "ReferralListResponse",
    "ReferralResponse",
    "EcoTipRequest",
    "EcoTipResponse",
    "RecommendationRequest",
    "RecommendationResponse",
]
