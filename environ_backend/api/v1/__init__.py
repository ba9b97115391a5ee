from .auth_controller import router as auth_router
from .classification_controller import router as classification_router
from .label_detection_controller import router as label_detection_router
from .dashboard_controller import router as dashboard_router, leaderboard_router
from .profile_controller import router as profile_router
from .community_controller import router as community_router
from .eco_tips_controller import router as eco_tips_router
from .notifications_controller import router as notifications_router


__all__ = [
    "auth_router",
    "classification_router",
    "label_detection_router",
    "dashboard_router",
    "leaderboard_router",
    "profile_router",
    "community_router",
    "eco_tips_router",
    "notifications_router",
]
