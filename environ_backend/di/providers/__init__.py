from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .service_provider import ServiceProvider
from .auth_provider import AuthProvider
from .classification_provider import ClassificationProvider
from .dashboard_provider import DashboardProvider
from .profile_provider import ProfileProvider
from .community_provider import CommunityProvider
from .eco_tips_provider import EcoTipsProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "ServiceProvider",
    "AuthProvider",
    "ClassificationProvider",
    "DashboardProvider",
    "ProfileProvider",
    "CommunityProvider",
    "EcoTipsProvider",
]
