import logging
from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.gamification import GamificationRules
from ...domain.repositories.user_repository import UserRepository
from ...application.services.reward_service import RewardService
from ...infrastructure.external import (
    FilenameHeuristicClassifier,
    GeminiClient,
    GeminiWasteClassifier,
    GroqVLMClassifier,
    OpenWeatherClient,
    WasteClassifier,
)
from ...infrastructure.notifications import NotificationService, WebSocketManager
from ...infrastructure.storage import LocalImageStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


def build_classifier(provider: str, gemini_client: GeminiClient) -> WasteClassifier:
    """
    Pick the vision provider named by CLASSIFIER_PROVIDER.

    Raises:
        ValueError: Unknown provider name
    """
    if provider == "gemini":
        return GeminiWasteClassifier(gemini_client)
    if provider == "groq":
        return GroqVLMClassifier()
    if provider == "filename":
        return FilenameHeuristicClassifier()
    raise ValueError(f"Unknown CLASSIFIER_PROVIDER '{provider}' (expected gemini, groq or filename)")


class ServiceProvider:
    """Shared services: gamification rules, vendor clients, storage and notifications"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register shared services as singletons (one instance per process).
        Already-registered services are kept so tests can pre-seed fakes.
        """
        settings = get_settings()

        if not container.is_registered(GamificationRules):
            container.register_singleton(
                GamificationRules,
                GamificationRules(
                    login_bonus_points=settings.login_bonus_points,
                    recyclable_points=settings.recyclable_points,
                    non_recyclable_points=settings.non_recyclable_points,
                    points_per_level=settings.points_per_level,
                    level_policy=settings.level_policy,
                    co2_per_recyclable_kg=settings.co2_per_recyclable_kg,
                ),
            )

        if not container.is_registered(GeminiClient):
            container.register_singleton(GeminiClient, GeminiClient())

        if not container.is_registered(WasteClassifier):
            classifier = build_classifier(settings.classifier_provider, container.get(GeminiClient))
            logger.info(f"Using '{classifier.name}' waste classifier")
            container.register_singleton(WasteClassifier, classifier)

        if not container.is_registered(OpenWeatherClient):
            container.register_singleton(OpenWeatherClient, OpenWeatherClient())

        if not container.is_registered(LocalImageStorage):
            container.register_singleton(
                LocalImageStorage,
                LocalImageStorage(root=settings.media_root, base_url=settings.media_url),
            )

        if not container.is_registered(WebSocketManager):
            container.register_singleton(WebSocketManager, WebSocketManager())

        if not container.is_registered(NotificationService):
            container.register_singleton(
                NotificationService,
                NotificationService(websocket_manager=container.get(WebSocketManager)),
            )

        container.register_singleton(
            RewardService,
            RewardService(
                user_repository=container.get(UserRepository),
                rules=container.get(GamificationRules),
                notification_service=container.get(NotificationService),
            ),
        )
