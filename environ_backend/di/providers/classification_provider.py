from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.classification_repository import ClassificationRepository
from ...application.services.reward_service import RewardService
from ...application.use_cases.classification import (
    ClassifyWasteUseCase,
    DetectLabelsUseCase,
    ListClassificationsUseCase,
)
from ...infrastructure.external import WasteClassifier
from ...infrastructure.notifications import NotificationService
from ...infrastructure.storage import LocalImageStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ClassificationProvider:
    """Waste classification use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        max_upload_bytes = get_settings().max_upload_mb * 1024 * 1024

        container.register_factory(
            ClassifyWasteUseCase,
            lambda: ClassifyWasteUseCase(
                classification_repository=container.get(ClassificationRepository),
                reward_service=container.get(RewardService),
                classifier=container.get(WasteClassifier),
                image_storage=container.get(LocalImageStorage),
                notification_service=container.get(NotificationService),
                max_upload_bytes=max_upload_bytes,
            )
        )

        container.register_factory(
            ListClassificationsUseCase,
            lambda: ListClassificationsUseCase(
                classification_repository=container.get(ClassificationRepository)
            )
        )

        container.register_factory(
            DetectLabelsUseCase,
            lambda: DetectLabelsUseCase(
                classifier=container.get(WasteClassifier),
                max_upload_bytes=max_upload_bytes,
            )
        )
