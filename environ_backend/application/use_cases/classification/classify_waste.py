# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.exceptions import ClassificationServiceError
from ....domain.gamification import classification_points
from ....domain.models.classification import Classification, parse_classification_text
from ....domain.repositories.classification_repository import ClassificationRepository
from ....infrastructure.external.waste_classifier import WasteClassifier
from ....infrastructure.notifications.notification_service import (
    CLASSIFICATION_CREATED,
    NotificationService,
)
from ....infrastructure.storage.local_image_storage import LocalImageStorage
from ....utils.datetime_utils import utc_now
from ...dto.classification_dto import ClassificationResponse, ClassifyWasteResponse
from ...services.image_validation import validate_image_upload
from ...services.reward_service import RewardService

logger = logging.getLogger(__name__)


class ClassifyWasteUseCase:
    """
    Classify an uploaded waste photo and reward the user.

    Flow: validate -> store image -> classify -> persist -> reward -> notify.
    """

    def __init__(
        self,
        classification_repository: ClassificationRepository,
        reward_service: RewardService,
        classifier: WasteClassifier,
        image_storage: LocalImageStorage,
        notification_service: Optional[NotificationService] = None,
        max_upload_bytes: int = 10 * 1024 * 1024,
    ) -> None:
        self.classification_repository = classification_repository
        self.reward_service = reward_service
        self.classifier = classifier
        self.image_storage = image_storage
        self.notification_service = notification_service
        self.max_upload_bytes = max_upload_bytes

    async def execute(
        self,
        user_id: str,
        data: bytes,
        content_type: Optional[str],
        filename: Optional[str] = None,
    ) -> ClassifyWasteResponse:
        """
        Args:
            user_id: Authenticated user
            data: Raw uploaded bytes
            content_type: Content type declared by the client
            filename: Original file name, if any

        Raises:
            ImageValidationError: Upload is not an acceptable image (ValueError)
            ClassificationServiceError: Classifier failed or answered nonsense
            RuntimeError: Storage or database failure
        """
        mime_type = validate_image_upload(data, content_type, self.max_upload_bytes)

        stored = await self.image_storage.save(user_id, data, mime_type)

        result_text = await self.classifier.classify(data, mime_type, filename)
        try:
            item, recyclable = parse_classification_text(result_text)
        except ValueError as e:
            raise ClassificationServiceError(
                f"Unusable answer from {self.classifier.name} classifier: {e}"
            ) from e

        rules = self.reward_service.rules
        points = classification_points(rules, recyclable)
        classification = await self.classification_repository.save(
            Classification(
                id=None,
                user_id=user_id,
                item=item,
                result=result_text.strip(),
                recyclable=recyclable,
                image_url=stored.public_url,
                points_awarded=points,
                timestamp=utc_now(),
            )
        )
        logger.info(
            f"User {user_id} classified '{item}' ({'recyclable' if recyclable else 'non-recyclable'}) "
            f"with {self.classifier.name}"
        )

        outcome = await self.reward_service.grant(
            user_id,
            points=points,
            recyclable_items=1 if recyclable else 0,
            co2_kg=rules.co2_per_recyclable_kg if recyclable else 0.0,
        )

        response = ClassificationResponse.from_classification(classification)
        if self.notification_service is not None:
            await self.notification_service.notify_user(
                user_id, CLASSIFICATION_CREATED, response.model_dump(mode="json")
            )

        return ClassifyWasteResponse(
            classification=response,
            points_awarded=points,
            total_points=outcome.user.points,
            level=outcome.user.level,
            level_up=outcome.level_up,
            new_badges=outcome.new_badges,
        )
