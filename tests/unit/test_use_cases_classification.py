"""
Unit tests for classification use cases and upload validation.
"""
import base64
from io import BytesIO
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from environ_backend.application.services.image_validation import sniff_image_mime, validate_image_upload
from environ_backend.application.services.reward_service import RewardOutcome
from environ_backend.application.use_cases.classification import (
    ClassifyWasteUseCase,
    DetectLabelsUseCase,
    ListClassificationsUseCase,
)
from environ_backend.core.exceptions import (
    ClassificationServiceError,
    ImageTooLargeError,
    ImageValidationError,
)
from environ_backend.domain.models.classification import Classification
from environ_backend.infrastructure.notifications.notification_service import CLASSIFICATION_CREATED
from environ_backend.infrastructure.storage import StoredImage


@pytest.fixture
def png_bytes():
    buffer = BytesIO()
    Image.new("RGB", (4, 4), color=(0, 128, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def mock_classifier():
    classifier = AsyncMock()
    classifier.name = "fake"
    classifier.classify.return_value = "Plastic - Recyclable"
    classifier.detect_labels.return_value = ["Bottle", " Plastic ", ""]
    return classifier


@pytest.fixture
def mock_storage():
    storage = AsyncMock()
    storage.save.return_value = StoredImage(
        path=Path("/tmp/media/waste/usr-1/abc.png"),
        relative_path="waste/usr-1/abc.png",
        public_url="/media/waste/usr-1/abc.png",
    )
    return storage


@pytest.fixture
def mock_classification_repo():
    repo = AsyncMock()

    async def _save(classification):
        classification.id = "cls-1"
        return classification

    repo.save.side_effect = _save
    return repo


@pytest.fixture
def mock_reward_service(rules, make_user):
    service = MagicMock()
    service.rules = rules
    service.grant = AsyncMock(
        return_value=RewardOutcome(user=make_user(points=120, level=2), points_awarded=20, level_up=True)
    )
    return service


@pytest.fixture
def classify_use_case(
    mock_classification_repo, mock_reward_service, mock_classifier, mock_storage, mock_notification_service
):
    return ClassifyWasteUseCase(
        classification_repository=mock_classification_repo,
        reward_service=mock_reward_service,
        classifier=mock_classifier,
        image_storage=mock_storage,
        notification_service=mock_notification_service,
        max_upload_bytes=1024 * 1024,
    )


class TestImageValidation:
    def test_valid_png(self, png_bytes):
        assert validate_image_upload(png_bytes, "image/png", 1024 * 1024) == "image/png"

    def test_detected_type_wins_over_declared(self, png_bytes):
        assert validate_image_upload(png_bytes, "image/jpeg", 1024 * 1024) == "image/png"

    def test_empty_upload(self):
        with pytest.raises(ImageValidationError):
            validate_image_upload(b"", "image/png", 1024)

    def test_non_image_content_type(self, png_bytes):
        with pytest.raises(ImageValidationError, match="valid image"):
            validate_image_upload(png_bytes, "application/pdf", 1024 * 1024)

    def test_too_large(self, png_bytes):
        with pytest.raises(ImageTooLargeError):
            validate_image_upload(png_bytes, "image/png", len(png_bytes) - 1)

    def test_undecodable_bytes(self):
        with pytest.raises(ImageValidationError):
            sniff_image_mime(b"definitely not an image")


class TestClassifyWasteUseCase:
    @pytest.mark.asyncio
    async def test_recyclable_flow(
        self,
        classify_use_case,
        png_bytes,
        mock_storage,
        mock_classifier,
        mock_classification_repo,
        mock_reward_service,
        mock_notification_service,
    ):
        result = await classify_use_case.execute("usr-1", png_bytes, "image/png", "bottle.png")

        mock_storage.save.assert_awaited_once_with("usr-1", png_bytes, "image/png")
        mock_classifier.classify.assert_awaited_once_with(png_bytes, "image/png", "bottle.png")

        saved = mock_classification_repo.save.await_args.args[0]
        assert saved.item == "Plastic"
        assert saved.recyclable is True
        assert saved.points_awarded == 20
        assert saved.image_url == "/media/waste/usr-1/abc.png"

        mock_reward_service.grant.assert_awaited_once_with(
            "usr-1", points=20, recyclable_items=1, co2_kg=0.2
        )
        assert result.points_awarded == 20
        assert result.total_points == 120
        assert result.level == 2
        assert result.level_up is True
        assert result.classification.id == "cls-1"

        event_type = mock_notification_service.notify_user.await_args.args[1]
        assert event_type == CLASSIFICATION_CREATED

    @pytest.mark.asyncio
    async def test_non_recyclable_earns_less_and_no_co2(
        self, classify_use_case, png_bytes, mock_classifier, mock_reward_service
    ):
        mock_classifier.classify.return_value = "Organic - Non-Recyclable"

        result = await classify_use_case.execute("usr-1", png_bytes, "image/png", "peel.png")

        mock_reward_service.grant.assert_awaited_once_with(
            "usr-1", points=5, recyclable_items=0, co2_kg=0.0
        )
        assert result.points_awarded == 5
        assert result.classification.recyclable is False

    @pytest.mark.asyncio
    async def test_invalid_upload_never_reaches_classifier(
        self, classify_use_case, mock_classifier, mock_storage
    ):
        with pytest.raises(ImageValidationError):
            await classify_use_case.execute("usr-1", b"text", "text/plain", "notes.txt")
        mock_storage.save.assert_not_called()
        mock_classifier.classify.assert_not_called()

    @pytest.mark.asyncio
    async def test_classifier_error_propagates_without_reward(
        self, classify_use_case, png_bytes, mock_classifier, mock_reward_service
    ):
        mock_classifier.classify.side_effect = ClassificationServiceError("vendor down")
        with pytest.raises(ClassificationServiceError):
            await classify_use_case.execute("usr-1", png_bytes, "image/png")
        mock_reward_service.grant.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_answer_is_a_service_error(
        self, classify_use_case, png_bytes, mock_classifier, mock_classification_repo
    ):
        mock_classifier.classify.return_value = "   "
        with pytest.raises(ClassificationServiceError):
            await classify_use_case.execute("usr-1", png_bytes, "image/png")
        mock_classification_repo.save.assert_not_called()


class TestListClassificationsUseCase:
    @pytest.mark.asyncio
    async def test_returns_recent_and_caps_limit(self):
        repo = AsyncMock()
        repo.find_recent_by_user.return_value = [
            Classification(id="c1", user_id="usr-1", item="Glass", result="Glass - Recyclable", recyclable=True),
        ]

        result = await ListClassificationsUseCase(repo).execute("usr-1", limit=500)

        repo.find_recent_by_user.assert_awaited_once_with("usr-1", 50)
        assert [c.item for c in result] == ["Glass"]

    @pytest.mark.asyncio
    async def test_rejects_zero_limit(self):
        with pytest.raises(ValueError):
            await ListClassificationsUseCase(AsyncMock()).execute("usr-1", limit=0)


class TestDetectLabelsUseCase:
    @pytest.mark.asyncio
    async def test_labels_are_lowercased_and_cleaned(self, mock_classifier, png_bytes):
        image_base64 = base64.b64encode(png_bytes).decode()

        labels = await DetectLabelsUseCase(mock_classifier).execute(image_base64)

        assert labels == ["bottle", "plastic"]
        mock_classifier.detect_labels.assert_awaited_once_with(png_bytes, "image/png")

    @pytest.mark.asyncio
    async def test_accepts_data_url(self, mock_classifier, png_bytes):
        data_url = "data:image/png;base64," + base64.b64encode(png_bytes).decode()
        assert await DetectLabelsUseCase(mock_classifier).execute(data_url) == ["bottle", "plastic"]

    @pytest.mark.asyncio
    async def test_missing_image(self, mock_classifier):
        with pytest.raises(ImageValidationError, match="No image data provided"):
            await DetectLabelsUseCase(mock_classifier).execute("  ")

    @pytest.mark.asyncio
    async def test_invalid_base64(self, mock_classifier):
        with pytest.raises(ImageValidationError, match="Invalid image data"):
            await DetectLabelsUseCase(mock_classifier).execute("!!!not-base64!!!")

    @pytest.mark.asyncio
    async def test_too_large(self, mock_classifier, png_bytes):
        image_base64 = base64.b64encode(png_bytes).decode()
        with pytest.raises(ImageTooLargeError):
            await DetectLabelsUseCase(mock_classifier, max_upload_bytes=10).execute(image_base64)
