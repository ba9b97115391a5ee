# Standard library imports
import base64
import binascii
import logging
from typing import List

# Local application imports
from ....core.exceptions import ImageTooLargeError, ImageValidationError
from ....infrastructure.external.waste_classifier import WasteClassifier
from ...services.image_validation import sniff_image_mime

logger = logging.getLogger(__name__)


def decode_base64_image(image_base64: str) -> bytes:
    """Decode plain base64 or a data URL ("data:image/png;base64,...")"""
    payload = image_base64.strip()
    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageValidationError("Invalid image data") from e


class DetectLabelsUseCase:
    """Describe the contents of a base64 image as a list of lowercase labels"""

    def __init__(self, classifier: WasteClassifier, max_upload_bytes: int = 10 * 1024 * 1024) -> None:
        self.classifier = classifier
        self.max_upload_bytes = max_upload_bytes

    async def execute(self, image_base64: str) -> List[str]:
        """
        Raises:
            ImageValidationError: No or undecodable image data
            ImageTooLargeError: Decoded image exceeds the upload limit
            ClassificationServiceError: Label detection failed
        """
        if not image_base64 or not image_base64.strip():
            raise ImageValidationError("No image data provided")

        data = decode_base64_image(image_base64)
        if not data:
            raise ImageValidationError("No image data provided")
        if len(data) > self.max_upload_bytes:
            raise ImageTooLargeError("Image too large")

        mime_type = sniff_image_mime(data)
        labels = await self.classifier.detect_labels(data, mime_type)
        logger.debug(f"Detected {len(labels)} labels with {self.classifier.name}")
        return [label.strip().lower() for label in labels if label and label.strip()]
