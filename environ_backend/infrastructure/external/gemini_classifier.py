from typing import List, Optional

from .gemini_client import GeminiClient
from .waste_classifier import CLASSIFICATION_PROMPT, LABELS_PROMPT, WasteClassifier, labels_from_answer


class GeminiWasteClassifier(WasteClassifier):
    """Classifies waste photos with Gemini's multimodal model"""

    name = "gemini"

    def __init__(self, gemini_client: GeminiClient) -> None:
        self.gemini_client = gemini_client

    async def classify(self, image_bytes: bytes, mime_type: str, filename: Optional[str] = None) -> str:
        return await self.gemini_client.generate_from_image(image_bytes, mime_type, CLASSIFICATION_PROMPT)

    async def detect_labels(self, image_bytes: bytes, mime_type: str) -> List[str]:
        answer = await self.gemini_client.generate_from_image(image_bytes, mime_type, LABELS_PROMPT)
        return labels_from_answer(answer)
