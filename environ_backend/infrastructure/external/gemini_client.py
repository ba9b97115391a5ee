"""Google Gemini: image and text generation through the google-genai SDK."""
import logging
from typing import Optional

from google import genai
from google.genai import types

from ...core.config import get_settings
from ...core.exceptions import ClassificationServiceError, TextGenerationError

logger = logging.getLogger(__name__)

DEFAULT_MODEL_ID = "gemini-1.5-flash"


class GeminiClient:
    """Thin async wrapper around genai.Client used by the classifier and eco tips"""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None) -> None:
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model or DEFAULT_MODEL_ID
        self._client: Optional[genai.Client] = None

        if not self.api_key:
            logger.warning("GEMINI_API_KEY not found in environment variables")

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate_from_image(self, image_bytes: bytes, mime_type: str, prompt: str) -> str:
        if not self.api_key:
            raise ClassificationServiceError("GEMINI_API_KEY not configured")

        try:
            response = await self._get_client().aio.models.generate_content(
                model=self.model,
                contents=[
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                    prompt,
                ],
            )
        except Exception as e:
            logger.error(f"Gemini image request failed: {e}", exc_info=True)
            raise ClassificationServiceError(f"Gemini request failed: {e}")

        text = (response.text or "").strip()
        if not text:
            raise ClassificationServiceError("Empty response from Gemini")
        return text

    async def generate_text(self, prompt: str) -> str:
        if not self.api_key:
            raise TextGenerationError("GEMINI_API_KEY not configured")

        try:
            response = await self._get_client().aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except Exception as e:
            logger.error(f"Gemini text request failed: {e}", exc_info=True)
            raise TextGenerationError(f"Gemini request failed: {e}")

        text = (response.text or "").strip()
        if not text:
            raise TextGenerationError("Empty response from Gemini")
        return text
