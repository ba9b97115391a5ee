"""Groq Vision Language Model (VLM) classifier."""
import base64
import logging
from typing import Any, Dict, List, Optional

import httpx

from ...core.config import get_settings
from ...core.exceptions import ClassificationServiceError
from ..http_client_factory import get_shared_http_client
from .waste_classifier import CLASSIFICATION_PROMPT, LABELS_PROMPT, WasteClassifier, labels_from_answer

logger = logging.getLogger(__name__)


class GroqVLMClassifier(WasteClassifier):
    """
    Classifies waste photos through Groq's OpenAI-compatible chat completions
    API with image input.
    """

    name = "groq"

    GROQ_CHAT_URL = "https://api.groq.com/openai/v1/chat/completions"
    DEFAULT_VLM_MODEL = "meta-llama/llama-4-scout-17b-16e-instruct"
    API_TIMEOUT = 30.0

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None) -> None:
        settings = get_settings()
        self.api_key = settings.groq_api_key
        self.model = settings.vlm_model or self.DEFAULT_VLM_MODEL
        self._http_client = http_client

        if not self.api_key:
            logger.warning("GROQ_API_KEY not found in environment variables")

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client if self._http_client is not None else get_shared_http_client()

    async def classify(self, image_bytes: bytes, mime_type: str, filename: Optional[str] = None) -> str:
        return await self._ask(image_bytes, mime_type, CLASSIFICATION_PROMPT)

    async def detect_labels(self, image_bytes: bytes, mime_type: str) -> List[str]:
        answer = await self._ask(image_bytes, mime_type, LABELS_PROMPT)
        return labels_from_answer(answer)

    async def _ask(
        self,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
        temperature: float = 0.1,
        max_tokens: int = 300,
    ) -> str:
        if not self.api_key:
            raise ClassificationServiceError("GROQ_API_KEY not configured")

        data_url = f"data:{mime_type};base64,{base64.b64encode(image_bytes).decode('utf-8')}"
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {"type": "image_url", "image_url": {"url": data_url}},
                    ],
                }
            ],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.debug(f"Calling Groq VLM API with model: {self.model}")
        try:
            response = await self.http_client.post(
                self.GROQ_CHAT_URL,
                headers=headers,
                json=payload,
                timeout=self.API_TIMEOUT,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from Groq VLM API: {e.response.status_code} - {e.response.text}")
            raise ClassificationServiceError(f"Groq API error: {e.response.status_code}")
        except httpx.TimeoutException:
            logger.error("Timeout while calling Groq VLM API")
            raise ClassificationServiceError("Groq API timeout")
        except httpx.HTTPError as e:
            logger.error(f"Transport error calling Groq VLM API: {e}")
            raise ClassificationServiceError(f"Groq API unreachable: {e}")

        try:
            content = response.json()["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            logger.error(f"Unexpected payload from Groq VLM API: {e}")
            raise ClassificationServiceError(f"Unexpected Groq API payload: {e}")

        if not isinstance(content, str) or not content.strip():
            raise ClassificationServiceError("Empty response from VLM")
        return content.strip()
