"""Classifier contract shared by every vision provider."""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

CLASSIFICATION_PROMPT = (
    "Classify this waste item as recyclable or non-recyclable, and identify its type "
    "(e.g., Plastic, Paper, Organic). Respond in the format: \"Type - Recyclable/Non-Recyclable\"."
)

LABELS_PROMPT = (
    "List up to 10 short, lowercase labels describing the objects and materials in this image, "
    "most confident first. Respond with a JSON array of strings only."
)


def extract_json(content: str) -> Optional[Any]:
    """
    Parse JSON from a model answer, tolerating ```json fences.

    Returns None when the content is not JSON.
    """
    json_content = content.strip()
    if "```json" in json_content:
        json_start = json_content.find("```json") + 7
        json_end = json_content.find("```", json_start)
        json_content = json_content[json_start:json_end].strip()
    elif "```" in json_content:
        json_start = json_content.find("```") + 3
        json_end = json_content.find("```", json_start)
        json_content = json_content[json_start:json_end].strip()

    try:
        return json.loads(json_content)
    except json.JSONDecodeError:
        return None


def labels_from_answer(content: str) -> List[str]:
    """JSON array answer -> labels; falls back to comma/newline separated text."""
    parsed = extract_json(content)
    if isinstance(parsed, list):
        raw = [str(item) for item in parsed]
    else:
        raw = content.replace("\n", ",").split(",")
    return [label.strip(" -*\"'").lower() for label in raw if label.strip(" -*\"'")]


class WasteClassifier(ABC):
    """A vision provider that can label and classify a waste photo"""

    name: str = "base"

    @abstractmethod
    async def classify(self, image_bytes: bytes, mime_type: str, filename: Optional[str] = None) -> str:
        """Return a "Type - Recyclable/Non-Recyclable" answer"""
        pass

    @abstractmethod
    async def detect_labels(self, image_bytes: bytes, mime_type: str) -> List[str]:
        """Return lowercase object/material labels"""
        pass
