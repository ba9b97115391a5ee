"""
Offline classifier that guesses from the uploaded file's name.

Useful for demos and local development without API keys. It never looks at
the pixels.
"""
from pathlib import PurePath
from typing import List, Optional, Sequence, Tuple

from .waste_classifier import WasteClassifier

# (keywords, material, recyclable); first match wins
FILENAME_RULES: Sequence[Tuple[Tuple[str, ...], str, bool]] = (
    (("plastic", "bottle", "pet"), "Plastic", True),
    (("paper", "cardboard", "newspaper", "carton"), "Paper", True),
    (("glass", "jar"), "Glass", True),
    (("metal", "can", "tin", "aluminium", "aluminum"), "Metal", True),
    (("food", "banana", "apple", "peel", "organic", "compost"), "Organic", False),
    (("battery", "electronic", "ewaste", "e-waste"), "E-waste", False),
)


def classify_filename(filename: Optional[str]) -> Tuple[str, bool]:
    stem = PurePath(filename or "").stem.lower()
    tokens = stem.replace("-", "_").replace(" ", "_").split("_")
    for keywords, material, recyclable in FILENAME_RULES:
        for keyword in keywords:
            # short keywords ("can", "pet") must be whole tokens
            if keyword in tokens or (len(keyword) > 3 and keyword in stem):
                return material, recyclable
    return "General Waste", False


class FilenameHeuristicClassifier(WasteClassifier):
    name = "filename"

    async def classify(self, image_bytes: bytes, mime_type: str, filename: Optional[str] = None) -> str:
        material, recyclable = classify_filename(filename)
        return f"{material} - {'Recyclable' if recyclable else 'Non-Recyclable'}"

    async def detect_labels(self, image_bytes: bytes, mime_type: str) -> List[str]:
        # No file name reaches the label endpoint, so there is nothing to match on
        return []
