# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

NON_RECYCLABLE_MARKERS = ("non-recyclable", "non recyclable", "not recyclable", "nonrecyclable")


def parse_classification_text(text: str) -> Tuple[str, bool]:
    """
    Split a "Type - Recyclable/Non-Recyclable" answer into (item, recyclable).

    The model is asked for that exact format, but answers drift: extra prose,
    markdown, or a missing separator. The item is everything before the first
    " - "; recyclability is decided from the remainder (or the whole text when
    there is no separator).
    """
    cleaned = (text or "").strip().strip("*").strip()
    if not cleaned:
        raise ValueError("Empty classification result")

    first_line = cleaned.splitlines()[0].strip()
    if " - " in first_line:
        item, verdict = first_line.split(" - ", 1)
    else:
        item, verdict = first_line, first_line

    verdict_lower = verdict.lower()
    if any(marker in verdict_lower for marker in NON_RECYCLABLE_MARKERS):
        recyclable = False
    else:
        recyclable = "recyclable" in verdict_lower

    item = item.strip().strip("*").strip() or "Unknown"
    return item, recyclable


@dataclass
class Classification:
    """Pure domain model for one classified waste photo"""
    id: Optional[str]
    user_id: str
    item: str
    result: str
    recyclable: bool
    image_url: Optional[str] = None
    labels: List[str] = field(default_factory=list)
    points_awarded: int = 0
    timestamp: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("User ID is required")
        if not self.result or not self.result.strip():
            raise ValueError("Classification result is required")
        if self.points_awarded < 0:
            raise ValueError("Points awarded cannot be negative")
