from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.models.classification import Classification


class ClassificationResponse(BaseModel):
    """DTO for one stored classification"""
    id: str
    item: str
    result: str
    recyclable: bool
    image_url: Optional[str] = None
    points_awarded: int = 0
    timestamp: Optional[datetime] = None

    @classmethod
    def from_classification(cls, classification: Classification) -> "ClassificationResponse":
        return cls(
            id=classification.id or "",
            item=classification.item,
            result=classification.result,
            recyclable=classification.recyclable,
            image_url=classification.image_url,
            points_awarded=classification.points_awarded,
            timestamp=classification.timestamp,
        )


class ClassifyWasteResponse(BaseModel):
    """DTO returned after classifying an uploaded photo"""
    classification: ClassificationResponse
    points_awarded: int
    total_points: int
    level: int
    level_up: bool = False
    new_badges: List[str] = Field(default_factory=list)


class LabelDetectionRequest(BaseModel):
    """Body of POST /classify-waste"""
    imageBase64: Optional[str] = None


class LabelDetectionResponse(BaseModel):
    labels: List[str]
