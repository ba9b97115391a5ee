# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING

# Local application imports
from ...domain.repositories.classification_repository import ClassificationRepository
from ...domain.models.classification import Classification
from ...domain.constants import ClassificationFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import CLASSIFICATIONS, get_collection


class MongoClassificationRepository(ClassificationRepository):
    """MongoDB implementation of ClassificationRepository"""

    def __init__(self, classification_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.classification_collection = (
            classification_collection if classification_collection is not None
            else get_collection(CLASSIFICATIONS)
        )

    async def save(self, classification: Classification) -> Classification:
        if not classification:
            raise ValueError("Classification cannot be None")

        document = self._classification_to_dict(classification)
        try:
            result = await self.classification_collection.insert_one(document)
        except Exception as e:
            raise RuntimeError(f"Error saving classification: {str(e)}")
        document[ClassificationFields.MONGO_ID] = result.inserted_id
        return self._document_to_classification(document)

    async def find_recent_by_user(self, user_id: str, limit: int = 5) -> List[Classification]:
        if not user_id:
            return []

        try:
            cursor = (
                self.classification_collection
                .find({ClassificationFields.USER_ID: user_id})
                .sort(ClassificationFields.TIMESTAMP, DESCENDING)
                .limit(limit)
            )
            return [self._document_to_classification(document) async for document in cursor]
        except Exception as e:
            raise RuntimeError(f"Error listing classifications: {str(e)}")

    async def count_by_user(self, user_id: str) -> int:
        try:
            return await self.classification_collection.count_documents(
                {ClassificationFields.USER_ID: user_id}
            )
        except Exception as e:
            raise RuntimeError(f"Error counting classifications: {str(e)}")

    def _document_to_classification(self, document: Dict[str, Any]) -> Classification:
        return Classification(
            id=str(document[ClassificationFields.MONGO_ID]),
            user_id=document.get(ClassificationFields.USER_ID, ""),
            item=document.get(ClassificationFields.ITEM, ""),
            result=document.get(ClassificationFields.RESULT, ""),
            recyclable=bool(document.get(ClassificationFields.RECYCLABLE, False)),
            image_url=document.get(ClassificationFields.IMAGE_URL),
            labels=list(document.get(ClassificationFields.LABELS) or []),
            points_awarded=int(document.get(ClassificationFields.POINTS_AWARDED) or 0),
            timestamp=ensure_utc(document.get(ClassificationFields.TIMESTAMP)),
        )

    def _classification_to_dict(self, classification: Classification) -> Dict[str, Any]:
        return {
            ClassificationFields.USER_ID: classification.user_id,
            ClassificationFields.ITEM: classification.item,
            ClassificationFields.RESULT: classification.result,
            ClassificationFields.RECYCLABLE: classification.recyclable,
            ClassificationFields.IMAGE_URL: classification.image_url,
            ClassificationFields.LABELS: list(classification.labels),
            ClassificationFields.POINTS_AWARDED: classification.points_awarded,
            ClassificationFields.TIMESTAMP: classification.timestamp or utc_now(),
        }
