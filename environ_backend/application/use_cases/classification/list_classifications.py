from typing import List

from ....domain.repositories.classification_repository import ClassificationRepository
from ...dto.classification_dto import ClassificationResponse

MAX_HISTORY_LIMIT = 50


class ListClassificationsUseCase:
    """Most recent classifications of one user, newest first"""

    def __init__(self, classification_repository: ClassificationRepository) -> None:
        self.classification_repository = classification_repository

    async def execute(self, user_id: str, limit: int = 5) -> List[ClassificationResponse]:
        if limit < 1:
            raise ValueError("Limit must be at least 1")
        limit = min(limit, MAX_HISTORY_LIMIT)
        classifications = await self.classification_repository.find_recent_by_user(user_id, limit)
        return [ClassificationResponse.from_classification(c) for c in classifications]
