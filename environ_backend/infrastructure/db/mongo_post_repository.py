# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import AutoReconnect, NetworkTimeout, ServerSelectionTimeoutError

# Local application imports
from ...core.exceptions import DatabaseConnectionError
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.community import Post
from ...domain.constants import PostFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import POSTS, get_collection


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_collection(POSTS)

    async def save(self, post: Post) -> Post:
        document = {
            PostFields.USER_ID: post.user_id,
            PostFields.AUTHOR_NAME: post.author_name,
            PostFields.CONTENT: post.content,
            PostFields.CREATED_AT: post.created_at or utc_now(),
        }
        try:
            result = await self.post_collection.insert_one(document)
        except Exception as e:
            raise RuntimeError(f"Error saving post: {str(e)}")
        document[PostFields.MONGO_ID] = result.inserted_id
        return self._document_to_post(document)

    async def find_recent(self, limit: int = 20) -> List[Post]:
        try:
            cursor = self.post_collection.find({}).sort(PostFields.CREATED_AT, DESCENDING).limit(limit)
            return [self._document_to_post(document) async for document in cursor]
        except (AutoReconnect, NetworkTimeout, ServerSelectionTimeoutError) as e:
            # Transient: callers may retry
            raise DatabaseConnectionError(f"Error listing posts: {str(e)}", operation="find_recent")
        except Exception as e:
            raise RuntimeError(f"Error listing posts: {str(e)}")

    async def count_by_user(self, user_id: str) -> int:
        try:
            return await self.post_collection.count_documents({PostFields.USER_ID: user_id})
        except Exception as e:
            raise RuntimeError(f"Error counting posts: {str(e)}")

    def _document_to_post(self, document: Dict[str, Any]) -> Post:
        return Post(
            id=str(document[PostFields.MONGO_ID]),
            user_id=document.get(PostFields.USER_ID, ""),
            author_name=document.get(PostFields.AUTHOR_NAME, ""),
            content=document.get(PostFields.CONTENT, ""),
            created_at=ensure_utc(document.get(PostFields.CREATED_AT)),
        )
