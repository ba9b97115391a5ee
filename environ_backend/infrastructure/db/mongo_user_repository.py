# Standard library imports
from typing import Any, Dict, List, Optional, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING, ReturnDocument

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import USERS, get_collection


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_collection(USERS)

    async def find_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")
        return self._document_to_user(document) if document else None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        return self._document_to_user(document) if document else None

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Gamification counters are only written on insert; afterwards they
        change exclusively through increment_stats/promote.
        """
        if not user:
            raise ValueError("User cannot be None")

        try:
            if user.id:
                object_id = _to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")
                updated = await self.user_collection.find_one_and_update(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": {
                        UserFields.FULL_NAME: user.full_name,
                        UserFields.EMAIL: user.email,
                        UserFields.HASHED_PASSWORD: user.hashed_password,
                        UserFields.CITY: user.city,
                    }},
                    return_document=ReturnDocument.AFTER,
                )
                if updated is None:
                    raise ValueError(f"User with ID {user.id} not found")
                return self._document_to_user(updated)

            user_dict = self._user_to_dict(user)
            result = await self.user_collection.insert_one(user_dict)
            new_document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("User was created but could not be retrieved")
            return self._document_to_user(new_document)
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")

    async def update_profile(
        self,
        user_id: str,
        full_name: Optional[str] = None,
        city: Optional[str] = None,
    ) -> Optional[User]:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        updates: Dict[str, Any] = {}
        if full_name is not None:
            updates[UserFields.FULL_NAME] = full_name
        if city is not None:
            updates[UserFields.CITY] = city or None
        if not updates:
            return await self.find_by_id(user_id)

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": updates},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise RuntimeError(f"Error updating profile: {str(e)}")
        return self._document_to_user(document) if document else None

    async def increment_stats(
        self,
        user_id: str,
        points: int = 0,
        recyclable_items: int = 0,
        co2_kg: float = 0.0,
    ) -> Optional[User]:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$inc": {
                    UserFields.POINTS: points,
                    UserFields.RECYCLABLE_COUNT: recyclable_items,
                    UserFields.CO2_SAVED_KG: co2_kg,
                }},
                return_document=ReturnDocument.BEFORE,
            )
        except Exception as e:
            raise RuntimeError(f"Error updating user stats: {str(e)}")
        return self._document_to_user(document) if document else None

    async def promote(
        self,
        user_id: str,
        level: int,
        badges: Sequence[str] = (),
    ) -> Optional[User]:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        update: Dict[str, Any] = {"$max": {UserFields.LEVEL: level}}
        if badges:
            update["$addToSet"] = {UserFields.BADGES: {"$each": list(badges)}}

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                update,
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise RuntimeError(f"Error promoting user: {str(e)}")
        return self._document_to_user(document) if document else None

    async def list_by_points(self, limit: Optional[int] = None) -> List[User]:
        try:
            cursor = self.user_collection.find({}).sort(
                [(UserFields.POINTS, DESCENDING), (UserFields.MONGO_ID, DESCENDING)]
            )
            if limit:
                cursor = cursor.limit(limit)
            return [self._document_to_user(document) async for document in cursor]
        except Exception as e:
            raise RuntimeError(f"Error listing leaderboard: {str(e)}")

    async def count_with_more_points(self, points: int) -> int:
        try:
            return await self.user_collection.count_documents({UserFields.POINTS: {"$gt": points}})
        except Exception as e:
            raise RuntimeError(f"Error counting users: {str(e)}")

    def _document_to_user(self, document: dict) -> User:
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            full_name=document.get(UserFields.FULL_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            points=int(document.get(UserFields.POINTS) or 0),
            level=int(document.get(UserFields.LEVEL) or 1),
            badges=list(document.get(UserFields.BADGES) or []),
            city=document.get(UserFields.CITY),
            recyclable_count=int(document.get(UserFields.RECYCLABLE_COUNT) or 0),
            co2_saved_kg=float(document.get(UserFields.CO2_SAVED_KG) or 0.0),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
        )

    def _user_to_dict(self, user: User) -> dict:
        return {
            UserFields.FULL_NAME: user.full_name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.POINTS: user.points,
            UserFields.LEVEL: user.level,
            UserFields.BADGES: list(user.badges),
            UserFields.CITY: user.city,
            UserFields.RECYCLABLE_COUNT: user.recyclable_count,
            UserFields.CO2_SAVED_KG: user.co2_saved_kg,
            UserFields.CREATED_AT: user.created_at or utc_now(),
        }
