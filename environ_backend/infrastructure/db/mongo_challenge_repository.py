# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.challenge_repository import ChallengeRepository
from ...domain.models.community import Challenge, ChallengeParticipation
from ...domain.constants import ChallengeFields, ParticipantFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import CHALLENGES, CHALLENGE_PARTICIPANTS, get_collection


class MongoChallengeRepository(ChallengeRepository):
    """MongoDB implementation of ChallengeRepository"""

    def __init__(
        self,
        challenge_collection: Optional[AsyncIOMotorCollection] = None,
        participant_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.challenge_collection = (
            challenge_collection if challenge_collection is not None else get_collection(CHALLENGES)
        )
        self.participant_collection = (
            participant_collection if participant_collection is not None
            else get_collection(CHALLENGE_PARTICIPANTS)
        )

    async def find_by_id(self, challenge_id: str) -> Optional[Challenge]:
        try:
            object_id = ObjectId(challenge_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.challenge_collection.find_one({ChallengeFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding challenge: {str(e)}")
        return self._document_to_challenge(document) if document else None

    async def list_active(self) -> List[Challenge]:
        try:
            cursor = self.challenge_collection.find({ChallengeFields.ACTIVE: True})
            return [self._document_to_challenge(document) async for document in cursor]
        except Exception as e:
            raise RuntimeError(f"Error listing challenges: {str(e)}")

    async def save(self, challenge: Challenge) -> Challenge:
        document = self._challenge_to_dict(challenge)
        try:
            if challenge.id:
                await self.challenge_collection.update_one(
                    {ChallengeFields.MONGO_ID: ObjectId(challenge.id)},
                    {"$set": document},
                )
                document[ChallengeFields.MONGO_ID] = ObjectId(challenge.id)
            else:
                result = await self.challenge_collection.insert_one(document)
                document[ChallengeFields.MONGO_ID] = result.inserted_id
        except (InvalidId, TypeError):
            raise ValueError(f"Invalid challenge ID format: {challenge.id}")
        except Exception as e:
            raise RuntimeError(f"Error saving challenge: {str(e)}")
        return self._document_to_challenge(document)

    async def insert_if_missing(self, challenge: Challenge) -> bool:
        try:
            result = await self.challenge_collection.update_one(
                {ChallengeFields.TITLE: challenge.title},
                {"$setOnInsert": self._challenge_to_dict(challenge)},
                upsert=True,
            )
        except DuplicateKeyError:
            # Another worker inserted it first
            return False
        except Exception as e:
            raise RuntimeError(f"Error seeding challenge: {str(e)}")
        return result.upserted_id is not None

    async def find_participation(self, challenge_id: str, user_id: str) -> Optional[ChallengeParticipation]:
        try:
            document = await self.participant_collection.find_one({
                ParticipantFields.CHALLENGE_ID: challenge_id,
                ParticipantFields.USER_ID: user_id,
            })
        except Exception as e:
            raise RuntimeError(f"Error finding participation: {str(e)}")
        return self._document_to_participation(document) if document else None

    async def list_participations(self, user_id: str) -> List[ChallengeParticipation]:
        try:
            cursor = self.participant_collection.find({ParticipantFields.USER_ID: user_id})
            return [self._document_to_participation(document) async for document in cursor]
        except Exception as e:
            raise RuntimeError(f"Error listing participations: {str(e)}")

    async def join(self, challenge_id: str, user_id: str) -> ChallengeParticipation:
        key = {
            ParticipantFields.CHALLENGE_ID: challenge_id,
            ParticipantFields.USER_ID: user_id,
        }
        try:
            document = await self.participant_collection.find_one_and_update(
                key,
                {"$setOnInsert": {
                    ParticipantFields.PROGRESS: 0.0,
                    ParticipantFields.COMPLETED: False,
                    ParticipantFields.JOINED_AT: utc_now(),
                    ParticipantFields.COMPLETED_AT: None,
                }},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            # Lost an upsert race against the same user; the row exists now
            document = await self.participant_collection.find_one(key)
        except Exception as e:
            raise RuntimeError(f"Error joining challenge: {str(e)}")
        return self._document_to_participation(document)

    async def add_progress(
        self,
        challenge_id: str,
        user_id: str,
        amount: float,
        target: float,
    ) -> Optional[ChallengeParticipation]:
        # Pipeline update: increment, cap at target and flip completed in one write
        capped_progress = {"$min": [{"$add": [f"${ParticipantFields.PROGRESS}", amount]}, target]}
        try:
            document = await self.participant_collection.find_one_and_update(
                {
                    ParticipantFields.CHALLENGE_ID: challenge_id,
                    ParticipantFields.USER_ID: user_id,
                    ParticipantFields.COMPLETED: False,
                },
                [
                    {"$set": {ParticipantFields.PROGRESS: capped_progress}},
                    {"$set": {
                        ParticipantFields.COMPLETED: {"$gte": [f"${ParticipantFields.PROGRESS}", target]},
                        ParticipantFields.COMPLETED_AT: {
                            "$cond": [
                                {"$gte": [f"${ParticipantFields.PROGRESS}", target]},
                                "$$NOW",
                                None,
                            ]
                        },
                    }},
                ],
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise RuntimeError(f"Error recording challenge progress: {str(e)}")
        return self._document_to_participation(document) if document else None

    async def count_completed(self, user_id: str) -> int:
        try:
            return await self.participant_collection.count_documents({
                ParticipantFields.USER_ID: user_id,
                ParticipantFields.COMPLETED: True,
            })
        except Exception as e:
            raise RuntimeError(f"Error counting completed challenges: {str(e)}")

    def _challenge_to_dict(self, challenge: Challenge) -> Dict[str, Any]:
        return {
            ChallengeFields.TITLE: challenge.title,
            ChallengeFields.DESCRIPTION: challenge.description,
            ChallengeFields.TARGET: challenge.target,
            ChallengeFields.UNIT: challenge.unit,
            ChallengeFields.BADGE: challenge.badge,
            ChallengeFields.LEVEL_REWARD: challenge.level_reward,
            ChallengeFields.POINTS_REWARD: challenge.points_reward,
            ChallengeFields.ACTIVE: challenge.active,
        }

    def _document_to_challenge(self, document: Dict[str, Any]) -> Challenge:
        return Challenge(
            id=str(document[ChallengeFields.MONGO_ID]),
            title=document.get(ChallengeFields.TITLE, ""),
            description=document.get(ChallengeFields.DESCRIPTION, ""),
            target=float(document.get(ChallengeFields.TARGET) or 0),
            unit=document.get(ChallengeFields.UNIT, "items"),
            badge=document.get(ChallengeFields.BADGE),
            level_reward=document.get(ChallengeFields.LEVEL_REWARD),
            points_reward=int(document.get(ChallengeFields.POINTS_REWARD) or 0),
            active=bool(document.get(ChallengeFields.ACTIVE, True)),
        )

    def _document_to_participation(self, document: Dict[str, Any]) -> ChallengeParticipation:
        return ChallengeParticipation(
            id=str(document[ParticipantFields.MONGO_ID]),
            challenge_id=document.get(ParticipantFields.CHALLENGE_ID, ""),
            user_id=document.get(ParticipantFields.USER_ID, ""),
            progress=float(document.get(ParticipantFields.PROGRESS) or 0.0),
            completed=bool(document.get(ParticipantFields.COMPLETED, False)),
            joined_at=ensure_utc(document.get(ParticipantFields.JOINED_AT)),
            completed_at=ensure_utc(document.get(ParticipantFields.COMPLETED_AT)),
        )
