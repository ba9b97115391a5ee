# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.referral_repository import ReferralRepository
from ...domain.models.community import Referral
from ...domain.constants import ReferralFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import REFERRALS, get_collection


class MongoReferralRepository(ReferralRepository):
    """MongoDB implementation of ReferralRepository"""

    def __init__(self, referral_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.referral_collection = (
            referral_collection if referral_collection is not None else get_collection(REFERRALS)
        )

    async def save(self, referral: Referral) -> Referral:
        document = {
            ReferralFields.REFERRER_ID: referral.referrer_id,
            ReferralFields.REFERRED_EMAIL: referral.referred_email,
            ReferralFields.CREATED_AT: referral.created_at or utc_now(),
        }
        try:
            result = await self.referral_collection.insert_one(document)
        except DuplicateKeyError:
            raise ValueError("You have already referred this email")
        except Exception as e:
            raise RuntimeError(f"Error saving referral: {str(e)}")
        document[ReferralFields.MONGO_ID] = result.inserted_id
        return self._document_to_referral(document)

    async def find(self, referrer_id: str, referred_email: str) -> Optional[Referral]:
        try:
            document = await self.referral_collection.find_one({
                ReferralFields.REFERRER_ID: referrer_id,
                ReferralFields.REFERRED_EMAIL: referred_email,
            })
        except Exception as e:
            raise RuntimeError(f"Error finding referral: {str(e)}")
        return self._document_to_referral(document) if document else None

    async def list_by_referrer(self, referrer_id: str) -> List[Referral]:
        try:
            cursor = (
                self.referral_collection
                .find({ReferralFields.REFERRER_ID: referrer_id})
                .sort(ReferralFields.CREATED_AT, DESCENDING)
            )
            return [self._document_to_referral(document) async for document in cursor]
        except Exception as e:
            raise RuntimeError(f"Error listing referrals: {str(e)}")

    async def count_by_referrer(self, referrer_id: str) -> int:
        try:
            return await self.referral_collection.count_documents({ReferralFields.REFERRER_ID: referrer_id})
        except Exception as e:
            raise RuntimeError(f"Error counting referrals: {str(e)}")

    def _document_to_referral(self, document: Dict[str, Any]) -> Referral:
        return Referral(
            id=str(document[ReferralFields.MONGO_ID]),
            referrer_id=document.get(ReferralFields.REFERRER_ID, ""),
            referred_email=document.get(ReferralFields.REFERRED_EMAIL, ""),
            created_at=ensure_utc(document.get(ReferralFields.CREATED_AT)),
        )
