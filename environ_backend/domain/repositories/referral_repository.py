from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.community import Referral


class ReferralRepository(ABC):
    """Repository interface - referrals sent by users"""

    @abstractmethod
    async def save(self, referral: Referral) -> Referral:
        pass

    @abstractmethod
    async def find(self, referrer_id: str, referred_email: str) -> Optional[Referral]:
        pass

    @abstractmethod
    async def list_by_referrer(self, referrer_id: str) -> List[Referral]:
        pass

    @abstractmethod
    async def count_by_referrer(self, referrer_id: str) -> int:
        pass
