from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.community import Challenge, ChallengeParticipation


class ChallengeRepository(ABC):
    """Repository interface - challenges and per-user participation"""

    @abstractmethod
    async def find_by_id(self, challenge_id: str) -> Optional[Challenge]:
        pass

    @abstractmethod
    async def list_active(self) -> List[Challenge]:
        pass

    @abstractmethod
    async def save(self, challenge: Challenge) -> Challenge:
        pass

    @abstractmethod
    async def insert_if_missing(self, challenge: Challenge) -> bool:
        """Insert the challenge unless one with the same title exists. Returns True if inserted."""
        pass

    @abstractmethod
    async def find_participation(self, challenge_id: str, user_id: str) -> Optional[ChallengeParticipation]:
        pass

    @abstractmethod
    async def list_participations(self, user_id: str) -> List[ChallengeParticipation]:
        pass

    @abstractmethod
    async def join(self, challenge_id: str, user_id: str) -> ChallengeParticipation:
        """Create the participation if missing; joining twice returns the existing one"""
        pass

    @abstractmethod
    async def add_progress(
        self,
        challenge_id: str,
        user_id: str,
        amount: float,
        target: float,
    ) -> Optional[ChallengeParticipation]:
        """
        Add progress to an open participation, capped at target.

        Marks the participation completed when target is reached. Returns None
        when there is no open (joined, not completed) participation.
        """
        pass

    @abstractmethod
    async def count_completed(self, user_id: str) -> int:
        pass
