from typing import List

from ....domain.repositories.challenge_repository import ChallengeRepository
from ...dto.community_dto import ChallengeResponse
from .challenge_mapping import to_challenge_response


class ListChallengesUseCase:
    """Active challenges annotated with the caller's participation"""

    def __init__(self, challenge_repository: ChallengeRepository) -> None:
        self.challenge_repository = challenge_repository

    async def execute(self, user_id: str) -> List[ChallengeResponse]:
        challenges = await self.challenge_repository.list_active()
        participations = {
            p.challenge_id: p
            for p in await self.challenge_repository.list_participations(user_id)
        }
        return [
            to_challenge_response(challenge, participations.get(challenge.id or ""))
            for challenge in challenges
        ]
