from ....core.exceptions import NotFoundError
from ....domain.repositories.challenge_repository import ChallengeRepository
from ...dto.community_dto import ChallengeResponse
from .challenge_mapping import to_challenge_response


class JoinChallengeUseCase:
    """Join a challenge. Joining again returns the existing participation."""

    def __init__(self, challenge_repository: ChallengeRepository) -> None:
        self.challenge_repository = challenge_repository

    async def execute(self, user_id: str, challenge_id: str) -> ChallengeResponse:
        challenge = await self.challenge_repository.find_by_id(challenge_id)
        if challenge is None or not challenge.active:
            raise NotFoundError("Challenge not found")

        participation = await self.challenge_repository.join(challenge.id or challenge_id, user_id)
        return to_challenge_response(challenge, participation)
