from typing import Optional

from ....domain.models.community import Challenge, ChallengeParticipation
from ...dto.community_dto import ChallengeResponse


def to_challenge_response(
    challenge: Challenge,
    participation: Optional[ChallengeParticipation] = None,
) -> ChallengeResponse:
    return ChallengeResponse(
        id=challenge.id or "",
        title=challenge.title,
        description=challenge.description,
        target=challenge.target,
        unit=challenge.unit,
        badge=challenge.badge,
        points_reward=challenge.points_reward,
        joined=participation is not None,
        progress=participation.progress if participation else 0.0,
        completed=participation.completed if participation else False,
    )
