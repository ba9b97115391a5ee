from ....domain.gamification import recycling_recommendation


class GetRecommendationUseCase:
    """Daily "did you recycle today?" nudge"""

    async def execute(self, answer: str) -> str:
        if not answer or not answer.strip():
            raise ValueError("Please answer yes or no.")
        return recycling_recommendation(answer)
