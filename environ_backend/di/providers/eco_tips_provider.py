from typing import TYPE_CHECKING
from ...application.use_cases.eco_tips import GetEcoTipUseCase, GetRecommendationUseCase
from ...infrastructure.external import GeminiClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EcoTipsProvider:
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetEcoTipUseCase,
            lambda: GetEcoTipUseCase(gemini_client=container.get(GeminiClient))
        )
        container.register_factory(GetRecommendationUseCase, GetRecommendationUseCase)
