from .get_eco_tip import GetEcoTipUseCase
from .get_recommendation import GetRecommendationUseCase

__all__ = ["GetEcoTipUseCase", "GetRecommendationUseCase"]
