# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.eco_tips_dto import (
    EcoTipRequest,
    EcoTipResponse,
    RecommendationRequest,
    RecommendationResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.eco_tips import GetEcoTipUseCase, GetRecommendationUseCase
from ...core.exceptions import ExternalServiceError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import service_unavailable

router = APIRouter(tags=["eco-tips"])


@router.post("", response_model=EcoTipResponse)
async def get_eco_tip(
    request: EcoTipRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> EcoTipResponse:
    """Ask the eco-tips assistant a sustainability question"""
    use_case = get_container().get(GetEcoTipUseCase)
    try:
        reply = await use_case.execute(request.message)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
    except ExternalServiceError as exception:
        raise service_unavailable(exception, "Eco tip")
    return EcoTipResponse(reply=reply)


@router.post("/recommendation", response_model=RecommendationResponse)
async def get_recommendation(
    request: RecommendationRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> RecommendationResponse:
    use_case = get_container().get(GetRecommendationUseCase)
    try:
        recommendation = await use_case.execute(request.answer)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
    return RecommendationResponse(recommendation=recommendation)
