# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.profile_dto import ProfileResponse, ProfileUpdateRequest
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.profile import GetProfileUseCase, UpdateProfileUseCase
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import internal_error

router = APIRouter(tags=["profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(current_user: UserResponse = Depends(get_current_user)) -> ProfileResponse:
    use_case = get_container().get(GetProfileUseCase)
    try:
        return await use_case.execute(current_user.id)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    except RuntimeError as exception:
        raise internal_error(exception, "Loading profile")


@router.patch("", response_model=ProfileResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ProfileResponse:
    """
    Update full name and/or city

    Email is read-only and not accepted here.
    """
    use_case = get_container().get(UpdateProfileUseCase)
    try:
        return await use_case.execute(current_user.id, request)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
    except RuntimeError as exception:
        raise internal_error(exception, "Updating profile")
