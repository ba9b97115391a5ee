# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

# Local application imports
from ...application.dto.classification_dto import ClassificationResponse, ClassifyWasteResponse
from ...application.dto.user_dto import UserResponse
from ...application.services.image_validation import INVALID_IMAGE_MESSAGE
from ...application.use_cases.classification import ClassifyWasteUseCase, ListClassificationsUseCase
from ...core.config import get_settings
from ...core.exceptions import ExternalServiceError, ImageTooLargeError
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import internal_error, service_unavailable

logger = logging.getLogger(__name__)

router = APIRouter(tags=["classifications"])


@router.post("", response_model=ClassifyWasteResponse, status_code=status.HTTP_201_CREATED)
async def classify_waste(
    file: Optional[UploadFile] = File(None),
    current_user: UserResponse = Depends(get_current_user),
) -> ClassifyWasteResponse:
    """
    Classify an uploaded waste photo and award points

    Args:
        file: Image upload (multipart field "file")
        current_user: Current authenticated user (from dependency)

    Returns:
        ClassifyWasteResponse with the result and the reward
    """
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_IMAGE_MESSAGE)

    # Read one byte past the limit so oversize uploads are detected without reading them whole
    max_bytes = get_settings().max_upload_mb * 1024 * 1024
    data = await file.read(max_bytes + 1)

    use_case = get_container().get(ClassifyWasteUseCase)
    try:
        return await use_case.execute(
            user_id=current_user.id,
            data=data,
            content_type=file.content_type,
            filename=file.filename,
        )
    except ImageTooLargeError as exception:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=str(exception)
        )
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    except ExternalServiceError as exception:
        raise service_unavailable(exception, "Classification")
    except RuntimeError as exception:
        raise internal_error(exception, "Classification")


@router.get("", response_model=List[ClassificationResponse])
async def list_classifications(
    limit: int = Query(5, ge=1, le=50),
    current_user: UserResponse = Depends(get_current_user),
) -> List[ClassificationResponse]:
    """The current user's classification history, newest first"""
    use_case = get_container().get(ListClassificationsUseCase)
    try:
        return await use_case.execute(current_user.id, limit)
    except RuntimeError as exception:
        raise internal_error(exception, "Loading history")
