"""
POST /classify-waste: label detection kept at the root path for existing
clients. Errors use the {"error": "..."} body those clients expect.
"""

# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

# Local application imports
from ...application.dto.classification_dto import LabelDetectionRequest, LabelDetectionResponse
from ...application.use_cases.classification.detect_labels import DetectLabelsUseCase
from ...core.config import get_settings
from ...core.exceptions import ExternalServiceError, ImageTooLargeError, get_user_message
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["classification"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/classify-waste", response_model=LabelDetectionResponse)
async def classify_waste(request: Request):
    """
    Detect labels in a base64 encoded image.

    Body: {"imageBase64": "..."}. Returns {"labels": [...]} or {"error": "..."}.
    """
    max_body_bytes = get_settings().max_upload_mb * 1024 * 1024
    body = await request.body()
    if len(body) > max_body_bytes:
        return _error(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, "Request body too large")

    try:
        payload = LabelDetectionRequest.model_validate_json(body or b"{}")
    except ValidationError:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")

    if not payload.imageBase64:
        return _error(status.HTTP_400_BAD_REQUEST, "No image data provided")

    use_case = get_container().get(DetectLabelsUseCase)
    try:
        labels = await use_case.execute(payload.imageBase64)
    except ImageTooLargeError as e:
        return _error(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, str(e))
    except ValueError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except ExternalServiceError as e:
        logger.error(f"Label detection failed: {e}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, get_user_message(e))
    except Exception as e:
        # Existing clients always expect an {"error": ...} body
        logger.error(f"Unexpected label detection failure: {e}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to classify image")

    return LabelDetectionResponse(labels=labels)
