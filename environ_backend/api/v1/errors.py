"""Mapping of infrastructure errors to HTTP responses shared by the controllers"""

import logging

from fastapi import HTTPException, status

from ...core.exceptions import ExternalServiceError, get_user_message

logger = logging.getLogger(__name__)


def service_unavailable(exception: ExternalServiceError, action: str) -> HTTPException:
    logger.error(f"{action} failed: {exception}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=get_user_message(exception),
    )


def internal_error(exception: Exception, action: str) -> HTTPException:
    logger.error(f"{action} failed: {exception}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{action} failed. Please try again.",
    )
