"""
Custom exception hierarchy for the EnviRon backend.

Client mistakes are plain ValueError subclasses so use cases and controllers
can keep mapping them to 4xx responses. Infrastructure failures carry a
user-facing message that is safe to return over HTTP.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class EnvironError(Exception):
    """Base exception for all EnviRon infrastructure errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Input validation
# -----------------------------------------------------------------------------


class NotFoundError(ValueError):
    """Raised when a referenced resource does not exist."""
    pass


class ImageValidationError(ValueError):
    """Raised when an uploaded file is not an acceptable image."""
    pass


class ImageTooLargeError(ImageValidationError):
    """Raised when an uploaded image exceeds the configured size limit."""
    pass


# -----------------------------------------------------------------------------
# Database
# -----------------------------------------------------------------------------


class DatabaseError(EnvironError):
    """Base exception for database errors."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        retryable: bool = True,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.retryable = retryable


class DatabaseConnectionError(DatabaseError):
    """Raised when the database cannot be reached."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            user_message="Database connection failed. Please try again.",
            retryable=True,
            **kwargs,
        )


# -----------------------------------------------------------------------------
# External services
# -----------------------------------------------------------------------------


class ExternalServiceError(EnvironError):
    """Base exception for external service errors."""

    def __init__(
        self,
        message: str,
        service_name: Optional[str] = None,
        retryable: bool = True,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.service_name = service_name
        self.retryable = retryable


class ClassificationServiceError(ExternalServiceError):
    """Raised when the vision/LLM classification call fails."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Failed to classify image")
        super().__init__(message, service_name="Classifier", **kwargs)


class TextGenerationError(ExternalServiceError):
    """Raised when the generative text API fails."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Failed to get a response from the eco-tips assistant")
        super().__init__(message, service_name="Gemini", **kwargs)


class WeatherServiceError(ExternalServiceError):
    """Raised when the weather API fails."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", "Weather data unavailable")
        super().__init__(message, service_name="OpenWeather", **kwargs)


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API boundaries so internal details are never exposed.
    """
    if isinstance(exc, EnvironError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Something went wrong. Please try again."
