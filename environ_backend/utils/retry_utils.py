"""
Retry utilities for resilient database and API reads.

Provides an async retry decorator with exponential backoff and jitter.
"""

import asyncio
import functools
import logging
import random
from typing import Callable, Tuple, Type

from ..core.exceptions import DatabaseConnectionError, ExternalServiceError


logger = logging.getLogger(__name__)


def async_retry_on_exception(
    max_retries: int = 3,
    initial_delay: float = 1.0,
    max_delay: float = 30.0,
    exponential_base: float = 2.0,
    jitter: bool = True,
    exceptions: Tuple[Type[Exception], ...] = (DatabaseConnectionError, ExternalServiceError)
) -> Callable:
    """
    Decorator for retrying async functions on specific exceptions.

    Args:
        max_retries: Maximum number of retry attempts
        initial_delay: Initial delay between retries (seconds)
        max_delay: Maximum delay between retries (seconds)
        exponential_base: Base for exponential backoff
        jitter: Whether to add random jitter to delays
        exceptions: Tuple of exception types to retry on

    Returns:
        Decorated async function

    Example:
        @async_retry_on_exception(max_retries=3)
        async def fetch_feed():
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    if not getattr(e, "retryable", True):
                        logger.warning(f"{func.__name__}: Non-retryable error: {e}")
                        raise

                    if attempt >= max_retries:
                        logger.error(
                            f"{func.__name__}: All {max_retries + 1} attempts failed. Last error: {e}"
                        )
                        raise

                    delay = min(initial_delay * (exponential_base ** attempt), max_delay)
                    if jitter:
                        delay = delay * (0.5 + random.random())

                    logger.warning(
                        f"{func.__name__}: Attempt {attempt + 1}/{max_retries + 1} failed: {e}. "
                        f"Retrying in {delay:.2f}s..."
                    )
                    await asyncio.sleep(delay)

        return wrapper
    return decorator
