"""Retry utilities using tenacity for local storage writes."""

import logging
import sqlite3
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

from tenacity import (
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_INITIAL_WAIT = 0.05  # seconds
DEFAULT_MAX_WAIT = 1.0  # seconds
DEFAULT_JITTER = 0.05  # seconds


class RetryableError(Exception):
    """Base class for errors that should trigger retries."""

    pass


def is_transient_storage_error(error: BaseException) -> bool:
    """Locked/busy SQLite databases and explicit RetryableErrors are transient."""
    if isinstance(error, RetryableError):
        return True
    if isinstance(error, sqlite3.OperationalError):
        message = str(error).lower()
        return "locked" in message or "busy" in message
    return False


def with_retry(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_wait: float = DEFAULT_INITIAL_WAIT,
    max_wait: float = DEFAULT_MAX_WAIT,
) -> Callable:
    """Decorator retrying transient storage errors with exponential backoff.

    Uses exponential backoff with jitter so that two processes sharing the
    database file do not retry in lockstep. Non-transient errors propagate
    immediately; the last transient error is re-raised after max_attempts.

    Args:
        max_attempts: Maximum number of attempts (default 3)
        initial_wait: Initial wait time in seconds
        max_wait: Maximum wait time in seconds

    Returns:
        Decorated function with retry behavior
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            for attempt in Retrying(
                stop=stop_after_attempt(max_attempts),
                wait=wait_exponential_jitter(
                    initial=initial_wait,
                    max=max_wait,
                    jitter=DEFAULT_JITTER,
                ),
                retry=retry_if_exception(is_transient_storage_error),
                reraise=True,
            ):
                with attempt:
                    attempt_num = attempt.retry_state.attempt_number
                    if attempt_num > 1:
                        logger.warning(
                            f"Retry attempt {attempt_num}/{max_attempts} for {func.__name__}"
                        )
                    return func(*args, **kwargs)
            raise RuntimeError("No attempts made")

        return wrapper

    return decorator
