"""Infrastructure layer - local storage integrations."""

from .progress_store import Keys, ProgressStore
from .retry import RetryableError, is_transient_storage_error, with_retry

__all__ = [
    "Keys",
    "ProgressStore",
    "RetryableError",
    "is_transient_storage_error",
    "with_retry",
]
