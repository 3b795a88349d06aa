"""Application configuration loaded from environment variables.

Provides type-safe access to configuration with sensible defaults.
Production defaults are restrictive for security.
"""

import logging
import os

from vyvu.domain.constants import DEFAULT_QUIZ_SIZE

logger = logging.getLogger(__name__)


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins from environment.

    Environment variable: CORS_ORIGINS (comma-separated)
    Default: localhost ports 3000-3002 for development
    """
    default_origins = "http://localhost:3000,http://localhost:3001,http://localhost:3002"
    origins_str = os.getenv("CORS_ORIGINS", default_origins)
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


def get_cors_allow_credentials() -> bool:
    """Get CORS allow_credentials setting.

    Environment variable: CORS_ALLOW_CREDENTIALS
    Default: false (the API is cookie-less)
    """
    return os.getenv("CORS_ALLOW_CREDENTIALS", "false").lower() == "true"


# Restricted HTTP methods - only what the API actually uses
CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "OPTIONS"]

# Restricted headers - only what's needed for the API
CORS_ALLOWED_HEADERS = [
    "Accept",
    "Accept-Language",
    "Content-Type",
    "X-Requested-With",
]


def is_production() -> bool:
    """Check if running in production environment."""
    return os.getenv("ENVIRONMENT", "development").lower() == "production"


def get_data_dir() -> str | None:
    """Get directory holding deck JSON files.

    Environment variable: VYVU_DATA_DIR
    Default: None (use the decks bundled with the package)
    """
    return os.getenv("VYVU_DATA_DIR") or None


def get_progress_db_path() -> str:
    """Get SQLite path for learner progress.

    Environment variable: PROGRESS_DB_PATH
    Default: data/progress.db (":memory:" keeps progress in memory)
    """
    return os.getenv("PROGRESS_DB_PATH", "data/progress.db")


def get_speech_adapter() -> str:
    """Get speech adapter name.

    Environment variable: SPEECH_ADAPTER ("log" or "none")
    Default: log
    """
    return os.getenv("SPEECH_ADAPTER", "log").lower()


def get_default_quiz_size() -> int:
    """Get quiz size used when a start request omits it.

    Environment variable: DEFAULT_QUIZ_SIZE
    Default: 10
    """
    value = os.getenv("DEFAULT_QUIZ_SIZE", str(DEFAULT_QUIZ_SIZE))
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid DEFAULT_QUIZ_SIZE {value!r}, using {DEFAULT_QUIZ_SIZE}")
        return DEFAULT_QUIZ_SIZE
