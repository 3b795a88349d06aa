"""API routes module."""

from .decks import router as decks_router
from .quiz import router as quiz_router
from .sentences import router as sentences_router
from .stats import router as stats_router

__all__ = ["decks_router", "quiz_router", "sentences_router", "stats_router"]
