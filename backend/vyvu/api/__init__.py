"""API layer - FastAPI routes and dependencies."""

from .dependencies import (
    DeckCatalogDep,
    DeckDep,
    GamificationEngineDep,
    ProgressStoreDep,
    QuizEngineDep,
    api_error,
    cleanup_dependencies,
    get_deck,
    get_deck_catalog,
    get_gamification_engine,
    get_progress_store,
    get_quiz_engine,
    init_dependencies,
)
from .routes import decks_router, quiz_router, sentences_router, stats_router

__all__ = [
    # Routes
    "decks_router",
    "quiz_router",
    "sentences_router",
    "stats_router",
    # Dependencies
    "init_dependencies",
    "cleanup_dependencies",
    "get_progress_store",
    "get_deck_catalog",
    "get_gamification_engine",
    "get_quiz_engine",
    "get_deck",
    "api_error",
    # Type aliases
    "ProgressStoreDep",
    "DeckCatalogDep",
    "GamificationEngineDep",
    "QuizEngineDep",
    "DeckDep",
]
