"""FastAPI dependency injection module.

Provides singleton instances of services for API routes.
Uses lifespan events for initialization and cleanup.
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status

from vyvu.composition import (
    create_deck_catalog,
    create_gamification_engine,
    create_progress_store,
    create_quiz_engine,
    create_speech_adapter,
)
from vyvu.domain.services.deck_catalog import DeckCatalog, UnknownDeckError, parse_deck
from vyvu.domain.services.gamification_engine import GamificationEngine
from vyvu.domain.services.quiz_engine import QuizEngine
from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.infrastructure.progress_store import ProgressStore

logger = logging.getLogger(__name__)


# Singletons stored at module level
_progress_store: ProgressStore | None = None
_deck_catalog: DeckCatalog | None = None
_gamification_engine: GamificationEngine | None = None
_quiz_engine: QuizEngine | None = None


async def init_dependencies() -> None:
    """Initialize all singleton dependencies.

    Called during FastAPI lifespan startup. Decks are loaded before the
    first request is served.
    """
    global _progress_store, _deck_catalog, _gamification_engine, _quiz_engine

    _progress_store = create_progress_store()

    _deck_catalog = create_deck_catalog(_progress_store)
    await _deck_catalog.load()

    _gamification_engine = create_gamification_engine(_progress_store)
    _quiz_engine = create_quiz_engine(
        catalog=_deck_catalog,
        store=_progress_store,
        gamification=_gamification_engine,
        speech=create_speech_adapter(),
    )


async def cleanup_dependencies() -> None:
    """Cleanup dependencies on shutdown.

    Called during FastAPI lifespan shutdown.
    """
    global _progress_store, _deck_catalog, _gamification_engine, _quiz_engine

    if _progress_store is not None:
        _progress_store.close()

    _progress_store = None
    _deck_catalog = None
    _gamification_engine = None
    _quiz_engine = None


def get_progress_store() -> ProgressStore:
    """Dependency: Get ProgressStore instance."""
    if _progress_store is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _progress_store


def get_deck_catalog() -> DeckCatalog:
    """Dependency: Get DeckCatalog instance."""
    if _deck_catalog is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _deck_catalog


def get_gamification_engine() -> GamificationEngine:
    """Dependency: Get GamificationEngine instance."""
    if _gamification_engine is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _gamification_engine


def get_quiz_engine() -> QuizEngine:
    """Dependency: Get QuizEngine instance."""
    if _quiz_engine is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _quiz_engine


def get_deck(deck: str) -> DeckType:
    """Dependency: Resolve the {deck} path parameter.

    Raises:
        HTTPException 404 if the deck does not exist
    """
    try:
        return parse_deck(deck)
    except UnknownDeckError as e:
        raise api_error(status.HTTP_404_NOT_FOUND, "DECK_NOT_FOUND", str(e)) from None


def api_error(status_code: int, code: str, message: str) -> HTTPException:
    """Build an HTTPException with the standard error envelope."""
    return HTTPException(
        status_code=status_code,
        detail={"error": {"code": code, "message": message}},
    )


# Type aliases for dependency injection
ProgressStoreDep = Annotated[ProgressStore, Depends(get_progress_store)]
DeckCatalogDep = Annotated[DeckCatalog, Depends(get_deck_catalog)]
GamificationEngineDep = Annotated[GamificationEngine, Depends(get_gamification_engine)]
QuizEngineDep = Annotated[QuizEngine, Depends(get_quiz_engine)]
DeckDep = Annotated[DeckType, Depends(get_deck)]
