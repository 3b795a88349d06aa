"""
Composition Root.

Centralized dependency wiring for the application.
All factory functions that instantiate adapters belong here to maintain
hexagonal architecture (domain NEVER imports from adapters).
"""

import random

from vyvu.adapters.json_deck_source import JsonDeckSource
from vyvu.adapters.logging_speech import LoggingSpeechAdapter, SilentSpeechAdapter
from vyvu.config import get_data_dir, get_progress_db_path, get_speech_adapter
from vyvu.domain.services.deck_catalog import DeckCatalog
from vyvu.domain.services.gamification_engine import GamificationEngine
from vyvu.domain.services.quiz_engine import QuizEngine
from vyvu.infrastructure.progress_store import ProgressStore
from vyvu.ports.speech import SpeechPort


def create_progress_store(db_path: str | None = None) -> ProgressStore:
    """Create ProgressStore at the configured path.

    Args:
        db_path: Override for PROGRESS_DB_PATH

    Returns:
        ProgressStore backing learned sets, gamification state and settings
    """
    return ProgressStore(db_path or get_progress_db_path())


def create_deck_catalog(store: ProgressStore, data_dir: str | None = None) -> DeckCatalog:
    """Create DeckCatalog reading JSON decks.

    The catalog still has to be loaded with `await catalog.load()`.

    Args:
        store: Learned-state store
        data_dir: Override for VYVU_DATA_DIR

    Returns:
        Unloaded DeckCatalog
    """
    source = JsonDeckSource(data_dir or get_data_dir())
    return DeckCatalog(source, store)


def create_speech_adapter(name: str | None = None) -> SpeechPort:
    """Create the speech adapter selected by SPEECH_ADAPTER."""
    if (name or get_speech_adapter()) == "none":
        return SilentSpeechAdapter()
    return LoggingSpeechAdapter()


def create_gamification_engine(store: ProgressStore) -> GamificationEngine:
    """Create GamificationEngine persisting into store."""
    return GamificationEngine(store)


def create_quiz_engine(
    catalog: DeckCatalog,
    store: ProgressStore,
    gamification: GamificationEngine,
    speech: SpeechPort | None = None,
    rng: random.Random | None = None,
) -> QuizEngine:
    """Create QuizEngine wired to the catalog and progress store.

    Args:
        catalog: Word provider
        store: Learned-state and settings store
        gamification: Engine awarding XP on completion
        speech: Optional speech adapter
        rng: Optional seeded random source

    Returns:
        QuizEngine in the setup stage
    """
    return QuizEngine(
        word_provider=catalog,
        learned_store=store,
        gamification=gamification,
        speech=speech,
        settings_store=store,
        rng=rng,
    )
