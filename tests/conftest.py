from __future__ import annotations

import random
import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
BACKEND = ROOT / "backend"
if str(BACKEND) not in sys.path:
    sys.path.insert(0, str(BACKEND))

from vyvu.domain.entities.category import Category  # noqa: E402
from vyvu.domain.entities.vocabulary_entry import VocabularyEntry  # noqa: E402
from vyvu.domain.services.gamification_engine import GamificationEngine  # noqa: E402
from vyvu.domain.services.quiz_engine import QuizEngine  # noqa: E402
from vyvu.domain.value_objects.deck_type import DeckType  # noqa: E402
from vyvu.domain.value_objects.gamification_state import GamificationState  # noqa: E402
from vyvu.domain.value_objects.settings import Settings  # noqa: E402
from vyvu.domain.value_objects.speech_language import SpeechLanguage  # noqa: E402


def entry(
    source: str,
    target: str,
    source_alternates: tuple[str, ...] = (),
    target_alternates: tuple[str, ...] = (),
    id: str | None = None,
    category: Category = Category.OTHER,
) -> VocabularyEntry:
    return VocabularyEntry.create(
        source=source,
        target=target,
        source_alternates=source_alternates,
        target_alternates=target_alternates,
        category=category,
        id=id,
    )


class MemoryProgress:
    """In-memory LearnedStore, GamificationStore and SettingsStore."""

    def __init__(self) -> None:
        self.learned: dict[DeckType, set[str]] = {deck: set() for deck in DeckType}
        self.gamification = GamificationState()
        self.settings = Settings()
        self.fail_writes = False

    def is_learned(self, word_id: str, deck: DeckType) -> bool:
        return word_id in self.learned[deck]

    def learned_ids(self, deck: DeckType) -> set[str]:
        return set(self.learned[deck])

    def set_learned(self, word_id: str, deck: DeckType, learned: bool) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        if learned:
            self.learned[deck].add(word_id)
        else:
            self.learned[deck].discard(word_id)

    def reset_learned(self, deck: DeckType) -> None:
        self.learned[deck] = set()

    def get_gamification_state(self) -> GamificationState:
        state = self.gamification
        return GamificationState(
            current_streak=state.current_streak,
            longest_streak=state.longest_streak,
            total_xp=state.total_xp,
            last_session_date=state.last_session_date,
        )

    def persist_gamification_state(self, state: GamificationState) -> None:
        self.gamification = state

    def get_settings(self) -> Settings:
        return self.settings

    def save_settings(self, settings: Settings) -> None:
        self.settings = settings


class StaticWords:
    """WordProvider over fixed word lists, filtered by a learned store."""

    def __init__(self, decks: dict[DeckType, list[VocabularyEntry]], store: MemoryProgress):
        self._decks = decks
        self._store = store

    def words(self, deck: DeckType) -> list[VocabularyEntry]:
        return list(self._decks.get(deck, []))

    def unlearned_words(self, deck: DeckType) -> list[VocabularyEntry]:
        return [w for w in self.words(deck) if not self._store.is_learned(w.id, deck)]


class RecordingSpeech:
    def __init__(self) -> None:
        self.calls: list[tuple[str, SpeechLanguage, float]] = []

    def speak(self, text: str, language: SpeechLanguage, rate: float) -> None:
        self.calls.append((text, language, rate))


class FixedClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def progress() -> MemoryProgress:
    return MemoryProgress()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 10, 9, 30))


@pytest.fixture
def core_words() -> list[VocabularyEntry]:
    return [
        entry("das Haus", "nhà", id="w1"),
        entry("das Wasser", "nước", id="w2"),
        entry("essen", "ăn", id="w3"),
        entry("gut", "tốt", id="w4"),
        entry("groß", "to", target_alternates=("lớn",), id="w5"),
    ]


@pytest.fixture
def speech() -> RecordingSpeech:
    return RecordingSpeech()


@pytest.fixture
def make_engine(progress: MemoryProgress, clock: FixedClock, speech: RecordingSpeech):
    def _make(words: list[VocabularyEntry], deck: DeckType = DeckType.CORE) -> QuizEngine:
        provider = StaticWords({deck: words}, progress)
        return QuizEngine(
            word_provider=provider,
            learned_store=progress,
            gamification=GamificationEngine(progress, clock=clock),
            speech=speech,
            settings_store=progress,
            rng=random.Random(7),
        )

    return _make
