"""Deck catalog service: loaded decks, learned state and word lookup."""

import asyncio
import logging

from vyvu.domain.entities.vocabulary_entry import VocabularyEntry
from vyvu.domain.services.catalog_normalizer import merge_entries
from vyvu.domain.services.sentence_resolver import SentenceResolver
from vyvu.domain.text_normalizer import normalize
from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.example_sentence import ExampleSentence
from vyvu.domain.value_objects.gamification_state import GamificationState
from vyvu.domain.value_objects.statistics import AppStatistics, DeckStats
from vyvu.ports.deck_source import DeckSource
from vyvu.ports.progress_store import LearnedStore

logger = logging.getLogger(__name__)


class UnknownDeckError(Exception):
    """Raised when a deck name does not match any bundled deck."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown deck {name!r}")


def parse_deck(name: str) -> DeckType:
    """Resolve a deck name case-insensitively.

    Raises:
        UnknownDeckError: If no deck has this name
    """
    try:
        return DeckType(name.strip().lower())
    except ValueError:
        raise UnknownDeckError(name) from None


class WordNotFoundError(Exception):
    """Raised when a word id is not part of a deck."""

    def __init__(self, word_id: str, deck: DeckType):
        self.word_id = word_id
        self.deck = deck
        super().__init__(f"Word {word_id!r} not found in deck {deck}")


class DeckCatalog:
    """Holds every deck for the lifetime of the app.

    Responsibilities:
    - Concurrent loading of decks and sentence files at startup
    - Merging raw entries into canonical entries
    - Word-provider queries for the quiz engine
    - Learned/unlearned toggling, reset and search for the word list

    Decks are immutable once loaded; learned state lives in the LearnedStore.
    """

    def __init__(self, source: DeckSource, learned_store: LearnedStore):
        """Initialize deck catalog.

        Args:
            source: Port for bundled deck and sentence data
            learned_store: Port for per-deck learned sets
        """
        self._source = source
        self._learned_store = learned_store
        self._decks: dict[DeckType, list[VocabularyEntry]] = {deck: [] for deck in DeckType}
        self._resolvers: dict[DeckType, SentenceResolver] = {
            deck: SentenceResolver() for deck in DeckType
        }
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    async def load(self) -> None:
        """Load all decks concurrently and build sentence indexes.

        A deck whose loading fails is left empty; the others are still used.
        """
        decks = list(DeckType)
        results = await asyncio.gather(
            *[asyncio.to_thread(self._load_deck, deck) for deck in decks],
            return_exceptions=True,
        )

        for deck, result in zip(decks, results, strict=True):
            if isinstance(result, Exception):
                logger.warning(f"Failed to load deck {deck}: {result}")
                continue
            entries, resolver = result
            self._decks[deck] = entries
            self._resolvers[deck] = resolver
            logger.info(f"Loaded deck {deck}: {len(entries)} words, {len(resolver)} sentences")

        self._loaded = True

    def _load_deck(self, deck: DeckType) -> tuple[list[VocabularyEntry], SentenceResolver]:
        entries = merge_entries(self._source.load_deck(deck))
        sentences = self._source.load_sentences(deck)
        return entries, SentenceResolver(sentences, entries)

    # -------------------------------------------------------------------------
    # Word provider
    # -------------------------------------------------------------------------

    def words(self, deck: DeckType) -> list[VocabularyEntry]:
        """All canonical entries of a deck in deck order."""
        return list(self._decks[deck])

    def unlearned_words(self, deck: DeckType) -> list[VocabularyEntry]:
        """Entries whose id is not in the deck's learned set."""
        learned = self._learned_store.learned_ids(deck)
        return [w for w in self._decks[deck] if w.id not in learned]

    def find_word(self, deck: DeckType, word_id: str) -> VocabularyEntry:
        """Look up a word by id.

        Raises:
            WordNotFoundError: If the deck has no such word
        """
        for word in self._decks[deck]:
            if word.id == word_id:
                return word
        raise WordNotFoundError(word_id, deck)

    def search(self, deck: DeckType, text: str) -> list[VocabularyEntry]:
        """Words with any German or Vietnamese form containing text.

        Matching is case- and accent-insensitive; empty text returns the
        whole deck.
        """
        needle = normalize(text)
        if not needle:
            return self.words(deck)
        return [
            w
            for w in self._decks[deck]
            if any(needle in normalize(f) for f in (*w.all_source_forms, *w.all_target_forms))
        ]

    def sentence_for(self, deck: DeckType, word: VocabularyEntry) -> ExampleSentence | None:
        """Example sentence for a word, None when there is none."""
        return self._resolvers[deck].resolve(word)

    # -------------------------------------------------------------------------
    # Learned state
    # -------------------------------------------------------------------------

    def is_learned(self, word: VocabularyEntry, deck: DeckType) -> bool:
        return self._learned_store.is_learned(word.id, deck)

    def mark_learned(self, word: VocabularyEntry, deck: DeckType) -> None:
        self._learned_store.set_learned(word.id, deck, True)

    def mark_unlearned(self, word: VocabularyEntry, deck: DeckType) -> None:
        self._learned_store.set_learned(word.id, deck, False)

    def toggle_learned(self, deck: DeckType, word_id: str) -> bool:
        """Flip the learned state of a word.

        Raises:
            WordNotFoundError: If the deck has no such word

        Returns:
            The new learned state
        """
        word = self.find_word(deck, word_id)
        learned = not self.is_learned(word, deck)
        self._learned_store.set_learned(word.id, deck, learned)
        return learned

    def reset_progress(self, deck: DeckType) -> None:
        """Forget every learned word of a deck."""
        self._learned_store.reset_learned(deck)
        logger.info(f"Progress reset for deck {deck}")

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def deck_stats(self, deck: DeckType) -> DeckStats:
        """Learned counts for one deck (ids no longer in the deck are ignored)."""
        learned = self._learned_store.learned_ids(deck)
        words = self._decks[deck]
        return DeckStats(
            name=deck.value,
            title=deck.title,
            total_count=len(words),
            learned_count=sum(1 for w in words if w.id in learned),
        )

    def statistics(self, gamification: GamificationState) -> AppStatistics:
        """Aggregate statistics for the home screen."""
        core = self.deck_stats(DeckType.CORE)
        vyvu = self.deck_stats(DeckType.VYVU)
        return AppStatistics(
            total_words=core.total_count + vyvu.total_count,
            learned_words=core.learned_count + vyvu.learned_count,
            current_streak=gamification.current_streak,
            longest_streak=gamification.longest_streak,
            total_xp=gamification.total_xp,
            core_progress=core.progress,
            vyvu_progress=vyvu.progress,
        )
