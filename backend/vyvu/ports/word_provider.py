"""Port interface for the quiz word pool."""

from typing import Protocol, runtime_checkable

from vyvu.domain.entities.vocabulary_entry import VocabularyEntry
from vyvu.domain.value_objects.deck_type import DeckType


@runtime_checkable
class WordProvider(Protocol):
    """Supplies the learnable words of a deck to the quiz engine."""

    def words(self, deck: DeckType) -> list[VocabularyEntry]:
        """All (merged) entries of the deck."""
        ...

    def unlearned_words(self, deck: DeckType) -> list[VocabularyEntry]:
        """Entries of the deck not yet in the learned set."""
        ...
