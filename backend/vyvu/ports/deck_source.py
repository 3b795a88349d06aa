"""Port interface for bundled vocabulary data."""

from typing import Protocol, runtime_checkable

from vyvu.domain.entities.vocabulary_entry import VocabularyEntry
from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.example_sentence import ExampleSentence


@runtime_checkable
class DeckSource(Protocol):
    """Port for loading decks and their example sentences.

    Implementations return an empty list when a resource is missing or
    malformed; they never raise for bad data.
    """

    def load_deck(self, deck: DeckType) -> list[VocabularyEntry]:
        """Load raw (unmerged) entries of a deck in file order.

        Args:
            deck: Deck to load

        Returns:
            Entries, or [] if the deck resource is unavailable
        """
        ...

    def load_sentences(self, deck: DeckType) -> list[ExampleSentence]:
        """Load the stand-alone example sentences of a deck.

        Args:
            deck: Deck to load

        Returns:
            Sentences, or [] if the sentence resource is unavailable
        """
        ...
