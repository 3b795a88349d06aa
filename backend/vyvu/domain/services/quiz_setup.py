"""Quiz setup helpers: gating and configuration building for the setup screen."""

from vyvu.domain.constants import ALL_WORDS_SIZE
from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.quiz_configuration import QuizConfiguration
from vyvu.domain.value_objects.quiz_direction import QuizDirection
from vyvu.ports.word_provider import WordProvider


def available_words(provider: WordProvider, deck: DeckType) -> int:
    """Number of unlearned words in a deck."""
    return len(provider.unlearned_words(deck))


def can_start(provider: WordProvider, deck: DeckType, size: int) -> bool:
    """Whether the start button should be enabled.

    Args:
        provider: Word provider
        deck: Selected deck
        size: Selected size, ALL_WORDS_SIZE (-1) meaning "All"
    """
    available = available_words(provider, deck)
    if size == ALL_WORDS_SIZE:
        return available > 0
    return size > 0 and available > 0


def default_deck(provider: WordProvider, preferred: DeckType = DeckType.CORE) -> DeckType:
    """Preferred deck, unless it is fully learned and another deck is not."""
    if available_words(provider, preferred) > 0:
        return preferred
    for deck in DeckType:
        if available_words(provider, deck) > 0:
            return deck
    return preferred


def build_configuration(
    provider: WordProvider,
    deck: DeckType,
    direction: QuizDirection,
    size: int,
) -> QuizConfiguration:
    """Turn raw setup selections into a configuration.

    A size of ALL_WORDS_SIZE selects every available word; negative sizes
    otherwise clamp to zero.
    """
    use_all = size == ALL_WORDS_SIZE
    return QuizConfiguration(
        deck=deck,
        direction=direction,
        size=available_words(provider, deck) if use_all else max(0, size),
        use_all_words=use_all,
    )
