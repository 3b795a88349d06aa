"""Quiz configuration value object."""

from dataclasses import dataclass

from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.quiz_direction import QuizDirection


@dataclass(frozen=True)
class QuizConfiguration:
    """Immutable settings chosen on the setup screen.

    Attributes:
        deck: Deck to draw words from
        direction: Prompt/answer direction
        size: Requested number of words (ignored when use_all_words)
        use_all_words: Use the whole shuffled pool instead of size
    """

    deck: DeckType = DeckType.CORE
    direction: QuizDirection = QuizDirection.DE_TO_VI
    size: int = 10
    use_all_words: bool = False
