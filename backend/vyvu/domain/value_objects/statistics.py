"""Statistics value objects for the home and summary screens."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeckStats:
    """Learned/unlearned counts for one deck."""

    name: str
    title: str
    total_count: int
    learned_count: int

    @property
    def unlearned_count(self) -> int:
        return self.total_count - self.learned_count

    @property
    def progress(self) -> float:
        """Share of the deck already learned (0 for an empty deck)."""
        if self.total_count == 0:
            return 0.0
        return self.learned_count / self.total_count

    @property
    def has_cards(self) -> bool:
        """Whether deck has any words at all."""
        return self.total_count > 0


@dataclass(frozen=True)
class AppStatistics:
    """Aggregate progress across every deck."""

    total_words: int
    learned_words: int
    current_streak: int
    longest_streak: int
    total_xp: int
    core_progress: float
    vyvu_progress: float

    @property
    def unlearned_words(self) -> int:
        return self.total_words - self.learned_words

    @property
    def overall_progress(self) -> float:
        if self.total_words == 0:
            return 0.0
        return self.learned_words / self.total_words


@dataclass(frozen=True)
class SessionStatistics:
    """Result summary of a finished quiz session.

    Accuracy here is measured against every word in the session, unlike
    QuizSession.accuracy which only counts words already seen.
    """

    total_words: int
    correct_words: int
    time_spent: float
    xp_earned: int

    @property
    def incorrect_words(self) -> int:
        return self.total_words - self.correct_words

    @property
    def accuracy(self) -> float:
        if self.total_words == 0:
            return 0.0
        return self.correct_words / self.total_words
