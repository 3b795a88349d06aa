"""Quiz session entity for one quiz run."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from vyvu.domain.entities.vocabulary_entry import VocabularyEntry
from vyvu.domain.value_objects.quiz_configuration import QuizConfiguration


@dataclass
class QuizSession:
    """Mutable state of a single quiz run.

    The word list is fixed at creation; only the position and the
    correctness/seen sets change. correct_ids is usually a subset of
    seen_ids, but mark-as-known can add a word that was never shown.

    Attributes:
        configuration: Settings the session was started with
        words: Session pool in presentation order
        current_index: Position in words, 0 <= current_index <= len(words)
        correct_ids: Ids answered correctly (or marked known) this session
        seen_ids: Ids displayed at least once this session
        id: Unique session identifier (UUID v4)
        started_at: When the session was created
    """

    configuration: QuizConfiguration = field(default_factory=QuizConfiguration)
    words: list[VocabularyEntry] = field(default_factory=list)
    current_index: int = 0
    correct_ids: set[str] = field(default_factory=set)
    seen_ids: set[str] = field(default_factory=set)
    id: str = field(default_factory=lambda: str(uuid4()))
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def current(self) -> VocabularyEntry | None:
        """Word at the current position, or None past the end."""
        if 0 <= self.current_index < len(self.words):
            return self.words[self.current_index]
        return None

    @property
    def is_last(self) -> bool:
        """Whether the current word is the final one."""
        return self.current_index + 1 >= len(self.words)

    @property
    def progress(self) -> float:
        """Fraction of the pool already passed (0 for an empty pool)."""
        if not self.words:
            return 0.0
        return self.current_index / len(self.words)

    @property
    def accuracy(self) -> float:
        """Correct answers relative to words seen (0 before anything is seen).

        Clamped to 1.0 because mark-as-known can count words that were
        never displayed.
        """
        if not self.seen_ids:
            return 0.0
        return min(1.0, len(self.correct_ids) / len(self.seen_ids))

    @property
    def incorrect_words(self) -> list[VocabularyEntry]:
        """Words not answered correctly, in session order (review round pool)."""
        return [w for w in self.words if w.id not in self.correct_ids]

    def mark_current_seen(self) -> None:
        """Record the current word as displayed."""
        word = self.current
        if word is not None:
            self.seen_ids.add(word.id)

    def elapsed_seconds(self, now: datetime | None = None) -> float:
        """Seconds since the session started."""
        now = now or datetime.now(UTC)
        return max(0.0, (now - self.started_at).total_seconds())

    def to_dict(self) -> dict:
        """Convert session to dictionary for state serialization."""
        current = self.current
        return {
            "id": self.id,
            "deck": self.configuration.deck.value,
            "direction": self.configuration.direction.value,
            "current_index": self.current_index,
            "total_words": len(self.words),
            "current_word": current.to_dict() if current else None,
            "correct_count": len(self.correct_ids),
            "seen_count": len(self.seen_ids),
            "progress": self.progress,
            "accuracy": self.accuracy,
        }
