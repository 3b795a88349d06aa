"""Learner settings value object."""

from dataclasses import asdict, dataclass, fields

from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.quiz_direction import QuizDirection


@dataclass(frozen=True)
class Settings:
    """Preferences persisted alongside learner progress.

    Attributes:
        tts_rate: Speech rate handed to the speech adapter (0.0-1.0)
        daily_goal: Words per day the learner aims for
        enable_notifications: Reminder notifications toggle
        enable_haptics: Haptic feedback toggle (consumed by clients only)
        preferred_deck: Deck preselected on the setup screen
        preferred_direction: Direction preselected on the setup screen
    """

    tts_rate: float = 0.45
    daily_goal: int = 10
    enable_notifications: bool = True
    enable_haptics: bool = True
    preferred_deck: DeckType = DeckType.CORE
    preferred_direction: QuizDirection = QuizDirection.DE_TO_VI

    def __post_init__(self) -> None:
        """Validate ranges."""
        if not 0.0 <= self.tts_rate <= 1.0:
            raise ValueError(f"tts_rate must be 0.0-1.0, got {self.tts_rate}")
        if self.daily_goal < 0:
            raise ValueError(f"daily_goal must be >= 0, got {self.daily_goal}")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        data["preferred_deck"] = self.preferred_deck.value
        data["preferred_direction"] = self.preferred_direction.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create from dictionary, ignoring unknown keys and keeping defaults for missing ones."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if "preferred_deck" in values:
            values["preferred_deck"] = DeckType(values["preferred_deck"])
        if "preferred_direction" in values:
            values["preferred_direction"] = QuizDirection(values["preferred_direction"])
        return cls(**values)
