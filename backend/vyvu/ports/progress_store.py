"""Port interfaces for learner progress persistence."""

from typing import Protocol, runtime_checkable

from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.gamification_state import GamificationState
from vyvu.domain.value_objects.settings import Settings


@runtime_checkable
class LearnedStore(Protocol):
    """Per-deck persistent set of learned word ids."""

    def is_learned(self, word_id: str, deck: DeckType) -> bool:
        """Check whether a word is in the deck's learned set."""
        ...

    def learned_ids(self, deck: DeckType) -> set[str]:
        """Get a copy of the deck's learned set."""
        ...

    def set_learned(self, word_id: str, deck: DeckType, learned: bool) -> None:
        """Add (learned=True) or remove a word id from the deck's learned set."""
        ...

    def reset_learned(self, deck: DeckType) -> None:
        """Clear the deck's learned set."""
        ...


@runtime_checkable
class GamificationStore(Protocol):
    """Storage of streak and XP state."""

    def get_gamification_state(self) -> GamificationState:
        """Load the persisted state (defaults when nothing is stored)."""
        ...

    def persist_gamification_state(self, state: GamificationState) -> None:
        """Store the full state."""
        ...


@runtime_checkable
class SettingsStore(Protocol):
    """Storage of learner settings."""

    def get_settings(self) -> Settings:
        """Load settings (defaults when nothing is stored)."""
        ...

    def save_settings(self, settings: Settings) -> None:
        """Store settings."""
        ...
