"""Deck identifier value object."""

from enum import StrEnum


class DeckType(StrEnum):
    """Bundled vocabulary decks.

    CORE: common everyday words
    VYVU: secondary study list
    """

    CORE = "core"
    VYVU = "vyvu"

    @property
    def title(self) -> str:
        return "Common Words" if self is DeckType.CORE else "Vyvu Study"
