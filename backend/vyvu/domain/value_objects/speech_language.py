"""Speech language value object for text-to-speech requests."""

from enum import StrEnum


class SpeechLanguage(StrEnum):
    """Languages the quiz can speak aloud.

    Values are BCP-47 tags handed straight to the speech adapter.
    """

    GERMAN = "de-DE"
    VIETNAMESE = "vi-VN"

    @property
    def label(self) -> str:
        """Short badge label (DE / VI)."""
        return "DE" if self is SpeechLanguage.GERMAN else "VI"
