"""Port interface for text-to-speech."""

from typing import Protocol, runtime_checkable

from vyvu.domain.value_objects.speech_language import SpeechLanguage


@runtime_checkable
class SpeechPort(Protocol):
    """Text-to-Speech port interface.

    Best-effort: callers never inspect a result and treat failures as
    invisible.
    """

    def speak(self, text: str, language: SpeechLanguage, rate: float) -> None:
        """Speak text in the given language at the given rate (0.0-1.0)."""
        ...
