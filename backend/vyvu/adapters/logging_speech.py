"""Speech adapter that logs utterances instead of playing audio.

Used on servers without audio output and in tests. Use SPEECH_ADAPTER=log
(the default) to enable.
"""

import logging
from dataclasses import dataclass

from vyvu.domain.value_objects.speech_language import SpeechLanguage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Utterance:
    """One speak() request."""

    text: str
    language: SpeechLanguage
    rate: float


class LoggingSpeechAdapter:
    """SpeechPort implementation recording requests in memory.

    Only the most recent utterances are kept so a long-running server does
    not grow without bound.
    """

    def __init__(self, history_size: int = 50) -> None:
        if history_size < 1:
            raise ValueError(f"history_size must be at least 1, got {history_size}")
        self._history_size = history_size
        self._utterances: list[Utterance] = []

    @property
    def utterances(self) -> list[Utterance]:
        return list(self._utterances)

    def speak(self, text: str, language: SpeechLanguage, rate: float) -> None:
        """Record and log the request."""
        self._utterances.append(Utterance(text=text, language=language, rate=rate))
        del self._utterances[: -self._history_size]
        logger.info(f"Speak [{language.value} @ {rate:.2f}]: {text}")


class SilentSpeechAdapter:
    """SpeechPort implementation that ignores every request (SPEECH_ADAPTER=none)."""

    def speak(self, text: str, language: SpeechLanguage, rate: float) -> None:
        pass
