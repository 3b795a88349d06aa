import pytest

from vyvu.adapters.logging_speech import LoggingSpeechAdapter, Utterance
from vyvu.domain.value_objects.speech_language import SpeechLanguage


def test_records_utterances() -> None:
    speech = LoggingSpeechAdapter()

    speech.speak("das Haus", SpeechLanguage.GERMAN, 0.45)

    assert speech.utterances == [Utterance("das Haus", SpeechLanguage.GERMAN, 0.45)]


def test_history_keeps_most_recent() -> None:
    speech = LoggingSpeechAdapter(history_size=2)

    for text in ("eins", "zwei", "drei"):
        speech.speak(text, SpeechLanguage.GERMAN, 0.5)

    assert [u.text for u in speech.utterances] == ["zwei", "drei"]


def test_history_size_of_one() -> None:
    speech = LoggingSpeechAdapter(history_size=1)

    speech.speak("eins", SpeechLanguage.GERMAN, 0.5)
    speech.speak("hai", SpeechLanguage.VIETNAMESE, 0.5)

    assert [u.text for u in speech.utterances] == ["hai"]


@pytest.mark.parametrize("size", [0, -1])
def test_rejects_empty_history(size: int) -> None:
    with pytest.raises(ValueError):
        LoggingSpeechAdapter(history_size=size)
