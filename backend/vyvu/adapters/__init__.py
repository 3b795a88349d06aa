"""Adapters - implementations of port interfaces."""

from .json_deck_source import JsonDeckSource
from .logging_speech import LoggingSpeechAdapter, SilentSpeechAdapter, Utterance

__all__ = [
    "JsonDeckSource",
    "LoggingSpeechAdapter",
    "SilentSpeechAdapter",
    "Utterance",
]
