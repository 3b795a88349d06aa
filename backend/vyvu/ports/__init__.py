# Ports layer - Abstract interfaces (Protocols)

from .deck_source import DeckSource
from .progress_store import GamificationStore, LearnedStore, SettingsStore
from .speech import SpeechPort
from .word_provider import WordProvider

__all__ = [
    "DeckSource",
    "GamificationStore",
    "LearnedStore",
    "SettingsStore",
    "SpeechPort",
    "WordProvider",
]
