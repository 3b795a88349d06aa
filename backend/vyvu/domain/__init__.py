# Domain layer - Business logic (NO external dependencies)

from .entities import Category, QuizSession, VocabularyEntry
from .value_objects import (
    DeckType,
    ExampleSentence,
    GamificationState,
    QuizConfiguration,
    QuizDirection,
    QuizStage,
    SessionRewards,
    Settings,
    SpeechLanguage,
)

__all__ = [
    "Category",
    "DeckType",
    "ExampleSentence",
    "GamificationState",
    "QuizConfiguration",
    "QuizDirection",
    "QuizSession",
    "QuizStage",
    "SessionRewards",
    "Settings",
    "SpeechLanguage",
    "VocabularyEntry",
]
