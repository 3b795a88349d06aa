"""Domain value objects - immutable objects without identity."""

from .deck_type import DeckType
from .example_sentence import ExampleSentence
from .gamification_state import GamificationState, SessionRewards
from .quiz_configuration import QuizConfiguration
from .quiz_direction import QuizDirection
from .quiz_stage import QuizStage
from .settings import Settings
from .speech_language import SpeechLanguage
from .statistics import AppStatistics, DeckStats, SessionStatistics

__all__ = [
    "AppStatistics",
    "DeckStats",
    "DeckType",
    "ExampleSentence",
    "GamificationState",
    "QuizConfiguration",
    "QuizDirection",
    "QuizStage",
    "SessionRewards",
    "SessionStatistics",
    "Settings",
    "SpeechLanguage",
]
