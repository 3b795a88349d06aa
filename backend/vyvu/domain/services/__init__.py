"""Domain services - orchestration and business logic."""

from .answer_matcher import expected_answers, is_correct, prompt_text
from .catalog_normalizer import merge_entries
from .deck_catalog import DeckCatalog, UnknownDeckError, WordNotFoundError, parse_deck
from .gamification_engine import GamificationEngine, calculate_bonus
from .quiz_engine import QuizEngine, QuizEvent, QuizEventKind, QuizListener
from .quiz_setup import available_words, build_configuration, can_start, default_deck
from .sentence_resolver import SentenceResolver

__all__ = [
    "DeckCatalog",
    "UnknownDeckError",
    "WordNotFoundError",
    "parse_deck",
    "GamificationEngine",
    "calculate_bonus",
    "QuizEngine",
    "QuizEvent",
    "QuizEventKind",
    "QuizListener",
    "SentenceResolver",
    "merge_entries",
    "expected_answers",
    "is_correct",
    "prompt_text",
    "available_words",
    "build_configuration",
    "can_start",
    "default_deck",
]
