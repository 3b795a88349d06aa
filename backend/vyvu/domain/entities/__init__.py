"""Domain entities - objects with identity."""

from .category import Category
from .quiz_session import QuizSession
from .vocabulary_entry import VocabularyEntry, make_entry_id

__all__ = ["Category", "QuizSession", "VocabularyEntry", "make_entry_id"]
