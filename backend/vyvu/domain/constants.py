"""
Shared Domain Constants.

Central location for the scoring and matching constants used across
domain services.
"""

# =============================================================================
# Experience Points
# =============================================================================
# Base XP is awarded per correctly answered word. Bonuses are additive and
# evaluated against the streak value from before the session is counted.

XP_PER_CORRECT_WORD = 10

PERFECT_SESSION_BONUS_XP = 50
PERFECT_SESSION_MIN_WORDS = 5  # Perfect bonus only for sessions of 5+ words

LONG_SESSION_BONUS_XP = 30
LONG_SESSION_MIN_WORDS = 20

WEEK_STREAK_BONUS_XP = 20
WEEK_STREAK_MIN_DAYS = 7


# =============================================================================
# Text Matching
# =============================================================================
# German articles that may prefix a noun in the vocabulary list while the
# sentence index is keyed on the bare noun (or the other way round).

GERMAN_ARTICLES = frozenset(
    {
        "der",
        "die",
        "das",
        "ein",
        "eine",
        "einen",
        "einem",
        "einer",
        "dem",
        "den",
        "des",
    }
)

# Letters with no Unicode decomposition that still need folding for
# accent-insensitive comparison.
UNDECOMPOSABLE_FOLDS = str.maketrans({"đ": "d", "Đ": "d"})


# =============================================================================
# Quiz Defaults
# =============================================================================

DEFAULT_QUIZ_SIZE = 10
ALL_WORDS_SIZE = -1  # Setup selection meaning "use every available word"
DEFAULT_TTS_RATE = 0.45
