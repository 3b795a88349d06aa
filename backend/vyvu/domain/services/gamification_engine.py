"""Gamification engine: XP awards and day streaks."""

import logging
from collections.abc import Callable
from datetime import datetime

from vyvu.domain.constants import (
    LONG_SESSION_BONUS_XP,
    LONG_SESSION_MIN_WORDS,
    PERFECT_SESSION_BONUS_XP,
    PERFECT_SESSION_MIN_WORDS,
    WEEK_STREAK_BONUS_XP,
    WEEK_STREAK_MIN_DAYS,
    XP_PER_CORRECT_WORD,
)
from vyvu.domain.value_objects.gamification_state import GamificationState, SessionRewards
from vyvu.ports.progress_store import GamificationStore

logger = logging.getLogger(__name__)


def calculate_bonus(correct_words: int, total_words: int, current_streak: int) -> int:
    """Additive bonus XP for a session.

    Args:
        correct_words: Words answered correctly
        total_words: Words in the session
        current_streak: Streak before this session is counted

    Returns:
        Sum of perfect-session, long-session and week-streak bonuses
    """
    if total_words <= 0:
        return 0

    bonus = 0
    if correct_words == total_words and total_words >= PERFECT_SESSION_MIN_WORDS:
        bonus += PERFECT_SESSION_BONUS_XP
    if total_words >= LONG_SESSION_MIN_WORDS:
        bonus += LONG_SESSION_BONUS_XP
    if current_streak >= WEEK_STREAK_MIN_DAYS:
        bonus += WEEK_STREAK_BONUS_XP
    return bonus


class GamificationEngine:
    """Computes rewards and advances streaks.

    Storage is a port; the engine reads the state, applies the rules and
    writes the full state back. Days are calendar days of the clock's
    timezone, not 24-hour spans.
    """

    def __init__(
        self,
        store: GamificationStore,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize gamification engine.

        Args:
            store: Port for persisted streak/XP state
            clock: Returns the current local time (injectable for tests)
        """
        self._store = store
        self._clock = clock

    @property
    def state(self) -> GamificationState:
        """Current persisted state."""
        return self._store.get_gamification_state()

    def award_xp(self, points: int) -> int:
        """Add XP outside of session completion.

        Returns:
            New cumulative XP
        """
        state = self._store.get_gamification_state()
        state.total_xp += max(0, points)
        self._store.persist_gamification_state(state)
        return state.total_xp

    def complete_session(self, correct_words: int, total_words: int) -> SessionRewards:
        """Award XP for a finished session and update the streak.

        Args:
            correct_words: Words answered correctly (or marked known)
            total_words: Words in the session pool

        Returns:
            XP breakdown and the streak after this session
        """
        state = self._store.get_gamification_state()

        base_xp = correct_words * XP_PER_CORRECT_WORD
        bonus_xp = calculate_bonus(correct_words, total_words, state.current_streak)
        earned = base_xp + bonus_xp

        state.total_xp += earned
        self._update_streak(state)
        self._store.persist_gamification_state(state)

        logger.info(
            f"Session complete: {correct_words}/{total_words} correct, "
            f"+{earned} XP, streak {state.current_streak}"
        )
        return SessionRewards(
            base_xp=base_xp,
            bonus_xp=bonus_xp,
            total_xp=earned,
            new_streak=state.current_streak,
        )

    def _update_streak(self, state: GamificationState) -> None:
        """Advance, keep or restart the streak based on calendar days."""
        now = self._clock()

        if state.last_session_date is None:
            state.current_streak = 1
        else:
            days = (now.date() - state.last_session_date.date()).days
            if days == 0:
                # Already practiced today
                return
            if days == 1:
                state.current_streak += 1
                state.longest_streak = max(state.longest_streak, state.current_streak)
            else:
                state.current_streak = 1

        state.last_session_date = now
