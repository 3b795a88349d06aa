"""Gamification value objects: persisted progress and per-session rewards."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class GamificationState:
    """Learner progress persisted between sessions.

    Attributes:
        current_streak: Consecutive calendar days with a completed session
        longest_streak: Best streak ever reached
        total_xp: Cumulative experience points
        last_session_date: When the streak was last stamped (None before the first session)
    """

    current_streak: int = 0
    longest_streak: int = 0
    total_xp: int = 0
    last_session_date: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "total_xp": self.total_xp,
            "last_session_date": (
                self.last_session_date.isoformat() if self.last_session_date else None
            ),
        }


@dataclass(frozen=True)
class SessionRewards:
    """XP breakdown returned when a quiz session completes."""

    base_xp: int
    bonus_xp: int
    total_xp: int
    new_streak: int

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "base_xp": self.base_xp,
            "bonus_xp": self.bonus_xp,
            "total_xp": self.total_xp,
            "new_streak": self.new_streak,
        }
