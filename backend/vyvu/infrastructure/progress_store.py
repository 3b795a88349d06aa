"""SQLite-based key-value store for learner progress.

Persists per-deck learned word ids, streak/XP state and settings. Values
are JSON-encoded under fixed keys, mirroring a simple preferences store.
Implements the LearnedStore, GamificationStore and SettingsStore ports.
"""

import json
import logging
import sqlite3
import threading
from datetime import datetime
from pathlib import Path

from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.gamification_state import GamificationState
from vyvu.domain.value_objects.settings import Settings
from vyvu.infrastructure.retry import with_retry

logger = logging.getLogger(__name__)


class Keys:
    """Storage keys."""

    USER_STREAK = "userStreak"
    LONGEST_STREAK = "longestStreak"
    TOTAL_XP = "totalXP"
    LAST_SESSION_DATE = "lastSessionDate"
    TOTAL_WORDS_LEARNED = "totalWordsLearned"
    SETTINGS = "settings"

    @staticmethod
    def learned_ids(deck: DeckType) -> str:
        return f"learnedIDs_{deck.value}"


class ProgressStore:
    """SQLite-backed progress storage.

    One connection is held for the store's lifetime (so ":memory:" works)
    and guarded by a lock, since FastAPI runs sync endpoints in a
    threadpool. Learned sets are stored as JSON lists of ids.
    """

    def __init__(self, db_path: str = "progress.db"):
        """Initialize progress store.

        Args:
            db_path: Path to SQLite database file, or ":memory:"

        Database tables are created synchronously on construction.
        """
        self._db_path = db_path
        self._lock = threading.Lock()
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(db_path, check_same_thread=False, timeout=5.0)
        self._init_db()

    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._lock, self._conn:
            self._conn.execute("PRAGMA synchronous=NORMAL")
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """
            )

    def close(self) -> None:
        """Close the underlying connection."""
        with self._lock:
            self._conn.close()

    # -------------------------------------------------------------------------
    # Raw key-value access
    # -------------------------------------------------------------------------

    def _get(self, key: str) -> object | None:
        with self._lock:
            row = self._conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        if row is None:
            return None
        try:
            return json.loads(row[0])
        except json.JSONDecodeError:
            logger.warning(f"Ignoring corrupt value stored under {key!r}")
            return None

    @with_retry()
    def _set_many(self, values: dict[str, object]) -> None:
        now = datetime.now().isoformat()
        with self._lock, self._conn:
            self._conn.executemany(
                """
                INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                                               updated_at = excluded.updated_at
                """,
                [(k, json.dumps(v, ensure_ascii=False), now) for k, v in values.items()],
            )

    def _get_int(self, key: str) -> int:
        value = self._get(key)
        return value if isinstance(value, int) and value >= 0 else 0

    # -------------------------------------------------------------------------
    # LearnedStore
    # -------------------------------------------------------------------------

    def learned_ids(self, deck: DeckType) -> set[str]:
        value = self._get(Keys.learned_ids(deck))
        if not isinstance(value, list):
            return set()
        return {v for v in value if isinstance(v, str)}

    def is_learned(self, word_id: str, deck: DeckType) -> bool:
        return word_id in self.learned_ids(deck)

    def set_learned(self, word_id: str, deck: DeckType, learned: bool) -> None:
        ids = self.learned_ids(deck)
        if learned == (word_id in ids):
            return
        if learned:
            ids.add(word_id)
        else:
            ids.discard(word_id)
        self._save_learned(deck, ids)

    def reset_learned(self, deck: DeckType) -> None:
        self._save_learned(deck, set())

    def _save_learned(self, deck: DeckType, ids: set[str]) -> None:
        others = sum(len(self.learned_ids(d)) for d in DeckType if d is not deck)
        self._set_many(
            {
                Keys.learned_ids(deck): sorted(ids),
                Keys.TOTAL_WORDS_LEARNED: others + len(ids),
            }
        )

    def total_words_learned(self) -> int:
        """Learned words across all decks, as last written."""
        return self._get_int(Keys.TOTAL_WORDS_LEARNED)

    # -------------------------------------------------------------------------
    # GamificationStore
    # -------------------------------------------------------------------------

    def get_gamification_state(self) -> GamificationState:
        last = self._get(Keys.LAST_SESSION_DATE)
        last_date: datetime | None = None
        if isinstance(last, str) and last:
            try:
                last_date = datetime.fromisoformat(last)
            except ValueError:
                logger.warning(f"Ignoring unparseable last session date {last!r}")

        return GamificationState(
            current_streak=self._get_int(Keys.USER_STREAK),
            longest_streak=self._get_int(Keys.LONGEST_STREAK),
            total_xp=self._get_int(Keys.TOTAL_XP),
            last_session_date=last_date,
        )

    def persist_gamification_state(self, state: GamificationState) -> None:
        self._set_many(
            {
                Keys.USER_STREAK: state.current_streak,
                Keys.LONGEST_STREAK: state.longest_streak,
                Keys.TOTAL_XP: state.total_xp,
                Keys.LAST_SESSION_DATE: (
                    state.last_session_date.isoformat() if state.last_session_date else ""
                ),
            }
        )

    # -------------------------------------------------------------------------
    # SettingsStore
    # -------------------------------------------------------------------------

    def get_settings(self) -> Settings:
        value = self._get(Keys.SETTINGS)
        if not isinstance(value, dict):
            return Settings()
        try:
            return Settings.from_dict(value)
        except (TypeError, ValueError) as e:
            logger.warning(f"Stored settings invalid, using defaults: {e}")
            return Settings()

    def save_settings(self, settings: Settings) -> None:
        self._set_many({Keys.SETTINGS: settings.to_dict()})
