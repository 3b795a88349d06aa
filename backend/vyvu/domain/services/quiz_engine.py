"""Quiz engine service for quiz session lifecycle management."""

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from vyvu.domain.constants import DEFAULT_TTS_RATE
from vyvu.domain.entities.quiz_session import QuizSession
from vyvu.domain.entities.vocabulary_entry import VocabularyEntry
from vyvu.domain.services import answer_matcher
from vyvu.domain.services.gamification_engine import GamificationEngine
from vyvu.domain.value_objects.gamification_state import SessionRewards
from vyvu.domain.value_objects.quiz_configuration import QuizConfiguration
from vyvu.domain.value_objects.quiz_stage import QuizStage
from vyvu.domain.value_objects.statistics import SessionStatistics
from vyvu.ports.progress_store import LearnedStore, SettingsStore
from vyvu.ports.speech import SpeechPort
from vyvu.ports.word_provider import WordProvider

logger = logging.getLogger(__name__)


class QuizEventKind(StrEnum):
    """State transitions reported to listeners."""

    SESSION_STARTED = "session_started"
    ANSWER_EVALUATED = "answer_evaluated"
    ANSWER_REVEALED = "answer_revealed"
    WORD_MARKED_LEARNED = "word_marked_learned"
    NAVIGATED = "navigated"
    SESSION_COMPLETED = "session_completed"
    RESET = "reset"


@dataclass(frozen=True)
class QuizEvent:
    """Notification sent after every completed state transition."""

    kind: QuizEventKind
    stage: QuizStage
    session: QuizSession
    rewards: SessionRewards | None = None


QuizListener = Callable[[QuizEvent], None]


class QuizEngine:
    """Drives one learner through quiz sessions.

    Responsibilities:
    - Word-pool selection (unlearned words, falling back to the whole deck)
    - Stage machine: SETUP -> IN_QUIZ -> SUMMARY, review rounds, reset
    - Per-question state (revealed answer, last correctness)
    - Persisting learned words and awarding rewards on completion

    Every operation is synchronous and saturating: calls that make no sense
    in the current stage or position are silent no-ops. Persistence and
    speech failures are logged and never affect the in-memory session.
    """

    def __init__(
        self,
        word_provider: WordProvider,
        learned_store: LearnedStore,
        gamification: GamificationEngine,
        speech: SpeechPort | None = None,
        settings_store: SettingsStore | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize quiz engine.

        Args:
            word_provider: Source of deck words and unlearned words
            learned_store: Port where learned words are recorded
            gamification: Engine awarding XP/streaks on completion
            speech: Optional text-to-speech port
            settings_store: Optional settings port (speech rate)
            rng: Random source for shuffling (seedable in tests)
        """
        self._word_provider = word_provider
        self._learned_store = learned_store
        self._gamification = gamification
        self._speech = speech
        self._settings_store = settings_store
        self._rng = rng or random.Random()

        self._session = QuizSession()
        self._stage = QuizStage.SETUP
        self._reveal_answer = False
        self._is_correct: bool | None = None
        self._last_rewards: SessionRewards | None = None
        self._listeners: list[QuizListener] = []

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def session(self) -> QuizSession:
        return self._session

    @property
    def stage(self) -> QuizStage:
        return self._stage

    @property
    def current_word(self) -> VocabularyEntry | None:
        return self._session.current

    @property
    def reveal_answer(self) -> bool:
        """Whether the answer of the current word is shown."""
        return self._reveal_answer

    @property
    def is_correct(self) -> bool | None:
        """Result of the last evaluation of the current word (None if not evaluated)."""
        return self._is_correct

    @property
    def last_rewards(self) -> SessionRewards | None:
        """Rewards of the most recently completed session."""
        return self._last_rewards

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def subscribe(self, listener: QuizListener) -> Callable[[], None]:
        """Register a listener called after every state transition.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, kind: QuizEventKind, rewards: SessionRewards | None = None) -> None:
        event = QuizEvent(kind=kind, stage=self._stage, session=self._session, rewards=rewards)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.warning(f"Quiz listener failed on {kind}: {e}")

    # -------------------------------------------------------------------------
    # Session lifecycle
    # -------------------------------------------------------------------------

    def start_session(self, config: QuizConfiguration) -> bool:
        """Start a session from the deck's learnable words.

        The pool is the deck's unlearned words, or the whole deck once
        everything is learned. It is shuffled and cut to config.size unless
        config.use_all_words.

        Args:
            config: Deck, direction and size chosen by the learner

        Returns:
            True if a session started, False if the pool or size was empty
        """
        if not config.use_all_words and config.size <= 0:
            logger.debug(f"Not starting quiz: requested size {config.size}")
            return False

        pool = self._word_provider.unlearned_words(config.deck)
        if not pool:
            pool = self._word_provider.words(config.deck)
        if not pool:
            logger.debug(f"Not starting quiz: deck {config.deck} has no words")
            return False

        pool = list(pool)
        self._rng.shuffle(pool)
        words = pool if config.use_all_words else pool[: config.size]

        self._begin(config, words)
        return True

    def start_review_session(
        self, config: QuizConfiguration, words: Sequence[VocabularyEntry]
    ) -> bool:
        """Start a session over exactly the given words (shuffled).

        Args:
            config: Configuration to run with (size is ignored)
            words: Words to review, typically the previous session's mistakes

        Returns:
            True if a session started, False if words is empty
        """
        if not words:
            logger.debug("Not starting review: no words given")
            return False

        pool = list(words)
        self._rng.shuffle(pool)
        self._begin(config, pool)
        return True

    def start_review_round(self) -> bool:
        """Review the words the last session did not get right (from SUMMARY only).

        Returns:
            True if a review round started
        """
        if self._stage is not QuizStage.SUMMARY:
            return False
        return self.start_review_session(
            self._session.configuration, self._session.incorrect_words
        )

    def _begin(self, config: QuizConfiguration, words: list[VocabularyEntry]) -> None:
        self._session = QuizSession(configuration=config, words=words)
        self._transition_to(QuizStage.IN_QUIZ)
        self._last_rewards = None
        self._reset_question_state()

        logger.info(
            f"Quiz started: {len(words)} words from {config.deck} ({config.direction})"
        )
        self._emit(QuizEventKind.SESSION_STARTED)

    def complete_session(self) -> SessionRewards | None:
        """Finish the session and award XP.

        Can be called early; rewards are computed from the words answered so
        far against the full pool size. Completing twice has no effect.

        Returns:
            Rewards of this session (or of the last completed one when not in a quiz)
        """
        if not self._stage.accepts_answers():
            return self._last_rewards

        rewards: SessionRewards | None = None
        try:
            rewards = self._gamification.complete_session(
                correct_words=len(self._session.correct_ids),
                total_words=len(self._session.words),
            )
        except Exception as e:
            logger.warning(f"Failed to record session rewards: {e}")

        self._last_rewards = rewards
        self._transition_to(QuizStage.SUMMARY)
        self._emit(QuizEventKind.SESSION_COMPLETED, rewards=rewards)
        return rewards

    def reset(self) -> None:
        """Abandon the session and return to setup."""
        self._session = QuizSession(configuration=self._session.configuration)
        self._transition_to(QuizStage.SETUP)
        self._reset_question_state()
        self._emit(QuizEventKind.RESET)

    # -------------------------------------------------------------------------
    # Answering
    # -------------------------------------------------------------------------

    def evaluate(self, answer: str) -> bool:
        """Check the learner's answer for the current word.

        A match records the word as correct, persists it as learned and
        reveals the answer. A miss sets is_correct to False and leaves the
        answer hidden until reveal() is called.

        Returns:
            Whether the answer matched
        """
        word = self._answerable_word()
        if word is None:
            return False

        correct = answer_matcher.is_correct(answer, word, self._session.configuration.direction)
        self._is_correct = correct
        if correct:
            self._record_correct(word)
            self._reveal_answer = True

        self._emit(QuizEventKind.ANSWER_EVALUATED)
        return correct

    def evaluate_realtime(self, answer: str) -> bool:
        """Check a partially typed answer.

        Like evaluate(), but a miss does not flag the word as wrong since
        the learner may still be typing.
        """
        word = self._answerable_word()
        if word is None:
            return False

        if not answer_matcher.is_correct(answer, word, self._session.configuration.direction):
            return False

        self._is_correct = True
        self._record_correct(word)
        self._reveal_answer = True
        self._emit(QuizEventKind.ANSWER_EVALUATED)
        return True

    def reveal(self) -> None:
        """Show the answer of the current word without changing correctness."""
        if self._answerable_word() is None:
            return
        self._reveal_answer = True
        self._emit(QuizEventKind.ANSWER_REVEALED)

    def mark_learned(self, word: VocabularyEntry | None = None) -> None:
        """Mark a word as already known, bypassing answer checking.

        The word counts as correct for this session even if it was never
        displayed, so it is not added to seen_ids.

        Args:
            word: Word to mark (defaults to the current word)
        """
        if not self._stage.accepts_answers():
            return
        word = word or self._session.current
        if word is None:
            return

        self._record_correct(word)
        if word == self._session.current:
            self._is_correct = True
            self._reveal_answer = True
        self._emit(QuizEventKind.WORD_MARKED_LEARNED)

    def _answerable_word(self) -> VocabularyEntry | None:
        if not self._stage.accepts_answers():
            return None
        return self._session.current

    def _record_correct(self, word: VocabularyEntry) -> None:
        self._session.correct_ids.add(word.id)
        try:
            self._learned_store.set_learned(word.id, self._session.configuration.deck, True)
        except Exception as e:
            logger.warning(f"Failed to persist learned word {word.id!r}: {e}")

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def advance(self) -> None:
        """Move to the next word, or complete the session after the last one."""
        if not self._stage.accepts_answers():
            return

        if self._session.current_index + 1 < len(self._session.words):
            self._session.current_index += 1
            self._reset_question_state()
            self._emit(QuizEventKind.NAVIGATED)
        else:
            self.complete_session()

    def go_back(self) -> None:
        """Return to the previous word (no-op on the first word)."""
        if not self._stage.accepts_answers() or self._session.current_index <= 0:
            return

        self._session.current_index -= 1
        self._reset_question_state()
        self._emit(QuizEventKind.NAVIGATED)

    def _reset_question_state(self) -> None:
        self._reveal_answer = False
        self._is_correct = None
        self._session.mark_current_seen()

    def _transition_to(self, new_stage: QuizStage) -> None:
        """Move the stage machine.

        Raises:
            ValueError: If the transition is invalid
        """
        if not self._stage.can_transition_to(new_stage):
            raise ValueError(f"Invalid transition from {self._stage} to {new_stage}")
        self._stage = new_stage

    # -------------------------------------------------------------------------
    # Helpers for callers
    # -------------------------------------------------------------------------

    def expected_answers(self, word: VocabularyEntry | None = None) -> tuple[str, ...]:
        """Accepted answers for a word (defaults to the current word)."""
        word = word or self._session.current
        if word is None:
            return ()
        return answer_matcher.expected_answers(word, self._session.configuration.direction)

    def prompt(self, word: VocabularyEntry | None = None) -> str | None:
        """Question text for a word (defaults to the current word)."""
        word = word or self._session.current
        if word is None:
            return None
        return answer_matcher.prompt_text(word, self._session.configuration.direction)

    def is_word_learned(self, word: VocabularyEntry) -> bool:
        """Learned in storage or answered correctly in this session."""
        if word.id in self._session.correct_ids:
            return True
        try:
            return self._learned_store.is_learned(word.id, self._session.configuration.deck)
        except Exception as e:
            logger.warning(f"Failed to read learned state of {word.id!r}: {e}")
            return False

    def speak(self, text: str, is_source: bool) -> None:
        """Speak prompt-side (is_source) or answer-side text. Best-effort."""
        if self._speech is None or not text.strip():
            return

        direction = self._session.configuration.direction
        language = direction.prompt_language if is_source else direction.answer_language
        try:
            rate = (
                self._settings_store.get_settings().tts_rate
                if self._settings_store is not None
                else DEFAULT_TTS_RATE
            )
            self._speech.speak(text, language, rate)
        except Exception as e:
            logger.warning(f"Speech failed for {language}: {e}")

    def session_statistics(self) -> SessionStatistics:
        """Summary numbers for the current or just-completed session."""
        return SessionStatistics(
            total_words=len(self._session.words),
            correct_words=len(self._session.correct_ids),
            time_spent=self._session.elapsed_seconds(),
            xp_earned=self._last_rewards.total_xp if self._last_rewards else 0,
        )
