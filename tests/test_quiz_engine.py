import random

import pytest
from conftest import MemoryProgress, RecordingSpeech

from vyvu.domain.entities.quiz_session import QuizSession
from vyvu.domain.services.quiz_engine import QuizEvent, QuizEventKind
from vyvu.domain.value_objects.deck_type import DeckType
from vyvu.domain.value_objects.quiz_configuration import QuizConfiguration
from vyvu.domain.value_objects.quiz_direction import QuizDirection
from vyvu.domain.value_objects.quiz_stage import QuizStage
from vyvu.domain.value_objects.settings import Settings
from vyvu.domain.value_objects.speech_language import SpeechLanguage


def config(size: int = 10, use_all: bool = False, **kwargs) -> QuizConfiguration:
    return QuizConfiguration(deck=DeckType.CORE, size=size, use_all_words=use_all, **kwargs)


def test_empty_deck_stays_in_setup(make_engine) -> None:
    engine = make_engine([])

    assert engine.start_session(config()) is False
    assert engine.stage is QuizStage.SETUP
    assert engine.current_word is None


def test_session_pool_is_truncated_to_size(make_engine, core_words) -> None:
    engine = make_engine(core_words)

    assert engine.start_session(config(size=3))

    ids = [w.id for w in engine.session.words]
    assert len(ids) == 3
    assert len(set(ids)) == 3
    assert set(ids) <= {w.id for w in core_words}
    assert engine.stage is QuizStage.IN_QUIZ
    assert engine.session.current_index == 0
    assert engine.session.seen_ids == {ids[0]}


def test_use_all_words_ignores_size(make_engine, core_words) -> None:
    engine = make_engine(core_words)

    assert engine.start_session(config(size=1, use_all=True))
    assert len(engine.session.words) == 5


def test_non_positive_size_does_not_start(make_engine, core_words) -> None:
    engine = make_engine(core_words)

    assert engine.start_session(config(size=0)) is False
    assert engine.start_session(config(size=-3)) is False
    assert engine.stage is QuizStage.SETUP


def test_pool_prefers_unlearned_words(make_engine, core_words, progress: MemoryProgress) -> None:
    progress.learned[DeckType.CORE] = {"w1", "w2", "w3"}
    engine = make_engine(core_words)

    engine.start_session(config(size=10))

    assert {w.id for w in engine.session.words} == {"w4", "w5"}


def test_pool_falls_back_to_whole_deck(make_engine, core_words, progress: MemoryProgress) -> None:
    progress.learned[DeckType.CORE] = {w.id for w in core_words}
    engine = make_engine(core_words)

    assert engine.start_session(config(size=10))
    assert len(engine.session.words) == 5


def test_correct_answer_is_recorded_and_persisted(make_engine, core_words, progress) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=5))
    word = engine.current_word

    assert engine.evaluate(f"  {word.target_canonical.upper()} ")

    assert engine.is_correct is True
    assert engine.reveal_answer is True
    assert engine.session.correct_ids == {word.id}
    assert progress.is_learned(word.id, DeckType.CORE)

    assert engine.evaluate(word.target_canonical)
    assert engine.session.correct_ids == {word.id}


def test_wrong_answer_keeps_answer_hidden(make_engine, core_words) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=5))

    assert engine.evaluate("sai rồi") is False
    assert engine.is_correct is False
    assert engine.reveal_answer is False
    assert engine.session.correct_ids == set()

    engine.reveal()
    assert engine.reveal_answer is True
    assert engine.is_correct is False


def test_vietnamese_to_german_direction(make_engine, core_words) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=5, direction=QuizDirection.VI_TO_DE))
    word = engine.current_word

    assert engine.prompt() == word.target_canonical
    assert engine.expected_answers() == word.all_source_forms
    assert engine.evaluate(word.source_canonical.lower())


def test_realtime_miss_does_not_flag_wrong(make_engine, core_words) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=5))
    word = engine.current_word

    assert engine.evaluate_realtime(word.target_canonical[:1] + "#") is False
    assert engine.is_correct is None

    assert engine.evaluate_realtime(word.target_canonical)
    assert engine.is_correct is True


def test_operations_outside_quiz_are_no_ops(make_engine, core_words) -> None:
    engine = make_engine(core_words)

    assert engine.evaluate("nhà") is False
    engine.reveal()
    engine.mark_learned()
    engine.advance()
    engine.go_back()

    assert engine.stage is QuizStage.SETUP
    assert engine.reveal_answer is False
    assert engine.is_correct is None
    assert engine.complete_session() is None


def test_navigation_saturates_and_clears_question_state(make_engine, core_words) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=3))
    words = engine.session.words

    engine.go_back()
    assert engine.session.current_index == 0

    engine.evaluate("sai")
    engine.advance()
    assert engine.session.current_index == 1
    assert engine.current_word == words[1]
    assert engine.is_correct is None
    assert engine.reveal_answer is False
    assert engine.session.seen_ids == {words[0].id, words[1].id}

    engine.go_back()
    assert engine.current_word == words[0]


def test_advancing_past_last_word_completes_once(make_engine, core_words, progress) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=2))

    engine.evaluate(engine.current_word.target_canonical)
    engine.advance()
    engine.advance()

    assert engine.stage is QuizStage.SUMMARY
    rewards = engine.last_rewards
    assert rewards is not None
    assert rewards.base_xp == 10
    assert progress.gamification.total_xp == 10

    engine.advance()
    assert engine.complete_session() == rewards
    assert progress.gamification.total_xp == 10

    stats = engine.session_statistics()
    assert stats.total_words == 2
    assert stats.correct_words == 1
    assert stats.xp_earned == 10
    assert stats.accuracy == 0.5


def test_complete_session_early(make_engine, core_words, progress) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=5, use_all=True))

    rewards = engine.complete_session()

    assert engine.stage is QuizStage.SUMMARY
    assert rewards.total_xp == 0
    assert progress.gamification.current_streak == 1


def test_mark_learned_counts_without_being_seen(make_engine, core_words, progress) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=3))
    upcoming = engine.session.words[2]

    engine.mark_learned(upcoming)

    assert upcoming.id in engine.session.correct_ids
    assert upcoming.id not in engine.session.seen_ids
    assert progress.is_learned(upcoming.id, DeckType.CORE)
    assert engine.is_correct is None

    engine.mark_learned()
    assert engine.is_correct is True
    assert engine.reveal_answer is True
    assert engine.session.accuracy == 1.0


def test_is_word_learned(make_engine, core_words, progress) -> None:
    progress.learned[DeckType.CORE] = {"w5"}
    engine = make_engine(core_words)
    engine.start_session(config(size=4))
    word = engine.current_word

    assert engine.is_word_learned(core_words[4])
    assert not engine.is_word_learned(word)
    engine.evaluate(word.target_canonical)
    assert engine.is_word_learned(word)


def test_review_round_uses_incorrect_words(make_engine, core_words) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=3))
    first = engine.current_word
    engine.evaluate(first.target_canonical)
    engine.complete_session()

    assert engine.start_review_round()

    assert engine.stage is QuizStage.IN_QUIZ
    assert len(engine.session.words) == 2
    assert first not in engine.session.words
    assert engine.last_rewards is None


def test_review_round_needs_incorrect_words(make_engine, core_words) -> None:
    engine = make_engine(core_words)
    assert engine.start_review_round() is False

    engine.start_session(config(size=1))
    engine.evaluate(engine.current_word.target_canonical)
    engine.advance()

    assert engine.stage is QuizStage.SUMMARY
    assert engine.start_review_round() is False


def test_review_session_with_explicit_words(make_engine, core_words) -> None:
    engine = make_engine(core_words)

    assert engine.start_review_session(config(), []) is False
    assert engine.start_review_session(config(size=1), core_words[:3])
    assert sorted(w.id for w in engine.session.words) == ["w1", "w2", "w3"]


def test_reset_returns_to_setup(make_engine, core_words) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=3))
    engine.evaluate("sai")

    engine.reset()

    assert engine.stage is QuizStage.SETUP
    assert engine.session.words == []
    assert engine.is_correct is None
    assert engine.session.configuration.size == 3


def test_listeners_receive_events_until_unsubscribed(make_engine, core_words) -> None:
    engine = make_engine(core_words)
    events: list[QuizEvent] = []
    unsubscribe = engine.subscribe(events.append)

    engine.start_session(config(size=2))
    engine.evaluate("sai")
    engine.reveal()
    engine.advance()
    engine.advance()

    assert [e.kind for e in events] == [
        QuizEventKind.SESSION_STARTED,
        QuizEventKind.ANSWER_EVALUATED,
        QuizEventKind.ANSWER_REVEALED,
        QuizEventKind.NAVIGATED,
        QuizEventKind.SESSION_COMPLETED,
    ]
    assert events[-1].stage is QuizStage.SUMMARY
    assert events[-1].rewards is not None

    unsubscribe()
    engine.reset()
    assert len(events) == 5


def test_failing_listener_does_not_break_engine(make_engine, core_words) -> None:
    engine = make_engine(core_words)

    def boom(event: QuizEvent) -> None:
        raise RuntimeError("listener bug")

    engine.subscribe(boom)
    assert engine.start_session(config(size=2))
    assert engine.stage is QuizStage.IN_QUIZ


def test_persistence_failure_keeps_session_state(make_engine, core_words, progress) -> None:
    progress.fail_writes = True
    engine = make_engine(core_words)
    engine.start_session(config(size=2))
    word = engine.current_word

    assert engine.evaluate(word.target_canonical)
    assert word.id in engine.session.correct_ids
    assert not progress.is_learned(word.id, DeckType.CORE)


def test_speak_uses_direction_and_rate(
    make_engine, core_words, progress: MemoryProgress, speech: RecordingSpeech
) -> None:
    progress.settings = Settings(tts_rate=0.6)
    engine = make_engine(core_words)
    engine.start_session(config(size=2))

    engine.speak("das Haus", is_source=True)
    engine.speak("nhà", is_source=False)
    engine.speak("   ", is_source=True)

    assert speech.calls == [
        ("das Haus", SpeechLanguage.GERMAN, 0.6),
        ("nhà", SpeechLanguage.VIETNAMESE, 0.6),
    ]


def test_review_round_only_from_summary(make_engine, core_words) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=3))
    engine.evaluate("sai")
    words = list(engine.session.words)

    assert engine.start_review_round() is False
    assert engine.stage is QuizStage.IN_QUIZ
    assert engine.session.words == words


def test_empty_session_reports_zero() -> None:
    session = QuizSession()

    assert session.accuracy == 0.0
    assert session.progress == 0.0
    assert session.current is None
    assert session.incorrect_words == []


def test_unseen_session_has_zero_accuracy(core_words) -> None:
    session = QuizSession(words=list(core_words))

    assert session.accuracy == 0.0
    assert session.progress == 0.0


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_random_navigation_keeps_index_in_bounds(make_engine, core_words, seed: int) -> None:
    engine = make_engine(core_words)
    engine.start_session(config(size=4))
    size = len(engine.session.words)
    rng = random.Random(seed)

    for _ in range(200):
        if rng.random() < 0.6:
            engine.advance()
        else:
            engine.go_back()

        assert 0 <= engine.session.current_index <= size
        if engine.stage is QuizStage.SUMMARY:
            assert engine.session.current_index == size - 1
            break
    else:
        pytest.fail("session never reached the summary")
