from datetime import datetime, timedelta

from conftest import FixedClock, MemoryProgress

from vyvu.domain.services.gamification_engine import GamificationEngine, calculate_bonus
from vyvu.domain.value_objects.gamification_state import GamificationState


def test_calculate_bonus_rules() -> None:
    assert calculate_bonus(10, 10, 8) == 70
    assert calculate_bonus(4, 4, 0) == 0
    assert calculate_bonus(5, 5, 0) == 50
    assert calculate_bonus(19, 20, 0) == 30
    assert calculate_bonus(20, 20, 7) == 100
    assert calculate_bonus(0, 0, 30) == 0


def test_perfect_session_with_week_streak(progress: MemoryProgress, clock: FixedClock) -> None:
    progress.gamification = GamificationState(
        current_streak=8,
        longest_streak=8,
        total_xp=5,
        last_session_date=clock.now - timedelta(days=1),
    )
    engine = GamificationEngine(progress, clock=clock)

    rewards = engine.complete_session(correct_words=10, total_words=10)

    assert rewards.base_xp == 100
    assert rewards.bonus_xp == 70
    assert rewards.total_xp == 170
    assert rewards.new_streak == 9
    assert progress.gamification.total_xp == 175


def test_streak_continues_from_yesterday(progress: MemoryProgress, clock: FixedClock) -> None:
    progress.gamification = GamificationState(
        current_streak=3,
        longest_streak=3,
        last_session_date=datetime(2024, 3, 9, 23, 50),
    )
    engine = GamificationEngine(progress, clock=clock)

    engine.complete_session(correct_words=1, total_words=3)

    state = progress.gamification
    assert state.current_streak == 4
    assert state.longest_streak == 4
    assert state.last_session_date == clock.now


def test_first_session_starts_streak(progress: MemoryProgress, clock: FixedClock) -> None:
    engine = GamificationEngine(progress, clock=clock)

    rewards = engine.complete_session(correct_words=2, total_words=3)

    assert rewards.total_xp == 20
    assert progress.gamification.current_streak == 1
    assert progress.gamification.last_session_date == clock.now


def test_same_day_keeps_streak_and_date(progress: MemoryProgress, clock: FixedClock) -> None:
    morning = datetime(2024, 3, 10, 7, 0)
    progress.gamification = GamificationState(
        current_streak=2, longest_streak=5, last_session_date=morning
    )
    engine = GamificationEngine(progress, clock=clock)

    engine.complete_session(correct_words=1, total_words=1)
    engine.complete_session(correct_words=1, total_words=1)

    state = progress.gamification
    assert state.current_streak == 2
    assert state.longest_streak == 5
    assert state.last_session_date == morning
    assert state.total_xp == 20


def test_gap_resets_streak_but_keeps_longest(progress: MemoryProgress, clock: FixedClock) -> None:
    progress.gamification = GamificationState(
        current_streak=6,
        longest_streak=6,
        last_session_date=clock.now - timedelta(days=2),
    )
    engine = GamificationEngine(progress, clock=clock)

    rewards = engine.complete_session(correct_words=0, total_words=5)

    assert rewards.total_xp == 0
    assert progress.gamification.current_streak == 1
    assert progress.gamification.longest_streak == 6


def test_streak_uses_calendar_days(progress: MemoryProgress) -> None:
    late = datetime(2024, 3, 9, 23, 59)
    clock = FixedClock(datetime(2024, 3, 10, 0, 1))
    progress.gamification = GamificationState(current_streak=1, last_session_date=late)

    GamificationEngine(progress, clock=clock).complete_session(correct_words=1, total_words=1)

    assert progress.gamification.current_streak == 2


def test_award_xp(progress: MemoryProgress, clock: FixedClock) -> None:
    engine = GamificationEngine(progress, clock=clock)

    assert engine.award_xp(15) == 15
    assert engine.award_xp(-4) == 15
    assert engine.state.total_xp == 15
    assert engine.state.current_streak == 0
