"""Tests for XP, levels, streaks and trophies."""

from health_track.calculators.levels import (
    TROPHIES,
    TROPHIES_BY_ID,
    add_xp,
    advance_streak,
    apply_health_points,
    earned_trophies,
    level_for_xp,
    progress_in_level,
    xp_for_next_level,
    xp_threshold_for_level,
)
from health_track.domain.scores import GamificationState


def test_level_for_xp_reference_points() -> None:
    assert level_for_xp(0) == 1
    assert level_for_xp(99) == 1
    assert level_for_xp(100) == 2
    assert level_for_xp(399) == 2
    assert level_for_xp(400) == 3
    assert level_for_xp(-50) == 1


def test_levels_are_monotonic() -> None:
    levels = [level_for_xp(xp) for xp in range(0, 5000, 7)]

    assert levels == sorted(levels)


def test_next_level_threshold_is_above_current_xp() -> None:
    for xp in range(0, 3000, 13):
        assert xp_for_next_level(xp) > xp
        assert xp_threshold_for_level(level_for_xp(xp)) <= xp


def test_progress_in_level() -> None:
    progress = progress_in_level(150)

    assert progress.level == 2
    assert progress.current == 50
    assert progress.needed == 300


def test_progress_in_level_bounds_hold_across_thresholds() -> None:
    for xp in [*range(0, 2000, 13), 99, 100, 101, 399, 400, 900, 1600]:
        progress = progress_in_level(xp)

        assert 0 <= progress.current < progress.needed
        assert progress.level == level_for_xp(xp)

    assert progress_in_level(400).current == 0


def test_xp_never_negative() -> None:
    state = add_xp(GamificationState(xp=20), -50)

    assert state.xp == 0


def test_health_points_clamped() -> None:
    state = GamificationState(health_points=98)

    assert apply_health_points(state, 5).health_points == 100
    assert apply_health_points(state, -150).health_points == 0


def test_streak_extends_restarts_and_resets() -> None:
    state = GamificationState(current_streak=4, longest_streak=4)

    extended = advance_streak(state, logged_today=True, logged_yesterday=True)
    restarted = advance_streak(extended, logged_today=True, logged_yesterday=False)
    reset = advance_streak(restarted, logged_today=False, logged_yesterday=True)

    assert extended.current_streak == 5
    assert extended.longest_streak == 5
    assert restarted.current_streak == 1
    assert restarted.longest_streak == 5
    assert reset.current_streak == 0


def test_earned_trophies_thresholds() -> None:
    assert earned_trophies(0, 0, 0) == set()
    assert earned_trophies(1, 0, 0) == {"first_photo"}
    assert earned_trophies(100, 7, 30) == {
        "first_photo",
        "chef_novice",
        "chef_master",
        "early_bird",
        "first_week",
        "streak_legend",
    }


def test_trophy_catalog() -> None:
    assert len(TROPHIES) == 10
    assert set(TROPHIES_BY_ID) >= earned_trophies(100, 7, 30)
