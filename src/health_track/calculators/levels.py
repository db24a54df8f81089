"""Experience, levels, streaks and trophies."""

import math
from dataclasses import replace

from health_track.domain.scores import GamificationState, LevelProgress, Trophy

XP_PER_MEAL = 10
XP_PER_HEALTH_LOG = 5
XP_PER_TROPHY = 50
XP_PER_LEVEL_UNIT = 100

HP_PER_MEAL = 5
MAX_HEALTH_POINTS = 100

TROPHIES: tuple[Trophy, ...] = (
    Trophy(
        "first_photo",
        "First Photo",
        "Log your first meal photo",
        "Log 1 meal with photo",
    ),
    Trophy("first_week", "First Week", "Complete 7 consecutive days", "7-day streak"),
    Trophy(
        "glucose_master",
        "Glucose Master",
        "30 days with glucose in target range",
        "30 days in range",
    ),
    Trophy(
        "early_bird",
        "Early Bird",
        "Log breakfast 7 days in a row",
        "7 breakfast logs",
    ),
    Trophy(
        "veggie_lover",
        "Veggie Lover",
        "Eat vegetables 5 days a week for a month",
        "20 veggie meals",
    ),
    Trophy(
        "streak_legend", "Streak Legend", "Achieve a 30-day streak", "30-day streak"
    ),
    Trophy("chef_novice", "Chef Novice", "Log 50 meals", "50 meals logged"),
    Trophy("chef_master", "Chef Master", "Log 100 meals", "100 meals logged"),
    Trophy(
        "health_scholar", "Health Scholar", "Read 10 AI insights", "Read 10 insights"
    ),
    Trophy(
        "consistency_champion",
        "Consistency Champion",
        "Hit macro targets 20 days in a month",
        "20 days on target",
    ),
)
TROPHIES_BY_ID = {trophy.id: trophy for trophy in TROPHIES}

# (trophy id, minimum meals logged)
_MEAL_COUNT_TROPHIES = (("first_photo", 1), ("chef_novice", 50), ("chef_master", 100))
_STREAK_TROPHIES = (("first_week", 7), ("streak_legend", 30))
EARLY_BIRD_BREAKFASTS = 7


def level_for_xp(xp: int) -> int:
    """Return the level for an XP total: floor(sqrt(xp / 100)) + 1."""
    return max(1, math.isqrt(max(xp, 0) // XP_PER_LEVEL_UNIT) + 1)


def xp_threshold_for_level(level: int) -> int:
    """Return the XP at which a level starts."""
    return (level - 1) ** 2 * XP_PER_LEVEL_UNIT


def xp_for_next_level(xp: int) -> int:
    """Return the XP total at which the next level starts."""
    return xp_threshold_for_level(level_for_xp(xp) + 1)


def progress_in_level(xp: int) -> LevelProgress:
    """Return XP earned inside the current level and XP the level spans."""
    level = level_for_xp(xp)
    start = xp_threshold_for_level(level)
    return LevelProgress(
        level=level,
        current=max(xp, 0) - start,
        needed=xp_threshold_for_level(level + 1) - start,
    )


def add_xp(state: GamificationState, amount: int) -> GamificationState:
    """Return the state with XP added; XP never drops below zero."""
    return replace(state, xp=max(0, state.xp + amount))


def apply_health_points(state: GamificationState, change: int) -> GamificationState:
    """Return the state with health points changed and clamped to 0..100."""
    health_points = max(0, min(MAX_HEALTH_POINTS, state.health_points + change))
    return replace(state, health_points=health_points)


def advance_streak(
    state: GamificationState, logged_today: bool, logged_yesterday: bool
) -> GamificationState:
    """Apply the daily streak check.

    A day without logs resets the streak; a logged day extends it when the
    previous day was logged too, otherwise it restarts at one.
    """
    if not logged_today:
        return replace(state, current_streak=0)
    streak = state.current_streak + 1 if logged_yesterday else 1
    return replace(
        state,
        current_streak=streak,
        longest_streak=max(state.longest_streak, streak),
    )


def earned_trophies(meal_count: int, breakfast_count: int, streak: int) -> set[str]:
    """Return trophy ids whose requirements are met by the given counters."""
    earned = {
        trophy_id
        for trophy_id, minimum in _MEAL_COUNT_TROPHIES
        if meal_count >= minimum
    }
    earned.update(
        trophy_id for trophy_id, minimum in _STREAK_TROPHIES if streak >= minimum
    )
    if breakfast_count >= EARLY_BIRD_BREAKFASTS:
        earned.add("early_bird")
    return earned
