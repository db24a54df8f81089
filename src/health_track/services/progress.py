"""Gamification progress service."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from health_track.calculators.levels import (
    MAX_HEALTH_POINTS,
    TROPHIES_BY_ID,
    XP_PER_TROPHY,
    add_xp,
    advance_streak,
    apply_health_points,
    earned_trophies,
    level_for_xp,
    progress_in_level,
)
from health_track.domain.scores import GamificationState, LevelProgress, Trophy

logger = logging.getLogger(__name__)


class GamificationRepository(Protocol):
    """Persistence interface for gamification counters."""

    def get_state(self, user_id: UUID) -> GamificationState | None:
        """Return the stored state, if any."""

    def save_state(self, user_id: UUID, state: GamificationState) -> None:
        """Create or replace the stored state."""


@dataclass
class ProgressService:
    """Tracks XP, streaks, health points and trophies."""

    repository: GamificationRepository

    def get_state(self, user_id: UUID) -> GamificationState:
        """Return the user's state, or a fresh one."""
        return self.repository.get_state(user_id) or GamificationState()

    def get_progress(self, user_id: UUID) -> LevelProgress:
        """Return level progress derived from stored XP."""
        return progress_in_level(self.get_state(user_id).xp)

    def award(self, user_id: UUID, xp: int, hp_change: int = 0) -> GamificationState:
        """Add XP and health points and persist the result."""
        state = self.get_state(user_id)
        updated = apply_health_points(add_xp(state, xp), hp_change)
        self.repository.save_state(user_id, updated)
        if level_for_xp(updated.xp) > level_for_xp(state.xp):
            logger.info(
                "Level up",
                extra={"user_id": str(user_id), "level": level_for_xp(updated.xp)},
            )
        return updated

    def record_day(
        self, user_id: UUID, day: date, logged_today: bool, logged_yesterday: bool
    ) -> GamificationState:
        """Update the streak and reset health points, once per day.

        A repeated check for a day already counted returns the stored state.
        """
        current = self.get_state(user_id)
        if current.last_checked == day:
            return current
        state = advance_streak(current, logged_today, logged_yesterday)
        state = replace(state, health_points=MAX_HEALTH_POINTS, last_checked=day)
        self.repository.save_state(user_id, state)
        return state

    def unlock_trophies(self, user_id: UUID, trophy_ids: set[str]) -> list[Trophy]:
        """Unlock trophies not yet held, awarding bonus XP for each."""
        state = self.get_state(user_id)
        new_ids = sorted(
            trophy_id
            for trophy_id in trophy_ids
            if trophy_id in TROPHIES_BY_ID and trophy_id not in state.trophies
        )
        if not new_ids:
            return []
        updated = replace(
            add_xp(state, XP_PER_TROPHY * len(new_ids)),
            trophies=state.trophies | frozenset(new_ids),
        )
        self.repository.save_state(user_id, updated)
        for trophy_id in new_ids:
            logger.info(
                "Trophy unlocked",
                extra={"user_id": str(user_id), "trophy_id": trophy_id},
            )
        return [TROPHIES_BY_ID[trophy_id] for trophy_id in new_ids]

    def check_trophies(
        self, user_id: UUID, meal_count: int, breakfast_count: int
    ) -> list[Trophy]:
        """Unlock every trophy the counters and current streak qualify for."""
        streak = self.get_state(user_id).current_streak
        return self.unlock_trophies(
            user_id, earned_trophies(meal_count, breakfast_count, streak)
        )
