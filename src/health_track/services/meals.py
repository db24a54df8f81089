"""Meal logging service."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID, uuid4

from health_track.calculators.levels import HP_PER_MEAL, XP_PER_MEAL
from health_track.calculators.meal_plan import meal_slot_for_hour
from health_track.calculators.scores import MEAL_SCORE_BASE, meal_score
from health_track.domain.nutrition import (
    FoodItem,
    MealRecord,
    MealSlot,
    NutritionTotals,
)
from health_track.domain.scores import GamificationState, Trophy
from health_track.services.plans import PlanService
from health_track.services.progress import ProgressService


class MealRepository(Protocol):
    """Persistence interface for logged meals."""

    def create_meal(self, user_id: UUID, meal: MealRecord) -> None:
        """Store a logged meal."""

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals logged in ``[start, end)``, oldest first."""

    def count_meals(self, user_id: UUID, slot: MealSlot | None = None) -> int:
        """Return the number of meals logged, optionally for one slot."""


@dataclass(frozen=True)
class MealLogResult:
    """A stored meal with the progress it produced."""

    meal: MealRecord
    progress: GamificationState
    unlocked: list[Trophy]


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Return the UTC start and end of a calendar day."""
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)


@dataclass
class MealService:
    """Logs meals, scores them and feeds gamification."""

    repository: MealRepository
    plan_service: PlanService
    progress_service: ProgressService
    meal_score_base: int = MEAL_SCORE_BASE

    def log_meal(
        self,
        user_id: UUID,
        foods: list[FoodItem],
        logged_at: datetime | None = None,
        slot: MealSlot | None = None,
    ) -> MealLogResult:
        """Store a meal, score it against the current plan and award XP."""
        if not foods:
            raise ValueError("A meal needs at least one food")
        moment = logged_at or datetime.now(tz=UTC)
        totals = NutritionTotals.from_foods(foods)
        plan = self.plan_service.get_current_plan(user_id, moment)
        meal = MealRecord(
            id=uuid4(),
            logged_at=moment,
            slot=slot or meal_slot_for_hour(moment.hour),
            totals=totals,
            foods=list(foods),
            xp_earned=XP_PER_MEAL,
            meal_score=meal_score(totals, plan.targets, self.meal_score_base),
        )
        self.repository.create_meal(user_id, meal)
        progress = self.progress_service.award(user_id, XP_PER_MEAL, HP_PER_MEAL)
        unlocked = self._check_trophies(user_id)
        if unlocked:
            progress = self.progress_service.get_state(user_id)
        return MealLogResult(meal=meal, progress=progress, unlocked=unlocked)

    def daily_calories(self, user_id: UUID, start_day: date, days: int) -> list[float]:
        """Return total calories per day for ``days`` days from ``start_day``."""
        start, _ = day_bounds(start_day)
        end = start + timedelta(days=days)
        meals = self.repository.list_meals(user_id, start, end)
        totals = [0.0] * days
        for meal in meals:
            offset = (meal.logged_at.astimezone(UTC).date() - start_day).days
            if 0 <= offset < days:
                totals[offset] += meal.totals.calories
        return totals

    def logged_on(self, user_id: UUID, day: date) -> bool:
        """Return True when at least one meal was logged on the day."""
        start, end = day_bounds(day)
        return bool(self.repository.list_meals(user_id, start, end))

    def daily_check(
        self, user_id: UUID, today: date | None = None
    ) -> GamificationState:
        """Update the streak from today's and yesterday's meal logs."""
        day = today or datetime.now(tz=UTC).date()
        state = self.progress_service.record_day(
            user_id,
            day,
            logged_today=self.logged_on(user_id, day),
            logged_yesterday=self.logged_on(user_id, day - timedelta(days=1)),
        )
        unlocked = self._check_trophies(user_id)
        return self.progress_service.get_state(user_id) if unlocked else state

    def _check_trophies(self, user_id: UUID) -> list[Trophy]:
        return self.progress_service.check_trophies(
            user_id,
            meal_count=self.repository.count_meals(user_id),
            breakfast_count=self.repository.count_meals(user_id, MealSlot.BREAKFAST),
        )
