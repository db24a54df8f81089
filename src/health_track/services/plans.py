"""Monthly meal plan service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from health_track.calculators.meal_plan import suggest_meals
from health_track.calculators.targets import adjust_targets, compute_targets
from health_track.domain.nutrition import MealPlan, PlanAdjustment
from health_track.services.profiles import ProfileService

logger = logging.getLogger(__name__)


class PlanRepository(Protocol):
    """Persistence interface for meal plans."""

    def save_plan(self, user_id: UUID, plan: MealPlan) -> None:
        """Store a plan; the newest plan for a month wins."""

    def get_plan(self, user_id: UUID, month: str) -> MealPlan | None:
        """Return the newest plan for a month, if any."""


def month_key(moment: datetime) -> str:
    """Return the ``YYYY-MM`` key for a moment."""
    return moment.strftime("%Y-%m")


@dataclass
class PlanService:
    """Builds, stores and adjusts monthly plans."""

    profile_service: ProfileService
    repository: PlanRepository

    def generate_plan(self, user_id: UUID, now: datetime | None = None) -> MealPlan:
        """Compute fresh targets and suggestions for the current month."""
        moment = now or datetime.now(tz=UTC)
        profile = self.profile_service.get_profile(user_id)
        targets = compute_targets(profile)
        plan = MealPlan(
            month=month_key(moment),
            generated_at=moment,
            targets=targets,
            suggestions=suggest_meals(targets, profile),
        )
        self.repository.save_plan(user_id, plan)
        logger.info(
            "Generated meal plan",
            extra={"user_id": str(user_id), "calories": targets.calories},
        )
        return plan

    def get_current_plan(self, user_id: UUID, now: datetime | None = None) -> MealPlan:
        """Return this month's plan, generating one when none exists."""
        moment = now or datetime.now(tz=UTC)
        plan = self.repository.get_plan(user_id, month_key(moment))
        if plan is not None:
            return plan
        return self.generate_plan(user_id, moment)

    def adjust_plan(
        self,
        user_id: UUID,
        reason: str,
        calorie_change: int,
        now: datetime | None = None,
    ) -> MealPlan:
        """Shift the current plan's calories and regenerate its macros."""
        moment = now or datetime.now(tz=UTC)
        current = self.get_current_plan(user_id, moment)
        profile = self.profile_service.get_profile(user_id)
        targets = adjust_targets(current.targets, calorie_change, profile)
        plan = MealPlan(
            month=month_key(moment),
            generated_at=moment,
            targets=targets,
            suggestions=suggest_meals(targets, profile),
            adjustment=PlanAdjustment(
                reason=reason,
                previous_calories=current.targets.calories,
                change=calorie_change,
            ),
        )
        self.repository.save_plan(user_id, plan)
        return plan
