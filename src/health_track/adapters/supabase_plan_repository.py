"""Supabase repository for monthly meal plans."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from health_track.domain.nutrition import (
    DailyTargets,
    MealPlan,
    MealSlot,
    MealSuggestion,
    PlanAdjustment,
)
from health_track.services.plans import PlanRepository


@dataclass
class SupabasePlanRepository(PlanRepository):
    """Supabase implementation for meal plans."""

    client: Client

    def save_plan(self, user_id: UUID, plan: MealPlan) -> None:
        """Insert a plan row; reads pick the newest row for the month."""
        adjustment = plan.adjustment
        self.client.table("meal_plans").insert(
            {
                "user_id": str(user_id),
                "month": plan.month,
                "generated_at": plan.generated_at.isoformat(),
                "calorie_target": plan.targets.calories,
                "carbs_target_g": plan.targets.carbs_g,
                "protein_target_g": plan.targets.protein_g,
                "fat_target_g": plan.targets.fat_g,
                "suggestions": [
                    {
                        "name": suggestion.name,
                        "slot": suggestion.slot.value,
                        "calories": suggestion.calories,
                        "rationale": suggestion.rationale,
                    }
                    for suggestion in plan.suggestions
                ],
                "adjustment": (
                    {
                        "reason": adjustment.reason,
                        "previous_calories": adjustment.previous_calories,
                        "change": adjustment.change,
                    }
                    if adjustment
                    else None
                ),
            }
        ).execute()

    def get_plan(self, user_id: UUID, month: str) -> MealPlan | None:
        """Return the newest plan for a month."""
        response = (
            self.client.table("meal_plans")
            .select(
                "month, generated_at, calorie_target, carbs_target_g, "
                "protein_target_g, fat_target_g, suggestions, adjustment"
            )
            .eq("user_id", str(user_id))
            .eq("month", month)
            .order("generated_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> MealPlan:
    adjustment = row.get("adjustment")
    return MealPlan(
        month=str(row["month"]),
        generated_at=datetime.fromisoformat(str(row["generated_at"])),
        targets=DailyTargets(
            calories=int(row["calorie_target"]),
            carbs_g=int(row["carbs_target_g"]),
            protein_g=int(row["protein_target_g"]),
            fat_g=int(row["fat_target_g"]),
        ),
        suggestions=tuple(
            MealSuggestion(
                name=str(item["name"]),
                slot=MealSlot(str(item["slot"])),
                calories=int(item["calories"]),
                rationale=str(item.get("rationale", "")),
            )
            for item in row.get("suggestions") or []
        ),
        adjustment=(
            PlanAdjustment(
                reason=str(adjustment["reason"]),
                previous_calories=int(adjustment["previous_calories"]),
                change=int(adjustment["change"]),
            )
            if isinstance(adjustment, dict)
            else None
        ),
    )
