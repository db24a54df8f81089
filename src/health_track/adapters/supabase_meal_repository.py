"""Supabase repository for logged meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from health_track.domain.nutrition import (
    FoodItem,
    MealRecord,
    MealSlot,
    NutritionTotals,
)
from health_track.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def create_meal(self, user_id: UUID, meal: MealRecord) -> None:
        """Insert a meal row with its foods."""
        self.client.table("meals").insert(
            {
                "id": str(meal.id),
                "user_id": str(user_id),
                "logged_at": meal.logged_at.isoformat(),
                "meal_type": meal.slot.value,
                "total_calories": meal.totals.calories,
                "total_carbs_g": meal.totals.carbs_g,
                "total_protein_g": meal.totals.protein_g,
                "total_fat_g": meal.totals.fat_g,
                "foods": [
                    {
                        "name": food.name,
                        "calories": food.calories,
                        "carbs_g": food.carbs_g,
                        "protein_g": food.protein_g,
                        "fat_g": food.fat_g,
                        "serving_size": food.serving_size,
                        "serving_unit": food.serving_unit,
                    }
                    for food in meal.foods
                ],
                "xp_earned": meal.xp_earned,
                "meal_score": meal.meal_score,
            }
        ).execute()

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals in the time range, oldest first."""
        response = (
            self.client.table("meals")
            .select(
                "id, logged_at, meal_type, total_calories, total_carbs_g, "
                "total_protein_g, total_fat_g, foods, xp_earned, meal_score"
            )
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def count_meals(self, user_id: UUID, slot: MealSlot | None = None) -> int:
        """Return how many meals a user logged, optionally for one slot."""
        query = (
            self.client.table("meals")
            .select("id", count="exact")
            .eq("user_id", str(user_id))
        )
        if slot is not None:
            query = query.eq("meal_type", slot.value)
        response = query.execute()
        if response.count is not None:
            return response.count
        return len(response.data or [])


def _parse_row(row: dict[str, object]) -> MealRecord:
    return MealRecord(
        id=UUID(str(row["id"])),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        slot=MealSlot(str(row.get("meal_type") or MealSlot.SNACK)),
        totals=NutritionTotals(
            calories=float(row.get("total_calories", 0.0)),
            carbs_g=float(row.get("total_carbs_g", 0.0)),
            protein_g=float(row.get("total_protein_g", 0.0)),
            fat_g=float(row.get("total_fat_g", 0.0)),
        ),
        foods=[
            FoodItem(
                name=str(food.get("name", "")),
                calories=float(food.get("calories", 0.0)),
                carbs_g=float(food.get("carbs_g", 0.0)),
                protein_g=float(food.get("protein_g", 0.0)),
                fat_g=float(food.get("fat_g", 0.0)),
                serving_size=float(food.get("serving_size", 100)),
                serving_unit=str(food.get("serving_unit", "g")),
            )
            for food in row.get("foods") or []
        ],
        xp_earned=int(row.get("xp_earned", 0)),
        meal_score=int(row.get("meal_score", 0)),
    )
