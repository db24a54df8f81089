"""Nutrition targets, meal suggestions and meal logs."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class MealSlot(StrEnum):
    """Meal slots in a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class DailyTargets:
    """Daily calorie and macro targets."""

    calories: int
    carbs_g: int
    protein_g: int
    fat_g: int


@dataclass(frozen=True)
class MealSuggestion:
    """A suggested meal for one slot."""

    name: str
    slot: MealSlot
    calories: int
    rationale: str


@dataclass(frozen=True)
class PlanAdjustment:
    """Why and by how much a plan was adjusted."""

    reason: str
    previous_calories: int
    change: int


@dataclass(frozen=True)
class MealPlan:
    """Targets and meal suggestions for a month."""

    month: str
    generated_at: datetime
    targets: DailyTargets
    suggestions: tuple[MealSuggestion, ...]
    adjustment: PlanAdjustment | None = None


@dataclass(frozen=True)
class FoodItem:
    """A food with its macros as logged."""

    name: str
    calories: float
    carbs_g: float
    protein_g: float
    fat_g: float
    serving_size: float = 100
    serving_unit: str = "g"


@dataclass(frozen=True)
class NutritionTotals:
    """Summed macros for a set of foods."""

    calories: float = 0
    carbs_g: float = 0
    protein_g: float = 0
    fat_g: float = 0

    @classmethod
    def from_foods(cls, foods: list[FoodItem]) -> "NutritionTotals":
        """Sum the macros of the given foods."""
        return cls(
            calories=sum(food.calories for food in foods),
            carbs_g=sum(food.carbs_g for food in foods),
            protein_g=sum(food.protein_g for food in foods),
            fat_g=sum(food.fat_g for food in foods),
        )


@dataclass(frozen=True)
class MealRecord:
    """A logged meal."""

    id: UUID
    logged_at: datetime
    slot: MealSlot
    totals: NutritionTotals
    foods: list[FoodItem] = field(default_factory=list)
    xp_earned: int = 0
    meal_score: int = 0
