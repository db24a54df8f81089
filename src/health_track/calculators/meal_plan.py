"""Deterministic meal suggestions from a fixed rule table."""

from enum import StrEnum

from health_track.domain.nutrition import DailyTargets, MealSlot, MealSuggestion
from health_track.domain.profile import DietaryRestriction, UserProfile


class DietClass(StrEnum):
    """Diet class used to pick the main-meal suggestions."""

    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    OMNIVORE = "omnivore"


MAIN_MEALS: dict[tuple[MealSlot, DietClass], tuple[str, int, str]] = {
    (MealSlot.BREAKFAST, DietClass.VEGAN): (
        "Overnight Oats with Berries",
        350,
        "High fiber keeps you full and stabilizes blood sugar",
    ),
    (MealSlot.BREAKFAST, DietClass.VEGETARIAN): (
        "Greek Yogurt Bowl with Nuts",
        380,
        "High protein breakfast reduces glucose spikes throughout the day",
    ),
    (MealSlot.BREAKFAST, DietClass.OMNIVORE): (
        "Scrambled Eggs with Avocado Toast",
        420,
        "Protein and healthy fats provide sustained energy",
    ),
    (MealSlot.LUNCH, DietClass.VEGAN): (
        "Quinoa Buddha Bowl",
        450,
        "Complete protein with plenty of vegetables",
    ),
    (MealSlot.LUNCH, DietClass.VEGETARIAN): (
        "Mediterranean Chickpea Salad",
        420,
        "Fiber-rich and heart-healthy",
    ),
    (MealSlot.LUNCH, DietClass.OMNIVORE): (
        "Grilled Chicken Salad",
        480,
        "Lean protein with lots of vegetables keeps calories in check",
    ),
    (MealSlot.DINNER, DietClass.VEGAN): (
        "Lentil Curry with Brown Rice",
        500,
        "Plant-based protein and complex carbs",
    ),
    (MealSlot.DINNER, DietClass.VEGETARIAN): (
        "Vegetarian Stir-Fry with Tofu",
        450,
        "High protein, low carb option",
    ),
    (MealSlot.DINNER, DietClass.OMNIVORE): (
        "Salmon with Roasted Vegetables",
        520,
        "Omega-3 fatty acids support heart health and reduce inflammation",
    ),
}

# Keyed by whether the profile has a glucose condition.
SNACKS: dict[bool, tuple[str, int, str]] = {
    True: (
        "Apple with Almond Butter",
        200,
        "Protein slows sugar absorption from the fruit",
    ),
    False: (
        "Mixed Nuts and Dark Chocolate",
        180,
        "Healthy fats and antioxidants",
    ),
}

MAIN_SLOTS = (MealSlot.BREAKFAST, MealSlot.LUNCH, MealSlot.DINNER)

BREAKFAST_START_HOUR = 5
LUNCH_START_HOUR = 11
DINNER_START_HOUR = 16
DINNER_END_HOUR = 22


def diet_class(profile: UserProfile) -> DietClass:
    """Return the diet class; vegan wins over vegetarian."""
    if DietaryRestriction.VEGAN in profile.dietary_restrictions:
        return DietClass.VEGAN
    if DietaryRestriction.VEGETARIAN in profile.dietary_restrictions:
        return DietClass.VEGETARIAN
    return DietClass.OMNIVORE


def suggest_meals(
    targets: DailyTargets, profile: UserProfile
) -> tuple[MealSuggestion, ...]:
    """Return one suggestion per slot: breakfast, lunch, dinner, snack.

    ``targets`` is accepted so callers always plan from computed targets; the
    rule table itself is keyed only on diet class and glucose conditions.
    """
    diet = diet_class(profile)
    suggestions = [
        _suggestion(slot, *MAIN_MEALS[(slot, diet)]) for slot in MAIN_SLOTS
    ]
    suggestions.append(
        _suggestion(MealSlot.SNACK, *SNACKS[profile.has_glucose_condition])
    )
    return tuple(suggestions)


def meal_slot_for_hour(hour: int) -> MealSlot:
    """Return the meal slot for a local hour of day."""
    if BREAKFAST_START_HOUR <= hour < LUNCH_START_HOUR:
        return MealSlot.BREAKFAST
    if LUNCH_START_HOUR <= hour < DINNER_START_HOUR:
        return MealSlot.LUNCH
    if DINNER_START_HOUR <= hour < DINNER_END_HOUR:
        return MealSlot.DINNER
    return MealSlot.SNACK


def _suggestion(
    slot: MealSlot, name: str, calories: int, rationale: str
) -> MealSuggestion:
    return MealSuggestion(name=name, slot=slot, calories=calories, rationale=rationale)
