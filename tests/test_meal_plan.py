"""Tests for meal suggestions."""

from health_track.calculators.meal_plan import (
    DietClass,
    diet_class,
    meal_slot_for_hour,
    suggest_meals,
)
from health_track.calculators.targets import compute_targets
from health_track.domain.nutrition import MealSlot
from health_track.domain.profile import Condition, DietaryRestriction
from tests.conftest import make_profile


def test_omnivore_plan_without_glucose_condition() -> None:
    profile = make_profile()

    suggestions = suggest_meals(compute_targets(profile), profile)

    assert [suggestion.slot for suggestion in suggestions] == [
        MealSlot.BREAKFAST,
        MealSlot.LUNCH,
        MealSlot.DINNER,
        MealSlot.SNACK,
    ]
    assert suggestions[0].name == "Scrambled Eggs with Avocado Toast"
    assert suggestions[2].name == "Salmon with Roasted Vegetables"
    assert suggestions[3].name == "Mixed Nuts and Dark Chocolate"
    assert suggestions[3].calories == 180


def test_vegan_wins_over_vegetarian() -> None:
    profile = make_profile(
        dietary_restrictions=frozenset(
            {DietaryRestriction.VEGAN, DietaryRestriction.VEGETARIAN}
        )
    )

    suggestions = suggest_meals(compute_targets(profile), profile)

    assert diet_class(profile) is DietClass.VEGAN
    assert suggestions[0].name == "Overnight Oats with Berries"
    assert suggestions[1].name == "Quinoa Buddha Bowl"
    assert suggestions[2].name == "Lentil Curry with Brown Rice"


def test_vegetarian_diabetic_gets_protein_paired_snack() -> None:
    profile = make_profile(
        conditions=frozenset({Condition.DIABETES}),
        dietary_restrictions=frozenset({DietaryRestriction.VEGETARIAN}),
    )

    suggestions = suggest_meals(compute_targets(profile), profile)

    assert suggestions[0].name == "Greek Yogurt Bowl with Nuts"
    assert suggestions[3].name == "Apple with Almond Butter"
    assert suggestions[3].calories == 200


def test_other_restrictions_fall_back_to_omnivore() -> None:
    profile = make_profile(
        dietary_restrictions=frozenset({DietaryRestriction.GLUTEN_FREE})
    )

    assert diet_class(profile) is DietClass.OMNIVORE


def test_suggestions_are_deterministic() -> None:
    profile = make_profile(conditions=frozenset({Condition.PREDIABETES}))
    targets = compute_targets(profile)

    assert suggest_meals(targets, profile) == suggest_meals(targets, profile)


def test_meal_slot_for_hour() -> None:
    assert meal_slot_for_hour(4) is MealSlot.SNACK
    assert meal_slot_for_hour(5) is MealSlot.BREAKFAST
    assert meal_slot_for_hour(11) is MealSlot.LUNCH
    assert meal_slot_for_hour(16) is MealSlot.DINNER
    assert meal_slot_for_hour(21) is MealSlot.DINNER
    assert meal_slot_for_hour(22) is MealSlot.SNACK
