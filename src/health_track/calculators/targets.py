"""Daily energy and macro targets.

BMR uses the Mifflin-St Jeor equation with a fixed light-activity factor.
Goal adjustments are applied independently, so a profile carrying both
``weight_loss`` and ``muscle_gain`` nets -200 kcal. All gram and calorie
values are truncated toward zero from the unrounded target energy.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from health_track.domain.errors import InvalidProfileError
from health_track.domain.nutrition import DailyTargets
from health_track.domain.profile import Goal, Sex, UserProfile

ACTIVITY_FACTOR = 1.3

GOAL_ADJUSTMENTS = {
    Goal.WEIGHT_LOSS: -500,
    Goal.MUSCLE_GAIN: 300,
}

KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_FAT = 9

ADHERENCE_TOLERANCE = 0.1


@dataclass(frozen=True)
class MacroSplit:
    """Fractions of daily energy from each macro."""

    carbs: float
    protein: float
    fat: float


DEFAULT_SPLIT = MacroSplit(carbs=0.4, protein=0.3, fat=0.3)
GLUCOSE_AWARE_SPLIT = MacroSplit(carbs=0.35, protein=0.35, fat=0.3)


def basal_metabolic_rate(profile: UserProfile) -> float:
    """Return resting energy expenditure in kcal/day."""
    offset = 5 if profile.sex is Sex.MALE else -161
    return (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * profile.age
        + offset
    )


def total_daily_energy(profile: UserProfile) -> float:
    """Return TDEE using the fixed activity factor."""
    return basal_metabolic_rate(profile) * ACTIVITY_FACTOR


def target_energy(profile: UserProfile) -> float:
    """Return TDEE adjusted for the profile's goals."""
    energy = total_daily_energy(profile)
    for goal, adjustment in GOAL_ADJUSTMENTS.items():
        if goal in profile.goals:
            energy += adjustment
    return energy


def macro_split(profile: UserProfile) -> MacroSplit:
    """Return the macro split, lowering carbs for glucose conditions."""
    if profile.has_glucose_condition:
        return GLUCOSE_AWARE_SPLIT
    return DEFAULT_SPLIT


def targets_for_energy(energy: float, split: MacroSplit) -> DailyTargets:
    """Convert target energy into truncated calorie and gram targets."""
    if not math.isfinite(energy) or energy <= 0:
        raise InvalidProfileError(f"Target energy is not usable: {energy!r}")
    return DailyTargets(
        calories=int(energy),
        carbs_g=int(energy * split.carbs / KCAL_PER_GRAM_CARBS),
        protein_g=int(energy * split.protein / KCAL_PER_GRAM_PROTEIN),
        fat_g=int(energy * split.fat / KCAL_PER_GRAM_FAT),
    )


def compute_targets(profile: UserProfile) -> DailyTargets:
    """Compute daily targets for a profile.

    Raises:
        InvalidProfileError: If the profile yields non-finite or
            non-positive energy (zero height, NaN weight and the like).
    """
    return targets_for_energy(target_energy(profile), macro_split(profile))


def adjust_targets(
    targets: DailyTargets, calorie_change: int, profile: UserProfile
) -> DailyTargets:
    """Shift daily calories and rebuild macros with the profile's split."""
    return targets_for_energy(targets.calories + calorie_change, macro_split(profile))


def macro_energy(targets: DailyTargets) -> int:
    """Return the energy implied by the macro grams."""
    return (
        targets.carbs_g * KCAL_PER_GRAM_CARBS
        + targets.protein_g * KCAL_PER_GRAM_PROTEIN
        + targets.fat_g * KCAL_PER_GRAM_FAT
    )


def meal_adherence(daily_calories: Sequence[float], target_calories: int) -> float:
    """Return the fraction of days whose intake was within 10% of target."""
    if not daily_calories or target_calories <= 0:
        return 0.0
    low = target_calories * (1 - ADHERENCE_TOLERANCE)
    high = target_calories * (1 + ADHERENCE_TOLERANCE)
    days_on_target = sum(1 for calories in daily_calories if low <= calories <= high)
    return days_on_target / len(daily_calories)
