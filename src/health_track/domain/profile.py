"""User profile domain models."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum


class Sex(StrEnum):
    """Biological sex as distinguished by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class Condition(StrEnum):
    """Health conditions a profile can carry."""

    DIABETES = "diabetes"
    PREDIABETES = "prediabetes"
    HYPERTENSION = "hypertension"
    HIGH_CHOLESTEROL = "high_cholesterol"
    OBESITY = "obesity"
    SLEEP_APNEA = "sleep_apnea"
    OTHER = "other"


class DietaryRestriction(StrEnum):
    """Dietary restrictions used for meal selection."""

    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    GLUTEN_FREE = "gluten_free"
    DAIRY_FREE = "dairy_free"
    OTHER = "other"


class Goal(StrEnum):
    """Health goals selected during onboarding."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    LOWER_BLOOD_SUGAR = "lower_blood_sugar"
    LOWER_BLOOD_PRESSURE = "lower_blood_pressure"
    LOWER_CHOLESTEROL = "lower_cholesterol"
    INCREASE_ACTIVITY = "increase_activity"
    BETTER_SLEEP = "better_sleep"
    HEALTHIER_EATING = "healthier_eating"


GLUCOSE_CONDITIONS = frozenset({Condition.DIABETES, Condition.PREDIABETES})

_CONDITION_ALIASES = {
    "pre_diabetic": Condition.PREDIABETES,
    "prediabetic": Condition.PREDIABETES,
    "pre_diabetes": Condition.PREDIABETES,
    "type_1_diabetes": Condition.DIABETES,
    "type_2_diabetes": Condition.DIABETES,
    "type1_diabetes": Condition.DIABETES,
    "type2_diabetes": Condition.DIABETES,
    "t1d": Condition.DIABETES,
    "t2d": Condition.DIABETES,
}

# Onboarding placeholders meaning "no condition".
_NO_CONDITION_TAGS = frozenset({"none", "no_conditions", "n/a"})

_GOAL_ALIASES = {
    "lose_weight": Goal.WEIGHT_LOSS,
    "gain_muscle": Goal.MUSCLE_GAIN,
}


def _normalize(tag: str) -> str:
    return tag.strip().lower().replace("-", "_").replace(" ", "_")


def parse_conditions(tags: Iterable[str]) -> frozenset[Condition]:
    """Map free-form condition tags onto the closed enumeration."""
    parsed: set[Condition] = set()
    for tag in tags:
        key = _normalize(tag)
        if not key or key in _NO_CONDITION_TAGS:
            continue
        if key in _CONDITION_ALIASES:
            parsed.add(_CONDITION_ALIASES[key])
            continue
        try:
            parsed.add(Condition(key))
        except ValueError:
            parsed.add(Condition.OTHER)
    return frozenset(parsed)


def parse_restrictions(tags: Iterable[str]) -> frozenset[DietaryRestriction]:
    """Map free-form dietary restriction tags onto the closed enumeration."""
    parsed: set[DietaryRestriction] = set()
    for tag in tags:
        key = _normalize(tag)
        if not key:
            continue
        try:
            parsed.add(DietaryRestriction(key))
        except ValueError:
            parsed.add(DietaryRestriction.OTHER)
    return frozenset(parsed)


def parse_goals(tags: Iterable[str]) -> frozenset[Goal]:
    """Map free-form goal tags onto the closed enumeration.

    Unknown goals are dropped since no calculation depends on them.
    """
    parsed: set[Goal] = set()
    for tag in tags:
        key = _normalize(tag)
        if key in _GOAL_ALIASES:
            parsed.add(_GOAL_ALIASES[key])
            continue
        try:
            parsed.add(Goal(key))
        except ValueError:
            continue
    return frozenset(parsed)


@dataclass(frozen=True)
class UserProfile:
    """Biometric profile collected at onboarding."""

    age: int
    sex: Sex
    height_cm: float
    weight_kg: float
    conditions: frozenset[Condition] = field(default_factory=frozenset)
    dietary_restrictions: frozenset[DietaryRestriction] = field(
        default_factory=frozenset
    )
    goals: frozenset[Goal] = field(default_factory=frozenset)

    @property
    def has_glucose_condition(self) -> bool:
        """Return True for diabetic or prediabetic profiles."""
        return bool(self.conditions & GLUCOSE_CONDITIONS)
