"""Range classification of health metric values.

Every classifier is total over numeric input: values outside the
physiological range fall into the most extreme bucket instead of raising.
"""

import re

from health_track.domain.metrics import (
    BloodPressureStatus,
    BMICategory,
    CholesterolStatus,
    GlucoseContext,
    GlucoseStatus,
    HDLStatus,
    MetricKind,
    SleepStatus,
    Status,
    StepsStatus,
)

# (low_below, normal_up_to) per context; fasting adds a prediabetic band.
_GLUCOSE_BANDS: dict[GlucoseContext, tuple[float, float]] = {
    GlucoseContext.FASTING: (70, 100),
    GlucoseContext.BEFORE_MEAL: (70, 130),
    GlucoseContext.AFTER_MEAL: (70, 180),
    GlucoseContext.BEDTIME: (90, 150),
    GlucoseContext.RANDOM: (70, 200),
}
FASTING_PREDIABETIC_MAX = 125

STEPS_TARGET = 7000
STEPS_GOAL = 10000


def parse_glucose_context(context: GlucoseContext | str | None) -> GlucoseContext:
    """Resolve a context tag such as ``afterMeal`` or ``After Meal``.

    Missing or unknown contexts are treated as random readings.
    """
    if context is None or isinstance(context, GlucoseContext):
        return context or GlucoseContext.RANDOM
    key = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", context.strip())
    key = key.lower().replace(" ", "_").replace("-", "_")
    try:
        return GlucoseContext(key)
    except ValueError:
        return GlucoseContext.RANDOM


def classify_glucose(
    value: float, context: GlucoseContext | str | None = None
) -> GlucoseStatus:
    """Classify a glucose reading in mg/dL for its measurement context."""
    resolved = parse_glucose_context(context)
    low_below, normal_max = _GLUCOSE_BANDS[resolved]
    if value < low_below:
        return GlucoseStatus.LOW
    if value <= normal_max:
        return GlucoseStatus.NORMAL
    if resolved is GlucoseContext.FASTING and value <= FASTING_PREDIABETIC_MAX:
        return GlucoseStatus.PREDIABETIC
    return GlucoseStatus.HIGH


def classify_blood_pressure(systolic: float, diastolic: float) -> BloodPressureStatus:
    """Classify blood pressure; the first matching rule wins."""
    if systolic < 90 or diastolic < 60:
        return BloodPressureStatus.LOW
    if systolic < 120 and diastolic < 80:
        return BloodPressureStatus.NORMAL
    if systolic < 130 and diastolic < 80:
        return BloodPressureStatus.ELEVATED
    if systolic < 140 or diastolic < 90:
        return BloodPressureStatus.STAGE_1
    if systolic < 180 or diastolic < 120:
        return BloodPressureStatus.STAGE_2
    return BloodPressureStatus.CRISIS


def classify_total_cholesterol(value: float) -> CholesterolStatus:
    """Classify total cholesterol in mg/dL."""
    if value < 200:
        return CholesterolStatus.DESIRABLE
    if value < 240:
        return CholesterolStatus.BORDERLINE_HIGH
    return CholesterolStatus.HIGH


def classify_ldl(value: float) -> CholesterolStatus:
    """Classify LDL cholesterol in mg/dL."""
    if value < 100:
        return CholesterolStatus.OPTIMAL
    if value < 130:
        return CholesterolStatus.NEAR_OPTIMAL
    if value < 160:
        return CholesterolStatus.BORDERLINE_HIGH
    if value < 190:
        return CholesterolStatus.HIGH
    return CholesterolStatus.VERY_HIGH


def classify_hdl(value: float) -> HDLStatus:
    """Classify HDL cholesterol in mg/dL."""
    if value < 40:
        return HDLStatus.POOR
    if value < 60:
        return HDLStatus.BETTER
    return HDLStatus.BEST


def classify_triglycerides(value: float) -> CholesterolStatus:
    """Classify triglycerides in mg/dL."""
    if value < 150:
        return CholesterolStatus.NORMAL
    if value < 200:
        return CholesterolStatus.BORDERLINE_HIGH
    if value < 500:
        return CholesterolStatus.HIGH
    return CholesterolStatus.VERY_HIGH


def classify_sleep(hours: float) -> SleepStatus:
    """Classify a night's sleep duration in hours."""
    if hours < 6:
        return SleepStatus.INSUFFICIENT
    if hours < 7:
        return SleepStatus.SHORT
    if hours <= 9:
        return SleepStatus.OPTIMAL
    return SleepStatus.LONG


def classify_steps(count: float) -> StepsStatus:
    """Classify a daily step count."""
    if count < STEPS_TARGET:
        return StepsStatus.BELOW_TARGET
    if count < STEPS_GOAL:
        return StepsStatus.ACTIVE
    return StepsStatus.GOAL_MET


def bmi(weight_kg: float, height_cm: float) -> float:
    """Return body mass index in kg/m^2."""
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def classify_bmi(value: float) -> BMICategory:
    """Classify BMI using WHO adult categories."""
    if value < 18.5:
        return BMICategory.UNDERWEIGHT
    if value < 25:
        return BMICategory.NORMAL
    if value < 30:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


_SCALAR_CLASSIFIERS = {
    MetricKind.TOTAL_CHOLESTEROL: classify_total_cholesterol,
    MetricKind.LDL: classify_ldl,
    MetricKind.HDL: classify_hdl,
    MetricKind.TRIGLYCERIDES: classify_triglycerides,
    MetricKind.SLEEP: classify_sleep,
    MetricKind.STEPS: classify_steps,
    MetricKind.BMI: classify_bmi,
}


def classify(
    kind: MetricKind | str,
    value: float | tuple[float, float],
    context: GlucoseContext | str | None = None,
) -> Status:
    """Classify a metric value.

    Blood pressure takes a ``(systolic, diastolic)`` pair; every other kind
    takes a single number. ``context`` only applies to glucose.
    """
    resolved = MetricKind(kind)
    if resolved is MetricKind.BLOOD_PRESSURE:
        if not isinstance(value, tuple):
            raise TypeError("blood pressure needs a (systolic, diastolic) pair")
        systolic, diastolic = value
        return classify_blood_pressure(systolic, diastolic)
    if isinstance(value, tuple):
        raise TypeError(f"{resolved} takes a single value")
    if resolved is MetricKind.GLUCOSE:
        return classify_glucose(value, context)
    classifier = _SCALAR_CLASSIFIERS.get(resolved)
    if classifier is None:
        raise ValueError(f"No classification rule for {resolved}")
    return classifier(value)
