"""Composite health, risk and meal scores."""

import math
from collections.abc import Sequence

from health_track.domain.metrics import (
    BloodPressureStatus,
    CholesterolStatus,
    GlucoseStatus,
    SleepStatus,
)
from health_track.domain.nutrition import DailyTargets, NutritionTotals
from health_track.domain.scores import RiskAssessment, RiskTier

EMPTY_SERIES_MEAN = 100.0

MEAL_ADHERENCE_POINTS = 30
ACTIVITY_POINTS = 20
SLEEP_POINTS = 20

HIGH_RISK_POINTS = 6
MODERATE_RISK_POINTS = 3

MEAL_SCORE_BASE = 10
MEAL_SCORE_MIN = 1
MEAL_SCORE_MAX = 10
MEALS_PER_DAY = 3

SNAPSHOT_STEPS_TARGET = 7000


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def mean_and_stddev(values: Sequence[float]) -> tuple[float, float]:
    """Return the mean and population standard deviation.

    An empty series is treated as a steady reading of 100 mg/dL.
    """
    if not values:
        return EMPTY_SERIES_MEAN, 0.0
    mean = sum(values) / len(values)
    variance = sum((value - mean) ** 2 for value in values) / len(values)
    return mean, math.sqrt(variance)


def health_score(
    glucose_series: Sequence[float],
    meal_adherence: float,
    activity_level: float,
    sleep_quality: float,
) -> int:
    """Return the 0-100 health score.

    Glucose level and stability contribute up to 30 points; the three
    adherence ratios (clamped to [0, 1]) contribute 30, 20 and 20.
    """
    mean, stddev = mean_and_stddev(glucose_series)
    points = 0
    if 70 <= mean <= 120:
        points += 20
    elif 120 < mean <= 140:
        points += 10

    if stddev < 20:
        points += 10
    elif stddev < 30:
        points += 5

    points += math.floor(_clamp(meal_adherence, 0, 1) * MEAL_ADHERENCE_POINTS)
    points += math.floor(_clamp(activity_level, 0, 1) * ACTIVITY_POINTS)
    points += math.floor(_clamp(sleep_quality, 0, 1) * SLEEP_POINTS)
    return int(_clamp(points, 0, 100))


def risk_tier(points: int) -> RiskTier:
    """Return the tier for accumulated risk points."""
    if points >= HIGH_RISK_POINTS:
        return RiskTier.HIGH
    if points >= MODERATE_RISK_POINTS:
        return RiskTier.MODERATE
    return RiskTier.LOW


def risk_score(
    avg_glucose: float,
    avg_bp: tuple[float, float] | None,
    avg_ldl: float | None,
    bmi: float,
) -> RiskAssessment:
    """Accumulate cardiometabolic risk points.

    Missing blood pressure or LDL contributes nothing.
    """
    points = 0
    if avg_glucose > 140:
        points += 3
    elif avg_glucose > 126:
        points += 2
    elif avg_glucose > 100:
        points += 1

    if avg_bp is not None:
        systolic, diastolic = avg_bp
        if systolic > 140 or diastolic > 90:
            points += 3
        elif systolic > 130 or diastolic > 85:
            points += 2

    if avg_ldl is not None:
        if avg_ldl > 160:
            points += 3
        elif avg_ldl > 130:
            points += 2
        elif avg_ldl > 100:
            points += 1

    if bmi > 30:
        points += 2
    elif bmi > 25:
        points += 1

    return RiskAssessment(points=points, tier=risk_tier(points))


def meal_score(
    totals: NutritionTotals, targets: DailyTargets, base: int = MEAL_SCORE_BASE
) -> int:
    """Return a 1-10 score for a single meal against daily targets."""
    score = base
    if totals.protein_g >= 15:
        score += 2

    target_per_meal = targets.calories / MEALS_PER_DAY
    calorie_diff = abs(totals.calories - target_per_meal)
    if calorie_diff < 100:
        score += 2
    elif calorie_diff < 200:
        score += 1

    if totals.calories > 0:
        carb_pct = totals.carbs_g * 4 / totals.calories * 100
        protein_pct = totals.protein_g * 4 / totals.calories * 100
        fat_pct = totals.fat_g * 9 / totals.calories * 100
        if 25 <= protein_pct <= 35:
            score += 2
        if 35 <= carb_pct <= 50:
            score += 1
        if 20 <= fat_pct <= 35:
            score += 1

    return int(_clamp(score, MEAL_SCORE_MIN, MEAL_SCORE_MAX))


def snapshot_score(
    glucose: GlucoseStatus | None = None,
    blood_pressure: BloodPressureStatus | None = None,
    cholesterol: CholesterolStatus | None = None,
    steps: float | None = None,
    sleep: SleepStatus | None = None,
) -> int:
    """Return the share of latest metrics in their healthy bucket, 0-100.

    Steps only count when the target is reached, and sleep only when
    optimal; other missing metrics are left out of the denominator.
    """
    healthy = 0
    considered = 0
    for status, good in (
        (glucose, GlucoseStatus.NORMAL),
        (blood_pressure, BloodPressureStatus.NORMAL),
        (cholesterol, CholesterolStatus.DESIRABLE),
    ):
        if status is None:
            continue
        considered += 1
        if status == good:
            healthy += 1
    if steps is not None and steps >= SNAPSHOT_STEPS_TARGET:
        considered += 1
        healthy += 1
    if sleep is SleepStatus.OPTIMAL:
        considered += 1
        healthy += 1
    if considered == 0:
        return 0
    return int(healthy / considered * 100)


def glucose_trend(recent_avg: float, previous_avg: float) -> float:
    """Return the percent change between two glucose averages."""
    if previous_avg <= 0:
        return 0.0
    return (recent_avg - previous_avg) / previous_avg * 100
