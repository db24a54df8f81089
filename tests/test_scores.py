"""Tests for composite scores."""

import pytest

from health_track.calculators.scores import (
    glucose_trend,
    health_score,
    mean_and_stddev,
    meal_score,
    risk_score,
    risk_tier,
    snapshot_score,
)
from health_track.calculators.targets import compute_targets
from health_track.domain.metrics import (
    BloodPressureStatus,
    CholesterolStatus,
    GlucoseStatus,
    SleepStatus,
)
from health_track.domain.nutrition import DailyTargets, NutritionTotals
from health_track.domain.profile import Goal
from health_track.domain.scores import RiskTier
from tests.conftest import make_profile

TARGETS = DailyTargets(calories=1800, carbs_g=180, protein_g=135, fat_g=60)


def test_health_score_with_empty_glucose_series() -> None:
    assert health_score([], 0.8, 0.7, 0.75) == 83


def test_health_score_penalizes_high_mean_and_clamps_ratios() -> None:
    assert health_score([150, 150], 2.0, 0, 0) == 40


def test_health_score_stability_bands() -> None:
    # mean 120, population stddev 25
    assert health_score([95, 145], 0, 0, 0) == 25
    # mean 130, population stddev 40
    assert health_score([90, 170], 0, 0, 0) == 10


def test_health_score_stays_in_range() -> None:
    assert health_score([100, 300], -1, -1, -1) == 0
    assert health_score([100] * 5, 1, 1, 1) == 100


def test_mean_and_stddev() -> None:
    assert mean_and_stddev([]) == (100.0, 0.0)
    mean, stddev = mean_and_stddev([2, 4, 4, 4, 5, 5, 7, 9])
    assert mean == 5
    assert stddev == pytest.approx(2.0)


def test_risk_score_high_tier() -> None:
    assessment = risk_score(avg_glucose=150, avg_bp=(145, 95), avg_ldl=170, bmi=32)

    assert assessment.points == 11
    assert assessment.score == 110
    assert assessment.tier is RiskTier.HIGH


def test_risk_score_missing_inputs_contribute_nothing() -> None:
    assessment = risk_score(avg_glucose=0, avg_bp=None, avg_ldl=None, bmi=22)

    assert assessment.points == 0
    assert assessment.tier is RiskTier.LOW


def test_risk_score_moderate_tier() -> None:
    assessment = risk_score(avg_glucose=130, avg_bp=(135, 80), avg_ldl=None, bmi=24)

    assert assessment.points == 4
    assert assessment.tier is RiskTier.MODERATE


def test_risk_tier_boundaries() -> None:
    assert risk_tier(2) is RiskTier.LOW
    assert risk_tier(3) is RiskTier.MODERATE
    assert risk_tier(5) is RiskTier.MODERATE
    assert risk_tier(6) is RiskTier.HIGH


def test_meal_score_saturates_with_default_base() -> None:
    assert meal_score(NutritionTotals(), TARGETS) == 10


def test_meal_score_components_with_lower_base() -> None:
    balanced = NutritionTotals(calories=600, carbs_g=60, protein_g=45, fat_g=20)

    assert meal_score(balanced, TARGETS, base=0) == 8


def test_meal_score_floor_and_empty_meal() -> None:
    assert meal_score(NutritionTotals(), TARGETS, base=0) == 1


def test_meal_score_calorie_distance_bands() -> None:
    near = NutritionTotals(calories=750)
    far = NutritionTotals(calories=900)

    assert meal_score(near, TARGETS, base=3) == 4
    assert meal_score(far, TARGETS, base=3) == 3


def test_snapshot_score_counts_present_metrics() -> None:
    score = snapshot_score(
        glucose=GlucoseStatus.NORMAL,
        blood_pressure=BloodPressureStatus.STAGE_1,
        cholesterol=CholesterolStatus.DESIRABLE,
        steps=8000,
        sleep=SleepStatus.SHORT,
    )

    assert score == 75


def test_snapshot_score_without_metrics() -> None:
    assert snapshot_score() == 0


def test_glucose_trend() -> None:
    assert glucose_trend(110, 100) == pytest.approx(10.0)
    assert glucose_trend(110, 0) == 0.0


@pytest.mark.parametrize(
    "compute",
    [
        lambda: compute_targets(make_profile(goals=frozenset({Goal.WEIGHT_LOSS}))),
        lambda: health_score([95, 140, 110], 0.8, 0.6, 0.5),
        lambda: risk_score(avg_glucose=130, avg_bp=(135, 80), avg_ldl=165, bmi=27),
        lambda: meal_score(NutritionTotals(calories=650, carbs_g=70), TARGETS, base=2),
    ],
    ids=["targets", "health_score", "risk_score", "meal_score"],
)
def test_calculators_are_deterministic(compute) -> None:  # type: ignore[no-untyped-def]
    assert compute() == compute()
