"""Stateless calculator endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

from health_track.api.errors import domain_errors
from health_track.api.models import (
    ClassifyRequest,
    HealthScoreRequest,
    MealScoreRequest,
    ProfileIn,
    RiskScoreRequest,
)
from health_track.calculators.classifier import bmi, classify, classify_bmi
from health_track.calculators.levels import progress_in_level, xp_for_next_level
from health_track.calculators.meal_plan import suggest_meals
from health_track.calculators.scores import health_score, meal_score, risk_score
from health_track.calculators.targets import (
    basal_metabolic_rate,
    compute_targets,
    total_daily_energy,
)
from health_track.domain.nutrition import NutritionTotals

if TYPE_CHECKING:
    from health_track.containers import AppContainer

router = APIRouter(prefix="/calculators", tags=["calculators"])


@router.post("/classify")
async def classify_value(payload: ClassifyRequest) -> dict[str, object]:
    """Classify a metric value into its status bucket."""
    with domain_errors():
        result = classify(payload.kind, payload.value, payload.context)
    return {"kind": payload.kind, "status": result}


@router.post("/targets")
async def targets(payload: ProfileIn) -> dict[str, object]:
    """Return energy and macro targets for a profile."""
    profile = payload.to_domain()
    with domain_errors():
        daily = compute_targets(profile)
    return {
        "bmr": basal_metabolic_rate(profile),
        "tdee": total_daily_energy(profile),
        "targets": daily,
    }


@router.post("/meal-plan")
async def meal_plan(payload: ProfileIn) -> dict[str, object]:
    """Return targets and one suggestion per meal slot."""
    profile = payload.to_domain()
    with domain_errors():
        daily = compute_targets(profile)
    return {"targets": daily, "suggestions": list(suggest_meals(daily, profile))}


@router.post("/health-score")
async def health_score_endpoint(payload: HealthScoreRequest) -> dict[str, int]:
    """Return the 0-100 health score."""
    return {
        "score": health_score(
            payload.glucose_series,
            payload.meal_adherence,
            payload.activity_level,
            payload.sleep_quality,
        )
    }


@router.post("/risk-score")
async def risk_score_endpoint(payload: RiskScoreRequest) -> dict[str, object]:
    """Return risk points, score and tier."""
    assessment = risk_score(
        avg_glucose=payload.avg_glucose,
        avg_bp=payload.blood_pressure(),
        avg_ldl=payload.avg_ldl,
        bmi=payload.bmi,
    )
    return {
        "points": assessment.points,
        "score": assessment.score,
        "tier": assessment.tier,
    }


@router.post("/meal-score")
async def meal_score_endpoint(
    payload: MealScoreRequest, request: Request
) -> dict[str, int]:
    """Score one meal against daily targets."""
    container: AppContainer = request.app.state.container
    totals = NutritionTotals.from_foods([food.to_domain() for food in payload.foods])
    return {
        "score": meal_score(
            totals, payload.targets.to_domain(), container.settings.meal_score_base
        )
    }


@router.get("/level")
async def level(xp: int = Query(ge=0)) -> dict[str, int]:
    """Return level progress for an XP total."""
    progress = progress_in_level(xp)
    return {
        "level": progress.level,
        "current": progress.current,
        "needed": progress.needed,
        "next_level_xp": xp_for_next_level(xp),
    }


@router.get("/bmi")
async def body_mass_index(
    weight_kg: float = Query(gt=0), height_cm: float = Query(gt=0)
) -> dict[str, object]:
    """Return BMI and its category."""
    value = bmi(weight_kg, height_cm)
    return {"bmi": round(value, 1), "category": classify_bmi(value)}
