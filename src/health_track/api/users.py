"""Per-user endpoints backed by the application services."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Query, Request

from health_track.api.errors import domain_errors
from health_track.api.models import MealIn, PlanAdjustmentIn, ProfileIn, ReadingIn
from health_track.calculators.levels import progress_in_level
from health_track.calculators.targets import compute_targets

if TYPE_CHECKING:
    from health_track.containers import AppContainer
    from health_track.domain.profile import UserProfile

router = APIRouter(prefix="/users/{user_id}", tags=["users"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _profile_payload(profile: UserProfile) -> dict[str, object]:
    return {
        "age": profile.age,
        "sex": profile.sex,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "conditions": sorted(profile.conditions),
        "dietary_restrictions": sorted(profile.dietary_restrictions),
        "goals": sorted(profile.goals),
    }


@router.put("/profile")
async def save_profile(
    user_id: UUID, payload: ProfileIn, request: Request
) -> dict[str, object]:
    """Create or replace the user's profile."""
    profile = payload.to_domain()
    with domain_errors():
        _container(request).profile_service.save_profile(user_id, profile)
    return {"profile": _profile_payload(profile), "targets": compute_targets(profile)}


@router.get("/profile")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the stored profile."""
    with domain_errors():
        profile = _container(request).profile_service.get_profile(user_id)
    return {"profile": _profile_payload(profile)}


@router.get("/plan")
async def current_plan(user_id: UUID, request: Request) -> dict[str, object]:
    """Return this month's plan, generating it on first access."""
    with domain_errors():
        plan = _container(request).plan_service.get_current_plan(user_id)
    return {"plan": plan}


@router.post("/plan")
async def regenerate_plan(user_id: UUID, request: Request) -> dict[str, object]:
    """Regenerate this month's plan from the stored profile."""
    with domain_errors():
        plan = _container(request).plan_service.generate_plan(user_id)
    return {"plan": plan}


@router.post("/plan/adjust")
async def adjust_plan(
    user_id: UUID, payload: PlanAdjustmentIn, request: Request
) -> dict[str, object]:
    """Shift the current plan's calorie target."""
    with domain_errors():
        plan = _container(request).plan_service.adjust_plan(
            user_id, payload.reason, payload.calorie_change
        )
    return {"plan": plan}


@router.post("/readings")
async def log_reading(
    user_id: UUID, payload: ReadingIn, request: Request
) -> dict[str, object]:
    """Append a health reading and return its status."""
    reading = payload.to_domain(datetime.now(tz=UTC))
    with domain_errors():
        status = _container(request).health_service.log_reading(user_id, reading)
    return {"kind": reading.kind, "unit": reading.resolved_unit, "status": status}


@router.get("/readings/latest")
async def latest_statuses(user_id: UUID, request: Request) -> dict[str, object]:
    """Return statuses of the latest readings and the snapshot score."""
    health_service = _container(request).health_service
    return {
        "statuses": health_service.latest_statuses(user_id),
        "snapshot_score": health_service.snapshot(user_id),
    }


@router.get("/health-score")
async def health_report(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the windowed health score and its inputs."""
    with domain_errors():
        report = _container(request).health_service.health_report(user_id)
    return {"report": report}


@router.get("/risk")
async def risk(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the risk assessment."""
    with domain_errors():
        assessment = _container(request).health_service.risk(user_id)
    return {
        "points": assessment.points,
        "score": assessment.score,
        "tier": assessment.tier,
    }


@router.get("/forecast")
async def forecast(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the glucose forecast."""
    return {"predictions": _container(request).health_service.forecast(user_id)}


@router.get("/glucose-trend")
async def glucose_trend(
    user_id: UUID, request: Request, days: int = Query(default=7, gt=0)
) -> dict[str, float]:
    """Return the percent change of recent glucose against the longer window."""
    return {
        "change_pct": _container(request).health_service.glucose_trend(
            user_id, days=days
        )
    }


@router.post("/meals")
async def log_meal(
    user_id: UUID, payload: MealIn, request: Request
) -> dict[str, object]:
    """Log a meal and return its score and the resulting progress."""
    with domain_errors():
        result = _container(request).meal_service.log_meal(
            user_id,
            [food.to_domain() for food in payload.foods],
            logged_at=payload.logged_at,
            slot=payload.slot,
        )
    return {
        "meal": result.meal,
        "progress": result.progress,
        "unlocked": result.unlocked,
    }


@router.get("/progress")
async def progress(user_id: UUID, request: Request) -> dict[str, object]:
    """Return gamification counters and level progress."""
    state = _container(request).progress_service.get_state(user_id)
    return {"state": state, "level": progress_in_level(state.xp)}


@router.post("/daily-check")
async def daily_check(
    user_id: UUID, request: Request, today: date | None = None
) -> dict[str, object]:
    """Run the daily streak check."""
    state = _container(request).meal_service.daily_check(user_id, today)
    return {"state": state, "level": progress_in_level(state.xp)}
