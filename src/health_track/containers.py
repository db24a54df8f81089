"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from health_track.adapters.supabase_gamification_repository import (
    SupabaseGamificationRepository,
)
from health_track.adapters.supabase_meal_repository import SupabaseMealRepository
from health_track.adapters.supabase_metric_repository import SupabaseMetricRepository
from health_track.adapters.supabase_plan_repository import SupabasePlanRepository
from health_track.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from health_track.calculators.forecast import MovingAverageForecaster
from health_track.config import Settings
from health_track.services.health import HealthService
from health_track.services.meals import MealService
from health_track.services.plans import PlanService
from health_track.services.profiles import ProfileService
from health_track.services.progress import ProgressService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    plan_service: PlanService
    progress_service: ProgressService
    meal_service: MealService
    health_service: HealthService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    plan_service = PlanService(
        profile_service=profile_service,
        repository=SupabasePlanRepository(supabase_client),
    )
    progress_service = ProgressService(SupabaseGamificationRepository(supabase_client))
    meal_service = MealService(
        repository=SupabaseMealRepository(supabase_client),
        plan_service=plan_service,
        progress_service=progress_service,
        meal_score_base=resolved_settings.meal_score_base,
    )
    health_service = HealthService(
        repository=SupabaseMetricRepository(supabase_client),
        profile_service=profile_service,
        plan_service=plan_service,
        meal_service=meal_service,
        progress_service=progress_service,
        forecaster=MovingAverageForecaster(
            window=resolved_settings.forecast_window,
            horizon_days=resolved_settings.forecast_horizon_days,
        ),
        window_days=resolved_settings.metric_window_days,
        step_goal=resolved_settings.step_goal,
    )
    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        plan_service=plan_service,
        progress_service=progress_service,
        meal_service=meal_service,
        health_service=health_service,
    )
