"""Health metric logging and scoring service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from health_track.calculators.classifier import (
    STEPS_GOAL,
    bmi,
    classify,
    classify_blood_pressure,
)
from health_track.calculators.forecast import GlucoseForecaster
from health_track.calculators.levels import XP_PER_HEALTH_LOG
from health_track.calculators.scores import (
    glucose_trend,
    health_score,
    risk_score,
    snapshot_score,
)
from health_track.calculators.targets import meal_adherence
from health_track.domain.metrics import (
    BloodPressureStatus,
    MetricKind,
    MetricReading,
    SleepStatus,
    Status,
)
from health_track.domain.scores import GlucosePrediction, RiskAssessment
from health_track.services.meals import MealService
from health_track.services.plans import PlanService
from health_track.services.profiles import ProfileService
from health_track.services.progress import ProgressService

logger = logging.getLogger(__name__)

GLUCOSE_SPIKE_MG_DL = 180

_SCALAR_KINDS = frozenset(
    {
        MetricKind.GLUCOSE,
        MetricKind.TOTAL_CHOLESTEROL,
        MetricKind.LDL,
        MetricKind.HDL,
        MetricKind.TRIGLYCERIDES,
        MetricKind.SLEEP,
        MetricKind.STEPS,
    }
)


class MetricRepository(Protocol):
    """Persistence interface for health readings."""

    def add_reading(self, user_id: UUID, reading: MetricReading) -> None:
        """Append a reading."""

    def list_readings(
        self, user_id: UUID, kind: MetricKind, start: datetime, end: datetime
    ) -> list[MetricReading]:
        """Return readings of a kind in ``[start, end)``, oldest first."""

    def latest_reading(self, user_id: UUID, kind: MetricKind) -> MetricReading | None:
        """Return the most recent reading of a kind."""


@dataclass(frozen=True)
class HealthReport:
    """Health score with the inputs it was computed from."""

    score: int
    glucose_readings: int
    meal_adherence: float
    activity_level: float
    sleep_quality: float


def reading_status(reading: MetricReading) -> Status | None:
    """Classify a single reading; kinds without a lone-value rule give None."""
    if reading.kind not in _SCALAR_KINDS:
        return None
    return classify(reading.kind, reading.value, reading.context)


def _mean(values: list[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


@dataclass
class HealthService:
    """Stores readings and turns recent windows into scores."""

    repository: MetricRepository
    profile_service: ProfileService
    plan_service: PlanService
    meal_service: MealService
    progress_service: ProgressService
    forecaster: GlucoseForecaster
    window_days: int = 30
    step_goal: int = STEPS_GOAL

    def log_reading(self, user_id: UUID, reading: MetricReading) -> Status | None:
        """Append a reading, award XP for it and return its status."""
        self.repository.add_reading(user_id, reading)
        self.progress_service.award(user_id, XP_PER_HEALTH_LOG)
        if reading.kind is MetricKind.GLUCOSE and reading.value > GLUCOSE_SPIKE_MG_DL:
            logger.warning(
                "Glucose spike recorded",
                extra={"user_id": str(user_id), "value": reading.value},
            )
        return reading_status(reading)

    def latest_statuses(self, user_id: UUID) -> dict[str, Status]:
        """Return the status of the latest reading of each classifiable kind."""
        statuses: dict[str, Status] = {}
        for kind in sorted(_SCALAR_KINDS):
            reading = self.repository.latest_reading(user_id, kind)
            if reading is not None:
                statuses[kind.value] = classify(kind, reading.value, reading.context)
        blood_pressure = self._latest_blood_pressure(user_id)
        if blood_pressure is not None:
            statuses[MetricKind.BLOOD_PRESSURE.value] = blood_pressure
        return statuses

    def snapshot(self, user_id: UUID) -> int:
        """Return the dashboard score from the latest readings."""
        statuses = self.latest_statuses(user_id)
        steps = self.repository.latest_reading(user_id, MetricKind.STEPS)
        return snapshot_score(
            glucose=statuses.get(MetricKind.GLUCOSE.value),
            blood_pressure=statuses.get(MetricKind.BLOOD_PRESSURE.value),
            cholesterol=statuses.get(MetricKind.TOTAL_CHOLESTEROL.value),
            steps=steps.value if steps else None,
            sleep=statuses.get(MetricKind.SLEEP.value),
        )

    def health_report(self, user_id: UUID, now: datetime | None = None) -> HealthReport:
        """Compute the health score over the configured window."""
        end = now or datetime.now(tz=UTC)
        start = end - timedelta(days=self.window_days)
        glucose = self._values(user_id, MetricKind.GLUCOSE, start, end)
        adherence = self._meal_adherence(user_id, end)
        activity = self._activity_level(user_id, start, end)
        sleep = self._sleep_quality(user_id, start, end)
        return HealthReport(
            score=health_score(glucose, adherence, activity, sleep),
            glucose_readings=len(glucose),
            meal_adherence=adherence,
            activity_level=activity,
            sleep_quality=sleep,
        )

    def risk(self, user_id: UUID, now: datetime | None = None) -> RiskAssessment:
        """Compute the risk assessment from window averages and profile BMI."""
        end = now or datetime.now(tz=UTC)
        start = end - timedelta(days=self.window_days)
        profile = self.profile_service.get_profile(user_id)
        avg_glucose = _mean(self._values(user_id, MetricKind.GLUCOSE, start, end))
        systolic = _mean(self._values(user_id, MetricKind.SYSTOLIC, start, end))
        diastolic = _mean(self._values(user_id, MetricKind.DIASTOLIC, start, end))
        avg_bp = (
            (systolic, diastolic)
            if systolic is not None and diastolic is not None
            else None
        )
        return risk_score(
            avg_glucose=avg_glucose or 0.0,
            avg_bp=avg_bp,
            avg_ldl=_mean(self._values(user_id, MetricKind.LDL, start, end)),
            bmi=bmi(profile.weight_kg, profile.height_cm),
        )

    def forecast(
        self, user_id: UUID, now: datetime | None = None
    ) -> list[GlucosePrediction]:
        """Forecast glucose from the window's readings."""
        end = now or datetime.now(tz=UTC)
        start = end - timedelta(days=self.window_days)
        return self.forecaster.predict(
            self._values(user_id, MetricKind.GLUCOSE, start, end)
        )

    def glucose_trend(
        self, user_id: UUID, days: int = 7, now: datetime | None = None
    ) -> float:
        """Return percent change of the last ``days`` against the last ``2*days``."""
        end = now or datetime.now(tz=UTC)
        recent = _mean(
            self._values(user_id, MetricKind.GLUCOSE, end - timedelta(days=days), end)
        )
        previous = _mean(
            self._values(
                user_id, MetricKind.GLUCOSE, end - timedelta(days=days * 2), end
            )
        )
        if recent is None or previous is None:
            return 0.0
        return glucose_trend(recent, previous)

    def _values(
        self, user_id: UUID, kind: MetricKind, start: datetime, end: datetime
    ) -> list[float]:
        return [
            reading.value
            for reading in self.repository.list_readings(user_id, kind, start, end)
        ]

    def _latest_blood_pressure(self, user_id: UUID) -> BloodPressureStatus | None:
        systolic = self.repository.latest_reading(user_id, MetricKind.SYSTOLIC)
        diastolic = self.repository.latest_reading(user_id, MetricKind.DIASTOLIC)
        if systolic is None or diastolic is None:
            return None
        return classify_blood_pressure(systolic.value, diastolic.value)

    def _meal_adherence(self, user_id: UUID, end: datetime) -> float:
        plan = self.plan_service.get_current_plan(user_id, end)
        first_day = (end - timedelta(days=self.window_days - 1)).date()
        daily = self.meal_service.daily_calories(user_id, first_day, self.window_days)
        return meal_adherence(daily, plan.targets.calories)

    def _activity_level(self, user_id: UUID, start: datetime, end: datetime) -> float:
        average_steps = _mean(self._values(user_id, MetricKind.STEPS, start, end))
        if average_steps is None or self.step_goal <= 0:
            return 0.0
        return min(average_steps / self.step_goal, 1.0)

    def _sleep_quality(self, user_id: UUID, start: datetime, end: datetime) -> float:
        nights = self._values(user_id, MetricKind.SLEEP, start, end)
        if not nights:
            return 0.0
        optimal = sum(
            1
            for hours in nights
            if classify(MetricKind.SLEEP, hours) is SleepStatus.OPTIMAL
        )
        return optimal / len(nights)
