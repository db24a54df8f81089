"""Pydantic request models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field

from health_track.calculators.classifier import parse_glucose_context
from health_track.domain.metrics import MetricKind, MetricReading, Provenance
from health_track.domain.nutrition import DailyTargets, FoodItem, MealSlot
from health_track.domain.profile import (
    Sex,
    UserProfile,
    parse_conditions,
    parse_goals,
    parse_restrictions,
)


class ProfileIn(BaseModel):
    """Onboarding profile payload."""

    age: int = Field(gt=0)
    sex: Sex
    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    conditions: list[str] = Field(default_factory=list)
    dietary_restrictions: list[str] = Field(default_factory=list)
    goals: list[str] = Field(default_factory=list)

    def to_domain(self) -> UserProfile:
        """Build the domain profile, mapping free-form tags onto enums."""
        return UserProfile(
            age=self.age,
            sex=self.sex,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            conditions=parse_conditions(self.conditions),
            dietary_restrictions=parse_restrictions(self.dietary_restrictions),
            goals=parse_goals(self.goals),
        )


class TargetsIn(BaseModel):
    """Daily targets payload."""

    calories: int = Field(gt=0)
    carbs_g: int = Field(ge=0)
    protein_g: int = Field(ge=0)
    fat_g: int = Field(ge=0)

    def to_domain(self) -> DailyTargets:
        return DailyTargets(
            calories=self.calories,
            carbs_g=self.carbs_g,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
        )


class FoodIn(BaseModel):
    """A logged food with its macros."""

    name: str
    calories: float = Field(ge=0)
    carbs_g: float = Field(default=0, ge=0)
    protein_g: float = Field(default=0, ge=0)
    fat_g: float = Field(default=0, ge=0)
    serving_size: float = 100
    serving_unit: str = "g"

    def to_domain(self) -> FoodItem:
        return FoodItem(**self.model_dump())


class ClassifyRequest(BaseModel):
    """A value to classify; blood pressure takes ``[systolic, diastolic]``."""

    kind: MetricKind
    value: float | tuple[float, float]
    context: str | None = None


class HealthScoreRequest(BaseModel):
    """Inputs of the composite health score."""

    glucose_series: list[float] = Field(default_factory=list)
    meal_adherence: float = 0
    activity_level: float = 0
    sleep_quality: float = 0


class RiskScoreRequest(BaseModel):
    """Averages feeding the risk assessment."""

    avg_glucose: float = 0
    avg_systolic: float | None = None
    avg_diastolic: float | None = None
    avg_ldl: float | None = None
    bmi: float

    def blood_pressure(self) -> tuple[float, float] | None:
        """Return the averaged pair when both sides are present."""
        if self.avg_systolic is None or self.avg_diastolic is None:
            return None
        return self.avg_systolic, self.avg_diastolic


class MealScoreRequest(BaseModel):
    """Foods of one meal scored against daily targets."""

    foods: list[FoodIn] = Field(min_length=1)
    targets: TargetsIn


class ReadingIn(BaseModel):
    """A health reading to append."""

    kind: MetricKind
    value: float
    recorded_at: datetime | None = None
    provenance: Provenance = Provenance.MANUAL
    context: str | None = None
    unit: str | None = None

    def to_domain(self, now: datetime) -> MetricReading:
        return MetricReading(
            kind=self.kind,
            value=self.value,
            recorded_at=self.recorded_at or now,
            provenance=self.provenance,
            context=(
                parse_glucose_context(self.context)
                if self.kind is MetricKind.GLUCOSE
                else None
            ),
            unit=self.unit,
        )


class MealIn(BaseModel):
    """A meal to log."""

    foods: list[FoodIn] = Field(min_length=1)
    logged_at: datetime | None = None
    slot: MealSlot | None = None


class PlanAdjustmentIn(BaseModel):
    """A calorie change applied to the current plan."""

    reason: str
    calorie_change: int
