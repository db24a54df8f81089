"""Health metric readings and their statuses."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class MetricKind(StrEnum):
    """Kinds of readings stored, plus the derived kinds that can be classified."""

    GLUCOSE = "glucose"
    SYSTOLIC = "systolic"
    DIASTOLIC = "diastolic"
    TOTAL_CHOLESTEROL = "total_cholesterol"
    LDL = "ldl"
    HDL = "hdl"
    TRIGLYCERIDES = "triglycerides"
    WEIGHT = "weight"
    STEPS = "steps"
    SLEEP = "sleep"
    HEART_RATE = "heart_rate"
    BLOOD_PRESSURE = "blood_pressure"
    BMI = "bmi"


class GlucoseContext(StrEnum):
    """When a glucose reading was taken relative to meals."""

    FASTING = "fasting"
    BEFORE_MEAL = "before_meal"
    AFTER_MEAL = "after_meal"
    BEDTIME = "bedtime"
    RANDOM = "random"


class Provenance(StrEnum):
    """Where a reading came from."""

    DEVICE = "device"
    MANUAL = "manual"


DEFAULT_UNITS = {
    MetricKind.GLUCOSE: "mg/dL",
    MetricKind.SYSTOLIC: "mmHg",
    MetricKind.DIASTOLIC: "mmHg",
    MetricKind.TOTAL_CHOLESTEROL: "mg/dL",
    MetricKind.LDL: "mg/dL",
    MetricKind.HDL: "mg/dL",
    MetricKind.TRIGLYCERIDES: "mg/dL",
    MetricKind.WEIGHT: "kg",
    MetricKind.STEPS: "count",
    MetricKind.SLEEP: "h",
    MetricKind.HEART_RATE: "bpm",
}


@dataclass(frozen=True)
class MetricReading:
    """A single append-only health reading."""

    kind: MetricKind
    value: float
    recorded_at: datetime
    provenance: Provenance = Provenance.MANUAL
    context: GlucoseContext | None = None
    unit: str | None = None

    @property
    def resolved_unit(self) -> str:
        """Return the explicit unit or the default for the kind."""
        return self.unit or DEFAULT_UNITS.get(self.kind, "")


class GlucoseStatus(StrEnum):
    """Blood glucose status."""

    LOW = "Low"
    NORMAL = "Normal"
    PREDIABETIC = "Prediabetic"
    HIGH = "High"


class BloodPressureStatus(StrEnum):
    """Blood pressure category."""

    LOW = "Low"
    NORMAL = "Normal"
    ELEVATED = "Elevated"
    STAGE_1 = "Stage 1 Hypertension"
    STAGE_2 = "Stage 2 Hypertension"
    CRISIS = "Hypertensive Crisis"


class CholesterolStatus(StrEnum):
    """Status shared by total cholesterol, LDL and triglycerides."""

    OPTIMAL = "Optimal"
    DESIRABLE = "Desirable"
    NEAR_OPTIMAL = "Near Optimal"
    NORMAL = "Normal"
    BORDERLINE_HIGH = "Borderline High"
    HIGH = "High"
    VERY_HIGH = "Very High"


class HDLStatus(StrEnum):
    """HDL cholesterol status."""

    POOR = "Poor"
    BETTER = "Better"
    BEST = "Best"


class SleepStatus(StrEnum):
    """Sleep duration status."""

    INSUFFICIENT = "Insufficient"
    SHORT = "Short"
    OPTIMAL = "Optimal"
    LONG = "Long"


class StepsStatus(StrEnum):
    """Daily step count status."""

    BELOW_TARGET = "Below Target"
    ACTIVE = "Active"
    GOAL_MET = "Goal Met"


class BMICategory(StrEnum):
    """WHO adult BMI categories."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


Status = (
    GlucoseStatus
    | BloodPressureStatus
    | CholesterolStatus
    | HDLStatus
    | SleepStatus
    | StepsStatus
    | BMICategory
)
