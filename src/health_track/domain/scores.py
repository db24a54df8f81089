"""Score and gamification domain models."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


class RiskTier(StrEnum):
    """Discrete cardiometabolic risk tier."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class RiskAssessment:
    """Accumulated risk points and the derived tier."""

    points: int
    tier: RiskTier

    @property
    def score(self) -> int:
        """Reported risk score, ten per point and unclamped."""
        return self.points * 10


@dataclass(frozen=True)
class LevelProgress:
    """Progress through the current level."""

    level: int
    current: int
    needed: int


@dataclass(frozen=True)
class GlucosePrediction:
    """Forecast glucose value for a day ahead."""

    days_ahead: int
    predicted_value: float
    lower: float
    upper: float


@dataclass(frozen=True)
class Trophy:
    """An unlockable achievement."""

    id: str
    name: str
    description: str
    requirement: str


@dataclass(frozen=True)
class GamificationState:
    """Stored gamification counters for a user."""

    xp: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    health_points: int = 100
    trophies: frozenset[str] = field(default_factory=frozenset)
    last_checked: date | None = None
