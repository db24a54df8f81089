"""Glucose forecasting capability."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from health_track.domain.scores import GlucosePrediction


class GlucoseForecaster(Protocol):
    """Interface for glucose forecasting models."""

    def predict(self, history: Sequence[float]) -> list[GlucosePrediction]:
        """Return predictions for the coming days from oldest-first history."""


@dataclass
class MovingAverageForecaster(GlucoseForecaster):
    """Flat forecast from the mean of the most recent readings."""

    window: int = 7
    horizon_days: int = 7
    floor: float = 70
    ceiling: float = 180
    band: float = 15
    band_floor: float = 60
    band_ceiling: float = 200

    def predict(self, history: Sequence[float]) -> list[GlucosePrediction]:
        """Return one prediction per day ahead, empty for no history."""
        recent = list(history)[-self.window :]
        if not recent:
            return []
        average = sum(recent) / len(recent)
        return [
            GlucosePrediction(
                days_ahead=day,
                predicted_value=max(self.floor, min(self.ceiling, average)),
                lower=max(self.band_floor, average - self.band),
                upper=min(self.band_ceiling, average + self.band),
            )
            for day in range(1, self.horizon_days + 1)
        ]
