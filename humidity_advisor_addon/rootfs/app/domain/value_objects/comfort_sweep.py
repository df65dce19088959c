"""Comfort sweep value objects.

Predicted indoor humidity across every setting of the target control.
"""

from dataclasses import dataclass
from typing import Sequence

from .outdoor_reading import OutdoorReading
from .recommendation import RecommendationCategory
from .temperature import TemperatureUnit

# Centre of the 30-50 % comfort band.
COMFORT_CENTER_PERCENT = 40.0


@dataclass(frozen=True)
class SweepPoint:
    """Prediction for a single target temperature.

    Attributes:
        target: Whole-degree target in the sweep's unit
        predicted_relative_humidity: Indoor relative humidity (0-100)
        category: Comfort category of the prediction
    """

    target: int
    predicted_relative_humidity: float
    category: RecommendationCategory


@dataclass(frozen=True)
class ComfortSweep:
    """Predictions for every target in a control range.

    Attributes:
        outdoor: Outdoor reading the sweep was computed from
        unit: Unit of the targets
        points: One point per target, in ascending target order
    """

    outdoor: OutdoorReading
    unit: TemperatureUnit
    points: tuple[SweepPoint, ...]

    def __post_init__(self) -> None:
        """Validate sweep."""
        if not self.points:
            raise ValueError("Comfort sweep must contain at least one point")

    @classmethod
    def from_sequence(
        cls,
        outdoor: OutdoorReading,
        unit: TemperatureUnit,
        points: Sequence[SweepPoint],
    ) -> "ComfortSweep":
        """Create a ComfortSweep from a sequence of points."""
        return cls(outdoor=outdoor, unit=unit, points=tuple(points))

    @property
    def optimal_targets(self) -> list[int]:
        """Targets at which the indoor humidity lands in the comfort band."""
        return [
            p.target for p in self.points
            if p.category is RecommendationCategory.OPTIMAL
        ]

    @property
    def best_point(self) -> SweepPoint:
        """Point whose humidity is closest to the centre of the comfort band.

        Ties go to the lower target.
        """
        return min(
            self.points,
            key=lambda p: abs(p.predicted_relative_humidity - COMFORT_CENTER_PERCENT),
        )
