"""Value objects for the humidity domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .comfort_sweep import COMFORT_CENTER_PERCENT, ComfortSweep, SweepPoint
from .humidity_prediction import HumidityPrediction
from .location_query import LocationQuery, ResolvedLocation
from .outdoor_reading import OutdoorReading
from .recommendation import (
    Recommendation,
    RecommendationCategory,
    RecommendationSeverity,
)
from .temperature import (
    TARGET_TEMPERATURE_BOUNDS,
    TargetTemperature,
    Temperature,
    TemperatureUnit,
)

__all__ = [
    "COMFORT_CENTER_PERCENT",
    "ComfortSweep",
    "HumidityPrediction",
    "LocationQuery",
    "OutdoorReading",
    "Recommendation",
    "RecommendationCategory",
    "RecommendationSeverity",
    "ResolvedLocation",
    "SweepPoint",
    "TARGET_TEMPERATURE_BOUNDS",
    "TargetTemperature",
    "Temperature",
    "TemperatureUnit",
]
