"""Domain services for humidity prediction.

Services contain pure business logic and operate on value objects.
"""

from .comfort_sweep_service import ComfortSweepService
from .humidity_advisory_service import HumidityAdvisoryService
from .psychrometrics import (
    absolute_humidity,
    predict_indoor_humidity,
    saturation_vapor_pressure,
)
from .recommendation_classifier import categorize, classify

__all__ = [
    "ComfortSweepService",
    "HumidityAdvisoryService",
    "absolute_humidity",
    "categorize",
    "classify",
    "predict_indoor_humidity",
    "saturation_vapor_pressure",
]
