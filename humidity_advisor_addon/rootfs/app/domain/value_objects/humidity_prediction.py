"""Humidity prediction value object.

Immutable result of running the psychrometric engine for one target.
"""

from dataclasses import dataclass
from datetime import datetime

from .outdoor_reading import OutdoorReading
from .recommendation import Recommendation


@dataclass(frozen=True)
class HumidityPrediction:
    """Predicted indoor humidity if outdoor air is let in and brought to the target.

    Attributes:
        outdoor: The outdoor reading the prediction is based on
        indoor_temperature_celsius: Target indoor temperature in °C
        absolute_humidity: Water vapour content of the outdoor air (g/m³)
        predicted_relative_humidity: Indoor relative humidity (0-100)
        recommendation: Classification of the predicted humidity
        timestamp: When the prediction was made
    """

    outdoor: OutdoorReading
    indoor_temperature_celsius: float
    absolute_humidity: float
    predicted_relative_humidity: float
    recommendation: Recommendation
    timestamp: datetime

    def __post_init__(self) -> None:
        """Validate prediction values."""
        if not 0.0 <= self.predicted_relative_humidity <= 100.0:
            raise ValueError(
                f"predicted_relative_humidity must be between 0 and 100, "
                f"got {self.predicted_relative_humidity}"
            )
