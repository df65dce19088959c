"""Outdoor reading value object.

The uniform contract every weather provider produces.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from domain.exceptions import InvalidInputError


@dataclass(frozen=True)
class OutdoorReading:
    """Snapshot of outdoor conditions at a location.

    A new reading replaces the previous one wholesale; readings are never
    merged.

    Attributes:
        temperature_celsius: Outdoor air temperature in °C
        relative_humidity_percent: Outdoor relative humidity (0-100)
        location_label: Human readable place name, e.g. "Boston, US"
        conditions: Provider description of the weather (optional)
        observed_at: When the provider measured the conditions (optional)
    """

    temperature_celsius: float
    relative_humidity_percent: float
    location_label: str = ""
    conditions: str | None = None
    observed_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate reading values."""
        if not math.isfinite(self.temperature_celsius):
            raise InvalidInputError(
                f"temperature_celsius must be finite, got {self.temperature_celsius}"
            )
        if not math.isfinite(self.relative_humidity_percent):
            raise InvalidInputError(
                f"relative_humidity_percent must be finite, "
                f"got {self.relative_humidity_percent}"
            )
        if not 0 <= self.relative_humidity_percent <= 100:
            raise InvalidInputError(
                f"relative_humidity_percent must be between 0 and 100, "
                f"got {self.relative_humidity_percent}"
            )
