"""Temperature value objects.

Immutable temperature scalars tagged with their unit, and the bounded
target temperature chosen by the user.
"""

import math
from dataclasses import dataclass
from enum import Enum

from domain.exceptions import InvalidInputError


class TemperatureUnit(str, Enum):
    """Supported temperature scales."""

    CELSIUS = "C"
    FAHRENHEIT = "F"
    KELVIN = "K"

    @classmethod
    def parse(cls, raw: "str | TemperatureUnit") -> "TemperatureUnit":
        """Parse a unit from a symbol or name (case-insensitive).

        Args:
            raw: One of "C", "F", "K", "celsius", "fahrenheit", "kelvin"

        Returns:
            The matching TemperatureUnit

        Raises:
            InvalidInputError: If the unit is not recognised
        """
        if isinstance(raw, TemperatureUnit):
            return raw
        normalized = str(raw).strip().lower()
        for unit in cls:
            if normalized in (unit.value.lower(), unit.name.lower()):
                return unit
        raise InvalidInputError(f"Unknown temperature unit: {raw!r}")

    @property
    def symbol(self) -> str:
        """Return the display symbol, e.g. '°C' or 'K'."""
        if self is TemperatureUnit.KELVIN:
            return "K"
        return f"°{self.value}"


@dataclass(frozen=True)
class Temperature:
    """A temperature reading with an explicit unit.

    Attributes:
        value: Numeric temperature
        unit: Scale the value is expressed in
    """

    value: float
    unit: TemperatureUnit = TemperatureUnit.CELSIUS

    def __post_init__(self) -> None:
        """Validate the temperature value."""
        if not isinstance(self.unit, TemperatureUnit):
            raise InvalidInputError(f"unit must be a TemperatureUnit, got {self.unit!r}")
        if not math.isfinite(self.value):
            raise InvalidInputError(f"temperature must be finite, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:g}{self.unit.symbol}"


# Bounds of the target temperature control, per unit (inclusive).
TARGET_TEMPERATURE_BOUNDS: dict[TemperatureUnit, tuple[int, int]] = {
    TemperatureUnit.FAHRENHEIT: (60, 80),
    TemperatureUnit.CELSIUS: (16, 27),
}


@dataclass(frozen=True)
class TargetTemperature:
    """Indoor target temperature picked from a bounded control.

    The control moves in whole degrees: 60-80 °F or 16-27 °C.

    Attributes:
        value: Whole-degree target
        unit: Celsius or Fahrenheit
    """

    value: int
    unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT

    def __post_init__(self) -> None:
        """Validate the target against the control bounds."""
        if self.unit not in TARGET_TEMPERATURE_BOUNDS:
            raise InvalidInputError(
                f"target temperature unit must be C or F, got {self.unit!r}"
            )
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidInputError(
                f"target temperature must be a whole number, got {self.value!r}"
            )
        low, high = TARGET_TEMPERATURE_BOUNDS[self.unit]
        if not low <= self.value <= high:
            raise InvalidInputError(
                f"target temperature must be between {low} and {high} "
                f"{self.unit.symbol}, got {self.value}"
            )

    @classmethod
    def bounds(cls, unit: TemperatureUnit) -> tuple[int, int]:
        """Return the inclusive control bounds for a unit."""
        if unit not in TARGET_TEMPERATURE_BOUNDS:
            raise InvalidInputError(
                f"target temperature unit must be C or F, got {unit!r}"
            )
        return TARGET_TEMPERATURE_BOUNDS[unit]

    def as_temperature(self) -> Temperature:
        """Return the target as a plain Temperature."""
        return Temperature(float(self.value), self.unit)
