"""Comfort sweep service.

Evaluates the psychrometric engine for every setting of the target
temperature control in one vectorised pass.
"""

import logging

import numpy as np

from domain.value_objects import (
    ComfortSweep,
    OutdoorReading,
    SweepPoint,
    TargetTemperature,
    TemperatureUnit,
)

from . import psychrometrics
from .recommendation_classifier import categorize
from .unit_conversion import fahrenheit_to_celsius

logger = logging.getLogger(__name__)


def saturation_vapor_pressure_array(temps_c: np.ndarray) -> np.ndarray:
    """Vectorised saturation_vapor_pressure (Pa) for an array of °C values."""
    return psychrometrics.MAGNUS_BASE_PRESSURE_PA * np.exp(
        psychrometrics.MAGNUS_A * temps_c / (temps_c + psychrometrics.MAGNUS_B_CELSIUS)
    )


def predict_indoor_humidity_array(
    outdoor_temp_c: float,
    outdoor_rh: float,
    indoor_temps_c: np.ndarray,
) -> np.ndarray:
    """Vectorised predict_indoor_humidity over many indoor temperatures.

    Args:
        outdoor_temp_c: Outdoor temperature in °C
        outdoor_rh: Outdoor relative humidity (0-100)
        indoor_temps_c: Indoor temperatures in °C

    Returns:
        Predicted indoor relative humidities, clamped to [0, 100]
    """
    abs_humidity = psychrometrics.absolute_humidity(outdoor_temp_c, outdoor_rh)
    indoor_actual = (
        abs_humidity
        * (indoor_temps_c + psychrometrics.KELVIN_OFFSET)
        / psychrometrics.VAPOR_DENSITY_FACTOR
    )
    indoor_rh = 100 * indoor_actual / saturation_vapor_pressure_array(indoor_temps_c)
    return np.clip(
        indoor_rh,
        psychrometrics.MIN_RELATIVE_HUMIDITY,
        psychrometrics.MAX_RELATIVE_HUMIDITY,
    )


class ComfortSweepService:
    """Service answering "at which target does opening the window pay off?"."""

    def sweep(
        self,
        reading: OutdoorReading,
        unit: TemperatureUnit = TemperatureUnit.CELSIUS,
    ) -> ComfortSweep:
        """Predict indoor humidity for every whole-degree target of a control.

        Args:
            reading: Current outdoor conditions
            unit: Control unit, Celsius or Fahrenheit

        Returns:
            ComfortSweep with one point per target, ascending

        Raises:
            InvalidInputError: If unit has no control range
        """
        low, high = TargetTemperature.bounds(unit)
        targets = np.arange(low, high + 1)
        if unit is TemperatureUnit.FAHRENHEIT:
            targets_c = fahrenheit_to_celsius(targets.astype(float))
        else:
            targets_c = targets.astype(float)

        psychrometrics.check_temperature(reading.temperature_celsius)
        psychrometrics.check_relative_humidity(reading.relative_humidity_percent)
        humidities = predict_indoor_humidity_array(
            reading.temperature_celsius,
            reading.relative_humidity_percent,
            targets_c,
        )

        points = [
            SweepPoint(
                target=int(target),
                predicted_relative_humidity=float(rh),
                category=categorize(float(rh)),
            )
            for target, rh in zip(targets, humidities)
        ]
        sweep = ComfortSweep.from_sequence(reading, unit, points)

        logger.debug(
            "Sweep %s-%s%s for %.1f°C/%.0f%%: optimal targets %s",
            low,
            high,
            unit.symbol,
            reading.temperature_celsius,
            reading.relative_humidity_percent,
            sweep.optimal_targets,
        )
        return sweep
