"""Psychrometric engine.

Converts an outdoor (temperature, relative humidity) pair into absolute
humidity, then predicts the relative humidity the same air mass shows
once brought to a different indoor temperature.

Saturation vapor pressure uses the August-Roche-Magnus approximation;
water vapour is treated as an ideal gas.
"""

import logging
import math

from domain.exceptions import InvalidInputError, TemperatureDomainError

logger = logging.getLogger(__name__)

# Magnus coefficients (Pa, dimensionless, °C)
MAGNUS_BASE_PRESSURE_PA = 610.78
MAGNUS_A = 17.27
MAGNUS_B_CELSIUS = 237.3

# Converts vapour pressure (Pa) over temperature (K) into density (g/m³):
# molar mass of water / universal gas constant, in g·K/J.
VAPOR_DENSITY_FACTOR = 2.16679

KELVIN_OFFSET = 273.15

# Saturation limit for relative humidity.
MIN_RELATIVE_HUMIDITY = 0.0
MAX_RELATIVE_HUMIDITY = 100.0


def check_temperature(temp_c: float) -> None:
    """Raise if temp_c is not finite or at or below the Magnus singularity."""
    if not math.isfinite(temp_c):
        raise InvalidInputError(f"temperature must be finite, got {temp_c}")
    if temp_c <= -MAGNUS_B_CELSIUS:
        raise TemperatureDomainError(
            f"temperature must be above {-MAGNUS_B_CELSIUS} °C, got {temp_c}"
        )


def check_relative_humidity(rh: float) -> None:
    """Raise if rh is not finite or outside [0, 100]."""
    if not math.isfinite(rh):
        raise InvalidInputError(f"relative humidity must be finite, got {rh}")
    if not MIN_RELATIVE_HUMIDITY <= rh <= MAX_RELATIVE_HUMIDITY:
        raise InvalidInputError(
            f"relative humidity must be between 0 and 100, got {rh}"
        )


def saturation_vapor_pressure(temp_c: float) -> float:
    """Saturation vapor pressure of water over a flat surface.

    Args:
        temp_c: Air temperature in °C, strictly above -237.3

    Returns:
        Saturation vapor pressure in Pa

    Raises:
        TemperatureDomainError: If temp_c <= -237.3
        InvalidInputError: If temp_c is not finite
    """
    check_temperature(temp_c)
    return MAGNUS_BASE_PRESSURE_PA * math.exp(
        MAGNUS_A * temp_c / (temp_c + MAGNUS_B_CELSIUS)
    )


def absolute_humidity(temp_c: float, rh: float) -> float:
    """Mass of water vapour per volume of air.

    The relative humidity is not clamped: values outside 0-100 scale the
    result linearly.

    Args:
        temp_c: Air temperature in °C
        rh: Relative humidity in percent

    Returns:
        Absolute humidity in g/m³
    """
    vapor_pressure = saturation_vapor_pressure(temp_c) * (rh / 100)
    return vapor_pressure * VAPOR_DENSITY_FACTOR / (temp_c + KELVIN_OFFSET)


def vapor_pressure_from_absolute_humidity(abs_humidity: float, temp_c: float) -> float:
    """Invert absolute_humidity: vapour pressure (Pa) of a given density at temp_c."""
    check_temperature(temp_c)
    return abs_humidity * (temp_c + KELVIN_OFFSET) / VAPOR_DENSITY_FACTOR


def clamp_relative_humidity(rh: float) -> float:
    """Clamp a relative humidity into [0, 100]."""
    return min(MAX_RELATIVE_HUMIDITY, max(MIN_RELATIVE_HUMIDITY, rh))


def predict_indoor_humidity(
    outdoor_temp_c: float,
    outdoor_rh: float,
    indoor_temp_c: float,
) -> float:
    """Predict indoor relative humidity after outdoor air is warmed or cooled.

    The moisture content of the air is held constant:
    1. Absolute humidity of the outdoor air
    2. Saturation vapor pressure at the indoor temperature
    3. Vapour pressure the same absolute humidity exerts indoors
    4. Ratio of the two, as a percentage
    5. Clamped to [0, 100]; above saturation the excess would condense

    Args:
        outdoor_temp_c: Outdoor temperature in °C
        outdoor_rh: Outdoor relative humidity (0-100)
        indoor_temp_c: Indoor target temperature in °C

    Returns:
        Predicted indoor relative humidity in percent, within [0, 100]

    Raises:
        InvalidInputError: If outdoor_rh is outside [0, 100] or not finite
        TemperatureDomainError: If a temperature is <= -237.3 °C
    """
    check_relative_humidity(outdoor_rh)

    abs_humidity = absolute_humidity(outdoor_temp_c, outdoor_rh)
    indoor_saturation = saturation_vapor_pressure(indoor_temp_c)
    indoor_actual = vapor_pressure_from_absolute_humidity(abs_humidity, indoor_temp_c)
    indoor_rh = 100 * indoor_actual / indoor_saturation

    logger.debug(
        "outdoor=%.2f°C/%.1f%% abs=%.3fg/m³ indoor=%.2f°C rh=%.2f%%",
        outdoor_temp_c,
        outdoor_rh,
        abs_humidity,
        indoor_temp_c,
        indoor_rh,
    )
    return clamp_relative_humidity(indoor_rh)
