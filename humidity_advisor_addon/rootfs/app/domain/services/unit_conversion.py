"""Temperature unit conversion.

Closed-form conversions between Celsius, Fahrenheit and Kelvin. All
functions are total over the reals and never raise.
"""

import math

from domain.value_objects import TargetTemperature, Temperature, TemperatureUnit

KELVIN_OFFSET = 273.15


def fahrenheit_to_celsius(f: float) -> float:
    return (f - 32) * 5 / 9


def celsius_to_fahrenheit(c: float) -> float:
    return c * 9 / 5 + 32


def kelvin_to_celsius(k: float) -> float:
    return k - KELVIN_OFFSET


def kelvin_to_fahrenheit(k: float) -> float:
    return (k - KELVIN_OFFSET) * 9 / 5 + 32


def celsius_to_kelvin(c: float) -> float:
    return c + KELVIN_OFFSET


def fahrenheit_to_kelvin(f: float) -> float:
    return fahrenheit_to_celsius(f) + KELVIN_OFFSET


def convert(value: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> float:
    """Convert a scalar temperature between units.

    Conversions go through Celsius, except the direct Kelvin to Fahrenheit
    formula, so that a conversion and its inverse cancel exactly up to
    floating-point rounding.

    Args:
        value: Temperature in from_unit
        from_unit: Source scale
        to_unit: Destination scale

    Returns:
        Temperature in to_unit
    """
    if from_unit is to_unit:
        return value
    if from_unit is TemperatureUnit.KELVIN and to_unit is TemperatureUnit.FAHRENHEIT:
        return kelvin_to_fahrenheit(value)

    if from_unit is TemperatureUnit.CELSIUS:
        celsius = value
    elif from_unit is TemperatureUnit.FAHRENHEIT:
        celsius = fahrenheit_to_celsius(value)
    else:
        celsius = kelvin_to_celsius(value)

    if to_unit is TemperatureUnit.CELSIUS:
        return celsius
    if to_unit is TemperatureUnit.FAHRENHEIT:
        return celsius_to_fahrenheit(celsius)
    return celsius_to_kelvin(celsius)


def to_celsius(temperature: Temperature | TargetTemperature) -> float:
    """Return a temperature or target expressed in °C."""
    return convert(float(temperature.value), temperature.unit, TemperatureUnit.CELSIUS)


def convert_temperature(temperature: Temperature, unit: TemperatureUnit) -> Temperature:
    """Return the same temperature expressed in another unit."""
    return Temperature(convert(temperature.value, temperature.unit, unit), unit)


def convert_target(target: TargetTemperature, unit: TemperatureUnit) -> TargetTemperature:
    """Move a target to the control of another unit.

    The converted value is rounded half up to a whole degree and clamped
    into the destination control bounds, e.g. 80 °F becomes 27 °C and
    16 °C becomes 61 °F.

    Args:
        target: Current target
        unit: Celsius or Fahrenheit

    Returns:
        Target on the destination control
    """
    if target.unit is unit:
        return target
    low, high = TargetTemperature.bounds(unit)
    converted = convert(float(target.value), target.unit, unit)
    rounded = math.floor(converted + 0.5)
    return TargetTemperature(min(high, max(low, rounded)), unit)
