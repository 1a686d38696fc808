from __future__ import annotations

from enum import StrEnum

from fireresistance.errors import InvalidUnitError

MM_PER_INCH = 25.4


class TemperatureUnit(StrEnum):
    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"


def resolve_unit(unit: str | TemperatureUnit) -> TemperatureUnit:
    """Validate a temperature unit selector."""
    try:
        return TemperatureUnit(unit)
    except ValueError:
        valid = ", ".join(u.value for u in TemperatureUnit)
        raise InvalidUnitError(
            f"temperature unit must be one of {valid}. Got: {unit!r}"
        ) from None


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (float(fahrenheit) - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return float(celsius) * 9.0 / 5.0 + 32.0


def to_fahrenheit(temperature: float, unit: TemperatureUnit) -> float:
    if unit == TemperatureUnit.CELSIUS:
        return celsius_to_fahrenheit(temperature)
    return float(temperature)


def from_fahrenheit(temperature_f: float, unit: TemperatureUnit) -> float:
    if unit == TemperatureUnit.CELSIUS:
        return fahrenheit_to_celsius(temperature_f)
    return float(temperature_f)


def mm_to_in(millimeters: float) -> float:
    """Convert millimeters to inches."""
    return millimeters / MM_PER_INCH
