"""
quantitas.core.temperature
==========================

Conversions between the four absolute temperature scales (``tempK``,
``tempC``, ``tempF``, ``tempR``) and the four relative degree scales
(``degK``, ``degC``, ``degF``, ``degR``).

Kelvin is the pivot. Absolute scales are affine in kelvin, degree scales are
purely multiplicative. Every product with 9/5 or 5/9 multiplies before it
divides, so exact decimal inputs give exact results (500 tempF -> 260 tempC).
"""

from __future__ import annotations

from decimal import Decimal

from quantitas.exceptions import TemperatureOperationError
from quantitas.units.definitions import DEGREE_SCALES, TEMPERATURE_SCALES

_CELSIUS_OFFSET = Decimal("273.15")
_FAHRENHEIT_OFFSET = Decimal("459.67")

DEGREE_TOKENS = {scale: token for token, scale in DEGREE_SCALES.items()}


def temperature_scale(token: str) -> str:
    """Scale letter of an absolute temperature token, e.g. ``<temp-C>`` -> ``C``."""
    try:
        return TEMPERATURE_SCALES[token]
    except KeyError:
        raise TemperatureOperationError(f"Unknown type for temp conversion: {token}") from None


def degree_scale(token: str) -> str:
    try:
        return DEGREE_SCALES[token]
    except KeyError:
        raise TemperatureOperationError(f"Unknown type for degree conversion: {token}") from None


def to_kelvin(scalar: Decimal, scale: str) -> Decimal:
    """Absolute reading on ``scale`` -> absolute kelvin."""
    if scale == "K":
        return scalar
    if scale == "C":
        return scalar + _CELSIUS_OFFSET
    if scale == "F":
        return (scalar + _FAHRENHEIT_OFFSET) * 5 / 9
    if scale == "R":
        return scalar * 5 / 9
    raise TemperatureOperationError(f"Unknown type for temp conversion from: temp{scale}")


def from_kelvin(kelvin: Decimal, scale: str) -> Decimal:
    """Absolute kelvin -> absolute reading on ``scale``."""
    if scale == "K":
        return kelvin
    if scale == "C":
        return kelvin - _CELSIUS_OFFSET
    if scale == "F":
        return kelvin * 9 / 5 - _FAHRENHEIT_OFFSET
    if scale == "R":
        return kelvin * 9 / 5
    raise TemperatureOperationError(f"Unknown type for temp conversion to: temp{scale}")


def degrees_to_kelvin(scalar: Decimal, scale: str) -> Decimal:
    """Size of a step on ``scale`` in kelvin (no offset)."""
    if scale in ("K", "C"):
        return scalar
    if scale in ("F", "R"):
        return scalar * 5 / 9
    raise TemperatureOperationError(f"Unknown type for degree conversion from: deg{scale}")


def kelvin_to_degrees(kelvin: Decimal, scale: str) -> Decimal:
    if scale in ("K", "C"):
        return kelvin
    if scale in ("F", "R"):
        return kelvin * 9 / 5
    raise TemperatureOperationError(f"Unknown type for degree conversion to: deg{scale}")


def degree_units(units: str) -> str:
    """Degree units matching a temperature's units: ``"tempC"`` -> ``"degC"``."""
    scale = units[-1:]
    if scale and scale in "CKFR":
        return "deg" + scale
    raise TemperatureOperationError(f"Unknown type for temp conversion from: {units}")


__all__ = [
    "DEGREE_TOKENS",
    "degree_scale",
    "degree_units",
    "degrees_to_kelvin",
    "from_kelvin",
    "kelvin_to_degrees",
    "temperature_scale",
    "to_kelvin",
]
