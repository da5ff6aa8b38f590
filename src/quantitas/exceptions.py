"""
quantitas.exceptions
====================

Exception hierarchy raised by the quantity engine.

Every error derives from :class:`QuantityError` and also from the builtin
exception Python code would expect for the same condition, so callers that
catch ``ValueError`` or ``TypeError`` keep working.
"""

from __future__ import annotations


class QuantityError(Exception):
    """Base class for all quantitas errors."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
class QuantityParseError(QuantityError, ValueError):
    """A quantity or unit string could not be parsed."""


class EmptyInputError(QuantityParseError):
    """The input string is empty or only whitespace."""


class UnrecognizedQuantityError(QuantityParseError):
    """The input does not match the ``scalar top/bottom`` grammar."""


class UnrecognizedUnitError(QuantityParseError):
    """A unit word does not resolve through the alias tables."""


class InvalidExponentError(QuantityParseError):
    """An exponent in a unit expression is not an integer."""


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------
class IncompatibleUnitsError(QuantityError, TypeError):
    """The operands carry different physical dimensions."""


class TemperatureOperationError(QuantityError, ValueError):
    """An operation that absolute temperatures do not support."""


class DivisionByZeroError(QuantityError, ZeroDivisionError):
    """Division by, or inversion of, a zero-valued quantity."""


class FractionalPowerUnsupportedError(QuantityError, ValueError):
    """Quantities can only be raised to integer powers."""


__all__ = [
    "QuantityError",
    "QuantityParseError",
    "EmptyInputError",
    "UnrecognizedQuantityError",
    "UnrecognizedUnitError",
    "InvalidExponentError",
    "IncompatibleUnitsError",
    "TemperatureOperationError",
    "DivisionByZeroError",
    "FractionalPowerUnsupportedError",
]
