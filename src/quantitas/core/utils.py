"""
quantitas.core.utils
====================

Helpers for turning user numbers into exact decimals and for displaying
scalars and unit strings in a readable scientific format (e.g. 'kg·m/s²').
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Pattern, Union

from quantitas.exceptions import UnrecognizedQuantityError

Number = Union[int, float, Decimal]

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")

# Plain notation inside this window of adjusted exponents, scientific outside.
_PLAIN_MIN_EXP = -6
_PLAIN_MAX_EXP = 21


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def to_decimal(value: Union[Number, str]) -> Decimal:
    """Convert ``value`` into an exact, finite ``Decimal``.

    Floats go through their shortest ``repr`` so ``0.1`` becomes
    ``Decimal("0.1")`` rather than the binary expansion.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise UnrecognizedQuantityError(f"{value}: Quantity not recognized") from None
    else:
        raise TypeError(f"Cannot use {type(value).__name__} as a scalar")

    if not result.is_finite():
        raise UnrecognizedQuantityError(f"{value}: Scalar must be finite")
    return result


def format_scalar(value: Decimal) -> str:
    """Render a scalar without trailing zeros or exponent noise.

    >>> format_scalar(Decimal("1E+2"))
    '100'
    >>> format_scalar(Decimal("260.00"))
    '260'
    >>> format_scalar(Decimal("1e-28"))
    '1E-28'
    """
    if value.is_zero():
        return "0"
    normalized = value.normalize()
    if _PLAIN_MIN_EXP <= normalized.adjusted() <= _PLAIN_MAX_EXP:
        return format(normalized, "f")
    return format(normalized, "E")


# "s2" -> ("s", "2"); the trailing count is what simplify appends.
_COUNTED_TERM_RE: Pattern[str] = re.compile(r"(?P<name>.*?\D)(?P<count>\d+)")


def prettify_units(units: str) -> str:
    """
    Restyle a canonical units string with middle dots and superscripts,
    e.g. 'kg*m/s2' -> 'kg·m/s²'.
    """
    if not units:
        return units

    def restyle(side: str) -> str:
        terms = []
        for term in side.split("*"):
            m = _COUNTED_TERM_RE.fullmatch(term)
            terms.append(m.group("name") + _sup(int(m.group("count"))) if m else term)
        return "·".join(terms)

    numerator, _, denominator = units.partition("/")
    pretty = restyle(numerator)
    return f"{pretty}/{restyle(denominator)}" if denominator else pretty


__all__ = ["format_scalar", "prettify_units", "to_decimal"]
