"""
quantitas.units.parser
======================

Parser for quantity strings such as ``"5.6 kg*m/s^2"`` or ``"37 degC"``.

Parsing runs in two steps:

1. ``_compile_quantity`` splits the text into a scalar and two clauses of
   plain unit words, expanding explicit exponents (``m^2`` -> ``m m``,
   ``s^-1`` moves to the denominator). The registry is only consulted to
   validate words raised to the power zero.
2. ``parse_units`` resolves each clause against a registry into canonical
   tokens, a prefixed unit becoming two consecutive tokens.
"""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from quantitas.exceptions import (
    EmptyInputError,
    InvalidExponentError,
    UnrecognizedQuantityError,
    UnrecognizedUnitError,
)

if TYPE_CHECKING:
    from quantitas.units.registry import UnitsRegistry

Tokens = Tuple[str, ...]
# (scalar text or None, numerator words, denominator words)
Plan = Tuple[Optional[str], str, str]

_SIGNED_NUMBER = r"[+-]?\s*(?:\d+(?:\.\d+)?|\.\d+)(?:[Ee][+-]?\d+)?"

_QUANTITY_RE = re.compile(
    rf"(?P<scalar>{_SIGNED_NUMBER})?\s*(?P<top>[^/]*)(?:/(?P<bottom>.+))?",
    re.DOTALL,
)

# <word><^ or **><exponent>. The exponent group also takes a fractional part
# so that "m^1.5" is reported instead of being half-consumed.
_TOP_POWER_RE = re.compile(
    r"(?P<word>[^\s*.]+?)(?:\^|\*\*)?(?P<exp>[-+]?\d+(?:\.\d+)?)(?![A-Za-z])"
)
_BOTTOM_POWER_RE = re.compile(
    r"(?P<word>[^\s*.]+?)(?:\^|\*\*)?(?P<exp>\d+(?:\.\d+)?)(?![A-Za-z])"
)
_SEPARATOR_RE = re.compile(r"[.*]")
_WHITESPACE_RE = re.compile(r"\s+")


def _exponent(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise InvalidExponentError(f"Unit exponent is not an integer: {text!r}") from None


def _expand_powers(
    clause: str, pattern: re.Pattern[str], allow_zero_word: Callable[[str], bool]
) -> Tuple[str, List[str]]:
    """Expand ``word^n`` occurrences in one pass.

    Returns the rewritten clause and the words that negative exponents move to
    the other side of the fraction bar.
    """
    kept: List[str] = []
    moved: List[str] = []
    pos = 0
    for m in pattern.finditer(clause):
        word = m.group("word")
        n = _exponent(m.group("exp"))
        if n == 0 and not allow_zero_word(word):
            raise UnrecognizedUnitError(f"Unit not recognized: {word!r}")

        kept.append(clause[pos:m.start()])
        if n >= 0:
            kept.append(" ".join([word] * n))
        else:
            moved.extend([word] * -n)
        pos = m.end()
    kept.append(clause[pos:])
    return " ".join(part for part in kept if part), moved


@lru_cache(maxsize=4096)
def _compile_quantity(text: str, registry: "UnitsRegistry") -> Plan:
    text = text.strip()
    if not text:
        raise EmptyInputError("Unit not recognized: empty input")

    match = _QUANTITY_RE.fullmatch(text)
    if match is None:
        raise UnrecognizedQuantityError(f"{text}: Quantity not recognized")

    scalar = match.group("scalar")
    top = match.group("top") or ""
    bottom = match.group("bottom") or ""

    # A word raised to the power 0 disappears, so it must at least be a unit.
    allow_zero = registry.is_unit_expression

    top, moved = _expand_powers(top, _TOP_POWER_RE, allow_zero)
    bottom, _ = _expand_powers(bottom, _BOTTOM_POWER_RE, allow_zero)
    if moved:
        bottom = " ".join(filter(None, (bottom.strip(), " ".join(moved))))

    return scalar, top.strip(), bottom.strip()


def _parse_scalar(text: Optional[str]) -> Decimal:
    if not text:
        return Decimal(1)
    # Tolerate whitespace between the sign and the digits.
    try:
        return Decimal(_WHITESPACE_RE.sub("", text))
    except InvalidOperation:  # pragma: no cover - the grammar only admits numbers
        raise UnrecognizedQuantityError(f"{text}: Quantity not recognized") from None


@lru_cache(maxsize=4096)
def parse_units(text: str, registry: "UnitsRegistry") -> Tokens:
    """Normalize a units clause into canonical tokens.

    >>> parse_units("s m s", DEFAULT_REGISTRY)
    ('<second>', '<meter>', '<second>')
    >>> parse_units("km", DEFAULT_REGISTRY)
    ('<kilo>', '<meter>')
    """
    clause = _SEPARATOR_RE.sub(" ", text)
    if not registry.is_unit_expression(clause):
        raise UnrecognizedUnitError(f"Unit not recognized: {text!r}")

    tokens: List[str] = []
    for prefix, unit in registry.scan_units(clause):
        if prefix:
            tokens.append(registry.resolve_prefix(prefix))
        tokens.append(registry.resolve_unit(unit))
    return tuple(tokens)


def extract_quantity(text: str, registry: "UnitsRegistry") -> Tuple[Decimal, Tokens, Tokens]:
    """Parse ``text`` into ``(scalar, numerator, denominator)``.

    Empty sides are returned as empty tuples; callers pad them with the unity
    token. Raises a :class:`~quantitas.exceptions.QuantityParseError` subclass
    when the text is empty, malformed, or names an unknown unit.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a quantity string, got {type(text).__name__}")

    scalar, top, bottom = _compile_quantity(text, registry)
    numerator = parse_units(top, registry) if top else ()
    denominator = parse_units(bottom, registry) if bottom else ()
    return _parse_scalar(scalar), numerator, denominator


__all__ = ["extract_quantity", "parse_units"]
