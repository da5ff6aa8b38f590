"""Utilities for cancelling unit terms and rendering canonical unit strings.

A prefixed unit occupies two consecutive token slots (``<kilo>``, ``<meter>``).
Both helpers here treat such a pair as a single term so that ``km*m/km``
cancels to ``m`` and ``km*km`` renders as ``km2``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Dict, Iterator, List, Tuple

from quantitas.units.definitions import UNITY

if TYPE_CHECKING:  # pragma: no cover - import only used for typing
    from quantitas.units.registry import UnitsRegistry

Tokens = Tuple[str, ...]
UNITY_UNITS: Tokens = (UNITY,)


def _terms(tokens: Tokens, registry: "UnitsRegistry") -> Iterator[Tokens]:
    """Yield each term as a tuple: ``(prefix, unit)`` or ``(unit,)``."""
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if registry.is_prefix(token) and i + 1 < len(tokens):
            yield tokens[i:i + 2]
            i += 2
            continue
        if token != UNITY:
            yield (token,)
        i += 1


def clean_terms(
    numerator: Tokens, denominator: Tokens, registry: "UnitsRegistry"
) -> Tuple[Tokens, Tokens]:
    """Cancel matching terms between numerator and denominator.

    Unity tokens are dropped, each distinct term is counted (numerator minus
    denominator) and re-emitted on the side its net count lands on, in
    first-seen order. An empty side becomes the unity token.

    Examples
    --------
    >>> clean_terms(("<meter>", "<meter>"), ("<meter>",), DEFAULT_REGISTRY)
    (('<meter>',), ('<1>',))
    """
    counts: Dict[Tokens, int] = {}
    for term in _terms(tuple(numerator), registry):
        counts[term] = counts.get(term, 0) + 1
    for term in _terms(tuple(denominator), registry):
        counts[term] = counts.get(term, 0) - 1

    num: List[str] = []
    den: List[str] = []
    for term, n in counts.items():
        if n > 0:
            num.extend(term * n)
        elif n < 0:
            den.extend(term * -n)

    return tuple(num) or UNITY_UNITS, tuple(den) or UNITY_UNITS


def output_names(tokens: Tokens, registry: "UnitsRegistry") -> List[str]:
    """Map tokens to display names, fusing a prefix with the unit after it."""
    return ["".join(registry.output_name(t) for t in term) for term in _terms(tokens, registry)]


def simplify(names: List[str]) -> List[str]:
    """Collapse repeats, keeping first-seen order: ``['s', 'm', 's']`` -> ``['s2', 'm']``."""
    counts: Dict[str, int] = {}
    for name in names:
        counts[name] = counts.get(name, 0) + 1
    return [name + (str(n) if n > 1 else "") for name, n in counts.items()]


@lru_cache(maxsize=None)
def stringify_units(tokens: Tokens, registry: "UnitsRegistry") -> str:
    """Render one side of a unit fraction, ``"1"`` for the unity side."""
    if tokens == UNITY_UNITS or not tokens:
        return "1"
    return "*".join(simplify(output_names(tokens, registry)))


__all__ = ["UNITY_UNITS", "clean_terms", "output_names", "simplify", "stringify_units"]
