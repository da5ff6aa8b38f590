# quantitas.core.dimensions

from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Iterable, List, Tuple, Union

from quantitas.units.definitions import DIMENSION_FAMILIES, UNITY

if TYPE_CHECKING:
    from quantitas.units.registry import UnitsRegistry

logger = logging.getLogger(__name__)

Tokens = Tuple[str, ...]
DimLike = Union["Dimension", Iterable[int]]

_N = len(DIMENSION_FAMILIES)
# Positional weight of each family in the integer signature.
SIGNATURE_BASE = 20

# --- Core object -------------------------------------------------------------

class Dimension(tuple):
    """
    Immutable vector of integer exponents, one per dimension family
    (length, time, temperature, mass, current, substance, luminosity,
    currency, data, angle, capacitance).

    Tuple subclass => hashable, comparable, usable as dict keys.
    """

    __slots__ = ()

    def __new__(cls, data: DimLike = (0,) * _N) -> "Dimension":
        if isinstance(data, Dimension):
            return tuple.__new__(cls, data)

        t = tuple(int(x) for x in data)
        if len(t) != _N:
            raise ValueError(f"Dimension must have length {_N} ({', '.join(DIMENSION_FAMILIES)}).")
        return tuple.__new__(cls, t)

    @classmethod
    def of(cls, family: str) -> "Dimension":
        """Unit vector for one family name, e.g. ``Dimension.of("length")``."""
        return cls(int(name == family) for name in DIMENSION_FAMILIES)

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: DimLike) -> "Dimension":  # type: ignore[override]
        o = Dimension(other)
        return Dimension(x + y for x, y in zip(self, o, strict=True))

    def __truediv__(self, other: DimLike) -> "Dimension":
        o = Dimension(other)
        return Dimension(x - y for x, y in zip(self, o, strict=True))

    def __pow__(self, n: int, modulo: Any | None = None) -> "Dimension":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Dimension.")
        if not isinstance(n, int):
            raise TypeError(f"Exponent must be int, got {type(n).__name__}")
        return Dimension(e * n for e in self)

    def __rmul__(self, other: Any) -> "Dimension":
        """Prevent (int * Dimension) from falling back to tuple repetition."""
        return NotImplemented

    def __add__(self, other: Any) -> "Dimension":
        """Block tuple concatenation (e.g., LENGTH + MASS)."""
        return NotImplemented

    def __radd__(self, other: Any) -> "Dimension":
        return NotImplemented

    # --- Helpers ---
    @property
    def signature(self) -> int:
        """Fold the vector into one integer, weighting family ``i`` by 20**i."""
        return sum(e * SIGNATURE_BASE ** i for i, e in enumerate(self))

    def __repr__(self) -> str:
        parts = "".join(
            f"[{name}^{e}]" for name, e in zip(DIMENSION_FAMILIES, self, strict=True) if e != 0
        )
        return parts or "[1]"


DIM_0 = Dimension()


def signature_vector(numerator: Tokens, denominator: Tokens, registry: "UnitsRegistry") -> Dimension:
    """Project base tokens onto the dimension families.

    Tokens whose category is not one of the families (``<bel>``, unity)
    contribute nothing.
    """
    dim = DIM_0
    for tokens, sign in ((numerator, 1), (denominator, -1)):
        for token in tokens:
            definition = registry.unit_definition(token)
            if definition is None or definition.category not in DIMENSION_FAMILIES:
                continue
            dim = dim * Dimension.of(definition.category) ** sign
    return dim


@lru_cache(maxsize=None)
def to_base_units(
    numerator: Tokens, denominator: Tokens, registry: "UnitsRegistry"
) -> Tuple[Decimal, Tokens, Tokens]:
    """Reduce a unit shape to base tokens.

    Returns ``(factor, base_numerator, base_denominator)`` such that one of
    the given units equals ``factor`` of the base composition. Prefix tokens
    scale the factor; unit tokens scale it by their registered scalar and
    contribute their category's own numerator and denominator.

    Cached per ``(numerator, denominator)`` for the life of the process.
    """
    factor = Decimal(1)
    num: List[str] = []
    den: List[str] = []

    for token in numerator:
        prefix = registry.prefix_value(token)
        if prefix is not None:
            factor *= prefix
            continue
        unit = registry.unit_definition(token)
        if unit is not None:
            factor *= unit.scalar
            num.extend(unit.numerator)
            den.extend(unit.denominator)

    for token in denominator:
        prefix = registry.prefix_value(token)
        if prefix is not None:
            factor /= prefix
            continue
        unit = registry.unit_definition(token)
        if unit is not None:
            factor /= unit.scalar
            num.extend(unit.denominator)
            den.extend(unit.numerator)

    base_num = tuple(t for t in num if t != UNITY)
    base_den = tuple(t for t in den if t != UNITY)
    logger.debug(
        "Cached base form for %s / %s: %s * %s / %s",
        numerator, denominator, factor, base_num, base_den,
    )
    return factor, base_num, base_den


__all__ = [
    "DIM_0",
    "Dimension",
    "SIGNATURE_BASE",
    "signature_vector",
    "to_base_units",
]
