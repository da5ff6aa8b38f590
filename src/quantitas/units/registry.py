"""
quantitas.units.registry
========================

Thread-safe, data-driven unit registry for quantitas.

The registry turns the static tables in :mod:`quantitas.units.definitions`
into the lookup maps the parser and the quantity type rely on:

- prefix alias -> prefix token, and prefix token -> factor,
- unit alias -> unit token, and unit token -> :class:`UnitDefinition`,
- token -> output spelling (the first alias listed),
- one compiled matcher recognising ``(prefix)?(unit)`` at word boundaries.

Tables are fixed once :meth:`UnitsRegistry.initialize` has run. Building a
registry whose tables map one alias to two different tokens raises
``ValueError``; the shipped tables are consistent by construction.
"""
from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Pattern, Tuple

from quantitas.exceptions import UnrecognizedUnitError
from quantitas.units.definitions import PREFIXES, UNIT_CATEGORIES, Category, ScalarLike

logger = logging.getLogger(__name__)

# Zero-width so that consecutive units separated by a single space both match.
# Atomic: before a space both \b and the lookahead succeed.
_BOUNDARY = r"(?>\b|(?=\s)|$)"
_SEPARATORS_RE = re.compile(r"[\s.*]*")


@dataclass(frozen=True, slots=True)
class PrefixDefinition:
    token: str
    aliases: Tuple[str, ...]
    factor: Decimal


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """A unit token, its aliases and the base composition of its category.

    ``scalar`` converts one of this unit into ``numerator / denominator``
    (tuples of base tokens) of the category it belongs to.
    """

    token: str
    aliases: Tuple[str, ...]
    scalar: Decimal
    category: str
    numerator: Tuple[str, ...]
    denominator: Tuple[str, ...]


def _decimal(value: ScalarLike) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(value)


def _alternation(aliases: Iterable[str]) -> str:
    # Longest first, so "kilo" wins over "k" and "min" over "m" + "in".
    ordered = sorted(aliases, key=len, reverse=True)
    return "|".join(re.escape(a) for a in ordered)


class UnitsRegistry:
    """Registry of prefixes and units with a one-time initialization barrier.

    Lookups initialize the registry on first use. ``initialize`` holds the
    registry lock, so concurrent callers build the tables exactly once.
    """

    def __init__(
        self,
        prefixes: Iterable[Tuple[str, Tuple[str, ...], ScalarLike]] = PREFIXES,
        categories: Iterable[Category] = UNIT_CATEGORIES,
    ) -> None:
        self._lock = threading.RLock()
        self._prefix_table = tuple(prefixes)
        self._category_table = tuple(categories)
        self._initialized = False

        self._prefixes: Dict[str, PrefixDefinition] = {}
        self._prefix_map: Dict[str, str] = {}
        self._units: Dict[str, UnitDefinition] = {}
        self._unit_map: Dict[str, str] = {}
        self._output_map: Dict[str, str] = {}
        self._match_re: Optional[Pattern[str]] = None

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------
    def initialize(self) -> "UnitsRegistry":
        """Build the lookup maps and matchers. Idempotent."""
        with self._lock:
            if self._initialized:
                return self

            prefixes: Dict[str, PrefixDefinition] = {}
            prefix_map: Dict[str, str] = {}
            units: Dict[str, UnitDefinition] = {}
            unit_map: Dict[str, str] = {}
            output_map: Dict[str, str] = {}

            for token, aliases, factor in self._prefix_table:
                prefixes[token] = PrefixDefinition(token, tuple(aliases), _decimal(factor))
                output_map[token] = aliases[0]
                for alias in aliases:
                    self._claim(prefix_map, alias, token, "prefix")

            for category in self._category_table:
                for token, aliases, scalar in category.units:
                    if token in units:
                        raise ValueError(f"Unit token {token!r} is defined twice.")
                    units[token] = UnitDefinition(
                        token=token,
                        aliases=tuple(aliases),
                        scalar=_decimal(scalar),
                        category=category.name,
                        numerator=tuple(category.numerator),
                        denominator=tuple(category.denominator),
                    )
                    output_map.setdefault(token, aliases[0])
                    for alias in aliases:
                        self._claim(unit_map, alias, token, "unit")

            unit_match = (
                f"({_alternation(prefix_map)})??({_alternation(unit_map)}){_BOUNDARY}"
            )

            self._prefixes = prefixes
            self._prefix_map = prefix_map
            self._units = units
            self._unit_map = unit_map
            self._output_map = output_map
            self._match_re = re.compile(unit_match, re.ASCII)
            self._initialized = True

            logger.debug(
                "Initialized units registry: %d units, %d prefixes, %d unit aliases, %d prefix aliases",
                len(units), len(prefixes), len(unit_map), len(prefix_map),
            )
            return self

    @staticmethod
    def _claim(table: Dict[str, str], alias: str, token: str, kind: str) -> None:
        owner = table.get(alias)
        if owner is not None and owner != token:
            raise ValueError(
                f"Cannot register {kind} alias {alias!r} for {token}: "
                f"it already names {owner}."
            )
        table[alias] = token

    def _ready(self) -> None:
        if not self._initialized:
            self.initialize()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    def has(self, symbol: str) -> bool:
        """True if ``symbol`` spells one or more (optionally prefixed) units."""
        return isinstance(symbol, str) and self.is_unit_expression(symbol)

    def resolve_unit(self, alias: str) -> str:
        self._ready()
        try:
            return self._unit_map[alias]
        except KeyError:
            raise UnrecognizedUnitError(f"Unit not recognized: {alias!r}") from None

    def resolve_prefix(self, alias: str) -> str:
        self._ready()
        try:
            return self._prefix_map[alias]
        except KeyError:
            raise UnrecognizedUnitError(f"Prefix not recognized: {alias!r}") from None

    def unit_definition(self, token: str) -> Optional[UnitDefinition]:
        self._ready()
        return self._units.get(token)

    def prefix_value(self, token: str) -> Optional[Decimal]:
        self._ready()
        prefix = self._prefixes.get(token)
        return prefix.factor if prefix is not None else None

    def is_prefix(self, token: str) -> bool:
        self._ready()
        return token in self._prefixes

    def output_name(self, token: str) -> str:
        self._ready()
        return self._output_map[token]

    def is_unit_expression(self, text: str) -> bool:
        """Whether ``text`` is entirely made of units joined by spaces, ``.`` or ``*``.

        Single left-to-right pass: each position commits to its first
        ``(prefix)?(unit)`` match, so rejecting a long list is linear.
        """
        self._ready()
        assert self._match_re is not None
        pos = _SEPARATORS_RE.match(text).end()
        if pos == len(text):
            return False
        while pos < len(text):
            m = self._match_re.match(text, pos)
            if m is None or m.end() == pos:
                return False
            pos = _SEPARATORS_RE.match(text, m.end()).end()
        return True

    def scan_units(self, text: str) -> List[Tuple[Optional[str], str]]:
        """Split ``text`` into ``(prefix_alias, unit_alias)`` pairs, in order."""
        self._ready()
        assert self._match_re is not None
        return [(m.group(1), m.group(2)) for m in self._match_re.finditer(text)]

    def units(self) -> Mapping[str, UnitDefinition]:
        self._ready()
        with self._lock:
            return dict(self._units)

    def prefixes(self) -> Mapping[str, PrefixDefinition]:
        self._ready()
        with self._lock:
            return dict(self._prefixes)

    def categories(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self._category_table)


# ---------------------------------------------------------------------------
# Bootstrap the shared default registry
# ---------------------------------------------------------------------------

def _bootstrap_default_registry() -> UnitsRegistry:
    return UnitsRegistry().initialize()


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


__all__ = [
    "DEFAULT_REGISTRY",
    "PrefixDefinition",
    "UnitDefinition",
    "UnitsRegistry",
]
