"""
quantitas.core.quantity
=======================

Defines the `Quantity` value type: an exact decimal scalar with a numerator
and a denominator of canonical unit tokens.

This module provides:
- Construction from a string (``Quantity("5.6 kg*m/s^2")``), from a scalar
  plus a units string (``Quantity(5.6, "kg*m/s^2")``), from a
  `QuantityDefinition`, or by copying another `Quantity`.
- Conversion between compatible units, including the affine temperature
  scales and the relative degree scales.
- Dimension-checked arithmetic and comparison.

Derived state (base scalar, signature, canonical unit string, conversions)
is computed lazily and cached on the instance. The cached values are pure
functions of the scalar and tokens, which never change after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Union

from quantitas.core import temperature
from quantitas.core.dimensions import Dimension, signature_vector, to_base_units
from quantitas.core.unit_simplifier import UNITY_UNITS, clean_terms, stringify_units
from quantitas.core.utils import Number, format_scalar, prettify_units, to_decimal
from quantitas.exceptions import (
    DivisionByZeroError,
    FractionalPowerUnsupportedError,
    IncompatibleUnitsError,
    TemperatureOperationError,
)
from quantitas.units.definitions import BASE_UNITS, DEGREE_SCALES, TEMPERATURE_SCALES, UNITY
from quantitas.units.parser import extract_quantity

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantitas.units.registry import UnitsRegistry

Tokens = Tuple[str, ...]
QuantityLike = Union["Quantity", "QuantityDefinition", str, Number]

# Signature shared by every temperature and degree unit.
DEGREE_SIGNATURE = Dimension.of("temperature").signature


def _registry() -> "UnitsRegistry":
    # Local import keeps the registry out of module import time.
    from quantitas.units.registry import DEFAULT_REGISTRY
    return DEFAULT_REGISTRY


@dataclass(frozen=True, slots=True)
class QuantityDefinition:
    """Pre-parsed quantity parts, used to build results without re-parsing."""

    scalar: Decimal
    numerator: Tokens = ()
    denominator: Tokens = ()


class Quantity:
    """
    A physical quantity: ``scalar`` times ``numerator / denominator``.

    Attributes
    ----------
    scalar : Decimal
        The amount, in the quantity's own units.
    numerator, denominator : tuple of str
        Canonical unit tokens (``"<meter>"``...). Repeats mean powers; a
        prefixed unit takes two slots. A side with no units is ``("<1>",)``.
    init_value
        The first constructor argument, kept for diagnostics.
    """
    __slots__ = (
        "scalar",
        "numerator",
        "denominator",
        "init_value",
        "_base_scalar",
        "_signature",
        "_is_base",
        "_units",
        "_conversions",
    )

    def __init__(self, init_value: QuantityLike, init_units: Optional[str] = None) -> None:
        reg = _registry()

        if isinstance(init_value, str) and init_units is None:
            scalar, numerator, denominator = extract_quantity(init_value, reg)
            parsed = True
        elif isinstance(init_value, (str, int, float, Decimal)):
            scalar = to_decimal(init_value)
            if init_units:
                # The scalar of a units string ("5 m") is ignored.
                _, numerator, denominator = extract_quantity(init_units, reg)
            else:
                numerator, denominator = (), ()
            parsed = True
        elif isinstance(init_value, (QuantityDefinition, Quantity)):
            if init_units is not None:
                raise TypeError("Units can only accompany a scalar value.")
            scalar = to_decimal(init_value.scalar)
            numerator, denominator = tuple(init_value.numerator), tuple(init_value.denominator)
            parsed = False
        else:
            raise TypeError(f"Cannot build a Quantity from {type(init_value).__name__}")

        numerator = numerator or UNITY_UNITS
        denominator = denominator or UNITY_UNITS

        # Math with temperatures is very limited.
        if any(t in TEMPERATURE_SCALES for t in denominator):
            raise TemperatureOperationError("Cannot divide with temperatures")
        if any(t in TEMPERATURE_SCALES for t in numerator):
            if len(numerator) > 1:
                raise TemperatureOperationError("Cannot multiply by temperatures")
            if denominator != UNITY_UNITS:
                raise TemperatureOperationError("Cannot divide with temperatures")

        if parsed:
            numerator, denominator = clean_terms(numerator, denominator, reg)

        self.scalar: Decimal = scalar
        self.numerator: Tokens = numerator
        self.denominator: Tokens = denominator
        self.init_value = init_value
        self._base_scalar: Optional[Decimal] = None
        self._signature: Optional[int] = None
        self._is_base: Optional[bool] = None
        self._units: Optional[str] = None
        self._conversions: Dict[str, Quantity] = {}

        if self.is_temperature() and self.base_scalar < 0:
            raise TemperatureOperationError("Temperatures must not be less than absolute zero")

    @classmethod
    def _from_parts(cls, scalar: Decimal, numerator: Tokens, denominator: Tokens) -> "Quantity":
        return cls(QuantityDefinition(scalar, numerator, denominator))

    @classmethod
    def _unit_shape(cls, units: str) -> "Quantity":
        """A quantity of scalar 1 in ``units``; any scalar in the string is dropped."""
        reg = _registry()
        _, numerator, denominator = extract_quantity(units, reg)
        numerator, denominator = clean_terms(numerator, denominator, reg)
        return cls._from_parts(Decimal(1), numerator, denominator)

    @staticmethod
    def _coerce(other: Any) -> "Quantity":
        if isinstance(other, Quantity):
            return other
        if isinstance(other, (QuantityDefinition, str, int, float, Decimal)):
            return Quantity(other)
        raise TypeError(f"Cannot combine a Quantity with {type(other).__name__}")

    def clone(self) -> "Quantity":
        return Quantity(self)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def base_scalar(self) -> Decimal:
        """The scalar expressed in base units (absolute kelvin for temperatures)."""
        if self._base_scalar is None:
            self._base_scalar = self.scalar if self.is_base() else self.to_base().scalar
        return self._base_scalar

    @property
    def signature(self) -> int:
        return self.unit_signature()

    def unit_signature_vector(self) -> Dimension:
        if not self.is_base():
            return self.to_base().unit_signature_vector()
        return signature_vector(self.numerator, self.denominator, _registry())

    def unit_signature(self) -> int:
        """
        Integer fingerprint of the quantity's dimension. Equal signatures mean
        compatible units.
        """
        if self._signature is None:
            self._signature = self.unit_signature_vector().signature
        return self._signature

    def units(self) -> str:
        """Canonical units string, e.g. ``"kg*m/s2"``; ``""`` when unitless."""
        if self._units is None:
            if self.is_unitless():
                self._units = ""
            else:
                reg = _registry()
                units = stringify_units(self.numerator, reg)
                if self.denominator != UNITY_UNITS:
                    units += "/" + stringify_units(self.denominator, reg)
                self._units = units
        return self._units

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------
    def is_base(self) -> bool:
        if self._is_base is None:
            if self.is_degrees() and self.numerator[0] in ("<kelvin>", "<temp-K>"):
                self._is_base = True
            else:
                self._is_base = all(
                    t == UNITY or t in BASE_UNITS for t in self.numerator + self.denominator
                )
        return self._is_base

    def is_degrees(self) -> bool:
        """A single temperature or degree unit, with nothing in the denominator."""
        return (
            len(self.numerator) == 1
            and self.denominator == UNITY_UNITS
            and (self.numerator[0] in TEMPERATURE_SCALES or self.numerator[0] in DEGREE_SCALES)
        )

    def is_temperature(self) -> bool:
        return self.is_degrees() and self.numerator[0] in TEMPERATURE_SCALES

    def is_unitless(self) -> bool:
        """
        True only without any units; radians and other "unitless" units
        still count as units.
        """
        return self.numerator == UNITY_UNITS and self.denominator == UNITY_UNITS

    def is_compatible(self, other: Any) -> bool:
        """Same physical dimension. Inverse dimensions are never compatible."""
        if isinstance(other, str):
            return self.is_compatible(Quantity(other))
        if isinstance(other, QuantityDefinition):
            other = Quantity(other)
        if not isinstance(other, Quantity):
            return False
        return self.signature == other.signature

    def is_inverse(self, other: Union["Quantity", str]) -> bool:
        """Dimension of ``other`` is the reciprocal of this one (``S`` and ``ohm``)."""
        if isinstance(other, (str, QuantityDefinition)):
            other = Quantity(other)
        if not isinstance(other, Quantity):
            return False
        return self.signature == -other.signature

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    def to_base(self) -> "Quantity":
        """Equivalent quantity in base units. Temperatures become ``tempK``."""
        if self.is_base():
            return self
        if self.is_temperature():
            scale = temperature.temperature_scale(self.numerator[0])
            return Quantity._from_parts(
                temperature.to_kelvin(self.scalar, scale), ("<temp-K>",), UNITY_UNITS
            )

        factor, numerator, denominator = to_base_units(self.numerator, self.denominator, _registry())
        return Quantity._from_parts(factor * self.scalar, numerator, denominator)

    def to(self, other: Union["Quantity", str, None] = None) -> "Quantity":
        """
        Convert to other compatible units.

        ``other`` is a units string or a quantity whose units are used (its
        scalar is ignored, as is any scalar in the string). Results are cached
        per target string. If only the inverse is compatible the quantity is
        inverted first.

        Examples
        --------
        >>> Quantity("25 kg").to("g")
        25000 g
        >>> Quantity("10 S").to("ohm")
        0.1 Ohm
        """
        if not other:
            return self
        if isinstance(other, Quantity):
            return self.to(other.units())
        if not isinstance(other, str):
            raise TypeError(f"Target units must be a string or Quantity, got {type(other).__name__}")

        cached = self._conversions.get(other)
        if cached is not None:
            return cached

        target = Quantity._unit_shape(other)
        if target.units() == self.units():
            return self

        if not self.is_compatible(target):
            if not self.is_inverse(target):
                raise IncompatibleUnitsError(
                    f"Incompatible units: cannot convert '{self.units()}' {self.unit_signature_vector()!r} "
                    f"to '{target.units()}' {target.unit_signature_vector()!r}"
                )
            result = self.inverse().to(other)
        elif target.is_temperature():
            scale = temperature.temperature_scale(target.numerator[0])
            result = Quantity._from_parts(
                temperature.from_kelvin(self.base_scalar, scale), target.numerator, target.denominator
            )
        elif target.is_degrees():
            scale = temperature.degree_scale(target.numerator[0])
            result = Quantity._from_parts(
                temperature.kelvin_to_degrees(self._degrees_in_kelvin(), scale),
                target.numerator,
                target.denominator,
            )
        else:
            result = Quantity._from_parts(
                self.base_scalar / target.base_scalar, target.numerator, target.denominator
            )

        self._conversions[other] = result
        return result

    def _degrees_in_kelvin(self) -> Decimal:
        if self.is_temperature():
            scale = temperature.temperature_scale(self.numerator[0])
            return temperature.degrees_to_kelvin(self.scalar, scale)
        return self.base_scalar

    def inverse(self) -> "Quantity":
        if self.is_temperature():
            raise TemperatureOperationError("Cannot divide with temperatures")
        if self.scalar.is_zero():
            raise DivisionByZeroError("Divide by zero")
        return Quantity._from_parts(1 / self.scalar, self.denominator, self.numerator)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _require_compatible(self, other: "Quantity") -> None:
        if not self.is_compatible(other):
            raise IncompatibleUnitsError(
                f"Incompatible units: '{self.units()}' {self.unit_signature_vector()!r} "
                f"and '{other.units()}' {other.unit_signature_vector()!r}"
            )

    def _shift_by_degrees(self, degrees: "Quantity", sign: int) -> "Quantity":
        """Move a temperature by a relative degree amount, keeping its units."""
        step = degrees.to(temperature.degree_units(self.units()))
        return Quantity._from_parts(
            self.scalar + sign * step.scalar, self.numerator, self.denominator
        )

    def add(self, other: QuantityLike) -> "Quantity":
        other = self._coerce(other)
        self._require_compatible(other)

        if self.is_temperature() and other.is_temperature():
            raise TemperatureOperationError("Cannot add two temperatures")
        if self.is_temperature():
            return self._shift_by_degrees(other, 1)
        if other.is_temperature():
            return other._shift_by_degrees(self, 1)

        return Quantity._from_parts(
            self.scalar + other.to(self).scalar, self.numerator, self.denominator
        )

    def sub(self, other: QuantityLike) -> "Quantity":
        other = self._coerce(other)
        self._require_compatible(other)

        if self.is_temperature() and other.is_temperature():
            # Difference of two readings is a relative degree amount.
            units = self.units()
            scale = temperature.temperature_scale(self.numerator[0])
            return Quantity._from_parts(
                self.scalar - other.to(units).scalar,
                (temperature.DEGREE_TOKENS[scale],),
                UNITY_UNITS,
            )
        if self.is_temperature():
            return self._shift_by_degrees(other, -1)
        if other.is_temperature():
            raise TemperatureOperationError(
                "Cannot subtract a temperature from a differential degree unit"
            )

        return Quantity._from_parts(
            self.scalar - other.to(self).scalar, self.numerator, self.denominator
        )

    def _aligned(self, other: "Quantity") -> "Quantity":
        # Degree scales never cancel each other: degK*degC/degC^2 is degK/degC.
        if self.is_compatible(other) and self.signature != DEGREE_SIGNATURE:
            return other.to(self)
        return other

    def mul(self, other: QuantityLike) -> "Quantity":
        if isinstance(other, (int, float, Decimal)):
            return Quantity._from_parts(
                self.scalar * to_decimal(other), self.numerator, self.denominator
            )
        other = self._coerce(other)

        if (self.is_temperature() or other.is_temperature()) and not (
            self.is_unitless() or other.is_unitless()
        ):
            raise TemperatureOperationError("Cannot multiply by temperatures")

        op2 = self._aligned(other)
        numerator, denominator = clean_terms(
            self.numerator + op2.numerator, self.denominator + op2.denominator, _registry()
        )
        return Quantity._from_parts(self.scalar * op2.scalar, numerator, denominator)

    def div(self, other: QuantityLike) -> "Quantity":
        if isinstance(other, (int, float, Decimal)):
            divisor = to_decimal(other)
            if divisor.is_zero():
                raise DivisionByZeroError("Divide by zero")
            return Quantity._from_parts(self.scalar / divisor, self.numerator, self.denominator)
        other = self._coerce(other)

        if other.is_temperature():
            raise TemperatureOperationError("Cannot divide with temperatures")
        if self.is_temperature() and not other.is_unitless():
            raise TemperatureOperationError("Cannot divide with temperatures")

        op2 = self._aligned(other)
        if op2.scalar.is_zero():
            raise DivisionByZeroError("Divide by zero")
        numerator, denominator = clean_terms(
            self.numerator + op2.denominator, self.denominator + op2.numerator, _registry()
        )
        return Quantity._from_parts(self.scalar / op2.scalar, numerator, denominator)

    def pow(self, n: Number) -> "Quantity":
        """Raise to an integer power.

        Unit lists repeat ``|n|`` times, at least once, so ``pow(0)`` keeps the
        units with scalar 1: ``Quantity("10 m").pow(0)`` is ``1 m``.
        """
        if isinstance(n, bool) or not isinstance(n, (int, float, Decimal)):
            raise TypeError(f"Exponent must be a number, got {type(n).__name__}")
        exponent = to_decimal(n)
        if exponent != exponent.to_integral_value():
            raise FractionalPowerUnsupportedError(
                "Raising quantities to a fractional power is not supported"
            )

        power = int(exponent)
        if power < 0 and self.scalar.is_zero():
            raise DivisionByZeroError("Divide by zero")

        repeats = max(abs(power), 1)
        numerator, denominator = self.numerator * repeats, self.denominator * repeats
        if power < 0:
            numerator, denominator = denominator, numerator
        numerator, denominator = clean_terms(numerator, denominator, _registry())
        # Decimal(0) ** 0 is undefined
        scalar = Decimal(1) if power == 0 else self.scalar ** power
        return Quantity._from_parts(scalar, numerator, denominator)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    def compare_to(self, other: QuantityLike) -> int:
        """
        Compare base values: -1, 0 or 1.

        Inverse dimensions are never compared (``10 S`` against ``0.1 ohm``
        raises), otherwise ordering would not be antisymmetric.
        """
        other = self._coerce(other)
        self._require_compatible(other)
        if self.base_scalar < other.base_scalar:
            return -1
        if self.base_scalar > other.base_scalar:
            return 1
        return 0

    def eq(self, other: QuantityLike) -> bool:
        return self.compare_to(other) == 0

    def lt(self, other: QuantityLike) -> bool:
        return self.compare_to(other) == -1

    def lte(self, other: QuantityLike) -> bool:
        return self.eq(other) or self.lt(other)

    def gt(self, other: QuantityLike) -> bool:
        return self.compare_to(other) == 1

    def gte(self, other: QuantityLike) -> bool:
        return self.eq(other) or self.gt(other)

    def same(self, other: QuantityLike) -> bool:
        """Same scalar and same units: ``100 cm`` is not the same as ``1 m``."""
        other = self._coerce(other)
        return self.scalar == other.scalar and self.units() == other.units()

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.is_compatible(other) and self.base_scalar == other.base_scalar

    def __hash__(self) -> int:
        return hash((self.signature, self.base_scalar))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (Quantity, str)):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other: Any) -> "Quantity":
        if not isinstance(other, (Quantity, QuantityDefinition, str, int, float, Decimal)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Quantity":
        if not isinstance(other, (str, int, float, Decimal)):
            return NotImplemented
        return Quantity(other).add(self)

    def __sub__(self, other: Any) -> "Quantity":
        if not isinstance(other, (Quantity, QuantityDefinition, str, int, float, Decimal)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Any) -> "Quantity":
        if not isinstance(other, (str, int, float, Decimal)):
            return NotImplemented
        return Quantity(other).sub(self)

    def __mul__(self, other: Any) -> "Quantity":
        if not isinstance(other, (Quantity, QuantityDefinition, str, int, float, Decimal)):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Any) -> "Quantity":
        # allows 3 * (2 m) -> 6 m
        if isinstance(other, (int, float, Decimal)):
            return self.mul(other)
        if isinstance(other, str):
            return Quantity(other).mul(self)
        return NotImplemented

    def __truediv__(self, other: Any) -> "Quantity":
        if not isinstance(other, (Quantity, QuantityDefinition, str, int, float, Decimal)):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> "Quantity":
        # scalar / quantity -> scaled inverse
        if isinstance(other, (int, float, Decimal)):
            return self.inverse().mul(other)
        if isinstance(other, str):
            return Quantity(other).div(self)
        return NotImplemented

    def __pow__(self, n: Number, modulo: Any | None = None) -> "Quantity":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Quantity.")
        return self.pow(n)

    def __neg__(self) -> "Quantity":
        return self.mul(-1)

    def __repr__(self) -> str:
        scalar = format_scalar(self.scalar)
        units = self.units()
        return f"{scalar} {units}" if units else scalar

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for Quantity objects.

        Supported specifiers
        --------------------
        "" (empty), or "native"
            The quantity in its current units (default).
        "base" or "si"
            The quantity converted to base units.
        "pretty"
            Current units with middle dots and superscripts, e.g. 'kg·m/s²'.

        Examples
        --------
        >>> v = Quantity("1000 cm/s")
        >>> f"{v}"
        '1000 cm/s'
        >>> f"{v:base}"
        '10 m/s'
        >>> f"{Quantity('2 kg*m/s^2'):pretty}"
        '2 kg·m/s²'

        Raises
        ------
        ValueError
            If the format specifier is not one of the above.
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "native"):
            return repr(self)
        if spec in ("base", "si"):
            return repr(self.to_base())
        if spec == "pretty":
            scalar = format_scalar(self.scalar)
            units = prettify_units(self.units())
            return f"{scalar} {units}" if units else scalar
        raise ValueError("Unknown format spec; use '', 'native', 'base', 'si' or 'pretty'")


__all__ = ["Quantity", "QuantityDefinition"]
