from decimal import Decimal

import pytest

from quantitas.core.dimensions import (
    DIM_0,
    SIGNATURE_BASE,
    Dimension,
    signature_vector,
    to_base_units,
)
from quantitas.units.definitions import DIMENSION_FAMILIES

LENGTH = Dimension.of("length")
TIME = Dimension.of("time")
MASS = Dimension.of("mass")
TEMPERATURE = Dimension.of("temperature")


# --- Basic structure ---

def test_dimension_has_one_slot_per_family():
    assert len(DIM_0) == len(DIMENSION_FAMILIES) == 11
    assert DIM_0 == (0,) * 11


@pytest.mark.parametrize("i, family", list(enumerate(DIMENSION_FAMILIES)))
def test_of_builds_unit_vectors(i, family):
    d = Dimension.of(family)
    assert d[i] == 1
    assert sum(d) == 1


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        Dimension((1, 0, 0))


def test_copy_constructor_keeps_type():
    d = Dimension(LENGTH)
    assert type(d) is Dimension
    assert d == LENGTH


# --- Algebra ---

def test_mul_div_pow():
    velocity = LENGTH / TIME
    assert velocity == (1, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0)
    assert LENGTH * TIME ** -1 == velocity
    force = MASS * LENGTH * TIME ** -2
    assert force[3] == 1 and force[0] == 1 and force[1] == -2
    assert LENGTH ** 0 == DIM_0


def test_mul_accepts_plain_tuples():
    t = (0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0)
    assert LENGTH * t == LENGTH / TIME ** -1


def test_pow_rejects_non_int_and_modulo():
    with pytest.raises(TypeError):
        _ = LENGTH ** 1.5
    with pytest.raises(TypeError):
        pow(LENGTH, 2, 3)


def test_tuple_repetition_and_concatenation_blocked():
    with pytest.raises(TypeError, match="unsupported operand type"):
        _ = 2 * LENGTH
    with pytest.raises(TypeError, match="unsupported operand type"):
        _ = LENGTH + MASS


# --- Signature ---

def test_signature_weights_families_by_position():
    assert SIGNATURE_BASE == 20
    assert LENGTH.signature == 1
    assert TIME.signature == 20
    assert TEMPERATURE.signature == 400
    assert MASS.signature == 8000
    assert (MASS * LENGTH / TIME ** 2).signature == 8000 + 1 - 40


def test_repr():
    assert repr(DIM_0) == "[1]"
    assert repr(LENGTH / TIME) == "[length^1][time^-1]"


# --- Registry projections ---

def test_signature_vector_from_tokens(ureg):
    assert signature_vector(("<meter>",), ("<second>",), ureg) == LENGTH / TIME
    # unity and dimensionless tokens contribute nothing
    assert signature_vector(("<1>",), ("<1>",), ureg) == DIM_0


def test_to_base_units_prefix_and_scalar(ureg):
    factor, num, den = to_base_units(("<kilo>", "<meter>"), ("<hour>",), ureg)
    assert num == ("<meter>",)
    assert den == ("<second>",)
    assert factor == Decimal(1000) / Decimal(3600)


def test_to_base_units_derived_unit(ureg):
    assert to_base_units(("<newton>",), ("<1>",), ureg) == (
        1, ("<kilogram>", "<meter>"), ("<second>", "<second>")
    )


def test_to_base_units_drops_unity(ureg):
    factor, num, den = to_base_units(("<1>",), ("<second>",), ureg)
    assert factor == 1 and num == () and den == ("<second>",)


def test_to_base_units_is_cached(ureg):
    a = to_base_units(("<centi>", "<meter>"), ("<second>",), ureg)
    b = to_base_units(("<centi>", "<meter>"), ("<second>",), ureg)
    assert a is b
