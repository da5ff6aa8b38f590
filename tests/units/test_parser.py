from decimal import Decimal

import pytest

from quantitas.exceptions import (
    EmptyInputError,
    InvalidExponentError,
    QuantityParseError,
    UnrecognizedQuantityError,
    UnrecognizedUnitError,
)
from quantitas.units.parser import extract_quantity, parse_units

KG, M, S = "<kilogram>", "<meter>", "<second>"


# --- Basic structure ---

@pytest.mark.parametrize(
    "text",
    ["5.6 kg*m/s^2", "5.6 kg*m*s^-2", "5.6 kilogram*meter*second^-2", "5.6 kg m/s2", "5.6 kg.m/s**2"],
)
def test_equivalent_spellings(text, ureg):
    assert extract_quantity(text, ureg) == (Decimal("5.6"), (KG, M), (S, S))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2.2 kPa", (Decimal("2.2"), ("<kilo>", "<pascal>"), ())),
        ("37 degC", (Decimal(37), ("<celsius>",), ())),
        ("GPa", (Decimal(1), ("<giga>", "<pascal>"), ())),
        ("1", (Decimal(1), (), ())),
        ("3 mm", (Decimal(3), ("<milli>", M), ())),
        ("10 min", (Decimal(10), ("<minute>",), ())),
        ("1 km/h", (Decimal(1), ("<kilo>", M), ("<hour>",))),
    ],
)
def test_extract_quantity(text, expected, ureg):
    assert extract_quantity(text, ureg) == expected


# --- Scalars ---

@pytest.mark.parametrize(
    "text, scalar",
    [
        ("-  5 m", Decimal(-5)),
        ("+2 m", Decimal(2)),
        (".5 m", Decimal("0.5")),
        ("1.5e3 m", Decimal(1500)),
        ("2E-3 m", Decimal("0.002")),
        ("m", Decimal(1)),
        ("  7  ", Decimal(7)),
    ],
)
def test_scalars(text, scalar, ureg):
    assert extract_quantity(text, ureg)[0] == scalar


# --- Exponents ---

@pytest.mark.parametrize(
    "text, num, den",
    [
        ("m2", (M, M), ()),
        ("m**2", (M, M), ()),
        ("m^+2", (M, M), ()),
        ("kg/m^3", (KG,), (M, M, M)),
        ("s^-1", (), (S,)),
        ("5 m^0", (), ()),
        ("kg m^-2/s", (KG,), (S, M, M)),
    ],
)
def test_exponents(text, num, den, ureg):
    _, n, d = extract_quantity(text, ureg)
    assert (n, d) == (num, den)


@pytest.mark.regression(reason="Only negative exponents leave whitespace in the numerator")
def test_all_negative_numerator(ureg):
    assert extract_quantity("5 m^-1 s^-1", ureg) == (Decimal(5), (), (M, S))


@pytest.mark.regression(reason="Digits inside a unit name are not an exponent")
def test_digit_inside_unit_name(ureg):
    assert extract_quantity("10 cmH2O", ureg) == (Decimal(10), ("<cmh2o>",), ())
    assert extract_quantity("1/cmH2O", ureg) == (Decimal(1), (), ("<cmh2o>",))


# --- Errors ---

@pytest.mark.parametrize(
    "text, error",
    [
        ("", EmptyInputError),
        ("   ", EmptyInputError),
        ("5 m/", UnrecognizedQuantityError),
        ("5 furlongz", UnrecognizedUnitError),
        ("5 m//s", UnrecognizedUnitError),
        ("5 foo^0", UnrecognizedUnitError),
        ("5 m^1.5", InvalidExponentError),
        ("5 m/s^2.5", InvalidExponentError),
    ],
)
def test_parse_errors(text, error, ureg):
    with pytest.raises(error):
        extract_quantity(text, ureg)
    with pytest.raises(QuantityParseError):
        extract_quantity(text, ureg)
    with pytest.raises(ValueError):
        extract_quantity(text, ureg)


def test_non_string_input(ureg):
    with pytest.raises(TypeError):
        extract_quantity(5, ureg)


# --- parse_units ---

def test_parse_units(ureg):
    assert parse_units("s m s", ureg) == (S, M, S)
    assert parse_units("km", ureg) == ("<kilo>", M)
    assert parse_units("kg.m*s", ureg) == (KG, M, S)
    assert parse_units("\u03bcm", ureg) == ("<micro>", M)


def test_parse_units_is_cached(ureg):
    assert parse_units("kg m", ureg) is parse_units("kg m", ureg)


def test_parse_units_rejects_unknown(ureg):
    with pytest.raises(UnrecognizedUnitError):
        parse_units("m furlongz", ureg)
