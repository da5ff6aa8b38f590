from decimal import Decimal

import pytest

from quantitas.core.quantity import Quantity
from quantitas.exceptions import IncompatibleUnitsError, TemperatureOperationError
from tests.utils import _close


# -------------------------------
# Absolute conversions
# -------------------------------

@pytest.mark.parametrize(
    "text, target, expected",
    [
        ("32 tempF", "tempC", "0"),
        ("500 tempF", "tempC", "260"),
        ("500 tempK", "tempC", "226.85"),
        ("500 tempK", "tempR", "900"),
        ("100 tempC", "tempF", "212"),
        ("0 tempC", "tempK", "273.15"),
        ("491.67 tempR", "tempF", "32"),
    ],
)
def test_temperature_conversion(text, target, expected):
    q = Quantity(text).to(target)
    assert q.scalar == Decimal(expected)
    assert q.units() == target
    assert q.is_temperature()


@pytest.mark.regression(reason="Offsets are applied exactly, no binary float residue")
def test_fahrenheit_to_celsius_is_exact():
    assert repr(Quantity("500 tempF").to("tempC")) == "260 tempC"


def test_to_base_is_kelvin():
    b = Quantity("0 tempC").to_base()
    assert b.units() == "tempK"
    assert b.scalar == Decimal("273.15")


@pytest.mark.parametrize("text", ["-1 tempK", "-300 tempC", "-500 tempF", "-1 tempR"])
def test_below_absolute_zero_raises(text):
    with pytest.raises(TemperatureOperationError):
        Quantity(text)


@pytest.mark.parametrize("text", ["5 tempK/s", "5 s/tempK", "5 tempK*m", "5 tempC^2"])
def test_temperatures_cannot_be_compounded(text):
    with pytest.raises(TemperatureOperationError):
        Quantity(text)


def test_degrees_may_be_negative_and_compounded():
    assert Quantity("-40 degC").scalar == -40
    assert Quantity("5 degC/s").units() == "degC/s"


# -------------------------------
# Degree conversions
# -------------------------------

def test_degree_conversion():
    assert Quantity("10 degC").to("degF").scalar == 18
    assert _close(Quantity("18 degF").to("degC").scalar, 10)
    assert Quantity("10 degK").to("degR").scalar == 18


def test_temperature_to_degrees_uses_scale_size_only():
    assert Quantity("300 tempK").to("degC").same("300 degC")
    assert Quantity("9 tempF").to("degC").scalar == 5


# -------------------------------
# Arithmetic
# -------------------------------

def test_temperature_plus_degrees():
    assert Quantity("20 tempC").add("5 degC").same("25 tempC")
    assert _close(Quantity("20 tempC").add("9 degF").scalar, 25)
    assert (Quantity("5 degC") + Quantity("20 tempC")).same("25 tempC")


def test_temperature_minus_degrees():
    assert (Quantity("30 tempC") - Quantity("5 degC")).same("25 tempC")


def test_temperature_difference_is_degrees():
    d = Quantity("30 tempC") - Quantity("10 tempC")
    assert d.same("20 degC")
    assert d.is_degrees() and not d.is_temperature()


def test_temperature_difference_converts_right_operand():
    assert (Quantity("30 tempC") - Quantity("50 tempF")).same("20 degC")


def test_adding_temperatures_raises():
    with pytest.raises(TemperatureOperationError):
        Quantity("20 tempC") + Quantity("5 tempC")


def test_degrees_minus_temperature_raises():
    with pytest.raises(TemperatureOperationError):
        Quantity("5 degC") - Quantity("20 tempC")


def test_temperature_plus_length_raises():
    with pytest.raises(IncompatibleUnitsError):
        Quantity("20 tempC") + Quantity("5 m")


# -------------------------------
# Comparison
# -------------------------------

def test_temperatures_compare_in_kelvin():
    assert Quantity("0 tempC") == Quantity("32 tempF")
    assert Quantity("300 tempK").gt("0 tempC")
    assert Quantity("0 tempF") < Quantity("0 tempC")
