import pytest

from quantitas.core.quantity import Quantity
from quantitas.core.unit_simplifier import (
    UNITY_UNITS,
    clean_terms,
    output_names,
    simplify,
    stringify_units,
)

M, S, KG, KILO = "<meter>", "<second>", "<kilogram>", "<kilo>"


# --- clean_terms ---

def test_cancels_single_term(ureg):
    assert clean_terms((M, M), (M,), ureg) == ((M,), UNITY_UNITS)


def test_full_cancellation_gives_unity_on_both_sides(ureg):
    assert clean_terms((M, S), (S, M), ureg) == (UNITY_UNITS, UNITY_UNITS)


def test_prefixed_pair_cancels_as_one_term(ureg):
    # km*m/km -> m, the bare meter is a different term from the kilometer
    assert clean_terms((KILO, M, M), (KILO, M), ureg) == ((M,), UNITY_UNITS)


def test_prefixed_pair_does_not_cancel_bare_unit(ureg):
    assert clean_terms((KILO, M), (M,), ureg) == ((KILO, M), (M,))


def test_unity_tokens_are_dropped(ureg):
    assert clean_terms(("<1>", S), ("<1>",), ureg) == ((S,), UNITY_UNITS)


def test_net_negative_moves_to_denominator_in_first_seen_order(ureg):
    num, den = clean_terms((M,), (S, S, M, M), ureg)
    assert num == UNITY_UNITS
    assert den == (M, S, S)


# --- rendering ---

def test_output_names_fuse_prefixes(ureg):
    assert output_names((KILO, M, S), ureg) == ["km", "s"]


def test_simplify_counts_in_first_seen_order():
    assert simplify(["s", "m", "s"]) == ["s2", "m"]
    assert simplify(["kg"]) == ["kg"]


def test_stringify_units(ureg):
    assert stringify_units(UNITY_UNITS, ureg) == "1"
    assert stringify_units((S, M, S), ureg) == "s2*m"
    assert stringify_units((KG, M), ureg) == "kg*m"


@pytest.mark.regression(reason="Terms repeated on both sides of a parsed string cancel")
def test_parsed_string_is_cleaned():
    assert Quantity("m*m/m").units() == "m"
    assert Quantity("5 km*s/km").units() == "s"
