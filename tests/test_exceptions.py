import pytest

from quantitas import exceptions as exc


@pytest.mark.parametrize(
    "cls, builtin",
    [
        (exc.QuantityParseError, ValueError),
        (exc.EmptyInputError, ValueError),
        (exc.UnrecognizedQuantityError, ValueError),
        (exc.UnrecognizedUnitError, ValueError),
        (exc.InvalidExponentError, ValueError),
        (exc.IncompatibleUnitsError, TypeError),
        (exc.TemperatureOperationError, ValueError),
        (exc.DivisionByZeroError, ZeroDivisionError),
        (exc.FractionalPowerUnsupportedError, ValueError),
    ],
)
def test_errors_share_base_and_builtin(cls, builtin):
    assert issubclass(cls, exc.QuantityError)
    assert issubclass(cls, builtin)


def test_parse_errors_group_under_quantity_parse_error():
    for cls in (exc.EmptyInputError, exc.UnrecognizedQuantityError,
                exc.UnrecognizedUnitError, exc.InvalidExponentError):
        assert issubclass(cls, exc.QuantityParseError)


def test_all_lists_every_exception():
    names = {n for n in dir(exc) if n.endswith("Error")}
    assert names == set(exc.__all__)
