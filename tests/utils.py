# tests/utils.py
from decimal import Decimal

from quantitas.core.quantity import Quantity


def _scalar(text: str, target: str) -> Decimal:
    """Scalar of ``text`` converted to ``target`` units."""
    return Quantity(text).to(target).scalar


def _close(value: Decimal, expected, rel: float = 1e-12) -> bool:
    return abs(float(value) - float(expected)) <= rel * max(abs(float(expected)), 1.0)
