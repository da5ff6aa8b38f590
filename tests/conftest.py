# tests/conftest.py
import pytest
from quantitas.units.registry import DEFAULT_REGISTRY as _ureg
from quantitas.units.registry import _bootstrap_default_registry


@pytest.fixture(scope="session")
def ureg():
    return _ureg


@pytest.fixture
def fresh_registry():
    return _bootstrap_default_registry()
