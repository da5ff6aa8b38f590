import pytest

import quantitas.units.registry as regmod


def test__get_default_registry_returns_DEFAULT(monkeypatch, fresh_registry):
    # Patch the DEFAULT_REGISTRY and verify the helper returns it
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", fresh_registry, raising=True)

    import quantitas.units as units
    assert units._get_default_registry() is fresh_registry
    assert units.DEFAULT_REGISTRY is fresh_registry


def test_lazy_names_resolve():
    import quantitas.units as units
    from quantitas.units import parser

    assert units.UnitsRegistry is regmod.UnitsRegistry
    assert units.extract_quantity is parser.extract_quantity
    assert units.parse_units is parser.parse_units


def test_dir_lists_lazy_names():
    import quantitas.units as units

    for name in ("DEFAULT_REGISTRY", "UnitsRegistry", "extract_quantity", "parse_units"):
        assert name in dir(units)


def test_unknown_module_attribute_raises_attributeerror():
    import quantitas.units as units

    with pytest.raises(AttributeError):
        _ = units.nope


def test_package_exports():
    import quantitas
    from quantitas.core import quantity

    assert quantitas.Quantity is quantity.Quantity
    assert quantitas.QuantityDefinition is quantity.QuantityDefinition
    assert quantitas.DEFAULT_REGISTRY is regmod.DEFAULT_REGISTRY
    with pytest.raises(AttributeError):
        _ = quantitas.nope
