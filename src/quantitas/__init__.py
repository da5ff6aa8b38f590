"""
Quantitas: exact physical quantities with units for Python.

Quantitas parses strings such as ``"5.6 kg*m/s^2"`` or ``"37 degC"`` into
quantities with an exact decimal scalar, checks dimensional compatibility,
and converts between units, including the offset-based temperature scales.
This module exposes a minimal, stable public API. Heavy subsystems (e.g. the
units registry) are imported lazily to avoid import-time side effects and
circular imports.
"""

from importlib import metadata as _metadata


__license__ = "MIT"

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("quantitas")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__license__", "Quantity", "QuantityDefinition", "DEFAULT_REGISTRY"]

from typing import Any


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Importing `quantitas` does not build the registry;
    the first access to one of the public names does.
    """
    if name in ("Quantity", "QuantityDefinition"):
        from quantitas.core import quantity
        return getattr(quantity, name)
    if name == "DEFAULT_REGISTRY":
        from quantitas.units import _get_default_registry
        return _get_default_registry()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["Quantity", "QuantityDefinition", "DEFAULT_REGISTRY"])
