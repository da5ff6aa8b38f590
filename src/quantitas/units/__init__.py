from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantitas.units.registry import UnitsRegistry
# Lazy access helpers -------------------------------------------------------

_LAZY = ("DEFAULT_REGISTRY", "UnitsRegistry", "extract_quantity", "parse_units")


def _get_default_registry() -> "UnitsRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from quantitas.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. The default registry is only built the first time
    one of the public names is touched.
    """
    if name == "DEFAULT_REGISTRY":
        return _get_default_registry()
    if name == "UnitsRegistry":
        from quantitas.units.registry import UnitsRegistry
        return UnitsRegistry
    if name in ("extract_quantity", "parse_units"):
        from quantitas.units import parser
        return getattr(parser, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_LAZY))
