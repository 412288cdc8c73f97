from __future__ import annotations

from physunits.core.quantity import Quantity
from physunits.registry.unit_registry import UnitRegistry, default_registry


def _join(magnitude: str, symbol: str) -> str:
    if not symbol:
        return magnitude
    return f"{magnitude} {symbol}"


def to_magnitude(q: Quantity) -> str:
    return f"{q.value:g}"


def to_unit_symbol(q: Quantity, registry: UnitRegistry | None = None) -> str:
    """Display name of the whole dimension when one exists, else base-unit terms."""
    registry = registry or default_registry()
    return registry.unit_symbol(q.dimension, prefer_name=True)


def to_base_unit_symbols(q: Quantity, registry: UnitRegistry | None = None) -> str:
    registry = registry or default_registry()
    return registry.unit_symbol(q.dimension)


def to_string(q: Quantity, registry: UnitRegistry | None = None) -> str:
    return _join(to_magnitude(q), to_unit_symbol(q, registry))


__all__ = [
    "to_base_unit_symbols",
    "to_magnitude",
    "to_string",
    "to_unit_symbol",
]
