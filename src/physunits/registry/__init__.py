"""Metric prefixes, unit definitions and the unit-name registry."""

from .unit_registry import (
    EXTENSION_CAPACITY,
    PREDEFINED_UNITS,
    ExtensionUnit,
    UnitRegistry,
    default_registry,
    define_unit_name,
    has_prefix,
    has_unit_name,
    prefix,
    unit,
    unit_name,
    unit_symbol,
)

__all__ = [
    "EXTENSION_CAPACITY",
    "PREDEFINED_UNITS",
    "ExtensionUnit",
    "UnitRegistry",
    "default_registry",
    "define_unit_name",
    "has_prefix",
    "has_unit_name",
    "prefix",
    "unit",
    "unit_name",
    "unit_symbol",
]
