"""Run-time dimensional analysis: quantities, units, and unit-expression text."""

from __future__ import annotations

__version__ = "1.4.0"

from physunits.core import (
    DIMENSIONLESS,
    BadQuantityCastError,
    Dimension,
    DimensionError,
    IncompatibleDimensionError,
    PrefixError,
    Quantity,
    QuantityError,
    QuantityParserError,
    UnitError,
    absolute,
    cube,
    nth_power,
    nth_root,
    quantity_cast,
    sqrt,
    square,
    to_integer,
    to_real,
)
from physunits.io import (
    EngFormat,
    ParseResult,
    QuantityParser,
    to_base_unit_symbols,
    to_eng_magnitude,
    to_eng_string,
    to_eng_unit,
    to_numerical_value,
    to_quantity,
    to_string,
    to_unit,
)
from physunits.registry import (
    EXTENSION_CAPACITY,
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
from physunits.schemas import ParserOptions

__all__ = [
    "DIMENSIONLESS",
    "EXTENSION_CAPACITY",
    "BadQuantityCastError",
    "Dimension",
    "DimensionError",
    "EngFormat",
    "IncompatibleDimensionError",
    "ParseResult",
    "ParserOptions",
    "PrefixError",
    "Quantity",
    "QuantityError",
    "QuantityParser",
    "QuantityParserError",
    "UnitError",
    "UnitRegistry",
    "__version__",
    "absolute",
    "cube",
    "default_registry",
    "define_unit_name",
    "has_prefix",
    "has_unit_name",
    "nth_power",
    "nth_root",
    "prefix",
    "quantity_cast",
    "sqrt",
    "square",
    "to_base_unit_symbols",
    "to_eng_magnitude",
    "to_eng_string",
    "to_eng_unit",
    "to_integer",
    "to_numerical_value",
    "to_quantity",
    "to_real",
    "to_string",
    "to_unit",
    "unit",
    "unit_name",
    "unit_symbol",
]
