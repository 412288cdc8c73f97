"""Dimension algebra and dimension-checked quantity arithmetic."""

from .dimension import (
    BASE_COUNT,
    DIMENSION_SIZE,
    DIMENSIONLESS,
    EXTENSION_COUNT,
    Dimension,
    SIBase,
)
from .errors import (
    BadQuantityCastError,
    DimensionError,
    IncompatibleDimensionError,
    PrefixError,
    QuantityError,
    QuantityParserError,
    UnitError,
)
from .quantity import (
    Quantity,
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

__all__ = [
    "BASE_COUNT",
    "DIMENSIONLESS",
    "DIMENSION_SIZE",
    "EXTENSION_COUNT",
    "BadQuantityCastError",
    "Dimension",
    "DimensionError",
    "IncompatibleDimensionError",
    "PrefixError",
    "Quantity",
    "QuantityError",
    "QuantityParserError",
    "SIBase",
    "UnitError",
    "absolute",
    "cube",
    "nth_power",
    "nth_root",
    "quantity_cast",
    "sqrt",
    "square",
    "to_integer",
    "to_real",
]
