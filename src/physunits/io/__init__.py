"""Text input and output of quantities."""

from .engineering import EngFormat, EngNotation, to_eng_magnitude, to_eng_string, to_eng_unit
from .output import to_base_unit_symbols, to_magnitude, to_string, to_unit_symbol
from .parser import ParseResult, QuantityParser, to_numerical_value, to_quantity, to_unit

__all__ = [
    "EngFormat",
    "EngNotation",
    "ParseResult",
    "QuantityParser",
    "to_base_unit_symbols",
    "to_eng_magnitude",
    "to_eng_string",
    "to_eng_unit",
    "to_magnitude",
    "to_numerical_value",
    "to_quantity",
    "to_string",
    "to_unit",
    "to_unit_symbol",
]
