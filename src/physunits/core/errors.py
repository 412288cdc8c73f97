from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from physunits.core.dimension import Dimension

E_QUANTITY = "E_QUANTITY"
E_DIMENSION = "E_DIMENSION"
E_DIMENSION_INCOMPATIBLE = "E_DIMENSION_INCOMPATIBLE"
E_PREFIX_UNKNOWN = "E_PREFIX_UNKNOWN"
E_UNIT_UNKNOWN = "E_UNIT_UNKNOWN"
E_UNIT_TABLE_FULL = "E_UNIT_TABLE_FULL"
E_BAD_QUANTITY_CAST = "E_BAD_QUANTITY_CAST"
E_PARSE = "E_PARSE"


class QuantityError(ValueError):
    """Base class of every error raised by physunits."""

    default_code = E_QUANTITY

    def __init__(self, message: str, code: str | None = None) -> None:
        self.code = code or self.default_code
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class DimensionError(QuantityError):
    default_code = E_DIMENSION


class IncompatibleDimensionError(DimensionError):
    default_code = E_DIMENSION_INCOMPATIBLE

    def __init__(self, operator: str, lhs: Dimension, rhs: Dimension) -> None:
        self.operator = operator
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(
            f"quantity: incompatible dimension in {operator}: lhs:{lhs}, rhs:{rhs}"
        )


class PrefixError(QuantityError):
    default_code = E_PREFIX_UNKNOWN

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(f"quantity: unrecognized prefix '{prefix}'")


class UnitError(QuantityError):
    default_code = E_UNIT_UNKNOWN

    def __init__(self, name: str, message: str | None = None, code: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"quantity: undefined unit '{name}'", code)


class BadQuantityCastError(QuantityError):
    default_code = E_BAD_QUANTITY_CAST


class QuantityParserError(QuantityError):
    """Syntax error in a unit expression.

    ``text`` is the whitespace-stripped input and ``position`` the 1-based
    column of the character the scanner stopped at.
    """

    default_code = E_PARSE

    def __init__(self, message: str, text: str, position: int) -> None:
        self.text = text
        self.position = position
        super().__init__(message)

    def caret(self) -> str:
        return " " * max(self.position - 1, 0) + "^"


__all__ = [
    "E_BAD_QUANTITY_CAST",
    "E_DIMENSION",
    "E_DIMENSION_INCOMPATIBLE",
    "E_PARSE",
    "E_PREFIX_UNKNOWN",
    "E_QUANTITY",
    "E_UNIT_TABLE_FULL",
    "E_UNIT_UNKNOWN",
    "BadQuantityCastError",
    "DimensionError",
    "IncompatibleDimensionError",
    "PrefixError",
    "QuantityError",
    "QuantityParserError",
    "UnitError",
]
