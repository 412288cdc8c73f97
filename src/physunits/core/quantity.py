from __future__ import annotations

import math
from numbers import Real

from physunits.core.dimension import DIMENSIONLESS, Dimension
from physunits.core.errors import BadQuantityCastError, IncompatibleDimensionError


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: x/0 is a signed infinity, 0/0 is NaN."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _power(value: float, n: int) -> float:
    try:
        return value**n
    except (OverflowError, ZeroDivisionError):
        # overflow, or zero to a negative power
        if n % 2:
            return math.copysign(math.inf, value)
        return math.inf


def _root(value: float, n: int) -> float:
    if value < 0.0:
        return math.nan
    if value == 0.0 and n < 0:
        return math.inf
    try:
        return math.pow(value, 1.0 / n)
    except OverflowError:
        return math.inf


class Quantity:
    """A magnitude paired with the Dimension it is measured in.

    Addition, subtraction, comparison and the checked compound assignments
    require both operands to share a Dimension and raise
    ``IncompatibleDimensionError`` otherwise. Multiplication and division
    combine dimensions.
    """

    __slots__ = ("_dimension", "_value")

    def __init__(self, dimension: Dimension = DIMENSIONLESS, value: float = 0.0) -> None:
        if not isinstance(dimension, Dimension):
            raise TypeError("dimension must be a Dimension")
        self._dimension = dimension
        self._value = float(value)

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    @property
    def value(self) -> float:
        return self._value

    def same_dimension(self, other: Quantity) -> bool:
        return self._dimension == other._dimension

    def check_dimension(self, other: Quantity, operator: str) -> None:
        if not self.same_dimension(other):
            raise IncompatibleDimensionError(operator, self._dimension, other._dimension)

    def zero(self) -> Quantity:
        return Quantity(self._dimension, 0.0)

    def _checked(self, other: object, operator: str) -> Quantity | None:
        if not isinstance(other, Quantity):
            return None
        self.check_dimension(other, operator)
        return other

    def __add__(self, other: object) -> Quantity:
        rhs = self._checked(other, "operator+")
        if rhs is None:
            return NotImplemented
        return Quantity(self._dimension, self._value + rhs._value)

    def __iadd__(self, other: object) -> Quantity:
        rhs = self._checked(other, "operator+=")
        if rhs is None:
            return NotImplemented
        return Quantity(self._dimension, self._value + rhs._value)

    def __sub__(self, other: object) -> Quantity:
        rhs = self._checked(other, "operator-")
        if rhs is None:
            return NotImplemented
        return Quantity(self._dimension, self._value - rhs._value)

    def __isub__(self, other: object) -> Quantity:
        rhs = self._checked(other, "operator-=")
        if rhs is None:
            return NotImplemented
        return Quantity(self._dimension, self._value - rhs._value)

    def __mul__(self, other: object) -> Quantity:
        if isinstance(other, Quantity):
            return Quantity(self._dimension.product(other._dimension), self._value * other._value)
        if isinstance(other, Real):
            return Quantity(self._dimension, self._value * float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Quantity:
        if isinstance(other, Real):
            return Quantity(self._dimension, float(other) * self._value)
        return NotImplemented

    def __truediv__(self, other: object) -> Quantity:
        if isinstance(other, Quantity):
            return Quantity(
                self._dimension.quotient(other._dimension), _divide(self._value, other._value)
            )
        if isinstance(other, Real):
            return Quantity(self._dimension, _divide(self._value, float(other)))
        return NotImplemented

    def __rtruediv__(self, other: object) -> Quantity:
        if isinstance(other, Real):
            return Quantity(self._dimension.reciprocal(), _divide(float(other), self._value))
        return NotImplemented

    def __pow__(self, n: int) -> Quantity:
        return nth_power(self, n)

    def __pos__(self) -> Quantity:
        return Quantity(self._dimension, self._value)

    def __neg__(self) -> Quantity:
        return Quantity(self._dimension, -self._value)

    def __abs__(self) -> Quantity:
        return absolute(self)

    def __eq__(self, other: object) -> bool:
        rhs = self._checked(other, "operator==")
        if rhs is None:
            return NotImplemented
        return self._value == rhs._value

    def __ne__(self, other: object) -> bool:
        rhs = self._checked(other, "operator!=")
        if rhs is None:
            return NotImplemented
        return self._value != rhs._value

    def __le__(self, other: object) -> bool:
        rhs = self._checked(other, "operator<=")
        if rhs is None:
            return NotImplemented
        return self._value <= rhs._value

    def __ge__(self, other: object) -> bool:
        rhs = self._checked(other, "operator>=")
        if rhs is None:
            return NotImplemented
        return self._value >= rhs._value

    def __lt__(self, other: object) -> bool:
        rhs = self._checked(other, "operator<")
        if rhs is None:
            return NotImplemented
        return self._value < rhs._value

    def __gt__(self, other: object) -> bool:
        rhs = self._checked(other, "operator>")
        if rhs is None:
            return NotImplemented
        return self._value > rhs._value

    def __float__(self) -> float:
        return quantity_cast(self, float)

    def __int__(self) -> int:
        return quantity_cast(self, int)

    def __repr__(self) -> str:
        return f"Quantity(value={self._value!r}, dimension=({self._dimension}))"

    def __str__(self) -> str:
        from physunits.io.output import to_string

        return to_string(self)


def absolute(q: Quantity) -> Quantity:
    return Quantity(q.dimension, abs(q.value))


def nth_power(q: Quantity, n: int) -> Quantity:
    return Quantity(q.dimension.power(n), _power(q.value, n))


def square(q: Quantity) -> Quantity:
    return q * q


def cube(q: Quantity) -> Quantity:
    return q * q * q


def nth_root(q: Quantity, n: int) -> Quantity:
    dimension = q.dimension.root(n)
    value = q.value
    if value < 0.0 and n % 2:
        return Quantity(dimension, -_root(-value, n))
    return Quantity(dimension, _root(value, n))


def sqrt(q: Quantity) -> Quantity:
    return nth_root(q, 2)


def quantity_cast(q: Quantity, kind: type = float):
    if not q.dimension.is_all_zero():
        raise BadQuantityCastError(
            f"quantity: cast quantity to '{kind.__name__}': quantity must be dimensionless"
        )
    return kind(q.value)


def to_real(q: Quantity) -> float:
    return quantity_cast(q, float)


def to_integer(q: Quantity) -> int:
    return quantity_cast(q, int)


__all__ = [
    "Quantity",
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
