from __future__ import annotations

import math
from dataclasses import dataclass

from physunits.core.dimension import MASS
from physunits.core.quantity import Quantity
from physunits.io.output import _join
from physunits.registry.prefixes import ENG_EXPONENT_MAX, ENG_EXPONENT_MIN, ENG_PREFIX_GLYPHS
from physunits.registry.unit_registry import UnitRegistry, default_registry

_MICRO_INDEX = ENG_PREFIX_GLYPHS.index("µ")

# Largest power of ten applied in one step; 10.0**309 overflows.
_MAX_SHIFT = 300


def _shift(value: float, power: int) -> float:
    """value * 10**power, dividing for negative powers to keep the result exact."""
    while power > _MAX_SHIFT:
        value *= 10.0**_MAX_SHIFT
        power -= _MAX_SHIFT
    while power < -_MAX_SHIFT:
        value /= 10.0**_MAX_SHIFT
        power += _MAX_SHIFT
    if power >= 0:
        return value * 10.0**power
    return value / 10.0**-power


@dataclass(frozen=True)
class EngNotation:
    magnitude: str
    unit: str

    def __str__(self) -> str:
        return _join(self.magnitude, self.unit)


@dataclass(frozen=True)
class EngFormat:
    """Engineering notation: exponent a multiple of 3, shown as an SI prefix.

    Quantities without a single display name, mass quantities (kg already
    carries a prefix) and exponents outside y..Y keep the exponent as an
    explicit ``e<n>`` suffix instead of a prefix glyph.
    """

    digits: int = 6
    showpos: bool = False
    micro_glyph: str = "µ"
    fixed: bool = False

    def __post_init__(self) -> None:
        if self.digits < 1:
            raise ValueError("digits must be at least 1")

    def _glyph(self, exponent: int) -> str:
        index = (exponent - ENG_EXPONENT_MIN) // 3
        if index == _MICRO_INDEX:
            return self.micro_glyph
        return ENG_PREFIX_GLYPHS[index]

    def _number(self, value: float, digits: int) -> str:
        if self.fixed:
            return f"{value:.{max(digits - 1, 0)}f}"
        return f"{value:.{max(self.digits, 3)}g}"

    def notation(self, q: Quantity, registry: UnitRegistry | None = None) -> EngNotation:
        registry = registry or default_registry()
        symbol = registry.unit_symbol(q.dimension, prefer_name=True)
        value = q.value
        if value < 0.0:
            sign, value = "-", -value
        else:
            sign = "+" if self.showpos else ""

        if not math.isfinite(value):
            return EngNotation(f"{sign}{value:g}", symbol)

        digits = self.digits
        exponent = 0
        if value > 0.0:
            exponent = math.floor(math.log10(value))
            value = _shift(value, digits - 1 - exponent)
            fraction, display = math.modf(value)
            if fraction >= 0.5:
                display += 1.0
            value = _shift(display, exponent - digits + 1)

        exponent = 3 * (exponent // 3)
        value = _shift(value, -exponent)
        if value >= 1000.0:
            value /= 1000.0
            exponent += 3
        elif value >= 100.0:
            digits -= 2
        elif value >= 10.0:
            digits -= 1

        fits = (
            q.dimension != MASS
            and registry.has_unit_name(q.dimension)
            and ENG_EXPONENT_MIN <= exponent <= ENG_EXPONENT_MAX
        )
        if fits:
            return EngNotation(f"{sign}{self._number(value, digits)}", self._glyph(exponent) + symbol)
        return EngNotation(f"{sign}{self._number(value, digits)}e{exponent}", symbol)

    def format(self, q: Quantity, registry: UnitRegistry | None = None) -> str:
        return str(self.notation(q, registry))


def to_eng_magnitude(
    q: Quantity,
    digits: int = 6,
    showpos: bool = False,
    registry: UnitRegistry | None = None,
) -> str:
    return EngFormat(digits=digits, showpos=showpos).notation(q, registry).magnitude


def to_eng_unit(q: Quantity, registry: UnitRegistry | None = None) -> str:
    return EngFormat().notation(q, registry).unit


def to_eng_string(
    q: Quantity,
    digits: int = 6,
    showpos: bool = False,
    registry: UnitRegistry | None = None,
) -> str:
    return EngFormat(digits=digits, showpos=showpos).format(q, registry)


__all__ = [
    "EngFormat",
    "EngNotation",
    "to_eng_magnitude",
    "to_eng_string",
    "to_eng_unit",
]
