from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

YOTTA = 1e24
ZETTA = 1e21
EXA = 1e18
PETA = 1e15
TERA = 1e12
GIGA = 1e9
MEGA = 1e6
KILO = 1e3
HECTO = 1e2
DEKA = 1e1
DECA = DEKA
DECI = 1e-1
CENTI = 1e-2
MILLI = 1e-3
MICRO = 1e-6
NANO = 1e-9
PICO = 1e-12
FEMTO = 1e-15
ATTO = 1e-18
ZEPTO = 1e-21
YOCTO = 1e-24

KIBI = 1024.0
MEBI = 1024 * KIBI
GIBI = 1024 * MEBI
TEBI = 1024 * GIBI
PEBI = 1024 * TEBI
EXBI = 1024 * PEBI
ZEBI = 1024 * EXBI
YOBI = 1024 * ZEBI

# Prefix codes the parser recognises. "u" stands in for micro.
PREFIX_CODES: Mapping[str, float] = MappingProxyType(
    {
        "m": MILLI,
        "k": KILO,
        "u": MICRO,
        "M": MEGA,
        "n": NANO,
        "G": GIGA,
        "p": PICO,
        "T": TERA,
        "f": FEMTO,
        "P": PETA,
        "a": ATTO,
        "E": EXA,
        "z": ZEPTO,
        "Z": ZETTA,
        "y": YOCTO,
        "Y": YOTTA,
        "h": HECTO,
        "da": DEKA,
        "d": DECI,
        "c": CENTI,
    }
)

# Engineering-notation glyphs for exponents -24, -21, ..., 24.
ENG_PREFIX_GLYPHS: tuple[str, ...] = (
    "y", "z", "a", "f", "p", "n", "µ", "m", "", "k", "M", "G", "T", "P", "E", "Z", "Y",
)
ENG_EXPONENT_MIN = -24
ENG_EXPONENT_MAX = 24


__all__ = [
    "ATTO",
    "CENTI",
    "DECA",
    "DECI",
    "DEKA",
    "ENG_EXPONENT_MAX",
    "ENG_EXPONENT_MIN",
    "ENG_PREFIX_GLYPHS",
    "EXA",
    "EXBI",
    "FEMTO",
    "GIBI",
    "GIGA",
    "HECTO",
    "KIBI",
    "KILO",
    "MEBI",
    "MEGA",
    "MICRO",
    "MILLI",
    "NANO",
    "PEBI",
    "PETA",
    "PICO",
    "PREFIX_CODES",
    "TEBI",
    "TERA",
    "YOBI",
    "YOCTO",
    "YOTTA",
    "ZEBI",
    "ZEPTO",
    "ZETTA",
]
