"""SI units, the units accepted for use with SI, and handy scalars (NIST SP 811)."""

from __future__ import annotations

import math

from physunits.core.dimension import (
    AMOUNT_OF_SUBSTANCE,
    DIMENSIONLESS,
    ELECTRIC_CURRENT,
    EXTRA_DIMENSIONS,
    LENGTH,
    LUMINOUS_INTENSITY,
    MASS,
    THERMODYNAMIC_TEMPERATURE,
    TIME_INTERVAL,
)
from physunits.core.quantity import Quantity, cube, square
from physunits.registry.prefixes import MICRO

PI = math.pi
PERCENT = 1 / 100

NUMBER = Quantity(DIMENSIONLESS, 1.0)
METER = Quantity(LENGTH, 1.0)
KILOGRAM = Quantity(MASS, 1.0)
SECOND = Quantity(TIME_INTERVAL, 1.0)
AMPERE = Quantity(ELECTRIC_CURRENT, 1.0)
KELVIN = Quantity(THERMODYNAMIC_TEMPERATURE, 1.0)
MOLE = Quantity(AMOUNT_OF_SUBSTANCE, 1.0)
CANDELA = Quantity(LUMINOUS_INTENSITY, 1.0)

EXTRA_UNITS: tuple[Quantity, ...] = tuple(Quantity(dim, 1.0) for dim in EXTRA_DIMENSIONS)

# Not approved for use alone, needed for use with prefixes.
GRAM = KILOGRAM / 1000

RADIAN = 1.0
STERADIAN = 1.0
NEWTON = METER * KILOGRAM / square(SECOND)
PASCAL = NEWTON / square(METER)
JOULE = NEWTON * METER
WATT = JOULE / SECOND
COULOMB = SECOND * AMPERE
VOLT = WATT / AMPERE
FARAD = COULOMB / VOLT
OHM = VOLT / AMPERE
SIEMENS = AMPERE / VOLT
WEBER = VOLT * SECOND
TESLA = WEBER / square(METER)
HENRY = WEBER / AMPERE
DEGREE_CELSIUS = KELVIN
LUMEN = CANDELA * STERADIAN
LUX = LUMEN / METER / METER
BECQUEREL = 1 / SECOND
GRAY = JOULE / KILOGRAM
SIEVERT = JOULE / KILOGRAM
HERTZ = 1 / SECOND

ANGSTROM = 1e-10 * METER
ARE = 1e2 * square(METER)
BAR = 1e5 * PASCAL
BARN = 1e-28 * square(METER)
CURIE = 3.7e10 * BECQUEREL
DAY = 86400 * SECOND
DEGREE_ANGLE = PI / 180
GAL = 1e-2 * METER / square(SECOND)
HECTARE = 1e4 * square(METER)
HOUR = 3600 * SECOND
KNOT = 1852 / 3600 * METER / SECOND
LITER = 1e-3 * cube(METER)
MINUTE = 60 * SECOND
MINUTE_ANGLE = PI / 10800
MILE_NAUTICAL = 1852 * METER
RAD = 1e-2 * GRAY
REM = 1e-2 * SIEVERT
ROENTGEN = 2.58e-4 * COULOMB / KILOGRAM
SECOND_ANGLE = PI / 648000
TON_METRIC = 1e3 * KILOGRAM
MICRON = MICRO * METER

METRE = METER
LITRE = LITER
TONNE = TON_METRIC


__all__ = [
    "AMPERE",
    "ANGSTROM",
    "ARE",
    "BAR",
    "BARN",
    "BECQUEREL",
    "CANDELA",
    "COULOMB",
    "CURIE",
    "DAY",
    "DEGREE_ANGLE",
    "DEGREE_CELSIUS",
    "EXTRA_UNITS",
    "FARAD",
    "GAL",
    "GRAM",
    "GRAY",
    "HECTARE",
    "HENRY",
    "HERTZ",
    "HOUR",
    "JOULE",
    "KELVIN",
    "KILOGRAM",
    "KNOT",
    "LITER",
    "LITRE",
    "LUMEN",
    "LUX",
    "METER",
    "METRE",
    "MICRON",
    "MILE_NAUTICAL",
    "MINUTE",
    "MINUTE_ANGLE",
    "MOLE",
    "NEWTON",
    "NUMBER",
    "OHM",
    "PASCAL",
    "PERCENT",
    "PI",
    "RAD",
    "RADIAN",
    "REM",
    "ROENTGEN",
    "SECOND",
    "SECOND_ANGLE",
    "SIEMENS",
    "SIEVERT",
    "STERADIAN",
    "TESLA",
    "TONNE",
    "TON_METRIC",
    "VOLT",
    "WATT",
    "WEBER",
]
