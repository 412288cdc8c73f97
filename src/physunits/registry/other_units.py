"""Units outside SI, with conversion factors from NIST SP 811 appendix B."""

from __future__ import annotations

from physunits.core.quantity import cube, square
from physunits.registry.units import (
    AMPERE,
    CANDELA,
    COULOMB,
    DAY,
    DEGREE_ANGLE,
    FARAD,
    HENRY,
    JOULE,
    KELVIN,
    KILOGRAM,
    LUX,
    METER,
    NEWTON,
    OHM,
    PASCAL,
    PI,
    SECOND,
    SIEMENS,
    TESLA,
    VOLT,
    WATT,
    WEBER,
)

_IMPORTED = frozenset(globals())

ABAMPERE = 1e1 * AMPERE
ABCOULOMB = 1e1 * COULOMB
ABFARAD = 1e9 * FARAD
ABHENRY = 1e-9 * HENRY
ABMHO = 1e9 * SIEMENS
ABOHM = 1e-9 * OHM
ABVOLT = 1e-8 * VOLT
ACRE = 4.046873e3 * square(METER)
ACRE_FOOT = 1.233489e3 * cube(METER)
ASTRONOMICAL_UNIT = 1.495979e11 * METER
ATMOSPHERE_STD = 1.01325e5 * PASCAL
ATMOSPHERE_TECH = 9.80665e4 * PASCAL
BARREL = 1.589873e-1 * cube(METER)
BIOT = 1e1 * AMPERE
BTU = 1.05587e3 * JOULE
BTU_IT = 1.055056e3 * JOULE
BTU_TH = 1.054350e3 * JOULE
BUSHEL = 3.523907e-2 * cube(METER)
CALORIE = 4.19002 * JOULE
CALORIE_IT = 4.1868 * JOULE
CALORIE_TH = 4.184 * JOULE
CARAT_METRIC = 2e-4 * KILOGRAM
CHAIN = 2.011684e1 * METER
CLO = 1.55e-1 * square(METER) * KELVIN / WATT
CM_MERCURY = 1.333224e3 * PASCAL
CORD = 3.624556 * cube(METER)
CUP = 2.365882e-4 * cube(METER)
DARCY = 9.869233e-13 * square(METER)
DAY_SIDEREAL = 8.616409e4 * SECOND
DEBYE = 3.335641e-30 * COULOMB * METER
DEGREE_FAHRENHEIT = 5.555556e-1 * KELVIN
DEGREE_RANKINE = 5.555556e-1 * KELVIN
DENIER = 1.111111e-7 * KILOGRAM / METER
DYNE = 1e-5 * NEWTON
ERG = 1e-7 * JOULE
FARADAY = 9.648531e4 * COULOMB
FATHOM = 1.828804 * METER
FERMI = 1e-15 * METER
FOOT = 3.048e-1 * METER
FOOT_POUND_FORCE = 1.355818 * JOULE
FOOT_POUNDAL = 4.214011e-2 * JOULE
FOOT_US_SURVEY = 3.048006e-1 * METER
FOOTCANDLE = 1.076391e1 * LUX
FOOTLAMBERT = 3.426259 * CANDELA / square(METER)
FORTNIGHT = 14 * DAY
FRANKLIN = 3.335641e-10 * COULOMB
FURLONG = 2.01168e2 * METER
GALLON_IMPERIAL = 4.54609e-3 * cube(METER)
GALLON_US = 3.785412e-3 * cube(METER)
GAMMA = 1e-9 * TESLA
GAMMA_MASS = 1e-9 * KILOGRAM
GAUSS = 1e-4 * TESLA
GILBERT = 7.957747e-1 * AMPERE
GON = 9e-1 * DEGREE_ANGLE
GRAIN = 6.479891e-5 * KILOGRAM
HORSEPOWER = 7.456999e2 * WATT
HORSEPOWER_BOILER = 9.80950e3 * WATT
HORSEPOWER_ELECTRIC = 7.46e2 * WATT
HORSEPOWER_METRIC = 7.354988e2 * WATT
HOUR_SIDEREAL = 3.590170e3 * SECOND
HUNDREDWEIGHT_LONG = 5.080235e1 * KILOGRAM
HUNDREDWEIGHT_SHORT = 4.535924e1 * KILOGRAM
INCH = 2.54e-2 * METER
INCHES_MERCURY = 3.386389e3 * PASCAL
KAYSER = 1e2 / METER
KILOGRAM_FORCE = 9.80665 * NEWTON
KIP = 4.448222e3 * NEWTON
LAMBERT = 3.183099e3 * CANDELA / square(METER)
LANGLEY = 4.184e4 * JOULE / square(METER)
LIGHT_YEAR = 9.46073e15 * METER
MAXWELL = 1e-8 * WEBER
MHO = SIEMENS
MIL = 2.54e-5 * METER
MILE = 1.609344e3 * METER
MILE_US_SURVEY = 1.609347e3 * METER
OERSTED = 7.957747e1 * AMPERE / METER
OUNCE_AVDP = 2.834952e-2 * KILOGRAM
OUNCE_FLUID_US = 2.957353e-5 * cube(METER)
OUNCE_FORCE = 2.780139e-1 * NEWTON
OUNCE_TROY = 3.110348e-2 * KILOGRAM
PARSEC = 3.085678e16 * METER
PINT_LIQUID = 4.731765e-4 * cube(METER)
POISE = 1e-1 * PASCAL * SECOND
POUND_AVDP = 4.5359237e-1 * KILOGRAM
POUND_FORCE = 4.448222 * NEWTON
POUNDAL = 1.382550e-1 * NEWTON
PSI = 6.894757e3 * PASCAL
QUAD = 1e15 * BTU_IT
QUART_LIQUID = 9.463529e-4 * cube(METER)
REVOLUTION = 2 * PI
RPM = 1.047198e-1 / SECOND
SHAKE = 1e-8 * SECOND
SLUG = 1.459390e1 * KILOGRAM
STATAMPERE = 3.335641e-10 * AMPERE
STATCOULOMB = 3.335641e-10 * COULOMB
STATVOLT = 2.997925e2 * VOLT
STERE = cube(METER)
STOKES = 1e-4 * square(METER) / SECOND
TABLESPOON = 1.478676e-5 * cube(METER)
TEASPOON = 4.928922e-6 * cube(METER)
TEX = 1e-6 * KILOGRAM / METER
THERM_US = 1.054804e8 * JOULE
TON_FORCE = 8.896443e3 * NEWTON
TON_LONG = 1.016047e3 * KILOGRAM
TON_REFRIGERATION = 3.516853e3 * WATT
TON_SHORT = 9.071847e2 * KILOGRAM
TON_TNT = 4.184e9 * JOULE
TORR = 1.333224e2 * PASCAL
WEEK = 604800 * SECOND
YARD = 9.144e-1 * METER
YEAR_SIDEREAL = 3.155815e7 * SECOND
YEAR_STD = 3.1536e7 * SECOND
YEAR_TROPICAL = 3.155693e7 * SECOND

__all__ = sorted(
    name
    for name in globals()
    if name.isupper() and not name.startswith("_") and name not in _IMPORTED
)
