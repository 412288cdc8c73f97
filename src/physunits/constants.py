"""Physical constants (CODATA values as carried by NIST SP 811)."""

from __future__ import annotations

from physunits.core.quantity import square
from physunits.registry.units import (
    AMPERE,
    COULOMB,
    JOULE,
    KELVIN,
    KILOGRAM,
    METER,
    MOLE,
    NEWTON,
    PI,
    SECOND,
)

STANDARD_GRAVITY = 9.80665 * METER / square(SECOND)
AVOGADRO = 6.02214199e23 / MOLE
ELECTRON_VOLT = 1.60217733e-19 * JOULE
ELEMENTARY_CHARGE = 1.602176462e-19 * COULOMB
PLANCK = 6.62606876e-34 * JOULE * SECOND
SPEED_OF_LIGHT = 299792458 * METER / SECOND
ATOMIC_MASS_UNIT = 1.6605402e-27 * KILOGRAM
BOLTZMANN = 1.3806503e-23 * JOULE / KELVIN
MOLAR_GAS = 8.314472 * JOULE / MOLE / KELVIN
MAGNETIC_CONSTANT = 4e-7 * PI * NEWTON / square(AMPERE)
ELECTRIC_CONSTANT = 1 / (MAGNETIC_CONSTANT * square(SPEED_OF_LIGHT))

# Customary short names.
g_sub_n = STANDARD_GRAVITY
N_sub_A = AVOGADRO
eV = ELECTRON_VOLT
e = ELEMENTARY_CHARGE
h = PLANCK
c = SPEED_OF_LIGHT
u = ATOMIC_MASS_UNIT

__all__ = [
    "ATOMIC_MASS_UNIT",
    "AVOGADRO",
    "BOLTZMANN",
    "ELECTRIC_CONSTANT",
    "ELECTRON_VOLT",
    "ELEMENTARY_CHARGE",
    "MAGNETIC_CONSTANT",
    "MOLAR_GAS",
    "PLANCK",
    "SPEED_OF_LIGHT",
    "STANDARD_GRAVITY",
    "N_sub_A",
    "c",
    "e",
    "eV",
    "g_sub_n",
    "h",
    "u",
]
