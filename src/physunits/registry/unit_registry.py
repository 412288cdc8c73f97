from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from physunits.core.dimension import (
    ACTIVITY_OF_A_NUCLIDE,
    AMOUNT_OF_SUBSTANCE,
    CAPACITANCE,
    DIMENSION_SIZE,
    DOSE_EQUIVALENT,
    ELECTRIC_CHARGE,
    ELECTRIC_CONDUCTANCE,
    ELECTRIC_CURRENT,
    ELECTRIC_POTENTIAL,
    ELECTRIC_RESISTANCE,
    ENERGY,
    EXTENSION_COUNT,
    EXTRA_DIMENSIONS,
    FORCE,
    FREQUENCY,
    ILLUMINANCE,
    INDUCTANCE,
    LENGTH,
    LUMINOUS_FLUX,
    LUMINOUS_INTENSITY,
    MAGNETIC_FLUX,
    MAGNETIC_FLUX_DENSITY,
    MASS,
    POWER,
    PRESSURE,
    THERMODYNAMIC_TEMPERATURE,
    TIME_INTERVAL,
    Dimension,
)
from physunits.core.errors import E_UNIT_TABLE_FULL, PrefixError, UnitError
from physunits.core.quantity import Quantity
from physunits.registry import units
from physunits.registry.prefixes import PREFIX_CODES

logger = logging.getLogger(__name__)

EXTENSION_CAPACITY = EXTENSION_COUNT

PREDEFINED_UNITS: Mapping[str, Quantity] = MappingProxyType(
    {
        "m": units.METER,
        "kg": units.KILOGRAM,
        "s": units.SECOND,
        "A": units.AMPERE,
        "K": units.KELVIN,
        "mol": units.MOLE,
        "cd": units.CANDELA,
        "g": units.GRAM,
        "Hz": units.HERTZ,
        "N": units.NEWTON,
        "Pa": units.PASCAL,
        "J": units.JOULE,
        "W": units.WATT,
        "C": units.COULOMB,
        "V": units.VOLT,
        "F": units.FARAD,
        "Ohm": units.OHM,
        "S": units.SIEMENS,
        "Wb": units.WEBER,
        "T": units.TESLA,
        "H": units.HENRY,
        "'C": units.DEGREE_CELSIUS,
        "lm": units.LUMEN,
        "lx": units.LUX,
        "Bq": units.BECQUEREL,
        "Gy": units.GRAY,
        "Sv": units.SIEVERT,
        "d": units.DAY,
        "min": units.MINUTE,
        "h": units.HOUR,
        "l": units.LITER,
    }
)

# Display names, first entry wins where dimensions coincide (Hz over Bq,
# cd over lm).
_PREDEFINED_NAME_TABLE: tuple[tuple[Dimension, str], ...] = (
    (LENGTH, "m"),
    (MASS, "kg"),
    (TIME_INTERVAL, "s"),
    (ELECTRIC_CURRENT, "A"),
    (THERMODYNAMIC_TEMPERATURE, "K"),
    (AMOUNT_OF_SUBSTANCE, "mol"),
    (LUMINOUS_INTENSITY, "cd"),
    (FREQUENCY, "Hz"),
    (FORCE, "N"),
    (PRESSURE, "Pa"),
    (ENERGY, "J"),
    (POWER, "W"),
    (ELECTRIC_CHARGE, "C"),
    (ELECTRIC_POTENTIAL, "V"),
    (CAPACITANCE, "F"),
    (ELECTRIC_RESISTANCE, "Ohm"),
    (ELECTRIC_CONDUCTANCE, "S"),
    (MAGNETIC_FLUX, "Wb"),
    (MAGNETIC_FLUX_DENSITY, "T"),
    (INDUCTANCE, "H"),
    (LUMINOUS_FLUX, "lm"),
    (ILLUMINANCE, "lx"),
    (ACTIVITY_OF_A_NUCLIDE, "Bq"),
    (DOSE_EQUIVALENT, "Sv"),
    (LENGTH / TIME_INTERVAL, "m/s"),
    (ELECTRIC_POTENTIAL / TIME_INTERVAL, "V/s"),
    *((dim, f"x{slot}") for slot, dim in enumerate(EXTRA_DIMENSIONS)),
)


def _predefined_names() -> dict[Dimension, str]:
    names: dict[Dimension, str] = {}
    for dimension, name in _PREDEFINED_NAME_TABLE:
        names.setdefault(dimension, name)
    return names


_SLOT_DIMENSIONS: tuple[Dimension, ...] = tuple(
    Dimension.single(index) for index in range(DIMENSION_SIZE)
)


def _symbol_term(label: str, exponent: int) -> str:
    if exponent == 1:
        return label
    if exponent > 1:
        return f"{label}+{exponent}"
    return f"{label}{exponent}"


@dataclass(frozen=True)
class ExtensionUnit:
    name: str
    slot: int
    dimension: Dimension


class UnitRegistry:
    """Prefix table, predefined units, caller-defined extension units and
    the reverse map from Dimension to display name.

    Extension units are handed out from ``EXTENSION_CAPACITY`` spare
    dimension slots in first-come order. Writes are serialized with a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._extensions: list[ExtensionUnit] = []
        self._extension_index: dict[str, ExtensionUnit] = {}
        self._names: dict[Dimension, str] = _predefined_names()

    @property
    def capacity(self) -> int:
        return EXTENSION_CAPACITY

    @property
    def extensions(self) -> tuple[ExtensionUnit, ...]:
        with self._lock:
            return tuple(self._extensions)

    def reset(self) -> None:
        """Drop every extension unit and user-defined display name."""
        with self._lock:
            self._extensions.clear()
            self._extension_index.clear()
            self._names = _predefined_names()

    def has_prefix(self, code: str) -> bool:
        return code in PREFIX_CODES

    def prefix(self, code: str) -> float:
        try:
            return PREFIX_CODES[code]
        except KeyError as exc:
            raise PrefixError(code) from exc

    def has_unit(self, name: str) -> bool:
        return name in PREDEFINED_UNITS or name in self._extension_index

    def unit(self, name: str, extend: bool = False) -> Quantity:
        predefined = PREDEFINED_UNITS.get(name)
        if predefined is not None:
            return predefined
        with self._lock:
            entry = self._extension_index.get(name)
            if entry is None:
                if not extend or not name:
                    raise UnitError(name)
                entry = self._define_unit(name)
        return Quantity(entry.dimension, 1.0)

    def _define_unit(self, name: str) -> ExtensionUnit:
        slot = len(self._extensions)
        if slot >= EXTENSION_CAPACITY:
            logger.warning("extension table full, cannot define unit %r", name)
            raise UnitError(
                name,
                f"quantity: dimension extension table full, while trying to add '{name}'",
                E_UNIT_TABLE_FULL,
            )
        entry = ExtensionUnit(name=name, slot=slot, dimension=EXTRA_DIMENSIONS[slot])
        self._extensions.append(entry)
        self._extension_index[name] = entry
        self._names[entry.dimension] = name
        logger.info("defined extension unit %r in slot x%d", name, slot)
        return entry

    def define_unit_name(self, dimension: Dimension, name: str) -> None:
        with self._lock:
            self._names[dimension] = name

    def has_unit_name(self, dimension: Dimension) -> bool:
        return dimension in self._names

    def unit_name(self, dimension: Dimension) -> str:
        return self._names.get(dimension, "")

    def unit_symbol(self, dimension: Dimension, prefer_name: bool = False) -> str:
        if prefer_name and dimension in self._names:
            return self._names[dimension]
        terms = [
            _symbol_term(self._names[_SLOT_DIMENSIONS[index]], exponent)
            for index, exponent in enumerate(dimension.exponents)
            if exponent != 0
        ]
        return " ".join(terms)


@functools.lru_cache(maxsize=None)
def default_registry() -> UnitRegistry:
    return UnitRegistry()


def has_prefix(code: str) -> bool:
    return default_registry().has_prefix(code)


def prefix(code: str) -> float:
    return default_registry().prefix(code)


def unit(name: str, extend: bool = False) -> Quantity:
    return default_registry().unit(name, extend)


def define_unit_name(dimension: Dimension, name: str) -> None:
    default_registry().define_unit_name(dimension, name)


def has_unit_name(dimension: Dimension) -> bool:
    return default_registry().has_unit_name(dimension)


def unit_name(dimension: Dimension) -> str:
    return default_registry().unit_name(dimension)


def unit_symbol(dimension: Dimension, prefer_name: bool = False) -> str:
    return default_registry().unit_symbol(dimension, prefer_name)


__all__ = [
    "EXTENSION_CAPACITY",
    "PREDEFINED_UNITS",
    "ExtensionUnit",
    "UnitRegistry",
    "default_registry",
    "define_unit_name",
    "has_prefix",
    "has_unit_name",
    "prefix",
    "unit",
    "unit_name",
    "unit_symbol",
]
