from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from physunits.core.errors import DimensionError

BASE_COUNT = 7
EXTENSION_COUNT = 10
DIMENSION_SIZE = BASE_COUNT + EXTENSION_COUNT


class SIBase(IntEnum):
    LENGTH = 0
    MASS = 1
    TIME = 2
    CURRENT = 3
    TEMPERATURE = 4
    AMOUNT = 5
    LUMINOUS_INTENSITY = 6


@dataclass(frozen=True, order=True)
class Dimension:
    """Exponents over the seven SI base dimensions and ten extension slots."""

    exponents: tuple[int, ...] = (0,) * DIMENSION_SIZE

    def __post_init__(self) -> None:
        if len(self.exponents) != DIMENSION_SIZE:
            raise ValueError(f"Dimension must have exactly {DIMENSION_SIZE} exponents")
        if not all(isinstance(exp, int) for exp in self.exponents):
            raise ValueError("Dimension exponents must be integers")

    @classmethod
    def single(cls, index: int, exponent: int = 1) -> Dimension:
        if not 0 <= index < DIMENSION_SIZE:
            raise IndexError(f"dimension index {index} out of range")
        exponents = [0] * DIMENSION_SIZE
        exponents[index] = exponent
        return cls(tuple(exponents))

    @classmethod
    def of(cls, *base: int) -> Dimension:
        """Set the leading SI base exponents; the rest default to zero."""
        if len(base) > BASE_COUNT:
            raise ValueError(f"at most {BASE_COUNT} base exponents expected")
        return cls(tuple(base) + (0,) * (DIMENSION_SIZE - len(base)))

    @classmethod
    def extension(cls, slot: int) -> Dimension:
        if not 0 <= slot < EXTENSION_COUNT:
            raise IndexError(f"extension slot {slot} out of range")
        return cls.single(BASE_COUNT + slot)

    @classmethod
    def copy_range(cls, other: Dimension, start: int, stop: int) -> Dimension:
        exponents = [0] * DIMENSION_SIZE
        exponents[start:stop] = other.exponents[start:stop]
        return cls(tuple(exponents))

    @property
    def base(self) -> tuple[int, ...]:
        return self.exponents[:BASE_COUNT]

    @property
    def extensions(self) -> tuple[int, ...]:
        return self.exponents[BASE_COUNT:]

    def is_all_zero(self) -> bool:
        return all(exp == 0 for exp in self.exponents)

    def is_base(self) -> bool:
        nonzero = [exp for exp in self.exponents if exp != 0]
        return nonzero == [1]

    def is_all_multiples(self, n: int) -> bool:
        return all(exp % n == 0 for exp in self.exponents)

    def product(self, other: Dimension) -> Dimension:
        return Dimension(
            tuple(a + b for a, b in zip(self.exponents, other.exponents, strict=True))
        )

    def quotient(self, other: Dimension) -> Dimension:
        return Dimension(
            tuple(a - b for a, b in zip(self.exponents, other.exponents, strict=True))
        )

    def reciprocal(self) -> Dimension:
        return Dimension(tuple(-exp for exp in self.exponents))

    def power(self, n: int) -> Dimension:
        if not isinstance(n, int):
            raise DimensionError("quantity: power must be an integer")
        return Dimension(tuple(exp * n for exp in self.exponents))

    def root(self, n: int) -> Dimension:
        if not isinstance(n, int):
            raise DimensionError("quantity: root must be an integer")
        if n == 0:
            raise DimensionError("quantity: root of order zero")
        if not self.is_all_multiples(n):
            raise DimensionError("quantity: dimension should be even multiple")
        return Dimension(tuple(exp // n for exp in self.exponents))

    def __mul__(self, other: object) -> Dimension:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.product(other)

    def __truediv__(self, other: object) -> Dimension:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.quotient(other)

    def __pow__(self, n: int) -> Dimension:
        return self.power(n)

    def __str__(self) -> str:
        return ",".join(str(exp) for exp in self.exponents)


DIMENSIONLESS = Dimension()

LENGTH = Dimension.single(SIBase.LENGTH)
MASS = Dimension.single(SIBase.MASS)
TIME_INTERVAL = Dimension.single(SIBase.TIME)
ELECTRIC_CURRENT = Dimension.single(SIBase.CURRENT)
THERMODYNAMIC_TEMPERATURE = Dimension.single(SIBase.TEMPERATURE)
AMOUNT_OF_SUBSTANCE = Dimension.single(SIBase.AMOUNT)
LUMINOUS_INTENSITY = Dimension.single(SIBase.LUMINOUS_INTENSITY)

EXTRA_DIMENSIONS: tuple[Dimension, ...] = tuple(
    Dimension.extension(slot) for slot in range(EXTENSION_COUNT)
)

# NIST SP 811 derived quantities, as (length, mass, time, current,
# temperature, amount, luminous intensity) exponents.
ABSORBED_DOSE = Dimension.of(2, 0, -2)
ABSORBED_DOSE_RATE = Dimension.of(2, 0, -3)
ACCELERATION = Dimension.of(1, 0, -2)
ACTIVITY_OF_A_NUCLIDE = Dimension.of(0, 0, -1)
ANGULAR_VELOCITY = Dimension.of(0, 0, -1)
ANGULAR_ACCELERATION = Dimension.of(0, 0, -2)
AREA = Dimension.of(2)
CAPACITANCE = Dimension.of(-2, -1, 4, 2)
CONCENTRATION = Dimension.of(-3, 0, 0, 0, 0, 1)
CURRENT_DENSITY = Dimension.of(-2, 0, 0, 1)
DOSE_EQUIVALENT = Dimension.of(2, 0, -2)
DYNAMIC_VISCOSITY = Dimension.of(-1, 1, -1)
ELECTRIC_CHARGE = Dimension.of(0, 0, 1, 1)
ELECTRIC_CHARGE_DENSITY = Dimension.of(-3, 0, 1, 1)
ELECTRIC_CONDUCTANCE = Dimension.of(-2, -1, 3, 2)
ELECTRIC_FIELD_STRENGTH = Dimension.of(1, 1, -3, -1)
ELECTRIC_FLUX_DENSITY = Dimension.of(-2, 0, 1, 1)
ELECTRIC_POTENTIAL = Dimension.of(2, 1, -3, -1)
ELECTRIC_RESISTANCE = Dimension.of(2, 1, -3, -2)
ENERGY = Dimension.of(2, 1, -2)
ENERGY_DENSITY = Dimension.of(-1, 1, -2)
EXPOSURE = Dimension.of(0, -1, 1, 1)
FORCE = Dimension.of(1, 1, -2)
FREQUENCY = Dimension.of(0, 0, -1)
HEAT_CAPACITY = Dimension.of(2, 1, -2, 0, -1)
HEAT_DENSITY = Dimension.of(0, 1, -2)
HEAT_DENSITY_FLOW_RATE = Dimension.of(0, 1, -3)
HEAT_FLOW_RATE = Dimension.of(2, 1, -3)
HEAT_FLUX_DENSITY = Dimension.of(0, 1, -3)
HEAT_TRANSFER_COEFFICIENT = Dimension.of(0, 1, -3, 0, -1)
ILLUMINANCE = Dimension.of(-2, 0, 0, 0, 0, 0, 1)
INDUCTANCE = Dimension.of(2, 1, -2, -2)
IRRADIANCE = Dimension.of(0, 1, -3)
KINEMATIC_VISCOSITY = Dimension.of(2, 0, -1)
LUMINANCE = Dimension.of(-2, 0, 0, 0, 0, 0, 1)
LUMINOUS_FLUX = Dimension.of(0, 0, 0, 0, 0, 0, 1)
MAGNETIC_FIELD_STRENGTH = Dimension.of(-1, 0, 0, 1)
MAGNETIC_FLUX = Dimension.of(2, 1, -2, -1)
MAGNETIC_FLUX_DENSITY = Dimension.of(0, 1, -2, -1)
MAGNETIC_PERMEABILITY = Dimension.of(1, 1, -2, -2)
MASS_DENSITY = Dimension.of(-3, 1)
MASS_FLOW_RATE = Dimension.of(0, 1, -1)
MOLAR_ENERGY = Dimension.of(2, 1, -2, 0, 0, -1)
MOLAR_ENTROPY = Dimension.of(2, 1, -2, -1, 0, -1)
MOMENT_OF_FORCE = Dimension.of(2, 1, -2)
PERMITTIVITY = Dimension.of(-3, -1, 4, 2)
POWER = Dimension.of(2, 1, -3)
PRESSURE = Dimension.of(-1, 1, -2)
RADIANCE = Dimension.of(0, 1, -3)
RADIANT_INTENSITY = Dimension.of(2, 1, -3)
SPEED = Dimension.of(1, 0, -1)
SPECIFIC_ENERGY = Dimension.of(2, 0, -2)
SPECIFIC_HEAT_CAPACITY = Dimension.of(2, 0, -2, 0, -1)
SPECIFIC_VOLUME = Dimension.of(3, -1)
SUBSTANCE_PERMEABILITY = Dimension.of(-1, 0, 1)
SURFACE_TENSION = Dimension.of(0, 1, -2)
THERMAL_CONDUCTIVITY = Dimension.of(1, 1, -3, 0, -1)
THERMAL_DIFFUSIVITY = Dimension.of(2, 0, -1)
THERMAL_INSULANCE = Dimension.of(0, -1, 3, 0, 1)
THERMAL_RESISTANCE = Dimension.of(-2, -1, 3, 0, 1)
THERMAL_RESISTIVITY = Dimension.of(-1, -1, 3, 0, 1)
TORQUE = Dimension.of(2, 1, -2)
VOLUME = Dimension.of(3)
VOLUME_FLOW_RATE = Dimension.of(3, 0, -1)
WAVE_NUMBER = Dimension.of(-1)


__all__ = [
    "ABSORBED_DOSE",
    "ABSORBED_DOSE_RATE",
    "ACCELERATION",
    "ACTIVITY_OF_A_NUCLIDE",
    "AMOUNT_OF_SUBSTANCE",
    "ANGULAR_ACCELERATION",
    "ANGULAR_VELOCITY",
    "AREA",
    "BASE_COUNT",
    "CAPACITANCE",
    "CONCENTRATION",
    "CURRENT_DENSITY",
    "DIMENSIONLESS",
    "DIMENSION_SIZE",
    "DOSE_EQUIVALENT",
    "DYNAMIC_VISCOSITY",
    "ELECTRIC_CHARGE",
    "ELECTRIC_CHARGE_DENSITY",
    "ELECTRIC_CONDUCTANCE",
    "ELECTRIC_CURRENT",
    "ELECTRIC_FIELD_STRENGTH",
    "ELECTRIC_FLUX_DENSITY",
    "ELECTRIC_POTENTIAL",
    "ELECTRIC_RESISTANCE",
    "ENERGY",
    "ENERGY_DENSITY",
    "EXPOSURE",
    "EXTENSION_COUNT",
    "EXTRA_DIMENSIONS",
    "FORCE",
    "FREQUENCY",
    "HEAT_CAPACITY",
    "HEAT_DENSITY",
    "HEAT_DENSITY_FLOW_RATE",
    "HEAT_FLOW_RATE",
    "HEAT_FLUX_DENSITY",
    "HEAT_TRANSFER_COEFFICIENT",
    "ILLUMINANCE",
    "INDUCTANCE",
    "IRRADIANCE",
    "KINEMATIC_VISCOSITY",
    "LENGTH",
    "LUMINANCE",
    "LUMINOUS_FLUX",
    "LUMINOUS_INTENSITY",
    "MAGNETIC_FIELD_STRENGTH",
    "MAGNETIC_FLUX",
    "MAGNETIC_FLUX_DENSITY",
    "MAGNETIC_PERMEABILITY",
    "MASS",
    "MASS_DENSITY",
    "MASS_FLOW_RATE",
    "MOLAR_ENERGY",
    "MOLAR_ENTROPY",
    "MOMENT_OF_FORCE",
    "PERMITTIVITY",
    "POWER",
    "PRESSURE",
    "RADIANCE",
    "RADIANT_INTENSITY",
    "SIBase",
    "SPECIFIC_ENERGY",
    "SPECIFIC_HEAT_CAPACITY",
    "SPECIFIC_VOLUME",
    "SPEED",
    "SUBSTANCE_PERMEABILITY",
    "SURFACE_TENSION",
    "THERMAL_CONDUCTIVITY",
    "THERMAL_DIFFUSIVITY",
    "THERMAL_INSULANCE",
    "THERMAL_RESISTANCE",
    "THERMAL_RESISTIVITY",
    "THERMODYNAMIC_TEMPERATURE",
    "TIME_INTERVAL",
    "TORQUE",
    "VOLUME",
    "VOLUME_FLOW_RATE",
    "WAVE_NUMBER",
    "Dimension",
]
