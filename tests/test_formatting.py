import pytest

from physunits.core.quantity import Quantity, square
from physunits.io.engineering import EngFormat, to_eng_magnitude, to_eng_string, to_eng_unit
from physunits.io.output import to_base_unit_symbols, to_magnitude, to_string, to_unit_symbol
from physunits.registry.prefixes import KILO, MICRO
from physunits.registry.unit_registry import UnitRegistry
from physunits.registry.units import (
    AMPERE,
    FARAD,
    KILOGRAM,
    METER,
    NUMBER,
    OHM,
    SECOND,
    VOLT,
)


def test_to_string_uses_display_name() -> None:
    assert to_string(4.7 * KILO * OHM) == "4700 Ohm"
    assert to_magnitude(4.7 * KILO * OHM) == "4700"
    assert to_unit_symbol(OHM) == "Ohm"
    assert to_base_unit_symbols(OHM) == "m+2 kg s-3 A-2"


def test_to_string_of_dimensionless_quantity_has_no_symbol() -> None:
    assert to_string(3 * NUMBER) == "3"
    assert to_base_unit_symbols(NUMBER) == ""


def test_to_string_without_name_uses_base_units() -> None:
    assert to_string(5 * square(METER)) == "5 m+2"


@pytest.mark.parametrize(
    "quantity, expected",
    [
        (4.7 * KILO * VOLT / AMPERE, "4.7 kOhm"),
        (12.5 * METER / SECOND, "12.5 m/s"),
        (0.0047 * FARAD, "4.7 mF"),
        (2.2 * MICRO * FARAD, "2.2 µF"),
        (3 * VOLT, "3 V"),
        (-3 * VOLT, "-3 V"),
        (999.9996 * VOLT, "1 kV"),
        (0 * VOLT, "0 V"),
    ],
)
def test_engineering_notation(quantity: Quantity, expected: str) -> None:
    assert to_eng_string(quantity) == expected


def test_mass_keeps_explicit_exponent() -> None:
    assert to_eng_string(1500 * KILOGRAM) == "1.5e3 kg"


def test_unnamed_dimension_keeps_explicit_exponent() -> None:
    assert to_eng_string(5 * square(METER)) == "5e0 m+2"
    assert to_eng_string(3 * NUMBER) == "3e0"


def test_exponent_outside_prefix_range() -> None:
    assert to_eng_string(1e30 * METER) == "1e30 m"


def test_significant_digits_round() -> None:
    assert to_eng_string(1234.5678 * VOLT, digits=3) == "1.23 kV"
    assert to_eng_string(1234.5678 * VOLT) == "1.23457 kV"


def test_showpos_and_parts() -> None:
    q = 4.7 * KILO * OHM
    assert to_eng_string(3 * VOLT, showpos=True) == "+3 V"
    assert to_eng_magnitude(q) == "4.7"
    assert to_eng_unit(q) == "kOhm"


def test_micro_glyph_and_fixed_format() -> None:
    assert EngFormat(micro_glyph="u").format(2.2 * MICRO * FARAD) == "2.2 uF"
    assert EngFormat(fixed=True).format(12.5 * METER / SECOND) == "12.5000 m/s"


def test_non_finite_values() -> None:
    assert to_eng_string(float("inf") * VOLT) == "inf V"


def test_digits_must_be_positive() -> None:
    with pytest.raises(ValueError, match="digits"):
        EngFormat(digits=0)


def test_formatting_uses_given_registry() -> None:
    registry = UnitRegistry()
    foo = registry.unit("foo", extend=True)
    assert to_eng_string(3 * KILO * foo, registry=registry) == "3 kfoo"
    assert to_string(2 * foo, registry) == "2 foo"


def test_subnormal_magnitude() -> None:
    assert to_eng_string(1e-310 * METER) == "100e-312 m"


def test_infinite_quantity_without_name() -> None:
    assert to_eng_string(float("inf") * METER**400) == "inf m+400"
