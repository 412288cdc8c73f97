import logging

import pytest

from physunits.core.dimension import (
    CAPACITANCE,
    CONCENTRATION,
    DIMENSIONLESS,
    ELECTRIC_CHARGE,
    ELECTRIC_POTENTIAL,
    ELECTRIC_RESISTANCE,
    EXTRA_DIMENSIONS,
    FORCE,
    FREQUENCY,
    LENGTH,
    LUMINOUS_INTENSITY,
    SPEED,
    Dimension,
)
from physunits.core.errors import E_UNIT_TABLE_FULL, PrefixError, UnitError
from physunits.registry import unit_registry
from physunits.registry.unit_registry import EXTENSION_CAPACITY, UnitRegistry
from physunits.registry.units import HOUR, KELVIN, NEWTON


def test_prefix_lookup() -> None:
    registry = UnitRegistry()
    assert registry.prefix("k") == 1e3
    assert registry.prefix("u") == 1e-6
    assert registry.prefix("da") == 10.0
    assert registry.has_prefix("Y")
    assert not registry.has_prefix("x")


def test_unknown_prefix_fails() -> None:
    with pytest.raises(PrefixError, match="unrecognized prefix 'x'") as excinfo:
        UnitRegistry().prefix("x")
    assert excinfo.value.code == "E_PREFIX_UNKNOWN"


def test_predefined_units() -> None:
    registry = UnitRegistry()
    assert registry.unit("N") == NEWTON
    assert registry.unit("h") == HOUR
    assert registry.unit("'C") == KELVIN
    assert registry.has_unit("Ohm")
    assert not registry.has_unit("foo")


def test_unknown_unit_fails_without_extend() -> None:
    registry = UnitRegistry()
    with pytest.raises(UnitError, match="undefined unit 'foo'") as excinfo:
        registry.unit("foo")
    assert excinfo.value.code == "E_UNIT_UNKNOWN"
    assert registry.extensions == ()


def test_extend_defines_unit_once() -> None:
    registry = UnitRegistry()
    foo = registry.unit("foo", extend=True)
    bar = registry.unit("bar", extend=True)

    assert foo.dimension == EXTRA_DIMENSIONS[0]
    assert bar.dimension == EXTRA_DIMENSIONS[1]
    assert foo.value == 1.0
    assert registry.unit("foo").dimension == EXTRA_DIMENSIONS[0]
    assert registry.has_unit("foo")
    assert [entry.name for entry in registry.extensions] == ["foo", "bar"]
    assert registry.unit_name(EXTRA_DIMENSIONS[0]) == "foo"


def test_extension_table_full(caplog: pytest.LogCaptureFixture) -> None:
    registry = UnitRegistry()
    for n in range(EXTENSION_CAPACITY):
        registry.unit(f"unit{n}", extend=True)

    with caplog.at_level(logging.WARNING, logger="physunits.registry.unit_registry"):
        with pytest.raises(UnitError, match="table full") as excinfo:
            registry.unit("overflow", extend=True)

    assert excinfo.value.code == E_UNIT_TABLE_FULL
    assert len(registry.extensions) == registry.capacity == 10
    assert any("overflow" in record.getMessage() for record in caplog.records)


def test_reset_drops_extensions_and_names() -> None:
    registry = UnitRegistry()
    registry.unit("foo", extend=True)
    registry.define_unit_name(SPEED, "mps")

    registry.reset()

    assert registry.extensions == ()
    assert not registry.has_unit("foo")
    assert registry.unit_name(EXTRA_DIMENSIONS[0]) == "x0"
    assert registry.unit_name(SPEED) == "m/s"


def test_registries_are_independent() -> None:
    first = UnitRegistry()
    second = UnitRegistry()
    first.unit("foo", extend=True)
    assert not second.has_unit("foo")


def test_predefined_names_prefer_first_entry() -> None:
    registry = UnitRegistry()
    assert registry.unit_name(FREQUENCY) == "Hz"
    assert registry.unit_name(LUMINOUS_INTENSITY) == "cd"
    assert registry.unit_name(SPEED) == "m/s"
    assert registry.unit_name(DIMENSIONLESS) == ""
    assert not registry.has_unit_name(Dimension.of(2))


def test_define_unit_name_replaces_name() -> None:
    registry = UnitRegistry()
    registry.define_unit_name(FREQUENCY, "Bq")
    assert registry.unit_name(FREQUENCY) == "Bq"


@pytest.mark.parametrize(
    "dimension, symbol",
    [
        (ELECTRIC_RESISTANCE, "m+2 kg s-3 A-2"),
        (CAPACITANCE, "m-2 kg-1 s+4 A+2"),
        (ELECTRIC_CHARGE, "s A"),
        (FORCE, "m kg s-2"),
        (CONCENTRATION, "m-3 mol"),
        (LENGTH, "m"),
        (DIMENSIONLESS, ""),
    ],
)
def test_unit_symbol_in_base_units(dimension: Dimension, symbol: str) -> None:
    assert UnitRegistry().unit_symbol(dimension) == symbol


def test_unit_symbol_prefers_name() -> None:
    registry = UnitRegistry()
    assert registry.unit_symbol(ELECTRIC_RESISTANCE, prefer_name=True) == "Ohm"
    assert registry.unit_symbol(Dimension.of(2), prefer_name=True) == "m+2"


def test_unit_symbol_uses_extension_names() -> None:
    registry = UnitRegistry()
    assert registry.unit_symbol(EXTRA_DIMENSIONS[0]) == "x0"
    registry.unit("foo", extend=True)
    assert registry.unit_symbol(Dimension.of(2) * EXTRA_DIMENSIONS[0]) == "m+2 foo"
    assert registry.unit_symbol(EXTRA_DIMENSIONS[0].reciprocal()) == "foo-1"


def test_module_functions_use_default_registry() -> None:
    assert unit_registry.default_registry() is unit_registry.default_registry()
    assert unit_registry.has_prefix("k")
    assert unit_registry.prefix("M") == 1e6
    assert unit_registry.unit("V").dimension == ELECTRIC_POTENTIAL
    assert unit_registry.has_unit_name(FORCE)
    assert unit_registry.unit_name(FORCE) == "N"
    assert unit_registry.unit_symbol(FORCE) == "m kg s-2"
