import logging
import math

import pytest
from pydantic import ValidationError

from physunits.core.dimension import (
    ACCELERATION,
    AMOUNT_OF_SUBSTANCE,
    AREA,
    DIMENSIONLESS,
    ELECTRIC_RESISTANCE,
    ENERGY,
    EXTRA_DIMENSIONS,
    FREQUENCY,
    LENGTH,
    LUMINOUS_INTENSITY,
    MASS,
    POWER,
    PRESSURE,
    SPEED,
    THERMODYNAMIC_TEMPERATURE,
    TIME_INTERVAL,
    VOLUME,
)
from physunits.core.errors import QuantityParserError, UnitError
from physunits.io.parser import QuantityParser, to_numerical_value, to_quantity, to_unit
from physunits.registry.prefixes import KILO
from physunits.registry.unit_registry import UnitRegistry, unit_symbol
from physunits.registry.units import HOUR, METER
from physunits.schemas.parser_options import ParserOptions


def _extending_parser() -> QuantityParser:
    return QuantityParser(ParserOptions(extend=True), UnitRegistry())


def test_value_times_parenthesized_expression() -> None:
    parser = QuantityParser()
    q = parser.parse("2 (3 m)")

    assert q.dimension == LENGTH
    assert q.value == 6.0
    assert parser.numerical_value == 2.0
    assert parser.prefix_factor == pytest.approx(3.0)


def test_speed_in_kilometres_per_hour() -> None:
    parser = QuantityParser()
    q = parser.parse("45 km/h")

    assert q.dimension == SPEED
    assert q.value == pytest.approx(12.5)
    assert parser.numerical_value == 45.0
    assert parser.prefix_factor == pytest.approx(1 / 3.6)


@pytest.mark.parametrize("text", ["9.8 m/s2", "9.8 m.s-2", "9.8 m s-2", "9.8 m/(s s)"])
def test_acceleration_spellings(text: str) -> None:
    q = to_quantity(text)
    assert q.dimension == ACCELERATION
    assert q.value == pytest.approx(9.8)


@pytest.mark.parametrize(
    "text, dimension, value",
    [
        ("42 km", LENGTH, 42e3),
        ("1 dm3", VOLUME, 1e-3),
        ("2 (3.14 mm)2", AREA, 2 * 3.14e-3**2),
        ("3 kHz", FREQUENCY, 3e3),
        ("3 1/s", FREQUENCY, 3.0),
        ("3 kV.A", POWER, 3e3),
        ("2.2 kOhm", ELECTRIC_RESISTANCE, 2.2e3),
        ("5 ms", TIME_INTERVAL, 5e-3),
        ("1 dam", LENGTH, 10.0),
        ("1e3 m", LENGTH, 1e3),
        ("1.5e-3 s", TIME_INTERVAL, 1.5e-3),
        ("-2 m", LENGTH, -2.0),
        (".5 m", LENGTH, 0.5),
    ],
)
def test_prefixed_units(text: str, dimension, value: float) -> None:
    q = to_quantity(text)
    assert q.dimension == dimension
    assert q.value == pytest.approx(value)


@pytest.mark.parametrize(
    "text, dimension, value",
    [
        ("mol", AMOUNT_OF_SUBSTANCE, 1.0),
        ("mmol", AMOUNT_OF_SUBSTANCE, 1e-3),
        ("kg", MASS, 1.0),
        ("g", MASS, 1e-3),
        ("min", TIME_INTERVAL, 60.0),
        ("Pa", PRESSURE, 1.0),
        ("kPa", PRESSURE, 1e3),
        ("cd", LUMINOUS_INTENSITY, 1.0),
        ("d", TIME_INTERVAL, 86400.0),
        ("'C", THERMODYNAMIC_TEMPERATURE, 1.0),
    ],
)
def test_units_starting_with_prefix_letters(text: str, dimension, value: float) -> None:
    q = to_quantity(text)
    assert q.dimension == dimension
    assert q.value == pytest.approx(value)


def test_power_of_parenthesized_expression() -> None:
    q = to_quantity("(2 m)2")
    assert q.dimension == AREA
    assert q.value == 4.0


def test_surrounding_whitespace_is_ignored() -> None:
    parser = QuantityParser()
    assert parser.parse("  3 m  ") == to_quantity("3 m")
    assert parser.input_text == "3 m"


@pytest.mark.parametrize(
    "text, position, fragment",
    [
        ("m/s/s", 4, "repetition of solidus at position 4"),
        ("10 m/s/s", 7, "repetition of solidus at position 7"),
        ("(m)a", 4, "garbage at position 4: 'a'"),
        ("m..m", 2, "consecutive operators at position 2: '.' and '.'"),
        ("7 1k", 3, "expecting 1/u construct at position 3, got: '1k'"),
        ("3", 2, "expecting unit at position 2, got: '[nothing]'"),
        ("(3 m", 5, "expecting ')'"),
        ("1.2.3 m", 1, "invalid number at position 1: '1.2.3'"),
    ],
)
def test_syntax_errors(text: str, position: int, fragment: str) -> None:
    parser = QuantityParser()
    with pytest.raises(QuantityParserError) as excinfo:
        parser.parse(text)

    err = excinfo.value
    assert fragment in str(err)
    assert str(err).startswith(f"quantity: parsing unit '{text}': ")
    assert err.text == text
    assert err.position == position
    assert err.code == "E_PARSE"


def test_parse_error_message_and_caret() -> None:
    with pytest.raises(QuantityParserError) as excinfo:
        to_quantity("m/s/s")

    assert str(excinfo.value) == (
        "quantity: parsing unit 'm/s/s': repetition of solidus at position 4: "
        "use parenthesis to avoid ambiguity"
    )
    assert excinfo.value.caret() == "   ^"


def test_undefined_unit_is_wrapped() -> None:
    with pytest.raises(QuantityParserError, match="undefined unit 'xm'") as excinfo:
        to_quantity("xm")
    assert isinstance(excinfo.value.__cause__, UnitError)


def test_dimensionless_numbers() -> None:
    with pytest.raises(QuantityParserError):
        to_quantity("3")

    q = to_quantity("3", dimensionless=True)
    assert q.dimension == DIMENSIONLESS
    assert q.value == 3.0
    assert to_quantity("3 m", dimensionless=True).dimension == LENGTH


def test_extend_defines_new_units() -> None:
    parser = _extending_parser()

    q = parser.parse("3 Foo")
    assert q.dimension == EXTRA_DIMENSIONS[0]
    assert q.value == 3.0

    q = parser.parse("4 !foo")
    assert q.dimension == EXTRA_DIMENSIONS[1]
    assert q.value == 4.0

    assert parser.parse("ffoo").value == pytest.approx(1e-15)
    assert parser.parse("f!foo").value == pytest.approx(1e-15)
    assert parser.parse("ffoo").dimension == EXTRA_DIMENSIONS[1]

    q = parser.parse("J2/ffoo")
    assert q.dimension == ENERGY * ENERGY / EXTRA_DIMENSIONS[1]
    assert q.value == pytest.approx(1e15)

    assert [entry.name for entry in parser.registry.extensions] == ["Foo", "foo"]


def test_exponent_letter_needs_digits() -> None:
    parser = _extending_parser()
    q = parser.parse("3eV")

    assert parser.numerical_value == 3.0
    assert q.dimension == EXTRA_DIMENSIONS[0]
    assert parser.registry.unit_name(EXTRA_DIMENSIONS[0]) == "eV"


def test_custom_escape_character() -> None:
    parser = _extending_parser().set_escape("$")
    q = parser.parse("2 $foo")
    assert q.dimension == EXTRA_DIMENSIONS[0]
    assert parser.options.escape == "$"


def test_setters_validate_options() -> None:
    parser = QuantityParser()
    assert parser.set_extend().options.extend
    assert parser.set_dimensionless().options.dimensionless
    assert not parser.set_extend(False).options.extend
    with pytest.raises(ValidationError):
        parser.set_escape("a")
    with pytest.raises(ValidationError):
        parser.set_escape("!!")


def test_try_parse_reports_outcome() -> None:
    parser = QuantityParser()

    good = parser.try_parse("45 km/h")
    assert good.ok
    assert good.quantity is not None
    assert good.numerical_value == 45.0

    bad = parser.try_parse("m/s/s")
    assert not bad.ok
    assert bad.quantity is None
    assert bad.error is not None
    assert bad.error.position == 4


def test_zero_numerical_value_has_no_prefix_factor() -> None:
    parser = QuantityParser()
    parser.parse("0 km")
    assert math.isnan(parser.prefix_factor)


def test_debug_trace(caplog: pytest.LogCaptureFixture) -> None:
    parser = QuantityParser().set_debug()
    with caplog.at_level(logging.DEBUG, logger="physunits.io.parser"):
        parser.parse("3 m")

    assert "parseFactor(): 'm'" in parser.debug_text
    assert "scanUnit(): 'm'" in parser.debug_text
    assert any(record.getMessage().startswith("parseFactor()") for record in caplog.records)


def test_convenience_functions() -> None:
    unit = to_unit("45 km/h")
    assert unit.dimension == SPEED
    assert unit.value == pytest.approx(1000 / 3600)
    assert to_numerical_value("45 km/h") == 45.0


def test_parsed_quantity_matches_unit_arithmetic() -> None:
    expected = 45 * KILO * METER / HOUR
    q = to_quantity("45 km/h")
    assert q.same_dimension(expected)
    assert q.value == pytest.approx(expected.value)
    assert unit_symbol(to_quantity("1 N").dimension) == "m kg s-2"


@pytest.mark.parametrize(
    "text, dimension, value",
    [
        ("(10 m)400", LENGTH**400, math.inf),
        ("(0 m)-1", LENGTH**-1, math.inf),
        ("1 m/(0 s)", SPEED, math.inf),
        ("-1 m/(0 s)", SPEED, -math.inf),
    ],
)
def test_out_of_range_magnitudes_become_infinite(text: str, dimension, value: float) -> None:
    q = to_quantity(text)
    assert q.dimension == dimension
    assert q.value == value


def test_unit_of_zero_quantity_is_nan() -> None:
    unit = to_unit("0 km")
    assert unit.dimension == LENGTH
    assert math.isnan(unit.value)
