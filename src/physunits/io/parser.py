"""Recursive-descent parser for unit expressions such as "45 km/h" or "9.8 m.s-2".

Grammar::

    nv-expression = [numerical-value] term
    expression    = [value] term
    term          = factor { (" " | "." | "/") factor }
    factor        = prefixed-unit [power] | "(" expression ")"
    prefixed-unit = [prefix] unit
    power         = signed integer
    unit          = [escape] unit-name | "1"    ("1" only before "/")
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from physunits.core.errors import QuantityError, QuantityParserError
from physunits.core.quantity import Quantity, nth_power
from physunits.registry.unit_registry import UnitRegistry, default_registry
from physunits.registry.units import NUMBER
from physunits.schemas.parser_options import ParserOptions

logger = logging.getLogger(__name__)

END = "\0"

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")
_OPERATORS = frozenset(" ./")
_REAL_START = _DIGITS | _SIGNS | {"."}
_INTEGER_CHARS = _DIGITS | _SIGNS

# Unit names whose first letter is also a prefix code: cd, kg, mol, min, Pa, Gy.
_UNPREFIXED_PAIRS = frozenset(
    {("c", "d"), ("k", "g"), ("m", "o"), ("m", "i"), ("P", "a"), ("G", "y")}
)


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


class _Cursor:
    """Single-character cursor over stripped input followed by ``END``.

    ``position`` is the 1-based column of ``current``; it stays 0 until the
    first ``advance()``.
    """

    def __init__(self, text: str) -> None:
        self.text = text.strip() + END
        self.position = 0
        self.current = " "

    @property
    def input_text(self) -> str:
        return self.text[:-1]

    def advance(self) -> str:
        if self.current != END:
            self.position += 1
            self.current = self.text[self.position - 1]
        return self.current

    def peek(self) -> str:
        if self.current == END:
            return END
        return self.text[self.position]

    def accept(self, char: str) -> bool:
        if self.current != char:
            return False
        self.advance()
        return True


@dataclass(frozen=True)
class ParseResult:
    quantity: Quantity | None
    numerical_value: float
    prefix_factor: float
    error: QuantityParserError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class QuantityParser:
    """Turns unit-expression text into a Quantity.

    A parser keeps the state of its last parse (coefficient, prefix factor,
    scan position, debug trace), so one instance must not be shared between
    threads.
    """

    def __init__(
        self,
        options: ParserOptions | None = None,
        registry: UnitRegistry | None = None,
    ) -> None:
        self._options = options or ParserOptions()
        self._registry = registry or default_registry()
        self._cursor = _Cursor("")
        self._numerical_value = 1.0
        self._prefix_factor = 1.0
        self._trace_lines: list[str] = []

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def registry(self) -> UnitRegistry:
        return self._registry

    def _update(self, **changes: object) -> QuantityParser:
        self._options = ParserOptions.model_validate({**self._options.model_dump(), **changes})
        return self

    def set_debug(self, on: bool = True) -> QuantityParser:
        return self._update(debug=on)

    def set_extend(self, on: bool = True) -> QuantityParser:
        return self._update(extend=on)

    def set_escape(self, char: str) -> QuantityParser:
        return self._update(escape=char)

    def set_dimensionless(self, on: bool = True) -> QuantityParser:
        return self._update(dimensionless=on)

    @property
    def numerical_value(self) -> float:
        """The 45 in "45 km/h"."""
        return self._numerical_value

    @property
    def prefix_factor(self) -> float:
        """The magnitude of the unit part, 1000/3600 for "45 km/h"."""
        return self._prefix_factor

    @property
    def input_text(self) -> str:
        return self._cursor.input_text

    @property
    def input_position(self) -> int:
        return self._cursor.position

    @property
    def debug_text(self) -> str:
        return "\n".join(self._trace_lines)

    def parse(self, text: str) -> Quantity:
        try:
            return self._parse_input(text)
        except QuantityError as exc:
            position = (
                exc.position if isinstance(exc, QuantityParserError) else self.input_position
            )
            raise QuantityParserError(
                f"quantity: parsing unit '{text}': {exc.message}",
                self.input_text,
                position,
            ) from exc

    def try_parse(self, text: str) -> ParseResult:
        try:
            quantity = self.parse(text)
        except QuantityParserError as exc:
            return ParseResult(None, self._numerical_value, self._prefix_factor, exc)
        return ParseResult(quantity, self._numerical_value, self._prefix_factor)

    def _trace(self, message: str, *args: object) -> None:
        line = message % args if args else message
        self._trace_lines.append(line)
        if self._options.debug:
            logger.debug(line)

    def _error(self, message: str, position: int | None = None) -> QuantityParserError:
        if position is None:
            position = self._cursor.position
        return QuantityParserError(message, self.input_text, position)

    def _parse_input(self, text: str) -> Quantity:
        self._trace_lines = []
        self._numerical_value = 1.0
        self._prefix_factor = 1.0
        self._trace("parse(): '%s'", text)
        self._cursor = _Cursor(text)
        if END in self.input_text:
            raise self._error(
                "invalid end-of-input character in text", self.input_text.index(END) + 1
            )
        self._cursor.advance()

        quantity = self._parse_num_value_expression()

        if not self._cursor.accept(END):
            raise self._error(
                f"garbage at position {self._cursor.position}: '{self._cursor.current}'"
            )
        if self._numerical_value == 0:
            self._prefix_factor = math.nan
        else:
            self._prefix_factor = (quantity / self._numerical_value).value
        return quantity

    def _parse_num_value_expression(self) -> Quantity:
        self._trace("parseNumValueExpression(): '%s'", self._cursor.current)
        self._numerical_value = self._parse_numerical_value()
        return self._numerical_value * self._parse_term()

    def _parse_expression(self) -> Quantity:
        self._trace("parseExpression(): '%s'", self._cursor.current)
        value = self._parse_numerical_value()
        return value * self._parse_term()

    def _parse_numerical_value(self) -> float:
        self._trace("parseNumericalValue(): '%s'", self._cursor.current)
        value = 1.0
        self._skip_whitespace()
        if self._cursor.current in _REAL_START:
            value = self._scan_real()
        self._skip_whitespace()
        self._trace("parseNumericalValue(): magnitude: %r", value)
        return value

    def _parse_term(self) -> Quantity:
        lhs = self._parse_factor()
        solidus_count = 0
        cursor = self._cursor
        while cursor.current in _OPERATORS:
            ahead = cursor.peek()
            if ahead in _OPERATORS:
                raise self._error(
                    f"consecutive operators at position {cursor.position}: "
                    f"'{cursor.current}' and '{ahead}'"
                )
            self._trace("parseTerm(): '%s'", cursor.current)
            if cursor.current == "/":
                solidus_count += 1
                if solidus_count > 1:
                    raise self._error(
                        f"repetition of solidus at position {cursor.position}: "
                        "use parenthesis to avoid ambiguity"
                    )
                cursor.advance()
                lhs = lhs / self._parse_factor()
            else:
                solidus_count = 0
                cursor.advance()
                lhs = lhs * self._parse_factor()
        return lhs

    def _parse_factor(self) -> Quantity:
        cursor = self._cursor
        self._trace("parseFactor(): '%s'", cursor.current)
        if cursor.accept("("):
            quantity = self._parse_expression()
            self._expect(")")
            return self._parse_power(quantity)
        # a bare number is a complete dimensionless quantity
        if self._options.dimensionless and not self._is_prefixed_unit(
            cursor.current, cursor.peek()
        ):
            return NUMBER
        factor = self._parse_prefix()
        return self._parse_power(factor * self._parse_unit())

    def _parse_prefix(self) -> float:
        cursor = self._cursor
        current, ahead = cursor.current, cursor.peek()
        self._trace("parsePrefix(): current: '%s', ahead: '%s'", current, ahead)
        if self._is_escape(current) or not self._is_unit_start(ahead):
            return 1.0
        if (current, ahead) in _UNPREFIXED_PAIRS:
            return 1.0
        if current == "d" and ahead == "a":
            cursor.advance()
            cursor.advance()
            return self._registry.prefix("da")
        if not self._registry.has_prefix(current):
            return 1.0
        cursor.advance()
        return self._registry.prefix(current)

    def _parse_unit(self) -> Quantity:
        cursor = self._cursor
        current, ahead = cursor.current, cursor.peek()
        self._trace("parseUnit(): '%s'", current)
        if current == "1":
            if ahead != "/":
                got = "[nothing]" if ahead == END else ahead
                raise self._error(
                    f"expecting 1/u construct at position {cursor.position}, got: '1{got}'"
                )
            cursor.accept("1")
            return NUMBER
        if not self._is_unit(current, ahead):
            got = "[nothing]" if current == END else current
            raise self._error(f"expecting unit at position {cursor.position}, got: '{got}'")
        return self._registry.unit(self._scan_unit(), self._options.extend)

    def _parse_power(self, quantity: Quantity) -> Quantity:
        self._trace("parsePower(): '%s'", self._cursor.current)
        if self._cursor.current in _INTEGER_CHARS:
            return nth_power(quantity, self._scan_integer())
        return quantity

    def _expect(self, char: str) -> None:
        if not self._cursor.accept(char):
            raise self._error(f"quantity: expecting '{char}'")

    def _skip_whitespace(self) -> None:
        while self._cursor.current.isspace():
            self._cursor.advance()

    def _scan_real(self) -> float:
        cursor = self._cursor
        start = cursor.position
        chars: list[str] = []
        if cursor.current in _SIGNS:
            chars.append(cursor.current)
            cursor.advance()
        seen_exponent = False
        while True:
            current = cursor.current
            if current in _DIGITS or current == ".":
                chars.append(current)
                cursor.advance()
            elif current in "eE" and not seen_exponent and cursor.peek() in _INTEGER_CHARS:
                seen_exponent = True
                chars.append(current)
                cursor.advance()
                if cursor.current in _SIGNS:
                    chars.append(cursor.current)
                    cursor.advance()
            else:
                break
        text = "".join(chars)
        self._trace("scanReal(): text: '%s'", text)
        try:
            return float(text)
        except ValueError as exc:
            raise self._error(f"invalid number at position {start}: '{text}'", start) from exc

    def _scan_integer(self) -> int:
        cursor = self._cursor
        start = cursor.position
        chars: list[str] = []
        while cursor.current in _INTEGER_CHARS:
            chars.append(cursor.current)
            cursor.advance()
        text = "".join(chars)
        self._trace("scanInteger(): '%s'", text)
        try:
            return int(text)
        except ValueError as exc:
            raise self._error(f"invalid power at position {start}: '{text}'", start) from exc

    def _scan_unit(self) -> str:
        cursor = self._cursor
        cursor.accept(self._options.escape)
        chars: list[str] = []
        while cursor.current == "'" or _is_alpha(cursor.current):
            chars.append(cursor.current)
            cursor.advance()
        name = "".join(chars)
        self._trace("scanUnit(): '%s'", name)
        return name

    def _is_escape(self, char: str) -> bool:
        return char == self._options.escape

    def _is_unit_start(self, char: str) -> bool:
        return self._is_escape(char) or _is_alpha(char)

    def _is_unit(self, char: str, ahead: str) -> bool:
        return (
            _is_alpha(char)
            or (self._is_escape(char) and _is_alpha(ahead))
            or (char == "'" and ahead == "C")
        )

    def _is_prefixed_unit(self, char: str, ahead: str) -> bool:
        return char == "1" or self._is_unit(char, ahead)


def _parser(
    extend: bool, dimensionless: bool, registry: UnitRegistry | None
) -> QuantityParser:
    return QuantityParser(ParserOptions(extend=extend, dimensionless=dimensionless), registry)


def to_quantity(
    text: str,
    extend: bool = False,
    dimensionless: bool = False,
    registry: UnitRegistry | None = None,
) -> Quantity:
    return _parser(extend, dimensionless, registry).parse(text)


def to_unit(
    text: str,
    extend: bool = False,
    dimensionless: bool = False,
    registry: UnitRegistry | None = None,
) -> Quantity:
    """The unit part of ``text``: "45 km/h" gives 1 km/h."""
    parser = _parser(extend, dimensionless, registry)
    quantity = parser.parse(text)
    return quantity / parser.numerical_value


def to_numerical_value(
    text: str,
    extend: bool = False,
    dimensionless: bool = False,
    registry: UnitRegistry | None = None,
) -> float:
    parser = _parser(extend, dimensionless, registry)
    parser.parse(text)
    return parser.numerical_value


__all__ = [
    "END",
    "ParseResult",
    "QuantityParser",
    "to_numerical_value",
    "to_quantity",
    "to_unit",
]
