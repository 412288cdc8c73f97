# Copyright 2026 Joseph Verdicchio
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import jsonschema
from pydantic import ValidationError

from physunits import __version__
from physunits.common.schema_validate import load_json, schema_errors
from physunits.core.errors import QuantityParserError
from physunits.io.engineering import EngFormat
from physunits.io.output import to_base_unit_symbols
from physunits.io.parser import QuantityParser
from physunits.registry.unit_registry import UnitRegistry
from physunits.schemas.parser_options import (
    PARSER_OPTIONS_SCHEMA,
    ParserOptions,
    load_parser_options,
)

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Parse the unit expressions given on the command line or read from standard
input and present each resulting quantity in engineering notation and as
unit expressed in the seven SI base units."""

EPILOG = """\
Option --escape implies option --extend.

Examples
  physunits "42 km" "1 dm3" "2 (3.14 mm)2"
  physunits "330 m/s" "9.8 m/s2" "9.8 m.s-2" "9.8 m s-2"
  physunits "3 kHz" "3 1/s" "3 kV.A" "2.2 kOhm"
  physunits --extend "3 Foo" "4 !foo" "ffoo" "f!foo" "J2/ffoo"

Syntax (EBNF)
     expression = [magnitude] factor { (" "|"."|"/") factor } .
         factor = prefixed-unit [power]
                | "(" expression ")" .
  prefixed-unit = [prefix] unit
      magnitude = floating-point-number
          power = signed-integral-number
         prefix = "y".."Y"
           unit = ["!"] ("m"|"kg"|"s"|"A"|"K"|"mol"|"cd"...)
                |  "1"

Note 1: "!" is the default escape character for newly defined units.
Note 2: "1" is used for reciprocal units; it must be followed by "/".

For more information on SI units, see NIST Special Publication 811,
Guide for the Use of the International System of Units (SI)."""

STDIN_ARGUMENT = "-"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="physunits",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "-d",
        "--dimless",
        "--dimensionless",
        dest="dimensionless",
        action="store_true",
        help="accept dimensionless quantities",
    )
    p.add_argument(
        "-e",
        "--escape",
        metavar="c",
        default=None,
        help="escape character for extended units [!]",
    )
    p.add_argument(
        "-x", "--extend", action="store_true", help="define units when first encountered"
    )
    p.add_argument("--debug", action="store_true", help="report debug info")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--config", default=None, help="JSON file with parser options")
    p.add_argument(
        "--digits", type=int, default=6, help="significant digits in engineering notation"
    )
    p.add_argument(
        "expressions",
        nargs="*",
        metavar="expression",
        help=f"unit expression, or '{STDIN_ARGUMENT}' to read from standard input",
    )
    return p


def _parser_options(args: argparse.Namespace, p: argparse.ArgumentParser) -> ParserOptions:
    base = ParserOptions()
    if args.config:
        path = Path(args.config)
        try:
            base = load_parser_options(path)
            logger.debug("loaded parser options from %s", path)
        except jsonschema.ValidationError:
            errors = schema_errors(load_json(path), PARSER_OPTIONS_SCHEMA)
            p.error(f"invalid config file '{args.config}': {'; '.join(errors)}")
        except (OSError, ValueError) as exc:
            p.error(f"invalid config file '{args.config}': {exc}")
    changes: dict[str, object] = {}
    if args.dimensionless:
        changes["dimensionless"] = True
    if args.extend:
        changes["extend"] = True
    if args.debug:
        changes["debug"] = True
    if args.escape is not None:
        if len(args.escape) != 1:
            p.error(f"expecting single character for option '--escape', got '{args.escape}'")
        changes["escape"] = args.escape
        changes["extend"] = True
    try:
        return ParserOptions.model_validate({**base.model_dump(), **changes})
    except ValidationError as exc:
        p.error(f"invalid parser options: {exc.errors()[0]['msg']}")


def report(
    expression: str,
    parser: QuantityParser,
    fmt: EngFormat,
    out: TextIO,
) -> bool:
    try:
        quantity = parser.parse(expression)
    except QuantityParserError as exc:
        print(exc.text, file=out)
        print(exc.caret(), file=out)
        print(f"Error: {exc}", file=out)
        return False
    registry = parser.registry
    print(
        f"'{expression}': {fmt.format(quantity, registry)} "
        f"[{to_base_unit_symbols(quantity, registry)}]",
        file=out,
    )
    return True


def interactive(
    parser: QuantityParser,
    fmt: EngFormat,
    stdin: TextIO,
    out: TextIO,
) -> bool:
    console = stdin.isatty()
    if console:
        print(f"\nphysunits {__version__}\n\nCommands: help, exit\n", file=out)
    ok = True
    while True:
        if console:
            print(">", end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        expression = line.strip()
        if not expression:
            continue
        if expression == "help":
            print(build_parser().format_help(), file=out)
        elif expression in {"exit", "quit"}:
            break
        else:
            ok = report(expression, parser, fmt, out) and ok
    return ok


def run(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    stdin = stdin or sys.stdin
    out = out or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    if not args.expressions:
        p.print_help(file=out)
        return 0
    if args.digits < 1:
        p.error("--digits must be at least 1")

    parser = QuantityParser(_parser_options(args, p), UnitRegistry())
    # micro as "u" keeps the output parseable
    fmt = EngFormat(digits=args.digits, micro_glyph="u")
    ok = True
    for expression in args.expressions:
        if expression == STDIN_ARGUMENT:
            ok = interactive(parser, fmt, stdin, out) and ok
        else:
            ok = report(expression, parser, fmt, out) and ok
    return 0 if ok else 1


def main(argv: Sequence[str] | None = None) -> None:
    raise SystemExit(run(argv))


if __name__ == "__main__":
    main()
