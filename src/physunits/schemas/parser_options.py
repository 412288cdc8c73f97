from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from physunits.common.schema_validate import load_json, validate_json

PARSER_OPTIONS_SCHEMA = Path(__file__).resolve().parent / "parser_options.schema.json"

# Characters the unit grammar already gives a meaning to.
RESERVED_ESCAPE_CHARACTERS = frozenset("./()+-'")


class ParserOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    debug: bool = False
    extend: bool = False
    dimensionless: bool = False
    escape: str = Field(default="!", min_length=1, max_length=1)

    @field_validator("escape")
    @classmethod
    def _escape_character(cls, value: str) -> str:
        if value.isalnum() or value.isspace() or value in RESERVED_ESCAPE_CHARACTERS:
            raise ValueError("escape must not be a letter, digit, blank or operator character")
        if value == "\0":
            raise ValueError("escape must not be the end-of-input character")
        return value


def load_parser_options(path: Path) -> ParserOptions:
    payload = load_json(path)
    validate_json(payload, PARSER_OPTIONS_SCHEMA)
    return ParserOptions.model_validate(payload)


__all__ = [
    "PARSER_OPTIONS_SCHEMA",
    "RESERVED_ESCAPE_CHARACTERS",
    "ParserOptions",
    "load_parser_options",
]
