from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


def load_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def validate_json(instance: Any, schema_path: Path) -> None:
    schema = load_json(schema_path)
    jsonschema.Draft202012Validator(schema).validate(instance)


def schema_errors(instance: Any, schema_path: Path) -> list[str]:
    schema = load_json(schema_path)
    validator = jsonschema.Draft202012Validator(schema)
    return [error.message for error in sorted(validator.iter_errors(instance), key=str)]


__all__ = ["load_json", "schema_errors", "validate_json"]
