from .schema_validate import load_json, schema_errors, validate_json

__all__ = ["load_json", "schema_errors", "validate_json"]
