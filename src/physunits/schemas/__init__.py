"""Configuration models and their JSON schemas."""

from .parser_options import PARSER_OPTIONS_SCHEMA, ParserOptions, load_parser_options

__all__ = ["PARSER_OPTIONS_SCHEMA", "ParserOptions", "load_parser_options"]
