"""Utility functions for Google Photos Kit."""

from .decoding import (
    decode_error_from,
    ensure_object,
    load_json_object,
    parse_float64,
    parse_int64,
)

__all__ = [
    "decode_error_from",
    "ensure_object",
    "load_json_object",
    "parse_float64",
    "parse_int64",
]
