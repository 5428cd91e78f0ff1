"""
Utility functions and helpers.
"""

from .numeric import (
    parse_float_prefix,
    parse_float_strict,
    parse_int_prefix,
    parse_int_strict,
)

__all__ = [
    "parse_int_prefix",
    "parse_float_prefix",
    "parse_int_strict",
    "parse_float_strict",
]
