"""
Leading-run numeric conversion with C atoi/atof semantics.

Values such as "12.34" or "143 ; primary" are converted by reading the
longest numeric prefix and ignoring the rest. A value with no numeric
prefix converts to zero instead of failing. The strict variants accept
only values that convert as a whole.
"""

import math
import re

# C isspace() in the "C" locale
_C_SPACE = " \t\n\v\f\r"

_INT_PREFIX = re.compile(r"[+-]?[0-9]+", re.ASCII)

_DEC_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?",
    re.ASCII,
)

_HEX_FLOAT_PREFIX = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?",
    re.ASCII,
)

_SPECIAL_FLOAT_PREFIX = re.compile(r"([+-]?)(infinity|inf|nan)", re.ASCII | re.IGNORECASE)

# strtol() saturates to the range of a 64-bit C long
LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
_LONG_DIGITS = len(str(LONG_MAX))

# Digit runs are converted in pieces below the interpreter's str-to-int limit
_CHUNK_DIGITS = 1000


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def parse_int_prefix(text: str) -> int:
    """
    Convert the leading integer run of text, like C atoi().

    Examples:
        "1234"   -> 1234
        "12.34"  -> 12
        "  -7px" -> -7
        "abc"    -> 0

    Out-of-range runs saturate to LONG_MIN or LONG_MAX, like strtol().
    """
    match = _INT_PREFIX.match(text.lstrip(_C_SPACE))
    if match is None:
        return 0

    run = match.group()
    negative = run[0] == "-"
    digits = run.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _LONG_DIGITS:
        return LONG_MIN if negative else LONG_MAX

    value = -int(digits) if negative else int(digits)
    return min(max(value, LONG_MIN), LONG_MAX)


def parse_float_prefix(text: str) -> float:
    """
    Convert the leading floating-point run of text, like C atof().

    Decimal, hexadecimal ("0x1.8p3"), infinity and NaN spellings are
    recognized. Returns 0.0 when no prefix converts.
    """
    text = text.lstrip(_C_SPACE)

    match = _HEX_FLOAT_PREFIX.match(text)
    if match:
        return float.fromhex(match.group())

    match = _DEC_FLOAT_PREFIX.match(text)
    if match:
        return float(match.group())

    match = _SPECIAL_FLOAT_PREFIX.match(text)
    if match:
        sign, word = match.groups()
        value = math.nan if word.lower() == "nan" else math.inf
        return -value if sign == "-" else value

    return 0.0


def parse_int_strict(text: str) -> int:
    """
    Convert text that must be a complete integer literal.

    The result is exact, however many digits the literal has.

    Raises:
        ValueError: If text is not an integer
    """
    stripped = text.strip(_C_SPACE)
    if not _INT_PREFIX.fullmatch(stripped):
        raise ValueError(f"invalid integer: {text!r}")
    value = _digits_to_int(stripped.lstrip("+-"))
    return -value if stripped[0] == "-" else value


def parse_float_strict(text: str) -> float:
    """
    Convert text that must be a complete float literal.

    Raises:
        ValueError: If text is not a number
    """
    stripped = text.strip(_C_SPACE)
    if _HEX_FLOAT_PREFIX.fullmatch(stripped):
        return float.fromhex(stripped)
    if _DEC_FLOAT_PREFIX.fullmatch(stripped) or _SPECIAL_FLOAT_PREFIX.fullmatch(stripped):
        return float(stripped)
    raise ValueError(f"invalid float: {text!r}")
