#!/usr/bin/env python3
"""
Numeric parsing and formatting helpers for stringkit.

Substrings are parsed through a closed set of typed parsers selected by
NumericKind. Malformed text parses to None; asking for a kind outside the
supported set is a programming error and raises UnsupportedNumericTypeError.
"""

import math
import struct
from enum import Enum
from typing import Callable, Dict, Optional, Union

from .logging_config import get_logger
from .tables import FLOAT_NUMBER_RE, SIGNED_INTEGER_RE

# Initialize logger for this module
logger = get_logger(__name__)

Number = Union[int, float]


class UnsupportedNumericTypeError(TypeError):
    """Raised when a parse is requested for a numeric kind that is not supported."""

    pass


class NumericKind(Enum):
    """Numeric kinds a substring can be parsed as."""

    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"


def _integer_parser(bits: int) -> Callable[[str], Optional[int]]:
    low, high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1

    def parse(text: str) -> Optional[int]:
        if SIGNED_INTEGER_RE.fullmatch(text) is None:
            return None
        value = int(text)
        if not low <= value <= high:
            return None
        return value

    return parse


def _parse_float(text: str) -> Optional[float]:
    if FLOAT_NUMBER_RE.fullmatch(text) is None:
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def _parse_single(text: str) -> Optional[float]:
    """Parse as a 32-bit float; values beyond its range parse to None."""
    value = _parse_float(text)
    if value is None:
        return None
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return None


_PARSERS: Dict[NumericKind, Callable[[str], Optional[Number]]] = {
    NumericKind.BYTE: _integer_parser(8),
    NumericKind.SHORT: _integer_parser(16),
    NumericKind.INT: _integer_parser(32),
    NumericKind.LONG: _integer_parser(64),
    NumericKind.FLOAT: _parse_single,
    NumericKind.DOUBLE: _parse_float,
}


def sub_string(text: str, start: int, count: int = 1) -> str:
    """
    Extract ``count`` characters starting at the 1-based position ``start``.

    Example:
        sub_string("HelloWorld", 1, 5) -> "Hello"
    """
    return text[start - 1:start - 1 + count]


def parse_number(value: Optional[str], kind: NumericKind) -> Optional[Number]:
    """
    Parse ``value`` as the requested numeric kind.

    Args:
        value: Text to parse; surrounding whitespace is ignored
        kind: Target numeric kind

    Returns:
        Parsed number, or None when the text is not a valid number of that
        kind (including integers outside the kind's range)

    Raises:
        UnsupportedNumericTypeError: If ``kind`` is not a supported NumericKind
    """
    parser = _PARSERS.get(kind) if isinstance(kind, NumericKind) else None
    if parser is None:
        raise UnsupportedNumericTypeError(f"Unsupported numeric type: {kind!r}")

    if value is None:
        return None
    result = parser(value.strip())
    if result is None:
        logger.debug(f"Could not parse {value!r} as {kind.value}")
    return result


def sub_string_as(
    text: str, start: int, count: int, kind: NumericKind
) -> Optional[Number]:
    """Extract a 1-based substring and parse it as ``kind``."""
    return parse_number(sub_string(text, start, count), kind)


def percent_of(percent: Number, value: Number) -> float:
    """Return ``percent`` percent of ``value`` (20 percent of 200 is 40.0)."""
    if percent == 0:
        return 0.0
    if percent == 100:
        return float(value)
    return float(value) * percent / 100


def to_currency_format(value: Union[Number, str, None]) -> str:
    """
    Format a number with "," thousands separators and no decimals.

    Strings are parsed first; None or unparseable strings format as "0".
    Fractions are rounded half to even.
    """
    if value is None:
        number: float = 0.0
    elif isinstance(value, str):
        parsed = _parse_float(value.strip())
        number = 0.0 if parsed is None else parsed
    else:
        number = value

    if isinstance(number, float) and not math.isfinite(number):
        number = 0.0

    return f"{round(number):,}"
