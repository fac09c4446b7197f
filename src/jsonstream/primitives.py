"""Primitive value and key encoding for JSON."""

import math
import sys
from decimal import Decimal
from typing import TYPE_CHECKING

from .string_utils import quote_string

if TYPE_CHECKING:
    from .types import JsonPrimitive

PRIMITIVE_TYPES = (type(None), bool, int, float, Decimal, str)


def is_primitive(value: object) -> bool:
    """Check if value is encoded as a single JSON literal."""
    return isinstance(value, PRIMITIVE_TYPES)


def encode_primitive(value: "JsonPrimitive | Decimal") -> str:
    """
    Encode a primitive value to its JSON literal.

    Args:
        value: The primitive value (str, int, float, Decimal, bool, or None).

    Returns:
        The encoded string representation.
    """
    if value is None:
        return "null"

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, (int, float, Decimal)):
        return _encode_number(value)

    if isinstance(value, str):
        return quote_string(value)

    raise TypeError(f"Cannot encode value of type {type(value).__name__}")


def _encode_number(value: int | float | Decimal) -> str:
    """Encode a number to JSON."""
    if isinstance(value, Decimal):
        if not value.is_finite():
            return "null"
        return str(value)

    if isinstance(value, float):
        # NaN and infinities have no JSON literal
        if math.isnan(value) or math.isinf(value):
            return "null"
        # repr is locale independent and round-trips
        return float.__repr__(value)

    return _encode_int(value)


def _encode_int(value: int) -> str:
    """Encode an integer, including ones past the interpreter's digit limit."""
    try:
        return int.__repr__(value)
    except ValueError:
        # Python 3.11+ refuses to convert very long integers by default
        limit = sys.get_int_max_str_digits()
        sys.set_int_max_str_digits(0)
        try:
            return int.__repr__(value)
        finally:
            sys.set_int_max_str_digits(limit)


def encode_key(key: object) -> str:
    """
    Encode a mapping key as a quoted JSON string.

    Keys of any type are coerced to text first: numbers and literals use
    their JSON spelling, everything else its ``str()``.

    Args:
        key: The mapping key.

    Returns:
        The quoted, escaped key.
    """
    if isinstance(key, str):
        return quote_string(key)
    if key is None or isinstance(key, (bool, int, float, Decimal)):
        return quote_string(encode_primitive(key))
    return quote_string(str(key))
