"""Coercion of driver column values into native Python types.

Each function takes one value as returned by a DB-API driver and either
returns the requested type or raises ConversionError. SQL NULL (None)
is never coerced.
"""

from __future__ import annotations

import math
import struct
import uuid
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any

from .errors import ConversionError

_BINARY_TYPES = (bytes, bytearray, memoryview)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TRUE_STRINGS = frozenset({"t", "true", "1"})
_FALSE_STRINGS = frozenset({"f", "false", "0"})
_NON_FINITE_WORDS = frozenset({"inf", "infinity", "nan"})


def _require_value(value: Any, target: str) -> None:
    if value is None:
        raise ConversionError(value, target)


def _numeric_text(value: str, target: str) -> str:
    # Python accepts digit separators ("1_000") that no SQL literal contains.
    text = value.strip()
    if "_" in text:
        raise ConversionError(value, target, f"invalid literal {value!r}")
    return text


def to_string(value: Any) -> str:
    """Return the text form of a column value.

    Binary values are decoded as UTF-8, booleans render as ``true``/``false``
    and temporal values as ISO 8601.
    """
    _require_value(value, "str")
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, _BINARY_TYPES):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ConversionError(value, "str", "not valid UTF-8") from exc
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (int, Decimal, uuid.UUID)):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    raise ConversionError(value, "str")


def to_bytes(value: Any) -> bytes:
    """Return the binary form of a column value.

    Integers are encoded big-endian, 4 bytes wide when they fit in 32 bits
    and 8 bytes otherwise; floats as 8-byte IEEE 754.
    """
    _require_value(value, "bytes")
    if isinstance(value, _BINARY_TYPES):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bool):
        return b"\x01" if value else b"\x00"
    if isinstance(value, int):
        if _INT32_MIN <= value <= _INT32_MAX:
            return struct.pack(">i", value)
        if _INT64_MIN <= value <= _INT64_MAX:
            return struct.pack(">q", value)
        raise ConversionError(value, "bytes", "integer out of 64-bit range")
    if isinstance(value, float):
        return struct.pack(">d", value)
    if isinstance(value, uuid.UUID):
        return value.bytes
    raise ConversionError(value, "bytes")


def to_int(value: Any) -> int:
    """Return an integer, rejecting values with a fractional part."""
    _require_value(value, "int")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ConversionError(value, "int", f"{value!r} has a fractional part")
        return int(value)
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise ConversionError(value, "int", f"{value} is not an integer")
        return int(value)
    if isinstance(value, str):
        try:
            return int(_numeric_text(value, "int"))
        except ValueError as exc:
            raise ConversionError(value, "int", f"invalid literal {value!r}") from exc
    raise ConversionError(value, "int")


def to_float(value: Any) -> float:
    """Return a double, rejecting finite values too large to represent.

    Infinity and NaN pass through only when the input already was one.
    """
    _require_value(value, "float")
    if isinstance(value, float):
        return value
    if isinstance(value, (int, Decimal)):
        number: Any = value
        finite_input = not isinstance(value, Decimal) or value.is_finite()
    elif isinstance(value, str):
        number = _numeric_text(value, "float")
        finite_input = number.lstrip("+-").lower() not in _NON_FINITE_WORDS
    else:
        raise ConversionError(value, "float")
    try:
        result = float(number)
    except OverflowError as exc:
        raise ConversionError(value, "float", "out of double range") from exc
    except ValueError as exc:
        raise ConversionError(value, "float", f"invalid literal {value!r}") from exc
    if finite_input and not math.isfinite(result):
        raise ConversionError(value, "float", "out of double range")
    return result


def to_decimal(value: Any) -> Decimal:
    """Return an exact decimal.

    Floats go through their shortest repr, so ``1.23`` stored as a double
    becomes ``Decimal("1.23")`` rather than its binary expansion.
    """
    _require_value(value, "Decimal")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        result = Decimal(int(value))
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ConversionError(value, "Decimal", f"{value!r} is not finite")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(_numeric_text(value, "Decimal"))
        except InvalidOperation as exc:
            raise ConversionError(value, "Decimal", f"invalid literal {value!r}") from exc
    else:
        raise ConversionError(value, "Decimal")
    if not result.is_finite():
        raise ConversionError(value, "Decimal", f"{result} is not finite")
    return result


def to_uuid(value: Any) -> uuid.UUID:
    _require_value(value, "UUID")
    if isinstance(value, uuid.UUID):
        return value
    try:
        if isinstance(value, str):
            return uuid.UUID(value.strip())
        if isinstance(value, _BINARY_TYPES):
            return uuid.UUID(bytes=bytes(value))
    except ValueError as exc:
        raise ConversionError(value, "UUID", str(exc)) from exc
    raise ConversionError(value, "UUID")


def to_bool(value: Any) -> bool:
    _require_value(value, "bool")
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ConversionError(value, "bool", f"{value} is neither 0 nor 1")
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ConversionError(value, "bool", f"invalid literal {value!r}")
    raise ConversionError(value, "bool")
