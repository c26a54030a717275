"""Comparison and sign values, and the limits of fixed-width numeric types."""

from __future__ import annotations

import enum
import sys


class Compare(enum.IntEnum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Sign(enum.IntEnum):
    """Sign of a number."""

    NEGATIVE = -1
    POSITIVE = 1
    ZERO = 0


class UnsupportedNumericTypeError(TypeError):
    """Raised for a numeric type name that has no known limits."""


_MAX_FLOAT32 = 3.40282346638528859811704183484516925440e38


def _signed(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _unsigned(bits: int) -> tuple[int, int]:
    return 0, (1 << bits) - 1


_LIMITS: dict[str, tuple[int, int] | tuple[float, float]] = {
    "int": _signed(64),
    "int8": _signed(8),
    "int16": _signed(16),
    "int32": _signed(32),
    "rune": _signed(32),
    "int64": _signed(64),
    "uint": _unsigned(64),
    "uint8": _unsigned(8),
    "byte": _unsigned(8),
    "uint16": _unsigned(16),
    "uint32": _unsigned(32),
    "uint64": _unsigned(64),
    "float32": (-_MAX_FLOAT32, _MAX_FLOAT32),
    "float64": (-sys.float_info.max, sys.float_info.max),
}


def numeric_limits(kind: str) -> tuple[int, int] | tuple[float, float]:
    """Return ``(minimum, maximum)`` for the named numeric type, e.g. ``"int8"``."""
    try:
        return _LIMITS[kind]
    except (KeyError, TypeError):
        raise UnsupportedNumericTypeError(f"unsupported numeric type: {kind!r}") from None