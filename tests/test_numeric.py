import struct
import sys

import pytest

from dywoqlib.numeric import UnsupportedNumericTypeError, numeric_limits

SIGNED = {"int8": 1, "int16": 2, "int32": 4, "int64": 8, "int": 8, "rune": 4}
UNSIGNED = {"uint8": 1, "uint16": 2, "uint32": 4, "uint64": 8, "uint": 8, "byte": 1}


def test_int8_limits():
    assert numeric_limits("int8") == (-128, 127)


def test_uint8_limits():
    assert numeric_limits("uint8") == (0, 255)


@pytest.mark.parametrize("kind,width", sorted(SIGNED.items()))
def test_signed_limits_match_twos_complement(kind, width):
    lo, hi = numeric_limits(kind)
    expected_lo = int.from_bytes(b"\x80" + b"\x00" * (width - 1), "big", signed=True)
    expected_hi = int.from_bytes(b"\x7f" + b"\xff" * (width - 1), "big", signed=True)
    assert (lo, hi) == (expected_lo, expected_hi)


@pytest.mark.parametrize("kind,width", sorted(UNSIGNED.items()))
def test_unsigned_limits_match_all_ones(kind, width):
    lo, hi = numeric_limits(kind)
    assert lo == 0
    assert hi == int.from_bytes(b"\xff" * width, "big")


def test_float32_limits_match_largest_single():
    largest = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
    assert numeric_limits("float32") == (-largest, largest)


def test_float64_limits():
    assert numeric_limits("float64") == (-sys.float_info.max, sys.float_info.max)


@pytest.mark.parametrize("kind", ["uintptr", "complex128", "string", "", None])
def test_unsupported_kind_raises(kind):
    with pytest.raises(UnsupportedNumericTypeError):
        numeric_limits(kind)