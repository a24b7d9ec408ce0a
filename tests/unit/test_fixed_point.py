from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from binkit.errors import InvalidArgument
from binkit.fixed_point import (
    field_size,
    fixed_point_binary_to_number,
    number_to_fixed_point_binary,
)


def test_reference_vector_16_16():
    encoded = number_to_fixed_point_binary(16, 16, 1.5)
    assert encoded == bytes([0, 1, 128, 0])
    assert fixed_point_binary_to_number(16, 16, encoded) == 1.5


def test_encode_truncates_toward_zero():
    # 1.999 * 256 = 511.744 -> 511
    assert number_to_fixed_point_binary(8, 8, 1.999) == b"\x01\xff"
    assert fixed_point_binary_to_number(8, 8, b"\x01\xff") == 1.99609375
    # small negatives truncate to zero and fit an unsigned field
    assert number_to_fixed_point_binary(8, 8, -0.001) == b"\x00\x00"


def test_decode_is_integer_plus_scaled_fraction():
    assert fixed_point_binary_to_number(8, 8, b"\x03\x40") == 3.25
    assert fixed_point_binary_to_number(16, 0, b"\x01\x2c") == 300.0
    assert isinstance(fixed_point_binary_to_number(16, 0, b"\x01\x2c"), float)


def test_decode_exact_returns_fraction():
    value = fixed_point_binary_to_number(16, 16, b"\x00\x01\x80\x00", exact=True)
    assert value == Fraction(3, 2)
    assert isinstance(value, Fraction)


def test_value_not_representable_is_truncated_once():
    encoded = number_to_fixed_point_binary(16, 16, 0.1)
    assert encoded == (6553).to_bytes(4, "big")
    assert fixed_point_binary_to_number(16, 16, encoded) == 6553 / 65536


def test_full_range_of_unsigned_field():
    assert number_to_fixed_point_binary(8, 8, 255.99609375) == b"\xff\xff"
    assert number_to_fixed_point_binary(8, 8, 0) == b"\x00\x00"
    with pytest.raises(InvalidArgument):
        number_to_fixed_point_binary(8, 8, 256.0)


def test_negative_value_overflows_unsigned_field():
    with pytest.raises(InvalidArgument) as ei:
        number_to_fixed_point_binary(8, 8, -1.0)
    assert ei.value.data["scaled"] == -256
    assert ei.value.data["signed"] is False


def test_signed_fields_use_twos_complement():
    encoded = number_to_fixed_point_binary(8, 8, -1.999, signed=True)
    assert encoded == b"\xfe\x01"  # -511
    assert fixed_point_binary_to_number(8, 8, encoded, signed=True) == -1.99609375
    assert number_to_fixed_point_binary(8, 8, -128, signed=True) == b"\x80\x00"
    with pytest.raises(InvalidArgument):
        number_to_fixed_point_binary(8, 8, 128, signed=True)
    # the same bytes read unsigned
    assert fixed_point_binary_to_number(8, 8, b"\x80\x00") == 128.0


def test_non_byte_aligned_layout_is_right_aligned():
    assert field_size(4, 8) == (12, 2)
    encoded = number_to_fixed_point_binary(4, 8, 1.5)
    assert encoded == b"\x01\x80"
    assert fixed_point_binary_to_number(4, 8, encoded) == 1.5
    with pytest.raises(InvalidArgument):
        number_to_fixed_point_binary(4, 8, 16.0)


def test_non_zero_pad_bits_rejected():
    with pytest.raises(InvalidArgument):
        fixed_point_binary_to_number(4, 8, b"\x10\x00")


def test_zero_width_field():
    assert number_to_fixed_point_binary(0, 0, 0.5) == b""
    assert fixed_point_binary_to_number(0, 0, b"") == 0.0
    with pytest.raises(InvalidArgument):
        number_to_fixed_point_binary(0, 0, 1)


def test_decode_size_mismatch():
    with pytest.raises(InvalidArgument) as ei:
        fixed_point_binary_to_number(16, 16, b"\x00\x01\x80")
    assert ei.value.data["expected_bytes"] == 4
    assert ei.value.data["got_bytes"] == 3
    with pytest.raises(InvalidArgument):
        fixed_point_binary_to_number(16, 16, b"\x00\x00\x01\x80\x00")


@pytest.mark.parametrize(
    "number, expected",
    [
        (Decimal("0.5"), b"\x00\x80"),
        (Fraction(1, 3), b"\x00\x55"),
        (3, b"\x03\x00"),
    ],
)
def test_encode_accepts_exact_number_types(number, expected):
    assert number_to_fixed_point_binary(8, 8, number) == expected


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, Decimal("NaN"), "1.5", None, True])
def test_encode_rejects_non_finite_and_non_numbers(bad):
    with pytest.raises(InvalidArgument):
        number_to_fixed_point_binary(8, 8, bad)  # type: ignore[arg-type]


@pytest.mark.parametrize("widths", [(-1, 8), (8, -1), (8.0, 8), (8, True)])
def test_widths_must_be_non_negative_ints(widths):
    i, f = widths
    with pytest.raises(InvalidArgument):
        number_to_fixed_point_binary(i, f, 1)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgument):
        fixed_point_binary_to_number(i, f, b"\x00\x00")  # type: ignore[arg-type]
