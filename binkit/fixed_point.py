"""
binkit.fixed_point
==================

Big-endian binary fixed-point numbers.

A layout is a pair ``(integer_bits, fraction_bits)``. The encoded field is
``integer_bits + fraction_bits`` bits wide, most-significant bit first: the
high ``integer_bits`` bits hold the integer part, the low ``fraction_bits``
bits hold the fraction scaled by ``2**fraction_bits``. The field is stored
right-aligned in ``ceil(total / 8)`` bytes; for byte-aligned widths there are
no pad bits.

Fields are unsigned unless ``signed=True`` is passed, in which case the whole
field is two's complement.

Examples
--------
>>> number_to_fixed_point_binary(16, 16, 1.5)
b'\\x00\\x01\\x80\\x00'
>>> fixed_point_binary_to_number(16, 16, b"\\x00\\x01\\x80\\x00")
1.5
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from numbers import Rational, Real
from typing import Tuple, Union

from binkit.errors import InvalidArgument
from binkit.hexcodec import BytesLike, as_bytes

Number = Union[int, float, Fraction, Decimal]


def _check_width(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int", field=name, got=type(value).__name__)
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative", field=name, got=value)
    return value


def field_size(integer_bits: int, fraction_bits: int) -> Tuple[int, int]:
    """Return ``(total_bits, byte_length)`` for a layout."""
    total = _check_width(integer_bits, "integer_bits") + _check_width(fraction_bits, "fraction_bits")
    return total, (total + 7) // 8


def _value_range(total: int, signed: bool) -> Tuple[int, int]:
    # Half-open [lo, hi) of representable raw field values.
    if not signed:
        return 0, 1 << total
    if total == 0:
        return 0, 1
    half = 1 << (total - 1)
    return -half, half


def _scaled(number: Number, fraction_bits: int) -> int:
    if isinstance(number, bool) or not isinstance(number, (Real, Decimal)):
        raise InvalidArgument("fixed-point value must be a real number", got=type(number).__name__)
    try:
        exact = number if isinstance(number, Rational) else Fraction(number)
    except (ValueError, OverflowError):
        raise InvalidArgument("fixed-point value must be finite", got=str(number)) from None
    return math.trunc(exact * (1 << fraction_bits))


def fixed_point_binary_to_number(
    integer_bits: int,
    fraction_bits: int,
    data: BytesLike,
    *,
    signed: bool = False,
    exact: bool = False,
) -> Union[float, Fraction]:
    """
    Decode a big-endian fixed-point field.

    ``data`` must be exactly ``ceil((integer_bits + fraction_bits) / 8)``
    bytes and any pad bits above the field must be zero; otherwise
    `InvalidArgument` is raised.

    Returns ``I + F / 2**fraction_bits`` as the nearest float, or as an exact
    `Fraction` when ``exact=True``.
    """
    total, nbytes = field_size(integer_bits, fraction_bits)
    data = as_bytes(data)
    if len(data) != nbytes:
        raise InvalidArgument(
            "fixed-point size mismatch",
            integer_bits=integer_bits,
            fraction_bits=fraction_bits,
            expected_bytes=nbytes,
            got_bytes=len(data),
        )

    raw = int.from_bytes(data, "big")
    if raw >> total:
        raise InvalidArgument("non-zero pad bits in fixed-point field", total_bits=total, data=data)
    if signed and total and raw >> (total - 1):
        raw -= 1 << total

    scale = 1 << fraction_bits
    if exact:
        return Fraction(raw, scale)
    # int / int is correctly rounded, so this is the nearest float to I + F/scale.
    return raw / scale


def number_to_fixed_point_binary(
    integer_bits: int,
    fraction_bits: int,
    number: Number,
    *,
    signed: bool = False,
) -> bytes:
    """
    Encode ``number`` as a big-endian fixed-point field.

    The value is scaled by ``2**fraction_bits`` and truncated toward zero
    (never rounded). A scaled value outside the field's range raises
    `InvalidArgument`; negative values only fit when ``signed=True``.
    """
    total, nbytes = field_size(integer_bits, fraction_bits)
    scaled = _scaled(number, fraction_bits)

    lo, hi = _value_range(total, signed)
    if not lo <= scaled < hi:
        raise InvalidArgument(
            "value does not fit fixed-point field",
            integer_bits=integer_bits,
            fraction_bits=fraction_bits,
            signed=signed,
            scaled=scaled,
        )
    if scaled < 0:
        scaled += 1 << total
    return scaled.to_bytes(nbytes, "big")


decode = fixed_point_binary_to_number
encode = number_to_fixed_point_binary


__all__ = [
    "Number",
    "field_size",
    "fixed_point_binary_to_number",
    "number_to_fixed_point_binary",
    "decode",
    "encode",
]
