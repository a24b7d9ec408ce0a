"""
binkit - byte-sequence utilities.

Hex encode/decode, value coercion, numeric parsing, strip/trim with
single/order/random matching, abbreviation, byte remapping, fill, join,
random distinct byte strings and big-endian fixed-point conversion.

All operations are pure functions over ``bytes`` (bytes-like inputs are
accepted) apart from `generate_random_list`, which reads the OS CSPRNG.

    >>> from binkit import strip, to_hex
    >>> strip(b"  hi  ")
    b'hi'
    >>> to_hex(b"ab_YZ")
    b'61625f595a'
"""

from __future__ import annotations

from binkit.convert import (
    DEFAULT_SYMBOLS,
    Symbol,
    SymbolTable,
    format,
    symbol,
    to_binary,
    to_float,
    to_number,
    try_binary_to_existing_symbol,
)
from binkit.errors import BinkitError, ConfigError, InvalidArgument, InvalidFormat, InvalidHex
from binkit.fixed_point import fixed_point_binary_to_number, number_to_fixed_point_binary
from binkit.hexcodec import from_hex, to_hex
from binkit.rand import generate_random_list
from binkit.strip import Direction, StripMode, lstrip, rstrip, strip
from binkit.text import abbreviate, fill, join, tr
from binkit.version import __version__


def get_version() -> str:
    """Return the version string for this package."""
    return __version__


__all__ = [
    "__version__",
    "get_version",
    # errors
    "BinkitError",
    "ConfigError",
    "InvalidArgument",
    "InvalidFormat",
    "InvalidHex",
    # hex
    "to_hex",
    "from_hex",
    # conversion
    "Symbol",
    "SymbolTable",
    "DEFAULT_SYMBOLS",
    "symbol",
    "try_binary_to_existing_symbol",
    "to_binary",
    "format",
    "to_float",
    "to_number",
    # strip
    "Direction",
    "StripMode",
    "strip",
    "lstrip",
    "rstrip",
    # text
    "abbreviate",
    "tr",
    "fill",
    "join",
    # random
    "generate_random_list",
    # fixed point
    "fixed_point_binary_to_number",
    "number_to_fixed_point_binary",
]
