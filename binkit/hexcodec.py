"""
binkit.hexcodec
===============

Hex encoding between raw byte sequences and their ASCII hex form.

Both directions work on *bytes*: the encoded form is itself a byte sequence of
lowercase ``[0-9a-f]`` digits, two per input byte.

Examples
--------
>>> to_hex(b"ab_YZ")
b'61625f595a'
>>> from_hex(b"61625f595a")
b'ab_YZ'
>>> from_hex(b"abc")
b'\\n\\xbc'
"""

from __future__ import annotations

import binascii
from typing import Union

from binkit.errors import InvalidHex

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def is_byteslike(x: object) -> bool:
    return isinstance(x, (bytes, bytearray, memoryview))


def as_bytes(data: BytesLike, *, name: str = "data") -> bytes:
    """Normalize a bytes-like value to immutable ``bytes``."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"{name} must be bytes-like, got {type(data).__name__}")


def to_hex(data: BytesLike) -> bytes:
    """Return the lowercase hex representation of ``data`` as bytes."""
    return binascii.hexlify(as_bytes(data))


def from_hex(encoded: Union[BytesLike, str]) -> bytes:
    """
    Decode a hex byte sequence into raw bytes.

    Upper and lower case digits are accepted. An odd-length input is read as
    if it had a leading ``"0"``. Any byte outside ``[0-9a-fA-F]`` (whitespace
    included) raises `InvalidHex`.
    """
    if isinstance(encoded, str):
        try:
            raw = encoded.encode("ascii")
        except UnicodeEncodeError:
            raise InvalidHex(encoded) from None
    else:
        raw = as_bytes(encoded, name="encoded")

    for pos, ch in enumerate(raw):
        if ch not in _HEX_DIGITS:
            raise InvalidHex(raw, position=pos)

    if len(raw) % 2 == 1:
        raw = b"0" + raw
    return binascii.unhexlify(raw)


__all__ = ["BytesLike", "is_byteslike", "as_bytes", "to_hex", "from_hex"]
