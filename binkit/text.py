"""
binkit.text
===========

Byte-oriented text helpers: truncation with an ellipsis, byte remapping,
repeated-byte buffers and separator joins.

Lengths are byte lengths. Cutting UTF-8 encoded text may split a multi-byte
character.
"""

from __future__ import annotations

from typing import Iterable, Tuple, Union

from binkit.errors import InvalidArgument
from binkit.hexcodec import BytesLike, as_bytes

DEFAULT_ELLIPSIS = b"..."

ByteValue = Union[int, BytesLike]


def _byte_value(value: ByteValue, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgument(f"{name} must be a byte", field=name, got=value)
    if isinstance(value, int):
        if not 0 <= value <= 0xFF:
            raise InvalidArgument(f"{name} out of byte range", field=name, got=value)
        return value
    if isinstance(value, (bytes, bytearray, memoryview)) and len(value) == 1:
        return bytes(value)[0]
    raise InvalidArgument(f"{name} must be an int 0..255 or a single byte", field=name, got=repr(value))


def abbreviate(data: BytesLike, max_length: int, ellipsis: BytesLike = DEFAULT_ELLIPSIS) -> bytes:
    """
    Truncate ``data`` to ``max_length`` bytes, marking the cut with ``ellipsis``.

    Input that already fits is returned unchanged. The ellipsis itself is never
    shortened, so when it is longer than ``max_length`` the result is longer
    than ``max_length``.

    >>> abbreviate(b"hello world", 6)
    b'hel...'
    >>> abbreviate(b"hello world", 100)
    b'hello world'
    """
    if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 0:
        raise InvalidArgument("max_length must be a non-negative int", got=repr(max_length))
    data = as_bytes(data)
    if len(data) <= max_length:
        return data
    ellipsis = as_bytes(ellipsis, name="ellipsis")
    keep = max(0, max_length - len(ellipsis))
    return data[:keep] + ellipsis


def tr(data: BytesLike, mapping: Iterable[Tuple[ByteValue, ByteValue]]) -> bytes:
    """
    Replace bytes according to an ordered list of ``(from, to)`` rules.

    The first rule naming a byte wins; replaced bytes are not rewritten again.

    >>> tr(b"abcdef", [(ord("a"), ord("1")), (ord("c"), ord("3"))])
    b'1b3def'
    """
    data = as_bytes(data)
    table = bytearray(range(256))
    seen = set()
    for rule in mapping:
        try:
            src, dst = rule
        except (TypeError, ValueError):
            raise InvalidArgument("tr rules must be (from, to) pairs", got=repr(rule)) from None
        src_b = _byte_value(src, "from")
        dst_b = _byte_value(dst, "to")
        if src_b in seen:
            continue
        seen.add(src_b)
        table[src_b] = dst_b
    if not seen:
        return data
    return data.translate(bytes(table))


def fill(byte: ByteValue, count: int) -> bytes:
    """
    Build a buffer of ``count`` copies of ``byte``.

    >>> fill(0, 4)
    b'\\x00\\x00\\x00\\x00'
    >>> fill(ord("a"), 3)
    b'aaa'
    """
    value = _byte_value(byte, "byte")
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidArgument("count must be a non-negative int", got=repr(count))
    return bytes((value,)) * count


def join(parts: Iterable[BytesLike], separator: BytesLike) -> bytes:
    """
    Concatenate ``parts`` with ``separator`` between neighbours.

    >>> join([b"a", b"b", b"c"], b"-")
    b'a-b-c'
    >>> join([], b"-")
    b''
    """
    separator = as_bytes(separator, name="separator")
    return separator.join(as_bytes(p, name="part") for p in parts)


__all__ = ["DEFAULT_ELLIPSIS", "abbreviate", "tr", "fill", "join"]
