"""
binkit.rand
===========

Random, pairwise distinct byte strings.

Values come from the OS CSPRNG (`secrets.token_bytes`) unless a ``source``
callable is supplied; ``source(n)`` must return ``n`` bytes. Duplicate draws
are discarded and redrawn, so the result holds exactly ``count`` distinct
values, in the order they were first drawn.
"""

from __future__ import annotations

import secrets
from typing import Callable, List, Optional, Set

from binkit.errors import InvalidArgument
from binkit.logging import get_logger

log = get_logger(__name__)

ByteSource = Callable[[int], bytes]


def _check_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgument(f"{name} must be a non-negative int", field=name, got=repr(value))
    return value


def generate_random_list(
    byte_size: int,
    count: int,
    *,
    source: Optional[ByteSource] = None,
) -> List[bytes]:
    """
    Return ``count`` distinct random byte strings of ``byte_size`` bytes each.

    Raises `InvalidArgument` when ``count`` is larger than the number of
    distinct values of that size (``256 ** byte_size``), which would otherwise
    never terminate.
    """
    byte_size = _check_count(byte_size, "byte_size")
    count = _check_count(count, "count")
    # count <= 2 ** (8 * byte_size), without building the power
    if count and (count - 1).bit_length() > 8 * byte_size:
        raise InvalidArgument(
            "not enough distinct values",
            byte_size=byte_size,
            count=count,
        )
    draw = source or secrets.token_bytes

    out: List[bytes] = []
    seen: Set[bytes] = set()
    duplicates = 0
    while len(out) < count:
        value = bytes(draw(byte_size))
        if len(value) != byte_size:
            raise InvalidArgument(
                "byte source returned the wrong length",
                expected=byte_size,
                got=len(value),
            )
        if value in seen:
            duplicates += 1
            continue
        seen.add(value)
        out.append(value)

    if duplicates:
        log.debug(
            "random list generated with redraws",
            extra={"byte_size": byte_size, "count": count, "duplicates": duplicates},
        )
    return out


__all__ = ["ByteSource", "generate_random_list"]
