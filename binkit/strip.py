"""
binkit.strip
============

Trimming of leading/trailing byte runs.

Three matching modes decide what counts as a strippable run:

- ``single``: one byte, repeated (``target`` must be exactly one byte).
- ``order``:  the whole ``target`` sequence as a unit, repeated back to back
  and anchored at the boundary.
- ``random``: any run of bytes that are members of ``set(target)``; order and
  duplicates in ``target`` do not matter.

Runs are found by scanning from each boundary. Target bytes are always taken
literally.

Examples
--------
>>> strip(b"  hi  ")
b'hi'
>>> strip(b"ababbabcabcabbab", "both", b"ab", "order")
b'babcabcabb'
>>> strip(b"ababbabcabcabbab", "both", b"ab", "random")
b'cabc'
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from binkit.errors import InvalidArgument
from binkit.hexcodec import BytesLike, as_bytes

DEFAULT_TARGET = b" "


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class StripMode(str, Enum):
    SINGLE = "single"
    ORDER = "order"
    RANDOM = "random"


def _direction(value: Union[Direction, str]) -> Direction:
    try:
        return Direction(value)
    except ValueError:
        raise InvalidArgument(
            "unknown strip direction",
            direction=value,
            allowed=[d.value for d in Direction],
        ) from None


def _mode(value: Union[StripMode, str]) -> StripMode:
    try:
        return StripMode(value)
    except ValueError:
        raise InvalidArgument(
            "unknown strip mode",
            mode=value,
            allowed=[m.value for m in StripMode],
        ) from None


def _check_target(target: bytes, mode: StripMode) -> None:
    if not target:
        raise InvalidArgument("strip target must not be empty", mode=mode.value)
    if mode is StripMode.SINGLE and len(target) != 1:
        raise InvalidArgument(
            "single mode takes exactly one target byte",
            target=target,
            length=len(target),
        )


def _leading_run(data: bytes, target: bytes, mode: StripMode) -> int:
    """Number of bytes at the start of ``data`` made of matching units."""
    if mode is StripMode.ORDER:
        unit = len(target)
        i = 0
        while data.startswith(target, i):
            i += unit
        return i

    members = frozenset(target)
    i = 0
    end = len(data)
    while i < end and data[i] in members:
        i += 1
    return i


def _trailing_run(data: bytes, target: bytes, mode: StripMode) -> int:
    """Number of bytes at the end of ``data`` made of matching units."""
    if mode is StripMode.ORDER:
        unit = len(target)
        j = len(data)
        while j >= unit and data.endswith(target, 0, j):
            j -= unit
        return len(data) - j

    members = frozenset(target)
    j = len(data)
    while j > 0 and data[j - 1] in members:
        j -= 1
    return len(data) - j


def strip(
    data: BytesLike,
    direction: Union[Direction, str] = Direction.BOTH,
    target: BytesLike = DEFAULT_TARGET,
    mode: Union[StripMode, str] = StripMode.SINGLE,
) -> bytes:
    """
    Remove the maximal run of ``target`` units from the requested end(s).

    With ``direction="both"`` the leading run is removed first and the
    trailing run is matched on what is left, so a byte is never removed twice
    and input made only of matching units comes back empty.

    Raises `InvalidArgument` for an unknown direction or mode, an empty
    target, or a target that is not exactly one byte in ``single`` mode.
    """
    data = as_bytes(data)
    target = as_bytes(target, name="target")
    direction = _direction(direction)
    mode = _mode(mode)
    _check_target(target, mode)

    start = 0
    if direction in (Direction.LEFT, Direction.BOTH):
        start = _leading_run(data, target, mode)

    rest = data[start:]
    if direction in (Direction.RIGHT, Direction.BOTH):
        cut = _trailing_run(rest, target, mode)
        if cut:
            rest = rest[: len(rest) - cut]
    return rest


def lstrip(
    data: BytesLike,
    target: BytesLike = DEFAULT_TARGET,
    mode: Union[StripMode, str] = StripMode.SINGLE,
) -> bytes:
    return strip(data, Direction.LEFT, target, mode)


def rstrip(
    data: BytesLike,
    target: BytesLike = DEFAULT_TARGET,
    mode: Union[StripMode, str] = StripMode.SINGLE,
) -> bytes:
    return strip(data, Direction.RIGHT, target, mode)


__all__ = ["DEFAULT_TARGET", "Direction", "StripMode", "strip", "lstrip", "rstrip"]
