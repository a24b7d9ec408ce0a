from __future__ import annotations

from binkit.strip import Direction, StripMode, strip
from tests.property import given, small_alphabet, st

directions = st.sampled_from(list(Direction))


@given(small_alphabet(), st.sampled_from([b"a", b"b", b"c"]), directions)
def test_single_matches_bytes_methods(data: bytes, target: bytes, direction: Direction):
    expected = {
        Direction.LEFT: data.lstrip(target),
        Direction.RIGHT: data.rstrip(target),
        Direction.BOTH: data.strip(target),
    }[direction]
    assert strip(data, direction, target, StripMode.SINGLE) == expected


@given(small_alphabet(), small_alphabet(max_size=3).filter(bool), directions)
def test_random_matches_bytes_methods(data: bytes, target: bytes, direction: Direction):
    expected = {
        Direction.LEFT: data.lstrip(target),
        Direction.RIGHT: data.rstrip(target),
        Direction.BOTH: data.strip(target),
    }[direction]
    assert strip(data, direction, target, StripMode.RANDOM) == expected


@given(small_alphabet(), small_alphabet(max_size=3).filter(bool), directions)
def test_order_never_grows_and_leaves_no_unit(data: bytes, target: bytes, direction: Direction):
    out = strip(data, direction, target, StripMode.ORDER)
    assert len(out) <= len(data)
    assert out in data
    if direction in (Direction.LEFT, Direction.BOTH):
        assert not out.startswith(target)
    if direction in (Direction.RIGHT, Direction.BOTH):
        assert not out.endswith(target)
    assert (len(data) - len(out)) % len(target) == 0


@given(small_alphabet(), small_alphabet(max_size=3).filter(bool), st.sampled_from(list(StripMode)))
def test_idempotent(data: bytes, target: bytes, mode: StripMode):
    if mode is StripMode.SINGLE:
        target = target[:1]
    once = strip(data, Direction.BOTH, target, mode)
    assert strip(once, Direction.BOTH, target, mode) == once
