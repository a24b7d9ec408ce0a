from __future__ import annotations

import pytest

from binkit.errors import InvalidArgument
from binkit.strip import Direction, StripMode, lstrip, rstrip, strip

SAMPLE = b"ababbabcabcabbab"


def test_order_mode_strips_whole_units_only():
    assert strip(SAMPLE, Direction.BOTH, b"ab", StripMode.ORDER) == b"babcabcabb"


def test_random_mode_strips_any_member_byte():
    assert strip(SAMPLE, Direction.BOTH, b"ab", StripMode.RANDOM) == b"cabc"


def test_defaults_strip_spaces_on_both_ends():
    assert strip(b"  hi  ") == b"hi"
    assert strip(b"  hi  ", "left") == b"hi  "
    assert strip(b"  hi  ", "right") == b"  hi"


def test_three_argument_form_uses_single_mode():
    assert strip(b"xxhixx", "both", b"x") == b"hi"


def test_plain_strings_for_direction_and_mode():
    assert strip(SAMPLE, "left", b"ab", "order") == b"babcabcabbab"
    assert strip(SAMPLE, "right", b"ab", "order") == b"ababbabcabcabb"
    assert strip(SAMPLE, "left", b"ba", "random") == b"cabcabbab"
    assert strip(SAMPLE, "right", b"ba", "random") == b"ababbabcabc"


def test_whole_input_stripped_to_empty():
    assert strip(b"aaa", Direction.LEFT, b"a", StripMode.SINGLE) == b""
    assert strip(b"aaa", Direction.RIGHT, b"a") == b""
    assert strip(b"aaa", Direction.BOTH, b"a") == b""
    assert strip(b"ababab", "both", b"ab", "order") == b""
    assert strip(b"baab", "both", b"ab", "random") == b""


def test_empty_input():
    assert strip(b"", Direction.BOTH, b"a", StripMode.SINGLE) == b""
    assert strip(b"", "left", b"ab", "order") == b""
    assert strip(b"", "right", b"ab", "random") == b""


def test_no_match_leaves_input_unchanged():
    assert strip(b"hello", "both", b"x") == b"hello"
    assert strip(b"hello", "both", b"lo", "order") == b"hel"
    assert strip(b"hello", "both", b"ol", "order") == b"hello"


def test_order_mode_does_not_overconsume_partial_unit():
    assert strip(b"aba", "both", b"ab", "order") == b"a"
    assert strip(b"aaa", "both", b"aa", "order") == b"a"
    assert strip(b"a", "both", b"abc", "order") == b"a"


def test_both_never_removes_more_than_input():
    # left run consumes "aa"; the single "a" left over must not be matched twice
    assert strip(b"aaa", "both", b"aa", "order") == b"a"
    assert strip(b"abcab", "both", b"ab", "order") == b"c"


def test_target_bytes_are_literal():
    assert strip(b"..a.b..", "both", b".") == b"a.b"
    assert strip(b"^-]x]-^", "both", b"^-]", "random") == b"x"
    assert strip(b".*.*x.*", "both", b".*", "order") == b"x"


def test_byteslike_inputs():
    assert strip(bytearray(b"  x "), "both", memoryview(b" ")) == b"x"
    assert type(strip(bytearray(b"x"))) is bytes


def test_duplicates_in_random_target_collapse():
    assert strip(b"aabbcaa", "both", b"aab", "random") == b"c"


def test_lstrip_rstrip_wrappers():
    assert lstrip(b"--x--", b"-") == b"x--"
    assert rstrip(b"--x--", b"-") == b"--x"
    assert rstrip(SAMPLE, b"ab", StripMode.ORDER) == b"ababbabcabcabb"


@pytest.mark.parametrize("target", [b"", b"ab"])
def test_single_mode_requires_one_byte(target):
    with pytest.raises(InvalidArgument):
        strip(b"abc", "both", target, "single")


@pytest.mark.parametrize("mode", ["order", "random"])
def test_empty_target_rejected(mode):
    with pytest.raises(InvalidArgument):
        strip(b"abc", "both", b"", mode)


def test_unknown_direction_and_mode():
    with pytest.raises(InvalidArgument) as ei:
        strip(b"abc", "middle")
    assert ei.value.data["allowed"] == ["left", "right", "both"]
    with pytest.raises(InvalidArgument):
        strip(b"abc", "both", b"a", "regex")
