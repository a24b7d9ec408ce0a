from __future__ import annotations

import pytest

from binkit.errors import ErrorCode, InvalidFormat, InvalidHex
from binkit.hexcodec import as_bytes, from_hex, to_hex


def test_to_hex_is_lowercase_two_chars_per_byte():
    assert to_hex(b"ab_YZ") == b"61625f595a"
    assert to_hex(b"\x00\xff\x10") == b"00ff10"
    assert to_hex(b"") == b""


def test_to_hex_accepts_byteslike():
    assert to_hex(bytearray(b"\xde\xad")) == b"dead"
    assert to_hex(memoryview(b"\xbe\xef")) == b"beef"


def test_to_hex_rejects_text():
    with pytest.raises(TypeError):
        to_hex("abc")  # type: ignore[arg-type]


def test_from_hex_roundtrip_and_mixed_case():
    assert from_hex(b"61625f595a") == b"ab_YZ"
    assert from_hex(b"DEADbeef") == b"\xde\xad\xbe\xef"
    assert from_hex("cafe") == b"\xca\xfe"
    assert from_hex(b"") == b""


def test_from_hex_odd_length_is_left_padded():
    assert from_hex(b"abc") == b"\x0a\xbc"
    assert from_hex(b"1") == b"\x01"


@pytest.mark.parametrize("bad", [b"zz", b"0g", b"12 34", b"0x12", b"\xff\xff", "é1"])
def test_from_hex_rejects_non_hex(bad):
    with pytest.raises(InvalidHex) as ei:
        from_hex(bad)
    err = ei.value
    assert err.code == ErrorCode.INVALID_HEX
    assert isinstance(err, InvalidFormat)
    assert isinstance(err, ValueError)


def test_from_hex_reports_position():
    with pytest.raises(InvalidHex) as ei:
        from_hex(b"00zz")
    assert ei.value.data["position"] == 2
    assert ei.value.data["input"] == b"00zz".hex()


def test_as_bytes_normalizes():
    assert as_bytes(bytearray(b"x")) == b"x"
    assert type(as_bytes(memoryview(b"x"))) is bytes
    with pytest.raises(TypeError):
        as_bytes(1)  # type: ignore[arg-type]
