import pytest
from hypothesis import given, strategies as st

from fsshell.textutil import decode_name, pretty_byte


def test_decode_name_strips_trailing_nuls():
    assert decode_name(b"root\x00\x00\x00") == "root"


def test_decode_name_keeps_inner_nul():
    assert decode_name(b"a\x00b\x00") == "a\x00b"


def test_decode_name_invalid_utf8():
    assert decode_name(b"\xff\xfe") == "[err invaild utf-8]"


def test_decode_name_empty_field():
    assert decode_name(b"\x00" * 16) == ""


@given(st.text(alphabet=st.characters(blacklist_characters="\x00"), max_size=30))
def test_decode_name_round_trip(name):
    raw = name.encode("utf-8") + b"\x00" * 8
    assert decode_name(raw) == name


@pytest.mark.parametrize("size", [0, 1, 5, 1023])
def test_pretty_byte_bytes_have_no_decimals(size):
    assert pretty_byte(size) == f"{size} B"


def test_pretty_byte_kilobytes():
    assert pretty_byte(1024) == "1.00 KB"
    assert pretty_byte(1536) == "1.50 KB"


def test_pretty_byte_megabytes():
    assert pretty_byte(1024 * 1024) == "1.00 MB"


@given(st.integers(min_value=1024, max_value=1024 * 1024 - 1))
def test_pretty_byte_kb_range(size):
    result = pretty_byte(size)
    assert result.endswith(" KB")
    assert 1.0 <= float(result.split()[0]) <= 1024.0


@given(st.integers(min_value=1024 * 1024, max_value=2**32 - 1))
def test_pretty_byte_mb_range(size):
    result = pretty_byte(size)
    assert result.endswith(" MB")
    assert float(result.split()[0]) >= 1.0