import struct

import pytest

from nodeish.utf import (
    UTFError,
    utf8_to_utf16,
    utf8_to_utf32,
    utf16_to_utf8,
    utf16_to_utf32,
    utf32_to_utf8,
    utf32_to_utf16,
)

SAMPLES = ["", "ascii", "héllo", "日本語", "mixed é 日 \U0001F600 end", "\U0010FFFF"]


def _utf16_units(text):
    raw = text.encode("utf-16-le")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


@pytest.mark.parametrize("text", SAMPLES)
def test_utf8_to_utf32_matches_codepoints(text):
    assert utf8_to_utf32(text.encode("utf-8")) == [ord(c) for c in text]


@pytest.mark.parametrize("text", SAMPLES)
def test_utf32_to_utf8_matches_encoding(text):
    assert utf32_to_utf8([ord(c) for c in text]) == text.encode("utf-8")


@pytest.mark.parametrize("text", SAMPLES)
def test_utf8_to_utf16_matches_encoding(text):
    assert utf8_to_utf16(text.encode("utf-8")) == _utf16_units(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_utf16_to_utf8_matches_encoding(text):
    assert utf16_to_utf8(_utf16_units(text)) == text.encode("utf-8")


@pytest.mark.parametrize("text", SAMPLES)
def test_utf16_utf32_round_trip(text):
    points = [ord(c) for c in text]
    units = utf32_to_utf16(points)
    assert units == _utf16_units(text)
    assert utf16_to_utf32(units) == points


def test_surrogate_pair_boundaries():
    assert utf32_to_utf16([0x10000]) == [0xD800, 0xDC00]
    assert utf32_to_utf16([0x10FFFF]) == [0xDBFF, 0xDFFF]


def test_truncated_utf8_sequence():
    with pytest.raises(UTFError, match="Invalid UTF-8 sequence"):
        utf8_to_utf32("é".encode("utf-8")[:1])
    with pytest.raises(UTFError, match="Invalid UTF-8 sequence"):
        utf8_to_utf16("日".encode("utf-8")[:2])


def test_invalid_utf8_lead_byte():
    with pytest.raises(UTFError, match="Invalid UTF-8 byte"):
        utf8_to_utf32(bytes([0xFF]))
    with pytest.raises(UTFError, match="Invalid UTF-8 sequence"):
        utf8_to_utf16(bytes([0x80]))


def test_codepoint_out_of_range():
    with pytest.raises(UTFError, match="Invalid UTF-32 codepoint"):
        utf32_to_utf8([0x110000])
    with pytest.raises(UTFError, match="Invalid Unicode codepoint"):
        utf32_to_utf16([0x110000])


def test_lone_high_surrogate_at_end():
    with pytest.raises(UTFError, match="Invalid UTF-16 sequence"):
        utf16_to_utf32([0xD800])
    with pytest.raises(UTFError, match="Invalid UTF-16 sequence"):
        utf16_to_utf8([0x41, 0xD800])


def test_bad_low_surrogate():
    with pytest.raises(UTFError, match="Invalid UTF-16 low surrogate"):
        utf16_to_utf32([0xD800, 0x41])


def test_unpaired_low_surrogate():
    with pytest.raises(UTFError, match="Invalid UTF-16 high surrogate"):
        utf16_to_utf8([0xDC00])


def test_error_is_value_error():
    with pytest.raises(ValueError):
        utf16_to_utf32([0xDFFF])