"""Conversions between UTF-8 bytes, UTF-16 code units and UTF-32 code points."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

MAX_CODEPOINT = 0x10FFFF


class UTFError(ValueError):
    """Raised for malformed input to a UTF conversion."""


def _decode_utf8(data: Sequence[int], bad_lead: str) -> Iterator[int]:
    size = len(data)
    i = 0
    while i < size:
        byte = data[i]
        if byte < 0x80:
            yield byte
            i += 1
            continue
        if byte & 0xE0 == 0xC0:
            extra, cp = 1, byte & 0x1F
        elif byte & 0xF0 == 0xE0:
            extra, cp = 2, byte & 0x0F
        elif byte & 0xF8 == 0xF0:
            extra, cp = 3, byte & 0x07
        else:
            raise UTFError(bad_lead)
        if i + extra >= size:
            raise UTFError("Invalid UTF-8 sequence")
        for follower in data[i + 1 : i + 1 + extra]:
            cp = cp << 6 | (follower & 0x3F)
        yield cp
        i += 1 + extra


def _encode_utf8(cp: int, message: str) -> bytes:
    if cp < 0:
        raise UTFError(message)
    if cp <= 0x7F:
        return bytes((cp,))
    if cp <= 0x7FF:
        return bytes(((cp >> 6) | 0xC0, (cp & 0x3F) | 0x80))
    if cp <= 0xFFFF:
        return bytes(((cp >> 12) | 0xE0, ((cp >> 6) & 0x3F) | 0x80, (cp & 0x3F) | 0x80))
    if cp <= MAX_CODEPOINT:
        return bytes(
            (
                (cp >> 18) | 0xF0,
                ((cp >> 12) & 0x3F) | 0x80,
                ((cp >> 6) & 0x3F) | 0x80,
                (cp & 0x3F) | 0x80,
            )
        )
    raise UTFError(message)


def _decode_utf16(units: Sequence[int]) -> Iterator[int]:
    size = len(units)
    i = 0
    while i < size:
        unit = units[i]
        if unit < 0xD800 or unit > 0xDFFF:
            yield unit
            i += 1
        elif unit <= 0xDBFF:
            if i + 1 >= size:
                raise UTFError("Invalid UTF-16 sequence")
            low = units[i + 1]
            if low < 0xDC00 or low > 0xDFFF:
                raise UTFError("Invalid UTF-16 low surrogate")
            yield ((unit - 0xD800) << 10) + (low - 0xDC00) + 0x10000
            i += 2
        else:
            raise UTFError("Invalid UTF-16 high surrogate")


def _encode_utf16(cp: int) -> tuple[int, ...]:
    if 0 <= cp <= 0xFFFF:
        return (cp,)
    if 0xFFFF < cp <= MAX_CODEPOINT:
        cp -= 0x10000
        return ((cp >> 10) + 0xD800, (cp & 0x3FF) + 0xDC00)
    raise UTFError("Invalid Unicode codepoint")


def utf8_to_utf32(data: bytes | Sequence[int]) -> list[int]:
    """Decode UTF-8 bytes into code points."""
    return list(_decode_utf8(data, "Invalid UTF-8 byte"))


def utf32_to_utf8(codepoints: Iterable[int]) -> bytes:
    """Encode code points as UTF-8 bytes."""
    return b"".join(_encode_utf8(cp, "Invalid UTF-32 codepoint") for cp in codepoints)


def utf8_to_utf16(data: bytes | Sequence[int]) -> list[int]:
    """Decode UTF-8 bytes into UTF-16 code units."""
    return [unit for cp in _decode_utf8(data, "Invalid UTF-8 sequence") for unit in _encode_utf16(cp)]


def utf16_to_utf8(units: Sequence[int]) -> bytes:
    """Encode UTF-16 code units as UTF-8 bytes."""
    return b"".join(_encode_utf8(cp, "Invalid Unicode codepoint") for cp in _decode_utf16(units))


def utf16_to_utf32(units: Sequence[int]) -> list[int]:
    """Combine UTF-16 code units into code points."""
    return list(_decode_utf16(units))


def utf32_to_utf16(codepoints: Iterable[int]) -> list[int]:
    """Split code points into UTF-16 code units."""
    return [unit for cp in codepoints for unit in _encode_utf16(cp)]