"""A small pattern matcher with its own compact pattern syntax.

Supported syntax: literals, ``.``, ``^``, ``$``, character classes ``[...]``
and ``[^...]`` with ranges, groups ``(...)`` whose matches are remembered,
top-level alternation ``|``, the quantifiers ``?``, ``*``, ``+`` and
``{n}`` / ``{n,m}``, and the escapes ``\\b \\B \\w \\W \\d \\D \\s \\S \\n \\N``
(``\\n`` stands for a printable character).  With ``icase`` the text is folded
to lower case before it is compared, so case-insensitive patterns are written
in lower case.  Empty matches are never reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import iterator as _iterator

_END = "\x01"
_START = "\x02"
_BOUNDARY = "\x03"
_WORD = "\x04"
_DIGIT = "\x05"
_SPACE = "\x06"
_PRINT = "\x07"
_ANY = "\x0c"
_ESCAPED = "\x0f"

_ESCAPES = {
    "b": (_BOUNDARY, True),
    "B": (_BOUNDARY, False),
    "w": (_WORD, True),
    "W": (_WORD, False),
    "d": (_DIGIT, True),
    "D": (_DIGIT, False),
    "s": (_SPACE, True),
    "S": (_SPACE, False),
    "n": (_PRINT, True),
    "N": (_PRINT, False),
}

_DEPTH = {"[": 1, "]": -1, "(": 2, ")": -2, "{": 3, "}": -3}
_UNEXPECTED = "]{})"
_ALLOWED_AFTER_END = set("$*+?|{}[]()")


class RegexError(ValueError):
    """Raised for a malformed pattern."""


class _Outcome(Enum):
    CLOSE = -2
    FAIL = -1
    SKIP = 0
    NEXT = 1


@dataclass(frozen=True)
class _Token:
    data: str
    positive: bool = True


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _is_space(char: str) -> bool:
    return char in " \t\n\v\f\r"


def _is_print(char: str) -> bool:
    return " " <= char <= "~"


def _fold(char: str) -> str:
    return char.lower() if char.isascii() else char


def _expand_class(spec: str) -> set[str]:
    """Characters named by the body of a ``[...]`` class."""
    chars: set[str] = set()
    size = len(spec)
    i = 0
    while i < size:
        char = spec[i]
        if char == "\\":
            i += 1
            if i < size:
                chars.add(spec[i])
        elif i + 2 < size and spec[i + 1] == "-":
            low, high = sorted((char, spec[i + 2]))
            chars.update(chr(code) for code in range(ord(low), ord(high) + 1))
            i += 2
        else:
            chars.add(char)
        i += 1
    return chars


def _bounds(spec: str) -> tuple[int, int]:
    """Parse the body of a ``{n}`` or ``{n,m}`` quantifier."""
    numbers = ["", ""]
    slot = 0
    for char in spec:
        if _is_digit(char):
            numbers[slot] += char
        else:
            slot ^= 1
    low = int(numbers[0]) if numbers[0] else 0
    high = int(numbers[1]) if numbers[1] else 0
    return low, high


def _command(token: _Token, text: str, cursor: int) -> bool:
    kind = token.data[0]
    char = text[cursor]
    predicates = {
        _BOUNDARY: lambda: cursor == 0 or cursor >= len(text) - 1,
        _WORD: lambda: _is_alnum(char),
        _DIGIT: lambda: _is_digit(char),
        _SPACE: lambda: _is_space(char),
        _PRINT: lambda: _is_print(char),
    }
    if kind in predicates:
        if predicates[kind]() == token.positive:
            return True
    elif kind == _ANY:
        return True
    elif kind == _ESCAPED:
        return token.data[1:2] == char
    return char == kind


class Regex:
    """A compiled pattern with search, split, replace and match helpers."""

    def __init__(self, pattern: str = "", icase: bool = False) -> None:
        self._pattern = pattern
        self._icase = icase
        self._memory: list[str] = []
        self._starts: list[int] | None = None

    def __repr__(self) -> str:
        return f"Regex({self._pattern!r}, icase={self._icase!r})"

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def icase(self) -> bool:
        return self._icase

    def memory(self) -> list[str]:
        """Texts matched by groups so far, in the order they were matched."""
        return list(self._memory)

    # -- pattern scanning -------------------------------------------------

    def _char(self, pos: int) -> str:
        return self._pattern[pos] if 0 <= pos < len(self._pattern) else "\0"

    def _closing(self, pos: int) -> int:
        """Position of the bracket closing the one at ``pos``, or -1."""
        pattern = self._pattern
        size = len(pattern)
        depth = 0
        while pos < size:
            char = pattern[pos]
            if char == "\\":
                pos += 1
            elif char in _DEPTH:
                depth = (depth + _DEPTH[char]) % 256
            if depth == 0:
                break
            pos += 1
        return -1 if pos >= size else pos

    def _alternatives(self) -> list[int]:
        if self._starts is not None:
            return self._starts
        pattern = self._pattern
        starts = [0]
        pos = 0
        while pos < len(pattern):
            char = pattern[pos]
            if char == "|":
                starts.append(pos + 1)
            if char in "[{(":
                close = self._closing(pos)
                if close < 0:
                    break
                pos = close
                continue
            if char == "\\":
                pos += 1
            pos += 1
        self._starts = starts
        return starts

    def _parse(self, pos: int) -> tuple[_Token | None, int]:
        """Read the token at ``pos``; None marks the end of an alternative."""
        char = self._char(pos)
        if char in _UNEXPECTED and char != "\0":
            raise RegexError(f"regex: {pos} {char}")
        if char in "([" and char != "\0":
            close = self._closing(pos)
            if close < 0:
                raise RegexError(f"regex: {pos} {char}")
            return _Token(self._pattern[pos:close]), close
        if char == "|":
            return None, pos
        if char == "$":
            return _Token(_END), pos
        if char == "^":
            return _Token(_START), pos
        if char == ".":
            return _Token(_ANY), pos
        if char == "\\":
            pos += 1
            escaped = self._char(pos)
            if escaped in _ESCAPES:
                kind, positive = _ESCAPES[escaped]
                return _Token(kind, positive), pos
            return _Token(_ESCAPED + escaped), pos
        return _Token(char), pos

    def _repeat(self, pos: int) -> tuple[int, tuple[int, int]]:
        """Read the quantifier at ``pos``; returns the next position and its bounds."""
        char = self._char(pos)
        if char == "{":
            close = self._closing(pos)
            if close < 0:
                raise RegexError(f"regex: {pos} {char}")
            return close + 1, _bounds(self._pattern[pos + 1 : close])
        if char == "?":
            return pos + 1, (0, 1)
        if char == "*":
            return pos + 1, (0, -1)
        if char == "+":
            return pos + 1, (1, -1)
        return pos, (1, 0)

    # -- matching ---------------------------------------------------------

    def _check(
        self,
        token: _Token,
        bounds: tuple[int, int],
        text: str,
        cursor: int,
        end: int,
        following: int,
    ) -> tuple[_Outcome, int, int]:
        low, high = bounds
        size = len(text)
        kind = token.data[0]
        count = 0
        while cursor < size:
            char = _fold(text[cursor]) if self._icase else text[cursor]
            if kind == "(":
                span = Regex(token.data[1:], self._icase)._search(text, cursor)
                if span is None:
                    break
                length = span[1] - span[0]
                cursor += length - 1
                end += length
                self._memory.append(text[span[0] : span[1]])
            elif kind == "[":
                negate = token.data[1:2] == "^"
                chars = _expand_class(token.data[2 if negate else 1 :])
                if (char in chars) == negate:
                    break
                end += 1
            elif kind == "\0":
                return _Outcome.CLOSE, cursor, end
            elif kind in (_END, _START):
                at_flag = cursor >= size - 1 if kind == _END else cursor == 0
                if at_flag:
                    return _Outcome.SKIP, cursor, end
                break
            elif kind <= _ESCAPED:
                if not _command(token, text, cursor):
                    break
                end += 1
            else:
                if kind != char:
                    break
                end += 1
            count += 1
            if high == -1 or count < low or count < high:
                cursor += 1
                continue
            break
        return self._settle(count, bounds, cursor, size, following), cursor, end

    def _settle(
        self, count: int, bounds: tuple[int, int], cursor: int, size: int, following: int
    ) -> _Outcome:
        low, high = bounds
        if cursor >= size:
            if following < len(self._pattern) and self._pattern[following] not in _ALLOWED_AFTER_END:
                return _Outcome.FAIL
            return _Outcome.CLOSE if count >= low else _Outcome.FAIL
        if count == 0 and low == 0:
            return _Outcome.SKIP
        if high == -1:
            return _Outcome.SKIP if count >= low else _Outcome.FAIL
        if count >= low or (high != 0 and count > high):
            return _Outcome.NEXT
        return _Outcome.FAIL

    def _run(self, text: str, offset: int, start: int) -> tuple[int, int]:
        begin = end = cursor = offset
        pos = start
        size = len(self._pattern)
        while True:
            token, pos = self._parse(pos)
            if token is None:
                break
            pos += 1
            if pos > size:
                break
            pos, bounds = self._repeat(pos)
            outcome, cursor, end = self._check(token, bounds, text, cursor, end, pos)
            if outcome is _Outcome.FAIL:
                begin = end
                break
            if outcome is _Outcome.CLOSE:
                break
            if outcome is _Outcome.NEXT:
                cursor += 1
        return begin, end

    def _search(self, text: str, offset: int = 0) -> tuple[int, int] | None:
        """Match anchored at ``offset``; returns the span or None."""
        span = (offset, offset)
        for start in self._alternatives():
            span = self._run(text, offset, start)
            if span[0] != span[1]:
                break
        return None if span[0] == span[1] else span

    # -- public interface -------------------------------------------------

    def search(self, text: str, offset: int = 0) -> tuple[int, int] | None:
        """Span ``(start, end)`` of the first match at or after ``offset``, or None."""
        while offset < len(text):
            span = self._search(text, offset)
            if span is not None:
                return span
            offset += 1
        return None

    def search_all(self, text: str) -> list[tuple[int, int]]:
        """Spans of all successive non-overlapping matches."""
        spans: list[tuple[int, int]] = []
        offset = 0
        while True:
            span = self.search(text, offset)
            if span is None or span[0] == span[1]:
                return spans
            offset = span[1]
            spans.append(span)

    def split(self, text: str) -> list[str]:
        """Pieces of ``text`` between matches; an empty list when nothing matches."""
        spans = self.search_all(text)
        if not spans:
            return []
        pieces: list[str] = []
        previous = 0
        for start, end in spans:
            pieces.append(text[previous:start])
            previous = end
        pieces.append(text[previous:])
        return pieces

    def replace_all(self, text: str, replacement: str) -> str:
        for start, end in reversed(self.search_all(text)):
            text = text[:start] + replacement + text[end:]
        return text

    def replace(self, text: str, replacement: str, offset: int = 0) -> str:
        span = self.search(text, offset)
        if span is None:
            return text
        start, end = span
        return text[:start] + replacement + text[end:]

    def remove_all(self, text: str) -> str:
        return self.replace_all(text, "")

    def remove(self, text: str, offset: int = 0) -> str:
        return self.replace(text, "", offset)

    def match_all(self, text: str) -> list[str]:
        return [text[start:end] for start, end in self.search_all(text)]

    def match(self, text: str, offset: int = 0) -> str | None:
        """Text of the first match at or after ``offset``, or None."""
        span = self.search(text, offset)
        return None if span is None else text[span[0] : span[1]]

    def test(self, text: str, offset: int = 0) -> bool:
        return self.search(text, offset) is not None


def _regex(pattern: str | Regex, icase: bool) -> Regex:
    return pattern if isinstance(pattern, Regex) else Regex(pattern, icase)


def _chunks(text: str, size: int) -> list[str]:
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return [text[start : start + size] for start in range(0, len(text), size)]


def replace_all(text: str, pattern: str | Regex, replacement: str, icase: bool = False) -> str:
    return _regex(pattern, icase).replace_all(text, replacement)


def remove_all(text: str, pattern: str | Regex, icase: bool = False) -> str:
    return _regex(pattern, icase).remove_all(text)


def search_all(text: str, pattern: str | Regex, icase: bool = False) -> list[tuple[int, int]]:
    return _regex(pattern, icase).search_all(text)


def replace(text: str, pattern: str | Regex, replacement: str, icase: bool = False) -> str:
    return _regex(pattern, icase).replace(text, replacement)


def remove(text: str, pattern: str | Regex, icase: bool = False) -> str:
    return _regex(pattern, icase).remove(text)


def match_all(text: str, pattern: str | Regex, icase: bool = False) -> list[str]:
    return _regex(pattern, icase).match_all(text)


def search(text: str, pattern: str | Regex, icase: bool = False) -> tuple[int, int] | None:
    return _regex(pattern, icase).search(text)


def match(text: str, pattern: str | Regex, icase: bool = False) -> str | None:
    return _regex(pattern, icase).match(text)


def test(text: str, pattern: str | Regex, icase: bool = False) -> bool:
    return _regex(pattern, icase).test(text)


def split(text: str, pattern: str | Regex | int, icase: bool = False) -> list[str]:
    """Split on a single character, into chunks of a given size, or on a pattern."""
    if isinstance(pattern, Regex):
        return pattern.split(text)
    if isinstance(pattern, int):
        return _chunks(text, pattern)
    if len(pattern) == 1:
        return text.split(pattern)
    if not pattern:
        return _chunks(text, 1)
    return Regex(pattern, icase).split(text)


def join(sep: str, *args: object) -> str:
    return _iterator.join(sep, *args)


def format(template: object, *args: object) -> str:
    """Substitute ``${0}``, ``${1}``, ... in ``template`` with the string forms of ``args``."""
    result = str(template)
    for index, arg in enumerate(args):
        result = replace_all(result, "\\$\\{%d\\}" % index, str(arg))
    return result