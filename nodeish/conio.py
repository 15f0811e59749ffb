"""Terminal output with ANSI escape sequences."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Any, TextIO

RESET = "\033[0m"
BOLD = "\033[1m"


class Color(IntEnum):
    BLACK = 0x00
    WHITE = 0x01
    GREEN = 0x02
    RED = 0x03
    BLUE = 0x04
    CYAN = 0x05
    YELLOW = 0x06
    MAGENTA = 0x07
    BOLD = 0x10


_BACKGROUND = {
    Color.BLACK: "\033[40m",
    Color.WHITE: "\033[47m",
    Color.GREEN: "\033[42m",
    Color.RED: "\033[41m",
    Color.BLUE: "\033[44m",
    Color.CYAN: "\033[46m",
    Color.YELLOW: "\033[43m",
    Color.MAGENTA: "\033[45m",
}

_FOREGROUND = {
    Color.BLACK: "\033[30m",
    Color.WHITE: "\033[37m",
    Color.GREEN: "\033[32m",
    Color.RED: "\033[31m",
    Color.BLUE: "\033[34m",
    Color.CYAN: "\033[36m",
    Color.YELLOW: "\033[33m",
    Color.MAGENTA: "\033[35m",
}


def _write(text: str, stream: TextIO) -> int:
    stream.write(text)
    stream.flush()
    return len(text)


def pout(text: str, stream: TextIO | None = None) -> int:
    """Write ``text`` to standard output (or ``stream``); returns its length."""
    return _write(text, stream if stream is not None else sys.stdout)


def perr(text: str, stream: TextIO | None = None) -> int:
    """Write ``text`` to standard error (or ``stream``); returns its length."""
    return _write(text, stream if stream is not None else sys.stderr)


def _joined(args: tuple[Any, ...]) -> str:
    return " ".join(str(arg) for arg in args) + RESET


def log(*args: Any, stream: TextIO | None = None) -> int:
    """Write ``args`` separated by spaces, then a style reset, to standard output."""
    return pout(_joined(args), stream)


def err(*args: Any, stream: TextIO | None = None) -> int:
    """Write ``args`` separated by spaces, then a style reset, to standard error."""
    return perr(_joined(args), stream)


def scan(stream: TextIO | None = None) -> str:
    """Read one line from standard input (or ``stream``) without its line ending."""
    source = stream if stream is not None else sys.stdin
    return source.readline().rstrip("\r\n")


def set_position(x: int, y: int) -> int:
    return pout(f"\033[{x};{y}H")


def gotoxy(x: int, y: int) -> int:
    return set_position(x, y)


def underscore() -> int:
    return pout("\033[4m")


def inverse() -> int:
    return pout("\033[7m")


def reset() -> int:
    return pout(RESET)


def clear() -> int:
    return pout("\033c\n")


def _color(color: int, table: dict[Color, str]) -> int:
    if color & Color.BOLD:
        pout(BOLD)
        color &= 0x0F
    try:
        code = table[Color(color)]
    except (ValueError, KeyError):
        return -1
    return pout(code)


def background(color: int) -> int:
    """Set the background colour; returns the bytes written, or -1 for an unknown colour."""
    return _color(color, _BACKGROUND)


def foreground(color: int) -> int:
    """Set the foreground colour; returns the bytes written, or -1 for an unknown colour."""
    return _color(color, _FOREGROUND)


def error(msg: str) -> int:
    foreground(Color.RED | Color.BOLD)
    return log(msg)


def info(msg: str) -> int:
    foreground(Color.CYAN | Color.BOLD)
    return log(msg)


def done(msg: str) -> int:
    foreground(Color.GREEN | Color.BOLD)
    return log(msg)


def warn(msg: str) -> int:
    foreground(Color.YELLOW | Color.BOLD)
    return log(msg)