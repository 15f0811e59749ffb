"""Events, pattern matching, UTF conversions, zlib streams, file streams, dates and ANSI console output."""

__version__ = "0.1.0"

__all__ = [
    "compression",
    "conio",
    "date",
    "event",
    "file",
    "iterator",
    "regex",
    "stream",
    "utf",
]