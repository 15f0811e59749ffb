"""Move data between files: plain pipes, line pipes, two-way relays and zlib pipes.

Every pipe emits ``on_pipe`` on its ends when it starts and ``on_data`` on
the side the data came from for each piece it moves. When it stops, because
the source ran dry or a write failed, it closes both ends. An end that is
already closed makes the pipe return 0 without touching anything.
"""

from __future__ import annotations

import select
from collections.abc import Callable

from .compression import RAW_WBITS, ZlibError, ZStream
from .file import File


def _ends_open(*ends: File | None) -> bool:
    return all(end is None or not end.is_closed() for end in ends)


def _start(*ends: File | None) -> None:
    for end in ends:
        if end is not None:
            end.on_pipe.emit()


def _finish(*ends: File | None) -> None:
    for end in ends:
        if end is not None:
            end.close()


def _relay(
    source: File,
    target: File | None,
    read: Callable[[], bytes],
    convert: Callable[[bytes], bytes] | None = None,
) -> int:
    """Copy pieces from ``source`` to ``target`` until either side stops.

    Returns the number of bytes delivered.
    """
    if not _ends_open(source, target):
        return 0
    _start(source, target)
    total = 0
    try:
        while source.is_available() and (target is None or target.is_available()):
            chunk = read()
            if not chunk:
                break
            if convert is not None:
                try:
                    chunk = convert(chunk)
                except ZlibError as exc:
                    source.on_error.emit(exc)
                    if target is not None:
                        target.on_error.emit(exc)
                    break
                if not chunk:
                    continue
            if target is not None and target.write(chunk) < len(chunk):
                break
            source.on_data.emit(chunk)
            total += len(chunk)
    finally:
        _finish(source, target)
    return total


def pipe(source: File, target: File | None = None) -> int:
    """Copy ``source`` into ``target`` chunk by chunk; returns the bytes copied.

    Without a target the data is only handed to ``source.on_data``.
    """
    return _relay(source, target, lambda: source.read(source.chunk_size))


def pipe_lines(source: File, target: File | None = None) -> int:
    """Copy ``source`` into ``target`` one line at a time; returns the bytes copied."""
    return _relay(source, target, source.read_line)


def duplex(first: File, second: File) -> int:
    """Relay data both ways between two descriptors until one side ends.

    Whichever side is readable is read and its data written to the other.
    Returns the bytes relayed in both directions together.
    """
    if not _ends_open(first, second):
        return 0
    _start(first, second)
    peers = {first.fd: (first, second), second.fd: (second, first)}
    total = 0
    try:
        while first.is_available() and second.is_available():
            readable, _, _ = select.select(list(peers), [], [])
            for fd in [fd for fd in peers if fd in readable]:
                src, dst = peers[fd]
                chunk = src.read(src.chunk_size)
                if not chunk or dst.write(chunk) < len(chunk):
                    return total
                src.on_data.emit(chunk)
                total += len(chunk)
    finally:
        _finish(first, second)
    return total


def _zlib_pipe(source: File, target: File | None, inflating: bool) -> int:
    stream = ZStream(RAW_WBITS, source.chunk_size)
    convert = stream.update_inflate if inflating else stream.update_deflate
    try:
        return _relay(source, target, lambda: source.read(source.chunk_size), convert)
    finally:
        stream.free()


def inflate_pipe(source: File, target: File | None = None) -> int:
    """Decompress raw deflate data from ``source`` into ``target``; returns bytes produced.

    A corrupt stream is reported through ``on_error`` on both ends.
    """
    return _zlib_pipe(source, target, inflating=True)


def deflate_pipe(source: File, target: File | None = None) -> int:
    """Compress ``source`` as raw deflate data into ``target``; returns bytes produced."""
    return _zlib_pipe(source, target, inflating=False)