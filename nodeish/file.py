"""Files read and written through raw descriptors in non-blocking mode.

Read-ahead that is not handed out is kept and served by the next read, so
``read``, ``read_line`` and ``read_until`` can be mixed freely.  A file
closes itself once a read reaches the end of its data.
"""

from __future__ import annotations

import errno
import os
import select
import time
from typing import Any

from .event import Event

CHUNK_SIZE = 65536

_OPEN = 0
_CLOSED = -1
_FREED = -2
_STOPPED = -3

_BLOCKED = -2
_POLL_INTERVAL = 0.05

_EXTRA_FLAGS = getattr(os, "O_NONBLOCK", 0) | getattr(os, "O_BINARY", 0)

_MODE_FLAGS = {
    "r": os.O_RDONLY,
    "w": os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    "a": os.O_WRONLY | os.O_APPEND | os.O_CREAT,
    "r+": os.O_RDWR | os.O_APPEND,
    "w+": os.O_RDWR | os.O_APPEND | os.O_CREAT,
    "a+": os.O_RDWR | os.O_APPEND,
}


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _check_chunk_size(chunk_size: int) -> None:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")


def _wait(fd: int, write: bool) -> None:
    """Wait a little for ``fd`` to become ready."""
    try:
        if write:
            select.select([], [fd], [], _POLL_INTERVAL)
        else:
            select.select([fd], [], [], _POLL_INTERVAL)
    except (OSError, ValueError):
        time.sleep(_POLL_INTERVAL)


class File:
    """A file descriptor with buffered, delimiter-aware reads and full writes.

    Modes: ``r`` read, ``w`` write and truncate, ``a`` append, ``r+`` and
    ``a+`` read/append, ``w+`` read/append creating the file; any other mode
    opens for reading and writing.
    """

    def __init__(self, path: str | os.PathLike[str], mode: str = "r", chunk_size: int = CHUNK_SIZE) -> None:
        _check_chunk_size(chunk_size)
        flags = _MODE_FLAGS.get(mode, os.O_RDWR) | _EXTRA_FLAGS
        try:
            fd = os.open(path, flags, 0o644)
        except OSError as exc:
            raise OSError(exc.errno, "such file or directory does not exist", os.fspath(path)) from exc
        self._setup(fd, chunk_size)

    @classmethod
    def from_fd(cls, fd: int, chunk_size: int = CHUNK_SIZE) -> File:
        """Wrap an already open descriptor; the file takes ownership of it."""
        _check_chunk_size(chunk_size)
        if fd < 0:
            raise OSError(errno.EBADF, "such file or directory does not exist")
        file = cls.__new__(cls)
        file._setup(fd, chunk_size)
        return file

    def _setup(self, fd: int, chunk_size: int) -> None:
        self._fd = fd
        self._chunk_size = chunk_size
        self._state = _OPEN
        self._feof = 1
        self._range = (0, 0)
        self._borrow = b""
        self.on_unpipe = Event()
        self.on_resume = Event()
        self.on_error = Event()
        self.on_drain = Event()
        self.on_close = Event()
        self.on_stop = Event()
        self.on_open = Event()
        self.on_pipe = Event()
        self.on_data = Event()
        set_blocking = getattr(os, "set_blocking", None)
        if set_blocking is not None:
            try:
                set_blocking(fd, False)
            except OSError:
                pass

    def __repr__(self) -> str:
        return f"File(fd={self._fd}, state={self._state})"

    def __del__(self) -> None:
        if getattr(self, "_fd", -1) >= 3 and getattr(self, "_state", _FREED) != _FREED:
            self._state = _FREED
            try:
                os.close(self._fd)
            except OSError:
                pass

    def __enter__(self) -> File:
        return self

    def __exit__(self, *args: Any) -> None:
        self.free()

    @property
    def fd(self) -> int:
        return self._fd

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    # -- state --------------------------------------------------------------

    def is_closed(self) -> bool:
        return self._state < 0 or self.is_feof() or self._fd == -1

    def is_feof(self) -> bool:
        return self._feof <= 0 and self._feof != _BLOCKED

    def is_available(self) -> bool:
        return self._state >= 0 and not self.is_closed()

    def resume(self) -> None:
        if self._state == _OPEN:
            return
        self._state = _OPEN
        self.on_resume.emit()

    def close(self) -> None:
        if self._state < 0:
            return
        self._state = _CLOSED
        self.on_drain.emit()

    def stop(self) -> None:
        if self._state == _STOPPED:
            return
        self._state = _STOPPED
        self.on_stop.emit()

    def reset(self) -> None:
        """Reopen a freed file at its start; does nothing otherwise."""
        if self._state != _FREED:
            return
        self.resume()
        self.seek(0)

    def free(self) -> None:
        """Close the file, release its descriptor (unless a standard one) and emit ``on_close``."""
        if self._state == _FREED:
            return
        self.close()
        self._state = _FREED
        if self._fd >= 3:
            try:
                os.close(self._fd)
            except OSError:
                pass
        self.on_close.emit()

    # -- positioning --------------------------------------------------------

    def set_range(self, start: int, end: int) -> None:
        """Limit reads to bytes ``start`` up to ``end``; an ``end`` of 0 means no limit."""
        self._range = (start, end)

    def size(self) -> int:
        """Length of the file in bytes, or 0 if it cannot be seeked."""
        current = self.tell()
        try:
            end = os.lseek(self._fd, 0, os.SEEK_END)
        except OSError:
            return 0
        try:
            os.lseek(self._fd, current, os.SEEK_SET)
        except OSError:
            pass
        return end

    def seek(self, position: int) -> int:
        """Move to ``position`` and discard read-ahead; returns the new position, or 0."""
        self._borrow = b""
        try:
            return os.lseek(self._fd, position, os.SEEK_SET)
        except OSError:
            return 0

    def tell(self) -> int:
        """Position of the descriptor, or 0 if it cannot be seeked."""
        try:
            return os.lseek(self._fd, 0, os.SEEK_CUR)
        except OSError:
            return 0

    # -- raw transfers ------------------------------------------------------

    def _read_chunk(self, size: int) -> bytes | None:
        if self.is_closed():
            return None
        if size <= 0:
            return b""
        while True:
            try:
                chunk = os.read(self._fd, size)
            except BlockingIOError:
                self._feof = _BLOCKED
                _wait(self._fd, write=False)
                continue
            except OSError:
                self._feof = -1
                self.close()
                return None
            self._feof = len(chunk)
            if not chunk:
                self.close()
            return chunk

    def _write_chunk(self, data: memoryview) -> int:
        if self.is_closed():
            return -1
        if not data:
            return 0
        while True:
            try:
                written = os.write(self._fd, data)
            except BlockingIOError:
                self._feof = _BLOCKED
                _wait(self._fd, write=True)
                continue
            except OSError:
                self._feof = -1
                self.close()
                return -1
            self._feof = written
            if written <= 0:
                self.close()
            return written

    # -- reading and writing ------------------------------------------------

    def read(self, size: int = CHUNK_SIZE) -> bytes:
        """Up to ``size`` bytes; ``b""`` once the file is closed or its range is done."""
        if not self.is_available():
            return b""
        data = self._borrow
        limit = self._chunk_size
        start, end = self._range
        if end:
            pos = self.tell()
            if pos < start:
                data = b""
                self.seek(start)
                pos = start
            elif pos >= end and not data:
                return b""
            limit = max(end - pos, 0)
        if not data:
            chunk = self._read_chunk(min(limit, size))
            if not chunk:
                self._borrow = b""
                return b""
            data = chunk
        self._borrow = data[size:]
        return data[:size]

    def read_char(self) -> bytes:
        """One byte, or ``b""`` at the end."""
        return self.read(1)

    def read_until(self, delimiter: bytes | str) -> bytes:
        """Bytes up to and including ``delimiter``, or all that is left if it never comes."""
        mark = _as_bytes(delimiter)
        if not mark:
            raise ValueError("delimiter must not be empty")
        buffer = b""
        while mark not in buffer and self.is_available():
            chunk = self.read(self._chunk_size)
            if not chunk:
                break
            buffer += chunk
        index = buffer.find(mark)
        if index < 0:
            return buffer
        cut = index + len(mark)
        self._borrow = buffer[cut:] + self._borrow
        return buffer[:cut]

    def read_line(self) -> bytes:
        """The next line with its newline, or the last unterminated line."""
        return self.read_until(b"\n")

    def write(self, data: bytes | bytearray | str) -> int:
        """Write all of ``data`` (text is UTF-8 encoded); returns the bytes written."""
        payload = memoryview(_as_bytes(data))
        if not self.is_available() or not payload:
            return 0
        written = 0
        while written < len(payload):
            count = self._write_chunk(payload[written:])
            if count <= 0:
                break
            written += count
        return written