"""Incremental deflate, inflate, gzip and gunzip over ``zlib``."""

from __future__ import annotations

import zlib

from .event import Event

CHUNK_SIZE = 65536

RAW_WBITS = -15
GZIP_WBITS = 15 | 16
AUTO_WBITS = 15 | 32

_IDLE = 0
_INFLATE = 1
_DEFLATE = -1


class ZlibError(Exception):
    """Raised when a stream cannot be set up or its data is corrupt."""


class ZStream:
    """One compression or decompression stream; its first update fixes the direction.

    Output is returned from each update, unless ``on_data`` has listeners, in
    which case it is handed to them in pieces of at most ``chunk_size`` bytes
    and the update returns ``b""``.
    """

    def __init__(self, wbits: int = 0, chunk_size: int = CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.wbits = wbits
        self.chunk_size = chunk_size
        self.on_drain = Event()
        self.on_close = Event()
        self.on_open = Event()
        self.on_data = Event()
        self._engine: zlib._Compress | zlib._Decompress | None = None
        self._mode = _IDLE
        self._open = True
        self._freed = False

    def __enter__(self) -> ZStream:
        return self

    def __exit__(self, *args: object) -> None:
        self.free()

    def close(self) -> None:
        if self._open:
            self._open = False
            self.on_drain.emit()

    def free(self) -> None:
        """Release the stream and emit ``on_close``."""
        if self._freed:
            return
        self._freed = True
        self._engine = None
        self.close()
        self.on_close.emit()

    def is_closed(self) -> bool:
        return not self._open

    def is_available(self) -> bool:
        return self._open

    def _deliver(self, output: bytes) -> bytes:
        if not output or self.on_data.empty():
            return output
        for start in range(0, len(output), self.chunk_size):
            self.on_data.emit(output[start : start + self.chunk_size])
        return b""

    def _fail(self, message: str) -> ZlibError:
        self.close()
        return ZlibError(message)

    def update_inflate(self, data: bytes) -> bytes:
        """Decompress ``data``; ``b""`` if closed, empty or a deflate stream."""
        if self.is_closed() or not data or self._mode == _DEFLATE:
            return b""
        if self._mode == _IDLE:
            try:
                self._engine = zlib.decompressobj(self.wbits)
            except (zlib.error, ValueError):
                raise self._fail("Failed to initialize zlib for decompression.") from None
            self._mode = _INFLATE
            self.on_open.emit()
        try:
            output = self._engine.decompress(bytes(data))
        except zlib.error as exc:
            raise self._fail(f"Compression failed: {exc}") from exc
        return self._deliver(output)

    def update_deflate(self, data: bytes) -> bytes:
        """Compress ``data`` with a partial flush; ``b""`` if closed, empty or an inflate stream."""
        if self.is_closed() or not data or self._mode == _INFLATE:
            return b""
        if self._mode == _IDLE:
            try:
                self._engine = zlib.compressobj(
                    zlib.Z_DEFAULT_COMPRESSION, zlib.DEFLATED, self.wbits, 8, zlib.Z_DEFAULT_STRATEGY
                )
            except (zlib.error, ValueError):
                raise self._fail("Failed to initialize zlib for compression.") from None
            self._mode = _DEFLATE
            self.on_open.emit()
        try:
            output = self._engine.compress(bytes(data)) + self._engine.flush(zlib.Z_PARTIAL_FLUSH)
        except zlib.error as exc:
            raise self._fail(f"Compression failed: {exc}") from exc
        return self._deliver(output)


def inflate(data: bytes) -> bytes:
    """Decompress raw deflate data."""
    return ZStream(RAW_WBITS).update_inflate(data)


def deflate(data: bytes) -> bytes:
    """Compress to raw deflate data."""
    return ZStream(RAW_WBITS).update_deflate(data)


def gzip(data: bytes) -> bytes:
    """Compress with a gzip header."""
    return ZStream(GZIP_WBITS).update_deflate(data)


def gunzip(data: bytes) -> bytes:
    """Decompress gzip or zlib data, detecting the header."""
    return ZStream(AUTO_WBITS).update_inflate(data)