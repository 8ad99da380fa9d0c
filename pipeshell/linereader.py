"""Incremental line reading from a file-like object or file descriptor."""

from __future__ import annotations

import os
from typing import IO, AnyStr, Callable, Iterator, Optional, Union

BUFFER_SIZE = 99999


class LineReader:
    """Read a stream one line at a time, keeping unread data between calls.

    Lines keep their trailing newline; the last line may lack one.  Works on
    text streams, binary streams, and integer file descriptors (bytes).
    """

    def __init__(self, stream: Union[IO[AnyStr], int], chunk_size: int = BUFFER_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size
        self._read: Callable[[int], AnyStr]
        if isinstance(stream, int):
            if stream < 0:
                raise ValueError("file descriptor must not be negative")
            fd = stream
            self._read = lambda size: os.read(fd, size)
        else:
            self._read = stream.read
        self._pending = None
        self._separator: Optional[Union[str, bytes]] = None

    def _read_chunk(self):
        """Read one chunk, learning the newline type from the first data seen."""
        chunk = self._read(self._chunk_size)
        if chunk and self._separator is None:
            self._separator = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
        return chunk

    def read_line(self):
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while pending is None or self._separator not in pending:
            chunk = self._read_chunk()
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._separator)
        if cut < 0:
            self._pending = None
            return pending
        line, rest = pending[: cut + 1], pending[cut + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator:
        return iter(self.read_line, None)