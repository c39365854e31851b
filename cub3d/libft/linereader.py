"""Reading text one line at a time from a file descriptor or file object."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, Optional, Union

DEFAULT_BUFFER_SIZE = 42

Source = Union[int, IO]


class LineReader:
    """Reads lines from ``source`` in chunks of ``buffer_size``.

    ``source`` is an open file descriptor or any object with a ``read``
    method returning bytes or text. Lines keep their trailing newline; the
    last line may lack one.
    """

    def __init__(self, source: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(source, int) and source < 0:
            raise ValueError("file descriptor must not be negative")
        self._source = source
        self._buffer_size = buffer_size
        self._pending = b""

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        chunk = self._source.read(self._buffer_size)
        if isinstance(chunk, str):
            return chunk.encode("utf-8")
        return bytes(chunk or b"")

    def read_line(self) -> Optional[str]:
        """The next line, or ``None`` once the source has nothing more."""
        while b"\n" not in self._pending:
            chunk = self._read_chunk()
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        if end < 0:
            line, self._pending = self._pending, b""
        else:
            line, self._pending = self._pending[:end + 1], self._pending[end + 1:]
        return line.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """The next line from file descriptor ``fd``, or ``None`` at end of file.

    Unread data is kept per descriptor between calls and dropped once the
    descriptor reaches its end. A negative ``fd`` gives ``None``.
    """
    if fd < 0:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line