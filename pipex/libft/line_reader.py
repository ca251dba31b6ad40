"""Reading a stream one line at a time."""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = io.DEFAULT_BUFFER_SIZE


def _newline(s: AnyStr) -> AnyStr:
    return b"\n" if isinstance(s, (bytes, bytearray)) else "\n"  # type: ignore[return-value]


def contains_newline(s: AnyStr) -> bool:
    """Return True if ``s`` holds a newline."""
    return _newline(s) in s


def before_newline(s: AnyStr) -> AnyStr:
    """Return ``s`` up to and including its first newline (all of it if none)."""
    index = s.find(_newline(s))
    return s if index < 0 else s[: index + 1]


def after_newline(s: AnyStr) -> AnyStr:
    """Return what follows the first newline of ``s`` (empty if none)."""
    index = s.find(_newline(s))
    return s[:0] if index < 0 else s[index + 1:]


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline included."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._keep: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream is exhausted."""
        while self._keep is None or not contains_newline(self._keep):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._keep = chunk if self._keep is None else self._keep + chunk
        if not self._keep:
            self._keep = None
            return None
        line = before_newline(self._keep)
        self._keep = after_newline(self._keep)
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line