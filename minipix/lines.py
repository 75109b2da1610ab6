"""Line-by-line reading from a stream in fixed-size chunks.

Lines are returned with their trailing newline; the last line of a stream
may lack one. Both text and binary streams are supported.
"""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from *stream*, pulling *buffer_size* units at a time."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        pending = self._pending
        while pending is None or self._newline not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            pending = chunk if pending is None else pending + chunk
        return pending

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        pending = self._fill()
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._newline)
        if index == -1:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of *stream*, newlines included."""
    yield from LineReader(stream, buffer_size)