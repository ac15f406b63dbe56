"""Line-at-a-time reading of a stream in fixed-size chunks."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 20


class LineReader(Generic[AnyStr]):
    """Read lines from a stream, pulling at most *buffer_size* items per read.

    Works with both binary and text streams; lines keep their trailing
    newline, and the final line is returned even without one.
    """

    def __init__(self, stream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._sep: Optional[AnyStr] = None

    def _has_line(self) -> bool:
        pending = self._pending
        return pending is not None and self._sep is not None and self._sep in pending

    def _append(self, chunk: AnyStr) -> None:
        if self._pending is None:
            self._sep = b"\n" if isinstance(chunk, bytes) else "\n"  # type: ignore[assignment]
            self._pending = chunk
        else:
            self._pending += chunk

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        exhausted = False
        while not exhausted and not self._has_line():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                exhausted = True
            else:
                self._append(chunk)
        pending = self._pending
        if not pending:
            return None
        end = pending.find(self._sep)
        if end < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line