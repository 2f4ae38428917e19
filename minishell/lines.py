"""Line-at-a-time reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, Iterator, Optional, Protocol

BUFFER_SIZE = 42


class _Readable(Protocol[AnyStr]):
    def read(self, size: int) -> AnyStr: ...


def _find_newline(data: AnyStr) -> int:
    """Index of the first newline in ``data``, or -1 when there is none."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line of the stream may
    lack one. Lines are of the same type (``str`` or ``bytes``) the stream
    yields.
    """

    def __init__(self, stream: _Readable[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._size = buffer_size
        self._buffer: Optional[AnyStr] = None

    def _fill(self) -> None:
        buffer = self._buffer
        while True:
            try:
                chunk = self._stream.read(self._size)
            except OSError:
                self._buffer = None
                raise
            if not chunk:
                break
            buffer = chunk if buffer is None else buffer + chunk
            if _find_newline(chunk) >= 0:
                break
        self._buffer = buffer

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        if self._buffer is None or _find_newline(self._buffer) < 0:
            self._fill()
        buffer = self._buffer
        if not buffer:
            self._buffer = None
            return None
        end = _find_newline(buffer)
        end = len(buffer) if end < 0 else end + 1
        line, rest = buffer[:end], buffer[end:]
        self._buffer = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line