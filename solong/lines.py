"""Line-by-line reading of a stream through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 32


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream.

    The stream is read in chunks of buffer_size; data past the returned
    line is kept for the next call. The final line may lack a newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._eof = False

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending is not None:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                index = self._pending.find(newline)
                if index >= 0:
                    line = self._pending[: index + 1]
                    self._pending = self._pending[index + 1 :]
                    return line
            if self._eof:
                break
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                continue
            self._pending = chunk if self._pending is None else self._pending + chunk
        line, self._pending = self._pending, None
        return line if line else None


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Return every line of the file at path, newlines kept."""
    with open(path, encoding="latin-1", newline="") as handle:
        return list(LineReader(handle))