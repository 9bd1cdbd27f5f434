"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, List, Optional

BUFFER_SIZE = 42


def _newline(piece: AnyStr) -> AnyStr:
    return b"\n" if isinstance(piece, bytes) else "\n"  # type: ignore[return-value]


def _nul(piece: AnyStr) -> AnyStr:
    return b"\0" if isinstance(piece, bytes) else "\0"  # type: ignore[return-value]


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream, newline kept.

    Data is read ``buffer_size`` units at a time; text after a line's newline
    is kept for the next call. A NUL inside a chunk ends that chunk's content.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: List[AnyStr] = []

    def _has_newline(self) -> bool:
        if not self._pending:
            return False
        last = self._pending[-1]
        return _newline(last) in last

    def _fill(self) -> None:
        while not self._has_newline():
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return
            cut = chunk.find(_nul(chunk))
            if cut >= 0:
                chunk = chunk[:cut]
            self._pending.append(chunk)

    def read_line(self) -> Optional[AnyStr]:
        """The next line including its newline, or None when the stream is exhausted."""
        self._fill()
        if not self._pending:
            return None
        last = self._pending[-1]
        head = last[:0].join(self._pending[:-1])
        index = last.find(_newline(last))
        if index < 0:
            line, rest = head + last, last[:0]
        else:
            line, rest = head + last[:index + 1], last[index + 1:]
        self._pending = [rest] if rest else []
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` as :class:`LineReader` reads it."""
    yield from LineReader(stream, buffer_size)