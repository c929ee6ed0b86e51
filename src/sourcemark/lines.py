"""Single-pass line sequence with one line of lookahead.

LookaheadStream wraps any iterable of lines (a list, a generator, an open
file) and counts the lines it hands out. The count doubles as the 1-based
number of the most recently returned line, which is what bounded reads
compare against.

Thread Safety:
A stream is consumed by exactly one render call and is never shared.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from types import TracebackType

_EXHAUSTED = object()


class LookaheadStream:
    """Forward-only iterator over source lines.

    Usage:
        >>> with LookaheadStream(["int a;", "int b;"]) as stream:
        ...     stream.line, stream.next(), stream.line, stream.peek()
        (0, 'int a;', 1, 'int b;')

    Closing the stream closes the wrapped iterator when it supports
    ``close()`` (generators, file objects). Closing twice is harmless.
    """

    __slots__ = ("_iterator", "_lookahead", "_line", "_closed")

    def __init__(self, lines: Iterable[str]) -> None:
        self._iterator: Iterator[str] = iter(lines)
        self._lookahead: object = None
        self._line = 0
        self._closed = False

    @property
    def line(self) -> int:
        """Number of lines consumed so far (0 before the first next())."""
        return self._line

    def has_next(self) -> bool:
        """Check for another line without consuming it."""
        if self._closed:
            return False
        if self._lookahead is None:
            self._lookahead = next(self._iterator, _EXHAUSTED)
        return self._lookahead is not _EXHAUSTED

    def peek(self) -> str:
        """Return the next line without consuming it.

        Raises:
            StopIteration: If the stream is exhausted
        """
        if not self.has_next():
            raise StopIteration
        return self._lookahead  # type: ignore[return-value]

    def next(self) -> str:
        """Consume and return the next line.

        Raises:
            StopIteration: If the stream is exhausted
        """
        line = self.peek()
        self._lookahead = None
        self._line += 1
        return line

    def __iter__(self) -> LookaheadStream:
        return self

    def __next__(self) -> str:
        return self.next()

    def close(self) -> None:
        """Release the underlying source."""
        if self._closed:
            return
        self._closed = True
        self._lookahead = None
        close = getattr(self._iterator, "close", None)
        if close is not None:
            close()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> LookaheadStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def read_lines(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of a file with their terminators stripped.

    The file stays open until the generator is exhausted or closed, so
    wrap the result in a LookaheadStream (or close it) to release it.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Yields:
        Lines without ``\\n`` / ``\\r\\n``
    """
    with open(path, encoding=encoding) as handle:
        for line in handle:
            yield line.rstrip("\r\n")


__all__ = ["LookaheadStream", "read_lines"]
