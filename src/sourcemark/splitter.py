"""Split a source file into the blocks before, inside and after a marker.

The line stream is read exactly once. Each block is the concatenation of its
lines, every line (including the last) followed by ``\\n``; an empty block is
the empty string.

Example:
    >>> from sourcemark.lines import LookaheadStream
    >>> split_blocks(LookaheadStream(["a", "b", "c"]), 2, 2)
    SplitBlocks(before='a\\n', marked='b\\n', after='c\\n')
"""

from __future__ import annotations

import sys
from typing import NamedTuple

from sourcemark.lines import LookaheadStream
from sourcemark.stringbuilder import StringBuilder


class SplitBlocks(NamedTuple):
    """The three regions of a source file, as raw (unescaped) text."""

    before: str
    marked: str
    after: str


def read_block_until_line(stream: LookaheadStream, end: int) -> str:
    """Consume lines while the last consumed line number is below ``end``.

    Starting from a fresh stream this reads lines ``1..end``. A stream that
    ends early simply yields a shorter block.
    """
    sb = StringBuilder()
    while stream.has_next() and stream.line < end:
        sb.append_line(stream.next())
    return sb.build()


def split_blocks(stream: LookaheadStream, line_start: int, line_end: int) -> SplitBlocks:
    """Partition the stream around the inclusive range ``line_start..line_end``.

    Ranges past the end of the input are not errors; they leave the later
    blocks empty.
    """
    before = read_block_until_line(stream, line_start - 1)
    marked = read_block_until_line(stream, line_end)
    after = read_block_until_line(stream, sys.maxsize)
    return SplitBlocks(before, marked, after)


__all__ = ["SplitBlocks", "read_block_until_line", "split_blocks"]
