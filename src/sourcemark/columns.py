"""Column highlighting that survives HTML escaping.

Marking a column range is a three-step protocol:

1. ``mark_columns`` wraps the range in plain-text placeholders
2. the whole text is HTML-escaped (placeholders hold no special characters)
3. ``replace_placeholders`` swaps the placeholders for the real tags

The real tags are inserted only after escaping, so they are never escaped
themselves, and source text can never smuggle in a tag of its own.

Example:
    >>> escaped = escape_html(COLUMN_MARKER.mark_columns("a<b", 2, 2))
    >>> COLUMN_MARKER.replace_placeholders(escaped)
    "a<span class='code-mark'>&lt;</span>b"
"""

from __future__ import annotations

from sourcemark.utils.logger import get_logger
from sourcemark.utils.text import escape_html

logger = get_logger(__name__)

OPENING_TAG = "<span class='code-mark'>"
CLOSING_TAG = "</span>"


class ColumnMarker:
    """Encloses a column range with placeholders and later with HTML tags.

    Thread Safety:
        Immutable after construction; share one instance process-wide.
    """

    __slots__ = ("_opening_placeholder", "_closing_placeholder")

    def __init__(self, placeholder_text: str) -> None:
        """Create a marker whose placeholders are built from ``placeholder_text``.

        Args:
            placeholder_text: Text unlikely to appear in any source code and
                free of HTML special characters
        """
        self._opening_placeholder = "OpEn" + placeholder_text
        self._closing_placeholder = "ClOsE" + placeholder_text

    @property
    def opening_placeholder(self) -> str:
        return self._opening_placeholder

    @property
    def closing_placeholder(self) -> str:
        return self._closing_placeholder

    def mark_columns(self, text: str, start: int, end: int) -> str:
        """Wrap columns ``start..end`` (1-indexed, inclusive) in placeholders.

        ``end == 0`` marks through the end of the text. Invalid ranges return
        the text unchanged: ``start < 1``, empty text, ``end`` past the end of
        the text (not clamped), or ``start`` after ``end``.

        Examples:
            >>> m = ColumnMarker("-x-")
            >>> m.mark_columns("abcdef", 2, 4)
            'aOpEn-x-bcdClOsE-x-ef'
            >>> m.mark_columns("abcdef", 3, 0)
            'abOpEn-x-cdefClOsE-x-'
        """
        if start < 1 or not text or end > len(text):
            logger.debug("Column range %d..%d outside text of length %d", start, end, len(text))
            return text

        real_start = start - 1
        real_end = len(text) - 1 if end == 0 else end - 1
        if real_start > real_end:
            logger.debug("Empty column range %d..%d", start, end)
            return text

        after_mark = real_end + 1
        return (
            text[:real_start]
            + self._opening_placeholder
            + text[real_start:after_mark]
            + self._closing_placeholder
            + text[after_mark:]
        )

    def replace_placeholders(self, text: str) -> str:
        """Replace every placeholder with its HTML tag.

        Must run on already-escaped text.
        """
        return text.replace(self._opening_placeholder, OPENING_TAG).replace(
            self._closing_placeholder, CLOSING_TAG
        )


COLUMN_MARKER = ColumnMarker("-n/a-")


def mark_escaped(text: str, start: int, end: int, marker: ColumnMarker = COLUMN_MARKER) -> str:
    """Run the full protocol: mark, escape, then insert the tags."""
    return marker.replace_placeholders(escape_html(marker.mark_columns(text, start, end)))


__all__ = [
    "CLOSING_TAG",
    "COLUMN_MARKER",
    "ColumnMarker",
    "OPENING_TAG",
    "mark_escaped",
]
