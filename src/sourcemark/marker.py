"""Marker: the single finding highlighted in a rendered source file.

A marker names a contiguous region of the source (1-based lines and columns,
all inclusive), a title, an optional description and an icon. Icons are a
tagged variant decided once, when the marker is built, so the renderer never
inspects icon strings.

Thread Safety:
All types here are frozen and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sourcemark.utils.logger import get_logger

logger = get_logger(__name__)

_SYMBOL_PREFIX = "symbol"


@dataclass(frozen=True, slots=True)
class SymbolIcon:
    """Icon drawn from the host's symbol set as inline SVG.

    Attributes:
        name: Full symbol id, e.g. ``"symbol-warning-outline plugin-ionicons-api"``
    """

    name: str


@dataclass(frozen=True, slots=True)
class ImageIcon:
    """Icon rendered as an ``<img>`` element.

    Attributes:
        path: Image reference, resolved against the configured image base
    """

    path: str


Icon = SymbolIcon | ImageIcon


def parse_icon(icon_id: str | Icon) -> Icon:
    """Turn an icon identifier into its tagged variant.

    Identifiers starting with ``symbol`` are symbols; anything else is an
    image reference. Variants pass through unchanged.

    Examples:
        >>> parse_icon("symbol-warning")
        SymbolIcon(name='symbol-warning')
        >>> parse_icon("16x16/warning.png")
        ImageIcon(path='16x16/warning.png')
    """
    if isinstance(icon_id, (SymbolIcon, ImageIcon)):
        return icon_id
    if icon_id.startswith(_SYMBOL_PREFIX):
        return SymbolIcon(icon_id)
    return ImageIcon(icon_id)


@dataclass(frozen=True, slots=True)
class Marker:
    """A finding to highlight, with its annotation text.

    Attributes:
        line_start: First marked line (1-indexed)
        line_end: Last marked line (1-indexed, inclusive)
        column_start: First marked column (1-indexed)
        column_end: Last marked column (1-indexed, inclusive; 0 = end of line)
        title: Plain text title; newlines render as line breaks
        description: Optional HTML fragment shown in the collapsible panel
        icon: Icon variant; a plain string id is converted on construction

    A ``line_end`` before ``line_start`` is pulled up to ``line_start``.

    Examples:
        >>> m = Marker(line_start=2, line_end=2, column_start=1, column_end=3,
        ...            title="Unused variable", icon="symbol-warning")
        >>> m.is_single_line, m.icon
        (True, SymbolIcon(name='symbol-warning'))

    """

    line_start: int
    line_end: int
    column_start: int = 0
    column_end: int = 0
    title: str = ""
    description: str = ""
    icon: Icon | str = ImageIcon("")

    def __post_init__(self) -> None:
        if not isinstance(self.icon, (SymbolIcon, ImageIcon)):
            object.__setattr__(self, "icon", parse_icon(self.icon))
        if self.description is None:
            object.__setattr__(self, "description", "")
        if self.line_end < self.line_start:
            logger.debug(
                "Marker line_end %d precedes line_start %d; using a single line",
                self.line_end,
                self.line_start,
            )
            object.__setattr__(self, "line_end", self.line_start)

    @property
    def is_single_line(self) -> bool:
        """True when the marker starts and ends on the same line."""
        return self.line_start == self.line_end

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Marker:
        """Create a Marker from a mapping.

        Accepts snake_case or camelCase keys (``lineStart``); unknown keys
        are ignored. ``line_end`` defaults to ``line_start``.

        Example:
            >>> Marker.from_dict({"lineStart": 3, "title": "x", "severity": "HIGH"}).line_end
            3

        """
        aliases = {
            "lineStart": "line_start",
            "lineEnd": "line_end",
            "columnStart": "column_start",
            "columnEnd": "column_end",
        }
        valid_fields = {f for f in cls.__dataclass_fields__}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = aliases.get(key, key)
            if name in valid_fields:
                values[name] = value
        values.setdefault("line_end", values.get("line_start", 1))
        values.setdefault("line_start", values["line_end"])
        return cls(**values)


__all__ = [
    "Icon",
    "ImageIcon",
    "Marker",
    "SymbolIcon",
    "parse_icon",
]
