"""
sourcemark: render a source file with one highlighted finding as HTML

Splits a source file around a marker (a line/column range reported by an
analysis tool), escapes it for HTML, highlights the marked columns and
appends an expandable annotation panel. Syntax colouring is left to Prism.js
in the browser.

Quick Start:
    >>> from sourcemark import Marker, render
    >>> marker = Marker(line_start=2, line_end=2, column_start=1, column_end=3,
    ...                 title="Unused variable", icon="symbol-warning")
    >>> html = render("a.c", ["int a;", "int b;", "int c;"], marker)
    >>> html.startswith('<pre><code class="language-c line-numbers match-braces">int a;')
    True

    >>> # Or straight from disk
    >>> from sourcemark import render_file
    >>> html = render_file("src/Main.java", marker)  # doctest: +SKIP

Installation:
    pip install sourcemark
"""

from collections.abc import Iterable
from pathlib import Path

from sourcemark.columns import COLUMN_MARKER, ColumnMarker
from sourcemark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from sourcemark.errors import RenderError, SourcemarkError, SourceReadError
from sourcemark.icons import set_image_path_resolver, set_symbol_resolver
from sourcemark.languages import select_language_class
from sourcemark.lines import LookaheadStream, read_lines
from sourcemark.marker import Icon, ImageIcon, Marker, SymbolIcon, parse_icon
from sourcemark.renderers.html import SourcePrinter
from sourcemark.renderers.protocol import SourceRenderer
from sourcemark.sanitize import Sanitizer, sanitize_rich_text
from sourcemark.splitter import SplitBlocks, split_blocks

__version__ = "0.1.0"

_DEFAULT_PRINTER = SourcePrinter()


def render(
    file_name: str,
    lines: Iterable[str],
    marker: Marker,
    *,
    sanitizer: Sanitizer | None = None,
) -> str:
    """Render source lines with one marker highlighted.

    Args:
        file_name: Name of the source file (selects the Prism language class)
        lines: The file's lines without terminators; consumed once and closed
        marker: The finding to highlight
        sanitizer: Optional cleaner for marker title/description HTML

    Returns:
        HTML string (a ``<pre>`` element)

    Raises:
        SourceReadError: If reading ``lines`` fails with an I/O or decoding error
    """
    printer = _DEFAULT_PRINTER if sanitizer is None else SourcePrinter(sanitizer)
    return printer.render(file_name, lines, marker)


def render_file(
    path: str | Path,
    marker: Marker,
    *,
    encoding: str = "utf-8",
    sanitizer: Sanitizer | None = None,
) -> str:
    """Read ``path`` and render it with ``marker`` highlighted.

    The file is streamed line by line and closed before returning, also
    when reading fails.

    Raises:
        SourceReadError: If the file cannot be opened, read or decoded
    """
    path = Path(path)
    return render(path.name, read_lines(path, encoding), marker, sanitizer=sanitizer)


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "render",
    "render_file",
    # Marker
    "Marker",
    "Icon",
    "ImageIcon",
    "SymbolIcon",
    "parse_icon",
    # Building blocks
    "ColumnMarker",
    "COLUMN_MARKER",
    "LookaheadStream",
    "read_lines",
    "SplitBlocks",
    "split_blocks",
    "select_language_class",
    # Renderer
    "SourcePrinter",
    "SourceRenderer",
    # Collaborators
    "Sanitizer",
    "sanitize_rich_text",
    "set_symbol_resolver",
    "set_image_path_resolver",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "SourcemarkError",
    "RenderError",
    "SourceReadError",
]
