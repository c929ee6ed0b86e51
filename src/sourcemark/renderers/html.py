"""HTML renderer for a source file with one highlighted marker.

Output is a single ``<pre>`` holding four parts, in order:

- the code before the marker
- the marked code (column range wrapped in ``<span class='code-mark'>``)
- the annotation panel
- the code after the marker

Colouring is left to Prism.js in the browser, driven by the language and
plugin classes on each ``<code>`` element.

Thread Safety:
All per-render state lives in local variables. Multiple threads can share a
single SourcePrinter instance and call render() concurrently.
"""

from __future__ import annotations

from collections.abc import Iterable

from sourcemark.columns import COLUMN_MARKER
from sourcemark.config import RenderConfig, get_render_config
from sourcemark.errors import SourceReadError
from sourcemark.languages import select_language_class
from sourcemark.lines import LookaheadStream
from sourcemark.marker import Marker
from sourcemark.renderers.panel import render_info_panel
from sourcemark.sanitize import Sanitizer, sanitize_rich_text
from sourcemark.splitter import split_blocks
from sourcemark.stringbuilder import StringBuilder
from sourcemark.utils.logger import get_logger
from sourcemark.utils.text import escape_html

logger = get_logger(__name__)

HIGHLIGHT_CLASS = "highlight"


def _code(classes: tuple[str, ...], content: str) -> str:
    return f'<code class="{" ".join(classes)}">{content}</code>'


class SourcePrinter:
    """Render a source file into an HTML snippet for Prism.js.

    Usage:
        >>> printer = SourcePrinter()
        >>> marker = Marker(line_start=2, line_end=2, column_start=1, column_end=3,
        ...                 title="Unused", icon="symbol-warning")
        >>> html = printer.render("a.c", ["int a;", "int b;", "int c;"], marker)
        >>> "<span class='code-mark'>int</span> b;" in html
        True

    Thread Safety:
        Holds only the sanitizer reference. Safe for concurrent use.
    """

    __slots__ = ("_sanitizer",)

    def __init__(self, sanitizer: Sanitizer | None = None) -> None:
        """Initialize printer.

        Args:
            sanitizer: Cleans marker titles and descriptions before they are
                embedded; defaults to ``sanitize_rich_text`` (web_safe policy)
        """
        self._sanitizer = sanitizer or sanitize_rich_text

    def render(self, file_name: str, lines: Iterable[str], marker: Marker) -> str:
        """Create the colorizable HTML for ``lines`` with ``marker`` highlighted.

        The line sequence is consumed once and closed on every exit path.

        Args:
            file_name: Name of the source file (selects the language class)
            lines: The file's lines, without line terminators
            marker: The finding to highlight

        Returns:
            ``<pre>`` element as an HTML string

        Raises:
            SourceReadError: If reading the lines fails with an ``OSError``
                or a line cannot be decoded
        """
        with LookaheadStream(lines) as stream:
            try:
                blocks = split_blocks(stream, marker.line_start, marker.line_end)
            except (OSError, UnicodeDecodeError) as exc:
                raise SourceReadError(
                    f"cannot read source: {exc}", source_file=file_name, lineno=stream.line
                ) from exc

        config = get_render_config()
        language = select_language_class(file_name)
        logger.debug(
            "Rendering %s (%s) lines %d-%d",
            file_name,
            language,
            marker.line_start,
            marker.line_end,
        )

        sb = StringBuilder()
        sb.append("<pre>")
        sb.append(self.as_code(blocks.before, language, config))
        sb.append(self.as_marked_code(blocks.marked, marker, language, config))
        sb.append(render_info_panel(marker, self._sanitizer))
        sb.append(self.as_code(blocks.after, language, config))
        sb.append("</pre>")
        return sb.build()

    def as_code(self, text: str, language: str, config: RenderConfig | None = None) -> str:
        """Escape a plain block and wrap it in a ``<code>`` element."""
        config = config or get_render_config()
        return _code(config.code_classes(language), escape_html(text))

    def as_marked_code(
        self,
        text: str,
        marker: Marker,
        language: str,
        config: RenderConfig | None = None,
    ) -> str:
        """Render the marked block with the highlight class.

        Column marking applies only to single-line markers: placeholders go
        in first, then the text is escaped, then placeholders become tags.
        Multi-line blocks are highlighted as a whole.
        """
        config = config or get_render_config()
        if marker.is_single_line:
            text = COLUMN_MARKER.mark_columns(text, marker.column_start, marker.column_end)
        escaped = escape_html(text)
        content = COLUMN_MARKER.replace_placeholders(escaped)
        return _code(config.code_classes(language, HIGHLIGHT_CLASS), content)


__all__ = ["HIGHLIGHT_CLASS", "SourcePrinter"]
