"""SourceRenderer protocol: the stable interface for marked-source renderers.

The built-in ``SourcePrinter`` is the reference implementation.

Example:
    from sourcemark.renderers.protocol import SourceRenderer

    def render_issue(renderer: SourceRenderer, path: str, lines, marker) -> str:
        return renderer.render(path, lines, marker)

"""

from collections.abc import Iterable
from typing import Protocol

from sourcemark.marker import Marker


class SourceRenderer(Protocol):
    """Protocol for renderers of a source file with one marker."""

    def render(self, file_name: str, lines: Iterable[str], marker: Marker) -> str:
        """Render the lines of ``file_name`` with ``marker`` highlighted.

        Args:
            file_name: Name of the source file (selects the language class)
            lines: The file's lines, without line terminators; consumed once
            marker: The finding to highlight

        Returns:
            Rendered HTML string.

        """
        ...
