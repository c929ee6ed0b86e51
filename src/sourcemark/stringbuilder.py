"""Fragment buffer for blocks of source lines and the final ``<pre>``.

The splitter collects every line of a block here, newline-terminated, and
the renderer collects the code blocks and the panel. Both join once.

Thread Safety:
Each split and each render creates its own buffer.

"""

from __future__ import annotations


class StringBuilder:
    """Collects text fragments and joins them in order.

    Usage:
        >>> block = StringBuilder()
        >>> block.append_line("int a;").append_line("int b;").build()
        'int a;\\nint b;\\n'
        >>> bool(StringBuilder().append(""))
        False

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Add ``s``; empty fragments are dropped."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Add ``s`` as one source line, terminated by ``\\n``.

        Empty lines still count: they contribute the newline.
        """
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
