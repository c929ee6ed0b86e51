"""Exception classes for sourcemark.

Malformed marker ranges never raise; they degrade to an unmarked render.
The only failure that escapes a render call is an unreadable source.
"""

from __future__ import annotations


class SourcemarkError(Exception):
    """Base exception for all sourcemark errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(SourcemarkError):
    """Error during HTML rendering of a source file."""

    pass


class SourceReadError(RenderError):
    """The line sequence of a source file could not be read.

    Raised from the underlying ``OSError`` or ``UnicodeDecodeError`` so the
    cause stays attached as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        source_file: str | None = None,
        lineno: int | None = None,
    ) -> None:
        """Initialize read error with optional location.

        Args:
            message: Error description
            source_file: Name of the file being rendered (optional)
            lineno: Number of lines consumed before the failure (optional)
        """
        self.message = message
        self.source_file = source_file
        self.lineno = lineno

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
