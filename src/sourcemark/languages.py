"""Map file names to Prism.js language classes.

Static table lookup on the text after the last ``.`` of the base name.
Unknown or missing extensions fall back to ``language-clike``, which gives
reasonable results for most curly-brace languages.
"""

from __future__ import annotations

from pathlib import PurePath

FALLBACK_LANGUAGE_CLASS = "language-clike"

_LANGUAGE_CLASSES: dict[str, str] = {
    "htm": "language-markup",
    "html": "language-markup",
    "xml": "language-markup",
    "xsd": "language-markup",
    "css": "language-css",
    "js": "language-javascript",
    "c": "language-c",
    "h": "language-c",
    "cs": "language-csharp",
    "cpp": "language-cpp",
    "cc": "language-cpp",
    "hpp": "language-cpp",
    "Dockerfile": "language-docker",
    "go": "language-go",
    "groovy": "language-groovy",
    "json": "language-json",
    "md": "language-markdown",
    "erb": "language-erb",
    "jsp": "language-erb",
    "tag": "language-erb",
    "jav": "language-java",
    "java": "language-java",
    "rb": "language-ruby",
    "kt": "language-kotlin",
    "kts": "language-kotlin",
    "vb": "language-vbnet",
    "pl": "language-perl",
    "php": "language-php",
    "py": "language-python",
    "rs": "language-rust",
    "sh": "language-bash",
    "sql": "language-sql",
    "scala": "language-scala",
    "sc": "language-scala",
    "swift": "language-swift",
    "ts": "language-typescript",
    "yaml": "language-yaml",
    "yml": "language-yaml",
}

# Files recognised by their whole name rather than an extension
_FILE_NAME_CLASSES: dict[str, str] = {"Dockerfile": "language-docker"}


def select_language_class(file_name: str) -> str:
    """Return the Prism language class for ``file_name``.

    Examples:
        >>> select_language_class("src/Main.java")
        'language-java'
        >>> select_language_class("README.MD")
        'language-markdown'
        >>> select_language_class("Makefile")
        'language-clike'
    """
    base_name = PurePath(file_name).name if file_name else ""
    if base_name in _FILE_NAME_CLASSES:
        return _FILE_NAME_CLASSES[base_name]

    _, dot, extension = base_name.rpartition(".")
    if not dot:
        return FALLBACK_LANGUAGE_CLASS
    return (
        _LANGUAGE_CLASSES.get(extension)
        or _LANGUAGE_CLASSES.get(extension.lower())
        or FALLBACK_LANGUAGE_CLASS
    )


__all__ = ["FALLBACK_LANGUAGE_CLASS", "select_language_class"]
