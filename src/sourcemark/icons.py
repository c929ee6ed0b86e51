"""Icon resolution for marker and collapse icons.

Symbols are resolved to inline SVG by an injected resolver; image icons
become ``<img>`` elements whose path is resolved by an injected path
resolver (by default: prefixed with ``RenderConfig.image_base``).

Usage:
    from sourcemark.icons import set_symbol_resolver

    def my_resolver(name: str, css_class: str) -> str | None:
        return f'<svg class="svg-icon {css_class}">...</svg>'

    set_symbol_resolver(my_resolver)

Without a symbol resolver, symbols render as placeholder spans (CSS class
only).

Thread Safety:
    Setters are meant to be called once at application startup, before any
    concurrent rendering. The resolver references are protected by a lock
    for safe updates in multi-threaded environments.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol

from sourcemark.config import get_render_config
from sourcemark.marker import Icon, ImageIcon, SymbolIcon
from sourcemark.utils.text import escape_attribute


class SymbolResolver(Protocol):
    """Resolves a symbol name to inline SVG markup, or None if unknown."""

    def __call__(self, name: str, css_class: str) -> str | None: ...


class ImagePathResolver(Protocol):
    """Resolves an image icon reference to a URL or path."""

    def __call__(self, name: str) -> str: ...


_symbol_resolver: Callable[[str, str], str | None] | None = None
_image_path_resolver: Callable[[str], str] | None = None
_resolver_lock = threading.Lock()


def set_symbol_resolver(resolver: Callable[[str, str], str | None] | None) -> None:
    """Set the global symbol resolver. Pass None to clear it."""
    global _symbol_resolver
    with _resolver_lock:
        _symbol_resolver = resolver


def set_image_path_resolver(resolver: Callable[[str], str] | None) -> None:
    """Set the global image path resolver. Pass None to restore the default."""
    global _image_path_resolver
    with _resolver_lock:
        _image_path_resolver = resolver


def get_symbol(name: str, css_class: str) -> str:
    """Get symbol SVG, or a placeholder span when unavailable.

    Example:
        >>> set_symbol_resolver(None)
        >>> get_symbol("symbol-warning", "icon-md")
        '<span class="icon icon-md symbol-warning"></span>'
    """
    # Simple read is atomic; no lock needed for reads
    resolver = _symbol_resolver
    if resolver is not None:
        svg = resolver(name, css_class)
        if svg:
            return svg
    return f'<span class="icon {escape_attribute(css_class)} {escape_attribute(name)}"></span>'


def get_image_path(name: str) -> str:
    """Resolve an image icon reference with the configured resolver."""
    resolver = _image_path_resolver
    if resolver is not None:
        return resolver(name)
    base = get_render_config().image_base
    if not base or "://" in name or name.startswith("/"):
        return name
    return f"{base.rstrip('/')}/{name}"


def render_icon(icon: Icon, css_class: str) -> str:
    """Render a marker icon with the given size class."""
    match icon:
        case SymbolIcon(name=name):
            return get_symbol(name, css_class)
        case ImageIcon(path=path):
            src = escape_attribute(get_image_path(path))
            return f'<img src="{src}" class="{escape_attribute(css_class)}">'
    raise TypeError(f"Unsupported icon: {icon!r}")


def has_symbol_resolver() -> bool:
    """Check if a symbol resolver is configured."""
    return _symbol_resolver is not None


__all__ = [
    "ImagePathResolver",
    "SymbolResolver",
    "get_image_path",
    "get_symbol",
    "has_symbol_resolver",
    "render_icon",
    "set_image_path_resolver",
    "set_symbol_resolver",
]
