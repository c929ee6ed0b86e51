"""ContextVar-based render configuration for sourcemark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The renderer reads the active config once per render() call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from sourcemark.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(line_numbers=False)):
        html = render("Main.java", lines, marker)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        line_numbers: Add Prism's ``line-numbers`` class to code blocks
        match_braces: Add Prism's ``match-braces`` class to code blocks
        icon_class: Size class applied to marker and collapse icons
        image_base: Prefix for image icon paths (empty = use path as given)

    """

    line_numbers: bool = True
    match_braces: bool = True
    icon_class: str = "icon-md"
    image_base: str = ""

    @classmethod
    def from_dict(cls, config_dict: dict) -> RenderConfig:
        """Create RenderConfig from dictionary.

        Unknown keys are silently ignored so host settings can be passed
        through as a whole.

        Example:
            >>> RenderConfig.from_dict({"line_numbers": False, "theme": "x"}).line_numbers
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def code_classes(self, language: str, *extra: str) -> tuple[str, ...]:
        """CSS classes for a ``<code>`` block in the given language."""
        classes = [language]
        if self.line_numbers:
            classes.append("line-numbers")
        classes.extend(extra)
        if self.match_braces:
            classes.append("match-braces")
        return tuple(classes)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(match_braces=False)):
        ...     get_render_config().match_braces
        False

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
