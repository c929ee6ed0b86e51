"""Composable sanitization policies for marker titles and descriptions.

Descriptions come from analysis tools and may carry HTML fragments. Policies
take an HTML fragment and return a cleaned fragment; they compose via the
``|`` operator. Parsing and serialisation use selectolax's Lexbor backend.

Example:
    >>> from sourcemark.sanitize import sanitize_rich_text, strict
    >>> sanitize_rich_text('<b>Null</b> deref<script>alert(1)</script>')
    '<b>Null</b> deref'
    >>> sanitize_rich_text("<b>Null</b>", policy=strict)
    'Null'
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable

from selectolax.lexbor import LexborHTMLParser

# Zero-width and bidi override characters to strip (Trojan Source mitigation)
_NORMALIZE_UNICODE_PATTERN = re.compile(
    "[\u200b\u200c\u200d\u200e\u200f\u202a\u202b\u202c\u202d\u202e\ufeff]+"
)

_DANGEROUS_SCHEMES = ("javascript:", "data:", "vbscript:")

_URL_ATTRIBUTES = frozenset(("href", "src", "action", "formaction", "xlink:href"))

# Removed together with everything inside them
_UNSAFE_TAGS = [
    "script",
    "style",
    "iframe",
    "frame",
    "frameset",
    "object",
    "embed",
    "applet",
    "form",
    "input",
    "button",
    "textarea",
    "select",
    "link",
    "meta",
    "base",
    "noscript",
    "template",
]

_DEFAULT_ALLOWED_TAGS = frozenset(
    (
        "a", "abbr", "b", "blockquote", "br", "code", "dd", "del", "div", "dl",
        "dt", "em", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i", "img", "ins",
        "kbd", "li", "ol", "p", "pre", "s", "samp", "small", "span", "strong",
        "sub", "sup", "table", "tbody", "td", "th", "thead", "tr", "u", "ul",
    )
)

_DEFAULT_ALLOWED_ATTRIBUTES = frozenset(
    ("href", "src", "alt", "title", "class", "colspan", "rowspan")
)

# Implied by the parser around every fragment
_DOCUMENT_TAGS = frozenset(("html", "head", "body"))


def _is_dangerous_url(url: str) -> bool:
    """Check if URL uses a dangerous scheme (ignoring embedded whitespace)."""
    lower = re.sub(r"\s+", "", url).lower()
    return lower.startswith(_DANGEROUS_SCHEMES)


def _fragment(html_text: str) -> LexborHTMLParser:
    return LexborHTMLParser(html_text)


def _serialize(tree: LexborHTMLParser) -> str:
    """Serialise the body contents, dropping the implied document wrapper."""
    body = tree.body
    if body is None:
        return ""
    return body.inner_html or ""


class Policy:
    """Wrapper for an ``str -> str`` HTML transform, supports composition via |."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[str], str]) -> None:
        self._fn = fn

    def __call__(self, html_text: str) -> str:
        if not html_text:
            return ""
        return self._fn(html_text)

    def __or__(self, other: Policy) -> Policy:
        """Chain policies: (self | other)(html) applies self then other."""

        def chained(html_text: str) -> str:
            return other(self(html_text))

        return Policy(chained)


def _strip_unsafe_tags(html_text: str) -> str:
    """Remove active content (scripts, frames, forms) including its children."""
    tree = _fragment(html_text)
    tree.strip_tags(_UNSAFE_TAGS, recursive=True)
    return _serialize(tree)


def _strip_event_handlers(html_text: str) -> str:
    """Remove ``on*`` attributes from every element."""
    tree = _fragment(html_text)
    body = tree.body
    if body is None:
        return ""
    for node in body.css("*"):
        for name in [a for a in node.attributes if a.lower().startswith("on")]:
            del node.attrs[name]
    return _serialize(tree)


def _strip_dangerous_urls(html_text: str) -> str:
    """Remove URL attributes using javascript:, data: or vbscript:."""
    tree = _fragment(html_text)
    body = tree.body
    if body is None:
        return ""
    for node in body.css("*"):
        attributes = node.attributes
        for name, value in attributes.items():
            if name.lower() in _URL_ATTRIBUTES and value and _is_dangerous_url(value):
                del node.attrs[name]
    return _serialize(tree)


def _normalize_unicode(html_text: str) -> str:
    """Strip zero-width characters and bidi overrides."""
    return _NORMALIZE_UNICODE_PATTERN.sub("", html_text)


def _strip_html(html_text: str) -> str:
    """Drop all markup, keeping the (escaped) text content."""
    tree = _fragment(html_text)
    tree.strip_tags(_UNSAFE_TAGS, recursive=True)
    body = tree.body
    if body is None:
        return ""
    return html.escape(body.text(deep=True), quote=False)


# Composable Policy instances (use with | operator)
strip_unsafe_tags = Policy(_strip_unsafe_tags)
strip_event_handlers = Policy(_strip_event_handlers)
strip_dangerous_urls = Policy(_strip_dangerous_urls)
normalize_unicode = Policy(_normalize_unicode)
strip_html = Policy(_strip_html)


def allow_tags(*tags: str) -> Policy:
    """Keep only the given tags; other elements are unwrapped (text kept).

    Default tags: common inline and block formatting, tables, lists, links
    and images.
    """
    allowed = frozenset(t.lower() for t in tags) if tags else _DEFAULT_ALLOWED_TAGS

    def fn(html_text: str) -> str:
        tree = _fragment(html_text)
        body = tree.body
        if body is None:
            return ""
        disallowed = {node.tag for node in body.css("*")} - allowed - _DOCUMENT_TAGS
        if disallowed:
            tree.unwrap_tags(sorted(disallowed))
        return _serialize(tree)

    return Policy(fn)


def allow_attributes(*names: str) -> Policy:
    """Keep only the given attributes on every element.

    Default attributes: ``href``, ``src``, ``alt``, ``title``, ``class`` and
    the table spans; ``style`` and ``data-*`` are removed.
    """
    allowed = frozenset(n.lower() for n in names) if names else _DEFAULT_ALLOWED_ATTRIBUTES

    def fn(html_text: str) -> str:
        tree = _fragment(html_text)
        body = tree.body
        if body is None:
            return ""
        for node in body.css("*"):
            for name in [a for a in node.attributes if a.lower() not in allowed]:
                del node.attrs[name]
        return _serialize(tree)

    return Policy(fn)


# Pre-built policy sets
web_safe: Policy = (
    normalize_unicode
    | strip_unsafe_tags
    | allow_tags()
    | allow_attributes()
    | strip_event_handlers
    | strip_dangerous_urls
)
strict: Policy = normalize_unicode | strip_html


def sanitize_rich_text(html_text: str, *, policy: Policy | Callable[[str], str] = web_safe) -> str:
    """Apply a sanitization policy to an HTML fragment.

    Args:
        html_text: Fragment to clean (plain text is treated as HTML text)
        policy: Policy or callable ``str -> str``; defaults to ``web_safe``

    Returns:
        Sanitized fragment, safe to embed without further escaping
    """
    if not html_text:
        return ""
    return policy(html_text)


Sanitizer = Callable[[str], str]

__all__ = [
    "Policy",
    "Sanitizer",
    "allow_attributes",
    "allow_tags",
    "normalize_unicode",
    "sanitize_rich_text",
    "strict",
    "strip_dangerous_urls",
    "strip_event_handlers",
    "strip_html",
    "strip_unsafe_tags",
    "web_safe",
]
