"""Escaping helpers for embedding source text in HTML.

Example:
    >>> from sourcemark.utils.text import escape_html
    >>> escape_html('if (a < b && c > "d")')
    'if (a &lt; b &amp;&amp; c &gt; &quot;d&quot;)'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape source text for use as element content.

    Converts ``&``, ``<``, ``>`` and ``"`` to entities. Single quotes are left
    alone; they are harmless in element content and keep the output readable.

    Args:
        text: Raw text (may contain column placeholders, which hold no
            special characters and pass through untouched)

    Returns:
        HTML-escaped text
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def escape_attribute(text: str) -> str:
    """Escape text for a double- or single-quoted attribute value.

    Examples:
        >>> escape_attribute("a'b\\"c")
        'a&#x27;b&quot;c'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)
