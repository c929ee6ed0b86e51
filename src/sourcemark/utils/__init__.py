"""Utility modules for sourcemark.

Provides:
- text: escape_html, escape_attribute for embedding source text
- logger: get_logger for namespaced logging
"""

from sourcemark.utils.logger import get_logger
from sourcemark.utils.text import escape_attribute, escape_html

__all__ = [
    "escape_attribute",
    "escape_html",
    "get_logger",
]
