"""Annotation panel shown directly below the marked code.

Without a description the panel is a title bar only. With one, the title bar
becomes a clickable collapse button and the description sits in a detail
panel that starts collapsed (Bootstrap's ``collapse`` class).
"""

from __future__ import annotations

from sourcemark.config import get_render_config
from sourcemark.icons import get_symbol, render_icon
from sourcemark.marker import Marker
from sourcemark.sanitize import Sanitizer, sanitize_rich_text
from sourcemark.stringbuilder import StringBuilder

COLLAPSE_SYMBOL = "symbol-circle-chevron-down"
DESCRIPTION_ID = "analysis-description"


def title_to_html(title: str, sanitizer: Sanitizer = sanitize_rich_text) -> str:
    """Turn newlines into ``<br>`` (HTML collapses them) and sanitize."""
    return sanitizer(title.replace("\n", "<br>"))


def _render_title(
    sb: StringBuilder, marker: Marker, sanitizer: Sanitizer, *, collapsible: bool
) -> None:
    icon_class = get_render_config().icon_class
    sb.append('<table class="analysis-title"><tr>')
    sb.append("<td>").append(render_icon(marker.icon, icon_class)).append("</td>")
    sb.append('<td class="analysis-title-column"><div class="analysis-warning-title">')
    sb.append(title_to_html(marker.title, sanitizer))
    sb.append("</div></td>")
    sb.append("<td>")
    if collapsible:
        sb.append(get_symbol(COLLAPSE_SYMBOL, "analysis-collapse-icon"))
    sb.append("</td>")
    sb.append("</tr></table>")


def render_info_panel(marker: Marker, sanitizer: Sanitizer = sanitize_rich_text) -> str:
    """Render the title bar and, if present, the collapsed description."""
    sb = StringBuilder()
    sb.append('<div class="analysis-warning">')
    if not marker.description:
        _render_title(sb, marker, sanitizer, collapsible=False)
    else:
        sb.append('<div class="analysis-collapse-button"><div>')
        _render_title(sb, marker, sanitizer, collapsible=True)
        sb.append("</div></div>")
        sb.append(f'<div class="collapse analysis-detail" id="{DESCRIPTION_ID}">')
        sb.append(sanitizer(marker.description))
        sb.append("</div>")
    sb.append("</div>")
    return sb.build()


__all__ = ["COLLAPSE_SYMBOL", "DESCRIPTION_ID", "render_info_panel", "title_to_html"]
