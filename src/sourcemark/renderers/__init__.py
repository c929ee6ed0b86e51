"""sourcemark renderers.

Available Renderers:
- SourcePrinter: Renders a marked source file to HTML for Prism.js
- render_info_panel: Renders the annotation panel for a marker

Thread Safety:
Renderers keep all per-call state local. Safe for concurrent use.

"""

from sourcemark.renderers.html import SourcePrinter
from sourcemark.renderers.panel import render_info_panel
from sourcemark.renderers.protocol import SourceRenderer

__all__ = ["SourcePrinter", "SourceRenderer", "render_info_panel"]
