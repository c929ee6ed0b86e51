"""Tests for SourcePrinter and the annotation panel."""

import html as html_module
import re
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sourcemark import Marker, SourcePrinter, render, render_file
from sourcemark.columns import CLOSING_TAG, OPENING_TAG
from sourcemark.icons import set_symbol_resolver
from sourcemark.renderers.panel import render_info_panel, title_to_html

LINES = ["int a;", "int b;", "int c;"]
PLAIN = '<code class="language-c line-numbers match-braces">'
MARKED = '<code class="language-c line-numbers highlight match-braces">'

_CODE_PATTERN = re.compile(r'<code class="[^"]*">(.*?)</code>', re.DOTALL)


@pytest.fixture(autouse=True)
def _no_symbol_resolver() -> Iterator[None]:
    set_symbol_resolver(None)
    yield
    set_symbol_resolver(None)


def _marker(**kwargs: object) -> Marker:
    values: dict[str, object] = {
        "line_start": 2,
        "line_end": 2,
        "column_start": 1,
        "column_end": 3,
        "title": "Unused variable",
        "icon": "symbol-warning",
    }
    values.update(kwargs)
    return Marker(**values)  # type: ignore[arg-type]


def _code_blocks(html: str) -> list[str]:
    return _CODE_PATTERN.findall(html)


class TestEndToEnd:
    def test_three_blocks(self) -> None:
        html = render("a.c", LINES, _marker())

        assert html.startswith(f"<pre>{PLAIN}int a;\n</code>{MARKED}")
        assert f"{MARKED}{OPENING_TAG}int{CLOSING_TAG} b;\n</code>" in html
        assert html.endswith(f"{PLAIN}int c;\n</code></pre>")

    def test_panel_sits_between_marked_and_after(self) -> None:
        html = render("a.c", LINES, _marker())
        marked_end = html.index("b;\n</code>")
        panel = html.index('<div class="analysis-warning">')
        after = html.rindex(PLAIN)
        assert marked_end < panel < after

    def test_code_is_escaped(self) -> None:
        html = render("a.c", ["if (a < b && c > d) {", "  s = \"<b>\";", "}"], _marker(column_end=0))
        assert "<b>" not in html.replace(OPENING_TAG, "")
        assert "&lt;b&gt;" in html
        assert "a &lt; b &amp;&amp; c &gt; d" in html

    def test_column_mark_through_end_of_line(self) -> None:
        html = render("a.c", LINES, _marker(column_start=5, column_end=0))
        assert f"int {OPENING_TAG}b;\n{CLOSING_TAG}</code>" in html

    def test_multi_line_marker_is_not_column_marked(self) -> None:
        html = render("a.c", LINES, _marker(line_start=1, line_end=2, column_start=1, column_end=3))
        assert OPENING_TAG not in html
        assert f"{MARKED}int a;\nint b;\n</code>" in html

    def test_marker_past_end_of_file(self) -> None:
        html = render("a.c", LINES, _marker(line_start=3, line_end=10, column_end=0))
        blocks = _code_blocks(html)
        assert blocks[0] == "int a;\nint b;\n"
        assert blocks[2] == ""

    def test_empty_file(self) -> None:
        html = render("a.c", [], _marker())
        assert _code_blocks(html) == ["", "", ""]
        assert '<div class="analysis-warning">' in html

    def test_language_class_from_file_name(self) -> None:
        html = render("src/Main.java", LINES, _marker())
        assert '<code class="language-java line-numbers match-braces">' in html

    def test_generator_input(self) -> None:
        html = render("a.c", (line for line in LINES), _marker())
        assert html == render("a.c", LINES, _marker())

    def test_render_file(self, tmp_path: Path) -> None:
        path = tmp_path / "a.c"
        path.write_text("int a;\nint b;\nint c;\n", encoding="utf-8")
        assert render_file(path, _marker()) == render("a.c", LINES, _marker())

    @given(
        st.lists(
            st.text(alphabet=st.characters(exclude_characters="\n\r"), max_size=12),
            max_size=12,
        ),
        st.integers(min_value=1, max_value=14),
        st.integers(min_value=0, max_value=3),
        st.integers(min_value=-1, max_value=14),
        st.integers(min_value=-1, max_value=14),
    )
    @settings(max_examples=100)
    def test_code_blocks_reconstruct_source(
        self, lines: list[str], start: int, length: int, col_start: int, col_end: int
    ) -> None:
        marker = _marker(
            line_start=start, line_end=start + length, column_start=col_start, column_end=col_end
        )
        html = render("a.c", lines, marker)

        blocks = _code_blocks(html)
        assert len(blocks) == 3
        text = "".join(blocks).replace(OPENING_TAG, "").replace(CLOSING_TAG, "")
        assert html_module.unescape(text) == "".join(f"{line}\n" for line in lines)


class TestInfoPanel:
    def test_title_only_without_description(self) -> None:
        panel = render_info_panel(_marker(description=""))
        assert panel.startswith('<div class="analysis-warning"><table class="analysis-title">')
        assert '<div class="analysis-warning-title">Unused variable</div>' in panel
        assert "analysis-collapse-button" not in panel
        assert "analysis-collapse-icon" not in panel
        assert 'class="collapse' not in panel
        assert "analysis-description" not in panel

    def test_collapsible_with_description(self) -> None:
        panel = render_info_panel(_marker(description="<p>Remove it.</p>"))
        assert '<div class="analysis-collapse-button"><div><table class="analysis-title">' in panel
        assert "analysis-collapse-icon" in panel
        assert (
            '<div class="collapse analysis-detail" id="analysis-description"><p>Remove it.</p></div>'
            in panel
        )
        assert panel.index("analysis-collapse-button") < panel.index("analysis-detail")

    def test_symbol_icon(self) -> None:
        panel = render_info_panel(_marker())
        assert '<td><span class="icon icon-md symbol-warning"></span></td>' in panel

    def test_image_icon(self) -> None:
        panel = render_info_panel(_marker(icon="16x16/warning.png"))
        assert '<td><img src="16x16/warning.png" class="icon-md"></td>' in panel

    def test_collapse_icon_uses_symbol_resolver(self) -> None:
        set_symbol_resolver(lambda name, css_class: f"<svg data-name='{name}' class='{css_class}'/>")
        panel = render_info_panel(_marker(description="x"))
        assert "symbol-circle-chevron-down" in panel

    def test_title_newlines_become_breaks(self) -> None:
        assert title_to_html("first\nsecond") == "first<br>second"
        panel = render_info_panel(_marker(title="first\nsecond"))
        assert "first<br>second" in panel
        assert "first\nsecond" not in panel

    def test_title_and_description_are_sanitized(self) -> None:
        panel = render_info_panel(
            _marker(
                title="<script>alert(1)</script>Bad <b>cast</b>",
                description='<p onclick="x()">See <a href="javascript:y()">docs</a></p>',
            )
        )
        assert "<script" not in panel
        assert "alert(1)" not in panel
        assert "Bad <b>cast</b>" in panel
        assert "onclick" not in panel
        assert "javascript" not in panel

    def test_plain_text_title_is_escaped(self) -> None:
        panel = render_info_panel(_marker(title="a < b"))
        assert "a &lt; b" in panel


class TestCustomSanitizer:
    def test_sanitizer_is_injected(self) -> None:
        calls: list[str] = []

        def sanitizer(text: str) -> str:
            calls.append(text)
            return "CLEAN"

        html = SourcePrinter(sanitizer).render("a.c", LINES, _marker(description="d"))
        assert calls == ["Unused variable", "d"]
        assert html.count("CLEAN") == 2

    def test_render_accepts_sanitizer(self) -> None:
        html = render("a.c", LINES, _marker(), sanitizer=lambda s: s.upper())
        assert "UNUSED VARIABLE" in html


class TestThreadSafety:
    def test_concurrent_renders_match_sequential(self) -> None:
        printer = SourcePrinter()
        markers = [
            _marker(line_start=i % 3 + 1, line_end=i % 3 + 1, column_start=1, column_end=i % 6)
            for i in range(30)
        ]
        expected = [printer.render("a.c", LINES, m) for m in markers]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda m: printer.render("a.c", LINES, m), markers))

        assert results == expected
