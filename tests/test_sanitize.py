"""Tests for sanitization policies."""

from sourcemark.sanitize import (
    Policy,
    allow_attributes,
    allow_tags,
    normalize_unicode,
    sanitize_rich_text,
    strict,
    strip_dangerous_urls,
    strip_event_handlers,
    strip_html,
    strip_unsafe_tags,
    web_safe,
)


class TestStripUnsafeTags:
    def test_removes_script_with_content(self) -> None:
        assert strip_unsafe_tags("<b>Null</b> deref<script>alert(1)</script>") == (
            "<b>Null</b> deref"
        )

    def test_removes_iframe(self) -> None:
        clean = strip_unsafe_tags('<p>x</p><iframe src="https://evil.example"></iframe>')
        assert "iframe" not in clean
        assert "<p>x</p>" in clean


class TestStripEventHandlers:
    def test_removes_on_attributes(self) -> None:
        clean = strip_event_handlers('<a href="https://example.com" onclick="evil()">x</a>')
        assert "onclick" not in clean
        assert 'href="https://example.com"' in clean


class TestStripDangerousUrls:
    def test_removes_javascript_href(self) -> None:
        clean = strip_dangerous_urls('<a href="javascript:alert(1)">x</a>')
        assert "javascript" not in clean
        assert ">x</a>" in clean

    def test_removes_data_image(self) -> None:
        clean = strip_dangerous_urls('<img src="data:text/html,boom">')
        assert "data:" not in clean

    def test_keeps_https_link(self) -> None:
        clean = strip_dangerous_urls('<a href="https://example.com">x</a>')
        assert 'href="https://example.com"' in clean


class TestNormalizeUnicode:
    def test_strips_zero_width(self) -> None:
        assert normalize_unicode("Hello\u200bWorld") == "HelloWorld"

    def test_strips_bidi_override(self) -> None:
        assert normalize_unicode("A\u202eB") == "AB"


class TestAllowTags:
    def test_unknown_tags_are_unwrapped(self) -> None:
        assert allow_tags()("<blink>hi</blink>") == "hi"

    def test_custom_allow_list(self) -> None:
        clean = allow_tags("b")("<b>bold</b> <i>italic</i>")
        assert clean == "<b>bold</b> italic"


class TestAllowAttributes:
    def test_style_is_removed(self) -> None:
        assert allow_attributes()('<span style="position:fixed">x</span>') == "<span>x</span>"

    def test_default_keeps_link_attributes(self) -> None:
        clean = allow_attributes()('<a href="https://example.com" title="t" data-x="1">x</a>')
        assert clean == '<a href="https://example.com" title="t">x</a>'

    def test_custom_allow_list(self) -> None:
        assert allow_attributes("id")('<p id="a" class="b">x</p>') == '<p id="a">x</p>'


class TestStripHtml:
    def test_keeps_escaped_text(self) -> None:
        assert strip_html("<i>a</i> &amp; b") == "a &amp; b"


class TestPolicyComposition:
    def test_applies_left_to_right(self) -> None:
        add_a = Policy(lambda s: s + "a")
        add_b = Policy(lambda s: s + "b")
        assert (add_a | add_b)("x") == "xab"

    def test_empty_input(self) -> None:
        assert web_safe("") == ""
        assert sanitize_rich_text("") == ""


class TestSanitizeRichText:
    def test_benign_formatting_survives(self) -> None:
        clean = sanitize_rich_text("Use <code>Objects.equals</code><br><b>instead</b>")
        assert clean == "Use <code>Objects.equals</code><br><b>instead</b>"

    def test_plain_text_is_escaped(self) -> None:
        assert sanitize_rich_text("a < b & c") == "a &lt; b &amp; c"

    def test_combined_attack(self) -> None:
        clean = sanitize_rich_text(
            '<a href="javascript:x()" onmouseover="y()">link</a><script>z()</script>'
        )
        assert "javascript" not in clean
        assert "onmouseover" not in clean
        assert "script" not in clean
        assert "link" in clean

    def test_inline_style_cannot_overlay_page(self) -> None:
        clean = sanitize_rich_text('<div style="position:fixed;top:0">Fake login</div>')
        assert "style" not in clean
        assert clean == "<div>Fake login</div>"

    def test_strict_policy(self) -> None:
        assert sanitize_rich_text("<b>Null</b>", policy=strict) == "Null"

    def test_callable_policy(self) -> None:
        assert sanitize_rich_text("x", policy=str.upper) == "X"
