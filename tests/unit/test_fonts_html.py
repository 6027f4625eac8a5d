"""Tests for the fonts-include.html emitter."""

from __future__ import annotations

from themegen.emitters.fonts_html import font_link, render_fonts_html


class TestFontLink:
    def test_spaces_become_plus(self):
        assert font_link("Roboto Condensed", (500, 600, 700)) == (
            '<link href="https://fonts.googleapis.com/css2?family=Roboto+Condensed'
            ':wght@500;600;700&display=swap" rel="stylesheet">'
        )


class TestRenderFontsHtml:
    def test_one_link_per_role(self, typography):
        lines = render_fonts_html(typography).splitlines()
        assert lines[0] == (
            "<!-- This file is auto-generated from fonts.json. Do not edit directly. -->"
        )
        assert len(lines) == 4
        assert "family=Source+Sans+3:wght@400;500;600;700&" in lines[1]
        assert "family=Roboto+Condensed:wght@500;600;700&" in lines[2]
        assert "family=Fira+Code:wght@400;600&" in lines[3]

    def test_empty_role_skipped(self, typography):
        text = render_fonts_html(typography.model_copy(update={"heading": ""}))
        assert len(text.splitlines()) == 3
        assert "Roboto" not in text

    def test_no_families(self, typography):
        empty = typography.model_copy(update={"body": "", "heading": "", "monospace": ""})
        assert render_fonts_html(empty).count("<link") == 0
