"""
Typography style sheet (_fonts.scss).

Rendered twice per run: with the default size table for the slide deck and
with the HTML size table for the exercise documents.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.constants import (
    BODY_FONT_FALLBACK,
    DEFAULT_LARGE_MARGIN,
    HEADING_FONT_FALLBACK,
    HEADINGS_MARGIN_BOTTOM,
    HTML_RELATIVE_SIZES,
    MONOSPACE_FONT_FALLBACK,
)
from ..core.errors import ConfigMalformed
from ..core.ir import CssValue, TypographyModel
from .common import block, css_value, header, join_sections, render


def _families(typo: TypographyModel) -> list[str]:
    return [
        f'$mainFont: "{typo.body}", {BODY_FONT_FALLBACK} !default;',
        f'$headingFont: "{typo.heading}", {HEADING_FONT_FALLBACK} !default;',
        f'$monospaceFont: "{typo.monospace}", {MONOSPACE_FONT_FALLBACK} !default;',
    ]


def _sizes(typo: TypographyModel, source: str) -> list[str]:
    sizes = typo.sizes
    return [
        f"// Font sizes from {source}",
        f"$mainFontSize: {css_value(sizes.main_font_size)} !default;",
        f"$heading1Size: {css_value(sizes.heading1_size)} !default;",
        f"$heading2Size: {css_value(sizes.heading2_size)} !default;",
        f"$heading3Size: {css_value(sizes.heading3_size)} !default;",
        f"$heading4Size: {css_value(sizes.heading4_size)} !default;",
        f"$body-line-height: {css_value(sizes.body_line_height)} !default;",
        f"$headingLineHeight: {css_value(sizes.heading_line_height)} !default;",
    ]


def _weights_and_spacing(typo: TypographyModel, source: str) -> list[str]:
    weights, spacing = typo.weights, typo.spacing
    return [
        f"// Font weights from {source}",
        f"$headingFontWeight: {css_value(weights.heading)} !default;",
        f"$bodyFontWeight: {css_value(weights.body)} !default;",
        f"$boldFontWeight: {css_value(weights.bold)} !default;",
        "",
        f"// Font spacing from {source}",
        f"$headingLetterSpacing: {css_value(spacing.heading_letter_spacing)} !default;",
        f"$bodyLetterSpacing: {css_value(spacing.body_letter_spacing)} !default;",
    ]


def _compatibility_aliases(typo: TypographyModel) -> list[str]:
    return [
        "// HTML-specific font variables for compatibility",
        "$font-family-sans-serif: $mainFont !default;",
        "$headings-font-family: $headingFont !default;",
        "$font-family-monospace: $monospaceFont !default;",
        "$font-size-base: $mainFontSize !default;",
        "$line-height-base: $body-line-height !default;",
        "$headings-line-height: $headingLineHeight !default;",
        "$headings-font-weight: $headingFontWeight !default;",
        f"$headings-margin-bottom: {HEADINGS_MARGIN_BOTTOM} !default;",
        f"$content-max-width: {css_value(typo.content_max_width)} !default;",
        f"$block-margin: {css_value(typo.block_margin)} !default;",
        "",
        "// Spacing variables used in utility classes",
        f"$smallMargin: {css_value(typo.small_margin)} !default;",
        f"$largeMargin: {DEFAULT_LARGE_MARGIN} !default;",
    ]


def _relative_multipliers(typo: TypographyModel) -> list[tuple[str, CssValue]]:
    """(class, multiplier) for the relative size utilities.

    A target that asks for HTML sizes uses fixed multipliers even when it
    falls back to the default table; otherwise the table carries its own.
    """
    if typo.html_sizes_requested:
        return list(HTML_RELATIVE_SIZES)

    sizes = typo.sizes
    configured = {
        "text-smaller": ("textSizeSmall", sizes.text_size_small),
        "text-tiny": ("textSizeTiny", sizes.text_size_tiny),
        "text-larger": ("textSizeLarge", sizes.text_size_large),
    }
    missing = [key for key, value in configured.values() if value is None]
    if missing:
        raise ConfigMalformed(f"Missing size multipliers in sizes: {', '.join(missing)}")
    return [(cls, value) for cls, (_, value) in configured.items()]


def _utility_classes(typo: TypographyModel) -> list[str]:
    lines = block(
        """
        // Utility classes for font families
        .text-font-body { font-family: $mainFont; }
        .text-font-heading { font-family: $headingFont; }
        .text-font-monospace { font-family: $monospaceFont; }

        // Utility classes for font sizes
        .text-size-main { font-size: $mainFontSize !important; }
        .text-size-heading1 { font-size: $heading1Size !important; }
        .text-size-heading2 { font-size: $heading2Size !important; }
        .text-size-heading3 { font-size: $heading3Size !important; }
        .text-size-heading4 { font-size: $heading4Size !important; }
        .text-size-body { font-size: $mainFontSize !important; }
        """
    )
    lines.extend(
        f".{cls} {{ font-size: calc($mainFontSize * {css_value(multiplier)}) !important; }}"
        for cls, multiplier in _relative_multipliers(typo)
    )
    return lines


def _debug_font_loading(typo: TypographyModel) -> list[str]:
    lines = ["/* Debug font loading - this will help us see if fonts are loaded */"]
    for role, family in (("heading", typo.heading), ("mono", typo.monospace)):
        if not family:
            continue
        lines.extend(
            [
                f'@supports (font-family: "{family}") {{',
                f"  .debug-font-{role}::before {{",
                f'    content: "{family} font is supported";',
                "    display: block;",
                "    font-size: 12px;",
                "    color: green;",
                "  }",
                "}",
            ]
        )
    return lines


def render_fonts_scss(
    typography: TypographyModel,
    *,
    sources: Sequence[str] = ("fonts.json",),
) -> str:
    """Render _fonts.scss for the active size table of ``typography``.

    Raises:
        ConfigMalformed: In default mode, if the size multipliers are missing.
    """
    source = sources[0] if sources else "fonts.json"
    sections = [
        [header(sources)],
        _families(typography),
        _sizes(typography, source),
        _weights_and_spacing(typography, source),
        _compatibility_aliases(typography),
        _utility_classes(typography),
        _debug_font_loading(typography),
    ]
    return render(join_sections(sections))
