"""
Exercise document theme (_exercise_theme.scss).

Quarto HTML theme assembled from fixed sections. All colors and fonts are
referenced through the variables of _colors.scss and _fonts.scss, which
the theme imports.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.constants import (
    COLORS_IMPORT,
    DOCUMENT_BLOCK_MARGIN,
    DOCUMENT_LARGE_MARGIN,
    DOCUMENT_SMALL_MARGIN,
    DOCUMENT_UTILITY_COLORS,
    FONTS_IMPORT,
    REQUIRED_BRAND_COLORS,
)
from ..core.ir import ResolvedPalette
from ..core.resolver import require_colors
from .common import block, header, join_sections, kebab_case, render


def _defaults(brand: str, sources: Sequence[str]) -> list[str]:
    return [
        header(sources),
        f"// {brand} Exercise Theme for HTML Documents",
        "",
        "/*-- scss:defaults --*/",
        "",
        "// Define spacing variables before imports (needed by color utility classes)",
        f"$smallMargin: {DOCUMENT_SMALL_MARGIN} !default;",
        f"$blockMargin: {DOCUMENT_BLOCK_MARGIN} !default;",
        f"$largeMargin: {DOCUMENT_LARGE_MARGIN} !default;",
        "",
        "// Import local color and font definitions",
        f'@import "{COLORS_IMPORT}";',
        f'@import "{FONTS_IMPORT}";',
        "",
        "/*-- scss:rules --*/",
    ]


def body_styles() -> list[str]:
    return block(
        """
        // Main content styling
        body {
          font-family: $font-family-sans-serif;
          font-size: $font-size-base;
          line-height: $line-height-base;
          color: $body-color;
          background-color: $body-bg;
        }

        // Content width constraint
        .quarto-container {
          max-width: $content-max-width;
        }
        """
    )


def heading_styles(brand: str) -> list[str]:
    lines = [f"// Heading styles with {brand} brand colors"]
    levels = (
        ("h1, .h1", "$midnightGreen"),
        ("h2, .h2", "$persianGreen"),
        ("h3, .h3", "$midnightGreen"),
        ("h4, .h4, h5, .h5, h6, .h6", "$black"),
    )
    for index, (selector, color) in enumerate(levels):
        if index:
            lines.append("")
        lines.extend(
            [
                f"{selector} {{",
                f"  color: {color};",
                "  font-family: $headings-font-family;",
                "  font-weight: $headings-font-weight;",
                "  line-height: $headings-line-height;",
                "  margin-bottom: $headings-margin-bottom;",
                "}",
            ]
        )
    return lines


def link_styles() -> list[str]:
    return block(
        """
        // Link styling
        a {
          color: $link-color;
          text-decoration: none;
          transition: color 0.2s ease;

          &:hover {
            color: $link-hover-color;
            text-decoration: underline;
          }
        }
        """
    )


def code_styles() -> list[str]:
    return block(
        """
        // Code styling
        code {
          background-color: $midnightGreen !important;
          color: $satinSheenGold !important;
          font-family: $font-family-monospace;
          font-style: italic;
          padding: 0.125rem 0.25rem;
          border-radius: 0.25rem;
          font-size: 0.875em;
        }

        pre {
          background-color: $cambridgeBlue !important;
          border-radius: 0.375rem;
          padding: 1rem;
          margin-bottom: $block-margin;
          overflow-x: auto;

          code {
            background-color: transparent !important;
            color: inherit !important; // Let Quarto handle syntax highlighting colors
            font-style: normal !important; // Override italic from inline code
            border: none;
            padding: 0;
            font-size: 0.875rem;
          }
        }
        """
    )


def quarto_fixes() -> list[str]:
    return block(
        """
        // Fix Quarto code block positioning and container issues
        .cell-code, .sourceCode {
          margin: 0 !important;
          padding: 0 !important;
          position: relative !important;
          left: 0 !important;
          right: 0 !important;
        }

        .cell-code pre, .sourceCode pre {
          margin: 0 !important;
          padding: 1rem !important;
          background-color: $cambridgeBlue !important;
          border-radius: 0.375rem;
          overflow-x: auto;
        }

        // Hide the cell-code label that's appearing
        .cell-code::before, .sourceCode::before {
          display: none !important;
        }

        // Ensure proper code block styling
        .cell-code code, .sourceCode code {
          background-color: transparent !important;
          color: inherit !important; // Let Quarto handle syntax highlighting colors
          font-style: normal !important; // Override italic from inline code
          padding: 0 !important;
          border: none !important;
        }

        // Additional Quarto-specific code element fixes
        .sourceCode code {
          background-color: transparent !important;
          color: inherit !important;
          font-style: normal !important; // Override italic from inline code
        }
        """
    )


def blockquote_styles() -> list[str]:
    return block(
        """
        // Blockquote styling
        blockquote {
          border-left: 4px solid $persianGreen;
          background-color: rgba($cambridgeBlue, 0.1);
          padding: 1rem;
          margin: 1rem 0;
          margin-bottom: $block-margin;
          font-style: italic;
          border-radius: 0.375rem;
        }
        """
    )


def table_styles() -> list[str]:
    return block(
        """
        // Table styling
        table {
          border-collapse: collapse;
          margin-bottom: $block-margin;
          width: 100%;

          th, td {
            border: 1px solid rgba($black, 0.2);
            padding: 0.75rem;
            text-align: left;
          }

          th {
            background-color: $midnightGreen !important;
            color: $white !important;
            font-weight: 600;
          }

          tr:nth-child(odd) {
            background-color: rgba($cambridgeBlue, 0.5) !important; // Very light Cambridge Blue
          }
        }
        """
    )


def utility_classes(brand: str) -> list[str]:
    lines = [f"// Utility classes for {brand} brand colors"]
    lines.extend(
        f".text-{kebab_case(name)} {{ color: ${name} !important; }}"
        for name in DOCUMENT_UTILITY_COLORS
    )
    lines.append("")
    lines.extend(
        f".bg-{kebab_case(name)} {{ background-color: ${name} !important; }}"
        for name in DOCUMENT_UTILITY_COLORS
    )
    return lines


def responsive_styles() -> list[str]:
    return block(
        """
        // Responsive adjustments
        @media (max-width: 768px) {
          .quarto-container {
            max-width: 100%;
            padding: 0 1rem;
          }

          h1, .h1 { font-size: 1.75rem; }
          h2, .h2 { font-size: 1.5rem; }
          h3, .h3 { font-size: 1.25rem; }
        }
        """
    )


def render_document_theme(
    palette: ResolvedPalette,
    *,
    brand: str = "SSoQE",
    sources: Sequence[str] = ("colors.json", "fonts.json"),
) -> str:
    """Render the exercise document theme.

    The palette is only checked for the brand colors the rules reference;
    the values themselves come in through the ``_colors`` import.

    Raises:
        ConfigMalformed: If a referenced brand color is missing.
    """
    require_colors(palette, REQUIRED_BRAND_COLORS)

    sections = [
        _defaults(brand, sources),
        body_styles(),
        heading_styles(brand),
        link_styles(),
        code_styles(),
        quarto_fixes(),
        blockquote_styles(),
        table_styles(),
        utility_classes(brand),
        responsive_styles(),
    ]
    return render(join_sections(sections))
