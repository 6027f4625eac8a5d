"""
Slide deck theme (custom_theme.scss) for Reveal.js presentations.

Combines the custom_theme.json constants with the variables defined by
_colors.scss and _fonts.scss. Every color is an SCSS variable; the only
color input, the code background, goes through resolve_color_name.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.constants import COLORS_IMPORT, FONTS_IMPORT, REQUIRED_BRAND_COLORS
from ..core.ir import ResolvedPalette, ThemeOverrides, TypographyModel
from ..core.resolver import require_colors, resolve_color_name
from .common import block, css_value, header, join_sections, render


def _margin_defaults(theme: ThemeOverrides) -> list[str]:
    margins = theme.margins
    return [
        "// Vertical spacing between blocks of text",
        f"$smallMargin: {css_value(margins.small_margin)};",
        f"$blockMargin: {css_value(margins.block_margin)};",
        f"$largeMargin: {css_value(margins.large_margin)};",
    ]


def _imports(colors_source: str, fonts_source: str) -> list[str]:
    return [
        f"// Colors are loaded from {COLORS_IMPORT}.scss, which is auto-generated "
        f"from {colors_source}.",
        f"// Do not define color variables here. Edit {colors_source} and regenerate.",
        f'@import "{COLORS_IMPORT}";',
        "",
        f"// Typography is loaded from {FONTS_IMPORT}.scss, which is auto-generated "
        f"from {fonts_source}.",
        f"// Do not define font variables here. Edit {fonts_source} and regenerate.",
        f'@import "{FONTS_IMPORT}";',
    ]


def _font_overrides(typo: TypographyModel) -> list[str]:
    sizes, spacing, weights = typo.sizes, typo.spacing, typo.weights
    return [
        f"$mainFontSize: {css_value(sizes.main_font_size)};",
        f"$body-line-height: {css_value(sizes.body_line_height)};",
        "",
        "$headingMargin: 0;",
        f"$headingLineHeight: {css_value(sizes.heading_line_height)};",
        f"$headingLetterSpacing: {css_value(spacing.heading_letter_spacing)};",
        "$headingTextTransform: none; /* Title case, not uppercase */",
        "$headingTextShadow: none;",
        f"$headingFontWeight: {css_value(weights.heading)};",
        "",
        f"$heading1Size: {css_value(sizes.heading1_size)};",
        "$heading1TextShadow: none;",
        f"$heading2Size: {css_value(sizes.heading2_size)};",
        f"$heading3Size: {css_value(sizes.heading3_size)};",
        f"$heading4Size: {css_value(sizes.heading4_size)};",
    ]


def body_styles() -> list[str]:
    return block(
        """
        /* General text styling */
        body {
          font-family: $mainFont;
          font-size: $mainFontSize;
          line-height: $body-line-height;
          color: $body-color;
          background-color: $backgroundColor !important;
        }
        """
    )


def code_styles(theme: ThemeOverrides, palette: ResolvedPalette) -> list[str]:
    code = theme.code
    background = resolve_color_name(code.code_background_color, palette)
    return [
        "/* Code styling (default and reveal) */",
        "pre,",
        ".reveal pre,",
        "code,",
        ".reveal code {",
        f"  background-color: {background} !important;",
        "  color: $body-color;",
        f"  border-radius: {css_value(code.code_border_radius)};",
        f"  line-height: {css_value(code.code_line_height)};",
        "  font-family: $monospaceFont;",
        "  border: none;",
        "}",
        "",
        "pre,",
        ".reveal pre {",
        "  padding: $smallMargin;",
        "}",
        "",
        "code,",
        ".reveal code {",
        "  background-color: $midnightGreen !important;",
        "  color: $satinSheenGold !important;",
        "  font-style: italic;",
        f"  padding: {css_value(code.inline_code_padding)};",
        "}",
        "",
        "pre code,",
        ".reveal pre code {",
        "  background-color: transparent !important;",
        "  color: $body-color !important;",
        "  font-style: normal !important; /* Override italic from inline code */",
        "  padding: $smallMargin;",
        "  position: relative;",
        "  /* Keep line highlighting above overlays */",
        "  z-index: 0;",
        "}",
    ]


def scrollbar_styles() -> list[str]:
    return block(
        """
        /* Hide scrollbars for WebKit browsers */
        pre::-webkit-scrollbar,
        .reveal pre::-webkit-scrollbar {
          display: none !important;
        }

        /* Hide scrollbars and ensure proper text wrapping */
        .reveal pre,
        .reveal .slides pre,
        .reveal .slides section pre,
        div.sourceCode,
        div.sourceCode pre,
        .cell-code pre,
        .hljs {
          overflow: visible !important;
          max-width: 100% !important;
          white-space: pre-wrap !important;
          word-wrap: break-word !important;
        }

        .reveal pre::-webkit-scrollbar,
        .reveal .slides pre::-webkit-scrollbar,
        .reveal .slides section pre::-webkit-scrollbar,
        div.sourceCode::-webkit-scrollbar,
        div.sourceCode pre::-webkit-scrollbar,
        .cell-code pre::-webkit-scrollbar,
        .hljs::-webkit-scrollbar {
          display: none !important;
          width: 0px !important;
          height: 0px !important;
        }
        """
    )


def quarto_fixes() -> list[str]:
    return block(
        """
        /* Quarto-specific code elements */
        .sourceCode code {
          background-color: transparent !important;
          color: inherit !important;
        }

        /* Fix for code blocks in HTML output */
        .sourceCode {
          margin-left: 0 !important;
          margin-right: 0 !important;
        }
        """
    )


def link_styles() -> list[str]:
    return block(
        """
        pre a,
        .reveal pre a,
        code a,
        .reveal code a {
          color: $body-color;
          text-decoration: underline;

          &:hover {
            color: $link-color;
            background-color: $body-color;
          }
        }

        a,
        .reveal a,
        .reveal .footer a {
          color: $link-color !important;
          text-decoration: underline !important;

          &:hover {
            color: $body-color !important;
            background-color: $link-color !important;
          }
        }

        /* Links in title slides and slides with background colors */
        .reveal .slides section a,
        .reveal .title-slide a,
        .reveal .bg-midnightGreen a,
        .reveal .slide-background a {
          color: $link-color !important;
          text-decoration: underline !important;

          &:hover {
            color: $backgroundColor !important;
            background-color: $link-color !important;
          }
        }

        /* Force color for all links, overriding any reveal.js defaults */
        .reveal a:link,
        .reveal a:visited,
        .reveal a:active {
          color: $link-color !important;
        }
        """
    )


# Heading level -> top margin variable
_HEADING_MARGINS: tuple[tuple[int, str], ...] = (
    (1, "$blockMargin"),
    (2, "$blockMargin"),
    (3, "$smallMargin"),
    (4, "$smallMargin"),
)


def heading_styles() -> list[str]:
    lines = block(
        """
        /* Headings */
        h1,
        h2,
        h3,
        h4,
        .reveal h1,
        .reveal h2,
        .reveal h3,
        .reveal h4 {
          font-family: $headingFont !important;
          line-height: $headingLineHeight;
          letter-spacing: $headingLetterSpacing;
          text-transform: $headingTextTransform;
          font-weight: $headingFontWeight;
          margin: $headingMargin;
          color: $headingColor;
          text-shadow: $heading1TextShadow;
        }
        """
    )
    for level, margin in _HEADING_MARGINS:
        lines.extend(
            [
                "",
                f"h{level},",
                f".reveal h{level} {{",
                f"  font-size: $heading{level}Size !important;",
                f"  margin-top: {margin};",
                "}",
            ]
        )
    lines.append("")
    lines.extend(
        block(
            """
            /* Additional Reveal.js specific heading font rules */
            .reveal .slides section .fragment h1,
            .reveal .slides section .fragment h2,
            .reveal .slides section .fragment h3,
            .reveal .slides section .fragment h4,
            .reveal .slides section h1,
            .reveal .slides section h2,
            .reveal .slides section h3,
            .reveal .slides section h4 {
              font-family: $headingFont !important;
            }

            /* Ensure heading classes also use the correct font */
            .text-font-heading,
            .reveal .text-font-heading {
              font-family: $headingFont !important;
            }
            """
        )
    )
    return lines


def list_styles() -> list[str]:
    return block(
        """
        /* List styling */
        ul {
          padding-left: 0;
          margin-left: $blockMargin;
        }

        ul ul {
          margin-left: $blockMargin;
        }
        """
    )


# (class, declaration) pairs for the plain utility classes
_TEXT_UTILITIES: tuple[tuple[str, str], ...] = (
    ("text-bold", "font-weight: bold;"),
    ("text-italic", "font-style: italic;"),
    ("text-underline", "text-decoration: underline;"),
    ("text-strike", "text-decoration: line-through;"),
    ("text-uppercase", "text-transform: uppercase;"),
    ("text-lowercase", "text-transform: lowercase;"),
    ("text-capitalize", "text-transform: capitalize;"),
    ("text-normal", "text-transform: none;"),
    ("text-center", "text-align: center;"),
    ("text-left", "text-align: left;"),
    ("text-right", "text-align: right;"),
    ("text-smaller", "font-size: $mainFontSize * 0.7 !important;"),
    ("text-tiny", "font-size: $mainFontSize * 0.3 !important;"),
    ("text-larger", "font-size: $mainFontSize * 1.3 !important;"),
    ("text-size-heading1", "font-size: $heading1Size !important;"),
    ("text-size-heading2", "font-size: $heading2Size !important;"),
    ("text-size-heading3", "font-size: $heading3Size !important;"),
    ("text-size-heading4", "font-size: $heading4Size !important;"),
    ("text-size-body", "font-size: $mainFontSize !important;"),
)


def utility_classes(theme: ThemeOverrides) -> list[str]:
    shadows = theme.shadows
    rules = list(_TEXT_UTILITIES) + [
        ("text-shadow-light", f"text-shadow: {shadows.light_text_shadow} !important;"),
        ("text-shadow-dark", f"text-shadow: {shadows.dark_text_shadow} !important;"),
        ("text-margin-bottom-15", "margin-bottom: 15px !important;"),
        ("text-margin-top-15", "margin-top: 15px;"),
    ]
    lines = ["/* Utility text classes */"]
    for index, (cls, declaration) in enumerate(rules):
        if index:
            lines.append("")
        lines.extend([f".{cls} {{", f"  {declaration}", "}"])
    return lines


def _positioned(cls: str, top: str, shift: str) -> list[str]:
    return [
        f".{cls} {{",
        "  margin: 0;",
        "  position: absolute;",
        f"  top: {top};",
        f"  -ms-transform: translateY({shift});",
        f"  transform: translateY({shift});",
        "}",
    ]


def slide_layout(theme: ThemeOverrides) -> list[str]:
    positioning = theme.positioning
    return join_sections(
        [
            [
                "/* Slide content layout */",
                ".reveal .slides {",
                "  max-width: $content-max-width;",
                "  margin: auto;",
                f"  padding: {css_value(theme.slides.slide_padding)};",
                "}",
            ],
            _positioned(
                "slide-margin-top-15", css_value(positioning.slide_margin_top15), "-15%"
            ),
            _positioned(
                "slide-margin-top-25", css_value(positioning.slide_margin_top25), "-25%"
            ),
            _positioned("center-vertical", css_value(positioning.center_vertical), "-50%"),
        ]
    )


def image_styles() -> list[str]:
    return block(
        """
        /* Constrain figures and other large block elements */
        .reveal .slides img,
        .reveal .slides figure,
        .reveal .slides video,
        .reveal .slides .reveal-image {
          max-width: 100%;
          width: auto;
          height: auto;
          display: block;
          margin: 0 auto;
          box-sizing: border-box;
        }
        """
    )


def specialized_sections() -> list[str]:
    return block(
        """
        /* Specialized sections */
        .reveal .title {
          background-color: $headingColor;
          color: $backgroundColor;
          text-align: center;
        }

        .reveal .subtitle {
          background-color: $persianGreen;
          color: $backgroundColor;
          text-align: center;
        }

        .reveal .inverse {
          color: $backgroundColor;
          background-color: $headingColor;
        }

        .reveal .exercise {
          background-color: $link-color;
          color: $backgroundColor;
        }
        """
    )


def blockquote_styles(theme: ThemeOverrides) -> list[str]:
    quote = theme.blockquote
    transition = theme.transitions.default_transition
    return [
        "/* Blockquote */",
        ".reveal .blockquote,",
        "blockquote {",
        f"  padding: {css_value(quote.blockquote_padding)};",
        f"  border-radius: {css_value(quote.blockquote_border_radius)};",
        "  background-color: rgba($cambridgeBlue, 0.1);",
        f"  border-left: {css_value(quote.blockquote_border_width)} solid $persianGreen;",
        "  border-top: 2px solid $cambridgeBlue;",
        "  border-bottom: 2px solid $cambridgeBlue;",
        "  border-right: 2px solid $cambridgeBlue;",
        f"  box-shadow: {theme.shadows.blockquote_shadow};",
        f"  transition: background-color {transition}, border-color {transition};",
        f"  margin: {css_value(quote.blockquote_margin)};",
        "  font-style: italic;",
        "}",
    ]


def code_block_styles(theme: ThemeOverrides) -> list[str]:
    return [
        "/* Code block */",
        "code {",
        "  background-color: $backgroundColor;",
        "  padding: $smallMargin;",
        f"  border-radius: {css_value(theme.code.code_border_radius)};",
        "  font-family: $monospaceFont;",
        "  border: 1px solid $cambridgeBlue;",
        "}",
    ]


def table_styles(theme: ThemeOverrides) -> list[str]:
    table = theme.table
    return [
        "/* Table styling */",
        ".reveal table,",
        "table {",
        "  border-collapse: collapse;",
        "  margin-bottom: $blockMargin;",
        "  width: 100%;",
        "}",
        "",
        ".reveal table th,",
        ".reveal table td,",
        "table th,",
        "table td {",
        f"  border: 1px solid rgba($black, {css_value(table.table_border_opacity)});",
        f"  padding: {css_value(table.table_cell_padding)};",
        "  text-align: left;",
        "}",
        "",
        ".reveal table th,",
        "table th {",
        "  background-color: $midnightGreen !important;",
        "  color: $white !important;",
        "  font-weight: 600;",
        "  font-family: $headingFont;",
        "}",
        "",
        ".reveal table tr:nth-child(odd),",
        "table tr:nth-child(odd) {",
        "  background-color: rgba($cambridgeBlue, 0.5) !important;",
        "}",
    ]


def exercise_overrides() -> list[str]:
    return block(
        """
        /* Exercise section link overrides - must be last to take precedence */
        .reveal .exercise a,
        .reveal .exercise * a,
        .reveal .slides .exercise a,
        .reveal .slides .exercise * a,
        .reveal .slides section.exercise a,
        .reveal .slides section.exercise * a {
          color: $backgroundColor !important;
          text-decoration: underline !important;
          text-decoration-color: $backgroundColor !important;
          font-weight: 600 !important;
          background-color: transparent !important;

          &:hover,
          &:focus,
          &:active {
            color: $headingColor !important;
            background-color: $backgroundColor !important;
            border-radius: 3px !important;
            padding: 2px 4px !important;
            text-decoration: underline !important;
            text-decoration-color: $headingColor !important;
          }
        }
        """
    )


def render_slide_theme(
    palette: ResolvedPalette,
    typography: TypographyModel,
    theme: ThemeOverrides,
    *,
    brand: str = "SSoQE",
    sources: Sequence[str] = ("colors.json", "fonts.json", "custom_theme.json"),
) -> str:
    """Render custom_theme.scss.

    ``typography`` should carry the default (presentation) size table.

    Raises:
        ConfigMalformed: If a referenced brand color is missing.
    """
    require_colors(palette, REQUIRED_BRAND_COLORS)
    colors_source = sources[0] if len(sources) > 0 else "colors.json"
    fonts_source = sources[1] if len(sources) > 1 else "fonts.json"

    defaults = [
        header(sources),
        f"// {brand} Custom Theme for Reveal.js Presentations",
        "",
        "/*-- scss:defaults --*/",
    ]
    sections = [
        defaults,
        _margin_defaults(theme),
        _imports(colors_source, fonts_source),
        _font_overrides(typography),
        ["// Layout", f"$content-max-width: {css_value(theme.layout.content_max_width)};"],
        ["/*-- scss:rules --*/"],
        body_styles(),
        code_styles(theme, palette),
        scrollbar_styles(),
        quarto_fixes(),
        link_styles(),
        heading_styles(),
        list_styles(),
        utility_classes(theme),
        slide_layout(theme),
        image_styles(),
        specialized_sections(),
        blockquote_styles(theme),
        code_block_styles(theme),
        table_styles(theme),
        exercise_overrides(),
    ]
    return render(join_sections(sections))
