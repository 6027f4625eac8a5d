"""
Shared constants for every generated artifact.

Variable names, utility class names and fallback values that more than one
emitter refers to live here, so the artifacts cannot drift apart.
"""

from __future__ import annotations

# =============================================================================
# Contrast derivation
# =============================================================================

# sRGB luma weights (not gamma corrected)
LUMINANCE_WEIGHTS: tuple[float, float, float] = (0.2126, 0.7152, 0.0722)
LUMINANCE_THRESHOLD = 0.5

# Foreground for light backgrounds / dark backgrounds
CONTRAST_ON_LIGHT = "$black"
CONTRAST_ON_DARK = "$white"

# =============================================================================
# Brand colors
# =============================================================================

# Identifiers the fixed alias block and the themed style sheets depend on
REQUIRED_BRAND_COLORS: tuple[str, ...] = (
    "black",
    "white",
    "midnightGreen",
    "persianGreen",
    "cambridgeBlue",
    "satinSheenGold",
)

# (alias variable, brand color identifier) in emission order
BRAND_ALIASES: tuple[tuple[str, str], ...] = (
    ("body-color", "black"),
    ("backgroundColor", "white"),
    ("headingColor", "midnightGreen"),
    ("link-color", "persianGreen"),
    ("selection-bg", "persianGreen"),
    ("code-color", "black"),
    ("accent-color", "satinSheenGold"),
)

# (utility class suffix, alias variable) for .text-color-* brand utilities
BRAND_ALIAS_UTILITIES: tuple[tuple[str, str], ...] = (
    ("body", "body-color"),
    ("background", "backgroundColor"),
    ("heading", "headingColor"),
    ("link", "link-color"),
    ("accent", "accent-color"),
)

# Brand colors that get .text-* / .bg-* classes in the document theme
DOCUMENT_UTILITY_COLORS: tuple[str, ...] = (
    "midnightGreen",
    "persianGreen",
    "cambridgeBlue",
    "satinSheenGold",
)

LINK_HOVER_DARKEN = "15%"

# Plot palettes, by brand color identifier
PRIMARY_SEQUENCE: tuple[str, ...] = ("midnightGreen", "persianGreen", "cambridgeBlue")
DIVERGING_SCALE: tuple[str, ...] = ("midnightGreen", "white", "satinSheenGold")

# =============================================================================
# SCSS module names
# =============================================================================

COLORS_IMPORT = "_colors"
FONTS_IMPORT = "_fonts"

# =============================================================================
# Typography
# =============================================================================

BODY_FONT_FALLBACK = '"Arial", sans-serif'
HEADING_FONT_FALLBACK = '"Arial", sans-serif'
MONOSPACE_FONT_FALLBACK = '"Courier New", monospace'

# Used when the HTML size table does not override them
DEFAULT_CONTENT_MAX_WIDTH = "900px"
DEFAULT_BLOCK_MARGIN = "1.5rem"
DEFAULT_SMALL_MARGIN = "5px"
DEFAULT_LARGE_MARGIN = "20px"
HEADINGS_MARGIN_BOTTOM = "1rem"

# Relative size multipliers in HTML mode: (class, multiplier)
HTML_RELATIVE_SIZES: tuple[tuple[str, float], ...] = (
    ("text-smaller", 0.8),
    ("text-tiny", 0.7),
    ("text-larger", 1.2),
)

# Spacing emitted ahead of the imports in the document theme
DOCUMENT_SMALL_MARGIN = "0.5rem"
DOCUMENT_BLOCK_MARGIN = "1.5rem"
DOCUMENT_LARGE_MARGIN = "20px"

# =============================================================================
# Font hosting
# =============================================================================

GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css2"

# Font role -> weight set requested from the font host
FONT_WEIGHT_SETS: dict[str, tuple[int, ...]] = {
    "body": (400, 500, 600, 700),
    "heading": (500, 600, 700),
    "monospace": (400, 600),
}

# =============================================================================
# Plotting
# =============================================================================

PX_TO_PT = 0.75

# Fallback family per font role when the brand font is not installed
PLOT_FONT_FALLBACKS: dict[str, tuple[str, ...]] = {
    "body": ("Inter", "DejaVu Sans", "sans-serif"),
    "heading": ("Roboto Condensed", "DejaVu Sans", "sans-serif"),
    "monospace": ("Fira Code", "DejaVu Sans Mono", "monospace"),
}
