"""
Plotting theme script (plot_theme.py) for matplotlib.

The generated module is standalone: palette constants and helpers are plain
Python, and matplotlib is only imported when the theme is applied.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence

from ..core.constants import (
    DIVERGING_SCALE,
    PLOT_FONT_FALLBACKS,
    PRIMARY_SEQUENCE,
    PX_TO_PT,
    REQUIRED_BRAND_COLORS,
)
from ..core.errors import ConfigMalformed
from ..core.ir import CssValue, ResolvedPalette, TypographyModel
from ..core.resolver import require_colors
from .common import block, css_value, header, render, snake_case

_PX_VALUE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:px)?\s*$")


def _py(value: str) -> str:
    """Python string literal."""
    return json.dumps(value)


def _py_list(values: Sequence[str]) -> str:
    return "[" + ", ".join(_py(v) for v in values) + "]"


# Generated constant -> font role
_FONT_CONSTANTS: tuple[tuple[str, str], ...] = (
    ("FONT_BODY", "body"),
    ("FONT_HEADING", "heading"),
    ("FONT_MONO", "monospace"),
)


def pixel_size(value: CssValue) -> int | float:
    """Numeric pixel size from ``24``, ``"24"`` or ``"24px"``."""
    if isinstance(value, bool):
        raise ConfigMalformed(f"Invalid pixel size {value!r}")
    if isinstance(value, int | float):
        return value
    match = _PX_VALUE.match(value)
    if match is None:
        raise ConfigMalformed(
            f"mainFontSize must be a pixel value for the plotting theme, got '{value}'"
        )
    number = float(match.group(1))
    return int(number) if number.is_integer() else number


def _palette_section(palette: ResolvedPalette, brand: str) -> list[str]:
    lines = [f"# {brand} brand colors", "BRAND_COLS = {"]
    lines.extend(f"    {_py(snake_case(c.name))}: {_py(c.value)}," for c in palette.primary)
    lines.append("}")

    sequence = [palette.value_of(name) for name in PRIMARY_SEQUENCE]
    diverging = [palette.value_of(name) for name in DIVERGING_SCALE]
    lines.extend(
        [
            "",
            "# Primary color sequence (for ordered data)",
            f"PRIMARY_SEQUENCE = {_py_list(sequence)}",
            "",
            "# Diverging color palette (for diverging data)",
            f"DIVERGING = {_py_list(diverging)}",
            "",
            "# Text and background colors",
            f"TEXT_COLOR = {_py(palette.value_of('black'))}",
            f"BACKGROUND_COLOR = {_py(palette.value_of('white'))}",
            f"ACCENT_COLOR = {_py(palette.value_of('satinSheenGold'))}",
            f"TITLE_COLOR = {_py(palette.value_of('midnightGreen'))}",
        ]
    )
    return lines


def _font_section(typography: TypographyModel) -> list[str]:
    lines = ["# Font families, brand font first, then fallbacks"]
    for const, role in _FONT_CONSTANTS:
        family = typography.families()[role]
        stack = ([family] if family else []) + list(PLOT_FONT_FALLBACKS[role])
        lines.append(f"{const} = {_py_list(stack)}")
    return lines


def _size_section(typography: TypographyModel) -> list[str]:
    main_px = pixel_size(typography.sizes.main_font_size)
    return [
        "# Text sizes (following the brand hierarchy)",
        "# Convert px to pt: 1px = 0.75pt (at 96 DPI)",
        f"TEXT_SIZE_MAIN_PX = {css_value(main_px)}",
        f"TEXT_SIZE_MAIN_PT = TEXT_SIZE_MAIN_PX * {PX_TO_PT}",
        "TEXT_SIZE_SMALL = TEXT_SIZE_MAIN_PT * 0.8",
        "TEXT_SIZE_BASE = TEXT_SIZE_MAIN_PT * 0.9",
        "TEXT_SIZE_MEDIUM = TEXT_SIZE_MAIN_PT * 1.0",
        "TEXT_SIZE_LARGE = TEXT_SIZE_MAIN_PT * 1.2",
        "TEXT_SIZE_XLARGE = TEXT_SIZE_MAIN_PT * 1.4",
        "",
        "# Line widths",
        "LINE_SIZE_THIN = 0.25",
        "LINE_SIZE_BASE = 0.5",
        "LINE_SIZE_THICK = 1.0",
        "",
        "# Output dimensions",
        "IMAGE_WIDTH_CM = 16",
        "IMAGE_HEIGHT_CM = 12",
        "IMAGE_DPI = 300",
        "FIGSIZE = (IMAGE_WIDTH_CM / 2.54, IMAGE_HEIGHT_CM / 2.54)",
    ]


def _theme_section(brand: str) -> list[str]:
    return block(
        f'''
        def theme_brand(
            base_size=TEXT_SIZE_BASE,
            base_family=None,
            base_line_size=LINE_SIZE_BASE,
            base_rect_size=LINE_SIZE_BASE,
        ):
            """Return matplotlib rcParams for the {brand} theme."""
            family = list(base_family) if base_family else list(FONT_BODY)
            return {{
                # Text elements
                "font.family": "sans-serif",
                "font.sans-serif": family,
                "font.monospace": list(FONT_MONO),
                "font.size": base_size,
                "text.color": TEXT_COLOR,
                "axes.titlesize": base_size * 1.4,
                "axes.titleweight": "bold",
                "axes.titlecolor": TITLE_COLOR,
                "axes.labelsize": base_size,
                "axes.labelcolor": TEXT_COLOR,
                "xtick.labelsize": base_size * 0.9,
                "ytick.labelsize": base_size * 0.9,
                "xtick.color": TEXT_COLOR,
                "ytick.color": TEXT_COLOR,
                "legend.fontsize": base_size * 0.9,
                "legend.title_fontsize": base_size,
                "legend.frameon": False,
                # Lines and frames
                "axes.linewidth": base_rect_size,
                "axes.edgecolor": TEXT_COLOR,
                "grid.linewidth": base_line_size,
                "lines.linewidth": LINE_SIZE_THICK,
                # Background elements
                "axes.facecolor": BACKGROUND_COLOR,
                "figure.facecolor": BACKGROUND_COLOR,
                "savefig.facecolor": BACKGROUND_COLOR,
                # Output
                "figure.figsize": FIGSIZE,
                "savefig.dpi": IMAGE_DPI,
            }}


        def apply_theme(**kwargs):
            """Apply the {brand} theme to matplotlib globally."""
            import matplotlib as mpl
            import matplotlib.pyplot as plt

            plt.rcParams.update(theme_brand(**kwargs))
            cycle = [c for c in BRAND_COLS.values() if c != BACKGROUND_COLOR]
            plt.rcParams["axes.prop_cycle"] = mpl.cycler(color=cycle)
        '''
    )


def _helper_section() -> list[str]:
    return block(
        '''
        def _hex_to_rgb(color):
            color = color.lstrip("#")
            return tuple(int(color[i : i + 2], 16) for i in (0, 2, 4))


        def _ramp(colors, n):
            """Interpolate ``n`` colors evenly across ``colors``."""
            rgb = [_hex_to_rgb(c) for c in colors]
            if len(rgb) == 1:
                return ["#%02X%02X%02X" % rgb[0]] * n
            segments = len(rgb) - 1
            ramped = []
            for i in range(n):
                position = i * segments / (n - 1) if n > 1 else 0.0
                j = min(int(position), segments - 1)
                t = position - j
                channels = (round(a + (b - a) * t) for a, b in zip(rgb[j], rgb[j + 1]))
                ramped.append("#%02X%02X%02X" % tuple(channels))
            return ramped


        def discrete_colors(n):
            """First ``n`` brand colors, interpolating more when ``n`` exceeds the palette."""
            palette = list(BRAND_COLS.values())
            if n <= 0:
                return []
            if n <= len(palette):
                return palette[:n]
            return _ramp(palette, n)
        '''
    )


def render_plot_theme(
    palette: ResolvedPalette,
    typography: TypographyModel,
    *,
    brand: str = "SSoQE",
    sources: Sequence[str] = ("colors.json", "fonts.json"),
) -> str:
    """Render the matplotlib theme module.

    ``typography`` should carry the default (presentation) size table.

    Raises:
        ConfigMalformed: If a brand color is missing or mainFontSize is not
            a pixel value.
    """
    require_colors(palette, REQUIRED_BRAND_COLORS)

    lines = [
        header(sources, prefix="#"),
        f'"""{brand} brand colors, fonts and a matplotlib theme."""',
        "",
    ]
    lines.extend(_palette_section(palette, brand))
    lines.append("")
    lines.extend(_font_section(typography))
    lines.append("")
    lines.extend(_size_section(typography))
    lines.extend(["", ""])
    lines.extend(_theme_section(brand))
    lines.extend(["", ""])
    lines.extend(_helper_section())
    lines.extend(
        [
            "",
            "",
            "# Backward-compatible names",
            "TEXT_SIZE = TEXT_SIZE_BASE",
            "LINE_SIZE = LINE_SIZE_BASE",
        ]
    )
    return render(lines)
