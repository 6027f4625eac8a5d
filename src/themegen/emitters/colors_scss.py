"""
Color style sheet (_colors.scss).

One variable per resolved color, a block of utility classes per color, then
the fixed brand alias block the themed style sheets build on.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.constants import (
    BRAND_ALIAS_UTILITIES,
    BRAND_ALIASES,
    LINK_HOVER_DARKEN,
    REQUIRED_BRAND_COLORS,
)
from ..core.ir import ResolvedColor, ResolvedPalette
from ..core.resolver import require_colors
from .common import block, header, join_sections, render


def _color_definitions(palette: ResolvedPalette) -> list[str]:
    lines = ["// Color definitions"]
    lines.extend(f"{color.variable}: {color.definition};" for color in palette.all())
    return lines


def _color_classes(color: ResolvedColor) -> list[str]:
    name, var = color.name, color.variable
    return [
        f"// Color: {name}",
        f".reveal .bg-{name} {{ background-color: {var}; }}",
        f".text-color-{name} {{ color: {var} !important; }}",
        f".text-background-{name} {{",
        f"  background-color: {var};",
        "  padding: $smallMargin;",
        "  border-radius: 5px;",
        "}",
        f".text-highlight-{name} {{",
        f"  background-color: {var};",
        f"  color: {color.contrast};",
        "  padding: 2px 4px;",
        "  border-radius: 3px;",
        "}",
    ]


def _brand_aliases(brand: str) -> list[str]:
    lines = [f"// {brand} Brand Guidelines - direct color usage"]
    lines.extend(f"${alias}: ${target} !default;" for alias, target in BRAND_ALIASES)
    lines.append("")
    lines.extend(
        block(
            f"""
            // HTML-specific color variables for compatibility
            $body-bg: $backgroundColor !default;
            $link-hover-color: darken($persianGreen, {LINK_HOVER_DARKEN}) !default;
            """
        )
    )
    lines.append("")
    lines.append(f"// Additional {brand} brand utilities")
    lines.extend(
        f".text-color-{suffix} {{ color: ${alias} !important; }}"
        for suffix, alias in BRAND_ALIAS_UTILITIES
    )
    return lines


def render_colors_scss(
    palette: ResolvedPalette,
    *,
    brand: str = "SSoQE",
    sources: Sequence[str] = ("colors.json",),
) -> str:
    """Render _colors.scss for a resolved palette.

    Primary colors come before semantic ones; order within each group is the
    configuration order.

    Raises:
        ConfigMalformed: If a color the alias block points at is missing.
    """
    require_colors(palette, REQUIRED_BRAND_COLORS)

    sections = [
        [header(sources)],
        _color_definitions(palette),
        ["// Color classes"],
    ]
    sections.extend(_color_classes(color) for color in palette.all())
    sections.append(_brand_aliases(brand))
    return render(join_sections(sections))
