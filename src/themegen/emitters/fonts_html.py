"""
Font include snippet (fonts-include.html).
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.constants import FONT_WEIGHT_SETS, GOOGLE_FONTS_URL
from ..core.ir import TypographyModel
from .common import header, render


def font_link(family: str, weights: Sequence[int]) -> str:
    """Stylesheet link for one family at the given weights."""
    family_param = family.replace(" ", "+")
    weight_param = ";".join(str(w) for w in weights)
    return (
        f'<link href="{GOOGLE_FONTS_URL}?family={family_param}:wght@{weight_param}'
        f'&display=swap" rel="stylesheet">'
    )


def render_fonts_html(
    typography: TypographyModel,
    *,
    sources: Sequence[str] = ("fonts.json",),
) -> str:
    """Render one font link per configured (non-empty) font role."""
    lines = [header(sources, prefix="<!--", suffix="-->")]
    for role, family in typography.families().items():
        if family:
            lines.append(font_link(family, FONT_WEIGHT_SETS[role]))
    return render(lines)
