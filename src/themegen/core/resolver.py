"""
Reference resolution and derived color properties.

Semantic tokens may name a primary token instead of giving a literal. This
module follows that single hop, derives a readable foreground for every
color, and provides the name lookup the themed style sheets use.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable

from .constants import (
    CONTRAST_ON_DARK,
    CONTRAST_ON_LIGHT,
    LUMINANCE_THRESHOLD,
    LUMINANCE_WEIGHTS,
)
from .errors import ConfigMalformed
from .ir import ColorModel, ColorToken, ResolvedColor, ResolvedPalette, TokenGroup

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{6})$")


# =============================================================================
# Contrast
# =============================================================================


def hex_to_fractions(hex_color: str) -> tuple[float, float, float]:
    """Convert ``#RRGGBB`` (``#`` optional) to channel fractions in [0, 1]."""
    match = _HEX_COLOR.match(hex_color.strip())
    if match is None:
        raise ConfigMalformed(f"Invalid color value '{hex_color}': expected 6 hex digits")
    digits = match.group(1)
    r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
    return r, g, b


def normalize_hex(hex_color: str) -> str:
    """Canonical ``#RRGGBB`` form of a hex literal; the ``#`` is optional on input."""
    match = _HEX_COLOR.match(hex_color.strip())
    if match is None:
        raise ConfigMalformed(f"Invalid color value '{hex_color}': expected 6 hex digits")
    return "#" + match.group(1)


def luminance(hex_color: str) -> float:
    """Weighted sRGB luma, no gamma correction."""
    r, g, b = hex_to_fractions(hex_color)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * r + wg * g + wb * b


def contrast_color(hex_color: str) -> str:
    """Foreground variable readable on top of ``hex_color``."""
    if luminance(hex_color) > LUMINANCE_THRESHOLD:
        return CONTRAST_ON_LIGHT
    return CONTRAST_ON_DARK


# =============================================================================
# Palette resolution
# =============================================================================


def _resolve_token(token: ColorToken, group: TokenGroup) -> ResolvedColor:
    try:
        value = normalize_hex(token.raw)
    except ConfigMalformed as e:
        raise ConfigMalformed(f"Color '{token.name}': {e.message}") from e
    return ResolvedColor(
        name=token.name, group=group, value=value, contrast=contrast_color(value)
    )


def resolve_palette(model: ColorModel) -> ResolvedPalette:
    """Resolve every token of ``model`` to a literal with a contrast color.

    A semantic token whose raw value is a primary identifier keeps that
    identifier as its reference and takes the primary's literal as its value.
    Any other raw value is taken as a literal.

    Raises:
        ConfigMalformed: If a value is not a hex literal, or a semantic token
            names another semantic token (chained references are unsupported).
    """
    primary = tuple(_resolve_token(token, TokenGroup.PRIMARY) for token in model.primary)
    primary_by_name = {color.name: color for color in primary}
    semantic_names = model.semantic_names()

    semantic: list[ResolvedColor] = []
    for token in model.semantic:
        target = primary_by_name.get(token.raw)
        if target is not None:
            logger.debug(f"Semantic color '{token.name}' references '{target.name}'")
            semantic.append(
                ResolvedColor(
                    name=token.name,
                    group=TokenGroup.SEMANTIC,
                    value=target.value,
                    contrast=target.contrast,
                    reference=target.name,
                )
            )
            continue

        if token.raw in semantic_names:
            raise ConfigMalformed(
                f"Semantic color '{token.name}' references semantic color '{token.raw}'; "
                "semantic colors may only reference primary colors"
            )
        logger.debug(f"Semantic color '{token.name}' is the literal '{token.raw}'")
        semantic.append(_resolve_token(token, TokenGroup.SEMANTIC))

    return ResolvedPalette(primary=primary, semantic=tuple(semantic))


def require_colors(palette: ResolvedPalette, names: Iterable[str]) -> None:
    """Fail if any of ``names`` is not defined by the palette."""
    defined = palette.names()
    missing = [name for name in names if name not in defined]
    if missing:
        raise ConfigMalformed(f"Missing required brand colors: {', '.join(missing)}")


# =============================================================================
# Name resolution for themed style sheets
# =============================================================================

# A lookup step returns a resolved value or None for "no match"
_Lookup = Callable[[str, ResolvedPalette], str | None]


def _as_literal(name: str, palette: ResolvedPalette) -> str | None:
    if name.startswith("#"):
        return normalize_hex(name) if _HEX_COLOR.match(name) else name
    # Bare hex digits count as a literal unless a color has that name
    if _HEX_COLOR.match(name) and palette.get(name) is None:
        return normalize_hex(name)
    return None


def _as_semantic_reference(name: str, palette: ResolvedPalette) -> str | None:
    color = palette.get(name)
    if color is not None and color.group == TokenGroup.SEMANTIC and color.reference:
        return f"${color.reference}"
    return None


def _as_semantic(name: str, palette: ResolvedPalette) -> str | None:
    color = palette.get(name)
    if color is not None and color.group == TokenGroup.SEMANTIC:
        return color.variable
    return None


def _as_primary(name: str, palette: ResolvedPalette) -> str | None:
    color = palette.get(name)
    if color is not None and color.group == TokenGroup.PRIMARY:
        return color.variable
    return None


_LOOKUPS: tuple[_Lookup, ...] = (
    _as_literal,
    _as_semantic_reference,
    _as_semantic,
    _as_primary,
)


def resolve_color_name(name: str, palette: ResolvedPalette) -> str:
    """Resolve a color name from a theme input to something SCSS can use.

    In order: a hex literal (``#`` optional) comes back as ``#RRGGBB``; a semantic color pointing
    at a primary yields the primary's variable; any other semantic color
    yields its own variable; a primary color yields its variable. Anything
    else is returned unchanged (assumed to already be an SCSS expression).
    """
    for lookup in _LOOKUPS:
        resolved = lookup(name, palette)
        if resolved is not None:
            return resolved
    return name
