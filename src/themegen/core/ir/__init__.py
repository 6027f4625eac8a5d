"""
themegen intermediate representation.

Frozen pydantic models built once per generation run and shared read-only
by every emitter.
"""

from .colors import ColorModel, ColorToken, ResolvedColor, ResolvedPalette, TokenGroup
from .overrides import (
    BlockquoteOverrides,
    CodeOverrides,
    LayoutOverrides,
    MarginOverrides,
    PositioningOverrides,
    ShadowOverrides,
    SlideOverrides,
    TableOverrides,
    ThemeOverrides,
    TransitionOverrides,
)
from .typography import CssValue, FontConfig, FontSpacing, FontWeights, SizeTable, TypographyModel

__all__ = [
    # Colors
    "ColorModel",
    "ColorToken",
    "ResolvedColor",
    "ResolvedPalette",
    "TokenGroup",
    # Typography
    "CssValue",
    "FontConfig",
    "FontSpacing",
    "FontWeights",
    "SizeTable",
    "TypographyModel",
    # Slide theme overrides
    "BlockquoteOverrides",
    "CodeOverrides",
    "LayoutOverrides",
    "MarginOverrides",
    "PositioningOverrides",
    "ShadowOverrides",
    "SlideOverrides",
    "TableOverrides",
    "ThemeOverrides",
    "TransitionOverrides",
]
