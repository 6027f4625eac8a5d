"""
Slide theme overrides (custom_theme.json).

Flat layout, shadow, transition, code, table and blockquote constants used
only by the slide theme. Field names follow the JSON keys via aliases.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .typography import CssValue


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MarginOverrides(_Section):
    small_margin: CssValue = Field(alias="smallMargin")
    block_margin: CssValue = Field(alias="blockMargin")
    large_margin: CssValue = Field(alias="largeMargin")


class CodeOverrides(_Section):
    code_background_color: str = Field(
        alias="codeBackgroundColor",
        description="Color name or hex literal; resolved against the palette",
    )
    code_border_radius: CssValue = Field(alias="codeBorderRadius")
    code_line_height: CssValue = Field(alias="codeLineHeight")
    inline_code_padding: CssValue = Field(alias="inlineCodePadding")


class LayoutOverrides(_Section):
    content_max_width: CssValue = Field(alias="contentMaxWidth")


class ShadowOverrides(_Section):
    light_text_shadow: str = Field(alias="lightTextShadow")
    dark_text_shadow: str = Field(alias="darkTextShadow")
    blockquote_shadow: str = Field(alias="blockquoteShadow")


class TransitionOverrides(_Section):
    default_transition: str = Field(alias="defaultTransition")


class BlockquoteOverrides(_Section):
    blockquote_padding: CssValue = Field(alias="blockquotePadding")
    blockquote_border_radius: CssValue = Field(alias="blockquoteBorderRadius")
    blockquote_border_width: CssValue = Field(alias="blockquoteBorderWidth")
    blockquote_margin: CssValue = Field(alias="blockquoteMargin")


class TableOverrides(_Section):
    table_border_opacity: CssValue = Field(alias="tableBorderOpacity")
    table_cell_padding: CssValue = Field(alias="tableCellPadding")


class PositioningOverrides(_Section):
    slide_margin_top15: CssValue = Field(alias="slideMarginTop15")
    slide_margin_top25: CssValue = Field(alias="slideMarginTop25")
    center_vertical: CssValue = Field(alias="centerVertical")


class SlideOverrides(_Section):
    slide_padding: CssValue = Field(alias="slidePadding")


class ThemeOverrides(_Section):
    """All sections of custom_theme.json."""

    margins: MarginOverrides
    code: CodeOverrides
    layout: LayoutOverrides
    shadows: ShadowOverrides
    transitions: TransitionOverrides
    blockquote: BlockquoteOverrides
    table: TableOverrides
    positioning: PositioningOverrides
    slides: SlideOverrides
