"""
Typography IR types.

FontConfig mirrors fonts.json. TypographyModel is what the emitters see:
the family names plus exactly one active SizeTable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..constants import (
    DEFAULT_BLOCK_MARGIN,
    DEFAULT_CONTENT_MAX_WIDTH,
    DEFAULT_SMALL_MARGIN,
)

# Sizes come through verbatim: "24px", "1.5em", 1.3, ...
CssValue = str | int | float


class SizeTable(BaseModel):
    """One size variant (``sizes`` or ``htmlSizes``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    main_font_size: CssValue = Field(alias="mainFontSize")
    heading1_size: CssValue = Field(alias="heading1Size")
    heading2_size: CssValue = Field(alias="heading2Size")
    heading3_size: CssValue = Field(alias="heading3Size")
    heading4_size: CssValue = Field(alias="heading4Size")
    body_line_height: CssValue = Field(alias="bodyLineHeight")
    heading_line_height: CssValue = Field(alias="headingLineHeight")
    text_size_small: CssValue | None = Field(default=None, alias="textSizeSmall")
    text_size_tiny: CssValue | None = Field(default=None, alias="textSizeTiny")
    text_size_large: CssValue | None = Field(default=None, alias="textSizeLarge")
    # Layout overrides, honoured for the HTML variant only
    max_width: CssValue | None = Field(default=None, alias="maxWidth")
    block_margin: CssValue | None = Field(default=None, alias="blockMargin")
    small_margin: CssValue | None = Field(default=None, alias="smallMargin")


class FontWeights(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    heading: CssValue = Field(alias="headingFontWeight")
    body: CssValue = Field(alias="bodyFontWeight")
    bold: CssValue = Field(alias="boldFontWeight")


class FontSpacing(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    heading_letter_spacing: CssValue = Field(alias="headingLetterSpacing")
    body_letter_spacing: CssValue = Field(alias="bodyLetterSpacing")


class FontConfig(BaseModel):
    """Raw contents of fonts.json."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    body: str = ""
    heading: str = ""
    monospace: str = ""
    sizes: SizeTable
    html_sizes: SizeTable | None = Field(default=None, alias="htmlSizes")
    weights: FontWeights
    spacing: FontSpacing


class TypographyModel(BaseModel):
    """Typography with the size table selected for one artifact."""

    model_config = ConfigDict(frozen=True)

    body: str
    heading: str
    monospace: str
    sizes: SizeTable
    html_mode: bool = Field(
        default=False,
        description="True when ``sizes`` is the HTML variant",
    )
    html_sizes_requested: bool = Field(
        default=False,
        description="True when the target asked for HTML sizes, whether or not it has them",
    )
    weights: FontWeights
    spacing: FontSpacing

    def families(self) -> dict[str, str]:
        """Font role -> family name, in body/heading/monospace order."""
        return {"body": self.body, "heading": self.heading, "monospace": self.monospace}

    def _layout(self, value: CssValue | None, fallback: str) -> CssValue:
        if self.html_mode and value is not None:
            return value
        return fallback

    @property
    def content_max_width(self) -> CssValue:
        return self._layout(self.sizes.max_width, DEFAULT_CONTENT_MAX_WIDTH)

    @property
    def block_margin(self) -> CssValue:
        return self._layout(self.sizes.block_margin, DEFAULT_BLOCK_MARGIN)

    @property
    def small_margin(self) -> CssValue:
        return self._layout(self.sizes.small_margin, DEFAULT_SMALL_MARGIN)
