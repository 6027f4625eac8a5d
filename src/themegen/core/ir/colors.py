"""
Color token IR types.

A ColorModel is the canonical form of colors.json after normalization; a
ResolvedPalette is the same model after references are followed and
contrast colors derived.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TokenGroup(StrEnum):
    """Which half of the color model a token belongs to."""

    PRIMARY = "primary"
    SEMANTIC = "semantic"


class ColorToken(BaseModel):
    """A named color as written in the configuration."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Unique token identifier")
    raw: str = Field(description="Hex literal, or a primary identifier for semantic tokens")


class ColorModel(BaseModel):
    """Canonical color model: primary literals plus semantic roles."""

    model_config = ConfigDict(frozen=True)

    primary: tuple[ColorToken, ...] = Field(default_factory=tuple)
    semantic: tuple[ColorToken, ...] = Field(default_factory=tuple)

    def primary_names(self) -> set[str]:
        return {token.name for token in self.primary}

    def semantic_names(self) -> set[str]:
        return {token.name for token in self.semantic}


class ResolvedColor(BaseModel):
    """A color with its literal value and derived contrast foreground."""

    model_config = ConfigDict(frozen=True)

    name: str
    group: TokenGroup
    value: str = Field(description="Hex literal in ``#RRGGBB`` form")
    contrast: str = Field(description="Foreground variable readable on this color")
    reference: str | None = Field(
        default=None,
        description="Primary identifier this semantic token points at, if any",
    )

    @property
    def variable(self) -> str:
        """SCSS variable holding this color."""
        return f"${self.name}"

    @property
    def definition(self) -> str:
        """Right-hand side of the SCSS variable definition."""
        if self.reference is not None:
            return f"${self.reference}"
        return self.value


class ResolvedPalette(BaseModel):
    """Resolved colors, primary entries first, insertion order kept."""

    model_config = ConfigDict(frozen=True)

    primary: tuple[ResolvedColor, ...] = Field(default_factory=tuple)
    semantic: tuple[ResolvedColor, ...] = Field(default_factory=tuple)

    def all(self) -> tuple[ResolvedColor, ...]:
        return self.primary + self.semantic

    def names(self) -> set[str]:
        return {color.name for color in self.all()}

    def get(self, name: str) -> ResolvedColor | None:
        for color in self.all():
            if color.name == name:
                return color
        return None

    def value_of(self, name: str) -> str:
        """Literal value of a color, raising KeyError if unknown."""
        color = self.get(name)
        if color is None:
            raise KeyError(name)
        return color.value
