"""
Loading layer for the three JSON inputs.

colors.json comes in two historical shapes; both are normalized here into a
single ColorModel so nothing downstream branches on the shape:

- nested: ``{"primary": {...}, "semantic": {...}}``
- flat (legacy): ``{"black": "#000000", ...}``, all primary, no semantic roles

fonts.json is reduced to a TypographyModel with one active size table, and
custom_theme.json is parsed into ThemeOverrides.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

from .errors import ConfigMalformed, ConfigMissing
from .ir import ColorModel, ColorToken, FontConfig, ThemeOverrides, TypographyModel

logger = logging.getLogger(__name__)

# Distinguishes the nested shape from the flat one
NESTED_COLORS_KEY = "primary"


# =============================================================================
# Raw JSON
# =============================================================================


def read_json(path: Path) -> Any:
    """Read a JSON input file.

    Raises:
        ConfigMissing: If the file does not exist.
        ConfigMalformed: If the file cannot be read as UTF-8 text or is not
            valid JSON.
    """
    if not path.exists():
        raise ConfigMissing(path)

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigMalformed(f"{path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise ConfigMalformed(f"Cannot read {path}: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigMalformed(f"Invalid JSON in {path}: {e}") from e


def _expect_object(data: Any, path: Path) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigMalformed(
            f"Expected a JSON object at the top level of {path}, got {type(data).__name__}"
        )
    return data


# =============================================================================
# Colors
# =============================================================================


class NestedColorConfig(BaseModel):
    """colors.json with explicit primary/semantic groups."""

    model_config = ConfigDict(frozen=True)

    primary: dict[str, str]
    semantic: dict[str, str] = Field(default_factory=dict)


class FlatColorConfig(RootModel[dict[str, str]]):
    """Legacy colors.json: every entry is a primary color."""


def normalize_colors(data: dict[str, Any]) -> ColorModel:
    """Normalize raw colors.json data into a ColorModel.

    Individual color values are not checked here; malformed literals surface
    when contrast colors are derived.

    Raises:
        ConfigMalformed: If an identifier is both a primary and a semantic color.
    """
    if NESTED_COLORS_KEY in data:
        nested_data = dict(data)
        # "semantic": null is treated as an empty group
        if nested_data.get("semantic") is None:
            nested_data.pop("semantic", None)
        nested = NestedColorConfig(**nested_data)
        primary, semantic = nested.primary, nested.semantic
    else:
        primary, semantic = FlatColorConfig(data).root, {}

    overlap = [name for name in semantic if name in primary]
    if overlap:
        raise ConfigMalformed(
            f"Colors defined as both primary and semantic: {', '.join(overlap)}"
        )

    return ColorModel(
        primary=tuple(ColorToken(name=k, raw=v) for k, v in primary.items()),
        semantic=tuple(ColorToken(name=k, raw=v) for k, v in semantic.items()),
    )


def load_color_model(path: Path) -> ColorModel:
    """Load colors.json into a ColorModel.

    Raises:
        ConfigMissing: If the file does not exist.
        ConfigMalformed: If the file is not valid JSON, has the wrong shape, or
            defines an identifier in both groups.
    """
    data = _expect_object(read_json(path), path)
    try:
        model = normalize_colors(data)
    except ValidationError as e:
        raise ConfigMalformed(f"Invalid color configuration in {path}: {e}") from e
    except ConfigMalformed as e:
        raise ConfigMalformed(f"Invalid color configuration in {path}: {e.message}") from e

    logger.debug(
        f"Loaded {len(model.primary)} primary and {len(model.semantic)} semantic colors "
        f"from {path}"
    )
    return model


# =============================================================================
# Typography
# =============================================================================


def load_font_config(path: Path) -> FontConfig:
    """Load fonts.json without selecting a size table."""
    data = _expect_object(read_json(path), path)
    try:
        return FontConfig(**data)
    except ValidationError as e:
        raise ConfigMalformed(f"Invalid font configuration in {path}: {e}") from e


def select_typography(fonts: FontConfig, *, use_html_sizes: bool = False) -> TypographyModel:
    """Build a TypographyModel with one active size table.

    The HTML table is active only when requested AND present; otherwise the
    default ``sizes`` table is used and the model is not in HTML mode. The
    request itself is kept so the relative size multipliers still follow it.
    """
    html_mode = use_html_sizes and fonts.html_sizes is not None
    if use_html_sizes and not html_mode:
        logger.debug("htmlSizes requested but absent, using default sizes")

    return TypographyModel(
        body=fonts.body,
        heading=fonts.heading,
        monospace=fonts.monospace,
        sizes=fonts.html_sizes if html_mode else fonts.sizes,
        html_mode=html_mode,
        html_sizes_requested=use_html_sizes,
        weights=fonts.weights,
        spacing=fonts.spacing,
    )


def load_typography(path: Path, *, use_html_sizes: bool = False) -> TypographyModel:
    """Load fonts.json into a TypographyModel.

    Raises:
        ConfigMissing: If the file does not exist.
        ConfigMalformed: If required fields are absent or of the wrong type.
    """
    return select_typography(load_font_config(path), use_html_sizes=use_html_sizes)


# =============================================================================
# Slide theme overrides
# =============================================================================


def load_theme_overrides(path: Path) -> ThemeOverrides:
    """Load custom_theme.json.

    Raises:
        ConfigMissing: If the file does not exist.
        ConfigMalformed: If a section or field is absent or of the wrong type.
    """
    data = _expect_object(read_json(path), path)
    try:
        return ThemeOverrides(**data)
    except ValidationError as e:
        raise ConfigMalformed(f"Invalid theme overrides in {path}: {e}") from e
