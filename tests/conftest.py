"""Shared pytest fixtures for themegen tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from themegen.core.config_loader import load_theme_overrides, normalize_colors, select_typography
from themegen.core.ir import FontConfig, ResolvedPalette, ThemeOverrides, TypographyModel
from themegen.core.resolver import resolve_palette

BRAND_PRIMARY = {
    "black": "#000000",
    "white": "#FFFFFF",
    "midnightGreen": "#254D32",
    "persianGreen": "#1A936F",
    "cambridgeBlue": "#A1C3B3",
    "satinSheenGold": "#D68E00",
}


def _write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def brand_primary() -> dict[str, str]:
    """The six brand colors as a flat colors.json."""
    return dict(BRAND_PRIMARY)


@pytest.fixture
def colors_data() -> dict[str, Any]:
    """Nested colors.json with one reference and one literal semantic color."""
    return {
        "primary": dict(BRAND_PRIMARY),
        "semantic": {
            "primary": "midnightGreen",
            "accent": "satinSheenGold",
            "highlight": "#F4E285",
        },
    }


@pytest.fixture
def fonts_data() -> dict[str, Any]:
    return {
        "body": "Source Sans 3",
        "heading": "Roboto Condensed",
        "monospace": "Fira Code",
        "sizes": {
            "mainFontSize": "24px",
            "heading1Size": "2.2em",
            "heading2Size": "1.6em",
            "heading3Size": "1.3em",
            "heading4Size": "1em",
            "bodyLineHeight": 1.4,
            "headingLineHeight": 1.2,
            "textSizeSmall": 0.75,
            "textSizeTiny": 0.5,
            "textSizeLarge": 1.3,
        },
        "htmlSizes": {
            "mainFontSize": "16px",
            "heading1Size": "2rem",
            "heading2Size": "1.6rem",
            "heading3Size": "1.3rem",
            "heading4Size": "1.1rem",
            "bodyLineHeight": 1.6,
            "headingLineHeight": 1.25,
            "maxWidth": "800px",
            "blockMargin": "1.25rem",
            "smallMargin": "0.4rem",
        },
        "weights": {
            "headingFontWeight": 600,
            "bodyFontWeight": 400,
            "boldFontWeight": 700,
        },
        "spacing": {
            "headingLetterSpacing": "0.02em",
            "bodyLetterSpacing": "normal",
        },
    }


@pytest.fixture
def custom_theme_data() -> dict[str, Any]:
    return {
        "margins": {"smallMargin": "5px", "blockMargin": "1.5rem", "largeMargin": "20px"},
        "code": {
            "codeBackgroundColor": "cambridgeBlue",
            "codeBorderRadius": "4px",
            "codeLineHeight": 1.4,
            "inlineCodePadding": "2px 4px",
        },
        "layout": {"contentMaxWidth": "1200px"},
        "shadows": {
            "lightTextShadow": "1px 1px 2px rgba(255, 255, 255, 0.6)",
            "darkTextShadow": "1px 1px 2px rgba(0, 0, 0, 0.6)",
            "blockquoteShadow": "0 2px 4px rgba(0, 0, 0, 0.1)",
        },
        "transitions": {"defaultTransition": "0.3s ease"},
        "blockquote": {
            "blockquotePadding": "1rem",
            "blockquoteBorderRadius": "6px",
            "blockquoteBorderWidth": "4px",
            "blockquoteMargin": "1rem 0",
        },
        "table": {"tableBorderOpacity": 0.2, "tableCellPadding": "0.5rem"},
        "positioning": {
            "slideMarginTop15": "15%",
            "slideMarginTop25": "25%",
            "centerVertical": "50%",
        },
        "slides": {"slidePadding": "0 2rem"},
    }


@pytest.fixture
def palette(colors_data: dict[str, Any]) -> ResolvedPalette:
    return resolve_palette(normalize_colors(colors_data))


@pytest.fixture
def font_config(fonts_data: dict[str, Any]) -> FontConfig:
    return FontConfig(**fonts_data)


@pytest.fixture
def typography(font_config: FontConfig) -> TypographyModel:
    """Typography with the default (presentation) size table."""
    return select_typography(font_config)


@pytest.fixture
def html_typography(font_config: FontConfig) -> TypographyModel:
    return select_typography(font_config, use_html_sizes=True)


@pytest.fixture
def theme_overrides(tmp_path: Path, custom_theme_data: dict[str, Any]) -> ThemeOverrides:
    return load_theme_overrides(_write_json(tmp_path / "custom_theme.json", custom_theme_data))


@pytest.fixture
def project(
    tmp_path: Path,
    colors_data: dict[str, Any],
    fonts_data: dict[str, Any],
    custom_theme_data: dict[str, Any],
) -> Path:
    """A project root with the three inputs in the default layout."""
    root = tmp_path / "project"
    _write_json(root / "Presentation" / "colors.json", colors_data)
    _write_json(root / "Presentation" / "fonts.json", fonts_data)
    _write_json(root / "Presentation" / "custom_theme.json", custom_theme_data)
    return root


@pytest.fixture
def write_json():
    """Helper for tests that need their own input files."""
    return _write_json
