"""Tests for loading and normalizing the JSON inputs."""

from __future__ import annotations

from pathlib import Path

import pytest

from themegen.core.config_loader import (
    load_color_model,
    load_theme_overrides,
    load_typography,
    normalize_colors,
    read_json,
    select_typography,
)
from themegen.core.errors import ConfigMalformed, ConfigMissing

# =============================================================================
# Raw JSON
# =============================================================================


class TestReadJson:
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigMissing) as exc_info:
            read_json(tmp_path / "colors.json")
        assert exc_info.value.path == tmp_path / "colors.json"
        assert "colors.json not found" in exc_info.value.message

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "colors.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigMalformed, match="Invalid JSON"):
            read_json(path)

    def test_non_utf8_bytes(self, tmp_path: Path):
        path = tmp_path / "colors.json"
        path.write_bytes(b"\xff")
        with pytest.raises(ConfigMalformed, match="not UTF-8 text"):
            read_json(path)

    def test_directory_is_malformed(self, tmp_path: Path):
        path = tmp_path / "colors.json"
        path.mkdir()
        with pytest.raises(ConfigMalformed, match="Cannot read"):
            read_json(path)

    def test_top_level_must_be_object(self, tmp_path: Path, write_json):
        path = write_json(tmp_path / "colors.json", ["#000000"])
        with pytest.raises(ConfigMalformed, match="JSON object"):
            load_color_model(path)


# =============================================================================
# Colors
# =============================================================================


class TestNormalizeColors:
    def test_flat_shape_is_all_primary(self, brand_primary):
        model = normalize_colors(brand_primary)
        assert [t.name for t in model.primary] == list(brand_primary)
        assert model.semantic == ()

    def test_nested_shape(self, colors_data, brand_primary):
        model = normalize_colors(colors_data)
        assert model.primary_names() == set(brand_primary)
        assert [t.name for t in model.semantic] == ["primary", "accent", "highlight"]
        assert model.semantic[0].raw == "midnightGreen"

    def test_flat_and_nested_normalize_identically(self, brand_primary):
        flat = normalize_colors(brand_primary)
        nested = normalize_colors({"primary": brand_primary, "semantic": {}})
        assert flat == nested

    def test_nested_without_semantic(self, brand_primary):
        model = normalize_colors({"primary": brand_primary})
        assert model.semantic == ()

    def test_null_semantic_is_empty(self, brand_primary):
        model = normalize_colors({"primary": brand_primary, "semantic": None})
        assert model.semantic == ()

    def test_insertion_order_kept(self):
        model = normalize_colors({"zeta": "#111111", "alpha": "#222222"})
        assert [t.name for t in model.primary] == ["zeta", "alpha"]

    def test_name_in_both_groups_rejected(self, brand_primary):
        data = {"primary": brand_primary, "semantic": {"black": "#111111", "accent": "white"}}
        with pytest.raises(ConfigMalformed, match="both primary and semantic: black$"):
            normalize_colors(data)


class TestLoadColorModel:
    def test_loads_file(self, tmp_path: Path, write_json, colors_data):
        model = load_color_model(write_json(tmp_path / "colors.json", colors_data))
        assert len(model.primary) == 6
        assert len(model.semantic) == 3

    def test_non_string_value_is_malformed(self, tmp_path: Path, write_json):
        path = write_json(tmp_path / "colors.json", {"black": 0})
        with pytest.raises(ConfigMalformed, match="Invalid color configuration"):
            load_color_model(path)

    def test_nested_primary_must_be_mapping(self, tmp_path: Path, write_json):
        path = write_json(tmp_path / "colors.json", {"primary": ["#000000"]})
        with pytest.raises(ConfigMalformed):
            load_color_model(path)

    def test_overlap_names_file(self, tmp_path: Path, write_json, brand_primary):
        data = {"primary": brand_primary, "semantic": {"white": "black"}}
        path = write_json(tmp_path / "colors.json", data)
        with pytest.raises(ConfigMalformed) as exc_info:
            load_color_model(path)
        assert str(path) in exc_info.value.message
        assert "white" in exc_info.value.message


# =============================================================================
# Typography
# =============================================================================


class TestTypography:
    def test_default_table_selected(self, tmp_path: Path, write_json, fonts_data):
        typo = load_typography(write_json(tmp_path / "fonts.json", fonts_data))
        assert typo.html_mode is False
        assert typo.sizes.main_font_size == "24px"
        assert typo.body == "Source Sans 3"

    def test_html_table_selected(self, tmp_path: Path, write_json, fonts_data):
        path = write_json(tmp_path / "fonts.json", fonts_data)
        typo = load_typography(path, use_html_sizes=True)
        assert typo.html_mode is True
        assert typo.html_sizes_requested is True
        assert typo.sizes.main_font_size == "16px"

    def test_html_requested_but_absent_falls_back(self, font_config):
        fonts = font_config.model_copy(update={"html_sizes": None})
        typo = select_typography(fonts, use_html_sizes=True)
        assert typo.html_mode is False
        assert typo.html_sizes_requested is True
        assert typo.sizes == font_config.sizes

    def test_layout_overrides_only_in_html_mode(self, typography, html_typography):
        assert typography.content_max_width == "900px"
        assert typography.block_margin == "1.5rem"
        assert typography.small_margin == "5px"
        assert html_typography.content_max_width == "800px"
        assert html_typography.block_margin == "1.25rem"
        assert html_typography.small_margin == "0.4rem"

    def test_missing_size_field_is_malformed(self, tmp_path: Path, write_json, fonts_data):
        del fonts_data["sizes"]["heading1Size"]
        path = write_json(tmp_path / "fonts.json", fonts_data)
        with pytest.raises(ConfigMalformed, match="Invalid font configuration"):
            load_typography(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigMissing):
            load_typography(tmp_path / "fonts.json")

    def test_families_order(self, typography):
        assert list(typography.families()) == ["body", "heading", "monospace"]


# =============================================================================
# Slide theme overrides
# =============================================================================


class TestThemeOverrides:
    def test_loads_sections(self, theme_overrides):
        assert theme_overrides.code.code_background_color == "cambridgeBlue"
        assert theme_overrides.table.table_border_opacity == 0.2
        assert theme_overrides.positioning.center_vertical == "50%"

    def test_missing_section_is_malformed(self, tmp_path: Path, write_json, custom_theme_data):
        del custom_theme_data["table"]
        path = write_json(tmp_path / "custom_theme.json", custom_theme_data)
        with pytest.raises(ConfigMalformed, match="Invalid theme overrides"):
            load_theme_overrides(path)
