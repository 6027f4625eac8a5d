"""Tests for the generated matplotlib theme module."""

from __future__ import annotations

from typing import Any

import pytest

from themegen.core.errors import ConfigMalformed
from themegen.emitters.plot_theme import pixel_size, render_plot_theme


def _load(text: str) -> dict[str, Any]:
    namespace: dict[str, Any] = {}
    exec(compile(text, "plot_theme.py", "exec"), namespace)
    return namespace


@pytest.fixture
def plot_text(palette, typography) -> str:
    return render_plot_theme(palette, typography)


@pytest.fixture
def plot_module(plot_text) -> dict[str, Any]:
    return _load(plot_text)


class TestPixelSize:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("24px", 24), ("24", 24), (" 18.5px ", 18.5), (20, 20), (16.0, 16.0)],
    )
    def test_accepted(self, value, expected):
        assert pixel_size(value) == expected

    @pytest.mark.parametrize("value", ["1.5em", "large", "", True])
    def test_rejected(self, value):
        with pytest.raises(ConfigMalformed):
            pixel_size(value)


class TestPlotTheme:
    def test_header(self, plot_text):
        assert plot_text.splitlines()[0] == (
            "# This file is auto-generated from colors.json and fonts.json. Do not edit directly."
        )

    def test_brand_cols(self, plot_module):
        assert plot_module["BRAND_COLS"] == {
            "black": "#000000",
            "white": "#FFFFFF",
            "midnight_green": "#254D32",
            "persian_green": "#1A936F",
            "cambridge_blue": "#A1C3B3",
            "satin_sheen_gold": "#D68E00",
        }

    def test_palettes(self, plot_module):
        assert plot_module["PRIMARY_SEQUENCE"] == ["#254D32", "#1A936F", "#A1C3B3"]
        assert plot_module["DIVERGING"] == ["#254D32", "#FFFFFF", "#D68E00"]
        assert plot_module["ACCENT_COLOR"] == "#D68E00"

    def test_point_size_conversion(self, plot_module):
        assert plot_module["TEXT_SIZE_MAIN_PX"] == 24
        assert plot_module["TEXT_SIZE_MAIN_PT"] == pytest.approx(18.0)
        assert plot_module["TEXT_SIZE_BASE"] == pytest.approx(16.2)
        assert plot_module["TEXT_SIZE"] == plot_module["TEXT_SIZE_BASE"]

    def test_font_stacks(self, plot_module):
        assert plot_module["FONT_BODY"][0] == "Source Sans 3"
        assert plot_module["FONT_MONO"][0] == "Fira Code"
        assert plot_module["FONT_HEADING"][-1] == "sans-serif"

    def test_empty_family_uses_fallbacks_only(self, palette, typography):
        module = _load(render_plot_theme(palette, typography.model_copy(update={"body": ""})))
        assert module["FONT_BODY"] == ["Inter", "DejaVu Sans", "sans-serif"]

    def test_hash_added_to_bare_hex(self, brand_primary, typography):
        from themegen.core.config_loader import normalize_colors
        from themegen.core.resolver import resolve_palette

        brand_primary["black"] = "000000"
        palette = resolve_palette(normalize_colors(brand_primary))
        module = _load(render_plot_theme(palette, typography))
        assert module["TEXT_COLOR"] == "#000000"

    def test_discrete_colors_within_palette(self, plot_module):
        assert plot_module["discrete_colors"](2) == ["#000000", "#FFFFFF"]
        assert plot_module["discrete_colors"](6) == list(plot_module["BRAND_COLS"].values())
        assert plot_module["discrete_colors"](0) == []

    def test_discrete_colors_interpolates(self, plot_module):
        colors = plot_module["discrete_colors"](8)
        assert len(colors) == 8
        assert colors[0] == "#000000"
        assert colors[-1] == "#D68E00"
        assert all(len(c) == 7 and c.startswith("#") for c in colors)

    def test_theme_brand_params(self, plot_module):
        params = plot_module["theme_brand"]()
        assert params["font.sans-serif"][0] == "Source Sans 3"
        assert params["axes.titlecolor"] == "#254D32"
        assert params["font.size"] == pytest.approx(16.2)
        assert params["savefig.dpi"] == 300

        custom = plot_module["theme_brand"](base_size=10, base_family=["Lato"])
        assert custom["font.sans-serif"] == ["Lato"]
        assert custom["axes.titlesize"] == pytest.approx(14.0)

    def test_apply_theme(self, plot_module):
        mpl = pytest.importorskip("matplotlib")
        mpl.use("Agg")
        import matplotlib.pyplot as plt

        with mpl.rc_context():
            plot_module["apply_theme"]()
            assert plt.rcParams["axes.titlecolor"] == "#254D32"
            cycle = plt.rcParams["axes.prop_cycle"].by_key()["color"]
            assert "#FFFFFF" not in cycle
            assert cycle[0] == "#000000"

    def test_non_pixel_main_size(self, palette, typography):
        sizes = typography.sizes.model_copy(update={"main_font_size": "1.2em"})
        with pytest.raises(ConfigMalformed, match="mainFontSize"):
            render_plot_theme(palette, typography.model_copy(update={"sizes": sizes}))
