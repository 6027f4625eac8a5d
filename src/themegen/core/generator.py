"""
Generation orchestrator.

Runs the artifact stages in a fixed order. Each stage checks that its
inputs exist, renders its full text in memory, and only then writes the
output file. The run is fail-fast: the first failing stage aborts the rest
and artifacts written by earlier stages stay on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ..emitters.colors_scss import render_colors_scss
from ..emitters.document_theme import render_document_theme
from ..emitters.fonts_html import render_fonts_html
from ..emitters.fonts_scss import render_fonts_scss
from ..emitters.plot_theme import render_plot_theme
from ..emitters.slide_theme import render_slide_theme
from .config_loader import (
    load_color_model,
    load_font_config,
    load_theme_overrides,
    select_typography,
)
from .errors import ConfigMissing
from .ir import FontConfig, ResolvedPalette, ThemeOverrides, TypographyModel
from .manifest import ProjectManifest
from .resolver import resolve_palette

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Files written by a generation run, in write order."""

    files_created: list[Path] = field(default_factory=list)

    def add_file(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self.files_created.append(path)


class InputCache:
    """
    Loads each input at most once per run.

    Models are frozen, so every stage shares the same instances.
    """

    def __init__(self, manifest: ProjectManifest):
        self.manifest = manifest
        self._palette: ResolvedPalette | None = None
        self._fonts: FontConfig | None = None
        self._theme: ThemeOverrides | None = None

    def source_name(self, name: str) -> str:
        return self.manifest.input_path(name).name

    def palette(self) -> ResolvedPalette:
        if self._palette is None:
            self._palette = resolve_palette(load_color_model(self.manifest.input_path("colors")))
        return self._palette

    def typography(self, *, use_html_sizes: bool = False) -> TypographyModel:
        if self._fonts is None:
            self._fonts = load_font_config(self.manifest.input_path("fonts"))
        return select_typography(self._fonts, use_html_sizes=use_html_sizes)

    def theme(self) -> ThemeOverrides:
        if self._theme is None:
            self._theme = load_theme_overrides(self.manifest.input_path("custom_theme"))
        return self._theme


@dataclass(frozen=True)
class Stage:
    """One generated artifact: its label, output key, inputs and renderer."""

    label: str
    output: str
    inputs: tuple[str, ...]
    render: Callable[[InputCache], str]


# =============================================================================
# Stage renderers
# =============================================================================


def _colors(inputs: InputCache) -> str:
    return render_colors_scss(
        inputs.palette(),
        brand=inputs.manifest.brand,
        sources=(inputs.source_name("colors"),),
    )


def _presentation_fonts(inputs: InputCache) -> str:
    return render_fonts_scss(inputs.typography(), sources=(inputs.source_name("fonts"),))


def _exercise_fonts(inputs: InputCache) -> str:
    return render_fonts_scss(
        inputs.typography(use_html_sizes=True),
        sources=(inputs.source_name("fonts"),),
    )


def _fonts_include(inputs: InputCache) -> str:
    return render_fonts_html(inputs.typography(), sources=(inputs.source_name("fonts"),))


def _slide_theme(inputs: InputCache) -> str:
    return render_slide_theme(
        inputs.palette(),
        inputs.typography(),
        inputs.theme(),
        brand=inputs.manifest.brand,
        sources=tuple(inputs.source_name(n) for n in ("colors", "fonts", "custom_theme")),
    )


def _exercise_theme(inputs: InputCache) -> str:
    return render_document_theme(
        inputs.palette(),
        brand=inputs.manifest.brand,
        sources=(inputs.source_name("colors"), inputs.source_name("fonts")),
    )


def _plot_theme(inputs: InputCache) -> str:
    return render_plot_theme(
        inputs.palette(),
        inputs.typography(),
        brand=inputs.manifest.brand,
        sources=(inputs.source_name("colors"), inputs.source_name("fonts")),
    )


STAGES: tuple[Stage, ...] = (
    Stage("Presentation colors", "presentation_colors", ("colors",), _colors),
    Stage("Presentation fonts", "presentation_fonts", ("fonts",), _presentation_fonts),
    Stage("Exercise colors", "exercise_colors", ("colors",), _colors),
    Stage("Exercise fonts", "exercise_fonts", ("fonts",), _exercise_fonts),
    Stage("Font include", "fonts_include", ("fonts",), _fonts_include),
    Stage("Slide theme", "slide_theme", ("colors", "fonts", "custom_theme"), _slide_theme),
    Stage("Exercise theme", "exercise_theme", ("colors", "fonts"), _exercise_theme),
    Stage("Plotting theme", "plot_theme", ("colors", "fonts"), _plot_theme),
)


# =============================================================================
# Orchestration
# =============================================================================


def _check_inputs(manifest: ProjectManifest, stage: Stage) -> None:
    for name in stage.inputs:
        path = manifest.input_path(name)
        if not path.exists():
            raise ConfigMissing(path)


def run_stage(stage: Stage, inputs: InputCache, result: GenerationResult) -> Path:
    """Render one stage and write its artifact."""
    manifest = inputs.manifest
    logger.info(f"Generating {stage.label}...")
    _check_inputs(manifest, stage)

    content = stage.render(inputs)
    path = manifest.output_path(stage.output)
    result.add_file(path, content)

    logger.info(f"{stage.label} generated successfully")
    logger.debug(f"  wrote {path}")
    return path


def generate_all(manifest: ProjectManifest) -> GenerationResult:
    """Run every stage in order.

    Raises:
        ConfigMissing: If a stage's input file does not exist.
        ConfigMalformed: If an input cannot be used.
    """
    inputs = InputCache(manifest)
    result = GenerationResult()
    for stage in STAGES:
        run_stage(stage, inputs, result)
    return result
