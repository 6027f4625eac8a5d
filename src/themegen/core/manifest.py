"""
Project configuration from themegen.toml.

The file is optional; every key has a default that reproduces the standard
Presentation/ + R/Exercises/ project layout. Relative paths are resolved
against the project root.
"""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .errors import ConfigMalformed

MANIFEST_FILE = "themegen.toml"


@dataclass
class InputPaths:
    """Locations of the JSON inputs."""

    colors: str = "Presentation/colors.json"
    fonts: str = "Presentation/fonts.json"
    custom_theme: str = "Presentation/custom_theme.json"


@dataclass
class OutputPaths:
    """Locations of the generated artifacts."""

    presentation_colors: str = "Presentation/_colors.scss"
    presentation_fonts: str = "Presentation/_fonts.scss"
    fonts_include: str = "Presentation/fonts-include.html"
    slide_theme: str = "Presentation/custom_theme.scss"
    exercise_colors: str = "R/Exercises/_colors.scss"
    exercise_fonts: str = "R/Exercises/_fonts.scss"
    exercise_theme: str = "R/Exercises/_exercise_theme.scss"
    plot_theme: str = "Presentation/plot_theme.py"


@dataclass
class ProjectManifest:
    root: Path
    brand: str = "SSoQE"
    inputs: InputPaths = field(default_factory=InputPaths)
    outputs: OutputPaths = field(default_factory=OutputPaths)

    def input_path(self, name: str) -> Path:
        return self.root / getattr(self.inputs, name)

    def output_path(self, name: str) -> Path:
        return self.root / getattr(self.outputs, name)


def _paths_from(section: dict[str, Any], cls: type, table: str) -> Any:
    known = {f.name for f in fields(cls)}
    values: dict[str, str] = {}
    for key, value in section.items():
        if key not in known:
            raise ConfigMalformed(f"Unknown key '{key}' in [{table}] of {MANIFEST_FILE}")
        if not isinstance(value, str):
            raise ConfigMalformed(f"[{table}].{key} in {MANIFEST_FILE} must be a string path")
        values[key] = value
    return cls(**values)


def load_manifest(root: Path) -> ProjectManifest:
    """Load themegen.toml from ``root``, or defaults if the file is absent."""
    path = root / MANIFEST_FILE
    if not path.exists():
        return ProjectManifest(root=root)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigMalformed(f"Invalid TOML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigMalformed(f"{path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise ConfigMalformed(f"Cannot read {path}: {e}") from e

    project = data.get("project", {})
    brand = project.get("brand", "SSoQE")
    if not isinstance(brand, str):
        raise ConfigMalformed(f"[project].brand in {MANIFEST_FILE} must be a string")

    return ProjectManifest(
        root=root,
        brand=brand,
        inputs=_paths_from(data.get("inputs", {}), InputPaths, "inputs"),
        outputs=_paths_from(data.get("outputs", {}), OutputPaths, "outputs"),
    )
