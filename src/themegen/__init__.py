"""
themegen - brand theme generator.

Turns colors.json, fonts.json and custom_theme.json into the SCSS style
sheets, font include and plotting theme used by the slide decks and the
exercise documents.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .core.errors import ConfigMalformed, ConfigMissing, ThemegenError

try:
    __version__ = version("themegen")
except PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ThemegenError",
    "ConfigMissing",
    "ConfigMalformed",
]
