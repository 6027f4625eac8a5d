"""
Error types for theme configuration loading and artifact generation.
"""

from pathlib import Path


class ThemegenError(Exception):
    """Base exception for all themegen errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigMissing(ThemegenError):
    """
    Raised when a required input file does not exist.

    Examples:
    - colors.json deleted or renamed
    - custom_theme.json never created
    """

    def __init__(self, path: Path, message: str | None = None):
        self.path = path
        super().__init__(message or f"{path.name} not found. Please create this file first.")


class ConfigMalformed(ThemegenError):
    """
    Raised when an input file exists but cannot be used.

    Examples:
    - Invalid JSON syntax
    - Required field absent or of the wrong type
    - Color value that is not a 6-digit hex literal
    - Semantic color referencing another semantic color
    - Brand colors required by the generated aliases are missing
    """

    pass
