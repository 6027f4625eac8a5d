"""
Helpers shared by the artifact emitters.
"""

from __future__ import annotations

import re
import textwrap
from collections.abc import Iterable, Sequence

from ..core.ir import CssValue

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def describe_sources(sources: Sequence[str]) -> str:
    """Join source names: ``a``, ``a and b``, ``a, b, and c``."""
    if len(sources) <= 1:
        return "".join(sources)
    if len(sources) == 2:
        return f"{sources[0]} and {sources[1]}"
    return f"{', '.join(sources[:-1])}, and {sources[-1]}"


def header(sources: Sequence[str], *, prefix: str = "//", suffix: str = "") -> str:
    """The fixed first line of every generated artifact."""
    text = f"This file is auto-generated from {describe_sources(sources)}. Do not edit directly."
    return f"{prefix} {text}{' ' + suffix if suffix else ''}"


def css_value(value: CssValue) -> str:
    """Render a config value the way it was written (1.0 -> "1")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def kebab_case(name: str) -> str:
    """``midnightGreen`` -> ``midnight-green``."""
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def snake_case(name: str) -> str:
    """``midnightGreen`` -> ``midnight_green``."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def block(text: str) -> list[str]:
    """Split an indented literal block into lines."""
    return textwrap.dedent(text).strip("\n").splitlines()


def join_sections(sections: Iterable[list[str]]) -> list[str]:
    """Concatenate sections with one blank line between them."""
    lines: list[str] = []
    for section in sections:
        if lines:
            lines.append("")
        lines.extend(section)
    return lines


def render(lines: Iterable[str]) -> str:
    """Final artifact text, newline terminated."""
    return "\n".join(lines) + "\n"
