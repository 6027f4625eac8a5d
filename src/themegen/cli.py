"""
themegen command line entry point.

Run from the project root with no arguments (``--version`` prints the
version):

    themegen

Reads the JSON inputs named by themegen.toml (or the default layout) and
regenerates every theme artifact. The log level comes from the
THEMEGEN_LOG_LEVEL environment variable.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer

from themegen import __version__
from themegen.core.errors import ThemegenError
from themegen.core.generator import generate_all
from themegen.core.manifest import load_manifest

LOG_LEVEL_ENV = "THEMEGEN_LOG_LEVEL"

app = typer.Typer(
    help="Generate brand theme style sheets, font includes and the plotting theme.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"themegen {__version__}")
        raise typer.Exit()


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s")


@app.command()
def generate(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the themegen version and exit",
    ),
) -> None:
    """Regenerate all theme artifacts in the current directory."""
    _configure_logging()
    try:
        manifest = load_manifest(Path.cwd())
        result = generate_all(manifest)
    except ThemegenError as e:
        typer.echo("Error during theme generation:", err=True)
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Theme generation completed successfully!")
    typer.echo("Generated files:")
    for path in result.files_created:
        try:
            shown = path.relative_to(manifest.root)
        except ValueError:
            shown = path
        typer.echo(f"  - {shown}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
