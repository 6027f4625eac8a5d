"""
Artifact emitters.

Each emitter is a pure function from the resolved models to the text of one
generated file.
"""

from .colors_scss import render_colors_scss
from .document_theme import render_document_theme
from .fonts_html import render_fonts_html
from .fonts_scss import render_fonts_scss
from .plot_theme import render_plot_theme
from .slide_theme import render_slide_theme

__all__ = [
    "render_colors_scss",
    "render_document_theme",
    "render_fonts_html",
    "render_fonts_scss",
    "render_plot_theme",
    "render_slide_theme",
]
