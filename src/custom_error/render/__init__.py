"""Rendering of reports into aligned, optionally colored text."""

from custom_error.render.layout import gutter_width, layout_context
from custom_error.render.renderer import Renderer, emit, render, render_collection

__all__ = [
    "Renderer",
    "emit",
    "gutter_width",
    "layout_context",
    "render",
    "render_collection",
]
