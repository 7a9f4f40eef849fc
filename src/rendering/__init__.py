"""Rendering utilities for stationboard output."""

from src.rendering.board import render_stationboard
from src.rendering.colors import ColorSpec, NamedColor, Rgb, parse_color_pair, parse_hex_color
from src.rendering.writers import AnsiWriter, HtmlWriter, OutputWriter, PlainWriter

__all__ = [
    "AnsiWriter",
    "ColorSpec",
    "HtmlWriter",
    "NamedColor",
    "OutputWriter",
    "PlainWriter",
    "Rgb",
    "parse_color_pair",
    "parse_hex_color",
    "render_stationboard",
]
