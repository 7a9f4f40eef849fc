"""Color values and style directives for board output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re
from typing import Union

from PIL import ImageColor

_HEX_TOKEN = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")


@dataclass(frozen=True)
class Rgb:
    """24-bit color."""

    r: int
    g: int
    b: int

    def css(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class NamedColor(Enum):
    """The eight basic terminal colors: (ANSI index, CSS hex)."""

    BLACK = (0, "#000")
    RED = (1, "#f00")
    GREEN = (2, "#0f0")
    YELLOW = (3, "#ff0")
    BLUE = (4, "#00f")
    MAGENTA = (5, "#f0f")
    CYAN = (6, "#0ff")
    WHITE = (7, "#fff")

    @property
    def ansi_index(self) -> int:
        return self.value[0]

    def css(self) -> str:
        return self.value[1]


Color = Union[Rgb, NamedColor]


@dataclass(frozen=True)
class ColorSpec:
    """Style for one run of output text."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    underline: bool = False


def parse_hex_color(token: str) -> Rgb | None:
    """Decode a 3- or 6-digit hex triplet; anything else yields None."""
    if not _HEX_TOKEN.fullmatch(token):
        return None
    r, g, b = ImageColor.getrgb(f"#{token}")[:3]
    return Rgb(r, g, b)


def parse_color_pair(value: str) -> tuple[Rgb | None, Rgb | None]:
    """Split an upstream ``bg~fg`` color field into (background, foreground)."""
    tokens = value.split("~")
    bg = parse_hex_color(tokens[0])
    fg = parse_hex_color(tokens[1]) if len(tokens) > 1 else None
    return bg, fg


__all__ = ["Rgb", "NamedColor", "Color", "ColorSpec", "parse_hex_color", "parse_color_pair"]
