"""Stylable text sinks: plain text, ANSI terminal and HTML."""

from __future__ import annotations

from abc import ABC, abstractmethod
import html
import io

from src.rendering.colors import Color, ColorSpec, NamedColor

TEXT_PLAIN = "text/plain; charset=UTF-8"
TEXT_HTML = "text/html; charset=UTF-8"

ANSI_RESET = "\x1b[0m"

HTML_BODY_STYLE = "background-color: #000; color: #fff; font-family: monospace; white-space: pre;"


class OutputWriter(ABC):
    """Text sink that may render color and weight changes.

    Output is buffered in memory and handed over by ``finish``.
    """

    def __init__(self) -> None:
        self._buffer = io.BytesIO()
        self._finished = False

    def write(self, text: str) -> None:
        self._emit(text)

    @abstractmethod
    def set_style(self, spec: ColorSpec) -> None:
        """Start a run of text styled by ``spec``."""

    @abstractmethod
    def reset_style(self) -> None:
        """Return to unstyled output."""

    @abstractmethod
    def supports_color(self) -> bool:
        ...

    @abstractmethod
    def content_type(self) -> str:
        ...

    def finish(self) -> bytes:
        """Close the writer and return everything written."""
        self._finished = True
        return self._buffer.getvalue()

    def _emit(self, text: str) -> None:
        if self._finished:
            raise OSError("write to a finished output writer")
        self._buffer.write(text.encode("utf-8"))


class PlainWriter(OutputWriter):
    """Writes text unchanged and drops all styling."""

    def set_style(self, spec: ColorSpec) -> None:
        return

    def reset_style(self) -> None:
        return

    def supports_color(self) -> bool:
        return False

    def content_type(self) -> str:
        return TEXT_PLAIN


def _ansi_color(color: Color, background: bool) -> str:
    if isinstance(color, NamedColor):
        base = 40 if background else 30
        return f"\x1b[{base + color.ansi_index}m"
    layer = 48 if background else 38
    return f"\x1b[{layer};2;{color.r};{color.g};{color.b}m"


class AnsiWriter(OutputWriter):
    """Embeds ANSI SGR escape sequences for terminal clients."""

    def set_style(self, spec: ColorSpec) -> None:
        codes = [ANSI_RESET]
        if spec.bold:
            codes.append("\x1b[1m")
        if spec.underline:
            codes.append("\x1b[4m")
        if spec.fg is not None:
            codes.append(_ansi_color(spec.fg, background=False))
        if spec.bg is not None:
            codes.append(_ansi_color(spec.bg, background=True))
        self._emit("".join(codes))

    def reset_style(self) -> None:
        self._emit(ANSI_RESET)

    def supports_color(self) -> bool:
        return True

    def content_type(self) -> str:
        return TEXT_PLAIN


class HtmlWriter(OutputWriter):
    """Renders styled runs as inline-styled ``<span>`` elements.

    The document shell is written once on construction. Spans never nest:
    starting a new style closes the open span first.
    """

    def __init__(self, title: str) -> None:
        super().__init__()
        self._span_open = False
        self._emit("<!doctype html><html lang=en><head><meta charset=utf-8><title>")
        self.write(title)
        self._emit(f'</title></head><body style="{HTML_BODY_STYLE}">')

    @property
    def span_open(self) -> bool:
        return self._span_open

    def write(self, text: str) -> None:
        self._emit(html.escape(text, quote=True))

    def set_style(self, spec: ColorSpec) -> None:
        self._close_span()
        style = ""
        if spec.fg is not None:
            style += f"color:{spec.fg.css()};"
        if spec.bg is not None:
            style += f"background-color:{spec.bg.css()};"
        if spec.underline:
            style += "text-decoration:underline;"
        if spec.bold:
            style += "font-weight:bold;"
        self._emit(f'<span style="{style}">')
        self._span_open = True

    def reset_style(self) -> None:
        self._close_span()

    def supports_color(self) -> bool:
        return True

    def content_type(self) -> str:
        return TEXT_HTML

    def finish(self) -> bytes:
        if not self._finished:
            self._close_span()
            self._emit("</body></html>")
        return super().finish()

    def _close_span(self) -> None:
        if self._span_open:
            self._emit("</span>")
            self._span_open = False


__all__ = [
    "TEXT_PLAIN",
    "TEXT_HTML",
    "OutputWriter",
    "PlainWriter",
    "AnsiWriter",
    "HtmlWriter",
]
