"""Text layout of a stationboard, driven through an OutputWriter."""

from __future__ import annotations

from src.data.models import Connection, Stationboard
from src.rendering.colors import ColorSpec, NamedColor, parse_color_pair
from src.rendering.writers import OutputWriter

LINE_WIDTH = 3
TERMINAL_WIDTH = 30
HEADER_STYLE = ColorSpec(fg=NamedColor.WHITE, bold=True)


def _write_connection(writer: OutputWriter, connection: Connection) -> None:
    bg, fg = parse_color_pair(connection.color)
    writer.set_style(ColorSpec(fg=fg, bg=bg, bold=True))
    writer.write(f"{connection.line:^{LINE_WIDTH}}")
    writer.reset_style()

    writer.write(f" {connection.terminal.name:<{TERMINAL_WIDTH}}")
    writer.write(f" {connection.time.astimezone():%H:%M}")
    if connection.dep_delay is not None:
        writer.write(f" {connection.dep_delay}")

    writer.reset_style()
    writer.write("\n")


def render_stationboard(board: Stationboard, writer: OutputWriter) -> None:
    """Write the header and one line per departure, in board order."""
    writer.set_style(HEADER_STYLE)
    writer.write(f"Timetable for {board.stop.name}")
    writer.reset_style()
    writer.write("\n")

    for connection in board.connections:
        _write_connection(writer, connection)


__all__ = ["render_stationboard"]
