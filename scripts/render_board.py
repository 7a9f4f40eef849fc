"""Render a stationboard to stdout, from the live API or a saved response."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from src.config import configure_logging, load_config
from src.data.decoder import decode_stationboard
from src.data.errors import StationboardError
from src.data.models import Stationboard
from src.data.search_ch_client import SearchChClient
from src.rendering import AnsiWriter, HtmlWriter, OutputWriter, PlainWriter, render_stationboard


def _make_writer(output_format: str, title: str) -> OutputWriter:
    if output_format == "html":
        return HtmlWriter(title=title)
    if output_format == "ansi":
        return AnsiWriter()
    return PlainWriter()


def _load_board(args: argparse.Namespace) -> Stationboard:
    if args.file:
        return decode_stationboard(Path(args.file).read_bytes())

    config = load_config(args.config)
    configure_logging(config.log)
    client = SearchChClient(
        base_url=config.backend.base_url,
        timeout_seconds=config.backend.timeout_seconds,
        limit=config.backend.limit,
    )
    return client.get_stationboard(args.station)


def main() -> int:
    parser = argparse.ArgumentParser()
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("station", nargs="?", help="Station name or id to look up")
    source.add_argument("--file", help="Saved stationboard.json response to render")
    parser.add_argument(
        "--format",
        choices=["plain", "ansi", "html"],
        default="ansi",
        help="Output encoding",
    )
    parser.add_argument("--config", default="config/config.yaml", help="Path to the YAML config file")
    args = parser.parse_args()

    try:
        board = _load_board(args)
    except (StationboardError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    writer = _make_writer(args.format, board.stop.name)
    render_stationboard(board, writer)
    sys.stdout.buffer.write(writer.finish())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
