"""HTTP front end serving rendered stationboards."""

from __future__ import annotations

from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
import logging
from typing import Any, Mapping
from urllib.parse import unquote, urlsplit

from src.config import AppConfig
from src.data.errors import StationboardError
from src.data.search_ch_client import SearchChClient
from src.rendering.board import render_stationboard
from src.rendering.writers import TEXT_PLAIN, AnsiWriter, HtmlWriter, OutputWriter, PlainWriter

logger = logging.getLogger(__name__)

USAGE = """Usage:

  curl <host>/<station>     departures for a station (ANSI colors)
  <host>/<station>          departures for a station (HTML in a browser)
  <host>/help               this page
"""


@dataclass(frozen=True)
class HttpReply:
    """Status, content type and body for one response."""

    status: int
    content_type: str
    body: bytes


def _text_reply(status: int, text: str) -> HttpReply:
    return HttpReply(status=status, content_type=TEXT_PLAIN, body=text.encode("utf-8"))


def select_writer(accept: str | None, user_agent: str | None, host: str | None = None) -> OutputWriter:
    """Pick HTML for browsers, ANSI for curl and plain text for everyone else."""
    if accept and "text/html" in accept:
        return HtmlWriter(title=host or "")
    if user_agent and user_agent.startswith("curl/"):
        return AnsiWriter()
    return PlainWriter()


class StationboardService:
    """Routes request paths to the stationboard lookup."""

    def __init__(self, client: SearchChClient) -> None:
        self._client = client

    def handle(self, path: str, headers: Mapping[str, str]) -> HttpReply:
        route = urlsplit(path).path
        if route in ("/", "/help", "/:help"):
            return _text_reply(200, USAGE)
        if route == "/favicon.ico":
            return _text_reply(404, "Not Found")
        if route.startswith("/~"):
            return _text_reply(501, "search is not implemented")
        if route.startswith("/"):
            station = unquote(route[1:])
            try:
                return self._lookup(station, headers)
            except (StationboardError, OSError) as exc:
                logger.error("internal server error: %s", exc)
                return _text_reply(500, str(exc))
        return _text_reply(404, "Not Found")

    def _lookup(self, station: str, headers: Mapping[str, str]) -> HttpReply:
        writer = select_writer(headers.get("Accept"), headers.get("User-Agent"), headers.get("Host"))
        board = self._client.get_stationboard(station)
        render_stationboard(board, writer)
        return HttpReply(status=200, content_type=writer.content_type(), body=writer.finish())


class StationboardRequestHandler(BaseHTTPRequestHandler):
    service: StationboardService

    def do_GET(self) -> None:  # noqa: N802
        reply = self.service.handle(self.path, self.headers)
        self.send_response(reply.status)
        self.send_header("Content-Type", reply.content_type)
        self.send_header("Content-Length", str(len(reply.body)))
        self.end_headers()
        self.wfile.write(reply.body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug("%s - %s", self.address_string(), format % args)


def build_server(config: AppConfig) -> ThreadingHTTPServer:
    """Create a threaded server bound to the configured address."""
    client = SearchChClient(
        base_url=config.backend.base_url,
        timeout_seconds=config.backend.timeout_seconds,
        limit=config.backend.limit,
    )
    service = StationboardService(client)

    class Handler(StationboardRequestHandler):
        pass

    Handler.service = service
    return ThreadingHTTPServer((config.server.host, config.server.port), Handler)


def run_server(config: AppConfig) -> None:
    """Serve stationboards until interrupted."""
    server = build_server(config)
    logger.info("Listening on http://%s:%d", config.server.host, config.server.port)
    try:
        server.serve_forever()
    finally:
        server.server_close()


__all__ = [
    "HttpReply",
    "USAGE",
    "select_writer",
    "StationboardService",
    "StationboardRequestHandler",
    "build_server",
    "run_server",
]
