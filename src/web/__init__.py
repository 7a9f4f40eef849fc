"""HTTP front end."""

from src.web.server import StationboardService, build_server, run_server, select_writer

__all__ = ["StationboardService", "build_server", "run_server", "select_writer"]
