"""search.ch timetable API client."""

from __future__ import annotations

import logging
from typing import Any

import requests

from src.data.decoder import decode_stationboard
from src.data.errors import BackendClientError, StationboardError
from src.data.models import Stationboard

SEARCH_CH_API_BASE = "https://timetable.search.ch/api"
DEFAULT_LIMIT = 10

logger = logging.getLogger(__name__)


class SearchChClient:
    """Thin wrapper around the search.ch stationboard endpoint using requests."""

    def __init__(
        self,
        base_url: str = SEARCH_CH_API_BASE,
        timeout_seconds: float = 10,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._limit = limit

    def get_stationboard(self, station: str, date: str | None = None, time: str | None = None) -> Stationboard:
        """Fetch and decode the departures for a station name or id."""
        params: dict[str, Any] = {
            "stop": station,
            "limit": self._limit,
            "show_delays": 1,
        }
        if date is not None:
            params["date"] = date
        if time is not None:
            params["time"] = time
        body = self._get("/stationboard.json", params=params)
        try:
            return decode_stationboard(body)
        except StationboardError as exc:
            logger.debug("stationboard decode failed for %r: %s", station, exc)
            raise

    def _get(self, path: str, params: dict[str, Any] | None = None) -> bytes:
        url = f"{self._base_url}{path}"
        logger.info("stationboard request %s params=%s", url, params)
        try:
            response = requests.get(url, params=params, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise BackendClientError(f"timetable API request failed: {exc}") from exc

        if response.status_code != 200:
            body_text = response.text.strip()
            detail = f"Status {response.status_code}"
            if body_text:
                detail = f"{detail}, Body: {body_text}"
            raise BackendClientError(f"timetable API request failed: {detail}")

        return response.content


__all__ = ["SEARCH_CH_API_BASE", "DEFAULT_LIMIT", "SearchChClient"]
