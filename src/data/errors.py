"""Error types raised while fetching and decoding stationboards."""

from __future__ import annotations


class StationboardError(Exception):
    """Base error for anything that prevents a stationboard from being shown."""


class MalformedResponseError(StationboardError):
    """Raised when the upstream payload does not have the expected shape."""


class FieldDecodeError(MalformedResponseError):
    """Raised when a single field holds a value that cannot be decoded."""


class UpstreamReportedError(StationboardError):
    """Raised when the upstream API answered with a message instead of data."""


class BackendClientError(StationboardError):
    """Raised when a timetable API request fails or returns a non-200 response."""


__all__ = [
    "StationboardError",
    "MalformedResponseError",
    "FieldDecodeError",
    "UpstreamReportedError",
    "BackendClientError",
]
