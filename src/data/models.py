"""Domain model for decoded stationboards."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import re
from typing import Any

from src.data.errors import FieldDecodeError

COORD_LIMIT = 1_000_000
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_DATETIME_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def _coord_error(value: Any) -> FieldDecodeError:
    return FieldDecodeError(f"invalid coordinate {value!r}: expected an integer between 0 and {COORD_LIMIT}")


def parse_coord(value: Any) -> int:
    """Decode a map coordinate given as a JSON integer or a string of digits."""
    # bool is an int subclass; JSON true/false is never a coordinate.
    if isinstance(value, int) and not isinstance(value, bool):
        coord = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        try:
            coord = int(value)
        except ValueError as exc:
            raise _coord_error(value) from exc
    else:
        raise _coord_error(value)

    if not 0 <= coord < COORD_LIMIT:
        raise _coord_error(value)
    return coord


def parse_local_datetime(value: Any) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` timestamp as local wall-clock time."""
    if not isinstance(value, str) or not _DATETIME_SHAPE.fullmatch(value):
        raise FieldDecodeError(f"invalid datetime {value!r}: expected YYYY-MM-DD HH:MM:SS")
    try:
        naive = datetime.strptime(value, DATETIME_FORMAT)
    except ValueError as exc:
        raise FieldDecodeError(f"invalid datetime {value!r}: {exc}") from exc
    parsed = naive.astimezone()
    # Wall-clock times skipped by a DST change do not exist locally.
    if parsed.replace(tzinfo=None) != naive:
        raise FieldDecodeError(f"invalid datetime {value!r}: does not exist in the local timezone")
    return parsed


def format_local_datetime(value: datetime) -> str:
    """Format a datetime in the wire pattern, converted to local time."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(DATETIME_FORMAT)


@dataclass(frozen=True)
class Station:
    """A stop as reported by the timetable API."""

    id: str
    name: str
    x: int
    y: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class Connection:
    """One scheduled departure from the stop."""

    time: datetime
    type: str
    type_name: str
    line: str
    operator: str
    color: str
    number: str
    terminal: Station
    line_type: str = ""
    line_number: str = ""
    dep_delay: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "time": format_local_datetime(self.time),
            "*L": self.line_type,
            "*G": self.line_number,
            "type": self.type,
            "type_name": self.type_name,
            "line": self.line,
            "operator": self.operator,
            "color": self.color,
            "number": self.number,
            "terminal": self.terminal.to_dict(),
            "dep_delay": self.dep_delay,
        }


@dataclass(frozen=True)
class Stationboard:
    """A stop plus its upcoming departures, in display order."""

    stop: Station
    connections: tuple[Connection, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "stop": self.stop.to_dict(),
            "connections": [connection.to_dict() for connection in self.connections],
        }


__all__ = [
    "COORD_LIMIT",
    "DATETIME_FORMAT",
    "Station",
    "Connection",
    "Stationboard",
    "parse_coord",
    "parse_local_datetime",
    "format_local_datetime",
]
