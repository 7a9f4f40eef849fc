"""Decoder for search.ch stationboard JSON responses."""

from __future__ import annotations

import json
from typing import Any

from src.data.errors import FieldDecodeError, MalformedResponseError, UpstreamReportedError
from src.data.models import Connection, Station, Stationboard, parse_coord, parse_local_datetime

MALFORMED_RESPONSE = "malformed response from backend"


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise FieldDecodeError(f"missing field '{key}' in {context}")
    return mapping[key]


def _require_mapping(value: Any, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise FieldDecodeError(f"invalid {context} {value!r}: expected an object")
    return value


def _as_str(value: Any, key: str, context: str) -> str:
    if not isinstance(value, str):
        raise FieldDecodeError(f"invalid '{key}' in {context}: {value!r} is not a string")
    return value


def _require_str(mapping: dict[str, Any], key: str, context: str) -> str:
    return _as_str(_require_key(mapping, key, context), key, context)


def _optional_str(mapping: dict[str, Any], key: str, context: str, default: str | None) -> str | None:
    value = mapping.get(key)
    if value is None:
        return default
    return _as_str(value, key, context)


def decode_station(value: Any, context: str = "station") -> Station:
    """Build a Station from its JSON object."""
    data = _require_mapping(value, context)
    return Station(
        id=_require_str(data, "id", context),
        name=_require_str(data, "name", context),
        x=parse_coord(_require_key(data, "x", context)),
        y=parse_coord(_require_key(data, "y", context)),
    )


def decode_connection(value: Any) -> Connection:
    """Build a Connection from its JSON object."""
    context = "connection"
    data = _require_mapping(value, context)
    return Connection(
        time=parse_local_datetime(_require_key(data, "time", context)),
        line_type=_optional_str(data, "*L", context, ""),
        line_number=_optional_str(data, "*G", context, ""),
        type=_require_str(data, "type", context),
        type_name=_require_str(data, "type_name", context),
        line=_require_str(data, "line", context),
        operator=_require_str(data, "operator", context),
        color=_require_str(data, "color", context),
        number=_require_str(data, "number", context),
        terminal=decode_station(_require_key(data, "terminal", context), "terminal"),
        dep_delay=_optional_str(data, "dep_delay", context, None),
    )


def _decode_messages(envelope: dict[str, Any]) -> list[str]:
    messages = envelope.get("messages")
    if messages is None:
        return []
    if not isinstance(messages, list):
        raise FieldDecodeError(f"invalid 'messages' in response: {messages!r} is not a list")
    return [_as_str(message, "messages", "response") for message in messages]


def _decode_eof(envelope: dict[str, Any]) -> int:
    eof = _require_key(envelope, "eof", "response")
    if isinstance(eof, bool) or not isinstance(eof, int) or not 0 <= eof <= 255:
        raise FieldDecodeError(f"invalid 'eof' in response: {eof!r}")
    return eof


def decode_stationboard(payload: bytes | str) -> Stationboard:
    """Decode an upstream response into a Stationboard.

    The response only counts as data when it carries both ``stop`` and
    ``connections``. Otherwise the last upstream message is raised as an
    UpstreamReportedError, and a response with neither is malformed.
    """
    try:
        envelope = json.loads(payload)
    except ValueError as exc:
        raise MalformedResponseError(f"invalid JSON from backend: {exc}") from exc
    if not isinstance(envelope, dict):
        raise MalformedResponseError(f"{MALFORMED_RESPONSE}: expected a JSON object")

    raw_stop = envelope.get("stop")
    raw_connections = envelope.get("connections")
    messages = _decode_messages(envelope)
    _require_str(envelope, "request", "response")
    _decode_eof(envelope)

    stop = decode_station(raw_stop, "stop") if raw_stop is not None else None
    connections = None
    if raw_connections is not None:
        if not isinstance(raw_connections, list):
            raise FieldDecodeError(f"invalid 'connections' in response: {raw_connections!r} is not a list")
        connections = tuple(decode_connection(item) for item in raw_connections)

    if stop is not None and connections is not None:
        return Stationboard(stop=stop, connections=connections)

    if messages:
        # The most specific message comes last.
        raise UpstreamReportedError(messages[-1])

    raise MalformedResponseError(MALFORMED_RESPONSE)


__all__ = ["MALFORMED_RESPONSE", "decode_station", "decode_connection", "decode_stationboard"]
