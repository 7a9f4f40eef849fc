"""Configuration loader for the stationboard server."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Any

from dotenv import load_dotenv
import yaml

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class BackendConfig:
    """Timetable API configuration."""

    base_url: str
    limit: int
    timeout_seconds: float


@dataclass(frozen=True)
class ServerConfig:
    """HTTP listener configuration."""

    host: str
    port: int


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    backend: BackendConfig
    server: ServerConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _require_section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = _require_key(data, name, name)
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' config must be a mapping")
    return section


def _port_override(default: int) -> int:
    raw = os.environ.get("PORT")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from exc


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    backend_section = _require_section(data, "backend")
    server_section = _require_section(data, "server")
    logging_section = _require_section(data, "logging")

    backend = BackendConfig(
        base_url=_require_key(backend_section, "base_url", "backend"),
        limit=_require_key(backend_section, "limit", "backend"),
        timeout_seconds=_require_key(backend_section, "timeout_seconds", "backend"),
    )

    server = ServerConfig(
        host=_require_key(server_section, "host", "server"),
        port=_port_override(_require_key(server_section, "port", "server")),
    )

    log = LoggingConfig(
        level=_require_key(logging_section, "level", "logging"),
    )

    return AppConfig(backend=backend, server=server, log=log)


def configure_logging(config: LoggingConfig) -> None:
    """Install the root log handler at the configured level."""
    level = logging.getLevelName(str(config.level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = [
    "AppConfig",
    "BackendConfig",
    "ServerConfig",
    "LoggingConfig",
    "load_config",
    "configure_logging",
]
