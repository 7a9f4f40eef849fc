from __future__ import annotations

import logging
import textwrap

import pytest

from src.config import AppConfig, LoggingConfig, configure_logging, load_config


VALID_YAML = """
backend:
  base_url: "https://timetable.search.ch/api"
  limit: 10
  timeout_seconds: 10

server:
  host: "127.0.0.1"
  port: 8080

logging:
  level: "INFO"
"""


def _write_yaml(tmp_path, contents: str) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(contents))
    return str(path)


def test_load_config_valid(tmp_path, monkeypatch) -> None:
    path = _write_yaml(tmp_path, VALID_YAML)
    monkeypatch.delenv("PORT", raising=False)

    config = load_config(path)

    assert isinstance(config, AppConfig)
    assert config.backend.base_url == "https://timetable.search.ch/api"
    assert config.backend.limit == 10
    assert config.server.host == "127.0.0.1"
    assert config.server.port == 8080
    assert config.log.level == "INFO"


def test_port_env_overrides_config(tmp_path, monkeypatch) -> None:
    path = _write_yaml(tmp_path, VALID_YAML)
    monkeypatch.setenv("PORT", "9090")

    config = load_config(path)

    assert config.server.port == 9090


def test_invalid_port_env(tmp_path, monkeypatch) -> None:
    path = _write_yaml(tmp_path, VALID_YAML)
    monkeypatch.setenv("PORT", "eighty")

    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_missing_file(tmp_path) -> None:
    missing_path = tmp_path / "does_not_exist.yaml"

    with pytest.raises(ValueError):
        load_config(str(missing_path))


def test_load_config_missing_backend_section(tmp_path) -> None:
    yaml_text = """
    server:
      host: "0.0.0.0"
      port: 8080
    logging:
      level: "INFO"
    """
    path = _write_yaml(tmp_path, yaml_text)

    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_missing_base_url(tmp_path) -> None:
    yaml_text = """
    backend:
      limit: 10
      timeout_seconds: 10
    server:
      host: "0.0.0.0"
      port: 8080
    logging:
      level: "INFO"
    """
    path = _write_yaml(tmp_path, yaml_text)

    with pytest.raises(ValueError, match="base_url"):
        load_config(path)


def test_section_must_be_mapping(tmp_path) -> None:
    yaml_text = """
    backend: "nope"
    server:
      host: "0.0.0.0"
      port: 8080
    logging:
      level: "INFO"
    """
    path = _write_yaml(tmp_path, yaml_text)

    with pytest.raises(ValueError, match="mapping"):
        load_config(path)


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging(LoggingConfig(level="chatty"))


def test_configure_logging_sets_level(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(LoggingConfig(level="debug"))

    assert calls[0]["level"] == logging.DEBUG
