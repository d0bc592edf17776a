"""Test dataclass configuration and logging setup."""
import dataclasses
import json
import logging

import pytest

from core.observability.logging_setup import JSONFormatter, setup_logging
from patterns.domain_config import BibliotecaConfig


def test_defaults_are_fixed_deployment_values():
    config = BibliotecaConfig.default()
    assert config.server.port == 3000
    assert config.store.database_url == "sqlite+aiosqlite:///./biblioteca.db"
    assert config.logging.level == "INFO"


def test_from_env_without_overrides_equals_default(monkeypatch):
    for name in ("HOST", "PORT", "DATABASE_URL", "DB_POOL_SIZE", "DB_MAX_OVERFLOW",
                 "DB_ECHO", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"BIBLIOTECA_{name}", raising=False)
    assert BibliotecaConfig.from_env() == BibliotecaConfig.default()


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("BIBLIOTECA_PORT", "8080")
    monkeypatch.setenv("BIBLIOTECA_DATABASE_URL", "sqlite+aiosqlite:///other.db")
    monkeypatch.setenv("BIBLIOTECA_DB_ECHO", "true")
    monkeypatch.setenv("BIBLIOTECA_LOG_FORMAT", "json")
    config = BibliotecaConfig.from_env()
    assert config.server.port == 8080
    assert config.store.database_url == "sqlite+aiosqlite:///other.db"
    assert config.store.echo is True
    assert config.logging.format == "json"


def test_config_is_frozen():
    config = BibliotecaConfig.default()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.server.port = 1


def test_json_formatter_includes_store_context():
    record = logging.LogRecord("biblioteca", logging.ERROR, __file__, 1, "boom", None, None)
    record.error_code = "RECORD_NOT_FOUND"
    record.record_id = "abc"
    payload = json.loads(JSONFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert payload["message"] == "boom"
    assert payload["error_code"] == "RECORD_NOT_FOUND"
    assert payload["record_id"] == "abc"
    assert "kind" not in payload


def test_setup_logging_attaches_handler():
    handler = setup_logging("warning", "json")
    try:
        assert handler in logging.root.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(logging.WARNING)
