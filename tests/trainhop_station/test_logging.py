"""Tests for structlog configuration."""

from __future__ import annotations

import io
import json
import logging

import pytest
import structlog

from trainhop_station.core.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def _lines(stream: io.StringIO) -> list[str]:
    return [line for line in stream.getvalue().splitlines() if line]


class TestSetupLogging:
    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("TRAINHOP_LOG_FORMAT", "json")
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)

        structlog.contextvars.bind_contextvars(revision="abc123")
        structlog.get_logger("trainhop_station.test").info("resolver.cache_hit", key="git2hg:a")

        record = json.loads(_lines(stream)[-1])
        assert record["event"] == "resolver.cache_hit"
        assert record["key"] == "git2hg:a"
        assert record["revision"] == "abc123"
        assert record["level"] == "info"
        assert record["logger"] == "trainhop_station.test"

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("TRAINHOP_LOG_LEVEL", "warning")
        monkeypatch.setenv("TRAINHOP_LOG_FORMAT", "json")
        stream = io.StringIO()
        setup_logging(stream=stream)

        log = structlog.get_logger("trainhop_station.test")
        log.info("schedule.fetched")
        log.warning("schedule.fetch_failed")

        events = [json.loads(line)["event"] for line in _lines(stream)]
        assert events == ["schedule.fetch_failed"]

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("TRAINHOP_LOG_LEVEL", "ERROR")
        setup_logging("DEBUG", stream=io.StringIO())
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_format_renders_console(self, monkeypatch):
        monkeypatch.setenv("TRAINHOP_LOG_FORMAT", "xml")
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)

        structlog.get_logger("trainhop_station.test").info("readiness.assessed")

        assert "readiness.assessed" in stream.getvalue()

    def test_http_client_loggers_quietened(self):
        setup_logging("DEBUG", stream=io.StringIO())
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
