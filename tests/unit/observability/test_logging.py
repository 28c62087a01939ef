"""Unit tests for the structlog helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from advanced_search.observability.logging import JsonLoggerFactory, get_logger, truncate_values


class TestTruncateValues:
    def test_short_values_untouched(self) -> None:
        event = {"event": "x", "value": ["a", "b"]}
        assert truncate_values(None, "info", dict(event)) == event

    def test_long_values_shortened(self) -> None:
        out = truncate_values(None, "info", {"event": "x", "value": list(range(500))})
        assert isinstance(out["value"], str)
        assert len(out["value"]) == 200
        assert out["value"].endswith("...")

    def test_scalars_untouched(self) -> None:
        assert truncate_values(None, "info", {"n": 10 ** 300})["n"] == 10 ** 300


class TestGetLogger:
    def test_bound_values(self) -> None:
        log = get_logger("search.test", session="s1")
        with capture_logs() as logs:
            log.info("hello", extra=1)
        assert logs == [{"event": "hello", "extra": 1, "session": "s1", "log_level": "info"}]


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _reset(self):
        root = logging.getLogger()
        level, handlers = root.level, list(root.handlers)
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        structlog.get_logger("search.json").info("search_config_changed", conditions=2)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "search_config_changed"
        assert payload["conditions"] == 2
        assert payload["level"] == "info"
        assert payload["logger"] == "search.json"

    def test_sets_root_level(self) -> None:
        JsonLoggerFactory.configure("WARNING")
        assert logging.getLogger().level == logging.WARNING
