"""Tests for pyfilereader.logging_config module."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pyfilereader import logging_config
from pyfilereader.logging_config import (
    JsonFormatter,
    LogFormat,
    LogLevel,
    ReaderLogger,
    StructuredFormatter,
    configure_logging,
    enable_debug_logging,
    get_logger,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("pyfilereader", logging.INFO, "x.py", 1, "hello", None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


class TestLogEnums:
    def test_values(self):
        assert LogLevel.DEBUG == "DEBUG"
        assert LogLevel.WARNING == "WARNING"
        assert LogFormat.SIMPLE == "simple"
        assert LogFormat.JSON == "json"


class TestReaderLogger:
    def test_init_default(self):
        logger = ReaderLogger()
        assert logger.name == "pyfilereader"
        assert logger.level == LogLevel.INFO
        assert len(logger.logger.handlers) == 1

    def test_init_custom(self):
        logger = ReaderLogger(name="test", level=LogLevel.DEBUG, format_type=LogFormat.JSON)
        assert logger.name == "test"
        assert isinstance(logger.logger.handlers[0].formatter, JsonFormatter)

    def test_with_file_logging(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "reader.log"
        logger = ReaderLogger(
            name="file-test", log_file=log_file, enable_file=True, enable_console=False
        )
        logger.log_search_complete("fox", 3, 1.5)
        for handler in logger.logger.handlers:
            handler.flush()
        assert "results=3" in log_file.read_text(encoding="utf-8")

    def test_domain_helpers_do_not_raise(self):
        logger = ReaderLogger(name="helpers", enable_console=False)
        logger.log_load("f.txt", 3, "utf-8", 0.5)
        logger.log_search_start("fox", True, lines=3)
        logger.log_file_error("f.txt", "boom", operation="read")

    def test_level_methods_route_to_logging(self, monkeypatch):
        logger = ReaderLogger(name="levels", enable_console=False)
        calls = []
        monkeypatch.setattr(logger.logger, "error", lambda msg, extra: calls.append((msg, extra)))
        logger.log_file_error("f.txt", "boom", operation="read")
        assert calls and "boom" in calls[0][0]
        assert not hasattr(logger, "warning")
        assert not hasattr(logger, "exception")


class TestFormatters:
    def test_json_formatter_includes_extra(self):
        out = json.loads(JsonFormatter().format(_record(operation="load")))
        assert out["message"] == "hello"
        assert out["operation"] == "load"

    def test_structured_formatter_includes_extra(self):
        out = StructuredFormatter().format(_record(pattern="fox"))
        assert "[INFO] pyfilereader: hello" in out
        assert "pattern=fox" in out


class TestGlobalLogger:
    def test_returns_same_instance(self):
        assert get_logger() is get_logger()

    def test_configure_replaces_instance(self, monkeypatch):
        monkeypatch.setattr(logging_config, "_global_logger", None)
        configured = configure_logging(level=LogLevel.ERROR, enable_console=False)
        assert get_logger() is configured

    def test_enable_debug(self, monkeypatch):
        monkeypatch.setattr(logging_config, "_global_logger", None)
        enable_debug_logging()
        assert get_logger().logger.level == logging.DEBUG
