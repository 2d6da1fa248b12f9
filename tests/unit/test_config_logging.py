# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for settings and logging setup."""

from __future__ import annotations

import json
import logging

import pytest
from pydantic import ValidationError

from timefind.core.config import Settings, get_settings
from timefind.core.constants import WAIT_MARGIN_SECONDS
from timefind.core.logging import JsonFormatter, TextFormatter, setup_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.wait_margin_seconds == WAIT_MARGIN_SECONDS
        assert settings.default_count == 5

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TIMEFIND_WAIT_MARGIN_SECONDS", "2.5")
        monkeypatch.setenv("TIMEFIND_LOG_FORMAT", "TEXT")
        settings = get_settings()
        assert settings.wait_margin_seconds == 2.5
        assert settings.log_format == "text"

    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(log_format="xml")


class TestLogging:
    def _record(
        self, msg: str = "hello %s", args=("world",), exc_info=None, **extra
    ) -> logging.LogRecord:
        record = logging.LogRecord(
            name="timefind.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg=msg,
            args=args,
            exc_info=exc_info,
        )
        record.__dict__.update(extra)
        return record

    def test_json_formatter(self):
        entry = json.loads(JsonFormatter().format(self._record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "timefind.test"
        assert entry["message"] == "hello world"
        assert "exception" not in entry
        assert "constraint" not in entry

    def test_json_formatter_includes_constraint_context(self):
        record = self._record(constraint="4 3 * * *", occurrence="2006-01-03T03:04:00")
        entry = json.loads(JsonFormatter().format(record))
        assert entry["constraint"] == "4 3 * * *"
        assert entry["occurrence"] == "2006-01-03T03:04:00"

    def test_json_formatter_includes_exception(self):
        try:
            raise ValueError("bad selector")
        except ValueError:
            import sys

            record = self._record(exc_info=sys.exc_info())
        entry = json.loads(JsonFormatter().format(record))
        assert entry["exception"] == "bad selector"

    def test_text_formatter(self):
        line = TextFormatter("[%(levelname)s] %(name)s: %(message)s").format(self._record())
        assert line == "[INFO] timefind.test: hello world"

    def test_text_formatter_appends_constraint_context(self):
        record = self._record(constraint="0 9 * * 1-5")
        line = TextFormatter("%(message)s").format(record)
        assert line == "hello world constraint='0 9 * * 1-5'"

    def test_setup_logging_json(self):
        setup_logging("debug", "json")
        logger = logging.getLogger("timefind")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_setup_logging_replaces_handlers(self):
        setup_logging("INFO", "json")
        setup_logging("WARNING", "text")
        logger = logging.getLogger("timefind")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, TextFormatter)
        assert logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("LOUD", "text")
        assert logging.getLogger("timefind").level == logging.INFO
