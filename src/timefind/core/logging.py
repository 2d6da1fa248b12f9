# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Structured logging for the timefind logger tree.

Records may carry ``constraint`` and ``occurrence`` extras (the
canonical expression and the ISO timestamp being waited for); both
formatters surface them when present.
"""

import json
import logging
import sys
from typing import Any

CONTEXT_KEYS = ("constraint", "occurrence")


def _context(record: logging.LogRecord) -> dict[str, str]:
    return {key: str(getattr(record, key)) for key in CONTEXT_KEYS if hasattr(record, key)}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update(_context(record))
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        context = _context(record)
        if not context:
            return msg
        return msg + " " + " ".join(f"{k}={v!r}" for k, v in context.items())


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    root = logging.getLogger("timefind")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            TextFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root.addHandler(handler)
