# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import logging
from datetime import datetime

import pytest

# Mon Jan 2 15:04:05 2006
REFERENCE_TIME = datetime(2006, 1, 2, 15, 4, 5)


@pytest.fixture
def reference_time() -> datetime:
    return REFERENCE_TIME


@pytest.fixture(autouse=True)
def _reset_timefind_logger():
    """Drop handlers installed by setup_logging between tests."""
    logger = logging.getLogger("timefind")
    saved_level = logger.level
    yield
    logger.handlers.clear()
    logger.setLevel(saved_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep TIMEFIND_* variables from the host out of the settings."""
    import os

    for key in list(os.environ):
        if key.startswith("TIMEFIND_"):
            monkeypatch.delenv(key)
