# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for CLI commands — next, match, normalize, wait, version."""

from __future__ import annotations

from datetime import datetime
from unittest.mock import patch

from typer.testing import CliRunner

from timefind.cli.app import app

runner = CliRunner()


class TestNextCommand:
    def test_lists_occurrences(self):
        result = runner.invoke(app, ["next", "4 3 * * *", "-n", "3", "--after", "2006-01-02T15:04:05"])
        assert result.exit_code == 0, result.output
        assert "2006-01-03 03:04:00" in result.output
        assert "2006-01-04 03:04:00" in result.output
        assert "2006-01-05 03:04:00" in result.output
        assert "2006-01-06 03:04:00" not in result.output

    def test_default_count_from_settings(self, monkeypatch):
        monkeypatch.setenv("TIMEFIND_DEFAULT_COUNT", "2")
        result = runner.invoke(app, ["next", "4 3 * * *", "--after", "2006-01-02 15:04:05"])
        assert result.exit_code == 0, result.output
        assert "2006-01-04 03:04:00" in result.output
        assert "2006-01-05 03:04:00" not in result.output

    def test_invalid_expression(self):
        result = runner.invoke(app, ["next", "60 * * * *"])
        assert result.exit_code == 2
        assert "Invalid expression" in result.output

    def test_unsatisfiable_expression(self):
        result = runner.invoke(app, ["next", "0 0 30 2 *", "--after", "2006-01-02T00:00:00"])
        assert result.exit_code == 2
        assert "No date was selected" in result.output


class TestMatchCommand:
    def test_matching_timestamp(self):
        result = runner.invoke(app, ["match", "4 15 * * 1", "2006-01-02T15:04:05"])
        assert result.exit_code == 0
        assert "matches" in result.output

    def test_non_matching_timestamp(self):
        result = runner.invoke(app, ["match", "4 15 * * 0", "2006-01-02T15:04:05"])
        assert result.exit_code == 1
        assert "does not match" in result.output


class TestNormalizeCommand:
    def test_canonical_form(self):
        result = runner.invoke(app, ["normalize", "0,30 3 * 1 *"])
        assert result.exit_code == 0
        assert result.output.strip() == "0,30 3 * 1 *"

    def test_collapses_full_fields_and_sunday(self):
        result = runner.invoke(app, ["normalize", "0-59 */1 * * 7"])
        assert result.exit_code == 0
        assert result.output.strip() == "* * * * 0"

    def test_wrong_field_count(self):
        result = runner.invoke(app, ["normalize", "* * *"])
        assert result.exit_code == 2
        assert "five entries" in result.output


class TestWaitCommand:
    def test_prints_fired_occurrence(self):
        fired = datetime(2006, 1, 3, 3, 4)
        with patch("timefind.sdk.wait_next_sync", return_value=fired) as mock_wait:
            result = runner.invoke(app, ["wait", "4 3 * * *"])
        assert result.exit_code == 0, result.output
        assert "2006-01-03 03:04:00" in result.output
        mock_wait.assert_called_once()


class TestVersionCommand:
    def test_version(self):
        from timefind import __version__

        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"timefind v{__version__}" in result.output
