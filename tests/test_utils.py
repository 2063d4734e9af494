"""Tests for utility helpers."""

import logging
from datetime import datetime

import pytest

from covidbot.utils import current_hour, format_number, log_diagnostic, to_number


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize("value,expected", [
        (125000000, "125,000,000"),
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (None, "0"),
        ("not a number", "0"),
        (float("nan"), "0"),
        ("4500", "4,500"),
        (1234.5, "1,234.5"),
        (2.0, "2"),
    ])
    def test_values(self, value, expected):
        assert format_number(value) == expected


class TestToNumber:

    def test_bool_is_zero(self):
        assert to_number(True) == 0

    def test_integral_float_becomes_int(self):
        assert isinstance(to_number(3.0), int)


class TestCurrentHour:

    def test_in_range(self):
        assert 0 <= current_hour() < 24

    def test_timezone(self):
        assert 0 <= current_hour("Asia/Tokyo") < 24


class TestLogDiagnostic:

    def test_silent_when_not_verbose(self, caplog):
        logger = logging.getLogger("covidbot.test")
        with caplog.at_level(logging.INFO, logger="covidbot.test"):
            log_diagnostic(logger, False, "Payload", {"a": 1})
        assert caplog.records == []

    def test_logs_when_verbose(self, caplog):
        logger = logging.getLogger("covidbot.test")
        with caplog.at_level(logging.INFO, logger="covidbot.test"):
            log_diagnostic(logger, True, "Payload", {"when": datetime(2021, 1, 1)})
        assert "Payload" in caplog.text
        assert "2021-01-01" in caplog.text
