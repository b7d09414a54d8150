"""
Tests for formatters — durations and percentages
"""

import pytest

from gtm.presentation.formatters import format_duration, format_duration_long, format_percent


class TestFormatDuration:
    """Compact durations."""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0s"),
        (45, "45s"),
        (60, "1m"),
        (61, "1m1s"),
        (3600, "1h"),
        (5400, "1h30m"),
        (3661, "1h1m1s"),
        (90000, "25h"),
    ])
    def test_values(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            format_duration(-1)


class TestFormatDurationLong:
    """Verbose durations."""

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0 seconds"),
        (1, "1 second"),
        (120, "2 minutes"),
        (3601, "1 hour 1 second"),
        (5400, "1 hour 30 minutes"),
        (7322, "2 hours 2 minutes 2 seconds"),
    ])
    def test_values(self, seconds, expected):
        assert format_duration_long(seconds) == expected


class TestFormatPercent:

    def test_share(self):
        assert format_percent(1, 3) == "33.3%"

    def test_whole(self):
        assert format_percent(60, 60) == "100.0%"

    def test_zero_total(self):
        assert format_percent(0, 0) == "0.0%"
