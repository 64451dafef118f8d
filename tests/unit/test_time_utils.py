"""
Unit tests for minute-offset helpers.
"""

import pytest

from day_planner.utils.time_utils import (
    MINUTES_PER_DAY,
    clamp_start_minutes,
    format_minutes,
    parse_time_to_minutes,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("00:00", 0),
        ("09:30", 570),
        (" 23:59 ", 1439),
        ("24:00", None),
        ("12:60", None),
        ("9", None),
        ("ab:cd", None),
        ("", None),
    ],
)
def test_parse_time_to_minutes(value, expected):
    assert parse_time_to_minutes(value) == expected


@pytest.mark.parametrize(
    "minutes,expected",
    [(0, "00:00"), (570, "09:30"), (-30, "-00:30"), (-90, "-01:30"), (1515, "25:15")],
)
def test_format_minutes(minutes, expected):
    assert format_minutes(minutes) == expected


class TestClampStartMinutes:
    """Tests for clamp_start_minutes."""

    def test_inside_window_unchanged(self):
        assert clamp_start_minutes(600, 60) == 600

    def test_before_day_start(self):
        assert clamp_start_minutes(-45, 60) == 0

    def test_past_day_end(self):
        assert clamp_start_minutes(1420, 60) == MINUTES_PER_DAY - 60

    def test_custom_window(self):
        assert clamp_start_minutes(1100, 30, day_start=480, day_end=1080) == 1050

    def test_block_longer_than_window(self):
        assert clamp_start_minutes(500, 700, day_start=480, day_end=1080) == 480
