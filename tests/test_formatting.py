"""Tests for display strings and entry-field parsing."""

import pytest

from pacing.formatting import (
    format_axis_distance,
    format_axis_time,
    format_control_speed,
    format_distance,
    format_duration,
    format_required_speed,
    format_target_minutes,
    parse_speed,
    parse_target_minutes,
)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0m 0s"),
        (59, "0m 59s"),
        (60, "1m 0s"),
        (360, "6m 0s"),
        (3725, "62m 5s"),
        (None, "N/A"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_distance_two_decimals():
    assert format_distance(0.0) == "0.00 miles"
    assert format_distance(2.3456) == "2.35 miles"


def test_format_speeds():
    assert format_control_speed(5.0) == "5.0 mi/h"
    assert format_control_speed(5.1000000001) == "5.1 mi/h"
    assert format_required_speed(8.0) == "8.00 mi/h"
    assert format_required_speed(None) == "N/A"


def test_format_target_minutes():
    assert format_target_minutes(3600) == "60"
    assert format_target_minutes(90) == "1.5"


class TestParseTargetMinutes:
    def test_minutes_to_seconds(self):
        assert parse_target_minutes("45", 3600) == 2700

    def test_fraction_truncated_to_whole_minutes(self):
        assert parse_target_minutes("12.7", 3600) == 720

    def test_no_floor_on_direct_entry(self):
        assert parse_target_minutes("0", 3600) == 0
        assert parse_target_minutes("-5", 3600) == -300

    @pytest.mark.parametrize("text", ["", "abc", "nan", "inf", "-inf", "1e400"])
    def test_invalid_keeps_previous(self, text):
        assert parse_target_minutes(text, 1800) == 1800


class TestParseSpeed:
    def test_parses_decimal(self):
        assert parse_speed(" 6.5 ", 6.0) == 6.5

    @pytest.mark.parametrize("text", ["", "fast", "NaN", "infinity"])
    def test_invalid_keeps_previous(self, text):
        assert parse_speed(text, 6.0) == 6.0

    def test_negative_passes_through(self):
        # floor at zero is applied by the session
        assert parse_speed("-1", 6.0) == -1.0


@pytest.mark.parametrize(
    "value, expected",
    [(0, "0s"), (120.0, "120s"), (299, "299s"), (300, "5m"), (330, "5m"), (3600, "60m")],
)
def test_format_axis_time(value, expected):
    assert format_axis_time(value) == expected


def test_format_axis_distance():
    assert format_axis_distance(0.126) == "0.13mi"
    assert format_axis_distance(1.5) == "1.50mi"
