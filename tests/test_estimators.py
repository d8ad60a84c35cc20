"""Tests for the catch-up and required-speed projections."""

import math

import pytest

from pacing.estimators import build_readout, catch_up_seconds, required_speed
from pacing.model import Goal, Sample, SimulationState


class TestCatchUp:
    def test_not_applicable_when_slower(self):
        latest = Sample(time=60, distance=0.05, reference_distance=0.1)
        assert catch_up_seconds(latest, current_speed=5.0, reference_speed=6.0) is None

    def test_not_applicable_when_equal_speed(self):
        latest = Sample(time=60, distance=0.05, reference_distance=0.1)
        assert catch_up_seconds(latest, current_speed=6.0, reference_speed=6.0) is None

    def test_tenth_of_a_mile_at_one_mph_faster(self):
        latest = Sample(time=360, distance=0.4, reference_distance=0.5)
        assert catch_up_seconds(latest, current_speed=6.0, reference_speed=5.0) == 360

    def test_already_ahead_reports_zero(self):
        latest = Sample(time=120, distance=0.3, reference_distance=0.2)
        assert catch_up_seconds(latest, current_speed=7.0, reference_speed=5.0) == 0

    def test_level_reports_zero(self):
        latest = Sample(time=0, distance=0.0, reference_distance=0.0)
        assert catch_up_seconds(latest, current_speed=7.0, reference_speed=5.0) == 0

    def test_rounds_to_nearest_second(self):
        # 0.0999 mi at 1 mi/h -> 359.64 s
        latest = Sample(time=10, distance=1.0, reference_distance=1.0999)
        assert catch_up_seconds(latest, current_speed=6.0, reference_speed=5.0) == 360
        # 0.1001 mi at 1 mi/h -> 360.36 s
        latest = Sample(time=10, distance=1.0, reference_distance=1.1001)
        assert catch_up_seconds(latest, current_speed=6.0, reference_speed=5.0) == 360

    @pytest.mark.parametrize("lead", [0.01, 0.1, 0.25, 1.0])
    def test_result_is_non_negative_integer(self, lead):
        latest = Sample(time=600, distance=1.0, reference_distance=1.0 + lead)
        result = catch_up_seconds(latest, current_speed=8.0, reference_speed=6.5)
        assert isinstance(result, int)
        assert result >= 0

    def test_nan_speed_is_not_applicable(self):
        latest = Sample(time=60, distance=0.05, reference_distance=0.1)
        assert catch_up_seconds(latest, current_speed=math.nan, reference_speed=5.0) is None


class TestRequiredSpeed:
    def test_halfway_scenario(self):
        result = required_speed(
            target_seconds=3600, elapsed_seconds=1800, reference_speed=6.0, cumulative_distance=2.0
        )
        assert result == pytest.approx(8.0)

    def test_at_start_matches_reference(self):
        result = required_speed(3600, 0, 6.0, 0.0)
        assert result == pytest.approx(6.0)

    def test_window_elapsed_is_not_applicable(self):
        assert required_speed(3600, 3600, 6.0, 2.0) is None
        assert required_speed(3600, 4000, 6.0, 2.0) is None

    def test_goal_already_met_is_not_applicable(self):
        assert required_speed(3600, 1800, 6.0, 6.0) is None
        assert required_speed(3600, 1800, 6.0, 7.5) is None

    def test_negative_target_is_not_applicable(self):
        assert required_speed(-60, 0, 6.0, 0.0) is None

    def test_zero_reference_is_not_applicable(self):
        assert required_speed(3600, 0, 0.0, 0.0) is None

    def test_nan_reference_is_not_applicable(self):
        assert required_speed(3600, 100, math.nan, 0.1) is None


class TestBuildReadout:
    def test_initial_readout(self):
        readout = build_readout(SimulationState(), Sample(0, 0.0, 0.0), Goal())
        assert readout.elapsed_seconds == 0
        assert readout.catch_up_seconds is None  # 5.0 < 6.0
        assert readout.required_speed == pytest.approx(6.0)
        assert readout.max_time == 300
        assert readout.running is False

    def test_max_time_tracks_elapsed_past_five_minutes(self):
        state = SimulationState(elapsed_seconds=451, cumulative_distance=0.6)
        readout = build_readout(state, Sample(451, 0.6, 0.75), Goal())
        assert readout.max_time == 451
        assert readout.reference_distance == pytest.approx(0.75)
