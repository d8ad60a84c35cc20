"""Tests for the history buffer and model helpers."""

import numpy as np
import pytest

from pacing.history import HistoryBuffer, samples_to_arrays
from pacing.model import (
    SEED_SAMPLE,
    Sample,
    distance_increment,
    reference_distance_at,
    visible_window,
)


def test_seeded_buffer():
    history = HistoryBuffer()
    assert len(history) == 1
    assert history.latest == SEED_SAMPLE
    assert list(history) == [Sample(0, 0.0, 0.0)]


def test_append_in_order():
    history = HistoryBuffer()
    history.append(Sample(1, 0.001, 0.002))
    history.append(Sample(2, 0.002, 0.003))
    assert [s.time for s in history] == [0, 1, 2]
    assert history.latest.time == 2


@pytest.mark.parametrize("time", [0, -1])
def test_append_rejects_out_of_order(time):
    history = HistoryBuffer()
    with pytest.raises(ValueError):
        history.append(Sample(time, 0.0, 0.0))


def test_arrays_from_buffer_directly():
    history = HistoryBuffer()
    history.append(Sample(1, 0.1, 0.2))
    times, distances, references = samples_to_arrays(history)
    np.testing.assert_array_equal(times, [0.0, 1.0])
    np.testing.assert_array_equal(distances, [0.0, 0.1])
    np.testing.assert_array_equal(references, [0.0, 0.2])


def test_samples_are_immutable():
    with pytest.raises(AttributeError):
        SEED_SAMPLE.distance = 1.0


def test_as_arrays():
    history = HistoryBuffer()
    history.append(Sample(1, 0.5, 0.25))
    times, distances, references = history.as_arrays()
    np.testing.assert_array_equal(times, [0.0, 1.0])
    np.testing.assert_array_equal(distances, [0.0, 0.5])
    np.testing.assert_array_equal(references, [0.0, 0.25])


def test_distance_increment_per_second():
    assert distance_increment(3600.0) == pytest.approx(1.0)
    assert distance_increment(0.0) == 0.0


def test_reference_distance_at():
    assert reference_distance_at(1800, 6.0) == pytest.approx(3.0)
    assert reference_distance_at(0, 6.0) == 0.0


@pytest.mark.parametrize("elapsed, expected", [(0, 300), (299, 300), (300, 300), (901, 901)])
def test_visible_window(elapsed, expected):
    assert visible_window(elapsed) == expected
