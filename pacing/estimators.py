"""
Pace projections derived from the latest run state.

Both estimators are pure functions. They return None when the projection
is not applicable; callers render that as "N/A".
"""
import math
from typing import Optional

from pacing.model import (
    SECONDS_PER_HOUR,
    Goal,
    Readout,
    Sample,
    SimulationState,
    visible_window,
)


def _has_nan(*values: float) -> bool:
    return any(isinstance(v, float) and math.isnan(v) for v in values)


def catch_up_seconds(latest: Sample, current_speed: float, reference_speed: float) -> Optional[int]:
    """
    Seconds until the runner draws level with the reference pace.

    Args:
        latest: Most recent history sample
        current_speed: Runner speed in mi/h
        reference_speed: Reference speed in mi/h

    Returns:
        Whole seconds (>= 0), or None if the runner is not faster
        than the reference.
    """
    if _has_nan(latest.distance, latest.reference_distance, current_speed, reference_speed):
        return None
    if current_speed <= reference_speed:
        return None

    distance_diff = latest.reference_distance - latest.distance
    speed_diff = current_speed - reference_speed
    # Half-up rounding; negative values are clamped below anyway.
    seconds = math.floor(distance_diff / speed_diff * SECONDS_PER_HOUR + 0.5)
    return max(0, seconds)


def required_speed(
    target_seconds: int,
    elapsed_seconds: int,
    reference_speed: float,
    cumulative_distance: float,
) -> Optional[float]:
    """
    Constant speed (mi/h) needed over the remaining window to match the
    reference distance at target_seconds.

    Returns None once the window has elapsed or the goal distance is
    already covered.
    """
    if _has_nan(reference_speed, cumulative_distance):
        return None

    remaining_seconds = target_seconds - elapsed_seconds
    if remaining_seconds <= 0:
        return None

    distance_to_go = reference_speed * target_seconds / SECONDS_PER_HOUR - cumulative_distance
    speed = distance_to_go / remaining_seconds * SECONDS_PER_HOUR
    if math.isnan(speed) or speed <= 0:
        return None
    return speed


def build_readout(state: SimulationState, latest: Sample, goal: Goal) -> Readout:
    """Recompute every derived value from one consistent snapshot."""
    return Readout(
        elapsed_seconds=state.elapsed_seconds,
        current_speed=state.current_speed,
        reference_speed=state.reference_speed,
        distance=state.cumulative_distance,
        reference_distance=latest.reference_distance,
        catch_up_seconds=catch_up_seconds(latest, state.current_speed, state.reference_speed),
        required_speed=required_speed(
            goal.target_seconds,
            state.elapsed_seconds,
            state.reference_speed,
            state.cumulative_distance,
        ),
        target_seconds=goal.target_seconds,
        running=state.running,
        max_time=visible_window(state.elapsed_seconds),
    )
