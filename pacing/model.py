# pacing/model.py
from dataclasses import dataclass
from typing import Optional

SECONDS_PER_HOUR = 3600
TICK_SECONDS = 1               # simulated seconds per tick
MIN_VISIBLE_SECONDS = 300      # chart always shows at least 5 minutes
MIN_TARGET_SECONDS = 60        # floor for +/- target edits

DEFAULT_SPEED = 5.0            # mi/h
DEFAULT_REFERENCE_SPEED = 6.0  # mi/h
DEFAULT_TARGET_SECONDS = 3600


@dataclass(frozen=True)
class Sample:
    time: int                  # seconds since session start
    distance: float            # miles covered by the runner
    reference_distance: float  # miles covered at the reference pace


SEED_SAMPLE = Sample(time=0, distance=0.0, reference_distance=0.0)


@dataclass
class SimulationState:
    elapsed_seconds: int = 0
    current_speed: float = DEFAULT_SPEED            # mi/h
    reference_speed: float = DEFAULT_REFERENCE_SPEED  # mi/h
    cumulative_distance: float = 0.0                # miles
    running: bool = False


@dataclass
class Goal:
    target_seconds: int = DEFAULT_TARGET_SECONDS


@dataclass(frozen=True)
class Readout:
    """
    Snapshot of everything the window shows after a state change.

    None in catch_up_seconds / required_speed means "not applicable".
    """
    elapsed_seconds: int
    current_speed: float
    reference_speed: float
    distance: float
    reference_distance: float
    catch_up_seconds: Optional[int]
    required_speed: Optional[float]
    target_seconds: int
    running: bool
    max_time: int


def distance_increment(speed: float) -> float:
    """Miles covered in one tick at `speed` mi/h."""
    return speed * TICK_SECONDS / SECONDS_PER_HOUR


def reference_distance_at(elapsed_seconds: int, reference_speed: float) -> float:
    # Always from the current rate over total time, never accumulated.
    return elapsed_seconds * reference_speed / SECONDS_PER_HOUR


def visible_window(elapsed_seconds: int) -> int:
    return max(MIN_VISIBLE_SECONDS, elapsed_seconds)
