"""
Display formatting and direct-entry parsing for the pace readouts.
"""
import logging
import math
from typing import Optional

logger = logging.getLogger(__name__)

NOT_APPLICABLE = "N/A"
DISTANCE_UNIT = "miles"
SPEED_UNIT = "mi/h"


def format_duration(seconds: Optional[int]) -> str:
    """Format whole seconds as '{minutes}m {seconds}s', or 'N/A' for None."""
    if seconds is None:
        return NOT_APPLICABLE
    minutes = int(seconds // 60)
    remaining = int(seconds % 60)
    return f"{minutes}m {remaining}s"


def format_distance(miles: float) -> str:
    return f"{miles:.2f} {DISTANCE_UNIT}"


def format_control_speed(speed: float) -> str:
    return f"{speed:.1f} {SPEED_UNIT}"


def format_required_speed(speed: Optional[float]) -> str:
    if speed is None:
        return NOT_APPLICABLE
    return f"{speed:.2f} {SPEED_UNIT}"


def format_target_minutes(target_seconds: int) -> str:
    """Text shown in the target-time entry field."""
    minutes = target_seconds / 60
    if minutes == int(minutes):
        return str(int(minutes))
    return f"{minutes:.1f}"


def _parse_finite(text: str) -> Optional[float]:
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_target_minutes(text: str, previous_seconds: int) -> int:
    """
    Convert the target-time entry (minutes) to whole seconds.

    Non-numeric, NaN or infinite input keeps the previous target. The
    value is not floor-clamped; only the +/- buttons enforce a minimum.
    """
    value = _parse_finite(text)
    if value is None:
        logger.warning(f"Ignoring invalid target time entry: {text!r}")
        return previous_seconds
    # Whole minutes only, matching integer entry.
    return int(value) * 60


def parse_speed(text: str, previous: float) -> float:
    """
    Convert a speed entry (mi/h) to a float.

    Invalid input keeps the previous speed; the caller applies the
    floor at zero.
    """
    value = _parse_finite(text)
    if value is None:
        logger.warning(f"Ignoring invalid speed entry: {text!r}")
        return previous
    return value


def format_axis_time(value: float) -> str:
    """X-axis tick label: seconds below 5 minutes, whole minutes after."""
    value = int(round(value))
    if value >= 300:
        return f"{value // 60}m"
    return f"{value}s"


def format_axis_distance(value: float) -> str:
    return f"{value:.2f}mi"
