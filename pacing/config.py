"""
Runtime configuration read from the environment (.env is loaded by main.py).
"""
import logging
import math
import os
from dataclasses import dataclass

from pacing.model import DEFAULT_REFERENCE_SPEED, DEFAULT_SPEED, DEFAULT_TARGET_SECONDS

logger = logging.getLogger(__name__)

THEMES = ("dark", "light")


@dataclass
class PacerConfig:
    speed: float = DEFAULT_SPEED
    reference_speed: float = DEFAULT_REFERENCE_SPEED
    target_seconds: int = DEFAULT_TARGET_SECONDS
    tick_ms: int = 1000
    theme: str = "dark"
    log_level: str = "INFO"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not a number, using {default}")
        return default
    if not math.isfinite(value) or value < 0:
        logger.warning(f"{name}={raw!r} is out of range, using {default}")
        return default
    return value


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default
    if value < minimum:
        logger.warning(f"{name}={raw!r} is below {minimum}, using {default}")
        return default
    return value


def load_config() -> PacerConfig:
    """
    Build a PacerConfig from PACER_* environment variables.

    Malformed values are logged and replaced by their defaults.
    """
    theme = os.getenv("PACER_THEME", "dark").strip().lower()
    if theme not in THEMES:
        logger.warning(f"PACER_THEME={theme!r} is not one of {THEMES}, using 'dark'")
        theme = "dark"

    config = PacerConfig(
        speed=_env_float("PACER_SPEED", DEFAULT_SPEED),
        reference_speed=_env_float("PACER_REFERENCE_SPEED", DEFAULT_REFERENCE_SPEED),
        target_seconds=_env_int("PACER_TARGET_MINUTES", DEFAULT_TARGET_SECONDS // 60) * 60,
        tick_ms=_env_int("PACER_TICK_MS", 1000),
        theme=theme,
        log_level=os.getenv("PACER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
    logger.debug(f"Loaded config: {config}")
    return config
