"""
Pace simulation session: clock, distance accumulator and control surface.

The session lives on the GUI thread. A QTimer delivers one tick per
interval; every mutation recomputes the readout and emits it.
"""
import logging
import math
from typing import Optional, Tuple

from PyQt5 import QtCore

from pacing.estimators import build_readout
from pacing.history import HistoryBuffer
from pacing.model import (
    MIN_TARGET_SECONDS,
    TICK_SECONDS,
    Goal,
    Readout,
    Sample,
    SimulationState,
    distance_increment,
    reference_distance_at,
    visible_window,
)

logger = logging.getLogger(__name__)


class PaceSession(QtCore.QObject):
    """
    One simulated run against a reference pace.

    Signals:
        readout_changed(Readout) - emitted after every state change
        history_updated(HistoryBuffer) - emitted after every tick
        status_update(str) - running / stopped messages
    """

    readout_changed = QtCore.pyqtSignal(object)
    history_updated = QtCore.pyqtSignal(object)
    status_update = QtCore.pyqtSignal(str)

    def __init__(
        self,
        speed: Optional[float] = None,
        reference_speed: Optional[float] = None,
        target_seconds: Optional[int] = None,
        tick_ms: int = 1000,
        parent=None,
    ):
        super().__init__(parent)

        self.state = SimulationState()
        if speed is not None:
            self.state.current_speed = max(0.0, speed)
        if reference_speed is not None:
            self.state.reference_speed = max(0.0, reference_speed)

        self.goal = Goal()
        if target_seconds is not None:
            self.goal.target_seconds = int(target_seconds)

        self.history = HistoryBuffer()
        self.tick_ms = tick_ms

        # Only set while running
        self._timer: Optional[QtCore.QTimer] = None

        self._readout = build_readout(self.state, self.history.latest, self.goal)

        logger.info(
            f"PaceSession initialized (speed={self.state.current_speed:.1f}, "
            f"reference={self.state.reference_speed:.1f}, target={self.goal.target_seconds}s)"
        )

    # ==========================================================================
    # Read side
    # ==========================================================================

    @property
    def readout(self) -> Readout:
        return self._readout

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def chart_data(self) -> Tuple[HistoryBuffer, int]:
        """History buffer (by reference) plus the visible time window for the renderer."""
        return self.history, visible_window(self.state.elapsed_seconds)

    # ==========================================================================
    # Clock
    # ==========================================================================

    def start(self):
        """Begin ticking from the current elapsed time. No-op if running."""
        if self.state.running:
            return

        timer = QtCore.QTimer(self)
        timer.setTimerType(QtCore.Qt.PreciseTimer)
        timer.setInterval(self.tick_ms)
        timer.timeout.connect(self.tick)
        self._timer = timer

        self.state.running = True
        timer.start()

        logger.info(f"Run started at t={self.state.elapsed_seconds}s")
        self.status_update.emit("Running")
        self._recompute()

    def stop(self):
        """Stop ticking. No tick is applied after this returns."""
        if not self.state.running:
            return

        # Release the timer before flipping state so no pending timeout
        # can reach tick() as a running tick.
        self._release_timer()
        self.state.running = False

        logger.info(
            f"Run stopped at t={self.state.elapsed_seconds}s "
            f"({self.state.cumulative_distance:.2f} mi)"
        )
        self.status_update.emit("Stopped")
        self._recompute()

    def toggle(self):
        if self.state.running:
            self.stop()
        else:
            self.start()

    def shutdown(self):
        """Release the timer on teardown (window close, app exit)."""
        self.stop()
        self._release_timer()
        logger.info("PaceSession shut down")

    def _release_timer(self):
        timer = self._timer
        self._timer = None
        if timer is None:
            return
        timer.stop()
        timer.timeout.disconnect(self.tick)
        timer.deleteLater()

    def tick(self):
        """
        Advance simulated time by one second.

        Runner distance accumulates from the current speed; reference
        distance is recomputed from the current reference speed over the
        total elapsed time.
        """
        if not self.state.running:
            logger.debug("Ignoring tick while stopped")
            return

        state = self.state
        state.elapsed_seconds += TICK_SECONDS
        state.cumulative_distance += distance_increment(state.current_speed)

        sample = Sample(
            time=state.elapsed_seconds,
            distance=state.cumulative_distance,
            reference_distance=reference_distance_at(state.elapsed_seconds, state.reference_speed),
        )
        self.history.append(sample)

        self.history_updated.emit(self.history)
        self._recompute()

    # ==========================================================================
    # Control surface
    # ==========================================================================

    def adjust_speed(self, delta: float):
        """Change runner speed by delta, floored at 0."""
        self.state.current_speed = max(0.0, self.state.current_speed + delta)
        logger.debug(f"Speed -> {self.state.current_speed:.2f} mi/h")
        self._recompute()

    def adjust_reference_speed(self, delta: float):
        """Change reference speed by delta, floored at 0."""
        self.state.reference_speed = max(0.0, self.state.reference_speed + delta)
        logger.debug(f"Reference speed -> {self.state.reference_speed:.2f} mi/h")
        self._recompute()

    def set_reference_speed(self, value: float):
        """Direct entry of the reference speed. Non-finite values are ignored."""
        if value is None or not math.isfinite(value):
            logger.warning(f"Ignoring non-finite reference speed: {value}")
            return
        self.state.reference_speed = max(0.0, value)
        logger.info(f"Reference speed set to {self.state.reference_speed:.2f} mi/h")
        self._recompute()

    def set_target_seconds(self, seconds: int):
        """Direct entry of the target time. Not floor-clamped."""
        self.goal.target_seconds = int(seconds)
        logger.info(f"Target time set to {self.goal.target_seconds}s")
        self._recompute()

    def step_target(self, delta_seconds: int):
        """+/- target edit, floored at one minute."""
        self.goal.target_seconds = max(MIN_TARGET_SECONDS, self.goal.target_seconds + delta_seconds)
        logger.debug(f"Target time -> {self.goal.target_seconds}s")
        self._recompute()

    # ==========================================================================
    # Derived values
    # ==========================================================================

    def _recompute(self):
        self._readout = build_readout(self.state, self.history.latest, self.goal)
        self.readout_changed.emit(self._readout)
