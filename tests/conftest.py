"""Shared fixtures for the pace tracker tests.

PaceSession is a QObject that owns a QTimer, and MainWindow is a widget, so
the tests share one QApplication on the offscreen platform. No display is used.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5 import QtWidgets  # noqa: E402

from pacing.session import PaceSession  # noqa: E402


@pytest.fixture(scope="session")
def qt_app():
    """Single QApplication for the whole test run."""
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture
def session(qt_app):
    """Fresh session with the default speeds (5.0 vs 6.0 mi/h, 60 min target)."""
    pace_session = PaceSession()
    yield pace_session
    pace_session.shutdown()


@pytest.fixture
def run_ticks():
    """Advance a session by n ticks without waiting on the timer."""

    def _run(pace_session, n):
        for _ in range(n):
            pace_session.tick()

    return _run
