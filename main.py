#!/usr/bin/env python3
"""
Pace Tracker - Main Entry Point

Real-time pace simulator: run against a reference pace, see when you'll
catch up and what speed you still need to hit your target time.

Usage:
    python main.py                # Dark theme, stopped
    python main.py --light        # Light theme
    python main.py --autostart    # Start the clock immediately
    python main.py --debug        # Verbose logging
"""
import sys
import logging
from PyQt5 import QtWidgets

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from pacing.config import PacerConfig, load_config

# Configure logging FIRST - before the rest of the app is imported
logging.basicConfig(
    level=logging.INFO,
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

logger = logging.getLogger("main")

# Read once; config warnings go through the handler configured above
CONFIG = load_config()
_log_level = "DEBUG" if "--debug" in sys.argv else CONFIG.log_level
logging.getLogger().setLevel(getattr(logging, _log_level, logging.INFO))

print("="*60)
print("🏃 PACE TRACKER STARTING...")
print("="*60)

from pacing.session import PaceSession
from ui.main_window import MainWindow

print("✅ All modules imported successfully")


def main(theme: str = None, autostart: bool = False, config: PacerConfig = None):
    """
    Entry point for the pace tracker.

    Args:
        theme: "dark" or "light"; None uses PACER_THEME
        autostart: Start the clock as soon as the window is shown
        config: Settings to use; None uses the PACER_* values read at import
    """
    if config is None:
        config = CONFIG
    if theme is None:
        theme = config.theme

    print(f"\n📋 Starting pace tracker ({theme} theme)")
    print("🔧 Creating Qt application...")
    app = QtWidgets.QApplication(sys.argv)

    print("⏱️  Creating pace session...")
    session = PaceSession(
        speed=config.speed,
        reference_speed=config.reference_speed,
        target_seconds=config.target_seconds,
        tick_ms=config.tick_ms,
    )
    session.status_update.connect(lambda msg: print(f"[Status] {msg}"))

    print("🖥️  Creating main window...")
    window = MainWindow(session, theme=theme)
    window.show()

    if autostart:
        session.start()

    print("\n" + "="*60)
    print("✅ PACE TRACKER READY - press Start to run")
    print("="*60 + "\n")

    # Run Qt event loop
    result = app.exec_()

    # Clean shutdown
    print("\n🛑 Shutting down...")
    session.shutdown()

    print("👋 Goodbye!")
    sys.exit(result)


if __name__ == "__main__":
    # Parse command line arguments
    theme = None
    if "--light" in sys.argv:
        theme = "light"
    autostart = "--autostart" in sys.argv

    print(f"🎯 Command line args: {sys.argv}")

    try:
        main(theme, autostart)
    except Exception as e:
        print("\n" + "="*60)
        print("❌ FATAL ERROR:")
        print("="*60)
        logger.critical(f"{type(e).__name__}: {e}", exc_info=True)
        print("="*60)
        sys.exit(1)
