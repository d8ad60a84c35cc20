"""
Main window for the Pace Tracker.
"""
import logging

from PyQt5 import QtCore
from PyQt5.QtWidgets import (
    QAction,
    QActionGroup,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from pacing.formatting import (
    format_control_speed,
    format_distance,
    format_duration,
    format_required_speed,
    format_target_minutes,
    parse_speed,
    parse_target_minutes,
)
from pacing.model import Readout
from pacing.session import PaceSession
from ui.canvases import RunChartCanvas
from ui.styles import stylesheet_for

logger = logging.getLogger(__name__)

SPEED_STEP = 0.1      # mi/h per button press
TARGET_STEP = 60      # seconds per button press


class MainWindow(QMainWindow):
    """
    Pace tracker window.

    Displays:
    - Run chart (runner distance vs. reference pace)
    - Target time and reference speed editors
    - Distance, elapsed time, catch-up time and required speed
    - Start/Stop and speed controls
    """

    def __init__(self, session: PaceSession, theme: str = "dark"):
        super().__init__()

        self.session = session
        self.theme = theme

        self.setWindowTitle("Pace Tracker")
        self.resize(900, 760)

        # Create central widget and root layout
        central = QWidget()
        self.setCentralWidget(central)

        self._create_menu_bar()

        root_layout = QVBoxLayout()
        root_layout.setContentsMargins(8, 24, 8, 8)
        root_layout.setSpacing(10)
        central.setLayout(root_layout)

        root_layout.addWidget(self._build_goal_group())
        root_layout.addWidget(self._build_chart_group(), 1)
        root_layout.addWidget(self._build_stats_group())
        root_layout.addLayout(self._build_run_controls())

        # Wire session -> UI
        self.session.readout_changed.connect(self.update_readout)
        self.session.history_updated.connect(self.update_chart)

        self.apply_theme(theme)
        self.update_readout(self.session.readout)
        self.update_chart()

    # ==========================================================================
    # Layout
    # ==========================================================================

    def _build_goal_group(self):
        """Target time + reference speed editors."""
        goal_group = QGroupBox("Goal")
        goal_layout = QVBoxLayout()
        goal_layout.setSpacing(6)
        goal_group.setLayout(goal_layout)

        # Target time row
        target_row = QHBoxLayout()
        self.target_minus_button = QPushButton("-")
        self.target_minus_button.setFixedWidth(36)
        self.target_minus_button.clicked.connect(lambda: self.session.step_target(-TARGET_STEP))
        self.target_edit = QLineEdit()
        self.target_edit.setFixedWidth(80)
        self.target_edit.setAlignment(QtCore.Qt.AlignCenter)
        self.target_edit.editingFinished.connect(self._on_target_entered)
        self.target_plus_button = QPushButton("+")
        self.target_plus_button.setFixedWidth(36)
        self.target_plus_button.clicked.connect(lambda: self.session.step_target(TARGET_STEP))

        target_row.addWidget(QLabel("Target time"))
        target_row.addStretch()
        target_row.addWidget(self.target_minus_button)
        target_row.addWidget(self.target_edit)
        target_row.addWidget(self.target_plus_button)
        target_row.addWidget(QLabel("minutes"))

        # Reference speed row
        reference_row = QHBoxLayout()
        self.reference_minus_button = QPushButton("-")
        self.reference_minus_button.setFixedWidth(36)
        self.reference_minus_button.clicked.connect(lambda: self.session.adjust_reference_speed(-SPEED_STEP))
        self.reference_edit = QLineEdit()
        self.reference_edit.setFixedWidth(80)
        self.reference_edit.setAlignment(QtCore.Qt.AlignCenter)
        self.reference_edit.editingFinished.connect(self._on_reference_entered)
        self.reference_plus_button = QPushButton("+")
        self.reference_plus_button.setFixedWidth(36)
        self.reference_plus_button.clicked.connect(lambda: self.session.adjust_reference_speed(SPEED_STEP))

        reference_row.addWidget(QLabel("Reference speed"))
        reference_row.addStretch()
        reference_row.addWidget(self.reference_minus_button)
        reference_row.addWidget(self.reference_edit)
        reference_row.addWidget(self.reference_plus_button)
        reference_row.addWidget(QLabel("mi/h"))

        goal_layout.addLayout(target_row)
        goal_layout.addLayout(reference_row)
        return goal_group

    def _build_chart_group(self):
        chart_group = QGroupBox("Run Chart")
        chart_layout = QVBoxLayout()
        chart_group.setLayout(chart_layout)

        subtitle = QLabel("Showing total distance over time")
        subtitle.setObjectName("dimLabel")
        chart_layout.addWidget(subtitle)

        self.chart_canvas = RunChartCanvas(self, theme=self.theme, width=6, height=4, dpi=100)
        chart_layout.addWidget(self.chart_canvas)
        return chart_group

    def _build_stats_group(self):
        stats_group = QGroupBox("Progress")
        stats_layout = QVBoxLayout()
        stats_layout.setSpacing(2)
        stats_group.setLayout(stats_layout)

        self.distance_label = QLabel("Distance: --")
        self.time_label = QLabel("Time: --")
        self.time_label.setObjectName("dimLabel")
        self.catch_up_label = QLabel("Catch up: --")
        self.catch_up_label.setObjectName("dimLabel")
        self.required_speed_label = QLabel("Required speed: --")
        self.required_speed_label.setObjectName("dimLabel")

        stats_layout.addWidget(self.distance_label)
        stats_layout.addWidget(self.time_label)
        stats_layout.addWidget(QLabel("─" * 30))
        stats_layout.addWidget(self.catch_up_label)
        stats_layout.addWidget(self.required_speed_label)
        return stats_group

    def _build_run_controls(self):
        """Start/Stop button + runner speed row."""
        controls = QVBoxLayout()
        controls.setSpacing(10)

        self.start_stop_button = QPushButton("Start")
        self.start_stop_button.setFixedHeight(44)
        self.start_stop_button.clicked.connect(self.session.toggle)
        controls.addWidget(self.start_stop_button)

        speed_row = QHBoxLayout()
        self.speed_minus_button = QPushButton("-")
        self.speed_minus_button.setFixedSize(56, 44)
        self.speed_minus_button.clicked.connect(lambda: self.session.adjust_speed(-SPEED_STEP))
        self.speed_label = QLabel("--")
        self.speed_label.setObjectName("speedLabel")
        self.speed_label.setAlignment(QtCore.Qt.AlignCenter)
        self.speed_label.setMinimumWidth(160)
        self.speed_plus_button = QPushButton("+")
        self.speed_plus_button.setFixedSize(56, 44)
        self.speed_plus_button.clicked.connect(lambda: self.session.adjust_speed(SPEED_STEP))

        speed_row.addStretch()
        speed_row.addWidget(self.speed_minus_button)
        speed_row.addWidget(self.speed_label)
        speed_row.addWidget(self.speed_plus_button)
        speed_row.addStretch()
        controls.addLayout(speed_row)
        return controls

    def _create_menu_bar(self):
        """Create menu bar."""
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")
        view_menu = menu_bar.addMenu("View")

        quit_action = QAction("Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        theme_group = QActionGroup(self)
        theme_group.setExclusive(True)
        self.theme_actions = {}
        for name, label in (("dark", "Dark Theme"), ("light", "Light Theme")):
            action = QAction(label, self, checkable=True)
            action.triggered.connect(lambda _checked, n=name: self.apply_theme(n))
            theme_group.addAction(action)
            view_menu.addAction(action)
            self.theme_actions[name] = action

    # ==========================================================================
    # Data Update Methods
    # ==========================================================================

    def apply_theme(self, theme: str):
        """Switch between the dark and light themes."""
        self.setStyleSheet(stylesheet_for(theme))
        self.theme = theme
        self.theme_actions[theme].setChecked(True)
        self.chart_canvas.apply_theme(theme)
        logger.info(f"Theme -> {theme}")

    def update_readout(self, readout: Readout):
        """
        Refresh every label from a session readout.

        Args:
            readout: Snapshot emitted by the session after a state change
        """
        self.start_stop_button.setText("Stop" if readout.running else "Start")
        self.speed_label.setText(format_control_speed(readout.current_speed))

        self.distance_label.setText(f"Distance: {format_distance(readout.distance)}")
        self.time_label.setText(f"Time: {format_duration(readout.elapsed_seconds)}")
        self.catch_up_label.setText(f"Catch up: {format_duration(readout.catch_up_seconds)}")
        self.required_speed_label.setText(
            f"Required speed: {format_required_speed(readout.required_speed)}"
        )

        # Don't overwrite a field the user is typing in
        if not self.target_edit.hasFocus():
            self.target_edit.setText(format_target_minutes(readout.target_seconds))
        if not self.reference_edit.hasFocus():
            self.reference_edit.setText(f"{readout.reference_speed:.1f}")

    def update_chart(self, _history=None):
        """Redraw the run chart from the session history."""
        try:
            samples, max_time = self.session.chart_data()
            self.chart_canvas.update_data(samples, max_time)
        except Exception as e:
            logger.error(f"Error in chart update: {e}", exc_info=True)

    # ==========================================================================
    # Direct entry
    # ==========================================================================

    def _on_target_entered(self):
        # editingFinished also fires on plain focus-out
        if not self.target_edit.isModified():
            return
        seconds = parse_target_minutes(self.target_edit.text(), self.session.goal.target_seconds)
        self.session.set_target_seconds(seconds)
        self.target_edit.setText(format_target_minutes(self.session.goal.target_seconds))
        self.target_edit.setModified(False)

    def _on_reference_entered(self):
        if not self.reference_edit.isModified():
            return
        speed = parse_speed(self.reference_edit.text(), self.session.state.reference_speed)
        self.session.set_reference_speed(speed)
        self.reference_edit.setText(f"{self.session.state.reference_speed:.1f}")
        self.reference_edit.setModified(False)

    def closeEvent(self, event):
        self.session.shutdown()
        super().closeEvent(event)
