"""
Run chart canvas: runner distance vs. reference distance over time.
"""
from typing import Sequence

import numpy as np
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from pacing.formatting import format_axis_distance, format_axis_time
from pacing.history import samples_to_arrays
from pacing.model import Sample
from ui.styles import CHART_THEMES

# Y span used before anything has moved
MIN_DISTANCE_SPAN = 0.01


def distance_ceiling(distances: np.ndarray, references: np.ndarray) -> float:
    """Top of the y-axis: largest value across both series."""
    if distances.size == 0 and references.size == 0:
        return MIN_DISTANCE_SPAN
    peak = float(np.nanmax(np.concatenate([distances, references])))
    if not np.isfinite(peak):
        return MIN_DISTANCE_SPAN
    return max(MIN_DISTANCE_SPAN, peak)


class RunChartCanvas(FigureCanvas):
    """
    Matplotlib canvas for the run chart.

    Draws the runner's cumulative distance as a solid filled area and the
    reference pace as a dashed, lightly filled area. The x-axis always spans
    at least the visible window handed in by the session.
    """

    def __init__(self, parent=None, theme: str = "dark", width=6, height=4, dpi=100):
        """
        Initialize run chart canvas.

        Args:
            parent: Parent QWidget
            theme: "dark" or "light"
            width: Figure width in inches
            height: Figure height in inches
            dpi: Dots per inch resolution
        """
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self.theme = theme
        self._fills = []

        self.ax.set_title("Run Chart", fontsize=9)
        self.ax.set_xlabel("Time", fontsize=8)
        self.ax.xaxis.set_major_formatter(FuncFormatter(lambda v, _pos: format_axis_time(v)))
        self.ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _pos: format_axis_distance(v)))

        # Create lines
        self.distance_line, = self.ax.plot([], [], linewidth=1.5, label="Miles")
        self.reference_line, = self.ax.plot([], [], linewidth=1.5, linestyle=(0, (5, 5)), label="Reference")
        self.legend = None

        self.apply_theme(theme)
        self.ax.set_xlim(0, 300)
        self.ax.set_ylim(0, MIN_DISTANCE_SPAN)
        self.fig.tight_layout(pad=0.8)

    def apply_theme(self, theme: str):
        colors = CHART_THEMES[theme]
        self.theme = theme

        self.fig.patch.set_facecolor(colors["figure"])
        self.ax.set_facecolor(colors["axes"])
        for spine in self.ax.spines.values():
            spine.set_color(colors["spine"])
        self.ax.tick_params(colors=colors["text"], labelsize=7)
        self.ax.xaxis.label.set_color(colors["text"])
        self.ax.yaxis.label.set_color(colors["text"])
        self.ax.title.set_color(colors["title"])
        self.ax.grid(True, axis="y", color=colors["grid"], alpha=0.6)

        self.distance_line.set_color(colors["distance"])
        self.reference_line.set_color(colors["reference"])

        if self.legend is not None:
            self.legend.remove()
        self.legend = self.ax.legend(loc="upper left", fontsize=7, framealpha=0.8)

        self._redraw_fills()
        self.draw_idle()

    def update_data(self, samples: Sequence[Sample], max_time: int):
        """
        Replace the plotted series.

        Args:
            samples: Run history (HistoryBuffer or any sequence of Sample), oldest first
            max_time: Right edge of the x-axis in seconds
        """
        times, distances, references = samples_to_arrays(samples)
        if times.size == 0:
            return

        self.distance_line.set_data(times, distances)
        self.reference_line.set_data(times, references)
        self._redraw_fills()

        self.ax.set_xlim(0, max_time)
        self.ax.set_ylim(0, distance_ceiling(distances, references))
        self.draw_idle()

    def _redraw_fills(self):
        for fill in self._fills:
            fill.remove()
        self._fills = []

        times = np.asarray(self.distance_line.get_xdata(), dtype=float)
        if times.size == 0:
            return

        colors = CHART_THEMES[self.theme]
        distances = np.asarray(self.distance_line.get_ydata(), dtype=float)
        references = np.asarray(self.reference_line.get_ydata(), dtype=float)
        self._fills.append(
            self.ax.fill_between(times, distances, color=colors["distance"], alpha=0.4, linewidth=0)
        )
        self._fills.append(
            self.ax.fill_between(times, references, color=colors["reference"], alpha=0.1, linewidth=0)
        )
