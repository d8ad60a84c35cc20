"""
Matplotlib canvas widgets for pace visualization.
"""
from ui.canvases.run_chart import RunChartCanvas

__all__ = ['RunChartCanvas']
