"""Widgets of the triage window; each one refreshes from a queue snapshot."""

from .controls_panel import ControlsPanel
from .history_plot import HistoryPlotWidget
from .metrics_panel import MetricsPanel
from .queue_view import QueueView

__all__ = [
    "ControlsPanel",
    "HistoryPlotWidget",
    "MetricsPanel",
    "QueueView",
]
