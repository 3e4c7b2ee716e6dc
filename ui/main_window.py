"""Main application window assembling all widgets."""

from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QPlainTextEdit,
    QGroupBox,
)

from triage.commands import CommandInterpreter

from .widgets import ControlsPanel, HistoryPlotWidget, MetricsPanel, QueueView


class MainWindow(QMainWindow):
    def __init__(self, queue, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Hospital Triage Queue")
        self.queue = queue
        self.interpreter = CommandInterpreter(queue, output=self._append_log)

        self._build_ui()
        self._refresh_views()

    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)

        layout = QHBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(12)

        self.controls_panel = ControlsPanel()
        self.queue_view = QueueView()
        self.metrics_panel = MetricsPanel()
        self.history_plot = HistoryPlotWidget()

        log_group = QGroupBox("Command log")
        log_layout = QVBoxLayout(log_group)
        self.log_view = QPlainTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setMaximumBlockCount(2000)
        log_layout.addWidget(self.log_view)

        center = QVBoxLayout()
        center.setContentsMargins(0, 0, 0, 0)
        center.setSpacing(8)
        center.addWidget(self.queue_view, stretch=3)
        center.addWidget(log_group, stretch=2)

        side_panel = QVBoxLayout()
        side_panel.setContentsMargins(0, 0, 0, 0)
        side_panel.setSpacing(8)
        side_panel.addWidget(self.metrics_panel)
        side_panel.addWidget(self.history_plot, stretch=1)

        layout.addWidget(self.controls_panel, stretch=0)
        layout.addLayout(center, stretch=2)
        layout.addLayout(side_panel, stretch=1)

        self.controls_panel.command_requested.connect(self.submit_command)

    def submit_command(self, line: str):
        """Run *line* through the interpreter and refresh every view."""
        self._append_log(f"triage> {line}")
        if not self.interpreter.process_line(line):
            self.close()
            return
        self._refresh_views()

    def _append_log(self, text: str):
        self.log_view.appendPlainText(text.strip("\n"))

    def _refresh_views(self):
        snapshot = self.queue.get_snapshot()
        self.queue_view.update_from_snapshot(snapshot)
        self.metrics_panel.update_from_snapshot(snapshot)
        self.history_plot.update_from_snapshot(snapshot)
        self.controls_panel.update_from_snapshot(snapshot)
