import pyqtgraph as pg
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from triage.config import HISTORY_LIMIT


class HistoryPlotWidget(QWidget):
    """Displays the queue length after each change using pyqtgraph."""

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground("#ffffff")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.25)
        axis_pen = pg.mkPen(color="#52606d", width=1)
        for axis in ("left", "bottom"):
            ax = self.plot_widget.getAxis(axis)
            ax.setPen(axis_pen)
            ax.setTextPen(axis_pen)
        self.plot_widget.setLabel("left", "Patients waiting")
        self.plot_widget.setLabel("bottom", "Queue revision")
        self.plot_widget.setTitle("Queue length history", color="#102a43")

        pen = pg.mkPen(color=(45, 125, 210), width=3)
        self._curve = self.plot_widget.plot(
            pen=pen, fillLevel=0, brush=(45, 125, 210, 40)
        )
        layout.addWidget(self.plot_widget)

        self._revisions = []
        self._queue_lengths = []

    def update_from_snapshot(self, snapshot):
        # Commands like peek and list leave the revision unchanged.
        if self._revisions and self._revisions[-1] == snapshot.revision:
            return
        self._revisions.append(snapshot.revision)
        self._queue_lengths.append(len(snapshot.entries))
        if len(self._revisions) > HISTORY_LIMIT:
            self._revisions = self._revisions[-HISTORY_LIMIT:]
            self._queue_lengths = self._queue_lengths[-HISTORY_LIMIT:]
        self._curve.setData(self._revisions, self._queue_lengths)
