from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QGridLayout,
    QLabel,
    QGroupBox,
)

from triage.config import PRIORITY_NAMES


def _metric_label(name: str) -> QLabel:
    label = QLabel(name)
    label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
    label.setStyleSheet("font-weight: bold;")
    return label


def _value_label() -> QLabel:
    label = QLabel("–")
    label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
    return label


class MetricsPanel(QWidget):
    """Waiting counts per priority class and the next patient to be called."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(10)

        self.waiting_group, self.waiting_values = self._create_metrics_group(
            "Waiting by priority", list(PRIORITY_NAMES) + ["total"]
        )
        self.next_group, self.next_values = self._create_metrics_group(
            "Next to be seen", ["name"]
        )

        layout.addWidget(self.waiting_group)
        layout.addWidget(self.next_group)
        layout.addStretch()

    def _create_metrics_group(self, title: str, keys):
        group = QGroupBox(title)
        grid = QGridLayout()
        grid.setContentsMargins(8, 8, 8, 8)
        grid.setHorizontalSpacing(12)
        grid.setVerticalSpacing(6)

        labels = {}
        for row, key in enumerate(keys):
            grid.addWidget(_metric_label(key), row, 0)
            value = _value_label()
            labels[key] = value
            grid.addWidget(value, row, 1)

        group.setLayout(grid)
        return group, labels

    def update_from_snapshot(self, snapshot):
        for key, label in self.waiting_values.items():
            if key == "total":
                label.setText(str(len(snapshot.entries)))
            else:
                label.setText(str(snapshot.waiting.get(key, 0)))
        self.next_values["name"].setText(snapshot.next_name or "–")
