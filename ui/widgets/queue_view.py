from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QAbstractItemView,
)

from triage.config import PRIORITY_COLORS

COLUMNS = ["Arrival #", "Priority", "Patient name", "Called"]
ROW_ALPHA = 70


class QueueView(QWidget):
    """Waiting patients in heap order, shaded by priority class."""

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(self._build_legend())

        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.Stretch)
        self.table.setMinimumSize(360, 240)
        layout.addWidget(self.table)

    def _build_legend(self) -> QHBoxLayout:
        layout = QHBoxLayout()
        layout.setContentsMargins(6, 4, 6, 10)
        layout.setSpacing(12)

        def _item(color: QColor, text: str) -> QWidget:
            container = QWidget()
            row = QHBoxLayout(container)
            row.setContentsMargins(0, 0, 0, 0)
            row.setSpacing(6)
            swatch = QLabel()
            swatch.setFixedSize(18, 18)
            swatch.setStyleSheet(
                f"background: {color.name()}; border: 1px solid #d6deeb; border-radius: 5px;"
            )
            label = QLabel(text)
            label.setStyleSheet("color: #334e68; font-weight: 600;")
            row.addWidget(swatch)
            row.addWidget(label)
            return container

        for name, color in PRIORITY_COLORS.items():
            layout.addWidget(_item(QColor(color), name))
        layout.addStretch()
        return layout

    def update_from_snapshot(self, snapshot):
        self.table.setRowCount(len(snapshot.entries))
        for row, entry in enumerate(snapshot.entries):
            shade = QColor(PRIORITY_COLORS[entry.priority.label])
            shade.setAlpha(ROW_ALPHA)
            position = snapshot.service_positions.get(entry.arrival)
            values = [
                str(entry.arrival),
                entry.priority.label,
                entry.name,
                str(position) if position is not None else "",
            ]
            for col, value in enumerate(values):
                item = QTableWidgetItem(value)
                item.setBackground(QBrush(shade))
                if col in (0, 3):
                    item.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
                self.table.setItem(row, col, item)
