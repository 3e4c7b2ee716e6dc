from PyQt6.QtCore import pyqtSignal, Qt
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QFormLayout,
    QSpinBox,
    QComboBox,
    QLineEdit,
    QPushButton,
    QHBoxLayout,
    QLabel,
    QGroupBox,
    QFileDialog,
)

from triage.config import PRIORITY_NAMES

FILE_FILTER = "Triage command files (*.txt);;All files (*)"


def _format_label(text: str) -> QLabel:
    label = QLabel(text)
    label.setStyleSheet("font-weight: bold; color: #102a43;")
    return label


def _priority_combo() -> QComboBox:
    combo = QComboBox()
    combo.addItems(list(PRIORITY_NAMES))
    return combo


def _action_button(text: str) -> QPushButton:
    button = QPushButton(text)
    button.setMinimumHeight(34)
    return button


class ControlsPanel(QWidget):
    """Panel turning user input into interpreter command lines."""

    command_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(12)

        header = QLabel("Triage desk")
        header.setProperty("class", "section-title")
        helper = QLabel("Register patients, call the next one and keep the waiting list up to date.")
        helper.setWordWrap(True)
        helper.setProperty("class", "helper-text")
        layout.addWidget(header)
        layout.addWidget(helper)

        # Registration
        add_group = QGroupBox("New patient")
        add_form = QFormLayout()
        add_form.setFormAlignment(add_form.formAlignment() | Qt.AlignmentFlag.AlignLeft)
        add_form.setHorizontalSpacing(12)
        add_form.setVerticalSpacing(10)

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Full legal name")
        self.name_edit.returnPressed.connect(self._on_add)
        self.add_priority_combo = _priority_combo()
        self.add_button = _action_button("Add")
        self.add_button.clicked.connect(self._on_add)

        add_form.addRow(_format_label("Name"), self.name_edit)
        add_form.addRow(_format_label("Priority"), self.add_priority_combo)
        add_form.addRow(self.add_button)
        add_group.setLayout(add_form)
        layout.addWidget(add_group)

        # Calling patients
        calls_group = QGroupBox("Queue")
        calls_row = QHBoxLayout()
        calls_row.setSpacing(10)
        self.peek_button = _action_button("Peek")
        self.peek_button.clicked.connect(lambda: self.command_requested.emit("peek"))
        self.next_button = _action_button("Next")
        self.next_button.clicked.connect(lambda: self.command_requested.emit("next"))
        self.list_button = _action_button("List")
        self.list_button.clicked.connect(lambda: self.command_requested.emit("list"))
        calls_row.addWidget(self.peek_button)
        calls_row.addWidget(self.next_button)
        calls_row.addWidget(self.list_button)
        calls_group.setLayout(calls_row)
        layout.addWidget(calls_group)

        # Reprioritisation
        change_group = QGroupBox("Change priority")
        change_form = QFormLayout()
        change_form.setHorizontalSpacing(12)
        self.arrival_spin = QSpinBox()
        self.arrival_spin.setRange(1, 1)
        self.arrival_spin.setToolTip("Current arrival number of the patient")
        self.change_priority_combo = _priority_combo()
        self.change_button = _action_button("Change")
        self.change_button.clicked.connect(self._on_change)
        change_form.addRow(_format_label("Arrival #"), self.arrival_spin)
        change_form.addRow(_format_label("New priority"), self.change_priority_combo)
        change_form.addRow(self.change_button)
        change_group.setLayout(change_form)
        layout.addWidget(change_group)

        # Files
        files_group = QGroupBox("Command files")
        files_row = QHBoxLayout()
        self.load_button = _action_button("Load…")
        self.load_button.clicked.connect(self._on_load)
        self.save_button = _action_button("Save…")
        self.save_button.clicked.connect(self._on_save)
        files_row.addWidget(self.load_button)
        files_row.addWidget(self.save_button)
        files_group.setLayout(files_row)
        layout.addWidget(files_group)

        # Free-form command line
        command_group = QGroupBox("Command")
        command_row = QHBoxLayout()
        self.command_edit = QLineEdit()
        self.command_edit.setPlaceholderText("e.g. add urgent Jane Doe")
        self.command_edit.returnPressed.connect(self._on_command)
        command_row.addWidget(self.command_edit)
        command_group.setLayout(command_row)
        layout.addWidget(command_group)

        layout.addStretch()

    def _on_add(self):
        name = self.name_edit.text().strip()
        priority = self.add_priority_combo.currentText()
        self.command_requested.emit(f"add {priority} {name}")
        if name:
            self.name_edit.clear()

    def _on_change(self):
        arrival = self.arrival_spin.value()
        priority = self.change_priority_combo.currentText()
        self.command_requested.emit(f"change {arrival} {priority}")

    def _on_load(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load commands", "", FILE_FILTER)
        if path:
            self.command_requested.emit(f"load {path}")

    def _on_save(self):
        path, _ = QFileDialog.getSaveFileName(self, "Save queue", "", FILE_FILTER)
        if path:
            self.command_requested.emit(f"save {path}")

    def _on_command(self):
        line = self.command_edit.text()
        self.command_edit.clear()
        self.command_requested.emit(line)

    def update_from_snapshot(self, snapshot):
        waiting = len(snapshot.entries)
        self.arrival_spin.setRange(1, max(waiting, 1))
        self.change_button.setEnabled(waiting > 0)
