"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QCheckBox, QHBoxLayout, QPushButton, QWidget


class ControlPanel(QWidget):
    """Buttons for game actions: new game, undo, computer opponent."""

    new_game_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    vs_computer_toggled = pyqtSignal(bool)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._btn_new = QPushButton("New game")
        self._btn_new.setMinimumHeight(32)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

        self._btn_undo = QPushButton("Undo")
        self._btn_undo.setMinimumHeight(32)
        self._btn_undo.clicked.connect(self.undo_clicked)
        layout.addWidget(self._btn_undo)

        self._chk_computer = QCheckBox("Play vs computer")
        self._chk_computer.toggled.connect(self.vs_computer_toggled)
        layout.addWidget(self._chk_computer)
        layout.addStretch(1)

    def set_vs_computer(self, checked: bool) -> None:
        """Update the checkbox without emitting ``vs_computer_toggled``."""
        self._chk_computer.blockSignals(True)
        self._chk_computer.setChecked(checked)
        self._chk_computer.blockSignals(False)

    def set_undo_enabled(self, enabled: bool) -> None:
        self._btn_undo.setEnabled(enabled)
