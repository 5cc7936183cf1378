"""ControlPanel — reset button and the board-flipping checkbox."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QCheckBox, QHBoxLayout, QPushButton, QWidget

from chessview.ui.i18n import t


class ControlPanel(QWidget):
    """Settings row below the board.

    Signals:
        reset_clicked(): The Reset button was pressed.
        flip_toggled(): The user toggled the "Board flipping" checkbox.
    """

    reset_clicked = pyqtSignal()
    flip_toggled = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(12)

        btn_font = QFont("Adwaita Sans", 10)

        self._btn_reset = QPushButton()
        self._btn_reset.setFont(btn_font)
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)

        self._chk_flipping = QCheckBox()
        self._chk_flipping.setFont(btn_font)
        self._chk_flipping.toggled.connect(lambda _checked: self.flip_toggled.emit())
        layout.addWidget(self._chk_flipping)
        layout.addStretch()

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_reset.setText(s.btn_reset)
        self._chk_flipping.setText(s.chk_board_flipping)

    def set_flipping(self, checked: bool) -> None:
        """Reflect the controller's flip setting without emitting a toggle."""
        self._chk_flipping.blockSignals(True)
        self._chk_flipping.setChecked(checked)
        self._chk_flipping.blockSignals(False)

    def is_flipping(self) -> bool:
        return self._chk_flipping.isChecked()
