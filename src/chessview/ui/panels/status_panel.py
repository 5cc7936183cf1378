"""StatusPanel — game status and side to move above the board."""

from __future__ import annotations

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from chessview.game.projector import ViewState
from chessview.ui.i18n import t


class StatusPanel(QWidget):
    """Two labels: game status (e.g. "Checkmate") and side to move."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._view: ViewState | None = None

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(16)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        layout.addWidget(self._status_label)

        self._turn_label = QLabel()
        self._turn_label.setObjectName("statusLabel")
        layout.addWidget(self._turn_label)
        layout.addStretch()

    def set_view(self, view: ViewState) -> None:
        self._view = view
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        if self._view is None:
            return
        s = t()
        self._status_label.setText(s.status_name(self._view.status))
        self._turn_label.setText(s.color_name(self._view.side_to_move))

    def status_text(self) -> str:
        return self._status_label.text()

    def turn_text(self) -> str:
        return self._turn_label.text()
