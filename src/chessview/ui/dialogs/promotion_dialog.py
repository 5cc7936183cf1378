"""Modal picker for the piece a pawn promotes to."""

from __future__ import annotations

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QIcon, QKeySequence
from PyQt6.QtWidgets import (
    QButtonGroup,
    QDialog,
    QDialogButtonBox,
    QGridLayout,
    QLabel,
    QToolButton,
    QWidget,
)

from chessview.core.enums import Color, PieceType
from chessview.core.placement import piece_char
from chessview.ui.i18n import t
from chessview.ui.resources import sprite_pixmap

PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_ICON_PX = 56


class PromotionDialog(QDialog):
    """Shows the four promotion pieces in *color*; one click accepts.

    Each button also answers to the piece's letter (Q, R, B, N).
    Escape or the Cancel button rejects the dialog.
    """

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._color = color
        self._selected = PieceType.QUEEN
        self._buttons: dict[PieceType, QToolButton] = {}
        self._group = QButtonGroup(self)
        self._group.idClicked.connect(self._on_choice)

        grid = QGridLayout(self)
        self._label = QLabel()
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        grid.addWidget(self._label, 0, 0, 1, len(PROMOTION_CHOICES))

        for col, piece_type in enumerate(PROMOTION_CHOICES):
            letter = piece_char(Color.WHITE, piece_type)
            btn = QToolButton()
            btn.setIcon(QIcon(sprite_pixmap(piece_char(color, piece_type), _ICON_PX)))
            btn.setIconSize(QSize(_ICON_PX, _ICON_PX))
            btn.setShortcut(QKeySequence(letter))
            btn.setAutoRaise(True)
            self._group.addButton(btn, int(piece_type))
            grid.addWidget(btn, 1, col)
            self._buttons[piece_type] = btn

        box = QDialogButtonBox(QDialogButtonBox.StandardButton.Cancel)
        box.rejected.connect(self.reject)
        grid.addWidget(box, 2, 0, 1, len(PROMOTION_CHOICES))

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.promote_title)
        self._label.setText(s.promote_label)
        for piece_type, btn in self._buttons.items():
            name = piece_type.name.capitalize()
            btn.setToolTip(f"{name} ({btn.shortcut().toString()})")

    def _on_choice(self, button_id: int) -> None:
        self._selected = PieceType(button_id)
        self.accept()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def selected(self) -> PieceType:
        return self._selected

    @classmethod
    def ask(cls, color: Color, parent: QWidget | None = None) -> PieceType | None:
        """Run the dialog; the chosen piece, or ``None`` if it was cancelled."""
        dlg = cls(color, parent)
        if dlg.exec() != QDialog.DialogCode.Accepted:
            return None
        return dlg.selected
