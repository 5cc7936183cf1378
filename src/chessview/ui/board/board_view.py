"""BoardView — keeps the board scene square and scaled to the widget."""

from __future__ import annotations

from PyQt6.QtCore import QSize, Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QFrame, QGraphicsView, QSizePolicy, QWidget

from chessview.game.projector import ViewState
from chessview.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Widget hosting a :class:`BoardScene`.

    Signals:
        tile_clicked(int): Raw tile position, forwarded from the scene.
    """

    tile_clicked = pyqtSignal(int)

    MIN_SIDE = 320

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        self.setFrameShape(QFrame.Shape.NoFrame)
        for policy_setter in (
            self.setHorizontalScrollBarPolicy,
            self.setVerticalScrollBarPolicy,
        ):
            policy_setter(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHints(
            QPainter.RenderHint.Antialiasing
            | QPainter.RenderHint.SmoothPixmapTransform
        )
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(self.MIN_SIDE, self.MIN_SIDE)

        self._scene.tile_clicked.connect(self.tile_clicked)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def set_view(self, view: ViewState) -> None:
        self._scene.set_view(view)

    def sizeHint(self) -> QSize:
        side = 8 * BoardScene.TILE
        return QSize(side, side)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
