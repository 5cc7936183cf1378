"""SpriteItem — one piece sprite on the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtSvgWidgets import QGraphicsSvgItem

from chessview.ui.resources import sprite_renderer


class SpriteItem(QGraphicsSvgItem):
    """The SVG for sprite *key*, scaled to fit a tile of *tile_size* px.

    Purely visual: clicks pass through to the scene.
    """

    MARGIN_RATIO = 0.03

    def __init__(self, key: str, tile_size: int) -> None:
        super().__init__()
        self.key = key
        self.margin = tile_size * self.MARGIN_RATIO

        renderer = sprite_renderer(key)
        self.setSharedRenderer(renderer)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setZValue(1)

        natural = renderer.defaultSize()
        longest = max(natural.width(), natural.height(), 1)
        self.setScale((tile_size - 2 * self.margin) / longest)
