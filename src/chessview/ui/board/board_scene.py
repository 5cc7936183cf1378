"""BoardScene — QGraphicsScene that draws the chessboard from a ViewState."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessview.core.types import (
    Square,
    display_index,
    file_of,
    orient,
    rank_of,
    tile_square,
)
from chessview.game.projector import ViewState
from chessview.ui.board.sprite_item import SpriteItem
from chessview.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders tiles, coordinates, highlights and sprites.

    The scene holds no game logic: it draws whatever :class:`ViewState` it
    is given and reports clicks as raw tile positions.

    Signals:
        tile_clicked(int): Raw position of the tile under a left click.
    """

    tile_clicked = pyqtSignal(int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._view: ViewState | None = None
        self._show_coordinates = True

        # Visual layers, keyed by display index (0 = top-left tile)
        self._square_items: dict[int, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._sprite_items: dict[int, SpriteItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_view(self, view: ViewState) -> None:
        """Redraw sprites, highlights and coordinates for *view*."""
        flip_changed = self._view is None or self._view.is_flipped != view.is_flipped
        self._view = view
        if flip_changed:
            self._draw_coordinates()
        self._sync_sprites()
        self._sync_highlights()

    def view(self) -> ViewState | None:
        return self._view

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._view is not None:
            self._sync_highlights()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 tiles and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self.TILE
        for row in range(8):
            for col in range(8):
                is_light = (col + row) % 2 == 0
                color = (
                    self._theme.light_square if is_light else self._theme.dark_square
                )
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[display_index(col, row)] = rect

        self._draw_coordinates()
        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _draw_coordinates(self) -> None:
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        flipped = self._view is not None and self._view.is_flipped
        font = QFont("Adwaita Sans", max(9, t // 8))

        for row in range(8):
            for col in range(8):
                if col != 0 and row != 7:
                    continue
                sq = orient(tile_square(col, row), flipped)
                is_light = (col + row) % 2 == 0
                brush = QBrush(
                    self._theme.coord_dark if is_light else self._theme.coord_light
                )

                # Rank numbers (left edge)
                if col == 0:
                    x, y = col * t + 2, row * t + 1
                    self._add_coord(str(rank_of(sq) + 1), brush, font, x, y)

                # File letters (bottom edge)
                if row == 7:
                    letter = chr(ord("a") + file_of(sq))
                    x, y = col * t + t - 12, row * t + t - 16
                    self._add_coord(letter, brush, font, x, y)

    def _add_coord(
        self, label: str, brush: QBrush, font: QFont, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(brush)
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Sprite / highlight synchronisation ───────────────────────────────

    def _sync_sprites(self) -> None:
        """Re-create sprite items whose key changed."""
        if self._view is None:
            return

        t = self.TILE
        for idx, square in enumerate(self._view.squares):
            item = self._sprite_items.get(idx)
            if item is not None and item.key == square.sprite:
                continue
            if item is not None:
                self.removeItem(item)
                del self._sprite_items[idx]
            if not square.sprite:
                continue
            item = SpriteItem(square.sprite, t)
            col, row = idx % 8, idx // 8
            item.setPos(col * t + item.margin, row * t + item.margin)
            self.addItem(item)
            self._sprite_items[idx] = item

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        if self._view is None:
            return
        for idx, square in enumerate(self._view.squares):
            if square.in_check:
                rect = self._make_highlight(idx, self._theme.highlight_check)
                rect.setZValue(0.6)
                self._highlight_items.append(rect)
            if square.selected:
                rect = self._make_highlight(idx, self._theme.highlight_selected)
                self._highlight_items.append(rect)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        position = self._pos_to_tile(event.scenePos())
        if position is None:
            return super().mousePressEvent(event)

        event.accept()
        self.tile_clicked.emit(position)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_tile(self, pos: QPointF) -> Square | None:
        """Scene position → raw tile position, or ``None`` off the board."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return tile_square(col, row)

    def _make_highlight(self, idx: int, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on the tile at display *idx*."""
        t = self.TILE
        col, row = idx % 8, idx // 8
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
