"""Sprite rendering helpers for the chess SVG assets.

Sprites are addressed by the key the projector emits: the FEN letter of
the piece (``"P"``, ``"k"``, …).  A missing or broken asset makes the
board unrenderable, so loading raises instead of falling back.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QPainter, QPixmap
from PyQt6.QtSvg import QSvgRenderer

from chessview.core.enums import Color, PieceType
from chessview.core.placement import PIECE_CHARS, piece_of

_LOGGER = logging.getLogger(__name__)

_ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets" / "pieces"

_PIECE_NAMES: dict[PieceType, str] = {
    PieceType.PAWN: "pawn",
    PieceType.KNIGHT: "knight",
    PieceType.BISHOP: "bishop",
    PieceType.ROOK: "rook",
    PieceType.QUEEN: "queen",
    PieceType.KING: "king",
}

_COLOR_SUFFIX: dict[Color, str] = {
    Color.WHITE: "w",
    Color.BLACK: "b",
}

# Cache SVG renderers (one per sprite key)
_renderers: dict[str, QSvgRenderer] = {}


def sprite_file(key: str) -> str:
    """Sprite key → asset file name, e.g. ``"n"`` → ``"knight-b.svg"``."""
    color, piece_type = piece_of(key)
    return f"{_PIECE_NAMES[piece_type]}-{_COLOR_SUFFIX[color]}.svg"


def sprite_renderer(key: str) -> QSvgRenderer:
    """Return a cached SVG renderer for the sprite *key*."""
    if key not in _renderers:
        path = _ASSETS_DIR / sprite_file(key)
        renderer = QSvgRenderer(str(path))
        if not renderer.isValid():
            raise FileNotFoundError(f"SVG asset not found or invalid: {path}")
        _renderers[key] = renderer
    return _renderers[key]


def preload_sprites() -> None:
    """Load every sprite once so missing assets fail at startup."""
    for key in PIECE_CHARS:
        sprite_renderer(key)
    _LOGGER.debug("Loaded %d piece sprites from %s", len(PIECE_CHARS), _ASSETS_DIR)


@lru_cache(maxsize=64)
def sprite_pixmap(key: str, size: int) -> QPixmap:
    """Sprite *key* rendered onto a transparent *size* x *size* pixmap."""
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    sprite_renderer(key).render(painter, QRectF(pixmap.rect()))
    painter.end()
    return pixmap
