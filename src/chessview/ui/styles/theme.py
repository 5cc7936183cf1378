"""Board palettes and the application style sheet."""

from __future__ import annotations

from dataclasses import dataclass, field

from PyQt6.QtGui import QColor

# (light tile, dark tile) per palette, in menu order
_PALETTES: dict[str, tuple[str, str]] = {
    "Classic": ("#f0d9b5", "#b58863"),
    "Blue": ("#dee3e6", "#8ca2ad"),
    "Green": ("#eceedc", "#709578"),
    "Walnut": ("#e4d2b8", "#764a2f"),
    "Slate": ("#e0e2e7", "#656e7a"),
}

DEFAULT_THEME = "Classic"
THEME_NAMES: tuple[str, ...] = tuple(_PALETTES)

_SELECTED = "#64ffff00"  # #AARRGGBB, translucent yellow
_CHECK = "#78ff0000"  # translucent red


@dataclass(frozen=True)
class BoardTheme:
    """Colours used by the board scene.

    Coordinate labels take the colour of the opposite tile shade so they
    stay readable on both.
    """

    name: str
    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor = field(default_factory=lambda: QColor(_SELECTED))
    highlight_check: QColor = field(default_factory=lambda: QColor(_CHECK))

    @property
    def coord_light(self) -> QColor:
        """Label colour on dark tiles."""
        return self.light_square

    @property
    def coord_dark(self) -> QColor:
        """Label colour on light tiles."""
        return self.dark_square

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.by_name(DEFAULT_THEME)

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Palette for a settings name; unknown names give the default palette."""
        if name not in _PALETTES:
            name = DEFAULT_THEME
        light, dark = _PALETTES[name]
        return cls(name, QColor(light), QColor(dark))


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
}

QLabel#statusLabel {
    font-size: 15px;
    font-weight: bold;
}

QCheckBox {
    color: #e0e0e0;
    spacing: 8px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
}
QPushButton:hover {
    background: #505050;
}
"""
