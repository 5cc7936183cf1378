"""Internationalisation strings for the Chessview UI.

Usage::

    from chessview.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_reset)                       # "Сброс"
    print(t().status_name(GameStatus.CHECKMATE))  # "Мат"
"""

from __future__ import annotations

from dataclasses import dataclass

from chessview.core.enums import Color, GameStatus


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str

    # ── Status row ───────────────────────────────────────────────────────
    status_ongoing: str
    status_checkmate: str
    status_stalemate: str
    status_draw: str
    color_white: str
    color_black: str

    # ── Settings row ─────────────────────────────────────────────────────
    btn_reset: str
    chk_board_flipping: str

    # ── PromotionDialog ──────────────────────────────────────────────────
    promote_title: str
    promote_label: str

    def status_name(self, status: GameStatus) -> str:
        return {
            GameStatus.ONGOING: self.status_ongoing,
            GameStatus.CHECKMATE: self.status_checkmate,
            GameStatus.STALEMATE: self.status_stalemate,
            GameStatus.DRAW: self.status_draw,
        }[status]

    def color_name(self, color: Color) -> str:
        return self.color_white if color == Color.WHITE else self.color_black


_EN = Strings(
    window_title="Chessview",
    status_ongoing="Ongoing",
    status_checkmate="Checkmate",
    status_stalemate="Stalemate",
    status_draw="Draw",
    color_white="White",
    color_black="Black",
    btn_reset="Reset",
    chk_board_flipping="Board flipping",
    promote_title="Pawn promotion",
    promote_label="Choose a piece to promote to:",
)

_RU = Strings(
    window_title="Chessview",
    status_ongoing="Игра идёт",
    status_checkmate="Мат",
    status_stalemate="Пат",
    status_draw="Ничья",
    color_white="Белые",
    color_black="Чёрные",
    btn_reset="Сброс",
    chk_board_flipping="Переворачивать доску",
    promote_title="Превращение пешки",
    promote_label="Выберите фигуру для превращения:",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
