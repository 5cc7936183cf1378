"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from chessview.core.enums import Color, PieceType
from chessview.game.controller import BoardController
from chessview.game.interfaces import ChessEvent, Reset, TileClicked, ToggleFlip
from chessview.game.projector import ViewState
from chessview.ui.board.board_view import BoardView
from chessview.ui.dialogs.promotion_dialog import PromotionDialog
from chessview.ui.i18n import set_language, t
from chessview.ui.panels.control_panel import ControlPanel
from chessview.ui.panels.status_panel import StatusPanel
from chessview.ui.resources import preload_sprites
from chessview.ui.settings import AppSettings
from chessview.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: status row, board, settings row."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setMinimumSize(420, 520)
        self.resize(640, 740)

        self._settings = settings if settings is not None else AppSettings()

        # A missing sprite makes the board unrenderable: fail before showing.
        preload_sprites()

        self._controller = BoardController(should_flip=self._settings.board_flipping)

        self._setup_ui()
        self._connect_signals()
        self._apply_settings()
        self._render(self._controller.view)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> BoardController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_panel(self) -> StatusPanel:
        return self._status_panel

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._status_panel = StatusPanel()
        root.addWidget(self._status_panel)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

    def _connect_signals(self) -> None:
        self._board_view.tile_clicked.connect(self._on_tile_clicked)
        self._control_panel.reset_clicked.connect(lambda: self._dispatch(Reset()))
        self._control_panel.flip_toggled.connect(lambda: self._dispatch(ToggleFlip()))
        self._controller.events.on_view_changed.append(self._render)

    # ── Settings ─────────────────────────────────────────────────────────

    def apply_settings(self, settings: AppSettings) -> None:
        """Replace the current settings and apply them."""
        self._settings = settings
        self._apply_settings()

    def _apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)

        self._controller.set_promotion_chooser(
            self._ask_promotion if s.ask_promotion else None
        )

    def retranslate_ui(self) -> None:
        self.setWindowTitle(t().window_title)
        self._status_panel.retranslate_ui()
        self._control_panel.retranslate_ui()

    # ── Event handling ───────────────────────────────────────────────────

    def _on_tile_clicked(self, position: int) -> None:
        self._dispatch(TileClicked(position))

    def _dispatch(self, event: ChessEvent) -> None:
        _LOGGER.debug("Dispatching %s", event)
        self._controller.dispatch(event)

    def _ask_promotion(self, color: Color) -> PieceType | None:
        return PromotionDialog.ask(color, self)

    def _render(self, view: ViewState) -> None:
        self._board_view.set_view(view)
        self._status_panel.set_view(view)
        self._control_panel.set_flipping(view.should_flip)
