"""BoardController — the interaction state machine behind the board.

Turns input events (tile click, flip toggle, reset) into selection
changes and move attempts, asks the rules engine about legality, and keeps
the projected view state in sync.  Emits events via simple callbacks so
the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessview.core.enums import Color, PieceType
from chessview.core.types import Square, orient, square_name, validate_square
from chessview.game.interfaces import (
    ChessEvent,
    IBoardController,
    Reset,
    TileClicked,
    ToggleFlip,
)
from chessview.game.projector import (
    ViewState,
    check_indicator,
    display_sprites,
    is_flipped_view,
    project,
)
from chessview.game.state import BoardState, Highlight
from chessview.rules import DefaultRules
from chessview.rules.interfaces import BoardValue, IRulesEngine

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square, PieceType | None, BoardValue], None]
ViewCallback = Callable[[ViewState], None]
ResetCallback = Callable[[], None]
PromotionChooser = Callable[[Color], PieceType | None]


@dataclass
class ControllerEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_view_changed: list[ViewCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class BoardController(IBoardController):
    """Owns the live board, the selection and the flip setting.

    Every operation completes synchronously: decode the click, mutate
    state, recompute derived state, notify.  Invalid input (clicks on
    empty or enemy squares, illegal moves) is absorbed without error.

    Args:
        rules: Rules engine; defaults to :data:`chessview.rules.DefaultRules`.
        should_flip: Initial board-flipping setting.
        promotion_chooser: Optional callback asked for the promotion piece
            when a pawn move is only legal as a promotion.  Without it such
            moves are ignored like any other illegal move.
    """

    __slots__ = ("_rules", "_state", "_view", "_promotion_chooser", "events")

    def __init__(
        self,
        rules: IRulesEngine | None = None,
        *,
        should_flip: bool = True,
        promotion_chooser: PromotionChooser | None = None,
    ) -> None:
        self._rules: IRulesEngine = rules if rules is not None else DefaultRules()
        self._state = BoardState(
            board=self._rules.default_board(), should_flip=should_flip
        )
        self._promotion_chooser = promotion_chooser
        self.events = ControllerEvents()
        self._update_board()
        self._view = self._project()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def rules(self) -> IRulesEngine:
        return self._rules

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def board(self) -> BoardValue:
        return self._state.board

    @property
    def selection(self) -> Highlight | None:
        return self._state.selection

    @property
    def on_check(self) -> Highlight | None:
        return self._state.on_check

    @property
    def should_flip(self) -> bool:
        return self._state.should_flip

    @property
    def view(self) -> ViewState:
        return self._view

    def set_promotion_chooser(self, chooser: PromotionChooser | None) -> None:
        self._promotion_chooser = chooser

    # ── IBoardController impl ────────────────────────────────────────────

    def dispatch(self, event: ChessEvent) -> None:
        if isinstance(event, TileClicked):
            self.handle_tile_click(event.position)
        elif isinstance(event, ToggleFlip):
            self.toggle_flip()
        elif isinstance(event, Reset):
            self.reset()
        else:
            raise TypeError(f"Unknown board event: {event!r}")

    def handle_tile_click(self, position: Square) -> None:
        state = self._state
        pos = orient(validate_square(position), self._flipped_now())
        selection = state.selection
        applied: tuple[Square, Square, PieceType | None] | None = None

        if selection is not None:
            flipped = state.should_flip and selection.flipped
            if pos == selection.position:
                state.selection = None
                _LOGGER.debug("Deselected %s", square_name(pos))
            elif self._rules.is_own_piece(state.board, pos):
                state.selection = Highlight(pos, flipped)
                _LOGGER.debug("Re-selected %s", square_name(pos))
            else:
                applied = self._try_move(selection.position, pos)
        elif self._rules.is_own_piece(state.board, pos):
            state.selection = Highlight(pos, self._flipped_now())
            _LOGGER.debug("Selected %s", square_name(pos))
        else:
            _LOGGER.debug("Ignored click on %s", square_name(pos))

        self._refresh_view()
        if applied is not None:
            self._emit_move(*applied)

    def toggle_flip(self) -> None:
        self._state.should_flip = not self._state.should_flip
        self._update_board()
        _LOGGER.debug("Board flipping %s", "on" if self._state.should_flip else "off")
        self._refresh_view()

    def reset(self) -> None:
        self._state.board = self._rules.default_board()
        self._update_board()
        self._state.selection = None
        _LOGGER.info("Board reset to the initial position")
        self._refresh_view()
        for cb in self.events.on_reset:
            cb()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _flipped_now(self) -> bool:
        return is_flipped_view(self._rules, self._state.board, self._state.should_flip)

    def _try_move(
        self, from_sq: Square, to_sq: Square
    ) -> tuple[Square, Square, PieceType | None] | None:
        """Apply *from_sq* → *to_sq* if legal. Returns the move or ``None``."""
        rules = self._rules
        board = self._state.board
        promotion: PieceType | None = None

        if not rules.is_legal_move(board, from_sq, to_sq):
            if self._promotion_chooser is None or not rules.needs_promotion(
                board, from_sq, to_sq
            ):
                _LOGGER.debug(
                    "Ignored illegal move %s%s",
                    square_name(from_sq),
                    square_name(to_sq),
                )
                return None
            promotion = self._promotion_chooser(rules.side_to_move(board))
            if promotion is None or not rules.is_legal_move(
                board, from_sq, to_sq, promotion
            ):
                _LOGGER.debug("Promotion cancelled on %s", square_name(to_sq))
                return None

        self._state.board = rules.apply_move(board, from_sq, to_sq, promotion)
        self._update_board()
        self._state.selection = None
        _LOGGER.info(
            "Move %s%s%s",
            square_name(from_sq),
            square_name(to_sq),
            "" if promotion is None else f"={promotion.name}",
        )
        return from_sq, to_sq, promotion

    def _update_board(self) -> None:
        """Recompute sprites and the check indicator for the live board."""
        state = self._state
        state.sprites = display_sprites(self._rules, state.board, state.should_flip)
        state.on_check = check_indicator(self._rules, state.board, state.should_flip)

    def _project(self) -> ViewState:
        state = self._state
        return project(
            self._rules,
            state.board,
            state.sprites,
            state.should_flip,
            state.selection,
            state.on_check,
        )

    def _refresh_view(self) -> None:
        view = self._project()
        if view == self._view:
            return
        self._view = view
        for cb in self.events.on_view_changed:
            cb(view)

    def _emit_move(
        self, from_sq: Square, to_sq: Square, promotion: PieceType | None
    ) -> None:
        for cb in self.events.on_move:
            cb(from_sq, to_sq, promotion, self._state.board)
