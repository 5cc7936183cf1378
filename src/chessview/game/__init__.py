"""Game layer — board state controller and view-state projection.

Quick start::

    from chessview.game import BoardController, TileClicked

    ctrl = BoardController()
    ctrl.events.on_view_changed.append(render)
    ctrl.dispatch(TileClicked(12))  # select the e2 pawn
    ctrl.dispatch(TileClicked(28))  # e2-e4
"""

from chessview.game.controller import BoardController, ControllerEvents
from chessview.game.interfaces import (
    ChessEvent,
    IBoardController,
    Reset,
    TileClicked,
    ToggleFlip,
)
from chessview.game.projector import SquareView, ViewState, project
from chessview.game.state import BoardState, Highlight

__all__ = [
    # Interfaces
    "ChessEvent",
    "IBoardController",
    "Reset",
    "TileClicked",
    "ToggleFlip",
    # Concrete
    "BoardController",
    "BoardState",
    "ControllerEvents",
    "Highlight",
    "SquareView",
    "ViewState",
    "project",
]
