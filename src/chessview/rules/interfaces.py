"""Protocol for the rules engine consumed by the game layer."""

from __future__ import annotations

from typing import Any, Protocol, TypeAlias

from chessview.core.enums import Color, GameStatus, PieceType
from chessview.core.types import Square

# Opaque to the game layer; only the rules engine looks inside.
BoardValue: TypeAlias = Any


class IRulesEngine(Protocol):
    """Board representation, legality and game status.

    Boards are treated as immutable values: :meth:`apply_move` returns a
    new board and never changes its argument.
    """

    def default_board(self) -> BoardValue: ...

    def side_to_move(self, board: BoardValue) -> Color: ...

    def is_own_piece(self, board: BoardValue, sq: Square) -> bool: ...

    def is_legal_move(
        self,
        board: BoardValue,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> bool: ...

    def needs_promotion(
        self, board: BoardValue, from_sq: Square, to_sq: Square
    ) -> bool: ...

    def apply_move(
        self,
        board: BoardValue,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> BoardValue: ...

    def is_in_check(self, board: BoardValue) -> bool: ...

    def king_square(self, board: BoardValue, color: Color) -> Square: ...

    def status(self, board: BoardValue) -> GameStatus: ...

    def piece_placement(self, board: BoardValue) -> str: ...
