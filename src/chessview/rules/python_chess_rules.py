"""Rules engine backed by the ``python-chess`` library."""

from __future__ import annotations

import chess

from chessview.core.enums import Color, GameStatus, PieceType
from chessview.core.types import Square, square_name, validate_square


def _to_color(turn: chess.Color) -> Color:
    return Color.WHITE if turn == chess.WHITE else Color.BLACK


def _from_color(color: Color) -> chess.Color:
    return chess.WHITE if color == Color.WHITE else chess.BLACK


class PythonChessRules:
    """:class:`IRulesEngine` over :class:`chess.Board`.

    Square indices coincide with python-chess (a1=0 … h8=63), and so do
    the integer values of :class:`PieceType`.
    """

    __slots__ = ()

    def default_board(self) -> chess.Board:
        return chess.Board()

    def side_to_move(self, board: chess.Board) -> Color:
        return _to_color(board.turn)

    def is_own_piece(self, board: chess.Board, sq: Square) -> bool:
        return board.color_at(validate_square(sq)) == board.turn

    def _move(
        self, from_sq: Square, to_sq: Square, promotion: PieceType | None
    ) -> chess.Move:
        return chess.Move(
            validate_square(from_sq),
            validate_square(to_sq),
            promotion=None if promotion is None else int(promotion),
        )

    def is_legal_move(
        self,
        board: chess.Board,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> bool:
        return board.is_legal(self._move(from_sq, to_sq, promotion))

    def needs_promotion(
        self, board: chess.Board, from_sq: Square, to_sq: Square
    ) -> bool:
        """True when the only legal moves *from_sq* → *to_sq* are promotions."""
        return any(
            move.promotion is not None
            for move in board.legal_moves
            if move.from_square == from_sq and move.to_square == to_sq
        )

    def apply_move(
        self,
        board: chess.Board,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> chess.Board:
        move = self._move(from_sq, to_sq, promotion)
        if not board.is_legal(move):
            raise ValueError(
                f"Illegal move: {square_name(from_sq)}{square_name(to_sq)}"
            )
        new_board = board.copy()
        new_board.push(move)
        return new_board

    def is_in_check(self, board: chess.Board) -> bool:
        return board.is_check()

    def king_square(self, board: chess.Board, color: Color) -> Square:
        sq = board.king(_from_color(color))
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    def status(self, board: chess.Board) -> GameStatus:
        if board.is_checkmate():
            return GameStatus.CHECKMATE
        if board.is_stalemate():
            return GameStatus.STALEMATE
        if (
            board.is_insufficient_material()
            or board.is_seventyfive_moves()
            or board.is_fivefold_repetition()
        ):
            return GameStatus.DRAW
        return GameStatus.ONGOING

    def piece_placement(self, board: chess.Board) -> str:
        return board.board_fen()
