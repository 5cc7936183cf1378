"""Tests for the python-chess rules adapter."""

import chess
import pytest
from chess import E1, E2, E4, E5, E7, E8

from chessview.core.enums import Color, GameStatus, PieceType
from chessview.core.placement import STARTING_PLACEMENT
from chessview.core.types import parse_square
from chessview.rules import DefaultRules, PythonChessRules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
STALEMATE = "k7/8/1Q6/8/8/8/8/7K b - - 0 1"
BARE_KINGS = "8/8/8/8/8/8/8/K6k w - - 0 1"
PROMOTION = "1k6/P7/8/8/8/8/8/K7 w - - 0 1"


@pytest.fixture()
def rules() -> PythonChessRules:
    return PythonChessRules()


def test_default_rules_is_python_chess() -> None:
    assert DefaultRules is PythonChessRules


class TestBoardQueries:
    def test_default_board(self, rules: PythonChessRules) -> None:
        board = rules.default_board()
        assert board == chess.Board()
        assert rules.side_to_move(board) == Color.WHITE
        assert rules.piece_placement(board) == STARTING_PLACEMENT

    def test_is_own_piece(self, rules: PythonChessRules) -> None:
        board = rules.default_board()
        assert rules.is_own_piece(board, E2)
        assert not rules.is_own_piece(board, E7)  # opponent
        assert not rules.is_own_piece(board, E4)  # empty

    def test_is_own_piece_rejects_out_of_range(self, rules: PythonChessRules) -> None:
        with pytest.raises(ValueError):
            rules.is_own_piece(rules.default_board(), 64)

    def test_king_square(self, rules: PythonChessRules) -> None:
        board = rules.default_board()
        assert rules.king_square(board, Color.WHITE) == E1
        assert rules.king_square(board, Color.BLACK) == E8

    def test_missing_king_raises(self, rules: PythonChessRules) -> None:
        board = chess.Board("8/8/8/8/8/8/8/K7 w - - 0 1")
        with pytest.raises(ValueError, match="No BLACK king"):
            rules.king_square(board, Color.BLACK)


class TestMoves:
    def test_legality(self, rules: PythonChessRules) -> None:
        board = rules.default_board()
        assert rules.is_legal_move(board, E2, E4)
        assert not rules.is_legal_move(board, E2, E5)
        assert not rules.is_legal_move(board, E7, E5)  # not White's piece

    def test_apply_move_returns_new_board(self, rules: PythonChessRules) -> None:
        board = rules.default_board()
        new_board = rules.apply_move(board, E2, E4)

        assert new_board is not board
        assert board == chess.Board()
        assert rules.side_to_move(new_board) == Color.BLACK
        assert new_board.piece_at(E4) == chess.Piece(chess.PAWN, chess.WHITE)

    def test_apply_illegal_move_raises(self, rules: PythonChessRules) -> None:
        with pytest.raises(ValueError, match="Illegal move: e2e5"):
            rules.apply_move(rules.default_board(), E2, E5)

    def test_promotion(self, rules: PythonChessRules) -> None:
        board = chess.Board(PROMOTION)
        a7, a8 = parse_square("a7"), parse_square("a8")

        assert not rules.is_legal_move(board, a7, a8)
        assert rules.needs_promotion(board, a7, a8)
        assert rules.is_legal_move(board, a7, a8, PieceType.KNIGHT)

        promoted = rules.apply_move(board, a7, a8, PieceType.KNIGHT)
        assert promoted.piece_at(a8) == chess.Piece(chess.KNIGHT, chess.WHITE)

    def test_needs_promotion_false_for_plain_moves(
        self, rules: PythonChessRules
    ) -> None:
        assert not rules.needs_promotion(rules.default_board(), E2, E4)


class TestStatus:
    def test_ongoing(self, rules: PythonChessRules) -> None:
        board = rules.default_board()
        assert rules.status(board) == GameStatus.ONGOING
        assert not rules.is_in_check(board)

    def test_checkmate(self, rules: PythonChessRules) -> None:
        board = chess.Board(FOOLS_MATE)
        assert rules.is_in_check(board)
        assert rules.status(board) == GameStatus.CHECKMATE

    def test_stalemate(self, rules: PythonChessRules) -> None:
        board = chess.Board(STALEMATE)
        assert not rules.is_in_check(board)
        assert rules.status(board) == GameStatus.STALEMATE

    def test_insufficient_material_is_draw(self, rules: PythonChessRules) -> None:
        assert rules.status(chess.Board(BARE_KINGS)) == GameStatus.DRAW
