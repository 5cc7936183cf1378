"""Tests for piece-placement parsing."""

import pytest

from chessview.core.enums import Color, PieceType
from chessview.core.placement import (
    PIECE_CHARS,
    STARTING_PLACEMENT,
    parse_placement,
    piece_char,
    piece_count,
    piece_of,
)


class TestParsePlacement:
    def test_starting_position(self) -> None:
        slots = parse_placement(STARTING_PLACEMENT)
        assert len(slots) == 64
        assert "".join(slots[:8]) == "rnbqkbnr"
        assert slots[8:16] == ("p",) * 8
        assert slots[16:48] == ("",) * 32
        assert "".join(slots[56:]) == "RNBQKBNR"
        assert piece_count(slots) == 32

    def test_full_fen_uses_first_field(self) -> None:
        fen = "4k3/8/8/8/8/8/4P3/4K3 w - - 0 1"
        slots = parse_placement(fen)
        assert slots[4] == "k"
        assert slots[52] == "P"
        assert slots[60] == "K"
        assert piece_count(slots) == 3

    def test_empty_board(self) -> None:
        assert parse_placement("8/8/8/8/8/8/8/8") == ("",) * 64

    @pytest.mark.parametrize(
        "placement",
        [
            "",
            "8/8/8/8/8/8/8",  # 7 ranks
            "8/8/8/8/8/8/8/8/8",  # 9 ranks
            "9/8/8/8/8/8/8/8",  # bad digit
            "0pppppppp/8/8/8/8/8/8/8",  # zero digit
            "ppppppppp/8/8/8/8/8/8/8",  # rank too wide
            "7/8/8/8/8/8/8/8",  # rank too narrow
            "x7/8/8/8/8/8/8/8",  # unknown piece letter
        ],
    )
    def test_malformed_raises(self, placement: str) -> None:
        with pytest.raises(ValueError):
            parse_placement(placement)


class TestPieceChars:
    def test_twelve_pieces(self) -> None:
        assert len(PIECE_CHARS) == 12

    def test_lookup_both_ways(self) -> None:
        assert piece_of("N") == (Color.WHITE, PieceType.KNIGHT)
        assert piece_of("k") == (Color.BLACK, PieceType.KING)
        for ch in PIECE_CHARS:
            assert piece_char(*piece_of(ch)) == ch

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            piece_of("x")
