"""Piece-placement parsing.

The placement field is the first field of a FEN record: eight ranks
separated by ``/``, rank 8 first, digits counting empty squares.
"""

from __future__ import annotations

from chessview.core.enums import Color, PieceType

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

EMPTY = ""

_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

PIECE_CHARS: tuple[str, ...] = tuple(_CHAR_MAP)
_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


def piece_of(char: str) -> tuple[Color, PieceType]:
    """FEN character → (color, piece type), e.g. 'N' → white knight."""
    try:
        return _CHAR_MAP[char]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None


def piece_char(color: Color, piece_type: PieceType) -> str:
    """(color, piece type) → FEN character, e.g. black knight → 'n'."""
    return _FEN_CHARS[(color, piece_type)]


def parse_placement(placement: str) -> tuple[str, ...]:
    """Expand a placement field (or full FEN record) into 64 slots, rank 8 first.

    Each slot holds the piece's FEN character or ``""`` for an empty
    square.  Index ``i`` covers rank ``8 - i // 8`` and file ``i % 8``.
    """
    # A full FEN record is accepted; only its first field is read.
    fields = placement.split()
    if not fields:
        raise ValueError(f"Invalid placement (empty): {placement!r}")
    ranks = fields[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    slots: list[str] = []
    for rank_text in ranks:
        width = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                slots.extend([EMPTY] * step)
                width += step
            else:
                piece_of(ch)
                slots.append(ch)
                width += 1
            if width > 8:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if width != 8:
            raise ValueError(f"Invalid placement rank width: {placement!r}")

    return tuple(slots)


def piece_count(slots: tuple[str, ...]) -> int:
    """Number of occupied slots."""
    return sum(1 for slot in slots if slot)
