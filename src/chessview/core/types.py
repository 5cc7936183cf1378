"""Squares, display tiles and the orientation transform.

Squares use python-chess numbering (a1=0 … h8=63).  Display tiles are
addressed by column (0 = left) and row (0 = top); a tile's *raw position*
is the square it shows while the board is not flipped.  Flipping mirrors
every square through the board centre, so ``sq -> 63 - sq`` both applies
and undoes it.
"""

from __future__ import annotations

from typing import TypeAlias

import chess

Square: TypeAlias = int  # 0-63

file_of = chess.square_file
rank_of = chess.square_rank
make_square = chess.square


def square_name(sq: Square) -> str:
    """0 -> 'a1', 63 -> 'h8'."""
    return chess.square_name(validate_square(sq))


def parse_square(name: str) -> Square:
    """'e4' -> 28.  Raises ValueError for anything but a1..h8."""
    try:
        return chess.parse_square(name)
    except ValueError:
        raise ValueError(f"Invalid square name: {name!r}") from None


def is_valid_square(sq: int) -> bool:
    return sq in chess.SQUARES


def validate_square(value: int) -> Square:
    """Return *value* unchanged, or raise if it is not a square index."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Square index must be an int: {value!r}")
    if not is_valid_square(value):
        raise ValueError(f"Square index out of range [0, 63]: {value}")
    return value


def _check_tile(col: int, row: int) -> None:
    if not (0 <= col < 8 and 0 <= row < 8):
        raise ValueError(f"Tile out of range: col={col}, row={row}")


def flip_square(sq: Square) -> Square:
    return 63 - validate_square(sq)


def orient(sq: Square, flipped: bool) -> Square:
    """*sq* seen through the flip transform when *flipped* is set."""
    return flip_square(sq) if flipped else validate_square(sq)


def tile_square(col: int, row: int) -> Square:
    """Raw position reported for the tile at (*col*, *row*)."""
    _check_tile(col, row)
    return make_square(col, 7 - row)


def display_index(col: int, row: int) -> int:
    """Index of the tile at (*col*, *row*) in a display-ordered sequence."""
    _check_tile(col, row)
    return row * 8 + col
