"""View-state projection.

Pure functions mapping (board, orientation, selection, check) to what the
renderer draws.  Nothing here mutates its arguments.

Sprites are stored already in display order: slot ``i`` of the placement
field is drawn on tile ``(i % 8, i // 8)``, and the whole sequence is
reversed when the board is shown from Black's side.  Highlights instead
store a logical square together with the flip setting that was in force
when they were created; a tile is highlighted when its raw position,
transformed by that snapshot, equals the stored square.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessview.core.enums import Color, GameStatus
from chessview.core.placement import parse_placement
from chessview.core.types import Square, display_index, orient, tile_square
from chessview.game.state import Highlight
from chessview.rules.interfaces import BoardValue, IRulesEngine


@dataclass(frozen=True, slots=True)
class SquareView:
    """Render data for one tile."""

    sprite: str  # "" = empty, otherwise the FEN piece letter
    selected: bool
    in_check: bool
    position: Square  # raw position reported when this tile is clicked


@dataclass(frozen=True, slots=True)
class ViewState:
    """Everything the renderer needs, in display order (top-left first)."""

    squares: tuple[SquareView, ...]
    status: GameStatus
    side_to_move: Color
    should_flip: bool

    @property
    def is_flipped(self) -> bool:
        """Whether the board is currently drawn from Black's side."""
        return self.should_flip and self.side_to_move == Color.BLACK

    @property
    def sprites(self) -> tuple[str, ...]:
        return tuple(sq.sprite for sq in self.squares)

    @property
    def status_text(self) -> str:
        return self.status.label

    @property
    def turn_text(self) -> str:
        return self.side_to_move.label


def is_flipped_view(rules: IRulesEngine, board: BoardValue, should_flip: bool) -> bool:
    """Whether the board is currently shown from Black's side."""
    return should_flip and rules.side_to_move(board) == Color.BLACK


def sprite_slots(placement: str) -> tuple[str, ...]:
    """Placement field → 64 sprite keys, rank 8 first."""
    slots = parse_placement(placement)
    if len(slots) != 64:
        raise ValueError(f"Placement must describe 64 squares, got {len(slots)}")
    return slots


def display_sprites(
    rules: IRulesEngine, board: BoardValue, should_flip: bool
) -> tuple[str, ...]:
    """Sprite keys in display order for the current orientation."""
    slots = sprite_slots(rules.piece_placement(board))
    if is_flipped_view(rules, board, should_flip):
        return slots[::-1]
    return slots


def check_indicator(
    rules: IRulesEngine, board: BoardValue, should_flip: bool
) -> Highlight | None:
    """King square of the side to move when it is in check, else ``None``."""
    if not rules.is_in_check(board):
        return None
    color = rules.side_to_move(board)
    return Highlight(
        rules.king_square(board, color),
        is_flipped_view(rules, board, should_flip),
    )


def is_highlighted(highlight: Highlight | None, position: Square) -> bool:
    """Does *highlight* fall on the tile with raw *position*?"""
    if highlight is None:
        return False
    return highlight.position == orient(position, highlight.flipped)


def project(
    rules: IRulesEngine,
    board: BoardValue,
    sprites: tuple[str, ...],
    should_flip: bool,
    selection: Highlight | None,
    on_check: Highlight | None,
) -> ViewState:
    """Build the full :class:`ViewState` for one render."""
    if len(sprites) != 64:
        raise ValueError(f"Expected 64 sprites, got {len(sprites)}")

    squares: list[SquareView] = []
    for row in range(8):
        for col in range(8):
            raw = tile_square(col, row)
            squares.append(
                SquareView(
                    sprite=sprites[display_index(col, row)],
                    selected=is_highlighted(selection, raw),
                    in_check=is_highlighted(on_check, raw),
                    position=raw,
                )
            )

    return ViewState(
        squares=tuple(squares),
        status=rules.status(board),
        side_to_move=rules.side_to_move(board),
        should_flip=should_flip,
    )
