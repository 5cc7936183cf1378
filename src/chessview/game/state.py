"""Mutable board state owned by the controller."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessview.core.types import Square, validate_square
from chessview.rules.interfaces import BoardValue


@dataclass(frozen=True, slots=True)
class Highlight:
    """A highlighted square plus the flip setting in force when it was set.

    Used for both the selection and the check indicator.
    """

    position: Square
    flipped: bool

    def __post_init__(self) -> None:
        validate_square(self.position)


@dataclass(slots=True)
class BoardState:
    """Everything the controller mutates in response to input events."""

    board: BoardValue
    should_flip: bool = True
    selection: Highlight | None = None
    on_check: Highlight | None = None
    # Display-ordered sprite keys, recomputed after every board change.
    sprites: tuple[str, ...] = field(default_factory=tuple)
