"""Input events and the abstract controller interface.

The UI shell talks to the game layer only through these three events.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from chessview.core.types import Square, validate_square

if TYPE_CHECKING:
    from chessview.game.projector import ViewState


# ── Input events ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TileClicked:
    """A board tile was clicked.  *position* is the raw (display) square."""

    position: Square

    def __post_init__(self) -> None:
        validate_square(self.position)


@dataclass(frozen=True, slots=True)
class ToggleFlip:
    """The "board flipping" setting was toggled."""


@dataclass(frozen=True, slots=True)
class Reset:
    """Start over from the initial position."""


ChessEvent: TypeAlias = TileClicked | ToggleFlip | Reset


# ── Controller interface ─────────────────────────────────────────────────────


class IBoardController(ABC):
    """Interface for the board state machine."""

    @property
    @abstractmethod
    def view(self) -> ViewState:
        """The most recently projected view state."""

    @abstractmethod
    def dispatch(self, event: ChessEvent) -> None:
        """Process one input event to completion."""

    @abstractmethod
    def handle_tile_click(self, position: Square) -> None:
        """Select, deselect, re-select or move, depending on state."""

    @abstractmethod
    def toggle_flip(self) -> None:
        """Invert the board-flipping setting."""

    @abstractmethod
    def reset(self) -> None:
        """Restore the initial position and clear the selection."""
