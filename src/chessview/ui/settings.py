"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings.  Nothing is persisted."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    board_flipping: bool = True  # show the side to move at the bottom

    # Moves
    ask_promotion: bool = False  # off: pawn promotions are not playable
