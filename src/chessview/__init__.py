"""Chessview — an interactive chessboard viewer."""

__version__ = "0.1.0"
