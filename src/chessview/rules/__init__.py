"""Rules engine package: protocol and the python-chess implementation."""

from chessview.rules.interfaces import BoardValue, IRulesEngine
from chessview.rules.python_chess_rules import PythonChessRules

DefaultRules: type[IRulesEngine] = PythonChessRules

__all__ = [
    "BoardValue",
    "DefaultRules",
    "IRulesEngine",
    "PythonChessRules",
]
