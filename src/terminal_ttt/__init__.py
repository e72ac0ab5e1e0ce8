"""terminal_ttt package.

Game engine (board, rules, opponents, turn controller, session score) and a
rich-based terminal front end.

Convenience imports are exposed for common workflows.
"""

from .board import Board, InvalidMove, Mark
from .controller import GameMode, TurnController, new_match
from .rules import evaluate
from .session import Score, SessionTracker
from .strategy import Difficulty, choose_move, strategy_for

__all__ = [
    "Board",
    "InvalidMove",
    "Mark",
    "GameMode",
    "TurnController",
    "new_match",
    "evaluate",
    "Score",
    "SessionTracker",
    "Difficulty",
    "choose_move",
    "strategy_for",
]
