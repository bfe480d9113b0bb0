"""tictactoe package.

Board rules, the turn-by-turn run loop, console and scripted front ends, and
a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .engine import Interface, player_moves, run
from .errors import InvalidInput, MoveError, TileAlreadyMarked
from .game_basics import Board, GameState, Player, Sign, Status
from .validation import validate_input

__all__ = [
    "Board",
    "GameState",
    "Player",
    "Sign",
    "Status",
    "Interface",
    "run",
    "player_moves",
    "validate_input",
    "MoveError",
    "InvalidInput",
    "TileAlreadyMarked",
]
