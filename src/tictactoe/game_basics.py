"""
Game basics: signs, players, the board, winner/draw checks and game states.
Teaching notes:
- Cells are numbered 1..9, left to right, top to bottom.
- A tile is either empty (None) or marked with a Sign; a marked tile never
  changes again.
- The game state is derived from the board every time it is asked for.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .errors import TileAlreadyMarked

CELLS = range(1, 10)

WIN_PATTERNS = [
    (1, 2, 3), (4, 5, 6), (7, 8, 9),
    (1, 4, 7), (2, 5, 8), (3, 6, 9),
    (1, 5, 9), (3, 5, 7),
]

BOARD_TEMPLATE = (
    " {} | {} | {} \n"
    "-----------\n"
    " {} | {} | {} \n"
    "-----------\n"
    " {} | {} | {}"
)


class Sign(Enum):
    O = "O"
    X = "X"

    def other(self) -> "Sign":
        return Sign.X if self is Sign.O else Sign.O

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Player:
    sign: Sign


class Status(Enum):
    NOT_OVER = "not_over"
    FULL = "full"
    WON = "won"


@dataclass(frozen=True)
class GameState:
    status: Status
    winner: Optional[Sign] = None

    @property
    def is_over(self) -> bool:
        return self.status is not Status.NOT_OVER


NOT_OVER = GameState(Status.NOT_OVER)
FULL = GameState(Status.FULL)


def won(sign: Sign) -> GameState:
    return GameState(Status.WON, sign)


class Board:
    """The 3x3 grid.

    Indices outside 1..9 raise IndexError: callers are expected to validate
    player input first, so a bad index here is a programming error.
    """

    def __init__(self) -> None:
        self._tiles: List[Optional[Sign]] = [None] * 9

    @classmethod
    def from_str(cls, sequence: str) -> "Board":
        """Build a board from 9 characters of 'O', 'X' or ' ' (cell 1 first)."""
        if len(sequence) != 9:
            raise ValueError(f"Board string must be 9 characters, got {len(sequence)}")
        board = cls()
        for i, c in enumerate(sequence):
            if c == ' ':
                continue
            if c not in ('O', 'X'):
                raise ValueError(f"Unknown tile identifier: {c!r}")
            board._tiles[i] = Sign(c)
        return board

    def _slot(self, index: int) -> int:
        if index not in CELLS:
            raise IndexError(f"Tile index out of range: {index!r}")
        return index - 1

    def get_tile(self, index: int) -> Optional[Sign]:
        return self._tiles[self._slot(index)]

    def set_tile(self, index: int, sign: Sign) -> int:
        slot = self._slot(index)
        if self._tiles[slot] is not None:
            raise TileAlreadyMarked()
        self._tiles[slot] = sign
        return index

    def empty_cells(self) -> List[int]:
        return [i for i in CELLS if self._tiles[i - 1] is None]

    def is_full(self) -> bool:
        return all(t is not None for t in self._tiles)

    def get_winner(self) -> Optional[Sign]:
        for pattern in WIN_PATTERNS:
            a, b, c = (self._tiles[i - 1] for i in pattern)
            if a is not None and a == b == c:
                return a
        return None

    def get_game_state(self) -> GameState:
        # a winning move on the last empty cell is a win, not a draw
        winner = self.get_winner()
        if winner is not None:
            return won(winner)
        if self.is_full():
            return FULL
        return NOT_OVER

    def tiles(self) -> Tuple[Optional[Sign], ...]:
        return tuple(self._tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"Board.from_str({serialize_board(self)!r})"

    def __str__(self) -> str:
        return BOARD_TEMPLATE.format(*serialize_board(self))


def serialize_board(board: Board) -> str:
    return ''.join(' ' if t is None else str(t) for t in board.tiles())
