"""Console front end: prompts on stdout, reads moves from stdin."""
from __future__ import annotations

import random
import sys
from typing import Optional, Sequence, TextIO

from .engine import Interface
from .game_basics import Board, GameState, Player, Sign, Status


class ConsoleInterface(Interface):
    def __init__(
        self,
        first: Optional[Sign] = None,
        rng: Optional[random.Random] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.first = first
        self.rng = rng if rng is not None else random.Random()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        print(text, file=self.stdout)

    def choose_first_player(self, players: Sequence[Player]) -> Player:
        if self.first is None:
            return self.rng.choice(list(players))
        return next(p for p in players if p.sign is self.first)

    def retrieve_input(self, message: str) -> str:
        self._write(message)
        line = self.stdin.readline()
        if not line:
            raise EOFError("No more input")
        return line

    def on_play(self, player: Player, index: int) -> None:
        self._write(f"{player.sign} plays on {index}")

    def show_board(self, board: Board) -> None:
        self._write(str(board))

    def on_end(self, game_state: GameState) -> None:
        if game_state.status is Status.FULL:
            self._write("Board is full, it's a draw.")
        elif game_state.status is Status.WON:
            self._write(f"{game_state.winner} Won the game!")
        else:
            raise RuntimeError(f"Game reported over in state {game_state!r}")
