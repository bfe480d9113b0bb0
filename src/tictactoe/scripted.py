"""
Scripted front end: plays a fixed list of inputs and records what happened.

Used by ``ttt replay`` and by the tests to drive whole games without I/O.
"""
from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence

from .engine import Interface
from .errors import ScriptExhausted
from .game_basics import Board, GameState, Player, Sign, Status


class ScriptedInterface(Interface):
    def __init__(self, inputs: Iterable[str], first: Sign = Sign.O) -> None:
        self.inputs = deque(inputs)
        self.first = first
        self.prompts: List[str] = []
        self.actions: List[str] = []
        self.boards: List[str] = []

    def choose_first_player(self, players: Sequence[Player]) -> Player:
        return next(p for p in players if p.sign is self.first)

    def retrieve_input(self, message: str) -> str:
        self.prompts.append(message)
        if not self.inputs:
            raise ScriptExhausted(f"No more input registered (last prompt: {message!r})")
        return self.inputs.popleft()

    def on_play(self, player: Player, index: int) -> None:
        self.actions.append(f"{player.sign} plays on {index}")

    def show_board(self, board: Board) -> None:
        self.boards.append(str(board))

    def on_end(self, game_state: GameState) -> None:
        if game_state.status is Status.FULL:
            self.actions.append("Draw, board is full")
        elif game_state.status is Status.WON:
            self.actions.append(f"Game won by {game_state.winner}")
        else:
            self.actions.append("Error")
