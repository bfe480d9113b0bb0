"""
Turn controller: drives a game from the first move to the end.

All input and output goes through an Interface, so the same loop serves the
console, scripted replays and tests.
"""
from __future__ import annotations

import abc
import logging
from typing import Sequence

from .errors import MoveError
from .game_basics import Board, GameState, Player, Sign
from .validation import validate_input


class Interface(abc.ABC):
    """Front end the run loop talks to. Every call blocks the game."""

    @abc.abstractmethod
    def choose_first_player(self, players: Sequence[Player]) -> Player:
        """Return one of ``players``; that player moves first."""

    @abc.abstractmethod
    def retrieve_input(self, message: str) -> str:
        """Show ``message`` and return the player's raw reply."""

    @abc.abstractmethod
    def on_play(self, player: Player, index: int) -> None:
        ...

    @abc.abstractmethod
    def show_board(self, board: Board) -> None:
        ...

    @abc.abstractmethod
    def on_end(self, game_state: GameState) -> None:
        ...


def run(interface: Interface) -> GameState:
    players = (Player(Sign.O), Player(Sign.X))
    current = interface.choose_first_player(players)
    if not any(current is p for p in players):
        raise ValueError(f"choose_first_player returned an unknown player: {current!r}")
    logging.debug("first_player=%s", current.sign)

    board = Board()
    while not board.get_game_state().is_over:
        interface.show_board(board)
        player_moves(current, board, interface)
        current = next(p for p in players if p.sign is current.sign.other())

    state = board.get_game_state()
    logging.info("game over: state=%s winner=%s", state.status.value, state.winner or "-")
    interface.on_end(state)
    interface.show_board(board)
    return state


def player_moves(player: Player, board: Board, interface: Interface) -> int:
    raw = interface.retrieve_input(f"{player.sign}, please enter a tile number (1-9):")
    while True:
        try:
            index = board.set_tile(validate_input(raw), player.sign)
        except MoveError as e:
            logging.debug("rejected input %r from %s: %s", raw, player.sign, e)
            raw = interface.retrieve_input(str(e))
            continue
        logging.debug("%s plays on %d", player.sign, index)
        interface.on_play(player, index)
        return index
