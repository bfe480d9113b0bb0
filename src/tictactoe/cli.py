from __future__ import annotations

import argparse
import logging
import random

from . import settings
from .console import ConsoleInterface
from .engine import run
from .errors import ScriptExhausted
from .game_basics import Board, Sign
from .scripted import ScriptedInterface


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random first-player draw (default: $TTT_SEED)",
    )

    # interactive game
    p_play = sub.add_parser("play", help="Play a two-player game on the console")
    p_play.add_argument(
        "--first",
        choices=list(settings.FIRST_PLAYER_CHOICES),
        default=None,
        help="Sign that moves first (default: $TTT_FIRST_PLAYER, else random)",
    )

    # scripted game
    p_rep = sub.add_parser("replay", help="Play a fixed sequence of moves and print the result")
    p_rep.add_argument("--moves", required=True, help='Comma-separated tile numbers, e.g. "5,2,6,4"; empty entries count as invalid moves')
    p_rep.add_argument("--first", choices=["O", "X"], default="O", help="Sign that moves first (default: O)")

    # board classification
    p_state = sub.add_parser("state", help="Classify a board (9 chars of O, X or space)")
    p_state.add_argument("--board", required=True, help='Board string, e.g. "OX X OO X"')

    return p


def _cmd_play(ns: argparse.Namespace) -> int:
    first = settings.parse_first_player(ns.first) if ns.first is not None else settings.first_player()
    seed = ns.seed if ns.seed is not None else settings.seed()
    interface = ConsoleInterface(first=first, rng=random.Random(seed))
    try:
        run(interface)
    except (EOFError, KeyboardInterrupt):
        logging.error("Game aborted before it finished")
        return 1
    return 0


def _cmd_replay(ns: argparse.Namespace) -> int:
    moves = ns.moves.split(',')
    interface = ScriptedInterface(moves, first=Sign(ns.first))
    try:
        state = run(interface)
    except ScriptExhausted as e:
        for line in interface.actions:
            print(line)
        logging.error("%s", e)
        return 1
    for line in interface.actions:
        print(line)
    logging.info("state=%s winner=%s", state.status.value, state.winner or "-")
    return 0


def _cmd_state(ns: argparse.Namespace) -> int:
    try:
        board = Board.from_str(ns.board)
    except ValueError as e:
        logging.error("Invalid board string: %s", e)
        return 2
    state = board.get_game_state()
    logging.info(
        "state=%s winner=%s full=%s",
        state.status.value,
        state.winner or "-",
        board.is_full(),
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        from importlib.metadata import PackageNotFoundError, version as _ver

        try:
            print(_ver("tictactoe"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    try:
        if ns.cmd == "play":
            return _cmd_play(ns)
        if ns.cmd == "replay":
            return _cmd_replay(ns)
        if ns.cmd == "state":
            return _cmd_state(ns)
    except ValueError as e:
        logging.error("%s", e)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
