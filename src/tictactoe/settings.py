"""Environment-first defaults for the command line.

CLI flags win over the environment; the environment wins over the built-in
defaults.
"""

from __future__ import annotations

import os

from .game_basics import Sign

FIRST_PLAYER_CHOICES = ("O", "X", "random")


def first_player() -> Sign | None:
    """Sign that moves first, or None to pick at random.

    Reads TTT_FIRST_PLAYER (O, X or random; default random).
    """
    raw = os.getenv("TTT_FIRST_PLAYER", "random")
    return parse_first_player(raw)


def parse_first_player(raw: str) -> Sign | None:
    value = raw.strip()
    if value.lower() == "random":
        return None
    if value.upper() in ("O", "X"):
        return Sign(value.upper())
    raise ValueError(f"First player must be one of {FIRST_PLAYER_CHOICES}, got {raw!r}")


def seed() -> int | None:
    """Seed for the first-player draw, from TTT_SEED if set."""
    raw = os.getenv("TTT_SEED")
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"TTT_SEED must be an integer, got {raw!r}") from None
