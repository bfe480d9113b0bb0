"""Exceptions raised by the game rules.

Move errors are recoverable: the run loop shows their message to the player
and asks for another move. Anything else is a bug and propagates.
"""


class MoveError(ValueError):
    """A move the player can retry."""


class InvalidInput(MoveError):
    def __init__(self, message: str = "Please enter a number between 1 and 9"):
        super().__init__(message)


class TileAlreadyMarked(MoveError):
    def __init__(self, message: str = "This tile is already marked. Please try another tile"):
        super().__init__(message)


class ScriptExhausted(RuntimeError):
    """A scripted front end was asked for more input than it was given."""
