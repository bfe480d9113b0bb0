"""
Move input validation.
Teaching notes:
- Only the text is checked here: a number between 1 and 9.
- Leading zeros and a leading '+' are allowed, so at most one significant
  digit is ever converted.
- Whether the tile is free is the board's business (TileAlreadyMarked).
"""
import re

from .errors import InvalidInput

_TILE_NUMBER = re.compile(r"\+?0*([0-9])")


def validate_input(raw: str) -> int:
    m = _TILE_NUMBER.fullmatch(raw.strip())
    if m is not None:
        n = int(m.group(1))
        if 1 <= n <= 9:
            return n
    raise InvalidInput()
