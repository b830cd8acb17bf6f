"""
Game basics: symbols, board serialization, winner/draw checks.
Notes:
- A board is a tuple of n*n symbols: "x", "o" or "0" (empty), row-major.
- Boards are never mutated; every move builds a new tuple.
"""
from __future__ import annotations

from typing import Sequence, Tuple

from .errors import InvalidPlayerError
from .geometry import DEFAULT_GEOMETRY, BoardGeometry

X = "x"
O = "o"
EMPTY = "0"

PLAYERS = (X, O)
SYMBOLS = (X, O, EMPTY)

Board = Tuple[str, ...]


def other_player(player: str) -> str:
    if player == X:
        return O
    if player == O:
        return X
    raise InvalidPlayerError(f"Invalid player: {player!r}")


def serialize_board(board: Sequence[str]) -> str:
    return ''.join(board)


def deserialize_board(board_str: str) -> Board:
    """Parse "xx0oo0000" or "x,x,0,o,o,0,0,0,0" (whitespace ignored)."""
    raw = board_str.strip()
    if ',' in raw:
        return tuple(cell.strip() for cell in raw.split(','))
    return tuple(c for c in raw if not c.isspace())


def is_winning(player: str, board: Sequence[str], geometry: BoardGeometry = DEFAULT_GEOMETRY) -> bool:
    if len(board) != geometry.cells:
        return False
    for line in geometry.win_lines:
        if all(board[i] == player for i in line):
            return True
    return False


def is_draw(board: Sequence[str]) -> bool:
    # full board; a winner on a full board is checked first by callers
    return EMPTY not in board


def is_terminal(player: str, board: Sequence[str], geometry: BoardGeometry = DEFAULT_GEOMETRY) -> bool:
    if is_winning(player, board, geometry):
        return True
    if player in PLAYERS and is_winning(other_player(player), board, geometry):
        return True
    return is_draw(board)
