"""
Input validation for the search entry point.

Checks run in a fixed order and only the first failure is reported.
"""
from __future__ import annotations

from typing import Optional, Sequence

from .errors import ERRORS_BY_KIND, ErrorKind
from .game_basics import PLAYERS, SYMBOLS
from .geometry import DEFAULT_GEOMETRY, BoardGeometry


def is_board_valid(board: Sequence[str]) -> bool:
    return all(cell in SYMBOLS for cell in board)


def is_proper_size(board: Sequence[str], geometry: BoardGeometry = DEFAULT_GEOMETRY) -> bool:
    return len(board) == geometry.cells


def check_input(
    depth: int,
    player: str,
    board: Sequence[str],
    geometry: BoardGeometry = DEFAULT_GEOMETRY,
) -> Optional[ErrorKind]:
    if not is_board_valid(board):
        return ErrorKind.INVALID_BOARD_SYMBOLS
    if not is_proper_size(board, geometry):
        return ErrorKind.INVALID_BOARD_SIZE
    if player not in PLAYERS:
        return ErrorKind.INVALID_PLAYER
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        return ErrorKind.INVALID_DEPTH
    return None


_MESSAGES = {
    ErrorKind.INVALID_BOARD_SYMBOLS: "Board contains invalid symbols: {board}",
    ErrorKind.INVALID_BOARD_SIZE: "Board has {cells} cells, expected {expected}",
    ErrorKind.INVALID_PLAYER: "Invalid player: {player!r}",
    ErrorKind.INVALID_DEPTH: "Invalid depth: {depth!r} (must be >= 1)",
}


def validate_input(
    depth: int,
    player: str,
    board: Sequence[str],
    geometry: BoardGeometry = DEFAULT_GEOMETRY,
) -> None:
    """Raise the ``InvalidInputError`` subclass for the first violated check."""
    kind = check_input(depth, player, board, geometry)
    if kind is None:
        return
    message = _MESSAGES[kind].format(
        board=list(board),
        cells=len(board),
        expected=geometry.cells,
        player=player,
        depth=depth,
    )
    raise ERRORS_BY_KIND[kind](message)
