"""
Terminal scoring from one player's perspective: +1 win, -1 loss, 0 draw.
A depth of zero means the horizon was reached and scores 0 (no estimate).
"""
from typing import Sequence

from .game_basics import is_draw, is_winning, other_player
from .geometry import DEFAULT_GEOMETRY, BoardGeometry


def score_board(
    depth: int,
    original_player: str,
    board: Sequence[str],
    geometry: BoardGeometry = DEFAULT_GEOMETRY,
) -> int:
    if depth == 0:
        return 0
    if len(board) == 0:
        return 0
    if is_winning(original_player, board, geometry):
        return 1
    if is_winning(other_player(original_player), board, geometry):
        return -1
    if is_draw(board):
        return 0
    raise ValueError(f"Cannot score non-terminal board {list(board)} at depth {depth}")
