"""
Self-play: both sides pick moves with the same depth-bounded search.
"""
from typing import List, Sequence

from .game_basics import Board, is_terminal, other_player
from .geometry import DEFAULT_GEOMETRY, BoardGeometry
from .solver import mini_max
from .validation import validate_input


def play_out(
    depth: int,
    player: str,
    board: Sequence[str],
    geometry: BoardGeometry = DEFAULT_GEOMETRY,
) -> List[Board]:
    """Boards from ``board`` until the game is decided, ``player`` moving first."""
    s = tuple(board)
    game: List[Board] = [s]
    if is_terminal(player, s, geometry):
        return game
    validate_input(depth, player, s, geometry)
    p = player
    while not is_terminal(p, s, geometry):
        s = mini_max(depth, p, s, geometry)
        game.append(s)
        p = other_player(p)
    return game
