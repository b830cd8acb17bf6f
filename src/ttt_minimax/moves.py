from typing import List, Sequence

from .game_basics import EMPTY, Board


def empty_cells(board: Sequence[str]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def apply_move(board: Sequence[str], idx: int, player: str) -> Board:
    lst = list(board)
    lst[idx] = player
    return tuple(lst)


def all_moves(player: str, board: Sequence[str]) -> List[Board]:
    """Every board reachable by one ``player`` move, in ascending cell order."""
    return [apply_move(board, i, player) for i in empty_cells(board)]
