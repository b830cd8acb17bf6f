"""
Depth-bounded, full-width minimax from a fixed player's perspective.
Tie-break policy:
- Candidate moves are generated in ascending cell order.
- Maximizing keeps a candidate scoring >= the best so far, minimizing keeps <=.
- Ties are therefore won by the last equally-scored move (highest cell index).
Positions beyond the depth horizon score 0; there is no pruning and no heuristic.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple, Optional, Sequence

from .game_basics import Board, is_terminal, other_player
from .geometry import DEFAULT_GEOMETRY, BoardGeometry
from .moves import all_moves
from .scoring import score_board
from .validation import validate_input


class Mode(Enum):
    MAX = "max"
    MIN = "min"

    def switch(self) -> "Mode":
        return Mode.MIN if self is Mode.MAX else Mode.MAX


class SearchResult(NamedTuple):
    move: Optional[Board]
    score: Optional[int]


NO_RESULT = SearchResult(None, None)


def compare_moves(mode: Mode, best: SearchResult, candidate: SearchResult) -> SearchResult:
    if best.score is None:
        return candidate
    if mode is Mode.MAX:
        return candidate if candidate.score >= best.score else best
    return candidate if candidate.score <= best.score else best


def mini_max_step(
    depth: int,
    original_player: str,
    current_player: str,
    mode: Mode,
    board: Sequence[str],
    geometry: BoardGeometry = DEFAULT_GEOMETRY,
) -> SearchResult:
    if depth <= 0:
        return SearchResult(None, score_board(0, original_player, board, geometry))
    best = NO_RESULT
    for move in all_moves(current_player, board):
        if is_terminal(original_player, move, geometry):
            score = score_board(depth, original_player, move, geometry)
        else:
            score = mini_max_step(
                depth - 1,
                original_player,
                other_player(current_player),
                mode.switch(),
                move,
                geometry,
            ).score
        best = compare_moves(mode, best, SearchResult(move, score))
    return best


def mini_max(
    depth: int,
    player: str,
    board: Sequence[str],
    geometry: BoardGeometry = DEFAULT_GEOMETRY,
) -> Board:
    """Return the board after ``player``'s best move, or ``board`` itself if the game is over.

    Decided boards (either side has a line, or no empty cell) are returned
    unchanged without validating the other arguments. Otherwise invalid input
    raises an ``InvalidInputError`` subclass before any search work.
    """
    board = tuple(board)
    if is_terminal(player, board, geometry):
        logging.debug("Board %s is already decided", ''.join(board))
        return board
    validate_input(depth, player, board, geometry)
    result = mini_max_step(depth, player, player, Mode.MAX, board, geometry)
    logging.debug(
        "depth=%d player=%s score=%s best=%s",
        depth,
        player,
        result.score,
        ''.join(result.move) if result.move is not None else None,
    )
    if result.move is None:
        return board
    return result.move
