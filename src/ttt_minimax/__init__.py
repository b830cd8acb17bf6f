"""ttt_minimax package.

Depth-bounded minimax move selection for square n-in-a-row boards, board
geometry, self-play, and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .errors import (
    ErrorKind,
    InvalidBoardSizeError,
    InvalidBoardSymbolsError,
    InvalidDepthError,
    InvalidInputError,
    InvalidPlayerError,
)
from .game_basics import EMPTY, O, X, is_draw, is_terminal, is_winning, other_player
from .geometry import DEFAULT_GEOMETRY, BoardGeometry
from .moves import all_moves
from .scoring import score_board
from .solver import Mode, SearchResult, compare_moves, mini_max, mini_max_step
from .trajectories import play_out
from .validation import check_input, validate_input

__all__ = [
    "X",
    "O",
    "EMPTY",
    "other_player",
    "is_winning",
    "is_draw",
    "is_terminal",
    "BoardGeometry",
    "DEFAULT_GEOMETRY",
    "all_moves",
    "score_board",
    "Mode",
    "SearchResult",
    "compare_moves",
    "mini_max",
    "mini_max_step",
    "play_out",
    "check_input",
    "validate_input",
    "ErrorKind",
    "InvalidInputError",
    "InvalidBoardSymbolsError",
    "InvalidBoardSizeError",
    "InvalidPlayerError",
    "InvalidDepthError",
]
