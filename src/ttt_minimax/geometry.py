"""
Board geometry: side length, cell count and the win-line table.
Notes:
- Cells are indexed row-major, 0 .. n*n-1.
- Win lines are the n rows, the n columns, the main diagonal and the anti-diagonal.
- Geometries are built once per side length and shared.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence, Tuple

import numpy as np

Line = Tuple[int, ...]


@dataclass(frozen=True)
class BoardGeometry:
    side: int
    win_lines: Tuple[Line, ...]

    @property
    def cells(self) -> int:
        return self.side * self.side

    @staticmethod
    def for_side(side: int) -> "BoardGeometry":
        return _geometry_for_side(side)

    @staticmethod
    def for_board(board: Sequence[str]) -> Optional["BoardGeometry"]:
        """Geometry whose cell count equals ``len(board)``, or None if not a perfect square."""
        n = math.isqrt(len(board))
        if n < 1 or n * n != len(board):
            return None
        return _geometry_for_side(n)


def win_lines_for_side(side: int) -> Tuple[Line, ...]:
    grid = np.arange(side * side).reshape(side, side)
    lines = []
    lines.extend(grid)
    lines.extend(grid.T)
    lines.append(np.diagonal(grid))
    lines.append(np.diagonal(np.fliplr(grid)))
    return tuple(tuple(int(i) for i in line) for line in lines)


@lru_cache(maxsize=None)
def _geometry_for_side(side: int) -> BoardGeometry:
    if side < 1:
        raise ValueError(f"Board side must be >= 1, got {side}")
    return BoardGeometry(side=side, win_lines=win_lines_for_side(side))


DEFAULT_GEOMETRY = BoardGeometry.for_side(3)
