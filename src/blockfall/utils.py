"""Utility helpers for the engine and its renderers."""

from __future__ import annotations

from typing import List, Optional

from .board import Board, PIECE_VALUES
from .tetromino import Piece


BASE_DROP_INTERVAL_MS = 1000.0
MIN_DROP_INTERVAL_MS = 20.0


def drop_interval_ms(level: int) -> float:
    """Return the fall interval in milliseconds for ``level``.

    The interval is ``1000 / level``, so pieces fall faster as the level
    rises.  It never drops below ``MIN_DROP_INTERVAL_MS``.
    """

    if level < 1:
        raise ValueError(f"Level must be at least 1, got {level}")
    return max(MIN_DROP_INTERVAL_MS, BASE_DROP_INTERVAL_MS / level)


def render_grid(board: Board, active: Optional[Piece] = None) -> List[List[int]]:
    """Return the locked cells as nested lists with ``active`` painted on top.

    The board itself is left untouched.  Cells of the piece that fall outside
    the board are dropped, the rest take the piece kind's ``PIECE_VALUES``
    entry.
    """

    grid = board.grid.tolist()
    if active is not None:
        for r, c in active.cells():
            if board.in_bounds(r, c):
                grid[r][c] = PIECE_VALUES[active.kind]
    return grid


def format_grid(grid: List[List[int]]) -> str:
    """Return ``grid`` as ASCII art, ``#`` for filled and ``.`` for empty."""

    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)
