"""Board representation for the playfield."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .tetromino import TetrominoType


# Default dimensions of the playfield.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]

# Mapping from ``TetrominoType`` to the integer stored in the grid.  The
# specific numeric values are not important as long as ``0`` represents an empty
# cell.
PIECE_VALUES = {t: i + 1 for i, t in enumerate(TetrominoType)}


def create_empty_grid(rows: int = HEIGHT, cols: int = WIDTH) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((rows, cols), dtype=np.uint8)


class Board:
    """Fixed-size occupancy matrix.

    The dimensions are chosen at construction and never change afterwards.
    Row ``0`` is the top of the playfield.
    """

    def __init__(self, rows: int = HEIGHT, cols: int = WIDTH) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self.grid: Grid = create_empty_grid(rows, cols)

    @property
    def height(self) -> int:
        return self._rows

    @property
    def width(self) -> int:
        return self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get_cell(self, row: int, col: int) -> int:
        """Return the value stored at ``(row, col)``.

        Coordinates outside the board report as occupied (``1``) so that the
        walls and the floor behave exactly like locked blocks during collision
        checks.
        """

        if self.in_bounds(row, col):
            return int(self.grid[row, col])
        return 1

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied.
        """

        return self.get_cell(row, col) == 0

    def set_cell(self, row: int, col: int, value: int = 1) -> None:
        """Mark ``(row, col)`` with ``value`` (occupied unless ``value`` is 0).

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) out of bounds")
        self.grid[row, col] = np.uint8(value)

    def is_row_full(self, row: int) -> bool:
        """Return ``True`` iff every column of ``row`` is occupied."""

        if not 0 <= row < self._rows:
            return False
        return bool(np.all(self.grid[row] != 0))

    def remove_row_shift_down(self, row: int) -> None:
        """Delete ``row``, drop every row above it by one and empty row ``0``.

        The grid array is updated in place so references held by renderers
        stay valid.
        """

        if not 0 <= row < self._rows:
            raise IndexError(f"Row {row} out of bounds")
        if row > 0:
            self.grid[1 : row + 1] = self.grid[0:row].copy()
        self.grid[0] = 0

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def snapshot(self) -> Grid:
        """Return a copy of the grid that callers may freely mutate."""

        return self.grid.copy()
