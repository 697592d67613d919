"""Tetromino definitions and basic behaviour.

Each of the seven shapes is a small constant 0/1 matrix in its spawn
orientation.  A falling piece is nothing more than one of those matrices
(possibly rotated) together with the board coordinates of its top-left
corner, so no rotation index is tracked: rotating four times gives back the
original matrix by construction.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Tuple

Matrix = Tuple[Tuple[int, ...], ...]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


SHAPES: Dict[TetrominoType, Matrix] = {
    TetrominoType.I: ((1, 1, 1, 1),),
    TetrominoType.J: ((1, 0, 0), (1, 1, 1)),
    TetrominoType.L: ((0, 0, 1), (1, 1, 1)),
    TetrominoType.O: ((1, 1), (1, 1)),
    TetrominoType.S: ((0, 1, 1), (1, 1, 0)),
    TetrominoType.T: ((0, 1, 0), (1, 1, 1)),
    TetrominoType.Z: ((1, 1, 0), (0, 1, 1)),
}


def rotate_matrix(matrix: Matrix) -> Matrix:
    """Return ``matrix`` rotated 90 degrees clockwise.

    Row ``c`` of the result is column ``c`` of the input read from the bottom
    up, i.e. a transpose followed by reversing each row.
    """

    return tuple(
        tuple(row[c] for row in reversed(matrix)) for c in range(len(matrix[0]))
    )


def matrix_cells(matrix: Matrix) -> List[Tuple[int, int]]:
    """Return the ``(row, col)`` offsets of the filled cells of ``matrix``."""

    return [
        (r, c) for r, row in enumerate(matrix) for c, value in enumerate(row) if value
    ]


@dataclass(frozen=True)
class Piece:
    """Active falling piece: a shape matrix anchored at ``(row, col)``."""

    kind: TetrominoType
    matrix: Matrix
    row: int = 0
    col: int = 0

    @classmethod
    def of(cls, kind: TetrominoType, row: int = 0, col: int = 0) -> "Piece":
        """Build a piece of ``kind`` in its spawn orientation."""

        return cls(TetrominoType(kind), SHAPES[TetrominoType(kind)], row, col)

    @property
    def width(self) -> int:
        return len(self.matrix[0])

    @property
    def height(self) -> int:
        return len(self.matrix)

    def moved(self, d_row: int, d_col: int) -> "Piece":
        """Return a copy of the piece translated by the given offsets."""

        return replace(self, row=self.row + d_row, col=self.col + d_col)

    def rotated(self) -> "Piece":
        """Return a copy with the matrix rotated clockwise about the anchor."""

        return replace(self, matrix=rotate_matrix(self.matrix))

    def cells(self) -> List[Tuple[int, int]]:
        """Return the board coordinates of the piece's filled cells."""

        return [(self.row + dr, self.col + dc) for dr, dc in matrix_cells(self.matrix)]
