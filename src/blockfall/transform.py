"""Collision testing and piece transforms.

Every function here except :func:`lock` is pure: a transform that would
collide hands back the piece it was given instead of failing, so callers can
compare identities to learn whether the move was accepted.
"""

from __future__ import annotations

import random
from typing import Optional

from .board import Board, PIECE_VALUES
from .tetromino import Piece, TetrominoType


def spawn(
    board: Board,
    kind: Optional[TetrominoType] = None,
    rng: Optional[random.Random] = None,
) -> Piece:
    """Return a new piece at the top centre of ``board``.

    When ``kind`` is omitted one of the seven shapes is chosen uniformly at
    random, with replacement.  The caller decides what a colliding spawn
    means; see :meth:`blockfall.controller.GameController`.
    """

    if kind is None:
        kind = (rng or random).choice(list(TetrominoType))
    piece = Piece.of(kind)
    return piece.moved(0, board.width // 2 - piece.width // 2)


def collides(piece: Piece, board: Board) -> bool:
    """Return ``True`` if any filled cell of ``piece`` overlaps an occupied cell.

    Walls and the floor are not special cased: :meth:`Board.is_empty` reports
    off-board coordinates as occupied.
    """

    return any(not board.is_empty(row, col) for row, col in piece.cells())


def try_move(piece: Piece, d_row: int, d_col: int, board: Board) -> Piece:
    """Return ``piece`` shifted by the offsets, or ``piece`` itself if blocked."""

    moved = piece.moved(d_row, d_col)
    if collides(moved, board):
        return piece
    return moved


def rotate(piece: Piece, board: Board) -> Piece:
    """Rotate clockwise in place, discarding the rotation if it collides.

    There is no wall kick: a rotation that would poke through a wall or into
    the stack is simply refused.
    """

    rotated = piece.rotated()
    if collides(rotated, board):
        return piece
    return rotated


def hard_drop(piece: Piece, board: Board) -> Piece:
    """Return ``piece`` moved down to the lowest legal row in its column."""

    row = piece.row
    while not collides(piece.moved(row - piece.row + 1, 0), board):
        row += 1
    return piece.moved(row - piece.row, 0)


def lock(piece: Piece, board: Board) -> None:
    """Merge the filled cells of ``piece`` into ``board``.

    Raises:
        IndexError: If part of the piece lies outside the board.
    """

    cells = piece.cells()
    if not all(board.in_bounds(row, col) for row, col in cells):
        raise IndexError("Block out of bounds")

    value = PIECE_VALUES[piece.kind]
    for row, col in cells:
        board.set_cell(row, col, value)
