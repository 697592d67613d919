from __future__ import annotations

import random

import pytest

from blockfall.board import PIECE_VALUES, Board
from blockfall.tetromino import Piece, TetrominoType
from blockfall.transform import collides, hard_drop, lock, rotate, spawn, try_move


def _stacked_board() -> Board:
    board = Board()
    heights = [3, 5, 1, 0, 7, 2, 2, 9, 4, 1]
    for col, height in enumerate(heights):
        for row in range(board.height - height, board.height):
            board.set_cell(row, col)
    return board


@pytest.mark.parametrize(
    "kind, col",
    [
        (TetrominoType.O, 4),
        (TetrominoType.I, 3),
        (TetrominoType.T, 4),
        (TetrominoType.S, 4),
        (TetrominoType.Z, 4),
        (TetrominoType.J, 4),
        (TetrominoType.L, 4),
    ],
)
def test_spawn_is_centred_on_top_row(kind, col):
    piece = spawn(Board(), kind)
    assert piece.kind is kind
    assert (piece.row, piece.col) == (0, col)


def test_spawn_draws_every_kind():
    rng = random.Random(7)
    kinds = {spawn(Board(), rng=rng).kind for _ in range(500)}
    assert kinds == set(TetrominoType)


@pytest.mark.parametrize("board", [Board(), _stacked_board()])
def test_walls_and_floor_always_collide(board):
    for kind in TetrominoType:
        piece = Piece.of(kind)
        assert collides(piece.moved(board.height, 3), board)
        assert collides(piece.moved(5, -1), board)
        assert collides(piece.moved(0, board.width - piece.width + 1), board)


def test_collides_with_locked_cells():
    board = Board()
    board.set_cell(1, 5)
    piece = spawn(board, TetrominoType.T)  # occupies (0, 5), (1, 4..6)
    assert collides(piece, board)
    assert not collides(piece.moved(0, -2), board)


def test_blocked_move_returns_same_piece():
    board = Board()
    piece = Piece.of(TetrominoType.O, row=0, col=0)
    assert try_move(piece, 0, -1, board) is piece

    moved = try_move(piece, 0, 1, board)
    assert (moved.row, moved.col) == (0, 1)


def test_rotation_next_to_wall_is_discarded():
    board = Board()
    vertical = Piece.of(TetrominoType.I).rotated().moved(5, board.width - 1)
    assert not collides(vertical, board)
    assert rotate(vertical, board) is vertical


def test_rotation_into_stack_is_discarded():
    board = Board()
    piece = Piece.of(TetrominoType.I, row=5, col=3)
    board.set_cell(6, 3)
    assert rotate(piece, board) is piece
    board.set_cell(6, 3, 0)
    assert rotate(piece, board).matrix == ((1,), (1,), (1,), (1,))


@pytest.mark.parametrize("board", [Board(), _stacked_board()])
def test_hard_drop_comes_to_rest(board):
    for kind in TetrominoType:
        piece = spawn(board, kind)
        for orientation in range(4):
            for col in range(-1, board.width):
                candidate = piece.moved(0, col - piece.col)
                if collides(candidate, board):
                    continue
                dropped = hard_drop(candidate, board)
                assert not collides(dropped, board)
                assert dropped.col == candidate.col
                assert try_move(dropped, 1, 0, board) is dropped
            piece = piece.rotated()


def test_hard_drop_lands_o_on_floor():
    board = Board()
    dropped = hard_drop(spawn(board, TetrominoType.O), board)
    assert (dropped.row, dropped.col) == (18, 4)


def test_lock_marks_cells_with_piece_value():
    board = Board()
    piece = Piece.of(TetrominoType.Z, row=18, col=0)
    lock(piece, board)
    for row, col in piece.cells():
        assert board.get_cell(row, col) == PIECE_VALUES[TetrominoType.Z]
    assert board.occupied_count() == 4


def test_lock_outside_board_raises_without_writing():
    board = Board()
    piece = Piece.of(TetrominoType.I, row=19, col=8)
    with pytest.raises(IndexError):
        lock(piece, board)
    assert board.occupied_count() == 0
