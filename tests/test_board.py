from __future__ import annotations

import numpy as np
import pytest

from blockfall.board import HEIGHT, WIDTH, Board


def test_new_board_is_empty_with_default_dimensions():
    board = Board()
    assert (board.height, board.width) == (HEIGHT, WIDTH) == (20, 10)
    assert board.grid.shape == (20, 10)
    assert board.occupied_count() == 0


@pytest.mark.parametrize("rows, cols", [(0, 10), (20, 0), (-1, 5)])
def test_non_positive_dimensions_rejected(rows, cols):
    with pytest.raises(ValueError):
        Board(rows, cols)


def test_dimensions_are_read_only():
    board = Board(6, 4)
    with pytest.raises(AttributeError):
        board.width = 5  # type: ignore[misc]
    assert board.width == 4


@pytest.mark.parametrize(
    "row, col", [(-1, 0), (0, -1), (HEIGHT, 0), (0, WIDTH), (HEIGHT + 3, WIDTH + 3)]
)
def test_out_of_bounds_cells_read_as_occupied(row, col):
    board = Board()
    assert board.get_cell(row, col) != 0
    assert not board.is_empty(row, col)


def test_set_cell_marks_occupied():
    board = Board()
    board.set_cell(19, 3)
    assert board.get_cell(19, 3) == 1
    assert not board.is_empty(19, 3)
    assert board.occupied_count() == 1


def test_set_cell_out_of_bounds_raises():
    board = Board()
    with pytest.raises(IndexError):
        board.set_cell(HEIGHT, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, -1)


def test_is_row_full():
    board = Board()
    for col in range(board.width - 1):
        board.set_cell(19, col)
    assert not board.is_row_full(19)
    board.set_cell(19, board.width - 1)
    assert board.is_row_full(19)
    assert not board.is_row_full(18)


def test_remove_row_shift_down_moves_rows_above():
    board = Board(4, 3)
    board.grid[0] = [1, 0, 0]
    board.grid[1] = [0, 2, 0]
    board.grid[2] = [3, 3, 3]
    board.grid[3] = [0, 0, 4]
    grid_before = board.grid

    board.remove_row_shift_down(2)

    expected = np.array([[0, 0, 0], [1, 0, 0], [0, 2, 0], [0, 0, 4]], dtype=np.uint8)
    assert np.array_equal(board.grid, expected)
    assert board.grid is grid_before


def test_remove_top_row_empties_it():
    board = Board(3, 2)
    board.grid[0] = [1, 1]
    board.grid[2] = [1, 0]
    board.remove_row_shift_down(0)
    assert board.grid.tolist() == [[0, 0], [0, 0], [1, 0]]


def test_snapshot_is_independent_copy():
    board = Board()
    snap = board.snapshot()
    snap[0, 0] = 9
    assert board.get_cell(0, 0) == 0
