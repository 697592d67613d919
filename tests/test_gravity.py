import pytest

from blockfall.board import PIECE_VALUES, Board
from blockfall.tetromino import Piece, TetrominoType
from blockfall.utils import MIN_DROP_INTERVAL_MS, drop_interval_ms, format_grid, render_grid


def test_drop_interval_shrinks_with_level():
    assert drop_interval_ms(1) == pytest.approx(1000.0)
    assert drop_interval_ms(2) == pytest.approx(500.0)
    assert drop_interval_ms(4) == pytest.approx(250.0)
    assert drop_interval_ms(3) < drop_interval_ms(2)


def test_drop_interval_is_clamped():
    assert drop_interval_ms(50) == pytest.approx(MIN_DROP_INTERVAL_MS)
    assert drop_interval_ms(10_000) == pytest.approx(MIN_DROP_INTERVAL_MS)
    assert drop_interval_ms(10_000) > 0


def test_drop_interval_rejects_level_zero():
    with pytest.raises(ValueError):
        drop_interval_ms(0)


def test_render_grid_overlays_without_locking():
    board = Board(4, 4)
    board.set_cell(3, 0)
    piece = Piece.of(TetrominoType.O, row=0, col=2)
    grid = render_grid(board, piece)
    value = PIECE_VALUES[TetrominoType.O]
    assert grid[0] == [0, 0, value, value]
    assert grid[3] == [1, 0, 0, 0]
    assert board.occupied_count() == 1
    assert format_grid(grid).splitlines() == ["..##", "..##", "....", "#..."]
