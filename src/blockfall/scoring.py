"""Line clearing and the score/level formulas."""

from __future__ import annotations

from .board import Board


POINTS_PER_LINE = 10
LINES_PER_LEVEL = 10


def clear_lines(board: Board) -> int:
    """Remove every full row of ``board`` and return how many were removed.

    Rows are scanned from the bottom up.  After a removal the rows above have
    shifted into the current index, so the same row is examined again before
    moving on.  Row ``0`` is part of the sweep: pieces slid sideways can lock
    into the top row while row ``1`` holds them up, so a full top row is
    reachable and is cleared like any other.
    """

    cleared = 0
    row = board.height - 1
    while row >= 0:
        if board.is_row_full(row):
            board.remove_row_shift_down(row)
            cleared += 1
        else:
            row -= 1
    return cleared


def level_for_lines(lines_cleared: int) -> int:
    """Return the level reached after ``lines_cleared`` lines in total."""

    return 1 + lines_cleared // LINES_PER_LEVEL


def score_for_clear(lines: int, level: int) -> int:
    """Return the points awarded for clearing ``lines`` rows at ``level``.

    Multi-line clears get no bonus beyond the linear formula.
    """

    return lines * POINTS_PER_LINE * level
