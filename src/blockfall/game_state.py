"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import Board
from .scoring import level_for_lines, score_for_clear
from .tetromino import Piece


class GameStatus(str, Enum):
    """Lifecycle of a session."""

    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Mutable state for a single game session."""

    board: Board = field(default_factory=Board)
    active: Optional[Piece] = None
    score: int = 0
    level: int = 1
    lines_cleared: int = 0
    pieces: int = 0
    status: GameStatus = GameStatus.IDLE

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def reset_game(self) -> None:
        """Reset the board and counters for a new game.

        A fresh board with the same dimensions replaces the old one.
        """

        self.board = Board(self.board.height, self.board.width)
        self.active = None
        self.score = 0
        self.level = 1
        self.lines_cleared = 0
        self.pieces = 0
        self.status = GameStatus.IDLE

    def record_clear(self, lines: int) -> int:
        """Award points for ``lines`` cleared rows and return the score delta.

        Points use the level in effect before the clear.  The level is then
        recomputed from the running line total.
        """

        if lines < 0:
            raise ValueError(f"Cannot clear a negative number of lines: {lines}")
        delta = score_for_clear(lines, self.level)
        self.score += delta
        self.lines_cleared += lines
        self.level = level_for_lines(self.lines_cleared)
        return delta
