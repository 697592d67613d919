"""Falling-block puzzle engine: board, pieces, rules and game loop."""

from .board import Board
from .tetromino import Piece, TetrominoType, SHAPES, rotate_matrix
from .transform import collides, hard_drop, lock, rotate, spawn, try_move
from .scoring import clear_lines, level_for_lines, score_for_clear
from .game_state import GameState, GameStatus
from .controller import EventKind, GameController, GameEvent
from .utils import drop_interval_ms, format_grid, render_grid

__all__ = [
    "Board",
    "Piece",
    "TetrominoType",
    "SHAPES",
    "rotate_matrix",
    "collides",
    "hard_drop",
    "lock",
    "rotate",
    "spawn",
    "try_move",
    "clear_lines",
    "level_for_lines",
    "score_for_clear",
    "GameState",
    "GameStatus",
    "EventKind",
    "GameController",
    "GameEvent",
    "drop_interval_ms",
    "format_grid",
    "render_grid",
]
