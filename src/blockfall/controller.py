"""Game loop controller.

:class:`GameController` owns a :class:`~blockfall.game_state.GameState` and is
the only object a front-end needs to talk to.  It is driven by two sources:
periodic :meth:`GameController.tick` calls carrying the wall-clock time since
the previous call, and player commands (``move_left``, ``rotate``, ...).  Both
run to completion before returning, so as long as the host never calls them
concurrently no locking is required.

Front-ends learn about locks, clears, level ups and the end of the game by
subscribing a listener::

    controller = GameController()
    controller.subscribe(lambda event: print(event.kind, event.value))
    controller.start()
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .board import HEIGHT, WIDTH, Board, Grid
from .game_state import GameState, GameStatus
from .scoring import clear_lines
from .tetromino import Piece
from .transform import collides, hard_drop, lock, rotate, spawn, try_move
from .utils import drop_interval_ms, render_grid


LOGGER = logging.getLogger(__name__)


class EventKind(str, Enum):
    PIECE_LOCKED = "piece_locked"
    LINES_CLEARED = "lines_cleared"
    LEVEL_UP = "level_up"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameEvent:
    """Notification sent to listeners.

    ``value`` carries the number of rows for ``LINES_CLEARED`` and the new
    level for ``LEVEL_UP``; it is ``None`` otherwise.
    """

    kind: EventKind
    value: Optional[int] = None


Listener = Callable[[GameEvent], None]


class GameController:
    """Drive a session through spawn, fall, lock, clear and respawn."""

    def __init__(
        self,
        rows: int = HEIGHT,
        cols: int = WIDTH,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.state = GameState(board=Board(rows, cols))
        self.drop_accum = 0.0
        self._rng = rng or random.Random()
        self._listeners: List[Listener] = []
        # Set while lock -> clear -> spawn runs; commands issued from listeners
        # during that window are refused.
        self._busy = False

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Listener:
        """Register ``listener`` for game events and return it."""

        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, kind: EventKind, value: Optional[int] = None) -> None:
        event = GameEvent(kind, value)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                LOGGER.exception("Listener %r failed on %s", listener, kind.value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def running(self) -> bool:
        return self.state.status is GameStatus.RUNNING

    @property
    def accepting_input(self) -> bool:
        return self.running and not self._busy

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def grid(self) -> Grid:
        """Copy of the locked cells, without the active piece."""

        return self.state.board.snapshot()

    @property
    def active(self) -> Optional[Piece]:
        return self.state.active

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def lines_cleared(self) -> int:
        return self.state.lines_cleared

    @property
    def drop_interval_ms(self) -> float:
        return drop_interval_ms(self.state.level)

    def render(self) -> List[List[int]]:
        """Return the board with the active piece overlaid."""

        return render_grid(self.state.board, self.state.active)

    # ------------------------------------------------------------------
    # Session commands
    # ------------------------------------------------------------------
    def start(self) -> bool:
        """Start a new game unless one is already running."""

        if self._busy:
            LOGGER.debug("Start ignored: piece is locking")
            return False
        if self.running:
            LOGGER.debug("Start ignored: already running")
            return False
        self._new_game()
        return True

    def restart(self) -> bool:
        """Abandon the current session, if any, and start a fresh one."""

        if self._busy:
            LOGGER.debug("Restart ignored: piece is locking")
            return False
        self._new_game()
        return True

    def _new_game(self) -> None:
        self.state.reset_game()
        self.state.status = GameStatus.RUNNING
        self.drop_accum = 0.0
        LOGGER.info(
            "Game started on a %dx%d board", self.state.board.height, self.state.board.width
        )
        self._busy = True
        try:
            self._spawn()
        finally:
            self._busy = False

    # ------------------------------------------------------------------
    # Player commands
    # ------------------------------------------------------------------
    def move_left(self) -> bool:
        return self._apply(lambda piece, board: try_move(piece, 0, -1, board))

    def move_right(self) -> bool:
        return self._apply(lambda piece, board: try_move(piece, 0, 1, board))

    def soft_drop(self) -> bool:
        """Move the piece down one row.

        A blocked soft drop leaves the piece where it is; locking is left to
        the next gravity tick.
        """

        return self._apply(lambda piece, board: try_move(piece, 1, 0, board))

    def rotate(self) -> bool:
        return self._apply(rotate)

    def hard_drop(self) -> bool:
        """Drop the piece to its resting row, then lock, clear and respawn."""

        if not self.accepting_input or self.state.active is None:
            return False
        self.state.active = hard_drop(self.state.active, self.state.board)
        self._lock_and_continue()
        return True

    def _apply(self, transform: Callable[[Piece, Board], Piece]) -> bool:
        if not self.accepting_input or self.state.active is None:
            return False
        moved = transform(self.state.active, self.state.board)
        if moved is self.state.active:
            return False
        self.state.active = moved
        return True

    # ------------------------------------------------------------------
    # Gravity
    # ------------------------------------------------------------------
    def tick(self, elapsed_ms: float) -> bool:
        """Advance the clock by ``elapsed_ms``.

        Once the accumulated time exceeds the current drop interval the piece
        falls one row (or locks if it cannot) and the accumulator restarts
        from zero.  Returns ``True`` when a gravity step ran.
        """

        if elapsed_ms < 0:
            raise ValueError(f"Elapsed time must not be negative, got {elapsed_ms}")
        if not self.accepting_input:
            return False
        self.drop_accum += elapsed_ms
        if self.drop_accum <= self.drop_interval_ms:
            return False
        self.drop_accum = 0.0
        self._gravity_step()
        return True

    def _gravity_step(self) -> None:
        if self.state.active is None:
            return
        moved = try_move(self.state.active, 1, 0, self.state.board)
        if moved is self.state.active:
            self._lock_and_continue()
        else:
            self.state.active = moved

    # ------------------------------------------------------------------
    # Lock -> clear -> spawn
    # ------------------------------------------------------------------
    def _lock_and_continue(self) -> None:
        if self.state.active is None:
            return
        self._busy = True
        try:
            self._lock_clear_spawn(self.state.active)
        finally:
            self._busy = False

    def _lock_clear_spawn(self, piece: Piece) -> None:
        lock(piece, self.state.board)
        self.state.pieces += 1
        LOGGER.debug(
            "Locked %s at row %d, col %d", piece.kind.value, piece.row, piece.col
        )
        self._emit(EventKind.PIECE_LOCKED)

        lines = clear_lines(self.state.board)
        if lines:
            level_before = self.state.level
            delta = self.state.record_clear(lines)
            LOGGER.info(
                "Cleared %d row(s) for %d points. Score: %d",
                lines, delta, self.state.score,
            )
            self._emit(EventKind.LINES_CLEARED, lines)
            if self.state.level > level_before:
                LOGGER.info("Level up: %d", self.state.level)
                self._emit(EventKind.LEVEL_UP, self.state.level)

        self._spawn()

    def _spawn(self) -> None:
        piece = spawn(self.state.board, rng=self._rng)
        self.state.active = piece
        if collides(piece, self.state.board):
            self.state.status = GameStatus.GAME_OVER
            LOGGER.info(
                "Game over. Score: %d, level: %d, lines: %d",
                self.state.score, self.state.level, self.state.lines_cleared,
            )
            self._emit(EventKind.GAME_OVER)
