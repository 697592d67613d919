"""Simple pygame front-end for the engine.

This module is a thin presentation layer: it draws whatever the
:class:`~blockfall.controller.GameController` reports, forwards key presses
as commands and feeds the controller the milliseconds elapsed between frames.
None of the game rules live here.

Controls: arrows move/rotate/soft drop, space hard drops, Enter starts or
restarts, Escape quits.
"""

from __future__ import annotations

import logging

import pygame

from .board import PIECE_VALUES
from .controller import EventKind, GameController, GameEvent
from .tetromino import TetrominoType

# Size of a single board cell in pixels
CELL_SIZE = 25
# Frames per second to run the game loop at
FPS = 60

# Colours for each tetromino type
SHAPE_COLORS = {
    TetrominoType.I: (0, 255, 255),
    TetrominoType.O: (255, 255, 0),
    TetrominoType.T: (128, 0, 128),
    TetrominoType.S: (0, 255, 0),
    TetrominoType.Z: (255, 0, 0),
    TetrominoType.J: (0, 0, 255),
    TetrominoType.L: (255, 165, 0),
}

# Mapping from the integer stored in the board grid to a colour
CELL_COLORS = {0: (0, 0, 0)}
for shape, value in PIECE_VALUES.items():
    CELL_COLORS[value] = SHAPE_COLORS[shape]


LOGGER = logging.getLogger(__name__)


def draw_grid(screen: pygame.Surface, grid: list[list[int]]) -> None:
    """Render a grid of piece values, active piece included."""

    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, CELL_COLORS.get(value, (255, 255, 255)), rect)
            pygame.draw.rect(screen, (50, 50, 50), rect, 1)


def caption(controller: GameController) -> str:
    if controller.game_over:
        return f"Blockfall - Game Over - Score: {controller.score} (Enter to restart)"
    if not controller.running:
        return "Blockfall - Press Enter to start"
    return f"Blockfall - Score: {controller.score} - Level: {controller.level}"


def handle_key(event: pygame.event.Event, controller: GameController) -> None:
    """Translate a key press into a controller command."""

    if event.key == pygame.K_RETURN:
        if controller.running:
            controller.restart()
        else:
            controller.start()
    elif event.key == pygame.K_LEFT:
        controller.move_left()
    elif event.key == pygame.K_RIGHT:
        controller.move_right()
    elif event.key == pygame.K_UP:
        controller.rotate()
    elif event.key == pygame.K_DOWN:
        controller.soft_drop()
    elif event.key == pygame.K_SPACE:
        controller.hard_drop()


def announce(event: GameEvent) -> None:
    """Stand-in for the sound cues: report each game event in the log."""

    if event.kind is EventKind.PIECE_LOCKED:
        LOGGER.debug("Piece locked")
    elif event.kind is EventKind.LINES_CLEARED:
        LOGGER.info("Cleared %d row(s)", event.value)
    elif event.kind is EventKind.LEVEL_UP:
        LOGGER.info("Reached level %d", event.value)
    elif event.kind is EventKind.GAME_OVER:
        LOGGER.info("Game over")


class GameRunner:
    """Own the pygame window and pump frames into the controller."""

    def __init__(self, controller: GameController | None = None) -> None:
        self.controller = controller or GameController()
        self.controller.subscribe(announce)
        self._running = False

    def run(self) -> None:
        pygame.init()
        board = self.controller.board
        screen = pygame.display.set_mode((board.width * CELL_SIZE, board.height * CELL_SIZE))
        clock = pygame.time.Clock()
        LOGGER.info("Window opened")

        self._running = True
        try:
            while self._running:
                dt = clock.tick(FPS)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self._running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            self._running = False
                        else:
                            handle_key(event, self.controller)

                self.controller.tick(dt)

                screen.fill((0, 0, 0))
                draw_grid(screen, self.controller.render())
                pygame.display.set_caption(caption(self.controller))
                pygame.display.flip()
        finally:
            pygame.quit()
            LOGGER.info("Window closed")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    GameRunner().run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
