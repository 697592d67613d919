"""Headless ASCII demo for the engine.

Run with: `python -m blockfall`

A random player feeds commands to a :class:`GameController` for a fixed
number of simulated frames, then the final frame is printed along with the
score.  Useful as a smoke test that the rules hold together without a
window.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from . import GameController, format_grid
from .board import HEIGHT, WIDTH


LOGGER = logging.getLogger(__name__)

FRAME_MS = 16.0


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--rows", type=int, default=HEIGHT, help="Board height")
    parser.add_argument("--cols", type=int, default=WIDTH, help="Board width")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--ticks", type=int, default=2000, help="Number of simulated frames"
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    return parser.parse_args(argv)


def play(controller: GameController, ticks: int, rng: random.Random) -> None:
    """Start a game and drive it with random commands for ``ticks`` frames."""

    commands = (
        controller.move_left,
        controller.move_right,
        controller.rotate,
        controller.soft_drop,
        controller.hard_drop,
    )
    controller.start()
    for _ in range(ticks):
        if controller.game_over:
            break
        if rng.random() < 0.2:
            rng.choice(commands)()
        controller.tick(FRAME_MS)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rng = random.Random(args.seed)
    controller = GameController(args.rows, args.cols, rng=rng)
    play(controller, args.ticks, rng)

    print(format_grid(controller.render()))
    print(
        f"score={controller.score} level={controller.level} "
        f"lines={controller.lines_cleared} game_over={controller.game_over}"
    )


if __name__ == "__main__":
    main()
