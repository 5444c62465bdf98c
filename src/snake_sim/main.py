# main.py
from __future__ import annotations

import argparse
import asyncio
import logging
from typing import List, Optional

import numpy as np  # type: ignore

from .autopilot import choose_direction
from .config import CFG, Config
from .difficulty import Difficulty
from .loop import GameLoop
from .state import INITIAL_LENGTH, GameSnapshot

logger = logging.getLogger(__name__)


async def _instant(_seconds: float) -> None:
    # yield to the event loop without waiting
    await asyncio.sleep(0)


def play(
    difficulty: Difficulty,
    cfg: Config = CFG,
    max_ticks: Optional[int] = None,
    realtime: bool = False,
) -> GameSnapshot:
    """
    Run one headless game steered by the autopilot.
    Returns the final snapshot (terminal, or RUNNING if max_ticks cut it short).
    """
    rng = np.random.default_rng(cfg.seed)
    loop = GameLoop(difficulty, cfg, rng=rng, sleep=asyncio.sleep if realtime else _instant)

    def steer(snap: GameSnapshot) -> None:
        if max_ticks is not None and snap.ticks >= max_ticks:
            logger.info("Reached %d ticks, stopping", max_ticks)
            loop.stop()
            return
        if snap.running:
            loop.request_direction(choose_direction(snap, rng))

    loop.on_tick = steer
    loop.on_food_eaten = lambda event: logger.debug("Next food at %s", tuple(event.new_food_position))
    return asyncio.run(loop.run())


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a headless snake game driven by the autopilot.")
    parser.add_argument(
        "--difficulty",
        type=str,
        default="normal",
        choices=[d.name.lower() for d in Difficulty],
    )
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument("--grid-size", type=int, default=CFG.grid_size)
    parser.add_argument("--max-ticks", type=int, default=10_000, help="Stop after this many ticks")
    parser.add_argument("--realtime", action="store_true", help="Sleep for the real tick delays")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    # the starting snake must fit in a row and leave a cell for food
    smallest = max(2, INITIAL_LENGTH[Difficulty.from_name(args.difficulty)])
    if args.grid_size < smallest:
        parser.error(f"--grid-size must be at least {smallest} for {args.difficulty}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cfg = Config(seed=args.seed, grid_size=args.grid_size)
    difficulty = Difficulty.from_name(args.difficulty)
    final = play(difficulty, cfg, max_ticks=args.max_ticks, realtime=args.realtime)

    print(f"difficulty={difficulty.name.lower()} outcome={final.phase.value} "
          f"score={final.score} length={len(final.snake)} ticks={final.ticks}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
