# movement.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np  # type: ignore

from .config import FOOD_POINTS
from .food import generate_food
from .grid import Direction, Position, step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoodEaten:
    """Emitted when the head lands on food: where the next food is, and the base points."""
    new_food_position: Position
    base_points: int = FOOD_POINTS


def move_snake(
    snake: Sequence[Position],
    direction: Direction,
    food_position: Position,
    grid_size: int,
    obstacles: Iterable[Position] = (),
    rng: Optional[np.random.Generator] = None,
) -> Tuple[List[Position], Optional[FoodEaten]]:
    """
    Advance the snake one cell.

    - NONE: snake unchanged.
    - New head on an obstacle: snake unchanged (bounce), no event.
    - New head on food: grow by one (tail kept), spawn the next food and
      return a FoodEaten event.
    - Otherwise: head prepended, tail dropped.

    The returned list is always a new list; `snake` is never mutated.
    """
    if not snake:
        raise ValueError("snake must have at least one segment")

    blocked = set(obstacles)
    head = Position(*snake[0])
    new_head = step(head, direction, grid_size)

    if direction is Direction.NONE:
        return list(snake), None

    if new_head in blocked:
        logger.debug("Bounced off obstacle at %s", new_head)
        return list(snake), None

    if new_head == food_position:
        grown = [new_head] + list(snake)
        # new food must avoid the grown body and the obstacles
        food = generate_food(grid_size, set(grown) | blocked, rng=rng)
        return grown, FoodEaten(new_food_position=food.position)

    return [new_head] + list(snake[:-1]), None
