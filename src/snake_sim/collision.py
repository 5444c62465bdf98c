# collision.py
from typing import Iterable, Sequence

from .grid import Position


def is_collision(snake: Sequence[Position], grid_size: int, obstacles: Iterable[Position] = ()) -> bool:
    """
    True if the head overlaps its own body or sits on an obstacle.
    `grid_size` is unused: wrap-around keeps every coordinate on the grid.
    """
    head = snake[0]
    return head in snake[1:] or head in set(obstacles)
