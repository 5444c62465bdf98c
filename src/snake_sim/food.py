# food.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import numpy as np  # type: ignore

from .config import GOLDEN_MULTIPLIER
from .grid import Position


class SnakeSimError(Exception):
    """Base class for errors raised by the simulation core."""


class NoSpaceAvailable(SnakeSimError):
    """Every cell of the grid is occupied; there is nowhere to put food."""


class FoodType(Enum):
    REGULAR = 1
    GOLDEN = GOLDEN_MULTIPLIER

    @property
    def multiplier(self) -> int:
        return self.value


@dataclass(frozen=True)
class Food:
    position: Position
    type: FoodType = FoodType.REGULAR


def free_cells(grid_size: int, occupied: Iterable[Position]) -> np.ndarray:
    """
    Boolean mask of shape (grid_size, grid_size), indexed [x, y],
    True where a cell is not in `occupied`.
    """
    if grid_size <= 0:
        raise ValueError(f"grid_size must be positive, got {grid_size}")
    mask = np.ones((grid_size, grid_size), dtype=bool)
    for x, y in occupied:
        mask[x, y] = False
    return mask


def generate_food(
    grid_size: int,
    occupied: Iterable[Position],
    food_type: FoodType = FoodType.REGULAR,
    rng: Optional[np.random.Generator] = None,
) -> Food:
    """
    Place food on a uniformly random free cell.
    Raises NoSpaceAvailable when `occupied` covers the whole grid.
    """
    if rng is None:
        rng = np.random.default_rng()
    cells = np.flatnonzero(free_cells(grid_size, occupied))
    if cells.size == 0:
        raise NoSpaceAvailable(f"no free cell left on a {grid_size}x{grid_size} grid")
    x, y = divmod(int(rng.choice(cells)), grid_size)
    return Food(position=Position(x, y), type=food_type)
