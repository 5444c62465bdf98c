# grid.py
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class Position(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    """Heading of the snake as a (dx, dy) delta. y grows downwards."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    NONE = (0, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


def wrap(coord: int, grid_size: int) -> int:
    """Fold a coordinate back onto the grid (toroidal topology)."""
    return (coord + grid_size) % grid_size


def step(pos: Position, direction: Direction, grid_size: int) -> Position:
    """Return the cell one step from `pos` in `direction`, wrapping at the edges."""
    if direction is Direction.NONE:
        return pos
    dx, dy = direction.delta
    return Position(wrap(pos.x + dx, grid_size), wrap(pos.y + dy, grid_size))


def is_opposite(a: Direction, b: Direction) -> bool:
    if a is Direction.NONE or b is Direction.NONE:
        return False
    return a.delta[0] == -b.delta[0] and a.delta[1] == -b.delta[1]


def direction_from_swipe(dx: float, dy: float) -> Optional[Direction]:
    """
    Map a drag gesture to a heading.
    The dominant axis wins; on equal magnitudes the horizontal axis wins.
    Returns None for a zero-length gesture.
    """
    if dx == 0 and dy == 0:
        return None
    if abs(dx) >= abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
