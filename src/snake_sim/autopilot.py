# autopilot.py
from typing import List, Optional

import numpy as np  # type: ignore

from .grid import Direction, Position, is_opposite, step
from .state import GameSnapshot

HEADINGS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def wrapped_delta(a: int, b: int, grid_size: int) -> int:
    """Signed shortest offset from a to b on a ring of grid_size cells."""
    d = (b - a) % grid_size
    return d - grid_size if d > grid_size // 2 else d


def best_move_toward_food(head: Position, food: Position, grid_size: int) -> List[Direction]:
    """
    Returns a preference ordering of headings that shorten the wrapped distance to food.
    Does NOT check collisions; caller should filter unsafe moves.
    """
    prefs = []
    dx = wrapped_delta(head.x, food.x, grid_size)
    dy = wrapped_delta(head.y, food.y, grid_size)
    if dx < 0:
        prefs.append(Direction.LEFT)
    elif dx > 0:
        prefs.append(Direction.RIGHT)
    if dy < 0:
        prefs.append(Direction.UP)
    elif dy > 0:
        prefs.append(Direction.DOWN)
    # orthogonal options last, so the caller still has choices when blocked
    for d in HEADINGS:
        if d not in prefs:
            prefs.append(d)
    return prefs


def is_safe(snap: GameSnapshot, direction: Direction) -> bool:
    """True if moving one cell in `direction` neither bounces nor bites the body."""
    nxt = step(snap.head, direction, snap.grid_size)
    if nxt in snap.obstacles:
        return False
    # the tail moves out of the way unless we eat this tick
    body = snap.snake if nxt == snap.food.position else snap.snake[:-1]
    return nxt not in body


def choose_direction(snap: GameSnapshot, rng: Optional[np.random.Generator] = None) -> Direction:
    """
    Greedy on food distance with simple safety:
    - prefer headings that reduce the wrapped distance
    - skip a straight reversal (the loop would ignore it anyway)
    - if every heading is unsafe, pick one at random (we're boxed in)
    """
    candidates = [
        d for d in best_move_toward_food(snap.head, snap.food.position, snap.grid_size)
        if not is_opposite(d, snap.direction)
    ]
    for d in candidates:
        if is_safe(snap, d):
            return d
    if rng is None:
        rng = np.random.default_rng()
    return candidates[int(rng.integers(len(candidates)))]
