# state.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Set, Tuple

import numpy as np  # type: ignore

from .config import CFG, Config
from .difficulty import Difficulty, tick_delay_ms
from .food import Food, FoodType, generate_food
from .grid import Direction, Position, wrap

# Segments in the starting snake
INITIAL_LENGTH = {
    Difficulty.EASY: 1,
    Difficulty.NORMAL: 3,
    Difficulty.HARD: 5,
}


class Phase(Enum):
    COUNTDOWN = "countdown"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    BOARD_FULL = "board_full"

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.GAME_OVER, Phase.BOARD_FULL)


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Position]          # head at index 0
    food: Food
    direction: Direction           # heading of the last move
    obstacles: FrozenSet[Position]
    score: int
    tick_interval_ms: int          # effective delay, difficulty applied
    difficulty: Difficulty
    grid_size: int
    phase: Phase = Phase.COUNTDOWN
    countdown: int = CFG.countdown_from
    ticks: int = 0
    pending: Direction = Direction.NONE   # heading requested for the next move
    pause_pending: bool = False           # pause asked for during the countdown

    @property
    def running(self) -> bool:
        return not self.phase.is_terminal

    @property
    def paused(self) -> bool:
        return self.phase is Phase.PAUSED or self.pause_pending

    def occupied(self) -> Set[Position]:
        return set(self.snake) | set(self.obstacles)

    def snapshot(self) -> "GameSnapshot":
        return GameSnapshot(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            obstacles=self.obstacles,
            score=self.score,
            tick_interval_ms=self.tick_interval_ms,
            difficulty=self.difficulty,
            grid_size=self.grid_size,
            phase=self.phase,
            countdown=self.countdown,
            ticks=self.ticks,
            pending=self.pending,
            pause_pending=self.pause_pending,
        )


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of a GameState between ticks."""
    snake: Tuple[Position, ...]
    food: Food
    direction: Direction
    obstacles: FrozenSet[Position]
    score: int
    tick_interval_ms: int
    difficulty: Difficulty
    grid_size: int
    phase: Phase
    countdown: int
    ticks: int = 0
    pending: Direction = Direction.NONE
    pause_pending: bool = False

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def running(self) -> bool:
        return not self.phase.is_terminal

    @property
    def paused(self) -> bool:
        return self.phase is Phase.PAUSED or self.pause_pending

    def to_grid(self) -> np.ndarray:
        """
        Integer board of shape (grid_size, grid_size), indexed [y, x]:
        0 empty, 1 body, 2 head, 3 food, 4 obstacle.
        """
        board = np.zeros((self.grid_size, self.grid_size), dtype=np.int8)
        for x, y in self.obstacles:
            board[y, x] = 4
        fx, fy = self.food.position
        board[fy, fx] = 3
        for x, y in self.snake[1:]:
            board[y, x] = 1
        hx, hy = self.head
        board[hy, hx] = 2
        return board


def initial_snake(difficulty: Difficulty, grid_size: int) -> List[Position]:
    length = INITIAL_LENGTH[difficulty]
    if grid_size < length:
        raise ValueError(f"grid_size {grid_size} is too small for a {length}-segment snake")
    mid = grid_size // 2
    return [Position(wrap(mid - i, grid_size), mid) for i in range(length)]


def place_obstacles(
    grid_size: int,
    snake: List[Position],
    food: Food,
    rng: np.random.Generator,
    count: int = CFG.obstacle_count,
) -> FrozenSet[Position]:
    """Draw `count` random cells, keeping only those clear of the snake and the food."""
    cells = rng.integers(grid_size, size=(count, 2))
    blocked = set(snake) | {food.position}
    return frozenset(
        Position(int(x), int(y)) for x, y in cells
        if (int(x), int(y)) not in blocked
    )


def new_game_state(
    difficulty: Difficulty = Difficulty.NORMAL,
    cfg: Config = CFG,
    rng: Optional[np.random.Generator] = None,
) -> GameState:
    """
    Fresh game in the countdown phase with no heading yet.
    Raises NoSpaceAvailable if the starting snake leaves no room for food.
    """
    if rng is None:
        rng = np.random.default_rng(cfg.seed)
    grid_size = cfg.grid_size
    snake = initial_snake(difficulty, grid_size)
    food = generate_food(grid_size, snake, FoodType.REGULAR, rng=rng)
    if difficulty is Difficulty.HARD:
        obstacles = place_obstacles(grid_size, snake, food, rng, cfg.obstacle_count)
    else:
        obstacles = frozenset()
    return GameState(
        snake=snake,
        food=food,
        direction=Direction.NONE,
        obstacles=obstacles,
        score=0,
        tick_interval_ms=tick_delay_ms(0, difficulty, cfg),
        difficulty=difficulty,
        grid_size=grid_size,
        countdown=cfg.countdown_from,
    )
