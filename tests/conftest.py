import numpy as np
import pytest

from snake_sim.difficulty import Difficulty, tick_delay_ms
from snake_sim.food import Food, FoodType
from snake_sim.grid import Direction, Position
from snake_sim.state import GameState, Phase


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_state():
    """Build a GameState already past the countdown, from plain tuples."""
    def _make(
        snake,
        food,
        direction=Direction.RIGHT,
        obstacles=(),
        phase=Phase.RUNNING,
        difficulty=Difficulty.NORMAL,
        grid_size=20,
        score=0,
        food_type=FoodType.REGULAR,
    ):
        return GameState(
            snake=[Position(*p) for p in snake],
            food=Food(Position(*food), food_type),
            direction=direction,
            obstacles=frozenset(Position(*o) for o in obstacles),
            score=score,
            tick_interval_ms=tick_delay_ms(score, difficulty),
            difficulty=difficulty,
            grid_size=grid_size,
            phase=phase,
            countdown=0,
            pending=direction,
        )
    return _make
