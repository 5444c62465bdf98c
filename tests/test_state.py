import dataclasses

import numpy as np
import pytest

from snake_sim.config import Config
from snake_sim.difficulty import Difficulty
from snake_sim.food import NoSpaceAvailable
from snake_sim.grid import Direction, Position
from snake_sim.state import Phase, new_game_state


@pytest.mark.parametrize(
    "difficulty, length",
    [(Difficulty.EASY, 1), (Difficulty.NORMAL, 3), (Difficulty.HARD, 5)],
)
def test_initial_snake_length(difficulty, length):
    state = new_game_state(difficulty)
    assert len(state.snake) == length
    assert state.snake[0] == (10, 10)
    assert state.snake == [Position(10 - i, 10) for i in range(length)]


def test_new_game_starts_in_countdown():
    state = new_game_state(Difficulty.NORMAL)
    assert state.phase is Phase.COUNTDOWN
    assert state.countdown == 3
    assert state.direction is Direction.NONE
    assert state.score == 0
    assert state.running and not state.paused
    assert state.food.position not in state.snake


def test_initial_tick_interval_follows_difficulty():
    assert new_game_state(Difficulty.EASY).tick_interval_ms == 210
    assert new_game_state(Difficulty.NORMAL).tick_interval_ms == 300
    assert new_game_state(Difficulty.HARD).tick_interval_ms == 390


def test_only_hard_has_obstacles():
    assert new_game_state(Difficulty.EASY).obstacles == frozenset()
    assert new_game_state(Difficulty.NORMAL).obstacles == frozenset()


@pytest.mark.parametrize("seed", range(20))
def test_hard_obstacles_clear_of_snake_and_food(seed):
    state = new_game_state(Difficulty.HARD, Config(seed=seed))
    assert len(state.obstacles) <= 5
    assert not state.obstacles & set(state.snake)
    assert state.food.position not in state.obstacles


def test_same_seed_same_game():
    a = new_game_state(Difficulty.HARD, Config(seed=11))
    b = new_game_state(Difficulty.HARD, Config(seed=11))
    assert a.food == b.food
    assert a.obstacles == b.obstacles


def test_snapshot_is_detached():
    state = new_game_state(Difficulty.NORMAL)
    snap = state.snapshot()
    state.snake.insert(0, Position(11, 10))
    state.score = 99
    assert len(snap.snake) == 3
    assert snap.score == 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 5


def test_snapshot_grid():
    state = new_game_state(Difficulty.NORMAL, rng=np.random.default_rng(0))
    board = state.snapshot().to_grid()
    assert board.shape == (20, 20)
    assert board[10, 10] == 2
    assert board[10, 9] == 1 and board[10, 8] == 1
    fx, fy = state.food.position
    assert board[fy, fx] == 3


def test_grid_too_small_for_snake():
    with pytest.raises(ValueError):
        new_game_state(Difficulty.HARD, Config(grid_size=3))


def test_no_room_for_first_food():
    with pytest.raises(NoSpaceAvailable):
        new_game_state(Difficulty.EASY, Config(grid_size=1))
