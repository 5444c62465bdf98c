"""Headless snake game simulation: movement, food, collisions, difficulty and the tick loop."""

from snake_sim.collision import is_collision
from snake_sim.config import CFG, Config
from snake_sim.difficulty import Difficulty, base_interval_ms, roll_food_type, score_points, tick_delay_ms
from snake_sim.food import Food, FoodType, NoSpaceAvailable, SnakeSimError, generate_food
from snake_sim.grid import Direction, Position, direction_from_swipe
from snake_sim.loop import GameLoop
from snake_sim.movement import FoodEaten, move_snake
from snake_sim.state import GameSnapshot, GameState, Phase, new_game_state

__all__ = [
    "CFG",
    "Config",
    "Difficulty",
    "Direction",
    "Food",
    "FoodEaten",
    "FoodType",
    "GameLoop",
    "GameSnapshot",
    "GameState",
    "NoSpaceAvailable",
    "Phase",
    "Position",
    "SnakeSimError",
    "base_interval_ms",
    "direction_from_swipe",
    "generate_food",
    "is_collision",
    "move_snake",
    "new_game_state",
    "roll_food_type",
    "score_points",
    "tick_delay_ms",
]
