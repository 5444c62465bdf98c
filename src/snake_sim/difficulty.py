# difficulty.py
from __future__ import annotations

from enum import Enum
from typing import Optional

import numpy as np  # type: ignore

from .config import CFG, Config
from .food import FoodType


class Difficulty(Enum):
    """
    speed_percent scales the tick interval (70 -> 0.7x).
    golden_food_chance is the percent chance that freshly spawned food is GOLDEN.
    """
    EASY = (70, 30)
    NORMAL = (100, 20)
    HARD = (130, 10)

    def __init__(self, speed_percent: int, golden_food_chance: int):
        self.speed_percent = speed_percent
        self.golden_food_chance = golden_food_chance

    @property
    def speed_multiplier(self) -> float:
        return self.speed_percent / 100

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name}") from None


def base_interval_ms(score: int, cfg: Config = CFG) -> int:
    """300ms at the start, 5ms faster every 5 points, never below 80ms."""
    steps = score // cfg.points_per_speedup
    return max(cfg.min_interval_ms, cfg.base_interval_ms - steps * cfg.speedup_step_ms)


def tick_delay_ms(score: int, difficulty: Difficulty, cfg: Config = CFG) -> int:
    # integer percent keeps 300 * 0.7 at exactly 210
    return base_interval_ms(score, cfg) * difficulty.speed_percent // 100


def roll_food_type(difficulty: Difficulty, rng: Optional[np.random.Generator] = None) -> FoodType:
    if rng is None:
        rng = np.random.default_rng()
    if int(rng.integers(100)) < difficulty.golden_food_chance:
        return FoodType.GOLDEN
    return FoodType.REGULAR


def score_points(base_points: int, new_food_type: FoodType) -> int:
    """
    Points awarded for a food-eaten event. The multiplier comes from the food
    that was just spawned, not the one that was eaten.
    """
    return base_points * new_food_type.multiplier
