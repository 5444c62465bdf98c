from dataclasses import dataclass

# ----- Grid -----
GRID_SIZE = 20

# ----- Speed (ms) -----
BASE_INTERVAL_MS = 300
MIN_INTERVAL_MS = 80
SPEEDUP_STEP_MS = 5
POINTS_PER_SPEEDUP = 5

# ----- Scoring -----
FOOD_POINTS = 10
GOLDEN_MULTIPLIER = 3

# ----- Loop timing (seconds) -----
COUNTDOWN_FROM = 3
COUNTDOWN_STEP_S = 1.0
PAUSE_POLL_S = 0.1

# ----- Obstacles (HARD only) -----
OBSTACLE_COUNT = 5


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: int = 0
    grid_size: int = GRID_SIZE
    base_interval_ms: int = BASE_INTERVAL_MS
    min_interval_ms: int = MIN_INTERVAL_MS
    speedup_step_ms: int = SPEEDUP_STEP_MS
    points_per_speedup: int = POINTS_PER_SPEEDUP
    food_points: int = FOOD_POINTS
    countdown_from: int = COUNTDOWN_FROM
    countdown_step_s: float = COUNTDOWN_STEP_S
    pause_poll_s: float = PAUSE_POLL_S
    obstacle_count: int = OBSTACLE_COUNT


CFG = Config(seed=0)
