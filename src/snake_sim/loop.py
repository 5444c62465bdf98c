# loop.py
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import numpy as np  # type: ignore

from .collision import is_collision
from .config import CFG, Config
from .difficulty import Difficulty, roll_food_type, score_points, tick_delay_ms
from .food import Food, FoodType, NoSpaceAvailable
from .grid import Direction, direction_from_swipe, is_opposite, step
from .movement import FoodEaten, move_snake
from .state import GameSnapshot, GameState, Phase, new_game_state

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class GameLoop:
    """
    Drives one game: countdown, then one move per tick until the snake collides
    (GAME_OVER) or fills the board (BOARD_FULL).

    The loop owns its GameState. Everything else talks to it through
    request_direction()/swipe(), pause()/resume(), stop() and snapshot().
    A tick runs without awaiting, so readers never see a half-applied move.

    Callbacks:
      on_food_eaten(FoodEaten)   after a tick in which food was eaten
      on_game_over(score)        once, when the snake collides
      on_board_full(score)       once, when no cell is left for food
      on_tick(GameSnapshot)      after every completed tick
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.NORMAL,
        cfg: Config = CFG,
        *,
        rng: Optional[np.random.Generator] = None,
        state: Optional[GameState] = None,
        sleep: Sleep = asyncio.sleep,
        on_food_eaten: Optional[Callable[[FoodEaten], None]] = None,
        on_game_over: Optional[Callable[[int], None]] = None,
        on_board_full: Optional[Callable[[int], None]] = None,
        on_tick: Optional[Callable[[GameSnapshot], None]] = None,
    ):
        self.cfg = cfg
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self._state = state if state is not None else new_game_state(difficulty, cfg, self.rng)
        self._sleep = sleep
        self.on_food_eaten = on_food_eaten
        self.on_game_over = on_game_over
        self.on_board_full = on_board_full
        self.on_tick = on_tick
        self._stopped = False
        self._task: Optional[asyncio.Task] = None
        self.started_at: Optional[float] = None  # event-loop clock when play began

    # ----- Read side -----
    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def stopped(self) -> bool:
        return self._stopped

    def snapshot(self) -> GameSnapshot:
        return self._state.snapshot()

    # ----- Lifecycle -----
    def start(self) -> asyncio.Task:
        """Schedule run() on the current event loop and return the task."""
        self._task = asyncio.ensure_future(self.run())
        return self._task

    def stop(self) -> None:
        """Halt the loop. Pending sleeps are cancelled; no callback fires afterwards."""
        self._stopped = True
        task = self._task
        if task is None or task.done():
            return
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        # from inside the loop's own callbacks the flag alone is enough
        if task is not current:
            task.cancel()

    async def run(self) -> GameSnapshot:
        """Play until a terminal phase or stop(); returns the final snapshot."""
        # stop() cancels whichever task is running us, started or awaited directly
        task = asyncio.current_task()
        self._task = task
        try:
            await self._play()
        except asyncio.CancelledError:
            if not self._stopped:
                raise
            task.uncancel()
            logger.info("Stopped during %s", self._state.phase.value)
        finally:
            # the caller's task outlives run() when awaited directly
            self._task = None
        return self.snapshot()

    async def _play(self) -> None:
        state = self._state
        if state.phase is Phase.COUNTDOWN:
            await self._countdown()
        if self.started_at is None and not self._stopped:
            self.started_at = asyncio.get_running_loop().time()

        while not self._stopped and not state.phase.is_terminal:
            if state.phase is Phase.PAUSED:
                await self._sleep(self.cfg.pause_poll_s)
                continue
            logger.debug("Next tick in %dms", state.tick_interval_ms)
            await self._sleep(state.tick_interval_ms / 1000)
            if self._stopped or state.phase is not Phase.RUNNING:
                continue
            self.tick()

    async def _countdown(self) -> None:
        state = self._state
        while state.countdown > 0:
            await self._sleep(self.cfg.countdown_step_s)
            if self._stopped:
                return
            state.countdown -= 1
        state.phase = Phase.PAUSED if state.pause_pending else Phase.RUNNING
        state.pause_pending = False
        state.direction = state.pending = Direction.RIGHT
        logger.info("Countdown finished, %s game started (%s)", state.difficulty.name, state.phase.value)

    # ----- Simulation step -----
    def tick(self) -> Optional[FoodEaten]:
        """
        Advance one step: move, apply scoring and speed, then check collisions.
        Does nothing outside RUNNING or before a heading is set.
        """
        state = self._state
        if state.phase is not Phase.RUNNING or state.pending is Direction.NONE:
            return None

        # commit the requested heading once per tick
        state.direction = state.pending
        try:
            snake, event = move_snake(
                state.snake,
                state.direction,
                state.food.position,
                state.grid_size,
                state.obstacles,
                rng=self.rng,
            )
        except NoSpaceAvailable:
            self._fill_board()
            return None

        state.snake = snake
        state.ticks += 1
        if event is not None:
            food_type = roll_food_type(state.difficulty, self.rng)
            state.food = Food(event.new_food_position, food_type)
            points = score_points(event.base_points, food_type)
            state.score += points
            state.tick_interval_ms = tick_delay_ms(state.score, state.difficulty, self.cfg)
            logger.info(
                "Food eaten: +%d (score %d), next %s food at %s",
                points, state.score, food_type.name.lower(), tuple(event.new_food_position),
            )

        crashed = is_collision(state.snake, state.grid_size, state.obstacles)
        if crashed:
            state.phase = Phase.GAME_OVER
            logger.info("Game over with score %d after %d ticks", state.score, state.ticks)

        if event is not None:
            self._notify(self.on_food_eaten, event)
        if crashed:
            self._notify(self.on_game_over, state.score)
        self._notify(self.on_tick, self.snapshot())
        return event

    def _fill_board(self) -> None:
        # the head lands on the last free cell; the snake now covers the board
        state = self._state
        head = step(state.snake[0], state.direction, state.grid_size)
        state.snake = [head] + state.snake
        state.ticks += 1
        state.score += score_points(self.cfg.food_points, FoodType.REGULAR)
        state.phase = Phase.BOARD_FULL
        logger.info("Board full with score %d after %d ticks", state.score, state.ticks)
        self._notify(self.on_board_full, state.score)
        self._notify(self.on_tick, self.snapshot())

    def _notify(self, callback: Optional[Callable], payload) -> None:
        if callback is not None and not self._stopped:
            callback(payload)

    # ----- Input -----
    def request_direction(self, direction: Direction) -> bool:
        """
        Set the heading for the next tick (last write wins). Ignored unless
        RUNNING, and ignored for NONE or a reversal of the last move's heading,
        so several requests within one tick can never turn the snake into its neck.
        Returns True when accepted.
        """
        state = self._state
        if state.phase is not Phase.RUNNING:
            logger.debug("Ignoring %s while %s", direction.name, state.phase.value)
            return False
        if direction is Direction.NONE or is_opposite(direction, state.direction):
            logger.debug("Ignoring %s while heading %s", direction.name, state.direction.name)
            return False
        state.pending = direction
        return True

    def swipe(self, dx: float, dy: float) -> bool:
        direction = direction_from_swipe(dx, dy)
        if direction is None:
            return False
        return self.request_direction(direction)

    def pause(self) -> bool:
        """
        Pause a running game. During the countdown the request is held and
        play starts paused once the countdown ends.
        """
        state = self._state
        if state.phase is Phase.COUNTDOWN and not state.pause_pending:
            state.pause_pending = True
            logger.info("Pause requested during countdown")
            return True
        if state.phase is not Phase.RUNNING:
            return False
        state.phase = Phase.PAUSED
        logger.info("Paused")
        return True

    def resume(self) -> bool:
        state = self._state
        if state.phase is Phase.COUNTDOWN and state.pause_pending:
            state.pause_pending = False
            logger.info("Pause request withdrawn during countdown")
            return True
        if state.phase is not Phase.PAUSED:
            return False
        state.phase = Phase.RUNNING
        logger.info("Resumed")
        return True

    def toggle_pause(self) -> bool:
        """Flip between running and paused; returns whether the game is now paused."""
        if not self.pause():
            self.resume()
        return self._state.paused
