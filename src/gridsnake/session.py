# session.py
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .clock import SimulationClock
from .config import DIRECTIONS, Config, CFG
from .events import DirectionRequested, InputSource, Restart, TogglePause
from .food import FoodSpawner
from .grid import Cell, Grid
from .snake import AdvanceResult, SnakeState
from .storage import MemoryScoreStore, ScoreStore, ScoreStoreError

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


STATUS_TEXT = {
    Phase.IDLE: "Press space or click to start",
    Phase.RUNNING: "Running...",
    Phase.PAUSED: "Paused",
    Phase.GAME_OVER: "Game over! Press R to play again",
}


@dataclass(frozen=True)
class Snapshot:
    """What the renderer gets each frame. Never fed back into the simulation."""
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    high_score: int
    speed: float
    phase: Phase
    status: str


class GameSession:
    """
    Owns all mutable game state and the Idle/Running/Paused/GameOver machine.

    The host calls `handle_input(event)` between frames and `on_frame(now)`
    once per display frame; everything else hangs off those two.
    """

    def __init__(
        self,
        config: Config = CFG,
        store: Optional[ScoreStore] = None,
        spawner: Optional[FoodSpawner] = None,
        on_status: Optional[Callable[[str], None]] = None,
    ):
        self.config = config.validate()
        self.grid = Grid(config.grid_count)
        self.store = store if store is not None else MemoryScoreStore()
        self.spawner = spawner if spawner is not None else FoodSpawner(self.grid, seed=config.seed)
        self.on_status = on_status
        self.clock = SimulationClock(config.max_frame_delta)

        self.snake = SnakeState(self.grid, config.initial_length)
        self.food: Optional[Cell] = None
        self.score = 0
        self.speed = config.initial_speed
        self.phase = Phase.IDLE
        self.status = STATUS_TEXT[Phase.IDLE]
        self.last_result: Optional[AdvanceResult] = None

        self.high_score = self._load_high_score()
        self.reset()

    # ---------- High score ----------
    def _load_high_score(self) -> int:
        try:
            return max(0, int(self.store.load()))
        except ScoreStoreError as e:
            logger.warning("Best score unavailable, starting from 0: %s", e)
            return 0

    def _update_score(self) -> None:
        self.high_score = max(self.high_score, self.score)
        try:
            self.store.save(self.high_score)
        except ScoreStoreError as e:
            logger.warning("Could not persist best score %d: %s", self.high_score, e)

    # ---------- Phase machine ----------
    def _set_phase(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase
        self.status = STATUS_TEXT[phase]
        if self.on_status is not None:
            self.on_status(self.status)

    def reset(self) -> None:
        """Fresh snake, score, speed and food; back to Idle."""
        self.snake.reset(self.config.initial_length)
        self.score = 0
        self.speed = self.config.initial_speed
        self.clock.reset()
        self.last_result = None
        self.food = self.spawner.spawn(self.snake.body)
        self._update_score()
        self._set_phase(Phase.IDLE)

    def start(self) -> None:
        """Start/pause toggle. From GameOver it resets first and runs."""
        if self.phase is Phase.GAME_OVER:
            self.reset()
        if self.phase is Phase.RUNNING:
            self._set_phase(Phase.PAUSED)
        else:
            self._set_phase(Phase.RUNNING)

    def restart(self) -> None:
        self.reset()
        self._set_phase(Phase.RUNNING)

    # ---------- Input ----------
    def propose_direction(self, direction: Cell) -> bool:
        return self.snake.propose_direction(
            direction, enforce_reversal=self.phase is Phase.RUNNING
        )

    def handle_input(self, event) -> None:
        if isinstance(event, TogglePause):
            self.start()
        elif isinstance(event, Restart):
            self.restart()
        elif isinstance(event, DirectionRequested):
            if event.direction not in DIRECTIONS:
                logger.debug("Ignoring malformed direction %r", event.direction)
                return
            # Steering also starts or resumes; keyboard needs an explicit restart after a loss
            if self.phase is not Phase.RUNNING and not (
                self.phase is Phase.GAME_OVER and event.source is InputSource.KEYBOARD
            ):
                self.start()
            self.propose_direction(event.direction)
        else:
            logger.debug("Ignoring unknown input event %r", event)

    # ---------- Simulation ----------
    def advance(self) -> Optional[AdvanceResult]:
        """One tick. A no-op returning None unless running."""
        if self.phase is not Phase.RUNNING:
            return None

        result = self.snake.advance(self.food)
        self.last_result = result

        if result.is_terminal:
            logger.info("Game over (%s) with score %d", result.value, self.score)
            self._set_phase(Phase.GAME_OVER)
        elif result is AdvanceResult.ATE_FOOD:
            self.score += self.config.score_per_food
            self.speed += self.config.speed_increment
            self.food = self.spawner.spawn(self.snake.body)
            self._update_score()
        return result

    def on_frame(self, now: float) -> int:
        """Run this frame's ticks (zero or more). Returns how many ran."""
        if self.phase is not Phase.RUNNING:
            self.clock.sync(now)
            return 0

        self.clock.accumulate(now)
        ticks = 0
        # speed is re-read every step, so eating mid-burst shortens the rest of it
        while self.phase is Phase.RUNNING and self.clock.consume(self.speed):
            self.advance()
            ticks += 1
        return ticks

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake.body),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            speed=self.speed,
            phase=self.phase,
            status=self.status,
        )
