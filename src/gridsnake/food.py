# food.py
from __future__ import annotations

import logging
from typing import Collection, Optional

import numpy as np  # type: ignore

from .grid import Cell, Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """
    Picks a free cell for the next food item.

    Uniform rejection sampling first, capped at `max_attempts` draws. Once
    the cap is hit (a crowded board) it samples directly from the set of
    free cells, so it always terminates. Returns None on a full board.
    """

    def __init__(self, grid: Grid, seed: Optional[int] = None,
                 max_attempts: Optional[int] = None):
        self.grid = grid
        self.rng = np.random.default_rng(seed)
        self.max_attempts = grid.size if max_attempts is None else max_attempts

    def spawn(self, snake: Collection[Cell]) -> Optional[Cell]:
        occupied = set(snake)
        if len(occupied) >= self.grid.size:
            logger.info("No free cell left for food")
            return None

        for _ in range(self.max_attempts):
            fx, fy = self.rng.integers(0, self.grid.count, size=2)
            cell = (int(fx), int(fy))
            if cell not in occupied:
                return cell

        return self._spawn_from_free(occupied)

    def _spawn_from_free(self, occupied: set) -> Optional[Cell]:
        free = [cell for cell in self.grid.cells() if cell not in occupied]
        if not free:
            return None
        cell = free[int(self.rng.integers(len(free)))]
        logger.debug("Rejection sampling exhausted, picked %s from %d free cells",
                     cell, len(free))
        return cell
