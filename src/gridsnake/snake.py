# snake.py
from __future__ import annotations

import enum
from typing import List, Optional

from .config import DIRECTIONS, RIGHT
from .grid import Cell, Grid

Direction = Cell


class AdvanceResult(enum.Enum):
    MOVED = "moved"
    ATE_FOOD = "ate_food"
    COLLISION_WALL = "collision_wall"
    COLLISION_SELF = "collision_self"

    @property
    def is_terminal(self) -> bool:
        return self in (AdvanceResult.COLLISION_WALL, AdvanceResult.COLLISION_SELF)


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class SnakeState:
    """
    Snake body, committed heading and the queued (pending) direction.

    The body is head first. `pending` is a queue of one: every accepted
    proposal overwrites it, and `advance()` commits it before moving.
    """

    def __init__(self, grid: Grid, initial_length: int = 2):
        self.grid = grid
        self.body: List[Cell] = []
        self.heading: Direction = RIGHT
        self.pending: Direction = RIGHT
        self.reset(initial_length)

    @property
    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def reset(self, initial_length: int = 2) -> None:
        """Center the head, face right, lay the body out to the left."""
        if initial_length < 2:
            raise ValueError(f"Snake needs at least 2 segments, got {initial_length}")
        cx, cy = self.grid.center()
        if cx - (initial_length - 1) < 0:
            raise ValueError(
                f"{initial_length} segments do not fit on a {self.grid.count} grid"
            )
        self.heading = RIGHT
        self.pending = RIGHT
        self.body = [(cx - i, cy) for i in range(initial_length)]

    def propose_direction(self, direction: Direction, enforce_reversal: bool = True) -> bool:
        """
        Queue a direction for the next tick. Returns False if it was dropped.

        Reversal into the neck is only checked against the committed heading,
        and only when `enforce_reversal` is set (the session is running).
        """
        if direction not in DIRECTIONS:
            return False
        if enforce_reversal and is_opposite(direction, self.heading):
            return False
        self.pending = direction
        return True

    def advance(self, food: Optional[Cell]) -> AdvanceResult:
        # Commit direction once per tick
        self.heading = self.pending

        hx, hy = self.head
        dx, dy = self.heading
        new_head = (hx + dx, hy + dy)

        if not self.grid.is_in_bounds(new_head):
            return AdvanceResult.COLLISION_WALL

        # Tail has not moved yet, so its cell is still occupied
        if new_head in self.body:
            return AdvanceResult.COLLISION_SELF

        self.body.insert(0, new_head)
        if new_head == food:
            return AdvanceResult.ATE_FOOD
        self.body.pop()
        return AdvanceResult.MOVED
