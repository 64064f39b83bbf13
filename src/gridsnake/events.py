# events.py
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple, Union

from .config import UP, DOWN, LEFT, RIGHT
from .grid import Cell


class InputSource(enum.Enum):
    KEYBOARD = "keyboard"
    BUTTON = "button"
    TOUCH = "touch"


@dataclass(frozen=True)
class DirectionRequested:
    direction: Cell
    source: InputSource = InputSource.KEYBOARD


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Restart:
    pass


InputEvent = Union[DirectionRequested, TogglePause, Restart]


def direction_toward(origin: Tuple[float, float], point: Tuple[float, float]) -> Cell:
    """
    Map a touch/click to a direction: the dominant axis of the displacement
    from `origin` (the head's pixel center) to `point`. Ties go vertical.
    """
    dx = point[0] - origin[0]
    dy = point[1] - origin[1]
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP
