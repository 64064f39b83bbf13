"""Single-screen snake with a fixed-timestep game loop."""

from gridsnake.session import GameSession, Phase, Snapshot
from gridsnake.snake import AdvanceResult, SnakeState

__all__ = ["GameSession", "Phase", "Snapshot", "AdvanceResult", "SnakeState"]
