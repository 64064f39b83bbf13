# clock.py
from typing import Optional


class SimulationClock:
    """
    Fixed-timestep accumulator.

    Each display frame adds the elapsed wall time (clamped) to the
    accumulator; the caller then drains whole steps of 1/speed seconds with
    `consume()`, reading speed fresh every time.
    """

    def __init__(self, max_frame_delta: float = 0.25):
        if max_frame_delta <= 0:
            raise ValueError(f"max_frame_delta must be positive, got {max_frame_delta}")
        self.max_frame_delta = max_frame_delta
        self.accumulator = 0.0
        self.last_time: Optional[float] = None

    def sync(self, now: float) -> None:
        """Remember the frame time without simulating (paused/idle frames)."""
        self.last_time = now

    def accumulate(self, now: float) -> float:
        """Add the time since the previous frame; returns the clamped delta."""
        if self.last_time is None:
            delta = 0.0
        else:
            delta = min(max(now - self.last_time, 0.0), self.max_frame_delta)
        self.last_time = now
        self.accumulator += delta
        return delta

    def consume(self, speed: float) -> bool:
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        step = 1.0 / speed
        if self.accumulator >= step:
            self.accumulator -= step
            return True
        return False

    def reset(self) -> None:
        self.accumulator = 0.0
