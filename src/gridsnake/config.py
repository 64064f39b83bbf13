# config.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

# ----- Grid & window -----
GRID_COUNT = 30
CELL_SIZE = 20
HUD_HEIGHT = 48

# ----- Colors -----
BG        = (15, 23, 42)
GRID_LINE = (37, 46, 64)
SNAKE     = (52, 211, 153)
FOOD      = (245, 158, 11)
HUD_BG    = (10, 15, 30)
TEXT      = (226, 232, 240)
BUTTON    = (51, 65, 85)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Persistence -----
STORAGE_KEY = "snake-high-score"
DEFAULT_HIGH_SCORE_PATH = Path.home() / ".gridsnake" / "highscore.json"


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    grid_count: int = GRID_COUNT
    cell_size: int = CELL_SIZE
    initial_speed: float = 6.0       # cells per second
    speed_increment: float = 0.25    # added per food
    score_per_food: int = 10
    initial_length: int = 2
    max_frame_delta: float = 0.25    # seconds; caps catch-up after a stall
    fps: int = 60
    seed: Optional[int] = None
    high_score_path: Optional[Path] = DEFAULT_HIGH_SCORE_PATH

    @property
    def board_px(self) -> int:
        return self.grid_count * self.cell_size

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.board_px, self.board_px + HUD_HEIGHT

    def validate(self) -> "Config":
        """Raise ValueError on values the game cannot run with."""
        if self.grid_count < 2:
            raise ValueError(f"grid_count must be >= 2, got {self.grid_count}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.initial_speed <= 0:
            raise ValueError(f"initial_speed must be positive, got {self.initial_speed}")
        if self.speed_increment < 0:
            raise ValueError(f"speed_increment must be >= 0, got {self.speed_increment}")
        if self.score_per_food < 0:
            raise ValueError(f"score_per_food must be >= 0, got {self.score_per_food}")
        if not 2 <= self.initial_length <= self.grid_count // 2 + 1:
            raise ValueError(
                f"initial_length must be in 2..{self.grid_count // 2 + 1}, "
                f"got {self.initial_length}"
            )
        if self.max_frame_delta <= 0:
            raise ValueError(f"max_frame_delta must be positive, got {self.max_frame_delta}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        return self


CFG = Config()
