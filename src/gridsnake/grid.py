# grid.py
from dataclasses import dataclass
from typing import Iterator, Tuple

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Fixed square board of `count` x `count` cells."""
    count: int

    def __post_init__(self):
        if self.count < 2:
            raise ValueError(f"Grid needs at least 2 cells per side, got {self.count}")

    @property
    def size(self) -> int:
        return self.count * self.count

    def is_in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.count and 0 <= y < self.count

    def center(self) -> Cell:
        return (self.count // 2, self.count // 2)

    def cells(self) -> Iterator[Cell]:
        """Row-major walk over every cell."""
        for y in range(self.count):
            for x in range(self.count):
                yield (x, y)


def cell_center_px(cell: Cell, cell_size: int) -> Tuple[float, float]:
    """Pixel coordinates of the middle of a cell."""
    return (cell[0] * cell_size + cell_size / 2, cell[1] * cell_size + cell_size / 2)
