# grid.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

Pos = Tuple[int, int]  # (x, y) with x = col, y = row

# up, down, left, right
DIRECTIONS: Tuple[Pos, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


def manhattan(a: Pos, b: Pos) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(eq=False)
class Cell:
    """
    A single grid cell.

    Coordinates are fixed once the cell exists; only `walkable` may change.
    Cells compare by identity, so two grids never share "equal" cells.
    """
    x: int
    y: int
    walkable: bool = True

    def __setattr__(self, name: str, value) -> None:
        if name in ("x", "y") and name in self.__dict__:
            raise AttributeError(f"Cell coordinate '{name}' is read-only")
        super().__setattr__(name, value)

    @property
    def pos(self) -> Pos:
        return (self.x, self.y)


@dataclass
class Grid:
    """
    Fixed-size width x height collection of cells.

    Storage is column-major: cells[x][y]. Search algorithms only rely on
    get_cell() and neighbors(); they never write to the grid.
    """
    width: int
    height: int
    cells: List[List[Cell]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Grid {label} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"Grid {label} must be positive, got {value}")
        self.width = int(self.width)
        self.height = int(self.height)
        self.cells = [
            [Cell(x, y) for y in range(self.height)]
            for x in range(self.width)
        ]

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    @classmethod
    def create(cls, width: int, height: int) -> "Grid":
        return cls(width, height)

    @classmethod
    def from_mask(cls, mask) -> "Grid":
        """
        Build a grid from a 2D boolean array indexed [y, x]
        (True = walkable), e.g. the output of walkable_mask().
        """
        arr = np.asarray(mask, dtype=bool)
        if arr.ndim != 2:
            raise ValueError(f"Walkable mask must be 2D, got shape {arr.shape}")
        height, width = arr.shape
        grid = cls(width, height)
        for y, x in zip(*np.nonzero(~arr)):
            grid.cells[int(x)][int(y)].walkable = False
        return grid

    # ------------------------------------------------------------------ #
    # Basic queries                                                      #
    # ------------------------------------------------------------------ #
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """The cell at (x, y), or None when out of bounds."""
        if self.in_bounds(x, y):
            return self.cells[x][y]
        return None

    def owns(self, cell: Cell) -> bool:
        return self.get_cell(cell.x, cell.y) is cell

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Walkable in-bounds cells around `cell`, in up/down/left/right order."""
        out: List[Cell] = []
        for dx, dy in DIRECTIONS:
            nb = self.get_cell(cell.x + dx, cell.y + dy)
            if nb is not None and nb.walkable:
                out.append(nb)
        return out

    def cells_iter(self) -> Iterator[Cell]:
        """All cells, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield self.cells[x][y]

    def set_walkable(self, x: int, y: int, walkable: bool) -> None:
        cell = self.get_cell(x, y)
        if cell is None:
            raise ValueError(f"Cell {(x, y)} is outside a {self.width}x{self.height} grid")
        cell.walkable = walkable

    def walls(self) -> List[Pos]:
        return [c.pos for c in self.cells_iter() if not c.walkable]

    def walkable_mask(self) -> np.ndarray:
        mask = np.ones((self.height, self.width), dtype=bool)
        for (x, y) in self.walls():
            mask[y, x] = False
        return mask
