# scenario.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import random

from config import Config
from grid import Cell, Grid, Pos
from pathfinding.base import PathfindingAlgorithm

FREE, WALL, START, GOAL, PATH = ".", "#", "S", "G", "*"
START_GOAL = "B"  # start cell that is also a goal


@dataclass
class Scenario:
    """
    Caller-side planning state on top of a Grid:
      - start: the single start cell
      - goals: one or more goal cells (kept in insertion order)

    Start and goal cells are protected from wall toggling. Moving the start
    or adding a goal leaves walkability alone: a goal placed on a wall stays
    unreachable. Only default(), from_config() and reset() clear the walls
    under start and goals.
    """
    grid: Grid
    start: Cell
    goals: List[Cell] = field(default_factory=list)

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    @classmethod
    def default(cls, width: int, height: int) -> "Scenario":
        """Fresh open grid with start top-left and one goal bottom-right."""
        grid = Grid(width, height)
        return cls(
            grid=grid,
            start=grid.get_cell(0, 0),
            goals=[grid.get_cell(width - 1, height - 1)],
        )

    @classmethod
    def from_config(cls, cfg: Config) -> "Scenario":
        rng = random.Random(cfg.seed)
        grid = Grid(cfg.width, cfg.height)

        def cell_at(p: Pos, what: str) -> Cell:
            cell = grid.get_cell(*p)
            if cell is None:
                raise ValueError(
                    f"{what} {tuple(p)} is outside a {grid.width}x{grid.height} grid"
                )
            return cell

        start = cell_at(cfg.start, "Start")
        goal_points = cfg.goals or [(cfg.width - 1, cfg.height - 1)]
        goals: List[Cell] = []
        for p in goal_points:
            g = cell_at(p, "Goal")
            if g not in goals:
                goals.append(g)

        reserved = {start.pos} | {g.pos for g in goals}
        for p in cfg.walls:
            cell = cell_at(p, "Wall")
            if cell.pos not in reserved:
                cell.walkable = False

        # random walls over the remaining free cells
        candidates = [
            c for c in grid.cells_iter() if c.walkable and c.pos not in reserved
        ]
        rng.shuffle(candidates)
        n_random = int(cfg.wall_density * len(candidates))
        for c in candidates[:n_random]:
            c.walkable = False

        return cls(grid=grid, start=start, goals=goals)

    @classmethod
    def from_layout(cls, text: str) -> "Scenario":
        """
        Parse a text layout, one line per grid row (top row first):

            S..#
            .#..
            ...G

        '.' free, '#' wall, 'S' start (exactly one), 'G' goal (one or more),
        'B' start that is also a goal.
        '*' path markers written by to_layout() are read back as free cells.
        """
        rows = [line.strip() for line in text.splitlines() if line.strip()]
        if not rows:
            raise ValueError("Layout is empty")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("Layout rows must all have the same length")

        grid = Grid(width, len(rows))
        start: Optional[Cell] = None
        goals: List[Cell] = []
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                cell = grid.get_cell(x, y)
                if ch == WALL:
                    cell.walkable = False
                elif ch in (START, START_GOAL):
                    if start is not None:
                        raise ValueError(f"Layout has more than one start (second at {(x, y)})")
                    start = cell
                    if ch == START_GOAL:
                        goals.append(cell)
                elif ch == GOAL:
                    goals.append(cell)
                elif ch not in (FREE, PATH):
                    raise ValueError(f"Unknown layout symbol {ch!r} at {(x, y)}")

        if start is None:
            raise ValueError("Layout has no start cell ('S')")
        if not goals:
            raise ValueError("Layout has no goal cell ('G')")
        return cls(grid=grid, start=start, goals=goals)

    def to_layout(self, path: Optional[Sequence[Cell]] = None) -> str:
        """
        Render as text; intermediate path cells are drawn as '*'.

        Start and goal symbols hide the walkable flag of their cell, so a
        start or goal sitting on a wall comes back walkable from from_layout().
        """
        on_path = {c.pos for c in (path or [])}
        goal_pos = {g.pos for g in self.goals}
        lines = []
        for y in range(self.grid.height):
            row = []
            for x in range(self.grid.width):
                cell = self.grid.get_cell(x, y)
                if cell is self.start:
                    row.append(START_GOAL if cell.pos in goal_pos else START)
                elif cell.pos in goal_pos:
                    row.append(GOAL)
                elif not cell.walkable:
                    row.append(WALL)
                elif cell.pos in on_path:
                    row.append(PATH)
                else:
                    row.append(FREE)
            lines.append("".join(row))
        return "\n".join(lines) + "\n"

    # ------------------------------------------------------------------ #
    # Editing                                                            #
    # ------------------------------------------------------------------ #
    def _cell(self, x: int, y: int) -> Cell:
        cell = self.grid.get_cell(x, y)
        if cell is None:
            raise ValueError(
                f"Cell {(x, y)} is outside a {self.grid.width}x{self.grid.height} grid"
            )
        return cell

    def is_goal(self, cell: Cell) -> bool:
        return any(g is cell for g in self.goals)

    def set_start(self, x: int, y: int) -> Cell:
        cell = self._cell(x, y)
        self.start = cell
        return cell

    def toggle_goal(self, x: int, y: int) -> bool:
        """Add or remove a goal. Returns True if (x, y) is a goal afterwards."""
        cell = self._cell(x, y)
        if self.is_goal(cell):
            self.goals = [g for g in self.goals if g is not cell]
            return False
        self.goals.append(cell)
        return True

    def toggle_wall(self, x: int, y: int) -> bool:
        """Flip walkability of a plain cell. Start and goals are left alone."""
        cell = self._cell(x, y)
        if cell is self.start or self.is_goal(cell):
            return False
        cell.walkable = not cell.walkable
        return True

    def reset(self, width: Optional[int] = None, height: Optional[int] = None) -> None:
        """Throw away walls/markers and rebuild an open grid (optionally resized)."""
        fresh = Scenario.default(
            width if width is not None else self.grid.width,
            height if height is not None else self.grid.height,
        )
        self.grid = fresh.grid
        self.start = fresh.start
        self.goals = fresh.goals

    # ------------------------------------------------------------------ #
    # Planning                                                           #
    # ------------------------------------------------------------------ #
    def plan(self, planner: PathfindingAlgorithm) -> List[Cell]:
        return planner.plan(self.grid, self.start, self.goals)
