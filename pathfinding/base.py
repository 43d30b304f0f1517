# pathfinding/base.py
from typing import Iterable, List, Protocol

from grid import Cell, Grid


class PathfindingAlgorithm(Protocol):
    name: str
    # Optional timing stats (per algorithm implementation)
    total_runtime: float
    call_count: int
    last_runtime: float
    last_expansions: int

    def plan(self, grid: Grid, start: Cell, goals: Iterable[Cell]) -> List[Cell]:
        ...

    def reset_stats(self) -> None:
        ...


def check_query(grid: Grid, start: Cell, goals: Iterable[Cell]) -> List[Cell]:
    """
    Validate a planning query and return the goals as a list.

    Raises ValueError when the goal set is empty or when start/goals
    are not cells of `grid`.
    """
    goal_list = list(goals)
    if not goal_list:
        raise ValueError("At least one goal cell is required")
    if not grid.owns(start):
        raise ValueError(f"Start cell {start.pos} does not belong to this grid")
    for g in goal_list:
        if not grid.owns(g):
            raise ValueError(f"Goal cell {g.pos} does not belong to this grid")
    return goal_list
