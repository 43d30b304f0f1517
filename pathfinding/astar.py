# pathfinding/astar.py
from __future__ import annotations

from time import perf_counter
from heapq import heappush, heappop
from typing import Dict, Iterable, List, Set, Tuple

from grid import Cell, Grid, Pos
from .base import PathfindingAlgorithm, check_query


class AStarPlanner(PathfindingAlgorithm):
    """
    A* path planner on a 4-connected grid with one or more goals.

    Heuristic is the Manhattan distance to the nearest goal, which is
    consistent for unit-cost 4-directional moves, so the first goal
    popped from the open set ends an optimal path.

    Ties on f are broken by discovery order: a cell keeps the sequence
    number it got when it first entered the open set, even if its g is
    later improved. Together with the grid's up/down/left/right neighbor
    order this makes the returned path fully deterministic.

    This matches a list re-sorted stably by f on every step, except when an
    open cell's g improves: such a list keeps the cell at its current
    position, whereas here it keeps its first sequence number. The two can
    then return different paths of the same (optimal) length.

    All search state (g, f, came-from, open/closed) is local to one
    plan() call; the grid is only read.
    """

    name = "AStar"

    def __init__(self) -> None:
        # timing stats
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0
        self.last_expansions: int = 0

    # ---- stats API ----

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0
        self.last_expansions = 0

    def _update_stats(self, dt: float, expansions: int) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1
        self.last_expansions = expansions

    # ---- main planning API ----

    def plan(self, grid: Grid, start: Cell, goals: Iterable[Cell]) -> List[Cell]:
        """
        Returns a list of cells from start to the nearest reachable goal
        (inclusive), or [] if no goal can be reached.
        """
        t0 = perf_counter()
        goal_cells = check_query(grid, start, goals)
        goal_pos: Set[Pos] = {g.pos for g in goal_cells}

        if start.pos in goal_pos:
            self._update_stats(perf_counter() - t0, 0)
            return [start]

        def heuristic(p: Pos) -> int:
            x, y = p
            return min(abs(x - gx) + abs(y - gy) for gx, gy in goal_pos)

        # open set: heap of (f, seq, pos) with lazy deletion;
        # open_f holds the live f of every position currently open
        open_heap: List[Tuple[int, int, Pos]] = []
        open_f: Dict[Pos, int] = {}
        seq: Dict[Pos, int] = {}
        counter = 0

        g_cost: Dict[Pos, int] = {start.pos: 0}
        came_from: Dict[Pos, Pos] = {}
        closed: Set[Pos] = set()

        f0 = heuristic(start.pos)
        seq[start.pos] = counter
        counter += 1
        open_f[start.pos] = f0
        heappush(open_heap, (f0, seq[start.pos], start.pos))

        while open_heap:
            f_cur, _, cur = heappop(open_heap)

            # stale entry: already expanded, or superseded by a lower f
            if cur in closed or open_f.get(cur) != f_cur:
                continue
            del open_f[cur]

            if cur in goal_pos:
                path = self._reconstruct(grid, came_from, cur)
                self._update_stats(perf_counter() - t0, len(closed))
                return path

            closed.add(cur)
            g_cur = g_cost[cur]

            for nb in grid.neighbors(grid.get_cell(*cur)):
                np = nb.pos
                if np in closed:
                    continue

                new_g = g_cur + 1  # unit-cost grid

                if np not in open_f or new_g < g_cost[np]:
                    g_cost[np] = new_g
                    came_from[np] = cur
                    f_np = new_g + heuristic(np)
                    if np not in open_f:
                        seq[np] = counter
                        counter += 1
                    open_f[np] = f_np
                    heappush(open_heap, (f_np, seq[np], np))

        # no path
        self._update_stats(perf_counter() - t0, len(closed))
        return []

    @staticmethod
    def _reconstruct(grid: Grid, came_from: Dict[Pos, Pos], end: Pos) -> List[Cell]:
        cur = end
        path: List[Cell] = [grid.get_cell(*cur)]
        while cur in came_from:
            cur = came_from[cur]
            path.append(grid.get_cell(*cur))
        path.reverse()
        return path


ALGORITHM = AStarPlanner()


def find_path(grid: Grid, start: Cell, goals: Iterable[Cell]) -> List[Cell]:
    """Run the shared A* planner once; see AStarPlanner.plan."""
    return ALGORITHM.plan(grid, start, goals)
