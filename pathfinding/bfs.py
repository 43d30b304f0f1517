# pathfinding/bfs.py
from collections import deque
from time import perf_counter
from typing import Dict, Iterable, List, Optional, Set

from grid import Cell, Grid, Pos
from .base import PathfindingAlgorithm, check_query


class BFSPlanner(PathfindingAlgorithm):
    name = "BFS"

    def __init__(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0
        self.last_expansions = 0

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0
        self.last_expansions = 0

    def plan(self, grid: Grid, start: Cell, goals: Iterable[Cell]) -> List[Cell]:
        """
        Breadth-first search from start until any goal is discovered.
        Returns a list of cells from start to the nearest goal (inclusive),
        or an empty list [] if unreachable.
        """
        t0 = perf_counter()
        goal_pos: Set[Pos] = {g.pos for g in check_query(grid, start, goals)}

        if start.pos in goal_pos:
            self._update_stats(perf_counter() - t0, 0)
            return [start]

        q = deque([start])
        came_from: Dict[Pos, Optional[Pos]] = {start.pos: None}
        path: List[Cell] = []
        expansions = 0

        while q:
            cell = q.popleft()
            expansions += 1
            for nb in grid.neighbors(cell):
                np = nb.pos
                if np in came_from:
                    continue

                came_from[np] = cell.pos

                if np in goal_pos:
                    # reconstruct
                    cur: Optional[Pos] = np
                    while cur is not None:
                        path.append(grid.get_cell(*cur))
                        cur = came_from[cur]
                    path.reverse()
                    q.clear()
                    break
                q.append(nb)

        self._update_stats(perf_counter() - t0, expansions)
        return path

    def _update_stats(self, dt: float, expansions: int) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1
        self.last_expansions = expansions


ALGORITHM = BFSPlanner()
