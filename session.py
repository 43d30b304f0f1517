# session.py
from __future__ import annotations
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Dict, List, Optional

from config import Config
from grid import Cell
from pathfinding import get_algorithm
from scenario import Scenario


@dataclass
class PlannerSession:
    cfg: Config
    scenario: Scenario
    # None => take the value from cfg
    path_algo_name: Optional[str] = None

    # control terminal logging
    log_events: Optional[bool] = None

    # one entry per solve() call
    history: List[Dict[str, Any]] = field(default_factory=list)
    last_path: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.path_algo_name is None:
            self.path_algo_name = self.cfg.path_algo_name
        if self.log_events is None:
            self.log_events = self.cfg.log_events

        # raises ValueError for unknown names
        self.path_algo = get_algorithm(self.path_algo_name)

        grid = self.scenario.grid
        self._log(f"[INIT] Session with PF={self.path_algo.name} on "
                  f"{grid.width}x{grid.height} grid, {len(grid.walls())} walls")

    # ---------- logging helper ---------- #

    def _log(self, msg: str) -> None:
        if self.log_events:
            print(msg)

    # ---------------- planning ---------------- #

    def solve(self) -> List[Cell]:
        """
        Plan once from the scenario's current start to its nearest goal.
        The scenario may be edited between calls; every call starts from
        a clean search state.
        """
        sc = self.scenario
        self._log(
            f"[PLAN] {self.path_algo.name} from {sc.start.pos} "
            f"to {len(sc.goals)} goal(s): {[g.pos for g in sc.goals]}"
        )

        t0 = perf_counter()
        path = sc.plan(self.path_algo)
        dt = perf_counter() - t0

        entry: Dict[str, Any] = {
            "query": len(self.history) + 1,
            "found": bool(path),
            "length": len(path) - 1 if path else None,
            "goal": path[-1].pos if path else None,
            "runtime": dt,
        }
        self.history.append(entry)
        self.last_path = path

        if path:
            self._log(f"[PATH] reached {entry['goal']} in {entry['length']} steps "
                      f"({self.path_algo.last_expansions} expansions)")
        else:
            self._log("[NO PATH] no goal reachable from start")
        return path

    # ---------------- reporting ---------------- #

    def summary(self) -> Dict[str, Any]:
        sc = self.scenario
        pa = self.path_algo
        path = self.last_path
        return {
            "grid": {
                "width": sc.grid.width,
                "height": sc.grid.height,
                "walls": len(sc.grid.walls()),
            },
            "start": list(sc.start.pos),
            "goals": [list(g.pos) for g in sc.goals],
            "path": {
                "found": bool(path),
                "length": len(path) - 1 if path else None,
                "reached_goal": list(path[-1].pos) if path else None,
                "cells": [list(c.pos) for c in path],
            },
            "queries": len(self.history),
            "pathfinding": {
                "algorithm": pa.name,
                "call_count": pa.call_count,
                "total_runtime": pa.total_runtime,
                "avg_runtime": (pa.total_runtime / pa.call_count) if pa.call_count else 0.0,
                "last_expansions": pa.last_expansions,
            },
        }
