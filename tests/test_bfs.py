# tests/test_bfs.py
"""
Unit tests for the breadth-first planner (same contract as A*).
"""

from __future__ import annotations

import pytest

from grid import Grid
from pathfinding import PATHFINDING_ALGOS
from pathfinding.bfs import BFSPlanner


def positions(cells):
    return [c.pos for c in cells]


def test_bfs_is_registered() -> None:
    assert isinstance(PATHFINDING_ALGOS["BFS"], BFSPlanner)


def test_bfs_open_grid_matches_neighbor_order() -> None:
    grid = Grid(5, 5)
    path = BFSPlanner().plan(grid, grid.get_cell(0, 0), [grid.get_cell(4, 4)])

    assert positions(path) == [
        (0, 0), (0, 1), (0, 2), (0, 3), (0, 4),
        (1, 4), (2, 4), (3, 4), (4, 4),
    ]


def test_bfs_multi_goal_and_start_goal() -> None:
    grid = Grid(5, 5)
    planner = BFSPlanner()
    start = grid.get_cell(0, 0)

    path = planner.plan(grid, start, [grid.get_cell(4, 4), grid.get_cell(0, 4)])
    assert positions(path)[-1] == (0, 4)
    assert len(path) == 5

    assert planner.plan(grid, start, [start]) == [start]


def test_bfs_unreachable_and_invalid_queries() -> None:
    grid = Grid(4, 4)
    grid.set_walkable(2, 3, False)
    grid.set_walkable(3, 2, False)
    planner = BFSPlanner()
    start, goal = grid.get_cell(0, 0), grid.get_cell(3, 3)

    assert planner.plan(grid, start, [goal]) == []
    assert planner.call_count == 1

    with pytest.raises(ValueError):
        planner.plan(grid, start, [])
    with pytest.raises(ValueError):
        planner.plan(grid, Grid(4, 4).get_cell(0, 0), [goal])
