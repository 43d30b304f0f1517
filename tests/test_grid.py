# tests/test_grid.py
"""
Unit tests for grid.Grid / grid.Cell: construction, bounds-checked
lookup and 4-directional neighbor enumeration.
"""

from __future__ import annotations

import numpy as np
import pytest

from grid import Cell, Grid, manhattan


def positions(cells):
    return [c.pos for c in cells]


def test_create_allocates_walkable_cells_with_matching_coordinates() -> None:
    grid = Grid.create(4, 3)

    assert (grid.width, grid.height) == (4, 3)
    for x in range(4):
        for y in range(3):
            cell = grid.get_cell(x, y)
            assert cell.pos == (x, y)
            assert cell.walkable
    assert grid.walls() == []


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3), (3, -2)])
def test_non_positive_dimensions_are_rejected(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        Grid(width, height)


def test_non_integer_dimensions_are_rejected() -> None:
    with pytest.raises(ValueError):
        Grid(2.5, 3)
    with pytest.raises(ValueError):
        Grid(True, 3)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3), (100, 100)])
def test_get_cell_out_of_bounds_returns_none(x: int, y: int) -> None:
    grid = Grid(4, 3)
    assert grid.get_cell(x, y) is None


def test_cell_coordinates_are_read_only_but_walkable_is_mutable() -> None:
    cell = Grid(2, 2).get_cell(1, 0)

    with pytest.raises(AttributeError):
        cell.x = 5
    with pytest.raises(AttributeError):
        cell.y = 5

    cell.walkable = False
    assert not cell.walkable
    assert cell.pos == (1, 0)


def test_cells_compare_by_identity() -> None:
    a, b = Grid(2, 2), Grid(2, 2)
    assert a.get_cell(0, 0) is a.get_cell(0, 0)
    assert a.get_cell(0, 0) != b.get_cell(0, 0)
    assert a.owns(a.get_cell(1, 1))
    assert not a.owns(b.get_cell(1, 1))
    assert not a.owns(Cell(0, 0))


def test_neighbors_order_is_up_down_left_right() -> None:
    grid = Grid(3, 3)
    center = grid.get_cell(1, 1)

    assert positions(grid.neighbors(center)) == [(1, 0), (1, 2), (0, 1), (2, 1)]


def test_neighbors_filter_out_of_bounds_cells() -> None:
    grid = Grid(3, 3)

    assert positions(grid.neighbors(grid.get_cell(0, 0))) == [(0, 1), (1, 0)]
    assert positions(grid.neighbors(grid.get_cell(2, 2))) == [(2, 1), (1, 2)]


def test_neighbors_filter_blocked_cells() -> None:
    grid = Grid(3, 3)
    grid.set_walkable(1, 0, False)
    grid.set_walkable(2, 1, False)

    assert positions(grid.neighbors(grid.get_cell(1, 1))) == [(1, 2), (0, 1)]
    assert grid.walls() == [(1, 0), (2, 1)]


def test_neighbors_on_single_cell_grid_is_empty() -> None:
    grid = Grid(1, 1)
    assert grid.neighbors(grid.get_cell(0, 0)) == []


def test_set_walkable_out_of_bounds_raises() -> None:
    with pytest.raises(ValueError):
        Grid(2, 2).set_walkable(2, 0, False)


def test_walkable_mask_and_from_mask_agree() -> None:
    grid = Grid(4, 2)
    grid.set_walkable(3, 0, False)
    grid.set_walkable(1, 1, False)

    mask = grid.walkable_mask()
    assert mask.shape == (2, 4)
    assert not mask[0, 3] and not mask[1, 1]
    assert mask.sum() == 6

    rebuilt = Grid.from_mask(mask)
    assert (rebuilt.width, rebuilt.height) == (4, 2)
    assert rebuilt.walls() == grid.walls()


def test_from_mask_rejects_non_2d_input() -> None:
    with pytest.raises(ValueError):
        Grid.from_mask(np.ones(5, dtype=bool))


def test_cells_iter_is_row_major() -> None:
    grid = Grid(2, 2)
    assert positions(grid.cells_iter()) == [(0, 0), (1, 0), (0, 1), (1, 1)]


def test_manhattan() -> None:
    assert manhattan((0, 0), (3, 4)) == 7
    assert manhattan((2, 5), (2, 5)) == 0
    assert manhattan((4, 1), (1, 3)) == 5
