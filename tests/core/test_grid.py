"""Tests for the Grid class."""

import numpy as np
import pytest
from lifegrid.core.cell import CellState
from lifegrid.core.grid import Grid


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (10, 20)
        assert grid.population == 0

    def test_all_cells_start_dead(self):
        """Test every coordinate holds a defined dead state."""
        grid = Grid(4, 3)
        for x in range(4):
            for y in range(3):
                assert grid.at(x, y) is CellState.DEAD

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 5), (5, -3), (2.5, 3), (True, 3)])
    def test_invalid_dimensions(self, width, height):
        """Test construction rejects non-positive or non-integer dimensions."""
        with pytest.raises(ValueError):
            Grid(width, height)

    def test_numpy_integer_dimensions(self):
        """Test numpy integers are accepted as dimensions."""
        grid = Grid(np.int64(3), np.int32(2))
        assert grid.shape == (3, 2)
        assert isinstance(grid.width, int)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 5)

        grid.set(1, 1, CellState.ALIVE)
        grid.set_cell(2, 3, True)

        assert grid.at(1, 1) is CellState.ALIVE
        assert grid.get_cell(2, 3) is True
        assert grid.get_cell(0, 0) is False

        grid.set(1, 1, CellState.DEAD)
        assert grid.at(1, 1) is CellState.DEAD

    def test_in_bounds(self):
        """Test in_bounds at and around the edges."""
        grid = Grid(3, 2)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(2, 1)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(0, -1)
        assert not grid.in_bounds(3, 0)
        assert not grid.in_bounds(0, 2)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 3), (-1, -1), (3, 3)])
    def test_out_of_bounds_access(self, x, y):
        """Test out-of-bounds access raises instead of wrapping."""
        grid = Grid(3, 3)

        with pytest.raises(IndexError):
            grid.at(x, y)

        with pytest.raises(IndexError):
            grid.set(x, y, CellState.ALIVE)

        with pytest.raises(IndexError):
            grid.set_cell(x, y, True)

        with pytest.raises(IndexError):
            grid.neighbors(x, y)

    def test_out_of_bounds_set_leaves_grid_unchanged(self):
        """Test a failed set does not touch any other cell."""
        grid = Grid(3, 3)
        with pytest.raises(IndexError):
            grid.set_cell(-1, -1, True)
        assert grid.population == 0
        assert grid.at(2, 2) is CellState.DEAD

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5, 5)

        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)
        grid.set_cell(3, 3, True)
        assert grid.population == 3

        grid.clear()
        assert grid.population == 0
        assert not grid.get_cell(1, 1)


class TestNeighbors:
    """Test the Moore neighborhood geometry."""

    def test_interior_cell(self):
        """Test an interior cell has all 8 neighbors."""
        grid = Grid(5, 5)
        assert sorted(grid.neighbors(2, 2)) == [
            (1, 1), (1, 2), (1, 3),
            (2, 1), (2, 3),
            (3, 1), (3, 2), (3, 3),
        ]

    def test_corner_cells(self):
        """Test corner cells have 3 neighbors and no wraparound."""
        grid = Grid(5, 4)
        assert sorted(grid.neighbors(0, 0)) == [(0, 1), (1, 0), (1, 1)]
        assert sorted(grid.neighbors(4, 3)) == [(3, 2), (3, 3), (4, 2)]
        assert len(grid.neighbors(4, 0)) == 3
        assert len(grid.neighbors(0, 3)) == 3

    def test_edge_cells(self):
        """Test non-corner edge cells have 5 neighbors."""
        grid = Grid(5, 4)
        assert len(grid.neighbors(2, 0)) == 5
        assert len(grid.neighbors(0, 2)) == 5
        assert len(grid.neighbors(4, 1)) == 5
        assert len(grid.neighbors(2, 3)) == 5

    def test_neighborhood_properties_everywhere(self):
        """Test bounds, self-exclusion, uniqueness and size for every cell."""
        grid = Grid(6, 4)
        for x in range(grid.width):
            for y in range(grid.height):
                points = grid.neighbors(x, y)
                on_edge = x in (0, grid.width - 1) or y in (0, grid.height - 1)

                assert all(grid.in_bounds(px, py) for px, py in points)
                assert (x, y) not in points
                assert len(set(points)) == len(points)
                assert len(points) <= 8
                assert (len(points) == 8) == (not on_edge)
                assert all(max(abs(px - x), abs(py - y)) == 1 for px, py in points)

    def test_single_cell_grid(self):
        """Test a 1x1 grid has no neighbors."""
        grid = Grid(1, 1)
        assert grid.neighbors(0, 0) == []

    def test_alive_neighbors(self):
        """Test counting live neighbors."""
        grid = Grid(4, 4)
        grid.set_cell(0, 0, True)
        grid.set_cell(1, 0, True)
        grid.set_cell(3, 3, True)

        assert grid.alive_neighbors(0, 1) == 2
        assert grid.alive_neighbors(1, 1) == 2
        assert grid.alive_neighbors(0, 0) == 1
        assert grid.alive_neighbors(2, 2) == 1
        assert grid.alive_neighbors(3, 0) == 0

    def test_count_all_neighbors_matches_alive_neighbors(self):
        """Test the convolution agrees with per-cell counting, edges included."""
        rng = np.random.RandomState(7)
        grid = Grid(9, 6)
        for x in range(grid.width):
            for y in range(grid.height):
                grid.set_cell(x, y, bool(rng.random_sample() < 0.4))

        counts = grid.count_all_neighbors()
        assert counts.shape == (9, 6)
        for x in range(grid.width):
            for y in range(grid.height):
                assert counts[x, y] == grid.alive_neighbors(x, y)

    def test_count_all_neighbors_full_grid(self):
        """Test bounded counts on a fully populated grid."""
        grid = Grid(3, 3)
        for x in range(3):
            for y in range(3):
                grid.set_cell(x, y, True)

        counts = grid.count_all_neighbors()
        assert counts[0, 0] == 3
        assert counts[1, 0] == 5
        assert counts[1, 1] == 8


class TestGridState:
    """Test whole-state operations."""

    def test_cells_view_is_read_only(self):
        """Test the cells view cannot be written through."""
        grid = Grid(3, 3)
        with pytest.raises(ValueError):
            grid.cells[0, 0] = 1

    def test_replace_cells(self):
        """Test replacing the whole state."""
        grid = Grid(3, 2)
        grid.replace_cells(np.array([[1, 0], [0, 0], [0, 1]]))

        assert grid.get_cell(0, 0)
        assert grid.get_cell(2, 1)
        assert grid.population == 2

    def test_replace_cells_copies_input(self):
        """Test later changes to the source array do not leak into the grid."""
        grid = Grid(2, 2)
        source = np.zeros((2, 2), dtype=np.int8)
        grid.replace_cells(source)
        source[0, 0] = 1
        assert grid.population == 0

    def test_replace_cells_shape_mismatch(self):
        """Test replacing with the wrong shape raises."""
        grid = Grid(3, 2)
        with pytest.raises(ValueError):
            grid.replace_cells(np.zeros((2, 3), dtype=np.int8))

    @pytest.mark.parametrize(
        "cells",
        [
            [[0, 2], [0, 0]],
            [[256, 0], [0, 0]],
            [[-1, 0], [0, 0]],
            [[0.5, 0.0], [0.0, 1.7]],
        ],
    )
    def test_replace_cells_invalid_values(self, cells):
        """Test values other than 0/1 raise instead of being cast."""
        grid = Grid(2, 2)
        with pytest.raises(ValueError):
            grid.replace_cells(np.array(cells))
        assert grid.population == 0

    def test_replace_cells_accepts_bool_and_whole_floats(self):
        """Test boolean arrays and 0.0/1.0 floats are valid states."""
        grid = Grid(2, 2)
        grid.replace_cells(np.array([[True, False], [False, True]]))
        assert grid.living_cells() == [(0, 0), (1, 1)]

        grid.replace_cells(np.array([[0.0, 1.0], [0.0, 0.0]]))
        assert grid.living_cells() == [(0, 1)]

    def test_copy_is_independent(self):
        """Test copies share no state."""
        grid = Grid(4, 4)
        grid.set_cell(1, 2, True)

        duplicate = grid.copy()
        assert duplicate == grid

        duplicate.set_cell(0, 0, True)
        assert not grid.get_cell(0, 0)
        assert duplicate != grid

    def test_equality(self):
        """Test grid equality."""
        grid1 = Grid(5, 5)
        grid2 = Grid(5, 5)
        grid3 = Grid(5, 4)

        assert grid1 == grid2
        assert grid1 != grid3
        assert grid1 != "not a grid"

        grid1.set_cell(2, 2, True)
        assert grid1 != grid2

    def test_living_cells_and_bounding_box(self):
        """Test listing living cells and their bounding box."""
        grid = Grid(10, 10)
        assert grid.living_cells() == []
        assert grid.get_bounding_box() is None

        grid.set_cell(7, 2, True)
        grid.set_cell(3, 8, True)

        assert grid.living_cells() == [(3, 8), (7, 2)]
        assert grid.get_bounding_box() == (3, 2, 7, 8)

    def test_str(self):
        """Test string representation is row-major."""
        grid = Grid(3, 2)
        grid.set_cell(2, 0, True)
        grid.set_cell(0, 1, True)

        assert str(grid) == "..#\n#.."
