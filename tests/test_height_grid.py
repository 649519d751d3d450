"""Tests for the read-only height grid container."""

import numpy as np
import pytest

from py_terrain.core.height_grid import HeightGrid


class TestHeightGrid:

    @pytest.fixture
    def grid(self):
        return HeightGrid(width=3, height=2, offset_x=10, offset_y=20,
                          values=[0.0, 0.1, 0.2, 1.0, 1.1, 1.2])

    def test_row_major_layout(self, grid):
        assert len(grid) == 6
        assert grid.at(10, 20) == 0.0
        assert grid.at(12, 20) == 0.2
        assert grid.at(11, 21) == 1.1
        assert grid.index_of(12, 21) == 5
        assert list(grid) == [0.0, 0.1, 0.2, 1.0, 1.1, 1.2]

    def test_as_array(self, grid):
        array = grid.as_array()
        assert array.shape == (2, 3)
        assert array[1, 2] == 1.2

    def test_outside_window(self, grid):
        with pytest.raises(IndexError):
            grid.at(9, 20)
        with pytest.raises(IndexError):
            grid.at(10, 22)

    def test_values_are_read_only(self, grid):
        with pytest.raises(ValueError):
            grid.values[0] = 5.0
        with pytest.raises(ValueError):
            grid.as_array()[0, 0] = 5.0

    def test_source_array_is_copied(self):
        source = np.array([1.0, 2.0])
        grid = HeightGrid(width=2, height=1, values=source)
        source[0] = 9.0
        assert grid[0] == 1.0

    def test_wrong_value_count(self):
        with pytest.raises(ValueError):
            HeightGrid(width=2, height=2, values=[1.0, 2.0, 3.0])

    def test_empty_grid(self):
        grid = HeightGrid(width=0, height=4)
        assert len(grid) == 0
        assert grid.to_list() == []
        assert grid.as_array().shape == (4, 0)

    def test_equality_compares_values(self):
        first = HeightGrid(2, 1, values=[1.0, 2.0])

        assert first == HeightGrid(2, 1, values=[1.0, 2.0])
        assert first != HeightGrid(2, 1, values=[3.0, 4.0])
        assert first != HeightGrid(2, 1, offset_x=1, values=[1.0, 2.0])
        assert first != [1.0, 2.0]

    def test_grids_are_unhashable(self, grid):
        with pytest.raises(TypeError):
            hash(grid)

    def test_slicing(self, grid):
        row = grid[0:3]
        assert row.tolist() == [0.0, 0.1, 0.2]
        assert isinstance(grid[4], float)
        with pytest.raises(ValueError):
            row[0] = 9.0
