"""Tests for the grid module."""

import numpy as np
import pytest

from tick_snake.grid import CellType, GridCoordinate, Playfield


class TestGridCoordinate:
    def test_translate(self):
        assert GridCoordinate(2, 3) + (1, -1) == GridCoordinate(3, 2)

    def test_negative_coordinates_allowed(self):
        assert GridCoordinate(0, 0) + (-1, 0) == (-1, 0)

    def test_hashable(self):
        assert len({GridCoordinate(1, 1), GridCoordinate(1, 1)}) == 1


class TestPlayfieldInit:
    def test_default_dimensions(self):
        field = Playfield()
        assert field.bounds == (800, 800)
        assert field.cell_size == 20
        assert field.columns == 40
        assert field.rows == 40

    def test_non_square(self):
        field = Playfield(width=100, height=60, cell_size=20)
        assert field.columns == 5
        assert field.rows == 3

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 2"):
            Playfield(width=20, height=100, cell_size=20)

    def test_cell_size_positive(self):
        with pytest.raises(ValueError, match="at least 1"):
            Playfield(cell_size=0)


class TestPlayfieldGeometry:
    def test_in_bounds(self):
        field = Playfield(width=100, height=100, cell_size=20)
        assert field.in_bounds(GridCoordinate(0, 0))
        assert field.in_bounds(GridCoordinate(4, 4))
        assert not field.in_bounds(GridCoordinate(5, 0))
        assert not field.in_bounds(GridCoordinate(-1, 0))


class TestPlayfieldRaster:
    def test_empty(self):
        field = Playfield(width=100, height=60, cell_size=20)
        grid = field.raster([])
        assert grid.shape == (3, 5)
        assert np.all(grid == CellType.EMPTY)

    def test_later_cells_overwrite(self):
        field = Playfield(width=100, height=60, cell_size=20)
        grid = field.raster([
            (GridCoordinate(1, 2), CellType.BODY),
            (GridCoordinate(1, 2), CellType.FOOD),
        ])
        assert grid[2, 1] == CellType.FOOD

    def test_off_field_cells_skipped(self):
        field = Playfield(width=100, height=60, cell_size=20)
        grid = field.raster([(GridCoordinate(-1, 0), CellType.BODY)])
        assert not grid.any()

    def test_to_dict(self):
        d = Playfield(width=100, height=60, cell_size=20).to_dict()
        assert d == {
            "width": 100, "height": 60, "cell_size": 20,
            "columns": 5, "rows": 3,
        }
