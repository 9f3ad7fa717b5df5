"""Grid coordinates and the playfield they are drawn on."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class GridCoordinate(NamedTuple):
    """Integer (x, y) cell address. ``y`` grows downwards."""

    x: int
    y: int

    def __add__(self, delta: tuple[int, int]) -> GridCoordinate:  # type: ignore[override]
        dx, dy = delta
        return GridCoordinate(self.x + dx, self.y + dy)


class CellType(enum.IntEnum):
    """Integer codes stored in a rasterized playfield."""

    EMPTY = 0
    BODY = 1
    MARKER = 2
    FOOD = 3


class Playfield:
    """Pixel viewport divided into square cells.

    The simulation never clamps coordinates to the playfield; it is only
    used to place food and to map cells to pixels for drawing.
    """

    def __init__(
        self,
        width: int = 800,
        height: int = 800,
        cell_size: int = 20,
    ) -> None:
        if cell_size < 1:
            raise ValueError("Cell size must be at least 1.")
        if width < cell_size * 2 or height < cell_size * 2:
            raise ValueError("Playfield must be at least 2×2 cells.")
        self.width = width
        self.height = height
        self.cell_size = cell_size

    @property
    def columns(self) -> int:
        return self.width // self.cell_size

    @property
    def rows(self) -> int:
        return self.height // self.cell_size

    @property
    def bounds(self) -> tuple[int, int]:
        """Return the viewport size in pixels as ``(width, height)``."""
        return self.width, self.height

    def in_bounds(self, coord: GridCoordinate) -> bool:
        """Check whether a cell lies inside the visible area."""
        return 0 <= coord.x < self.columns and 0 <= coord.y < self.rows

    def raster(
        self, cells: Iterable[tuple[GridCoordinate, CellType]],
    ) -> np.ndarray:
        """Paint cells into a ``(rows, columns)`` array.

        Later entries overwrite earlier ones. Cells outside the visible
        area are skipped.
        """
        grid = np.zeros((self.rows, self.columns), dtype=np.int8)
        for coord, cell_type in cells:
            if self.in_bounds(coord):
                grid[coord.y, coord.x] = cell_type
        return grid

    def to_dict(self) -> dict:
        """Serialize playfield dimensions to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cell_size": self.cell_size,
            "columns": self.columns,
            "rows": self.rows,
        }
