"""Food placement and consumption logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from tick_snake.grid import GridCoordinate

if TYPE_CHECKING:
    from tick_snake.grid import Playfield

logger = logging.getLogger(__name__)


class Food:
    """The single active pickup.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Food is never removed; consuming it relocates it.
    """

    def __init__(
        self,
        position: GridCoordinate,
        playfield: Playfield,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.position = GridCoordinate(*position)
        self.playfield = playfield
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def spawn(
        cls,
        playfield: Playfield,
        rng: np.random.Generator | None = None,
    ) -> Food:
        """Create food at a random cell of *playfield*."""
        rng = rng if rng is not None else np.random.default_rng()
        food = cls(GridCoordinate(1, 1), playfield, rng)
        food.respawn()
        return food

    def check_consumption(self, head: GridCoordinate) -> bool:
        """Return True if *head* sits on the food."""
        return head == self.position

    def respawn(self, bounds: tuple[int, int] | None = None) -> GridCoordinate:
        """Move the food to a random cell and return the new position.

        Cells are drawn uniformly from ``[1, width // cell) x
        [1, height // cell)``; column and row 0 are never used. The snake
        body is not avoided.
        """
        width, height = bounds if bounds is not None else self.playfield.bounds
        cell = self.playfield.cell_size
        columns, rows = width // cell, height // cell
        if columns < 2 or rows < 2:
            raise ValueError("Bounds must span at least 2×2 cells.")

        x = int(self.rng.integers(1, columns))
        y = int(self.rng.integers(1, rows))
        self.position = GridCoordinate(x, y)
        logger.debug("Food respawned at (%d, %d).", x, y)
        return self.position

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {"position": [self.position.x, self.position.y]}
