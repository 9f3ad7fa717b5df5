"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from tick_snake.grid import Playfield
from tick_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Fixed game geometry and timing.

    Supports JSON serialization for reproducibility.
    """

    # Viewport
    window_width: int = 800
    window_height: int = 800
    cell_size: int = 20

    # Timing
    ticks_per_second: float = 8.0

    # Initial snake, head first
    initial_body: tuple[tuple[int, int], ...] = ((0, 0), (0, 1))
    initial_heading: str = "right"

    # Food placement
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.ticks_per_second <= 0:
            raise ValueError("ticks_per_second must be positive.")
        if not self.initial_body:
            raise ValueError("initial_body must have at least 1 segment.")
        if self.initial_heading.upper() not in Direction.__members__:
            raise ValueError(
                f"Unknown initial_heading {self.initial_heading!r}.",
            )
        # Validates viewport dimensions.
        self.playfield()

    def playfield(self) -> Playfield:
        return Playfield(self.window_width, self.window_height, self.cell_size)

    def heading(self) -> Direction:
        return Direction[self.initial_heading.upper()]

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        raw = dict(raw)
        if "initial_body" in raw:
            raw["initial_body"] = tuple(tuple(p) for p in raw["initial_body"])
        return cls(**raw)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
