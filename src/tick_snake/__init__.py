"""tick-snake — fixed-rate snake simulation core."""

from tick_snake.clock import SimulationClock
from tick_snake.config import GameConfig
from tick_snake.engine import GameState
from tick_snake.food import Food
from tick_snake.grid import GridCoordinate, Playfield
from tick_snake.render import RenderSnapshot, TextRenderer
from tick_snake.score import Score
from tick_snake.snake import (
    BodySegment,
    ColorTag,
    Direction,
    InvariantViolation,
    Snake,
    propose_heading,
)

__all__ = [
    "BodySegment",
    "ColorTag",
    "Direction",
    "Food",
    "GameConfig",
    "GameState",
    "GridCoordinate",
    "InvariantViolation",
    "Playfield",
    "RenderSnapshot",
    "Score",
    "SimulationClock",
    "Snake",
    "TextRenderer",
    "propose_heading",
]
