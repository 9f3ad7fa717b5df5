"""Tick orchestrator composing snake, food, and score."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from tick_snake.config import GameConfig
from tick_snake.food import Food
from tick_snake.render import RenderSnapshot
from tick_snake.score import Score
from tick_snake.snake import ColorTag, Direction, Snake, propose_heading

logger = logging.getLogger(__name__)

# Where growth inserts the new segment: directly behind the head.
GROWTH_INDEX = 1


class GameState:
    """Single-snake, tick-based game state.

    The state owns the snake, the food, and the score and is the only thing
    that mutates them. Input only changes the pending heading; each call to
    :meth:`tick` applies it, resolves food consumption, moves the snake, and
    notifies listeners with the post-tick snapshot.

    There is no wall or self collision and therefore no game over: the
    simulation runs until its driver stops calling :meth:`tick`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.playfield = self.config.playfield()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.snake = Snake.from_positions(
            self.config.initial_body, self.config.heading(),
        )
        self.food = Food.spawn(self.playfield, rng=self.rng)
        self.score = Score()

        self.ticks = 0
        self._pending_heading = self.snake.heading
        self._listeners: list[Callable[[RenderSnapshot], object]] = []

    @property
    def pending_heading(self) -> Direction:
        return self._pending_heading

    def press(self, direction: Direction) -> Direction:
        """Request a heading change for the next tick.

        The request is checked against the heading applied on the last tick,
        so any number of presses between ticks can never produce a reversal.
        Rejected requests leave the pending heading unchanged.
        """
        accepted = propose_heading(self.snake.heading, direction)
        if accepted is direction:
            self._pending_heading = accepted
        return self._pending_heading

    def add_listener(self, listener: Callable[[RenderSnapshot], object]) -> None:
        """Register a callback that receives the snapshot after each tick."""
        self._listeners.append(listener)

    def tick(self) -> RenderSnapshot:
        """Advance the game by one tick and return the new snapshot."""
        self.snake.heading = self._pending_heading

        # --- collision phase ---
        if self.food.check_consumption(self.snake.head):
            self.snake.grow_at(GROWTH_INDEX, ColorTag.GREW)
            self.food.respawn()
            self.score.record_consumption()
            logger.debug(
                "Food eaten at tick %d; score %d.", self.ticks, self.score.eaten,
            )

        # --- movement phase ---
        self.snake.advance()

        self.ticks += 1
        snapshot = self.snapshot()
        for listener in self._listeners:
            listener(snapshot)
        return snapshot

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(
            body=tuple((seg.position, seg.color) for seg in self.snake.body),
            food=self.food.position,
            score=self.score.eaten,
            tick=self.ticks,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state.

        ``self_collision`` and ``in_bounds`` are informational only; the game
        keeps running either way.
        """
        return {
            "tick": self.ticks,
            "score": self.score.eaten,
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
            "playfield": self.playfield.to_dict(),
            "self_collision": self.snake.self_collision(),
            "in_bounds": self.playfield.in_bounds(self.snake.head),
        }
