"""Mapping of raw key names to logical directions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_snake.snake import Direction

if TYPE_CHECKING:
    from tick_snake.engine import GameState

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Return the direction bound to *key*, or None if it is unbound."""
    return KEY_BINDINGS.get(key.strip().lower())


def dispatch_key(state: GameState, key: str) -> Direction | None:
    """Forward a key press to *state*. Unbound keys are ignored.

    Returns the pending heading after the press, or None if the key was
    unbound.
    """
    direction = direction_for_key(key)
    if direction is None:
        logger.debug("Ignoring unbound key %r.", key)
        return None
    return state.press(direction)
