"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, replace

from tick_snake.grid import GridCoordinate


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) unit vectors in screen space."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def propose_heading(current: Direction, requested: Direction) -> Direction:
    """Return *requested* unless it reverses *current*."""
    if requested is _OPPOSITES[current]:
        return current
    return requested


class ColorTag(enum.Enum):
    """Color class of a body segment."""

    NORMAL = "normal"
    GREW = "grew"


class InvariantViolation(RuntimeError):
    """Raised when the snake reaches a state that should be impossible."""


@dataclass(frozen=True)
class BodySegment:
    position: GridCoordinate
    color: ColorTag = ColorTag.NORMAL


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Growth inserts a
    marked segment right behind the head; the marker stays visible for one
    tick and is cleared by the following :meth:`advance`.
    """

    def __init__(
        self,
        body: Iterable[BodySegment],
        heading: Direction = Direction.RIGHT,
    ) -> None:
        self.body: deque[BodySegment] = deque(body)
        if not self.body:
            raise ValueError("Snake body must have at least 1 segment.")
        self.heading = heading
        # Indices of markers inserted since the last advance.
        self._fresh: set[int] = set()

    @classmethod
    def from_positions(
        cls,
        positions: Iterable[tuple[int, int]],
        heading: Direction = Direction.RIGHT,
    ) -> Snake:
        """Build a snake with normal-colored segments, head first."""
        return cls(
            (BodySegment(GridCoordinate(*p)) for p in positions), heading,
        )

    @property
    def head(self) -> GridCoordinate:
        """Return the head coordinate."""
        if not self.body:
            raise InvariantViolation("Snake has no body.")
        return self.body[0].position

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self) -> GridCoordinate:
        """Compute the next head position without moving."""
        return self.head + self.heading.value

    def advance(self) -> GridCoordinate:
        """Move the snake one cell along its heading.

        Returns the vacated tail cell.
        """
        if not self.body:
            raise InvariantViolation("Snake has no body.")

        self._decay_markers()
        new_head = self.next_head()
        self.body.appendleft(BodySegment(new_head))
        return self.body.pop().position

    def grow_at(self, index: int, marker_color: ColorTag) -> None:
        """Insert a marked segment at *index* without dropping the tail.

        The new segment copies the position of the segment in front of it.
        The length grows by one at once, but the two segments share a cell
        until the duplicate leaves through the tail, about ``len(body)``
        ticks later; only then does the snake cover one more cell.
        """
        if not self.body:
            raise InvariantViolation("Snake has no body.")

        index = min(max(index, 1), len(self.body))
        position = self.body[index - 1].position
        self.body.insert(index, BodySegment(position, marker_color))
        self._fresh = {i + 1 if i >= index else i for i in self._fresh}
        self._fresh.add(index)

    def _decay_markers(self) -> None:
        """Clear markers that have already been shown for a tick."""
        for i, segment in enumerate(self.body):
            if segment.color is not ColorTag.NORMAL and i not in self._fresh:
                self.body[i] = replace(segment, color=ColorTag.NORMAL)
        self._fresh.clear()

    def positions(self) -> list[GridCoordinate]:
        return [segment.position for segment in self.body]

    def occupies(self, coord: GridCoordinate) -> bool:
        """Check whether any segment sits on a given cell."""
        return any(segment.position == coord for segment in self.body)

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg.position == head for seg in list(self.body)[1:])

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [
                [seg.position.x, seg.position.y, seg.color.value]
                for seg in self.body
            ],
            "heading": self.heading.name.lower(),
        }
