"""Score bookkeeping."""

from __future__ import annotations


def score_label(eaten: int) -> str:
    """Return the on-screen score text."""
    return f"Points: {eaten}"


class Score:
    """Count of food consumed. Only ever increases."""

    def __init__(self, eaten: int = 0) -> None:
        if eaten < 0:
            raise ValueError("Score must be non-negative.")
        self.eaten = eaten

    def record_consumption(self) -> int:
        self.eaten += 1
        return self.eaten
