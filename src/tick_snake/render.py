"""Render collaborator interface and text-mode renderers.

The simulation hands a :class:`RenderSnapshot` to every renderer once per
tick, after movement. Renderers own whatever drawing resources they need;
nothing here is process-global.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TextIO

from tick_snake.grid import CellType, GridCoordinate, Playfield
from tick_snake.score import score_label
from tick_snake.snake import ColorTag

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class RenderSnapshot:
    """Post-tick view of the game, safe to keep after the next tick."""

    body: tuple[tuple[GridCoordinate, ColorTag], ...]
    food: GridCoordinate
    score: int
    tick: int = 0

    def cells(self) -> Iterator[tuple[GridCoordinate, CellType]]:
        """Yield drawable cells, food first, then the body head to tail."""
        yield self.food, CellType.FOOD
        for position, color in self.body:
            kind = CellType.MARKER if color is ColorTag.GREW else CellType.BODY
            yield position, kind


class Renderer(Protocol):
    def draw(self, snapshot: RenderSnapshot) -> None: ...


@dataclass
class GlyphCache:
    """Character set used to draw cells and text.

    Created once by the caller and handed to a renderer, which keeps it for
    its lifetime.
    """

    glyphs: dict[CellType, str] = field(default_factory=lambda: {
        CellType.EMPTY: ".",
        CellType.BODY: "o",
        CellType.MARKER: "*",
        CellType.FOOD: "@",
    })

    def glyph(self, cell_type: int) -> str:
        return self.glyphs[CellType(int(cell_type))]


class TextRenderer:
    """Draws snapshots as character rasters to a text stream."""

    def __init__(
        self,
        playfield: Playfield,
        stream: TextIO | None = None,
        glyphs: GlyphCache | None = None,
    ) -> None:
        self.playfield = playfield
        self.stream = stream if stream is not None else sys.stdout
        self.glyphs = glyphs if glyphs is not None else GlyphCache()
        self.frames = 0

    def frame(self, snapshot: RenderSnapshot) -> str:
        """Return the text for one frame without writing it."""
        grid = self.playfield.raster(snapshot.cells())
        lines = [
            "".join(self.glyphs.glyph(cell) for cell in row) for row in grid
        ]
        header = score_label(snapshot.score).rjust(self.playfield.columns)
        return "\n".join([header, *lines])

    def draw(self, snapshot: RenderSnapshot) -> None:
        self.stream.write(self.frame(snapshot) + "\n\n")
        self.stream.flush()
        self.frames += 1


class RecordingRenderer:
    """Keeps every snapshot it is given."""

    def __init__(self) -> None:
        self.snapshots: list[RenderSnapshot] = []

    def draw(self, snapshot: RenderSnapshot) -> None:
        self.snapshots.append(snapshot)

    @property
    def last(self) -> RenderSnapshot | None:
        return self.snapshots[-1] if self.snapshots else None
