"""Tests for the render collaborators."""

import io

from tick_snake.grid import CellType, GridCoordinate, Playfield
from tick_snake.render import (
    GlyphCache,
    RecordingRenderer,
    RenderSnapshot,
    TextRenderer,
)
from tick_snake.score import score_label
from tick_snake.snake import ColorTag


def _snapshot(score=2):
    return RenderSnapshot(
        body=(
            (GridCoordinate(1, 1), ColorTag.NORMAL),
            (GridCoordinate(0, 1), ColorTag.GREW),
        ),
        food=GridCoordinate(3, 2),
        score=score,
    )


class TestRenderSnapshot:
    def test_cells_order(self):
        cells = list(_snapshot().cells())
        assert cells == [
            (GridCoordinate(3, 2), CellType.FOOD),
            (GridCoordinate(1, 1), CellType.BODY),
            (GridCoordinate(0, 1), CellType.MARKER),
        ]


class TestTextRenderer:
    def test_frame(self):
        field = Playfield(width=100, height=60, cell_size=20)
        renderer = TextRenderer(field, io.StringIO())
        assert renderer.frame(_snapshot()).splitlines() == [
            "Points: 2",
            ".....",
            "*o...",
            "...@.",
        ]

    def test_draw_writes_to_stream(self):
        stream = io.StringIO()
        renderer = TextRenderer(Playfield(width=100, height=60, cell_size=20), stream)
        renderer.draw(_snapshot(score=7))
        renderer.draw(_snapshot(score=8))
        out = stream.getvalue()
        assert "Points: 7" in out
        assert "Points: 8" in out
        assert renderer.frames == 2

    def test_header_uses_score_label(self):
        field = Playfield(width=400, height=60, cell_size=20)
        header = TextRenderer(field, io.StringIO()).frame(_snapshot(score=12))
        assert header.splitlines()[0] == score_label(12).rjust(20)

    def test_injected_glyphs(self):
        glyphs = GlyphCache()
        glyphs.glyphs[CellType.EMPTY] = " "
        renderer = TextRenderer(
            Playfield(width=100, height=60, cell_size=20), io.StringIO(), glyphs,
        )
        assert renderer.glyphs is glyphs
        lines = renderer.frame(_snapshot()).splitlines()
        assert lines[1] == "     "


class TestRecordingRenderer:
    def test_records(self):
        recorder = RecordingRenderer()
        assert recorder.last is None
        recorder.draw(_snapshot())
        assert recorder.last == _snapshot()
