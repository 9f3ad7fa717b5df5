"""Tests for the Score module."""

import pytest

from tick_snake.score import Score, score_label


class TestScore:
    def test_starts_at_zero(self):
        assert Score().eaten == 0

    def test_record_consumption(self):
        score = Score()
        assert score.record_consumption() == 1
        assert score.record_consumption() == 2
        assert score.eaten == 2

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            Score(-1)

    def test_label(self):
        assert score_label(3) == "Points: 3"
