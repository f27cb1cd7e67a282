"""
Tests for minimax_engine.core.types

Tests score bounds and the fixed-capacity MoveBuffer.
"""

import pytest

from minimax_engine.core.types import (
    DRAW_SCORE,
    LOSS_SCORE,
    SCORE_MAX,
    SCORE_MIN,
    WIN_SCORE,
    MoveBuffer,
    in_score_range,
)


class TestConstants:
    """Tests for module constants."""

    def test_sentinels(self):
        assert SCORE_MIN == -32000
        assert SCORE_MAX == 32000

    def test_game_scores_inside_sentinels(self):
        for score in (WIN_SCORE, LOSS_SCORE, DRAW_SCORE):
            assert in_score_range(score)

    def test_sentinels_not_in_range(self):
        assert not in_score_range(SCORE_MIN)
        assert not in_score_range(SCORE_MAX)


class TestMoveBuffer:
    """MoveBuffer functionality tests."""

    def test_starts_empty(self):
        buffer = MoveBuffer(4)
        assert buffer.capacity == 4
        assert len(buffer) == 0
        assert list(buffer) == []

    def test_indexed_writes_need_count(self):
        """Only the first `count` slots are visible."""
        buffer = MoveBuffer(4)
        buffer[0] = "a"
        buffer[1] = "b"
        assert list(buffer) == []
        buffer.count = 2
        assert list(buffer) == ["a", "b"]
        assert buffer[1] == "b"
        with pytest.raises(IndexError):
            buffer[2]

    def test_append_and_clear(self):
        buffer = MoveBuffer(2)
        buffer.append((0, 0))
        buffer.append((1, 1))
        assert list(buffer) == [(0, 0), (1, 1)]
        buffer.clear()
        assert len(buffer) == 0
        buffer.append(5)
        assert buffer[0] == 5

    def test_overflow_raises(self):
        buffer = MoveBuffer(2)
        buffer.append(1)
        buffer.append(2)
        with pytest.raises(IndexError):
            buffer.append(3)
        with pytest.raises(IndexError):
            buffer[2] = 3

    def test_negative_index_rejected(self):
        with pytest.raises(IndexError):
            MoveBuffer(2)[-1] = 0

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_bad_capacity(self, capacity):
        with pytest.raises(ValueError):
            MoveBuffer(capacity)

    def test_slots_reused(self):
        """Clearing keeps the preallocated slots."""
        buffer = MoveBuffer(3)
        slots = buffer._slots
        buffer.append(1)
        buffer.clear()
        assert buffer._slots is slots
