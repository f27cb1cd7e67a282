"""
Core types - score bounds and the fixed-capacity move buffer.

Scores are plain ints. The engine uses SCORE_MIN / SCORE_MAX as
"negative / positive infinity" when opening an alpha-beta window, so every
evaluation must land strictly inside that range.
"""

from __future__ import annotations

from typing import Any, Iterator, List


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

SCORE_MIN = -32000
SCORE_MAX = 32000

# Terminal values used by the bundled games (absolute, maximizing side's view)
WIN_SCORE = 10000
LOSS_SCORE = -WIN_SCORE
DRAW_SCORE = 0


def in_score_range(score: int) -> bool:
    """True if score is distinguishable from the sentinels."""
    return SCORE_MIN < score < SCORE_MAX


# ---------------------------------------------------------------------------
# Move buffer
# ---------------------------------------------------------------------------

class MoveBuffer:
    """
    Fixed-capacity move storage with a separately tracked logical length.

    Slots are allocated once; games write into them by index and the
    engine reads back only the first `count` entries. Writing past
    capacity raises IndexError.
    """

    __slots__ = ('_slots', 'capacity', 'count')

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"MoveBuffer capacity must be >= 1, got {capacity}")
        self._slots: List[Any] = [None] * capacity
        self.capacity = capacity
        self.count = 0

    def __setitem__(self, index: int, move: Any) -> None:
        if index < 0:
            raise IndexError(f"negative move index {index}")
        self._slots[index] = move

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < self.count:
            raise IndexError(f"move index {index} out of range (count={self.count})")
        return self._slots[index]

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Any]:
        slots = self._slots
        for i in range(self.count):
            yield slots[i]

    def append(self, move: Any) -> None:
        """Write move at the next free slot and bump count."""
        if self.count >= self.capacity:
            raise IndexError(f"MoveBuffer full (capacity={self.capacity})")
        self._slots[self.count] = move
        self.count += 1

    def clear(self) -> None:
        """Reset logical length. Slots are kept, not reallocated."""
        self.count = 0

    def __repr__(self) -> str:
        return f"MoveBuffer({list(self)!r}, capacity={self.capacity})"
