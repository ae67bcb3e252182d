"""Shared constants and enumerations for the word-search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


DEFAULT_GRID_SIZE = 15
DEFAULT_ATTEMPT_BUDGET = 100
ALPHABET = string.ascii_uppercase

# Marker for a cell that has not received a letter yet.
EMPTY: Optional[str] = None


class Direction(str, Enum):
    """The eight compass directions a word may run in."""

    RIGHT = "RIGHT"
    LEFT = "LEFT"
    DOWN = "DOWN"
    UP = "UP"
    DOWN_RIGHT = "DOWN_RIGHT"
    DOWN_LEFT = "DOWN_LEFT"
    UP_RIGHT = "UP_RIGHT"
    UP_LEFT = "UP_LEFT"

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]


DIRECTION_STEPS = {
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
    Direction.UP: (-1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.DOWN_LEFT: (1, -1),
    Direction.UP_RIGHT: (-1, 1),
    Direction.UP_LEFT: (-1, -1),
}

ALL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def start_range(self, length: int, step: int, extent: int) -> range:
        """Valid start indices on one axis for a run of ``length`` cells.

        ``step`` is the per-letter delta on that axis and ``extent`` the axis
        size. Returns an empty range when the run cannot fit.
        """

        span = (length - 1) * step
        low = max(0, -span)
        high = min(extent, extent - span)
        return range(low, high)
