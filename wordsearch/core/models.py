"""Data models supporting the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class WordPlacement:
    """A word committed to the grid at a start cell and direction."""

    word: str
    start_row: int
    start_col: int
    direction: Direction
    _path: Optional[Tuple[Tuple[int, int], ...]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def start(self) -> Tuple[int, int]:
        return (self.start_row, self.start_col)

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def path(self) -> List[Tuple[int, int]]:
        if self._path is None:
            dr, dc = self.direction.delta
            cells = tuple(
                (self.start_row + dr * i, self.start_col + dc * i)
                for i in range(self.length)
            )
            object.__setattr__(self, "_path", cells)
        return list(self._path)

    @property
    def end(self) -> Tuple[int, int]:
        dr, dc = self.direction.delta
        steps = max(self.length - 1, 0)
        return (self.start_row + dr * steps, self.start_col + dc * steps)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "direction": self.direction.value,
            "start": [self.start_row, self.start_col],
            "path": [[r, c] for r, c in self.path],
        }
