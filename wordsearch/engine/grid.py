"""Letter grid representation and placement helpers."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, EMPTY, Bounds, Direction
from ..core.exceptions import InvalidGridSizeError, PlacementError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Coordinate = Tuple[int, int]


class LetterGrid:
    """Square grid of single letters with an explicit empty marker."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise InvalidGridSizeError(f"Grid size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[Optional[str]]] = [
            [EMPTY for _ in range(size)] for _ in range(size)
        ]
        self._filled_count = 0

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Optional[str]:
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] is EMPTY

    def empty_cells(self) -> List[Coordinate]:
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] is EMPTY
        ]

    @property
    def is_filled(self) -> bool:
        return self._filled_count == self.size * self.size

    @property
    def filled_ratio(self) -> float:
        return self._filled_count / (self.size * self.size)

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def path_for(self, length: int, row: int, col: int, direction: Direction) -> List[Coordinate]:
        dr, dc = direction.delta
        return [(row + dr * i, col + dc * i) for i in range(length)]

    def fits(self, length: int, row: int, col: int, direction: Direction) -> bool:
        """Whether a run of ``length`` cells stays inside the grid."""

        if length <= 0:
            return False
        dr, dc = direction.delta
        end_row = row + dr * (length - 1)
        end_col = col + dc * (length - 1)
        return self.bounds.contains(row, col) and self.bounds.contains(end_row, end_col)

    def start_cells(self, length: int, direction: Direction) -> Tuple[range, range]:
        """Row and column ranges of every start where the run fits."""

        dr, dc = direction.delta
        return (
            self.bounds.start_range(length, dr, self.bounds.rows),
            self.bounds.start_range(length, dc, self.bounds.cols),
        )

    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """A word can go here if every target cell is empty or already matches."""

        if not self.fits(len(word), row, col, direction):
            return False
        for index, (r, c) in enumerate(self.path_for(len(word), row, col, direction)):
            existing = self.cells[r][c]
            if existing is not EMPTY and existing != word[index]:
                return False
        return True

    def place_word(self, word: str, row: int, col: int, direction: Direction) -> List[Coordinate]:
        """Write ``word`` along ``direction`` and return its path.

        The grid is left untouched when the word does not fit or collides with
        a different letter.
        """

        if not self.fits(len(word), row, col, direction):
            raise PlacementError(
                f"Word {word!r} extends outside grid from {(row, col)} going {direction.value}"
            )
        path = self.path_for(len(word), row, col, direction)
        for index, (r, c) in enumerate(path):
            existing = self.cells[r][c]
            if existing is not EMPTY and existing != word[index]:
                raise PlacementError(
                    f"Letter conflict at {(r, c)}: {existing!r} vs {word[index]!r}"
                )

        # All checks passed, mutate grid
        for index, (r, c) in enumerate(path):
            if self.cells[r][c] is EMPTY:
                self._filled_count += 1
            self.cells[r][c] = word[index]
        return path

    def read_path(self, path: Iterable[Coordinate]) -> str:
        return "".join(self.cells[r][c] or "" for r, c in path)

    # ------------------------------------------------------------------
    # Noise fill
    # ------------------------------------------------------------------
    def fill_noise(self, rng: random.Random, alphabet: Sequence[str] = ALPHABET) -> int:
        """Fill every empty cell with a random letter and return how many were filled."""

        if not alphabet:
            raise ValueError("Noise alphabet must not be empty")
        filled = 0
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] is EMPTY:
                    self.cells[r][c] = rng.choice(alphabet)
                    filled += 1
        self._filled_count += filled
        LOGGER.debug("Noise filled %s cells", filled)
        return filled

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def rows(self) -> List[List[str]]:
        """Return a row-major copy of the letters."""

        return [[letter or "" for letter in row] for row in self.cells]

    def to_jsonable(self) -> List[str]:
        return ["".join(row) for row in self.rows()]
