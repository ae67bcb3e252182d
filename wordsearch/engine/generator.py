"""Word-search puzzle generation.

Greedy randomized placement:
  1. Place words longest first, each by a bounded number of random
     direction/start samples; the first sample that fits is committed.
  2. Fill every cell left empty with random noise letters.
"""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from ..core.constants import (ALL_DIRECTIONS, ALPHABET, DEFAULT_ATTEMPT_BUDGET,
                              DEFAULT_GRID_SIZE, Direction)
from ..core.exceptions import ConfigurationError, InvalidGridSizeError
from ..core.models import WordPlacement
from .grid import Coordinate, LetterGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    size: int = DEFAULT_GRID_SIZE
    attempt_budget: int = DEFAULT_ATTEMPT_BUDGET
    seed: Optional[int] = None
    alphabet: str = ALPHABET
    directions: Sequence[Direction] = ALL_DIRECTIONS

    def validate(self) -> None:
        if self.size <= 0:
            raise InvalidGridSizeError(f"Grid size must be positive, got {self.size}")
        if self.attempt_budget <= 0:
            raise ConfigurationError(
                f"Attempt budget must be positive, got {self.attempt_budget}"
            )
        if not self.alphabet:
            raise ConfigurationError("Noise alphabet must not be empty")
        if not self.directions:
            raise ConfigurationError("At least one direction is required")
        # rng.choice needs an indexable sequence
        self.directions = tuple(self.directions)


@dataclass(frozen=True)
class GenerationResult:
    grid: Tuple[Tuple[str, ...], ...]
    placed: Tuple[WordPlacement, ...]
    words: Tuple[str, ...]
    seed: Optional[int] = None
    _answer_cells: Optional[frozenset] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placed]

    @property
    def unplaced_words(self) -> List[str]:
        """Requested words with no placement, in the caller's order."""

        remaining = Counter(self.placed_words)
        missing: List[str] = []
        for word in self.words:
            if remaining[word] > 0:
                remaining[word] -= 1
            else:
                missing.append(word)
        return missing

    @property
    def all_placed(self) -> bool:
        return len(self.placed) == len(self.words)

    def answer_cells(self) -> Set[Coordinate]:
        if self._answer_cells is None:
            cells = frozenset(cell for placement in self.placed for cell in placement.path)
            object.__setattr__(self, "_answer_cells", cells)
        return set(self._answer_cells)

    def is_answer_cell(self, row: int, col: int) -> bool:
        if self._answer_cells is None:
            self.answer_cells()
        return (row, col) in self._answer_cells

    def placement_for(self, word: str) -> Optional[WordPlacement]:
        for placement in self.placed:
            if placement.word == word:
                return placement
        return None

    def read(self, placement: WordPlacement) -> str:
        return "".join(self.grid[r][c] for r, c in placement.path)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "seed": self.seed,
            "grid": ["".join(row) for row in self.grid],
            "placements": [placement.to_jsonable() for placement in self.placed],
            "unplaced": self.unplaced_words,
        }


class WordSearchGenerator:
    """Builds word-search grids from a list of words."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.config.validate()
        self.rng = rng or random.Random(self.config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str], size: Optional[int] = None) -> GenerationResult:
        size = self.config.size if size is None else size
        if size <= 0:
            raise InvalidGridSizeError(f"Grid size must be positive, got {size}")

        requested = tuple(words)
        grid = LetterGrid(size)
        placed: List[WordPlacement] = []

        # Longest first; sorted() keeps caller order among equal lengths.
        for word in sorted(requested, key=len, reverse=True):
            placement = self._place(grid, word)
            if placement is not None:
                placed.append(placement)

        grid.fill_noise(self.rng, self.config.alphabet)

        LOGGER.info("Placed %s/%s words in %sx%s grid", len(placed), len(requested), size, size)
        result = GenerationResult(
            grid=tuple(tuple(row) for row in grid.rows()),
            placed=tuple(placed),
            words=requested,
            seed=self.config.seed,
        )
        if not result.all_placed:
            LOGGER.warning("Could not place: %s", ", ".join(result.unplaced_words))
        return result

    # ------------------------------------------------------------------
    # Placement search
    # ------------------------------------------------------------------
    def _place(self, grid: LetterGrid, word: str) -> Optional[WordPlacement]:
        if not word:
            LOGGER.debug("Skipping empty word")
            return None

        for attempt in range(1, self.config.attempt_budget + 1):
            candidate = self._sample_start(grid, word)
            if candidate is None:
                continue
            row, col, direction = candidate
            if not grid.can_place(word, row, col, direction):
                continue
            grid.place_word(word, row, col, direction)
            LOGGER.debug(
                "Placed %s at (%s,%s) going %s after %s attempt(s)",
                word,
                row,
                col,
                direction.value,
                attempt,
            )
            return WordPlacement(word=word, start_row=row, start_col=col, direction=direction)

        LOGGER.debug(
            "Gave up on %s after %s attempts", word, self.config.attempt_budget
        )
        return None

    def _sample_start(
        self, grid: LetterGrid, word: str
    ) -> Optional[Tuple[int, int, Direction]]:
        """Pick a random direction and a random in-bounds start for it."""

        direction = self.rng.choice(self.config.directions)
        rows, cols = grid.start_cells(len(word), direction)
        if not rows or not cols:
            return None
        return self.rng.choice(rows), self.rng.choice(cols), direction


def generate(
    words: Sequence[str],
    size: int = DEFAULT_GRID_SIZE,
    rng: Optional[random.Random] = None,
    attempt_budget: int = DEFAULT_ATTEMPT_BUDGET,
) -> GenerationResult:
    """Generate a puzzle in one call with an optional injected random source."""

    if size <= 0:
        raise InvalidGridSizeError(f"Grid size must be positive, got {size}")
    config = GeneratorConfig(size=size, attempt_budget=attempt_budget)
    return WordSearchGenerator(config, rng=rng).generate(words)
