"""Deterministic rule validation for generated puzzles."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..core.constants import ALPHABET, Bounds
from ..core.exceptions import ValidationError
from .generator import GenerationResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a finished puzzle."""

    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet = alphabet

    def validate(self, result: GenerationResult) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_shape(result)
            self._check_letters(result)
            self._check_paths(result)
            self._check_overlaps(result)
            self._check_word_origin(result)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_shape(self, result: GenerationResult) -> None:
        size = result.size
        if size == 0:
            raise ValidationError("Grid has no rows")
        for r, row in enumerate(result.grid):
            if len(row) != size:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {size}")

    def _check_letters(self, result: GenerationResult) -> None:
        # Characters outside the alphabet may only come from placed words.
        answer_cells = result.answer_cells()
        for r, row in enumerate(result.grid):
            for c, letter in enumerate(row):
                if not letter or len(letter) != 1:
                    raise ValidationError(f"Cell ({r},{c}) is not a single letter: {letter!r}")
                if letter not in self.alphabet and (r, c) not in answer_cells:
                    raise ValidationError(f"Invalid letter {letter!r} at ({r},{c})")

    def _check_paths(self, result: GenerationResult) -> None:
        bounds = Bounds(rows=result.size, cols=result.size)
        for placement in result.placed:
            # Paths are straight lines, so both ends inside means all inside.
            for r, c in (placement.start, placement.end):
                if not bounds.contains(r, c):
                    raise ValidationError(
                        f"Word {placement.word!r} leaves the grid at ({r},{c})"
                    )
            if result.read(placement) != placement.word:
                raise ValidationError(
                    f"Grid reads {result.read(placement)!r} where {placement.word!r} was placed"
                )

    def _check_overlaps(self, result: GenerationResult) -> None:
        claimed: Dict[Tuple[int, int], str] = {}
        for placement in result.placed:
            for index, cell in enumerate(placement.path):
                letter = placement.word[index]
                previous = claimed.setdefault(cell, letter)
                if previous != letter:
                    raise ValidationError(
                        f"Conflicting letters {previous!r}/{letter!r} at {cell}"
                    )

    def _check_word_origin(self, result: GenerationResult) -> None:
        if len(result.placed) > len(result.words):
            raise ValidationError(
                f"{len(result.placed)} placements for {len(result.words)} requested words"
            )
        available = Counter(result.words)
        for word in result.placed_words:
            if available[word] <= 0:
                raise ValidationError(f"Placed word {word!r} was not requested")
            available[word] -= 1
