"""Pretty-print helpers for word-search puzzles."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult


HIDDEN = "."


def format_grid(grid, *, mask=None) -> str:
    """Render rows of letters with row/column headers.

    ``mask`` is an optional ``(row, col) -> bool`` predicate; cells for which it
    returns False are shown as ``.``.
    """

    width = len(grid[0]) if grid else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid):
        symbols = [
            letter if mask is None or mask(r, c) else HIDDEN
            for c, letter in enumerate(row)
        ]
        row_render = " ".join(f"{symbol:>2}" for symbol in symbols)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_answer_key(result: GenerationResult) -> str:
    return format_grid(result.grid, mask=result.is_answer_cell)


def format_word_list(result: GenerationResult, columns: int = 3) -> str:
    words = result.placed_words
    if not words:
        return ""
    width = max(len(w) for w in words) + 2
    lines = []
    for start in range(0, len(words), columns):
        chunk = words[start:start + columns]
        lines.append("".join(f"{w:<{width}}" for w in chunk).rstrip())
    return "\n".join(lines)


def shortfall_message(result: GenerationResult) -> Optional[str]:
    """User-facing warning when some requested words did not fit."""

    if result.all_placed:
        return None
    return (
        f"Could not fit all words. Placed {len(result.placed)} of {len(result.words)}. "
        "Try fewer or shorter words."
    )


def print_puzzle_stats(result: GenerationResult, *, stream=None) -> None:
    """Print placement stats for a completed puzzle."""

    stream = stream or sys.stdout
    total_cells = result.size * result.size
    answer_cells = len(result.answer_cells())
    letter_cells = sum(len(p.word) for p in result.placed)
    directions = Counter(p.direction.value for p in result.placed)

    print("--- Puzzle ---", file=stream)
    print(f"  Size:          {result.size} x {result.size} ({total_cells} cells)", file=stream)
    print(f"  Placed words:  {len(result.placed)}/{len(result.words)}", file=stream)
    if total_cells:
        print(f"  Answer cells:  {answer_cells} ({answer_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Shared cells:  {letter_cells - answer_cells}", file=stream)
    if directions:
        dist_parts = [f"{d}:{n}" for d, n in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
    unplaced = result.unplaced_words
    if unplaced:
        print(f"  Unplaced:      {', '.join(unplaced)}", file=stream)
    if result.seed is not None:
        print(f"  Seed:          {result.seed}", file=stream)
