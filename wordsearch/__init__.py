"""Word-search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.WordSearchGenerator``: places words and fills noise.
- ``wordsearch.engine.generator.generate``: one-call convenience wrapper.
- ``wordsearch.engine.validator.GridValidator``: integrity checks for results.
- ``wordsearch.data.normalization`` helpers: turn raw word lists into input.
"""

from .core.constants import Direction
from .core.exceptions import InvalidGridSizeError, WordSearchError
from .core.models import WordPlacement
from .engine.generator import GenerationResult, GeneratorConfig, WordSearchGenerator, generate
from .engine.validator import GridValidator

__all__ = [
    "Direction",
    "GenerationResult",
    "GeneratorConfig",
    "GridValidator",
    "InvalidGridSizeError",
    "WordPlacement",
    "WordSearchError",
    "WordSearchGenerator",
    "generate",
]

__version__ = "0.1.0"
