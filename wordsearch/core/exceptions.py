"""Custom exception hierarchy for word-search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordSearchError):
    """Raised when generator settings cannot produce a puzzle."""


class InvalidGridSizeError(ConfigurationError, ValueError):
    """Raised when the requested grid dimension is not positive."""


class PlacementError(WordSearchError):
    """Raised when a word cannot be written at the requested position."""


class ValidationError(WordSearchError):
    """Raised when the puzzle integrity checks fail."""
