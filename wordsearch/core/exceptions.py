"""Custom exception hierarchy for the word search game."""


class WordSearchError(Exception):
    """Base exception for game failures."""


class SourceUnavailable(WordSearchError):
    """Raised when the word source file cannot be opened."""


class SourceWriteError(WordSearchError):
    """Raised when the score file cannot be opened for writing."""


class AllocationFailure(WordSearchError):
    """Raised when a grid cannot be allocated at the requested size."""
