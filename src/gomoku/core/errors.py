"""Exception hierarchy for the gomoku core.

Every error here is recoverable: callers reject the request and the game
stays in a valid state.
"""

from __future__ import annotations


class GomokuError(Exception):
    """Base class for all gomoku errors."""


class OutOfBoundsError(GomokuError, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"({row}, {col}) is outside the board")
        self.row = row
        self.col = col


class InvalidMoveError(GomokuError, ValueError):
    """Occupied cell, wrong turn, or a finished game."""


class MalformedSnapshotError(GomokuError, ValueError):
    """Persisted game data could not be decoded."""


class StorageError(GomokuError, OSError):
    """The key-value store failed to read or write."""
