"""Core enumerations for the gomoku domain."""

from __future__ import annotations

from enum import IntEnum


class Cell(IntEnum):
    """State of a single intersection.

    The two non-empty members double as the *side* of a player:
    BLACK always moves first.
    """

    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> Cell:
        if self is Cell.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Cell.WHITE if self is Cell.BLACK else Cell.BLACK

    @property
    def is_side(self) -> bool:
        return self is not Cell.EMPTY

    def __str__(self) -> str:
        return self.name.lower()


class GameMode(IntEnum):
    """Who controls the two sides."""

    TWO_PLAYER = 0
    VS_COMPUTER = 1

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    BLACK_WINS = 1
    WHITE_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, side: Cell) -> GameResult:
        if side is Cell.BLACK:
            return cls.BLACK_WINS
        if side is Cell.WHITE:
            return cls.WHITE_WINS
        raise ValueError(f"No win result for {side!r}")

    @property
    def winner(self) -> Cell | None:
        """Winning side, or ``None`` for draws and unfinished games."""
        if self is GameResult.BLACK_WINS:
            return Cell.BLACK
        if self is GameResult.WHITE_WINS:
            return Cell.WHITE
        return None
