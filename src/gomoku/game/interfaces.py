"""Abstract interfaces for the game layer.

Follows Dependency Inversion: high-level GameController depends on
these ABCs, not on concrete Player/scheduler implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from gomoku.core.enums import Cell, GameMode

if TYPE_CHECKING:
    from gomoku.core.board import Board


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    AWAITING_MOVE = auto()  # a human is to move
    THINKING = auto()  # the computer's reply is scheduled
    GAME_OVER = auto()


# ── Abstract interfaces ──────────────────────────────────────────────────────


class IPlayer(ABC):
    """One participant in a game."""

    @property
    @abstractmethod
    def side(self) -> Cell:
        """Stone colour this player places."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name."""

    @property
    @abstractmethod
    def is_human(self) -> bool:
        """True when moves come from the UI."""

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """Called by the controller when it is this player's turn."""

    @abstractmethod
    def cancel(self) -> None:
        """Abort a pending move request."""


class IMoveScheduler(ABC):
    """Runs the computer's deferred move step."""

    @abstractmethod
    def schedule(self, callback: Callable[[], None]) -> None:
        """Arrange for *callback* to run once, replacing any pending one."""

    @abstractmethod
    def cancel(self) -> None:
        """Drop the pending callback, if any."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def submit_move(self, row: int, col: int) -> bool:
        """Submit a human move. Returns True if legal and applied."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Take back the last turn. Returns True if anything was undone."""

    @abstractmethod
    def reset(self) -> None:
        """Start over in the current mode."""

    @abstractmethod
    def set_mode(self, mode: GameMode) -> None:
        """Switch mode; always starts a fresh game."""
