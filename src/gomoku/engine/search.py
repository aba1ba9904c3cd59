"""Shared engine models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gomoku.core.board import Board
    from gomoku.core.enums import Cell
    from gomoku.core.types import Point


class SelectionTier(IntEnum):
    """Which policy produced a move."""

    WIN = 1
    BLOCK = 2
    SCORED = 3


@dataclass(slots=True, frozen=True)
class Selection:
    """Result produced by a move selector."""

    point: Point
    tier: SelectionTier
    score: int | None = None  # only set for SCORED picks


class IEngine(Protocol):
    """Protocol for move selectors used by the game layer."""

    def select(self, board: Board, side: Cell) -> Selection | None: ...

    def select_move(self, board: Board, side: Cell) -> Point | None: ...
