"""Core domain layer — pure gomoku logic with zero external dependencies.

Quick start::

    from gomoku.core import Board, Cell, check_win

    board = Board()
    for col in range(5):
        board.place(7, col, Cell.BLACK)
    assert check_win(board, 7, 4)
"""

from gomoku.core.board import Board
from gomoku.core.enums import Cell, GameMode, GameResult
from gomoku.core.errors import (
    GomokuError,
    InvalidMoveError,
    MalformedSnapshotError,
    OutOfBoundsError,
    StorageError,
)
from gomoku.core.move import Move
from gomoku.core.rules import Rules, check_win, count_direction, run_through
from gomoku.core.types import (
    AXES,
    BOARD_SIZE,
    CENTER,
    WIN_LENGTH,
    Point,
    in_bounds,
    iter_points,
    point_name,
)

__all__ = [
    # Enums
    "Cell",
    "GameMode",
    "GameResult",
    # Errors
    "GomokuError",
    "InvalidMoveError",
    "MalformedSnapshotError",
    "OutOfBoundsError",
    "StorageError",
    # Geometry
    "AXES",
    "BOARD_SIZE",
    "CENTER",
    "WIN_LENGTH",
    "Point",
    "in_bounds",
    "iter_points",
    "point_name",
    # Domain objects
    "Board",
    "Move",
    "Rules",
    "check_win",
    "count_direction",
    "run_through",
]
