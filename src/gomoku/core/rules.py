"""Five-in-a-row detection and line counting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gomoku.core.enums import Cell
from gomoku.core.types import AXES, BOARD_SIZE, WIN_LENGTH

if TYPE_CHECKING:
    from gomoku.core.board import Board


def count_direction(
    board: Board, row: int, col: int, d_row: int, d_col: int, side: Cell
) -> int:
    """Contiguous *side* stones starting next to (row, col) along (d_row, d_col).

    The starting cell itself is not counted.
    """
    count = 0
    r, c = row + d_row, col + d_col
    while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
        if board.cell_at(r, c) is not side:
            break
        count += 1
        r += d_row
        c += d_col
    return count


def run_through(
    board: Board, row: int, col: int, d_row: int, d_col: int, side: Cell
) -> int:
    """Stones of *side* on both sides of (row, col) along one axis."""
    return count_direction(board, row, col, d_row, d_col, side) + count_direction(
        board, row, col, -d_row, -d_col, side
    )


def check_win(board: Board, row: int, col: int) -> bool:
    """Whether the stone just played at (row, col) completes five or more.

    Axes are checked independently; runs on different axes never combine.
    """
    side = board.cell_at(row, col)
    if side is Cell.EMPTY:
        return False
    return any(
        1 + run_through(board, row, col, d_row, d_col, side) >= WIN_LENGTH
        for d_row, d_col in AXES
    )


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_winning_move(board: Board, row: int, col: int) -> bool:
        return check_win(board, row, col)

    @staticmethod
    def is_draw(board: Board) -> bool:
        """Board exhausted. Only meaningful after the last move failed to win."""
        return board.is_full()

    @staticmethod
    def would_win(board: Board, row: int, col: int, side: Cell) -> bool:
        """Hypothetically place *side* at an empty (row, col) and test for five.

        The board is left unchanged.
        """
        board.place(row, col, side)
        try:
            return check_win(board, row, col)
        finally:
            board.clear(row, col)
