"""Greedy one-ply move selector: win, block, else best-scored cell."""

from __future__ import annotations

import logging

from gomoku.core.board import Board
from gomoku.core.enums import Cell
from gomoku.core.rules import Rules, run_through
from gomoku.core.types import AXES, CENTER, Point
from gomoku.engine.search import IEngine, Selection, SelectionTier

_LOGGER = logging.getLogger(__name__)

# Own-run bonus per axis, keyed by run length (4 means "4 or more").
_OWN_RUN_SCORES: dict[int, int] = {4: 100_000, 3: 10_000, 2: 1_000, 1: 100}
# Opponent-run bonus per axis; a single opposing stone earns nothing.
_OPP_RUN_SCORES: dict[int, int] = {4: 50_000, 3: 5_000, 2: 500}
_CENTRALITY_WEIGHT = 10


def score_cell(board: Board, row: int, col: int, side: Cell) -> int:
    """Heuristic value of playing *side* at the empty cell (row, col).

    Runs are counted from the neighbouring stones only; the candidate
    cell itself is not included.
    """
    opponent = side.opponent
    score = 0
    for d_row, d_col in AXES:
        my_run = run_through(board, row, col, d_row, d_col, side)
        opp_run = run_through(board, row, col, d_row, d_col, opponent)
        score += _OWN_RUN_SCORES.get(min(my_run, 4), 0)
        score += _OPP_RUN_SCORES.get(min(opp_run, 4), 0)

    distance = abs(row - CENTER) + abs(col - CENTER)
    score += (2 * CENTER - distance) * _CENTRALITY_WEIGHT
    return score


class HeuristicEngine(IEngine):
    """Three-tier local heuristic; never searches beyond one ply.

    1. Take an immediate five for *side*.
    2. Otherwise occupy the cell where the opponent would make five.
    3. Otherwise play the highest-scoring empty cell.

    Every tier scans in row-major order and keeps the first cell found,
    so ties always resolve towards the top-left.
    """

    __slots__ = ()

    def select(self, board: Board, side: Cell) -> Selection | None:
        """Choose a move for *side*, or ``None`` on a full board.

        The caller's board is never modified.
        """
        work = board.copy()
        empty = work.empty_cells()
        if not empty:
            return None

        point = self._find_five(work, empty, side)
        if point is not None:
            _LOGGER.debug("%s wins at %s", side, point)
            return Selection(point, SelectionTier.WIN)

        point = self._find_five(work, empty, side.opponent)
        if point is not None:
            _LOGGER.debug("%s blocks at %s", side, point)
            return Selection(point, SelectionTier.BLOCK)

        best: Point | None = None
        best_score = 0
        for row, col in empty:
            score = score_cell(work, row, col, side)
            if best is None or score > best_score:
                best = (row, col)
                best_score = score
        assert best is not None
        _LOGGER.debug("%s plays %s (score %d)", side, best, best_score)
        return Selection(best, SelectionTier.SCORED, best_score)

    def select_move(self, board: Board, side: Cell) -> Point | None:
        selection = self.select(board, side)
        return selection.point if selection is not None else None

    @staticmethod
    def _find_five(board: Board, empty: list[Point], side: Cell) -> Point | None:
        for row, col in empty:
            if Rules.would_win(board, row, col, side):
                return (row, col)
        return None
