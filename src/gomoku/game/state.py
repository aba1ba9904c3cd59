"""Game state — board, side to move, result and move ledger."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from gomoku.core.board import Board
from gomoku.core.enums import Cell, GameMode, GameResult
from gomoku.core.errors import InvalidMoveError
from gomoku.core.move import Move
from gomoku.core.rules import Rules
from gomoku.game.interfaces import GamePhase
from gomoku.game.ledger import MoveLedger

FIRST_SIDE = Cell.BLACK


@dataclass(eq=False)
class GameState:
    """Everything needed to continue a game.

    This is a pure data/logic class — no scheduling, no UI, no storage.
    Applying a rejected move leaves every field untouched.
    """

    mode: GameMode = GameMode.TWO_PLAYER
    board: Board = field(default_factory=Board, init=False)
    ledger: MoveLedger = field(default_factory=MoveLedger, init=False)
    side_to_move: Cell = field(default=FIRST_SIDE, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    clock: Callable[[], float] = field(default=time.time, repr=False, compare=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, mode: GameMode | None = None) -> None:
        """Initialise (or reset) the game, optionally switching mode."""
        if mode is not None:
            self.mode = mode
        self.board.clear_all()
        self.ledger.clear()
        self.side_to_move = FIRST_SIDE
        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, row: int, col: int) -> Move:
        """Place a stone for the side to move and update the result.

        Raises ``InvalidMoveError`` after the game is over or for an
        occupied cell, ``OutOfBoundsError`` for bad coordinates.
        """
        if self.is_game_over:
            raise InvalidMoveError("The game is over")

        side = self.side_to_move
        self.board.place(row, col, side)
        move = Move(row, col, side, self.ledger.next_seq, self.clock())
        self.ledger.append(move)

        if Rules.is_winning_move(self.board, row, col):
            self.result = GameResult.win_for(side)
            self.phase = GamePhase.GAME_OVER
        elif Rules.is_draw(self.board):
            self.result = GameResult.DRAW
            self.phase = GamePhase.GAME_OVER
        else:
            self.side_to_move = side.opponent
        return move

    def undo_last_move(self) -> Move | None:
        """Take back the tail move. Returns it, or ``None`` if nothing was played.

        Also reopens a finished game.
        """
        move = self.ledger.pop_last()
        if move is None:
            return None
        self.board.clear(move.row, move.col)

        tail_side = self.ledger.last_side_to_move()
        self.side_to_move = tail_side.opponent if tail_side is not None else FIRST_SIDE
        self.result = GameResult.IN_PROGRESS
        self.phase = GamePhase.AWAITING_MOVE
        return move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Cell | None:
        return self.result.winner

    @property
    def is_draw(self) -> bool:
        return self.result == GameResult.DRAW

    @property
    def ply_count(self) -> int:
        """Number of stones played."""
        return len(self.ledger)

    @property
    def last_move(self) -> Move | None:
        return self.ledger.last()

    @property
    def is_initial(self) -> bool:
        return not self.ledger and self.side_to_move == FIRST_SIDE
