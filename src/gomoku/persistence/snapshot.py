"""GameSnapshot — JSON codec for a complete game state."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from gomoku.core.board import Board
from gomoku.core.enums import Cell, GameMode, GameResult
from gomoku.core.errors import GomokuError, MalformedSnapshotError
from gomoku.core.move import Move, as_int
from gomoku.core.rules import check_win
from gomoku.game.interfaces import GamePhase
from gomoku.game.state import GameState

SNAPSHOT_VERSION = 1


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of everything a :class:`GameState` needs to resume."""

    board: tuple[tuple[int, ...], ...]
    side_to_move: Cell
    terminal: bool
    result: GameResult
    mode: GameMode
    moves: tuple[Move, ...]

    # ── Capture / restore ────────────────────────────────────────────────

    @classmethod
    def capture(cls, state: GameState) -> GameSnapshot:
        return cls(
            board=tuple(tuple(int(c) for c in row) for row in state.board.rows()),
            side_to_move=state.side_to_move,
            terminal=state.is_game_over,
            result=state.result,
            mode=state.mode,
            moves=state.ledger.moves(),
        )

    def to_state(self, clock: Callable[[], float] | None = None) -> GameState:
        """Rebuild a :class:`GameState`, replaying the ledger onto a fresh board.

        Raises ``MalformedSnapshotError`` when the board, ledger and side to
        move disagree.
        """
        state = GameState(mode=self.mode)
        if clock is not None:
            state.clock = clock
        try:
            for move in self.moves:
                state.board.place(move.row, move.col, move.side)
                state.ledger.append(move)
            expected_board = Board.from_rows(self.board)
        except (GomokuError, ValueError) as exc:
            raise MalformedSnapshotError(f"Inconsistent move ledger: {exc}") from exc

        if state.board != expected_board:
            raise MalformedSnapshotError("Board does not match the move ledger")
        _check_alternation(self.moves)

        tail = state.ledger.last()
        if self.terminal:
            expected_side = tail.side if tail is not None else Cell.BLACK
        else:
            expected_side = tail.side.opponent if tail is not None else Cell.BLACK
        if self.side_to_move != expected_side:
            raise MalformedSnapshotError(
                f"Side to move {self.side_to_move} does not follow the ledger"
            )
        if self.terminal != (self.result != GameResult.IN_PROGRESS):
            raise MalformedSnapshotError("Terminal flag disagrees with the result")
        if self.result != _result_of(state.board, tail):
            raise MalformedSnapshotError(
                f"Result {self.result.name} does not fit the board"
            )

        state.side_to_move = self.side_to_move
        state.result = self.result
        if self.terminal:
            state.phase = GamePhase.GAME_OVER
        return state

    # ── JSON ─────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": SNAPSHOT_VERSION,
            "board": [list(row) for row in self.board],
            "side_to_move": int(self.side_to_move),
            "terminal": self.terminal,
            "result": self.result.name.lower(),
            "mode": self.mode.name.lower(),
            "moves": [m.to_dict() for m in self.moves],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: Any) -> GameSnapshot:
        """Decode and validate the shape of *data*.

        Raises ``MalformedSnapshotError`` for anything unexpected.
        """
        if not isinstance(data, dict):
            raise MalformedSnapshotError("Snapshot must be a JSON object")
        if data.get("version") != SNAPSHOT_VERSION:
            raise MalformedSnapshotError(
                f"Unsupported snapshot version {data.get('version')!r}"
            )
        try:
            board = tuple(
                tuple(int(Cell(as_int(c))) for c in row) for row in data["board"]
            )
            Board.from_rows(board)
            side = Cell(as_int(data["side_to_move"]))
            if side is Cell.EMPTY:
                raise ValueError("side_to_move cannot be empty")
            terminal = data["terminal"]
            if not isinstance(terminal, bool):
                raise TypeError("terminal must be a boolean")
            result = GameResult[str(data["result"]).upper()]
            mode = GameMode[str(data["mode"]).upper()]
            moves = tuple(Move.from_dict(m) for m in data["moves"])
        except (KeyError, OverflowError, TypeError, ValueError) as exc:
            raise MalformedSnapshotError(f"Invalid snapshot field: {exc}") from exc

        return cls(
            board=board,
            side_to_move=side,
            terminal=terminal,
            result=result,
            mode=mode,
            moves=moves,
        )

    @classmethod
    def from_json(cls, text: str) -> GameSnapshot:
        try:
            data = json.loads(text)
        except (RecursionError, TypeError, ValueError) as exc:
            raise MalformedSnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
        return cls.from_dict(data)


def _result_of(board: Board, tail: Move | None) -> GameResult:
    if tail is None:
        return GameResult.IN_PROGRESS
    if check_win(board, tail.row, tail.col):
        return GameResult.win_for(tail.side)
    if board.is_full():
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


def _check_alternation(moves: tuple[Move, ...]) -> None:
    expected = Cell.BLACK
    for move in moves:
        if move.side is not expected:
            raise MalformedSnapshotError(f"Move {move.seq} was played out of turn")
        expected = expected.opponent
