"""GameController — the central orchestrator of a gomoku game.

Coordinates: Players, GameState, engine scheduling and persistence.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gomoku.core.enums import Cell, GameMode, GameResult
from gomoku.core.errors import GomokuError, InvalidMoveError
from gomoku.core.move import Move
from gomoku.engine import DefaultEngine
from gomoku.game.interfaces import GamePhase, IGameController, IMoveScheduler, IPlayer
from gomoku.game.player import ComputerPlayer, HumanPlayer
from gomoku.game.state import GameState

if TYPE_CHECKING:
    from gomoku.engine.search import IEngine
    from gomoku.persistence.repository import SnapshotRepository

_LOGGER = logging.getLogger(__name__)

COMPUTER_SIDE = Cell.WHITE

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
UndoCallback = Callable[[list[Move]], None]  # moves removed, newest first
ResetCallback = Callable[[GameMode], None]
RejectedCallback = Callable[[GomokuError], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)
    on_move_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, switches turns, drives
    the computer player, persists the session and notifies listeners.

    Thread-safety: every method runs on a single thread (the main/UI
    thread). Computer replies arrive through the scheduler on that same
    thread, so no two moves are ever applied concurrently.

    Args:
        mode: Initial game mode.
        repository: Where the session is saved; ``None`` disables saving.
        engine: Move selector for the computer side.
        scheduler: Runs the computer's move step; synchronous by default.
        clock: Timestamp source for recorded moves.
    """

    __slots__ = (
        "_state",
        "_players",
        "_repository",
        "_engine",
        "_scheduler",
        "events",
    )

    def __init__(
        self,
        mode: GameMode = GameMode.TWO_PLAYER,
        *,
        repository: SnapshotRepository | None = None,
        engine: IEngine | None = None,
        scheduler: IMoveScheduler | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._state = GameState(mode=mode)
        if clock is not None:
            self._state.clock = clock
        self._repository = repository
        self._engine: IEngine = engine or DefaultEngine()
        self._scheduler = scheduler
        self._players: dict[Cell, IPlayer] = self._make_players(mode)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def mode(self) -> GameMode:
        return self._state.mode

    @property
    def current_player(self) -> IPlayer | None:
        if self._state.is_game_over:
            return None
        return self._players[self._state.side_to_move]

    def player(self, side: Cell) -> IPlayer:
        return self._players[side]

    def is_human_turn(self) -> bool:
        cp = self.current_player
        return cp is not None and cp.is_human

    # ── IGameController impl ─────────────────────────────────────────────

    def submit_move(self, row: int, col: int) -> bool:
        """Apply a human move for the side to move.

        Rejected moves (bad coordinates, occupied cell, finished game,
        computer's turn) leave the state unchanged and return False.
        """
        cp = self.current_player
        if cp is not None and not cp.is_human:
            return self._reject(InvalidMoveError(f"It is {cp.name}'s turn"))
        return self._play(row, col)

    def undo_move(self) -> bool:
        """Take back the last turn.

        Two players: one stone. Against the computer: stones are removed
        until a human is to move again, at most two (the computer's reply
        and the human stone before it).
        """
        if not self._state.ledger:
            return False

        self._cancel_pending()
        undone: list[Move] = []
        limit = 1 if self.mode == GameMode.TWO_PLAYER else 2
        while len(undone) < limit:
            move = self._state.undo_last_move()
            if move is None:
                break
            undone.append(move)
            if self._players[self._state.side_to_move].is_human:
                break

        _LOGGER.debug("Undid %d move(s)", len(undone))
        for cb in self.events.on_undo:
            cb(undone)
        self._persist()
        self._prompt_current_player()
        return True

    def reset(self) -> None:
        """Discard the game and start over in the current mode."""
        self._start_fresh(self.mode)

    def set_mode(self, mode: GameMode) -> None:
        """Switch mode. Always starts a fresh game."""
        _LOGGER.info("Mode changed to %s", mode)
        self._start_fresh(mode)

    def resume(self) -> bool:
        """Restore the saved session, if there is a usable one.

        Falls back to a fresh game otherwise. Returns True when a saved
        game was restored.
        """
        self._cancel_pending()
        restored: GameState | None = None
        if self._repository is not None:
            restored = self._repository.load_state(self._state.clock)

        if restored is None:
            self._state.setup()
            self._players = self._make_players(self.mode)
            for cb in self.events.on_reset:
                cb(self.mode)
            self._emit_phase(self._state.phase)
            return False

        self._state = restored
        self._players = self._make_players(restored.mode)
        _LOGGER.info("Resumed %s game at move %d", restored.mode, restored.ply_count)
        for cb in self.events.on_reset:
            cb(self.mode)
        if restored.is_game_over:
            self._emit_phase(GamePhase.GAME_OVER)
        else:
            self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, row: int, col: int) -> bool:
        try:
            move = self._state.apply_move(row, col)
        except GomokuError as exc:
            return self._reject(exc)

        for cb in self.events.on_move:
            cb(move, self._state)

        if self._state.is_game_over:
            _LOGGER.info("Game over: %s", self._state.result.name)
            if self._repository is not None:
                self._repository.clear()
            self._emit_game_over(self._state.result)
            return True

        self._persist()
        self._prompt_current_player()
        return True

    def _on_computer_move(self, side: Cell, row: int, col: int) -> None:
        """Apply the engine's choice unless the game has moved on."""
        state = self._state
        if state.phase != GamePhase.THINKING or state.side_to_move != side:
            _LOGGER.debug("Ignoring stale computer move %s", (row, col))
            return
        self._play(row, col)

    def _reject(self, exc: GomokuError) -> bool:
        _LOGGER.debug("Move rejected: %s", exc)
        for cb in self.events.on_move_rejected:
            cb(exc)
        return False

    def _start_fresh(self, mode: GameMode) -> None:
        self._cancel_pending()
        self._state.setup(mode)
        self._players = self._make_players(mode)
        if self._repository is not None:
            self._repository.clear()
        _LOGGER.info("New %s game", mode)
        for cb in self.events.on_reset:
            cb(mode)
        self._emit_phase(self._state.phase)

    def _make_players(self, mode: GameMode) -> dict[Cell, IPlayer]:
        black: IPlayer = HumanPlayer(Cell.BLACK, "Black")
        white: IPlayer
        if mode == GameMode.VS_COMPUTER:
            white = ComputerPlayer(
                COMPUTER_SIDE,
                self._engine,
                on_move_selected=self._on_computer_move,
                scheduler=self._scheduler,
            )
        else:
            white = HumanPlayer(Cell.WHITE, "White")
        return {Cell.BLACK: black, Cell.WHITE: white}

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _cancel_pending(self) -> None:
        for p in self._players.values():
            if not p.is_human:
                p.cancel()

    def _persist(self) -> None:
        if self._repository is not None and not self._state.is_game_over:
            self._repository.save(self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
