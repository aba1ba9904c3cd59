"""Concrete player and scheduler implementations."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from gomoku.core.enums import Cell
from gomoku.game.interfaces import IMoveScheduler, IPlayer

if TYPE_CHECKING:
    from gomoku.core.board import Board
    from gomoku.core.types import Point
    from gomoku.engine.search import IEngine

_LOGGER = logging.getLogger(__name__)

MoveSelectedCallback = Callable[[Cell, int, int], None]  # side, row, col


class ImmediateScheduler(IMoveScheduler):
    """Runs the callback synchronously. Used headless and in tests."""

    __slots__ = ()

    def schedule(self, callback: Callable[[], None]) -> None:
        callback()

    def cancel(self) -> None:
        pass  # Nothing is ever pending


class ManualScheduler(IMoveScheduler):
    """Holds the callback until :meth:`run_pending` is called."""

    __slots__ = ("_pending",)

    def __init__(self) -> None:
        self._pending: Callable[[], None] | None = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def schedule(self, callback: Callable[[], None]) -> None:
        self._pending = callback

    def cancel(self) -> None:
        self._pending = None

    def run_pending(self) -> bool:
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback()
        return True


class HumanPlayer(IPlayer):
    """A human participant — moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_side", "_name")

    def __init__(self, side: Cell, name: str = "") -> None:
        self._side = side
        self._name = name or f"Player ({side})"

    @property
    def side(self) -> Cell:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class ComputerPlayer(IPlayer):
    """A computer participant driven by an engine.

    ``request_move`` copies the board and hands selection to the
    *scheduler*; when the step runs, the chosen point is reported through
    *on_move_selected*.

    Args:
        side: Side the computer plays.
        engine: Move selector.
        on_move_selected: ``(side, row, col) -> None``.
        scheduler: Decides when the selection step runs.
        name: Display name.
    """

    __slots__ = ("_side", "_name", "_engine", "_on_move_selected", "_scheduler")

    def __init__(
        self,
        side: Cell,
        engine: IEngine,
        on_move_selected: MoveSelectedCallback,
        scheduler: IMoveScheduler | None = None,
        name: str = "Computer",
    ) -> None:
        self._side = side
        self._name = name
        self._engine = engine
        self._on_move_selected = on_move_selected
        self._scheduler = scheduler or ImmediateScheduler()

    @property
    def side(self) -> Cell:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: Board) -> None:
        position = board.copy()
        self._scheduler.schedule(lambda: self._select(position))

    def cancel(self) -> None:
        self._scheduler.cancel()

    def _select(self, board: Board) -> None:
        point: Point | None = self._engine.select_move(board, self._side)
        if point is None:
            _LOGGER.warning("Engine found no move for %s", self._side)
            return
        self._on_move_selected(self._side, *point)
