"""Tests for player implementations and schedulers."""

from gomoku.core.board import Board
from gomoku.core.enums import Cell
from gomoku.engine.heuristic import HeuristicEngine
from gomoku.game.player import (
    ComputerPlayer,
    HumanPlayer,
    ImmediateScheduler,
    ManualScheduler,
)


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Cell.BLACK, "Alice")
        assert p.side is Cell.BLACK
        assert p.name == "Alice"
        assert p.is_human

    def test_default_name(self) -> None:
        p = HumanPlayer(Cell.WHITE)
        assert "white" in p.name

    def test_request_move_noop(self) -> None:
        p = HumanPlayer(Cell.BLACK)
        p.request_move(Board())  # should not raise
        p.cancel()


class TestComputerPlayer:
    def test_properties(self) -> None:
        p = ComputerPlayer(Cell.WHITE, HeuristicEngine(), lambda *_: None)
        assert p.side is Cell.WHITE
        assert not p.is_human
        assert p.name == "Computer"

    def test_immediate_scheduler_reports_move(self) -> None:
        picked: list[tuple[Cell, int, int]] = []
        p = ComputerPlayer(
            Cell.BLACK,
            HeuristicEngine(),
            lambda side, r, c: picked.append((side, r, c)),
            ImmediateScheduler(),
        )
        p.request_move(Board())
        assert picked == [(Cell.BLACK, 7, 7)]

    def test_manual_scheduler_defers_until_run(self) -> None:
        picked: list[tuple[int, int]] = []
        scheduler = ManualScheduler()
        p = ComputerPlayer(
            Cell.BLACK,
            HeuristicEngine(),
            lambda _side, r, c: picked.append((r, c)),
            scheduler,
        )
        p.request_move(Board())
        assert picked == []
        assert scheduler.has_pending
        assert scheduler.run_pending()
        assert picked == [(7, 7)]
        assert not scheduler.run_pending()

    def test_cancel_drops_pending_request(self) -> None:
        picked: list[tuple[int, int]] = []
        scheduler = ManualScheduler()
        p = ComputerPlayer(
            Cell.BLACK,
            HeuristicEngine(),
            lambda _side, r, c: picked.append((r, c)),
            scheduler,
        )
        p.request_move(Board())
        p.cancel()
        assert not scheduler.run_pending()
        assert picked == []

    def test_works_on_a_copy_of_the_board(self) -> None:
        picked: list[tuple[int, int]] = []
        scheduler = ManualScheduler()
        p = ComputerPlayer(
            Cell.WHITE,
            HeuristicEngine(),
            lambda _side, r, c: picked.append((r, c)),
            scheduler,
        )
        board = Board()
        p.request_move(board)
        board.place(7, 7, Cell.BLACK)  # later changes are not seen
        scheduler.run_pending()
        assert picked == [(7, 7)]
