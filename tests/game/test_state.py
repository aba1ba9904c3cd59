"""Tests for GameState."""

import pytest

from gomoku.core.enums import Cell, GameMode, GameResult
from gomoku.core.errors import InvalidMoveError, OutOfBoundsError
from gomoku.game.interfaces import GamePhase
from gomoku.game.state import GameState


class TestGameStateSetup:
    def test_initial_state(self) -> None:
        gs = GameState()
        assert gs.side_to_move is Cell.BLACK
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.mode == GameMode.TWO_PLAYER
        assert gs.ply_count == 0
        assert gs.is_initial

    def test_setup_resets(self, fixed_clock) -> None:
        gs = GameState(clock=fixed_clock)
        gs.apply_move(7, 7)
        gs.setup(GameMode.VS_COMPUTER)
        assert gs.ply_count == 0
        assert gs.board.stone_count() == 0
        assert gs.side_to_move is Cell.BLACK
        assert gs.mode == GameMode.VS_COMPUTER


class TestGameStateMoves:
    def test_apply_move_records(self, fixed_clock) -> None:
        gs = GameState(clock=fixed_clock)
        move = gs.apply_move(7, 7)
        assert (move.row, move.col, move.side, move.seq) == (7, 7, Cell.BLACK, 1)
        assert move.timestamp == 1000.0
        assert gs.board.cell_at(7, 7) is Cell.BLACK
        assert gs.side_to_move is Cell.WHITE
        assert gs.last_move == move

    def test_sides_alternate(self) -> None:
        gs = GameState()
        sides = []
        for col in range(6):
            sides.append(gs.apply_move(0, col).side)
        assert sides == [Cell.BLACK, Cell.WHITE] * 3

    def test_occupied_cell_rejected_without_change(self) -> None:
        gs = GameState()
        gs.apply_move(7, 7)
        with pytest.raises(InvalidMoveError):
            gs.apply_move(7, 7)
        assert gs.ply_count == 1
        assert gs.side_to_move is Cell.WHITE

    def test_out_of_bounds_rejected_without_change(self) -> None:
        gs = GameState()
        with pytest.raises(OutOfBoundsError):
            gs.apply_move(-1, 3)
        assert gs.is_initial
        assert gs.board.stone_count() == 0

    def test_horizontal_five_wins(self) -> None:
        gs = GameState()
        for col in range(7, 11):
            gs.apply_move(7, col)  # black
            gs.apply_move(0, col)  # white elsewhere
        gs.apply_move(7, 11)
        assert gs.result == GameResult.BLACK_WINS
        assert gs.winner is Cell.BLACK
        assert gs.phase == GamePhase.GAME_OVER
        assert gs.is_game_over

    def test_no_moves_after_game_over(self) -> None:
        gs = GameState()
        for col in range(4):
            gs.apply_move(7, col)
            gs.apply_move(8, col)
        gs.apply_move(7, 4)
        with pytest.raises(InvalidMoveError):
            gs.apply_move(9, 9)
        assert gs.ply_count == 9

    def test_full_board_without_five_is_a_draw(
        self, draw_order: list[tuple[int, int]]
    ) -> None:
        gs = GameState()
        order = draw_order
        for row, col in order[:-1]:
            gs.apply_move(row, col)
            assert not gs.is_game_over
        gs.apply_move(*order[-1])
        assert gs.result == GameResult.DRAW
        assert gs.is_draw
        assert gs.winner is None
        assert gs.board.is_full()

    def test_ledger_matches_board(self, draw_order: list[tuple[int, int]]) -> None:
        gs = GameState()
        for i, (row, col) in enumerate(draw_order[:40]):
            gs.apply_move(row, col)
            assert gs.ply_count == gs.board.stone_count() == i + 1


class TestGameStateUndo:
    def test_undo_empty(self) -> None:
        assert GameState().undo_last_move() is None

    def test_undo_restores_side_and_cell(self) -> None:
        gs = GameState()
        gs.apply_move(7, 7)
        gs.apply_move(7, 8)
        undone = gs.undo_last_move()
        assert undone is not None and undone.point == (7, 8)
        assert gs.board.is_empty(7, 8)
        assert gs.side_to_move is Cell.WHITE
        assert gs.ply_count == 1

    def test_undo_to_empty_gives_black(self) -> None:
        gs = GameState()
        gs.apply_move(0, 0)
        gs.undo_last_move()
        assert gs.side_to_move is Cell.BLACK
        assert gs.is_initial

    def test_undo_reopens_finished_game(self) -> None:
        gs = GameState()
        for col in range(4):
            gs.apply_move(7, col)
            gs.apply_move(8, col)
        gs.apply_move(7, 4)
        assert gs.is_game_over
        gs.undo_last_move()
        assert not gs.is_game_over
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.side_to_move is Cell.BLACK

    def test_undo_then_replay_is_identical(self) -> None:
        gs = GameState(clock=lambda: 5.0)
        gs.apply_move(7, 7)
        gs.apply_move(6, 6)
        board_before = gs.board.copy()
        moves_before = gs.ledger.moves()
        gs.undo_last_move()
        gs.apply_move(6, 6)
        assert gs.board == board_before
        assert gs.ledger.moves() == moves_before
