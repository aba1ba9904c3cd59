"""MainWindow — wires the board and controls to the GameController."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from gomoku.core.enums import Cell, GameMode, GameResult
from gomoku.core.errors import GomokuError
from gomoku.core.move import Move
from gomoku.game.controller import GameController
from gomoku.game.interfaces import GamePhase
from gomoku.game.state import GameState
from gomoku.persistence.repository import SnapshotRepository
from gomoku.persistence.store import IKeyValueStore, QSettingsStore
from gomoku.settings import AppSettings
from gomoku.ui.board_widget import BoardWidget
from gomoku.ui.control_panel import ControlPanel
from gomoku.ui.scheduler import QtMoveScheduler

_SIDE_NAMES = {Cell.BLACK: "Black", Cell.WHITE: "White"}


class MainWindow(QMainWindow):
    """Top-level window. Holds no game logic; it only forwards user
    commands to the controller and redraws on controller events.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        store: IKeyValueStore | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or AppSettings()
        s = self._settings

        if store is None:
            store = QSettingsStore(s.organization, s.application)
        self._scheduler = QtMoveScheduler(s.computer_delay_ms, self)
        self._controller = GameController(
            s.start_mode,
            repository=SnapshotRepository(store, s.session_key),
            scheduler=self._scheduler,
        )

        self._setup_ui()
        self._connect_game_events()

        if s.resume_saved_game:
            self._controller.resume()
        self._refresh()

    # ── Setup ────────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self.setWindowTitle("Gomoku")
        central = QWidget(self)
        layout = QVBoxLayout(central)

        self._status_label = QLabel()
        layout.addWidget(self._status_label)

        self._board_view = BoardWidget(
            self._settings.cell_size, self._settings.stone_radius, central
        )
        self._board_view.cell_clicked.connect(self._on_cell_clicked)
        layout.addWidget(self._board_view)

        self._control_panel = ControlPanel(central)
        self._control_panel.new_game_clicked.connect(self._controller.reset)
        self._control_panel.undo_clicked.connect(self._on_undo)
        self._control_panel.vs_computer_toggled.connect(self._on_vs_computer_toggled)
        layout.addWidget(self._control_panel)

        self.setCentralWidget(central)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_undo.append(lambda _moves: self._refresh())
        events.on_reset.append(lambda _mode: self._refresh())
        events.on_phase_changed.append(self._on_phase_changed)
        events.on_game_over.append(self._on_game_over)
        events.on_move_rejected.append(self._on_move_rejected)

    # ── Accessors (used by tests) ────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardWidget:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── User commands ────────────────────────────────────────────────────

    def _on_cell_clicked(self, row: int, col: int) -> None:
        self._controller.submit_move(row, col)

    def _on_undo(self) -> None:
        self._controller.undo_move()

    def _on_vs_computer_toggled(self, checked: bool) -> None:
        self._controller.set_mode(
            GameMode.VS_COMPUTER if checked else GameMode.TWO_PLAYER
        )

    # ── Controller events ────────────────────────────────────────────────

    def _on_move(self, _move: Move, _state: GameState) -> None:
        self._refresh()

    def _on_phase_changed(self, _phase: GamePhase) -> None:
        self._sync_interactivity()
        self._update_status()

    def _on_game_over(self, _result: GameResult) -> None:
        self._update_status()

    def _on_move_rejected(self, exc: GomokuError) -> None:
        self.statusBar().showMessage(str(exc), 2000)

    # ── Redraw ───────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        state = self._controller.state
        last = state.last_move
        self._board_view.set_board(
            state.board.rows(), last.point if last is not None else None
        )
        self._control_panel.set_vs_computer(state.mode == GameMode.VS_COMPUTER)
        self._control_panel.set_undo_enabled(bool(state.ledger))
        self._sync_interactivity()
        self._update_status()

    def _sync_interactivity(self) -> None:
        self._board_view.set_interactive(self._controller.is_human_turn())

    def _update_status(self) -> None:
        state = self._controller.state
        if state.is_draw:
            text = "Draw!"
        elif state.winner is not None:
            text = f"{_SIDE_NAMES[state.winner]} wins!"
        elif state.phase == GamePhase.THINKING:
            text = "Computer is thinking..."
        else:
            text = f"{_SIDE_NAMES[state.side_to_move]} to move"
        self._status_label.setText(text)
