"""BoardWidget — draws the grid and stones, reports clicked intersections."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import QPointF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from gomoku.core.enums import Cell
from gomoku.core.types import BOARD_SIZE, Point, in_bounds
from gomoku.ui.theme import BoardTheme


def point_at(x: float, y: float, cell_size: float) -> Point | None:
    """Nearest intersection to widget coordinates, or ``None`` off the board.

    The first line sits one cell in from the top-left edge.
    """
    col = round((x - cell_size) / cell_size)
    row = round((y - cell_size) / cell_size)
    if not in_bounds(row, col):
        return None
    return (row, col)


class BoardWidget(QWidget):
    """Paints a read-only board view.

    Signals:
        cell_clicked(int, int): row and column of a clicked intersection.
    """

    cell_clicked = pyqtSignal(int, int)

    def __init__(
        self,
        cell_size: int = 40,
        stone_radius: int = 15,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._cell_size = cell_size
        self._stone_radius = stone_radius
        self._theme = BoardTheme.default()
        self._rows: tuple[tuple[Cell, ...], ...] = tuple(
            (Cell.EMPTY,) * BOARD_SIZE for _ in range(BOARD_SIZE)
        )
        self._last_move: Point | None = None
        self._interactive = True

        side = self._cell_size * (BOARD_SIZE + 1)
        self.setFixedSize(side, side)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(
        self, rows: Sequence[Sequence[Cell]], last_move: Point | None = None
    ) -> None:
        self._rows = tuple(tuple(row) for row in rows)
        self._last_move = last_move
        self.update()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive

    @property
    def is_interactive(self) -> bool:
        return self._interactive

    def cell_center(self, row: int, col: int) -> QPointF:
        return QPointF(
            self._cell_size + col * self._cell_size,
            self._cell_size + row * self._cell_size,
        )

    def sizeHint(self) -> QSize:
        side = self._cell_size * (BOARD_SIZE + 1)
        return QSize(side, side)

    # ── Qt events ────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None:
            return
        if not self._interactive or event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        point = point_at(pos.x(), pos.y(), self._cell_size)
        if point is not None:
            self.cell_clicked.emit(*point)

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            self._paint_grid(painter)
            self._paint_stones(painter)
        finally:
            painter.end()

    # ── Painting ─────────────────────────────────────────────────────────

    def _paint_grid(self, painter: QPainter) -> None:
        theme = self._theme
        painter.fillRect(self.rect(), theme.background)
        painter.setPen(QPen(theme.grid, 1))
        first = self._cell_size
        last = self._cell_size * BOARD_SIZE
        for i in range(BOARD_SIZE):
            offset = self._cell_size + i * self._cell_size
            painter.drawLine(first, offset, last, offset)
            painter.drawLine(offset, first, offset, last)

    def _paint_stones(self, painter: QPainter) -> None:
        theme = self._theme
        painter.setPen(QPen(theme.stone_outline, 1))
        for r, row in enumerate(self._rows):
            for c, cell in enumerate(row):
                if cell is Cell.EMPTY:
                    continue
                color = theme.black_stone if cell is Cell.BLACK else theme.white_stone
                painter.setBrush(color)
                painter.drawEllipse(
                    self.cell_center(r, c), self._stone_radius, self._stone_radius
                )

        if self._last_move is not None:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(theme.last_move)
            marker = max(2, self._stone_radius // 4)
            painter.drawEllipse(self.cell_center(*self._last_move), marker, marker)
