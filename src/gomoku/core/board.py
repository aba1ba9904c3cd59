"""Board - stone placement on a 15x15 grid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from gomoku.core.enums import Cell
from gomoku.core.errors import InvalidMoveError, OutOfBoundsError
from gomoku.core.types import BOARD_SIZE, Point, in_bounds, iter_points

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE
_SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "X", Cell.WHITE: "O"}


class Board:
    """Mutable square grid of :class:`Cell` values."""

    __slots__ = ("_cells", "_stones")

    def __init__(self) -> None:
        self._cells: list[Cell] = [Cell.EMPTY] * _CELL_COUNT
        self._stones = 0

    @staticmethod
    def _index(row: int, col: int) -> int:
        if not in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        return row * BOARD_SIZE + col

    # -- Element access -----------------------------------------------------

    def cell_at(self, row: int, col: int) -> Cell:
        return self._cells[self._index(row, col)]

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell_at(row, col) is Cell.EMPTY

    # -- Mutation -----------------------------------------------------------

    def place(self, row: int, col: int, side: Cell) -> None:
        """Put a *side* stone on an empty intersection."""
        if not side.is_side:
            raise InvalidMoveError("Cannot place an EMPTY stone")
        idx = self._index(row, col)
        if self._cells[idx] is not Cell.EMPTY:
            raise InvalidMoveError(f"({row}, {col}) is already occupied")
        self._cells[idx] = side
        self._stones += 1

    def clear(self, row: int, col: int) -> Cell:
        """Remove the stone at (row, col) and return its side."""
        idx = self._index(row, col)
        side = self._cells[idx]
        if side is Cell.EMPTY:
            raise InvalidMoveError(f"({row}, {col}) is already empty")
        self._cells[idx] = Cell.EMPTY
        self._stones -= 1
        return side

    def clear_all(self) -> None:
        self._cells = [Cell.EMPTY] * _CELL_COUNT
        self._stones = 0

    # -- Query helpers ------------------------------------------------------

    def is_full(self) -> bool:
        return self._stones == _CELL_COUNT

    def stone_count(self) -> int:
        return self._stones

    def empty_cells(self) -> list[Point]:
        """Empty intersections in row-major order."""
        return [
            point
            for point, cell in zip(iter_points(), self._cells)
            if cell is Cell.EMPTY
        ]

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Read-only snapshot of the grid, one tuple per row."""
        return tuple(
            tuple(self._cells[r * BOARD_SIZE : (r + 1) * BOARD_SIZE])
            for r in range(BOARD_SIZE)
        )

    # -- Copying / factory --------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        b._stones = self._stones
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[int]]) -> Board:
        """Build a board from rows of cell codes (0 empty, 1 black, 2 white).

        Raises ``ValueError`` for a wrong shape or unknown code.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        b = cls()
        for r, row in enumerate(rows):
            values = list(row)
            if len(values) != BOARD_SIZE:
                raise ValueError(f"Row {r} has {len(values)} cells")
            for c, code in enumerate(values):
                cell = Cell(code)
                if cell is not Cell.EMPTY:
                    b.place(r, c, cell)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        lines = [
            f"{r:2d} " + " ".join(_SYMBOLS[cell] for cell in row)
            for r, row in enumerate(self.rows())
        ]
        lines.append("   " + " ".join(chr(ord("a") + c) for c in range(BOARD_SIZE)))
        return "\n".join(lines)
