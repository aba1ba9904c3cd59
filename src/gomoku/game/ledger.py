"""Ordered move history with tail-only removal."""

from __future__ import annotations

from collections.abc import Iterator

from gomoku.core.enums import Cell
from gomoku.core.move import Move
from gomoku.core.types import Point


class MoveLedger:
    """Append-only sequence of :class:`Move`, truncated from the tail by undo.

    The ledger knows nothing about the board; the game state keeps the two
    in step.
    """

    __slots__ = ("_moves", "_occupied")

    def __init__(self) -> None:
        self._moves: list[Move] = []
        self._occupied: set[Point] = set()

    def append(self, move: Move) -> None:
        expected = self.next_seq
        if move.seq != expected:
            raise ValueError(f"Expected sequence number {expected}, got {move.seq}")
        if move.point in self._occupied:
            raise ValueError(f"{move.point} already appears in the ledger")
        self._moves.append(move)
        self._occupied.add(move.point)

    def pop_last(self) -> Move | None:
        """Remove and return the tail move, or ``None`` when empty."""
        if not self._moves:
            return None
        move = self._moves.pop()
        self._occupied.discard(move.point)
        return move

    def last(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    def last_side_to_move(self) -> Cell | None:
        """Side of the tail move, or ``None`` when empty."""
        tail = self.last()
        return tail.side if tail is not None else None

    def clear(self) -> None:
        self._moves.clear()
        self._occupied.clear()

    @property
    def next_seq(self) -> int:
        return len(self._moves) + 1

    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(tuple(self._moves))

    def __bool__(self) -> bool:
        return bool(self._moves)
