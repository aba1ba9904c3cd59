"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gomoku.core.enums import Cell
from gomoku.core.types import Point, point_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of one stone placed during a game."""

    row: int
    col: int
    side: Cell
    seq: int  # 1-based position in the ledger
    timestamp: float  # seconds since the epoch

    @property
    def point(self) -> Point:
        return (self.row, self.col)

    # ── Serialisation ────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "row": self.row,
            "col": self.col,
            "side": int(self.side),
            "seq": self.seq,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Move:
        """Inverse of :meth:`to_dict`.

        Raises ``KeyError``, ``TypeError``, ``ValueError`` or ``OverflowError``.
        """
        return cls(
            row=as_int(data["row"]),
            col=as_int(data["col"]),
            side=Cell(as_int(data["side"])),
            seq=as_int(data["seq"]),
            timestamp=float(data["timestamp"]),
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.seq}. {self.side} {point_name(self.row, self.col)}"


def as_int(value: Any) -> int:
    """Return *value* if it is a plain ``int``; bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {value!r}")
    return value
