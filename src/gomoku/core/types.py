"""Board geometry: size, axes and coordinate helpers."""

from __future__ import annotations

BOARD_SIZE = 15
WIN_LENGTH = 5
CENTER = (BOARD_SIZE - 1) // 2

Point = tuple[int, int]  # (row, col)

# One direction per axis; the opposite direction is the negation.
AXES: tuple[Point, ...] = (
    (0, 1),  # horizontal
    (1, 0),  # vertical
    (1, 1),  # diagonal (down-right)
    (1, -1),  # anti-diagonal (down-left)
)


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def iter_points() -> list[Point]:
    """All intersections in row-major order."""
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


def point_name(row: int, col: int) -> str:
    """Human-readable coordinate, e.g. ``(7, 7)`` -> ``"h8"``."""
    return f"{chr(ord('a') + col)}{row + 1}"
