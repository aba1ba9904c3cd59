"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    background: QColor
    grid: QColor
    black_stone: QColor
    white_stone: QColor
    stone_outline: QColor
    last_move: QColor  # marker on the most recent stone

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            background=QColor(222, 184, 135),  # burlywood
            grid=QColor(0, 0, 0),
            black_stone=QColor(0, 0, 0),
            white_stone=QColor(255, 255, 255),
            stone_outline=QColor(0, 0, 0),
            last_move=QColor(200, 30, 30),
        )
