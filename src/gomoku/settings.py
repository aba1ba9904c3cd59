"""Application-wide settings."""

from __future__ import annotations

from dataclasses import dataclass

from gomoku.core.enums import GameMode
from gomoku.persistence.repository import SESSION_KEY


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Storage (QSettings scope)
    organization: str = "Gomoku"
    application: str = "Gomoku"
    session_key: str = SESSION_KEY

    # Game
    start_mode: GameMode = GameMode.TWO_PLAYER
    resume_saved_game: bool = True

    # Computer
    computer_delay_ms: int = 300  # pause before the reply is played

    # Board
    cell_size: int = 40
    stone_radius: int = 15
