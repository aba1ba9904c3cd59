"""Game management layer — controller, players, ledger, state machine.

Quick start::

    from gomoku.game import GameController
    from gomoku.core import GameMode

    ctrl = GameController(GameMode.VS_COMPUTER)
    ctrl.submit_move(7, 7)  # the computer replies immediately
"""

from gomoku.game.controller import COMPUTER_SIDE, GameController, GameEvents
from gomoku.game.interfaces import GamePhase, IGameController, IMoveScheduler, IPlayer
from gomoku.game.ledger import MoveLedger
from gomoku.game.player import (
    ComputerPlayer,
    HumanPlayer,
    ImmediateScheduler,
    ManualScheduler,
)
from gomoku.game.state import FIRST_SIDE, GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IMoveScheduler",
    "IPlayer",
    # Concrete
    "COMPUTER_SIDE",
    "ComputerPlayer",
    "FIRST_SIDE",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "ImmediateScheduler",
    "ManualScheduler",
    "MoveLedger",
]
