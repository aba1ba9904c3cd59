"""Computer opponent: heuristic move selection."""

from gomoku.engine.heuristic import HeuristicEngine, score_cell
from gomoku.engine.search import IEngine, Selection, SelectionTier

DefaultEngine: type[IEngine] = HeuristicEngine

__all__ = [
    "DefaultEngine",
    "HeuristicEngine",
    "IEngine",
    "Selection",
    "SelectionTier",
    "score_cell",
]
