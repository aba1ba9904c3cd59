"""Gomoku: five-in-a-row with an optional heuristic computer opponent."""

__version__ = "0.1.0"
