"""Thin PyQt6 presentation layer; all game rules live in ``gomoku.game``."""
