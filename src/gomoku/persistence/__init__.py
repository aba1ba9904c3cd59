"""Saving and restoring the current session."""

from gomoku.persistence.repository import SESSION_KEY, SnapshotRepository
from gomoku.persistence.snapshot import SNAPSHOT_VERSION, GameSnapshot
from gomoku.persistence.store import IKeyValueStore, MemoryStore, QSettingsStore

__all__ = [
    "GameSnapshot",
    "IKeyValueStore",
    "MemoryStore",
    "QSettingsStore",
    "SESSION_KEY",
    "SNAPSHOT_VERSION",
    "SnapshotRepository",
]
