"""SnapshotRepository — save, load and clear the current session."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from gomoku.core.errors import MalformedSnapshotError
from gomoku.persistence.snapshot import GameSnapshot

if TYPE_CHECKING:
    from gomoku.game.state import GameState
    from gomoku.persistence.store import IKeyValueStore

_LOGGER = logging.getLogger(__name__)

SESSION_KEY = "gomoku/session"


class SnapshotRepository:
    """Persists one game under a fixed key.

    Writes are fire-and-forget: a failing store is logged and otherwise
    ignored, so the in-memory game always continues.
    """

    __slots__ = ("_store", "_key")

    def __init__(self, store: IKeyValueStore, key: str = SESSION_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, state: GameState) -> bool:
        """Write *state*. Returns False if the store failed."""
        payload = GameSnapshot.capture(state).to_json()
        try:
            self._store.set(self._key, payload)
        except OSError as exc:
            _LOGGER.warning("Could not save game: %s", exc)
            return False
        return True

    def load(self) -> GameSnapshot | None:
        """Read the saved game, or ``None`` if absent or unreadable.

        Unreadable data is removed so it is not retried on the next start.
        """
        try:
            text = self._store.get(self._key)
        except OSError as exc:
            _LOGGER.warning("Could not read saved game: %s", exc)
            return None
        if text is None:
            return None

        try:
            snapshot = GameSnapshot.from_json(text)
            snapshot.to_state()
        except MalformedSnapshotError as exc:
            self._discard(exc)
            return None
        return snapshot

    def load_state(self, clock: Callable[[], float] | None = None) -> GameState | None:
        """Like :meth:`load`, but rebuilds a ready-to-play :class:`GameState`."""
        snapshot = self.load()
        if snapshot is None:
            return None
        return snapshot.to_state(clock)

    def clear(self) -> bool:
        try:
            self._store.remove(self._key)
        except OSError as exc:
            _LOGGER.warning("Could not clear saved game: %s", exc)
            return False
        return True

    def _discard(self, exc: MalformedSnapshotError) -> None:
        _LOGGER.warning("Discarding saved game: %s", exc)
        self.clear()
