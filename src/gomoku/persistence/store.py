"""Key-value stores backing the saved session."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from PyQt6.QtCore import QSettings

from gomoku.core.errors import StorageError


class IKeyValueStore(Protocol):
    """Minimal string store used by :class:`SnapshotRepository`."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store for tests and headless runs."""

    __slots__ = ("_data",)

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class QSettingsStore:
    """Store on top of ``QSettings``.

    With no *path* the platform-native location for
    *organization*/*application* is used; with a *path* an INI file.
    """

    __slots__ = ("_settings",)

    def __init__(
        self,
        organization: str = "Gomoku",
        application: str = "Gomoku",
        *,
        path: Path | str | None = None,
    ) -> None:
        if path is not None:
            self._settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(organization, application)

    def get(self, key: str) -> str | None:
        value = self._settings.value(key)
        if value is None:
            return None
        # INI backends may hand back non-str values for hand-edited files.
        return value if isinstance(value, str) else str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._sync()

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._sync()

    def _sync(self) -> None:
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            raise StorageError(f"QSettings write failed: {status.name}")
