"""QTimer-backed scheduler that paces the computer's replies."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from gomoku.game.interfaces import IMoveScheduler


class QtMoveScheduler(IMoveScheduler):
    """Runs the pending callback once after *delay_ms* on the Qt event loop.

    Scheduling again replaces the pending callback and restarts the timer.
    """

    __slots__ = ("_timer", "_pending")

    def __init__(self, delay_ms: int = 300, parent: QObject | None = None) -> None:
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.setInterval(max(0, delay_ms))
        self._timer.timeout.connect(self._fire)
        self._pending: Callable[[], None] | None = None

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    @property
    def delay_ms(self) -> int:
        return self._timer.interval()

    def set_delay(self, delay_ms: int) -> None:
        """Applies to the next scheduled callback."""
        self._timer.setInterval(max(0, delay_ms))

    def schedule(self, callback: Callable[[], None]) -> None:
        self._pending = callback
        self._timer.start()

    def cancel(self) -> None:
        self._timer.stop()
        self._pending = None

    def _fire(self) -> None:
        callback, self._pending = self._pending, None
        if callback is not None:
            callback()
