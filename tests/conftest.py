"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import itertools
import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def fixed_clock() -> Callable[[], float]:
    """Deterministic timestamps: 1000.0, 1001.0, ..."""
    counter = itertools.count(1000)
    return lambda: float(next(counter))


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


@pytest.fixture
def draw_order() -> list[tuple[int, int]]:
    """Move order that fills the board without five in a row for either side.

    Colouring ``(col // 2 + row) % 2`` caps every run at two stones; black
    cells and white cells are interleaved so the sides alternate.
    """
    from gomoku.core.types import BOARD_SIZE

    blacks: list[tuple[int, int]] = []
    whites: list[tuple[int, int]] = []
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            (blacks if (c // 2 + r) % 2 == 0 else whites).append((r, c))
    assert len(blacks) == len(whites) + 1

    order: list[tuple[int, int]] = []
    for i, point in enumerate(blacks):
        order.append(point)
        if i < len(whites):
            order.append(whites[i])
    return order
