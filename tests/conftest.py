"""Shared pytest fixtures: a headless QApplication and per-test cleanup."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

# No display server: render Qt offscreen.
if not (os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """The process-wide QApplication, created on first use."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _english_strings() -> Iterator[None]:
    from chessview.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close top-level widgets a Qt test left open."""
    yield
    if "qapp" not in request.fixturenames:
        return
    app = request.getfixturevalue("qapp")
    for widget in app.topLevelWidgets():
        widget.close()
    app.processEvents()
