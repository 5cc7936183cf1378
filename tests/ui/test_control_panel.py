"""Tests for the status and control panels."""

from __future__ import annotations

from chessview.game.controller import BoardController
from chessview.ui.i18n import set_language
from chessview.ui.panels.control_panel import ControlPanel
from chessview.ui.panels.status_panel import StatusPanel


def test_set_flipping_does_not_emit(qapp) -> None:
    panel = ControlPanel()
    toggles: list[bool] = []
    panel.flip_toggled.connect(lambda: toggles.append(True))

    panel.set_flipping(True)
    assert panel.is_flipping()
    assert toggles == []


def test_user_toggle_emits(qapp) -> None:
    panel = ControlPanel()
    panel.set_flipping(True)
    toggles: list[bool] = []
    panel.flip_toggled.connect(lambda: toggles.append(True))

    panel._chk_flipping.click()
    assert toggles == [True]
    assert not panel.is_flipping()


def test_reset_signal(qapp) -> None:
    panel = ControlPanel()
    resets: list[bool] = []
    panel.reset_clicked.connect(lambda: resets.append(True))
    panel._btn_reset.click()
    assert resets == [True]


def test_retranslate(qapp) -> None:
    panel = ControlPanel()
    assert panel._btn_reset.text() == "Reset"
    assert panel._chk_flipping.text() == "Board flipping"

    set_language("Russian")
    panel.retranslate_ui()
    assert panel._btn_reset.text() == "Сброс"


def test_status_panel_shows_view(qapp) -> None:
    panel = StatusPanel()
    panel.set_view(BoardController().view)
    assert panel.status_text() == "Ongoing"
    assert panel.turn_text() == "White"

    set_language("Russian")
    panel.retranslate_ui()
    assert panel.status_text() == "Игра идёт"
