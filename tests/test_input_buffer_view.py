"""
Widget tests for the input buffer view and the main window.

Key presses go through Qt (qtbot) so the key -> action mapping, the reducer
and the repaint are exercised together.
"""

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel

from lomaji.controllers.input_controller import InputController
from lomaji.domain.input_method import InputState, Range
from lomaji.domain.ji import Hanji, Lomaji, Symbol
from lomaji.services.settings_store import DisplaySettings, SettingsStore
from lomaji.ui.input_buffer import IBEAM, InputBufferView, buffer_html
from lomaji.ui.main_window import create_main_window


def test_buffer_html_marks_units_and_caret() -> None:
    state = InputState(
        marked=(Lomaji(initial="t", vowel="ai", tone=7), Symbol(symbol="<")),
        range=Range(2, 2),
    )
    text = buffer_html(state, DisplaySettings())

    assert 'class="lomaji-complete"' in text
    assert 'class="symbol"' in text
    assert "&lt;" in text
    assert text.endswith(IBEAM + "</span>")


def test_buffer_html_caret_before_unit() -> None:
    state = InputState(marked=(Hanji(hanji="台"),), range=Range(0, 0))
    text = buffer_html(state, DisplaySettings())
    assert text.index(IBEAM) < text.index("台")


def test_buffer_html_highlights_selection() -> None:
    settings = DisplaySettings(selection_color="yellow")
    state = InputState(
        marked=(Symbol(symbol="a"), Symbol(symbol="b"), Symbol(symbol="c")),
        range=Range(1, 2),
    )
    text = buffer_html(state, settings)

    assert text.count("background-color: yellow") == 1
    assert IBEAM not in text


@pytest.mark.qt
class TestInputBufferView:
    def test_typing_composes_syllable(self, qtbot):
        controller = InputController()
        view = InputBufferView(controller)
        qtbot.addWidget(view)

        qtbot.keyClicks(view, "tai7")

        assert controller.text() == "ta\u0304i"
        assert len(controller.state.marked) == 1
        assert view.accessibleName() == "ta\u0304i"

    def test_backspace_and_arrows(self, qtbot):
        controller = InputController()
        view = InputBufferView(controller)
        qtbot.addWidget(view)

        qtbot.keyClicks(view, "ka2,")
        qtbot.keyClick(view, Qt.Key.Key_Left)
        qtbot.keyClick(view, Qt.Key.Key_Backspace)

        assert controller.state.marked == (Symbol(symbol=","),)
        assert controller.state.range == Range(0, 0)

        qtbot.keyClick(view, Qt.Key.Key_Right)
        assert controller.state.range == Range(1, 1)

    def test_buffer_changed_signal(self, qtbot):
        controller = InputController()
        view = InputBufferView(controller)
        qtbot.addWidget(view)

        with qtbot.waitSignal(view.bufferChanged, timeout=1000) as blocker:
            qtbot.keyClicks(view, "m")
        assert blocker.args == ["m"]

    def test_font_size_from_settings(self, qtbot):
        view = InputBufferView(InputController(), DisplaySettings(font_point_size=33))
        qtbot.addWidget(view)
        assert view.font().pointSize() == 33


@pytest.mark.qt
def test_main_window_wiring(qtbot, tmp_path):
    settings = tmp_path / "settings.yaml"
    settings.write_text("display:\n  font_point_size: 20\n", encoding="utf-8")

    window = create_main_window(settings_path=str(settings))
    qtbot.addWidget(window)
    window.show()

    handles = window._handles
    assert handles.buffer_view.font().pointSize() == 20

    qtbot.keyClicks(handles.buffer_view, "m7 ")

    plain = window.findChild(QLabel, "labelPlainText")
    assert plain is handles.plain_label
    assert plain.text() == "m\u0304 "
    assert handles.controller.text() == "m\u0304 "


@pytest.mark.qt
def test_zoom_actions_persist_font_size(qtbot, tmp_path):
    settings = tmp_path / "settings.yaml"
    settings.write_text("display:\n  font_point_size: 20\n", encoding="utf-8")

    window = create_main_window(settings_path=str(settings))
    qtbot.addWidget(window)
    handles = window._handles

    handles.zoom_in.trigger()
    assert handles.buffer_view.font().pointSize() == 22
    assert SettingsStore(str(settings)).get_display_settings().font_point_size == 22

    handles.zoom_out.trigger()
    handles.zoom_out.trigger()
    assert handles.buffer_view.font().pointSize() == 18
    assert SettingsStore(str(settings)).get_display_settings().font_point_size == 18
