"""Input buffer widget.

Paints the buffer of an `InputController` as rich text and forwards key
presses to it. Keep this purely UI-related: composition and editing rules
live in `lomaji.domain`.
"""

from __future__ import annotations

import html
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import QLabel, QSizePolicy, QWidget

from lomaji.controllers.input_controller import InputController, ji_class
from lomaji.domain.input_method import InputState
from lomaji.domain.textual import textual_representation
from lomaji.services.settings_store import DisplaySettings

IBEAM = "|"


def _class_colors(settings: DisplaySettings) -> dict[str, str]:
    return {
        "lomaji-complete": settings.complete_color,
        "lomaji-incomplete": settings.incomplete_color,
        "hanji": settings.hanji_color,
        "symbol": settings.symbol_color,
    }


def buffer_html(state: InputState, settings: DisplaySettings) -> str:
    """Rich text for `state`: one span per unit, plus the caret or selection."""
    colors = _class_colors(settings)
    r = state.range
    caret = '<span style="color: {};">{}</span>'.format(settings.incomplete_color, IBEAM)

    parts: list[str] = []
    for idx, ji in enumerate(state.marked):
        if r.is_empty and r.start == idx:
            parts.append(caret)
        style = "color: {};".format(colors[ji_class(ji)])
        if r.start <= idx < r.end:
            style += " background-color: {};".format(settings.selection_color)
        parts.append(
            '<span class="{}" style="{}">{}</span>'.format(
                ji_class(ji), style, html.escape(textual_representation(ji))
            )
        )
    if r.is_empty and r.start == len(state.marked):
        parts.append(caret)
    return "".join(parts)


class InputBufferView(QLabel):
    """Focusable label showing the composed buffer."""

    bufferChanged = pyqtSignal(str)

    def __init__(
        self,
        controller: InputController,
        settings: Optional[DisplaySettings] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("InputBuffer")
        self._controller = controller
        self._settings = settings or DisplaySettings()

        self.setTextFormat(Qt.TextFormat.RichText)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self.setWordWrap(True)

        self.apply_settings(self._settings)
        controller.set_on_changed(self.refresh)
        self.refresh(controller.state)

    @property
    def controller(self) -> InputController:
        return self._controller

    def apply_settings(self, settings: DisplaySettings) -> None:
        self._settings = settings
        f = QFont(self.font())
        f.setPointSize(int(settings.font_point_size))
        self.setFont(f)
        self.refresh(self._controller.state)

    def refresh(self, state: InputState) -> None:
        self.setText(buffer_html(state, self._settings))
        text = self._controller.text()
        self.setAccessibleName(text)
        self.bufferChanged.emit(text)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if self._controller.handle_key(event.key(), event.text()):
            event.accept()
            return
        super().keyPressEvent(event)
