from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt6.QtCore import Qt

from lomaji.domain.enums import EditKey, JiKind
from lomaji.domain.input_method import Action, InputState, input_method
from lomaji.domain.ji import Ji, is_complete
from lomaji.domain.textual import render_buffer

logger = logging.getLogger(__name__)


_KEY_ACTIONS: dict[int, EditKey] = {
    Qt.Key.Key_Left.value: EditKey.MOVE_LEFT,
    Qt.Key.Key_Right.value: EditKey.MOVE_RIGHT,
    Qt.Key.Key_Backspace.value: EditKey.DELETE_BACKWARD,
}


def action_for_key(key: object, text: str) -> Optional[Action]:
    """Translate a Qt key press into an input-method action.

    `key` may be a `Qt.Key` or the int returned by `QKeyEvent.key()`.
    Returns None for keys outside the input method's vocabulary.
    """
    try:
        code = int(getattr(key, "value", key))
    except (TypeError, ValueError):
        code = None
    if code is not None and code in _KEY_ACTIONS:
        return _KEY_ACTIONS[code]
    if isinstance(text, str) and len(text) == 1 and text.isprintable():
        return text
    return None


def ji_class(ji: Ji) -> str:
    """Display class of a unit (complete vs incomplete syllables are styled apart)."""
    if ji.kind is JiKind.LOMAJI:
        return "lomaji-complete" if is_complete(ji) else "lomaji-incomplete"
    if ji.kind is JiKind.HANJI:
        return "hanji"
    if ji.kind is JiKind.SYMBOL:
        return "symbol"
    raise TypeError("Unknown unit kind: {!r}".format(ji))


class InputController:
    """Drives the input-method reducer from key presses.

    Owns the current `InputState`. Rendering is left to the view, which is
    notified through `on_changed` after every handled action.
    """

    def __init__(
        self,
        state: Optional[InputState] = None,
        on_changed: Optional[Callable[[InputState], None]] = None,
    ) -> None:
        self._state = state if state is not None else InputState()
        self._on_changed = on_changed

    @property
    def state(self) -> InputState:
        return self._state

    def set_on_changed(self, handler: Optional[Callable[[InputState], None]]) -> None:
        self._on_changed = handler

    def text(self) -> str:
        return render_buffer(self._state.marked)

    def reset(self) -> None:
        self._state = InputState()
        self._notify()

    def handle_action(self, action: Action) -> str:
        """Apply one action and return the reducer's output string."""
        self._state, output = input_method(self._state, action)
        logger.debug(
            "action=%r -> buffer=%r range=(%d, %d) output=%r",
            action,
            self.text(),
            self._state.range.start,
            self._state.range.end,
            output,
        )
        self._notify()
        return output

    def handle_key(self, key: object, text: str) -> bool:
        """Handle a key press; returns False if the key is not an input action."""
        action = action_for_key(key, text)
        if action is None:
            return False
        self.handle_action(action)
        return True

    def _notify(self) -> None:
        if self._on_changed is None:
            return
        try:
            self._on_changed(self._state)
        except (AttributeError, RuntimeError, TypeError):
            # Handler is injected; keep input handling resilient.
            logger.exception("InputController on_changed handler failed")
