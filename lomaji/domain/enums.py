from __future__ import annotations

from enum import Enum, auto


class JiKind(Enum):
    """Tag of a unit in the input buffer."""

    LOMAJI = "lomaji"
    HANJI = "hanji"
    SYMBOL = "symbol"


class EditKey(Enum):
    """Named (non-character) editing actions understood by the input method."""

    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    DELETE_BACKWARD = auto()
