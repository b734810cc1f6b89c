from __future__ import annotations

"""Buffer/selection editing (domain layer).

This module is intentionally Qt-free.

`input_method(state, action)` is a pure reducer: it never mutates `state` and
always returns a complete new `InputState` plus an output string (reserved
for committed text; currently always empty).

Actions are either a single printable character or an `EditKey`.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Union

from lomaji.domain.enums import EditKey
from lomaji.domain.ji import Ji, Lomaji, new_symbol
from lomaji.domain.lomaji_compose import InvalidExtension, new_lomaji, push_to_lomaji
from lomaji.domain.lomaji_data import (
    INITIAL_LETTERS,
    LOMAJI_LETTERS,
    TONE_DIGITS,
    VOWEL_LETTERS,
)

logger = logging.getLogger(__name__)

Action = Union[str, EditKey]


# -----------------------------------------------------------------------------
# State
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Range:
    """Half-open selection [start, end); start == end is a caret."""

    start: int = 0
    end: int = 0

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


def empty_range_at(idx: int) -> Range:
    return Range(start=idx, end=idx)


@dataclass(frozen=True)
class InputState:
    marked: tuple[Ji, ...] = field(default_factory=tuple)
    range: Range = field(default_factory=Range)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _replace_range_with(marked: tuple[Ji, ...], r: Range, ji: Ji) -> tuple[Ji, ...]:
    return marked[: r.start] + (ji,) + marked[r.end:]


def _new_ji(c: str, *, starters: frozenset[str]) -> Ji:
    """A syllable seeded with the case-folded `c` when it is a starter letter, else a symbol."""
    if c.lower() in starters:
        result = new_lomaji(c.lower())
        if isinstance(result, Lomaji):
            return result
    return new_symbol(c)


_INSERT_STARTERS = INITIAL_LETTERS | VOWEL_LETTERS


def _insert_at_caret(state: InputState, c: str) -> InputState:
    r = state.range
    ji = _new_ji(c, starters=_INSERT_STARTERS)
    return InputState(
        marked=_replace_range_with(state.marked, r, ji),
        range=empty_range_at(r.start + 1),
    )


def _handle_character(state: InputState, c: str) -> InputState:
    marked, r = state.marked, state.range
    k = c.lower()

    if not r.is_empty:
        # replace the selection
        ji = _new_ji(c, starters=INITIAL_LETTERS)
        return InputState(
            marked=_replace_range_with(marked, r, ji),
            range=empty_range_at(r.start + 1),
        )

    previous = marked[r.start - 1] if r.start > 0 else None
    if isinstance(previous, Lomaji) and (k in LOMAJI_LETTERS or k in TONE_DIGITS):
        result = push_to_lomaji(previous, c)
        if isinstance(result, InvalidExtension):
            logger.debug("Starting a new unit: %s", result)
            return _insert_at_caret(state, c)
        return InputState(
            marked=_replace_range_with(marked, Range(r.start - 1, r.start), result),
            range=empty_range_at(r.start),
        )

    return _insert_at_caret(state, c)


def _move_left(state: InputState) -> InputState:
    r = state.range
    if not r.is_empty:
        return InputState(marked=state.marked, range=empty_range_at(r.start))
    return InputState(marked=state.marked, range=empty_range_at(max(0, r.start - 1)))


def _move_right(state: InputState) -> InputState:
    r = state.range
    if not r.is_empty:
        return InputState(marked=state.marked, range=empty_range_at(r.end))
    return InputState(
        marked=state.marked,
        range=empty_range_at(min(len(state.marked), r.start + 1)),
    )


def _delete_backward(state: InputState) -> InputState:
    marked, r = state.marked, state.range
    if not r.is_empty:
        return InputState(
            marked=marked[: r.start] + marked[r.end:],
            range=empty_range_at(r.start),
        )
    if r.start > 0:
        return InputState(
            marked=marked[: r.start - 1] + marked[r.start:],
            range=empty_range_at(r.start - 1),
        )
    return state


_EDIT_HANDLERS = {
    EditKey.MOVE_LEFT: _move_left,
    EditKey.MOVE_RIGHT: _move_right,
    EditKey.DELETE_BACKWARD: _delete_backward,
}


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def input_method(state: InputState, action: Action) -> tuple[InputState, str]:
    """Apply one action to `state`.

    Args:
        state: current buffer and selection
        action: a single character, or an `EditKey`

    Returns:
        (new_state, output). Unrecognised actions return `state` unchanged.
    """
    if isinstance(action, str):
        if len(action) == 1:
            return _handle_character(state, action), ""
        return state, ""

    handler = _EDIT_HANDLERS.get(action)
    if handler is None:
        return state, ""
    return handler(state), ""


def type_text(state: InputState, text: Iterable[str]) -> InputState:
    """Feed each character of `text` through `input_method`."""
    for c in text:
        state, _output = input_method(state, c)
    return state
