# tests/conftest.py
import os

import pytest

# Headless Qt for widget tests; must be set before any QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from lomaji.domain.input_method import InputState, Range  # noqa: E402
from lomaji.domain.ji import Lomaji, Symbol, new_hanji  # noqa: E402


@pytest.fixture
def empty_state() -> InputState:
    return InputState()


@pytest.fixture
def three_units():
    """[ka, 台, ","]"""
    return (
        Lomaji(initial="k", vowel="a"),
        new_hanji("台"),
        Symbol(symbol=","),
    )


@pytest.fixture
def state_at():
    """Build an InputState from units and a caret (or a start/end selection)."""

    def _make(marked, start, end=None) -> InputState:
        return InputState(
            marked=tuple(marked),
            range=Range(start, start if end is None else end),
        )

    return _make
