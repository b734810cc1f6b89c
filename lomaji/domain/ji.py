"""Units of the input buffer (domain layer).

A buffer is a sequence of `Ji`: a romanized syllable under composition
(`Lomaji`), a logographic character (`Hanji`) or a literal `Symbol`.

All units are frozen; composition produces a new `Lomaji` instead of
mutating the one stored in the buffer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from lomaji.domain.enums import JiKind


@dataclass(frozen=True)
class Lomaji:
    """A romanized syllable, filled slot by slot.

    `initial == ""` means the syllable is vowel-led; `None` means the slot
    has not been reached yet.
    """

    initial: str | None = None
    vowel: str | None = None
    syllable_coda: str | None = None
    tone: int | None = None

    @property
    def kind(self) -> JiKind:
        return JiKind.LOMAJI


@dataclass(frozen=True)
class Hanji:
    hanji: str

    @property
    def kind(self) -> JiKind:
        return JiKind.HANJI


@dataclass(frozen=True)
class Symbol:
    symbol: str

    @property
    def kind(self) -> JiKind:
        return JiKind.SYMBOL


Ji = Union[Lomaji, Hanji, Symbol]


def is_complete(ji: Ji) -> bool:
    """True for a syllable whose initial, vowel and tone are all defined."""
    if not isinstance(ji, Lomaji):
        return False
    return ji.initial is not None and ji.vowel is not None and ji.tone is not None


def new_symbol(c: str) -> Symbol:
    return Symbol(symbol=c)


def new_hanji(c: str) -> Hanji:
    return Hanji(hanji=c)
