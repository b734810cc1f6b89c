from __future__ import annotations

"""Textual representation of buffer units (domain layer).

Tone mark placement for a syllable's vowel cluster:
1. single letter, "oo" or "ng": after the first letter
2. otherwise after the first "a" (case-insensitive)
3. otherwise after the whole cluster

Rendering is not reversible; there is no parser from display text back to
slots.
"""

from typing import Iterable

from lomaji.domain.ji import Hanji, Ji, Lomaji, Symbol
from lomaji.domain.lomaji_data import tone_mark


def _inject_at(s: str, index: int, t: str) -> str:
    return s[:index] + t + s[index:]


def _mark_vowel(vowel: str, mark: str) -> str:
    if len(vowel) == 1 or vowel in ("oo", "ng"):
        return _inject_at(vowel, 1, mark)
    a_index = vowel.lower().find("a")
    if a_index >= 0:
        return _inject_at(vowel, a_index + 1, mark)
    return vowel + mark


def _lomaji_text(ji: Lomaji) -> str:
    initial = ji.initial or ""
    coda = ji.syllable_coda or ""
    if not ji.vowel:
        # incomplete: nothing to carry the mark
        return initial + coda
    return initial + _mark_vowel(ji.vowel, tone_mark(ji.tone)) + coda


def textual_representation(ji: Ji) -> str:
    """Return the display string of a single unit."""
    if isinstance(ji, Lomaji):
        return _lomaji_text(ji)
    if isinstance(ji, Hanji):
        return ji.hanji
    if isinstance(ji, Symbol):
        return ji.symbol
    raise TypeError("Unknown unit type: {!r}".format(ji))


def render_buffer(marked: Iterable[Ji]) -> str:
    return "".join(textual_representation(ji) for ji in marked)
