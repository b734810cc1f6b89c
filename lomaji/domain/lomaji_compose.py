from __future__ import annotations

"""Lomaji syllable composition (domain layer).

This module contains *no* Qt/UI dependencies.

A syllable is extended one character at a time. Each push either returns a
new `Lomaji` with exactly one slot extended, or an `InvalidExtension` telling
the caller that the character has to start a new unit instead.

Primary API:
- push_to_lomaji(lomaji, c)
- new_lomaji(c)
"""

from dataclasses import dataclass, replace
from typing import Union

from lomaji.domain.ji import Lomaji
from lomaji.domain.lomaji_data import (
    CHECKED_TONES,
    CODA_LETTERS,
    INITIAL_CLUSTERS,
    INITIAL_LETTERS,
    NASAL_ONLY_INITIALS,
    NON_STOP_TONES,
    TONE_DIGITS,
    VALID_CODA_CLUSTERS,
    VALID_VOWEL_CLUSTERS,
    VOWEL_LETTERS,
    ends_with_stop,
    tone_from_digit,
)


@dataclass(frozen=True)
class InvalidExtension:
    """`c` cannot legally extend `lomaji`."""

    lomaji: Lomaji
    c: str
    reason: str

    def __str__(self) -> str:
        return "{}: {!r} onto {}".format(self.reason, self.c, self.lomaji)


PushResult = Union[Lomaji, InvalidExtension]


# -----------------------------------------------------------------------------
# Transitions
# -----------------------------------------------------------------------------

def _push_empty(lomaji: Lomaji, c: str, k: str) -> PushResult:
    if k in INITIAL_LETTERS:
        return replace(lomaji, initial=c)
    if k in VOWEL_LETTERS:
        # vowel-led syllable
        return replace(lomaji, initial="", vowel=c)
    return InvalidExtension(lomaji, c, "Cannot start with")


def _push_after_initial(lomaji: Lomaji, c: str, k: str) -> PushResult:
    initial = lomaji.initial or ""

    if (initial + k).lower() in INITIAL_CLUSTERS:
        return replace(lomaji, initial=initial + c)

    if k == "n":
        # syllabic nasal written as a bare coda: mng, tng, hng
        return replace(lomaji, vowel="", syllable_coda=c)

    if k in VOWEL_LETTERS:
        if k in VALID_VOWEL_CLUSTERS:
            return replace(lomaji, vowel=c)
        return InvalidExtension(lomaji, c, "Invalid vowel")

    if k in TONE_DIGITS:
        tone = tone_from_digit(k)
        if initial.lower() not in NASAL_ONLY_INITIALS:
            return InvalidExtension(lomaji, c, "Tone before vowel")
        if tone not in NON_STOP_TONES:
            return InvalidExtension(lomaji, c, "Invalid tone for syllabic nasal")
        # m / ng become the nucleus
        return replace(lomaji, initial="", vowel=initial, tone=tone)

    return InvalidExtension(lomaji, c, "Unknown character")


def _push_after_vowel(lomaji: Lomaji, c: str, k: str) -> PushResult:
    vowel = lomaji.vowel or ""
    coda = lomaji.syllable_coda or ""

    if k in CODA_LETTERS:
        syllable_coda = coda + c
        if syllable_coda.lower() not in VALID_CODA_CLUSTERS:
            return InvalidExtension(lomaji, c, "Invalid syllable coda")
        tone = lomaji.tone
        if ends_with_stop(syllable_coda) and tone != 8:
            tone = 4
        return replace(lomaji, syllable_coda=syllable_coda, tone=tone)

    if k in VOWEL_LETTERS:
        if (vowel + k).lower() in VALID_VOWEL_CLUSTERS:
            return replace(lomaji, vowel=vowel + c)
        return InvalidExtension(lomaji, c, "Invalid vowel")

    if k in TONE_DIGITS:
        tone = tone_from_digit(k)
        if ends_with_stop(lomaji.syllable_coda) != (tone in CHECKED_TONES):
            return InvalidExtension(lomaji, c, "Tone does not match coda")
        return replace(lomaji, tone=tone)

    return InvalidExtension(lomaji, c, "Unknown character")


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def push_to_lomaji(lomaji: Lomaji, c: str) -> PushResult:
    """Extend one slot of `lomaji` with the character `c`.

    Matching is case-insensitive; the stored slot text keeps the case of `c`.

    Returns:
        The extended syllable, or an `InvalidExtension` when `c` violates a
        cluster whitelist or the tone/coda consistency rule.
    """
    k = c.lower()
    if lomaji.initial is None:
        return _push_empty(lomaji, c, k)
    if lomaji.vowel is None:
        return _push_after_initial(lomaji, c, k)
    return _push_after_vowel(lomaji, c, k)


def new_lomaji(c: str) -> PushResult:
    """Start a syllable from its first character."""
    return push_to_lomaji(Lomaji(), c)


def compose_text(text: str) -> PushResult:
    """Push every character of `text` into an empty syllable.

    Stops at the first character that cannot extend the syllable.
    """
    result: PushResult = Lomaji()
    for c in text:
        result = push_to_lomaji(result, c)
        if isinstance(result, InvalidExtension):
            break
    return result
