from __future__ import annotations

"""Lomaji character classes and cluster tables (domain layer).

This module contains *no* Qt/UI dependencies.

It centralises:
- Single-character classifiers (initials, vowels, codas, tone digits)
- Whole-string whitelists (initial clusters, vowel clusters, codas)
- The tone -> combining mark table

All lookups are case-insensitive; callers lower-case before checking.
"""

from typing import Final


# -----------------------------------------------------------------------------
# Single-character classes
# -----------------------------------------------------------------------------

# Letters that may appear anywhere inside a romanized syllable
LOMAJI_LETTERS: Final[frozenset[str]] = frozenset("abceghijklmnoprstu")

INITIAL_LETTERS: Final[frozenset[str]] = frozenset("pbtnlkghsjmc")
VOWEL_LETTERS: Final[frozenset[str]] = frozenset("aeiou")
CODA_LETTERS: Final[frozenset[str]] = frozenset("nmgptkh")
TONE_DIGITS: Final[frozenset[str]] = frozenset("123456789")


# -----------------------------------------------------------------------------
# Cluster whitelists
# -----------------------------------------------------------------------------

INITIAL_CLUSTERS: Final[frozenset[str]] = frozenset(
    ("ph", "th", "kh", "ng", "ts", "tsh", "ch", "chh")
)

# Initials that can stand alone as a syllabic nasal (m7, ng5)
NASAL_ONLY_INITIALS: Final[frozenset[str]] = frozenset(("m", "ng"))

VALID_VOWEL_CLUSTERS: Final[frozenset[str]] = frozenset(
    (
        "a", "ai", "au",
        "e",
        "i", "ia", "iau", "io", "iu",
        "o", "oo",
        "u", "ua", "uai", "ue", "ui",
    )
)

VALID_CODA_CLUSTERS: Final[frozenset[str]] = frozenset(
    (
        "n", "ng", "ngh", "nn", "nnh",
        "m", "mh",
        "p", "t", "k", "h",
    )
)


# -----------------------------------------------------------------------------
# Tones
# -----------------------------------------------------------------------------

STOP_ENDINGS: Final[frozenset[str]] = frozenset("ptkh")

# Tones of checked (stop-final) syllables
CHECKED_TONES: Final[frozenset[int]] = frozenset((4, 8))

# Tones permissible on open (non-stop) syllables
NON_STOP_TONES: Final[frozenset[int]] = frozenset((1, 2, 3, 5, 6, 7, 9))

# Tone number -> combining mark. Tones 1 and 4 are written without a mark.
TONE_MARKS: Final[dict[int, str]] = {
    1: "",
    2: "\u0301",
    3: "\u0300",
    4: "",
    5: "\u0302",
    6: "\u030c",
    7: "\u0304",
    8: "\u030d",
    9: "\u030b",
}

DEFAULT_TONE: Final[int] = 1


def tone_mark(tone: int | None) -> str:
    """Return the combining mark for `tone` ("" when unset or unknown)."""
    return TONE_MARKS.get(DEFAULT_TONE if tone is None else tone, "")


def tone_from_digit(c: str) -> int:
    return ord(c) - ord("0")


def ends_with_stop(coda: str | None) -> bool:
    """True if the coda cluster ends with one of p/t/k/h."""
    return bool(coda) and coda[-1].lower() in STOP_ENDINGS
