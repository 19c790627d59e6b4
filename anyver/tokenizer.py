"""Lexical decomposition of version strings into units.

Scanning rules:

- Only ASCII digits and letters are version characters; everything else
  (punctuation, whitespace, non-ASCII) separates components.
- A component is a maximal run of version characters. Within it we read
  a number, a letter run and a trailing number, in that order; anything
  after that is folded into the same component.
- Letter runs are classified against a small keyword table to tell
  pre-release words ("alpha", "rc", ...) from post-release words
  ("patch", "post", ...). Classified words are split from the preceding
  number so ``1alpha`` reads as ``1`` then ``alpha`` while the unknown
  ``1a`` stays glued.

Each scanner takes a string and a position and returns the new position,
never mutating shared state.
"""

from __future__ import annotations

import enum
import re
from typing import Final, Tuple

from .flags import BOUND_FLAGS, VersionFlag
from .units import (
    ABSENT,
    COMPONENT_MAX,
    PLAIN_FILLER,
    ZERO,
    Component,
    Unit,
    filler_unit,
)

# Explicit ASCII classes: non-ASCII digits and letters are separators
_DIGIT_RUN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_LETTER_RUN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z]+")
_SEPARATOR_RUN: Final[re.Pattern[str]] = re.compile(r"[^0-9A-Za-z]+")
_VERSION_RUN: Final[re.Pattern[str]] = re.compile(r"[0-9A-Za-z]+")

_PRERELEASE_WORDS: Final[frozenset[str]] = frozenset({"alpha", "beta", "rc"})
_POSTRELEASE_WORDS: Final[frozenset[str]] = frozenset({"patch", "pl"})


class KeywordClass(enum.IntEnum):
    NONE = 0
    PRE_RELEASE = 1
    POST_RELEASE = 2


def parse_number(s: str, pos: int) -> Tuple[Component, int]:
    """Read a run of decimal digits starting at ``pos``.

    Returns ``(ABSENT, pos)`` when there is no digit at ``pos``. Values that
    do not fit below :data:`COMPONENT_MAX` saturate to it, so arbitrarily
    long runs are safe and all compare equal.
    """

    m = _DIGIT_RUN.match(s, pos)
    if m is None:
        return ABSENT, pos

    value = 0
    for c in m.group():
        digit = ord(c) - 48
        if value <= (COMPONENT_MAX - digit) // 10:
            value = value * 10 + digit
        else:
            value = COMPONENT_MAX
    return Component.of(value), m.end()


def classify_keyword(word: str, flags: int = 0, *, strict_errata: bool = False) -> KeywordClass:
    """Classify a lower-cased letter run against the keyword table."""

    if word in _PRERELEASE_WORDS or word.startswith("pre"):
        return KeywordClass.PRE_RELEASE
    if word.startswith("post") or word in _POSTRELEASE_WORDS:
        return KeywordClass.POST_RELEASE
    if len(word) == 6:
        # Legacy rule: any six-letter run starting with "er" counts as errata
        if (word == "errata") if strict_errata else word.startswith("er"):
            return KeywordClass.POST_RELEASE
    if flags & VersionFlag.P_IS_PATCH and word == "p":
        return KeywordClass.POST_RELEASE
    return KeywordClass.NONE


def parse_alpha(
    s: str, pos: int, flags: int = 0, *, strict_errata: bool = False
) -> Tuple[Component, KeywordClass, int]:
    """Read a run of ASCII letters starting at ``pos``.

    The run is represented by the code point of its first letter, lower-cased,
    which makes comparisons case-insensitive. Returns
    ``(value, keyword_class, new_pos)``; ``value`` is ``ABSENT`` for an empty run.
    """

    m = _LETTER_RUN.match(s, pos)
    if m is None:
        return ABSENT, KeywordClass.NONE, pos

    word = m.group().lower()
    keyword = classify_keyword(word, flags, strict_errata=strict_errata)
    return Component.of(ord(word[0])), keyword, m.end()


def skip_separators(s: str, pos: int) -> int:
    m = _SEPARATOR_RUN.match(s, pos)
    return pos if m is None else m.end()


def next_component(
    s: str, pos: int, flags: int = 0, *, strict_errata: bool = False
) -> Tuple[Tuple[Unit, ...], int]:
    """Produce the unit(s) for the next component of ``s`` after ``pos``.

    Returns ``(units, new_pos)`` where ``units`` holds one or two units.
    At the end of the string a single filler unit is returned; its value
    depends on the bound flags.
    """

    pos = skip_separators(s, pos)
    end = len(s)
    if pos >= end:
        return (filler_unit(flags),), pos

    number, pos = parse_number(s, pos)
    alpha, keyword, pos = parse_alpha(s, pos, flags, strict_errata=strict_errata)
    extra, pos = parse_number(s, pos)

    # Fold any remaining sub-runs ("1a2b3") into this component
    rest = _VERSION_RUN.match(s, pos)
    if rest is not None:
        pos = rest.end()

    if alpha != ABSENT and flags & VersionFlag.ANY_IS_PATCH:
        keyword = KeywordClass.POST_RELEASE

    post = keyword is KeywordClass.POST_RELEASE
    if number != ABSENT and extra != ABSENT:
        # "1a1" -> [1].[a1], "1patch1" -> [1].[0p1]
        return (Unit(number), Unit(ZERO if post else ABSENT, alpha, extra)), pos
    if number != ABSENT and alpha != ABSENT and keyword:
        # Known keywords are not an addendum to the number: "1alpha" -> [1].[a]
        return (Unit(number), Unit(ZERO if post else ABSENT, alpha)), pos

    if number == ABSENT and post:
        number = ZERO
    return (Unit(number, alpha, extra),), pos


def canonical_units(s: str, flags: int = 0, *, strict_errata: bool = False) -> Tuple[Unit, ...]:
    """Flattened unit stream of ``s`` in a form suitable for hashing.

    Trailing zero units are dropped since they compare equal to the padding
    every exhausted string produces. Bound versions are padded with their
    bound filler instead, so they keep every unit and end with one filler.
    """

    units: list[Unit] = []
    pos = skip_separators(s, 0)
    while pos < len(s):
        produced, pos = next_component(s, pos, flags, strict_errata=strict_errata)
        units.extend(produced)
        pos = skip_separators(s, pos)

    if flags & BOUND_FLAGS:
        units.append(filler_unit(flags))
    else:
        while units and units[-1] == PLAIN_FILLER:
            units.pop()
    return tuple(units)


__all__ = [
    "KeywordClass",
    "canonical_units",
    "classify_keyword",
    "next_component",
    "parse_alpha",
    "parse_number",
    "skip_separators",
]
