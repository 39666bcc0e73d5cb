"""Fuzzy matching of free-text patterns against artist, album and track names.

Patterns are not patterns in the sense of a regular expression.  They are
literal text used to make a best guess: both sides are normalized, the
name must contain the pattern, and the tighter the fit the better::

    >>> match_score("bob dylan", "Bob Dylan & The Band")
    10
    >>> match_score("acdc", "AC/DC")
    0
"""

from __future__ import annotations

from typing import Iterable

# Score returned when the name does not contain the pattern.
NO_MATCH = -1


def normalize(s: str) -> str:
    """Lower-case *s* and keep only letters, digits and whitespace."""
    return "".join(
        ch for ch in s.lower() if ch.isalpha() or ch.isdecimal() or ch.isspace()
    )


def match_score(pattern: str, name: str) -> int:
    """Score how well *name* fits *pattern*.

    Returns :data:`NO_MATCH` when the normalized name does not contain the
    normalized pattern, otherwise the number of extra characters the name
    carries (``0`` for an exact match).
    """
    pattern = normalize(pattern)
    name = normalize(name)
    if pattern not in name:
        return NO_MATCH
    return len(name) - len(pattern)


def select_index(names: Iterable[str], pattern: str) -> int | None:
    """Return the index of the name that best fits *pattern*.

    An empty pattern selects index ``0``.  Ties go to the earliest name.
    Returns ``None`` if no name matches, or if there are no names at all.
    """
    names = list(names)
    if not pattern:
        return 0 if names else None

    best: int | None = None
    best_score = NO_MATCH
    for i, name in enumerate(names):
        score = match_score(pattern, name)
        if score == NO_MATCH:
            continue
        if best is None or score < best_score:
            best = i
            best_score = score
    return best
