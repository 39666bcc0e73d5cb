"""Playback order: shuffling, rotation and resume points.

An artist's albums are shuffled for playback, an album's tracks keep
their natural order.  Either way the sequence is rotated so that it
starts at the entry best matching the *start* pattern; entries before
it move to the end in their original order.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Sequence, TypeVar

from splay.dirs import Entry, subdirectories, track_files
from splay.match import select_index

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResumeNotFoundError(LookupError):
    """Raised when a non-empty start pattern matches no entry."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"Nothing matches start point {pattern!r}")
        self.pattern = pattern


def shuffle(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a uniformly shuffled copy of *items* (Fisher-Yates)."""
    out = list(items)
    n = len(out)
    for i in range(n):
        j = rng.randrange(i, n)
        out[i], out[j] = out[j], out[i]
    return out


def rotate(items: Sequence[T], index: int) -> list[T]:
    """Left-rotate *items* so that ``items[index]`` comes first."""
    return list(items[index:]) + list(items[:index])


def resume_order(entries: Sequence[Entry], start: str) -> list[Entry]:
    """Rotate *entries* to begin at the entry best matching *start*.

    Raises :class:`ResumeNotFoundError` if *start* is non-empty and matches
    nothing, including when *entries* is empty.
    """
    index = select_index((e.name for e in entries), start)
    if index is None:
        if start:
            raise ResumeNotFoundError(start)
        return []
    logger.debug("Resuming at %r (index %d)", entries[index].name, index)
    return rotate(entries, index)


def album_order(
    artist_path: str | Path, start: str = "", rng: random.Random | None = None
) -> list[Entry]:
    """Shuffled albums of an artist, rotated to *start*."""
    if rng is None:
        rng = random.Random()
    albums = shuffle(subdirectories(artist_path), rng)
    return resume_order(albums, start)


def track_order(album_path: str | Path, start: str = "") -> list[Entry]:
    """Tracks of an album in natural order, rotated to *start*."""
    return resume_order(track_files(album_path), start)
