"""Directory listings for the music tree.

Expected directory layout::

    $HOME/
        Music/
            Artist1/
                Album1/
                    Track1.mp3
                    Track2.mp3
                Album2/
                    ...
            Artist2/
                ...

Entries are read fresh on every call and returned sorted by name, so
track-number prefixes produce the expected order.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Finder metadata that shows up in every directory on macOS.
DS_STORE = ".DS_Store"


@dataclass(frozen=True)
class Entry:
    """A direct child of a directory: an artist, an album or a track."""

    name: str
    path: Path
    is_dir: bool


def default_music_root() -> Path:
    """Return ``<home>/Music`` for the current user.

    Raises ``RuntimeError`` if the home directory cannot be resolved.
    """
    return Path.home() / "Music"


def read_dir(path: str | Path) -> list[Entry]:
    """Return all direct children of *path*, sorted by name.

    Raises ``OSError`` if *path* does not exist or cannot be read.
    """
    path = Path(path)
    with os.scandir(path) as it:
        entries = [
            Entry(name=e.name, path=path / e.name, is_dir=e.is_dir())
            for e in it
        ]
    entries.sort(key=lambda e: e.name)
    logger.debug("Read %d entries from %s", len(entries), path)
    return entries


def subdirectories(path: str | Path) -> list[Entry]:
    """Return the directories directly inside *path*."""
    return [e for e in read_dir(path) if e.is_dir]


def track_files(path: str | Path) -> list[Entry]:
    """Return the regular files directly inside *path*, minus ``.DS_Store``."""
    return [
        e
        for e in read_dir(path)
        if not e.is_dir and e.path.is_file() and e.name != DS_STORE
    ]
