"""Playable groupings of music: all albums of an artist, or one album."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Protocol

from splay.dirs import subdirectories
from splay.player import Player
from splay.sequence import album_order, resume_order, track_order

logger = logging.getLogger(__name__)


class Music(Protocol):
    """Something that can be played or listed from a start pattern."""

    @property
    def path(self) -> Path: ...

    def play(self, player: Player, start: str = "", *, announce: bool = False) -> None: ...

    def list(self, start: str = "") -> None: ...


class Artist:
    """All of the albums by an artist."""

    def __init__(self, path: str | Path, rng: random.Random | None = None) -> None:
        self._path = Path(path)
        self._rng = rng

    def __repr__(self) -> str:
        return f"Artist({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    def play(self, player: Player, start: str = "", *, announce: bool = False) -> None:
        """Play every album in shuffled order, beginning at *start*."""
        albums = album_order(self._path, start, self._rng)
        logger.info("Playing %d albums by %s", len(albums), self._path.name)
        for entry in albums:
            Album(entry.path, show_name=True).play(player, announce=announce)

    def list(self, start: str = "") -> None:
        """Print the album names, beginning at *start*."""
        for entry in resume_order(subdirectories(self._path), start):
            print(entry.name)


class Album:
    """All of the tracks of an album.

    *show_name* prefixes announced track names with the album name, which
    is how tracks are announced while an artist plays through its albums.
    """

    def __init__(self, path: str | Path, show_name: bool = False) -> None:
        self._path = Path(path)
        self._show_name = show_name

    def __repr__(self) -> str:
        return f"Album({str(self._path)!r}, show_name={self._show_name})"

    @property
    def path(self) -> Path:
        return self._path

    @property
    def show_name(self) -> bool:
        return self._show_name

    def play(self, player: Player, start: str = "", *, announce: bool = False) -> None:
        """Play the tracks in order, beginning at *start*."""
        for entry in track_order(self._path, start):
            if announce:
                print(self.announcement(entry.name))
            player.play(entry.path)

    def list(self, start: str = "") -> None:
        """Print the track file names, beginning at *start*."""
        for entry in track_order(self._path, start):
            print(entry.name)

    def announcement(self, track: str) -> str:
        """Return the name printed before *track* is played."""
        name = Path(track).stem
        if self._show_name:
            name = f"{self._path.name}/{name}"
        return name
